"""Demo data: an admin, a customer with an address, and a small catalogue.

Seeding is idempotent: accounts and products that already exist are left
untouched.
"""

from __future__ import annotations

import structlog

from storefront.application.add_product import AddProductHandler, AddVariantHandler
from storefront.application.manage_addresses import AddAddressHandler
from storefront.application.register_user import RegisterUserHandler
from storefront.application.schemas import AddressCreateRequest, RegisterRequest
from storefront.domain.model.user import UserRole
from storefront.infrastructure.bootstrap import Container

logger = structlog.get_logger(__name__)

ADMIN = {"name": "Admin User", "email": "admin@example.com", "password": "admin12345"}
CUSTOMER = {"name": "John Doe", "email": "user@example.com", "password": "user12345"}

CATALOGUE = [
    {
        "id": "prod-phone",
        "name": "Pixel Phone",
        "slug": "pixel-phone",
        "price": "699.00",
        "description": "A flagship smartphone with an all-day battery.",
        "categories": ["Electronics", "Smartphones"],
        "variants": [
            {"id": "var-phone-128", "name": "Black / 128GB", "price": None},
            {"id": "var-phone-256", "name": "Black / 256GB", "price": "799.00"},
        ],
    },
    {
        "id": "prod-laptop",
        "name": "Ultrabook 14",
        "slug": "ultrabook-14",
        "price": "1299.00",
        "description": "A light 14-inch laptop for work and play.",
        "categories": ["Electronics", "Laptops"],
        "variants": [
            {"id": "var-laptop-16", "name": "16GB RAM", "price": None},
            {"id": "var-laptop-32", "name": "32GB RAM", "price": "1499.00"},
        ],
    },
    {
        "id": "prod-tee",
        "name": "Cotton T-Shirt",
        "slug": "cotton-t-shirt",
        "price": "19.99",
        "description": "A soft everyday tee in organic cotton.",
        "categories": ["Clothing"],
        "variants": [],
    },
]


def seed_demo_data(container: Container) -> None:
    users = RegisterUserHandler(container.users)
    if container.users.get_by_email(ADMIN["email"]) is None:
        users.handle(RegisterRequest(**ADMIN), role=UserRole.ADMIN)
    if container.users.get_by_email(CUSTOMER["email"]) is None:
        customer = users.handle(RegisterRequest(**CUSTOMER))
        AddAddressHandler(container.addresses).handle(
            customer.id,
            AddressCreateRequest(
                full_name=CUSTOMER["name"],
                street="1 Main Street",
                city="Springfield",
                state="IL",
                postal_code="62701",
                country="US",
            ),
        )

    products = AddProductHandler(container.products)
    variants = AddVariantHandler(container.products)
    for entry in CATALOGUE:
        if container.products.get_by_id(entry["id"]) is not None:
            continue
        products.handle(
            name=entry["name"],
            price=entry["price"],
            slug=entry["slug"],
            product_id=entry["id"],
            description=entry["description"],
            categories=entry["categories"],
        )
        for variant in entry["variants"]:
            variants.handle(
                product_id=entry["id"],
                name=variant["name"],
                price=variant["price"],
                variant_id=variant["id"],
            )

    logger.info("demo_data_seeded", products=len(container.products.list_all()))
