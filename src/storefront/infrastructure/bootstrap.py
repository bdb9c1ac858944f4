"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from dataclasses import dataclass

from storefront.domain.model.cart import CartStore
from storefront.domain.repository.cart_storage import CartStorage
from storefront.domain.repository.order_repository import OrderRepository
from storefront.domain.repository.product_repository import ProductRepository
from storefront.domain.repository.user_repository import (
    AddressRepository,
    UserRepository,
)
from storefront.domain.service.shipping_provider import ShippingProvider
from storefront.infrastructure.config import Settings
from storefront.infrastructure.persistence.json_cart_storage import JsonCartStorage
from storefront.infrastructure.persistence.json_order_repository import (
    JsonOrderRepository,
)
from storefront.infrastructure.persistence.json_product_repository import (
    JsonProductRepository,
)
from storefront.infrastructure.persistence.json_user_repository import (
    JsonAddressRepository,
    JsonUserRepository,
)
from storefront.infrastructure.shipping.mock_shipping_provider import (
    MockShippingProvider,
)


@dataclass
class Container:
    orders: OrderRepository
    products: ProductRepository
    users: UserRepository
    addresses: AddressRepository
    shipping_provider: ShippingProvider
    cart_storage: CartStorage

    def cart_store(self) -> CartStore:
        return CartStore(self.cart_storage)


def shipping_provider(name: str) -> ShippingProvider:
    if name == "mock":
        return MockShippingProvider()
    raise ValueError(f"Unknown shipping provider: {name}")


def build_container(settings: Settings | None = None) -> Container:
    settings = settings or Settings.from_env()
    data_dir = settings.data_dir
    return Container(
        orders=JsonOrderRepository(data_dir / "orders.json"),
        products=JsonProductRepository(data_dir / "products.json"),
        users=JsonUserRepository(data_dir / "users.json"),
        addresses=JsonAddressRepository(data_dir / "addresses.json"),
        shipping_provider=shipping_provider(settings.shipping_provider),
        cart_storage=JsonCartStorage(settings.cart_file),
    )
