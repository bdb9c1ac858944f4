"""Application services: catalogue administration and browsing."""

from __future__ import annotations

import re
from uuid import uuid4

from storefront.application.dto import ProductDTO
from storefront.application.mapping import product_to_dto
from storefront.domain.exceptions import (
    ConflictError,
    EntityNotFoundError,
    ValidationError,
)
from storefront.domain.model.product import ALL_CATEGORIES, Product, ProductVariant
from storefront.domain.model.value_objects import Money
from storefront.domain.repository.product_repository import ProductRepository


def slugify(name: str) -> str:
    return re.sub(r"[^a-z0-9]+", "-", name.lower()).strip("-")


class AddProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(
        self,
        name: str,
        price: str,
        slug: str | None = None,
        image: str = "",
        product_id: str | None = None,
        description: str = "",
        categories: list[str] | None = None,
    ) -> ProductDTO:
        """Add a new product to the catalogue."""
        if not name or not name.strip():
            raise ValidationError("Product name is required")

        slug = slug or slugify(name)
        if not slug:
            raise ValidationError("Product slug is required")
        if self._product_repo.get_by_slug(slug) is not None:
            raise ConflictError(f"Product '{slug}' already exists")

        product = Product(
            id=product_id or uuid4().hex,
            name=name.strip(),
            slug=slug,
            price=Money.of(price),
            image=image,
            description=description,
            categories=[c.strip() for c in categories or [] if c.strip()],
        )
        self._product_repo.save(product)
        return product_to_dto(product)


class AddVariantHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(
        self,
        product_id: str,
        name: str,
        price: str | None = None,
        variant_id: str | None = None,
    ) -> ProductDTO:
        """Attach a variant; without a price it sells at the product price."""
        product = self._product_repo.get_by_id(product_id)
        if product is None:
            raise EntityNotFoundError(f"Product not found: {product_id}")
        if not name or not name.strip():
            raise ValidationError("Variant name is required")

        product.add_variant(
            ProductVariant(
                id=variant_id or uuid4().hex,
                name=name.strip(),
                price=Money.of(price) if price is not None else None,
            )
        )
        self._product_repo.save(product)
        return product_to_dto(product)


class ListProductsHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(
        self, category: str | None = None, search: str | None = None
    ) -> list[ProductDTO]:
        """List the catalogue, optionally narrowed by category and search text.

        Both filters are case-insensitive. A category of ``all`` is the same
        as no category.
        """
        products = self._product_repo.list_all()
        if category and category.lower() != ALL_CATEGORIES:
            products = [p for p in products if p.in_category(category)]
        if search:
            products = [p for p in products if p.matches(search)]
        return [product_to_dto(p) for p in products]


class ShowProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, slug: str) -> ProductDTO:
        product = self._product_repo.get_by_slug(slug)
        if product is None:
            raise EntityNotFoundError("Product not found")
        return product_to_dto(product)
