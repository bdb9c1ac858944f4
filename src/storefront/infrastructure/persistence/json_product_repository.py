"""JSON-file-backed implementation of ProductRepository."""

from __future__ import annotations

from decimal import Decimal
from pathlib import Path

from storefront.domain.model.product import Product, ProductVariant
from storefront.domain.model.value_objects import Money
from storefront.domain.repository.product_repository import ProductRepository
from storefront.infrastructure.persistence.json_file import JsonFile


class JsonProductRepository(ProductRepository):

    def __init__(self, file_path: Path) -> None:
        self._file = JsonFile(file_path, default=[])

    # --- ProductRepository interface ------------------------------------------

    def get_by_id(self, product_id: str) -> Product | None:
        return self._load().get(product_id)

    def get_by_slug(self, slug: str) -> Product | None:
        for product in self._load().values():
            if product.slug == slug:
                return product
        return None

    def get_many(self, product_ids: list[str]) -> dict[str, Product]:
        wanted = set(product_ids)
        return {pid: p for pid, p in self._load().items() if pid in wanted}

    def list_all(self) -> list[Product]:
        return list(self._load().values())

    def save(self, product: Product) -> None:
        with self._file.locked():
            products = self._load()
            products[product.id] = product
            self._persist(products)

    # --- Serialization helpers ------------------------------------------------

    def _load(self) -> dict[str, Product]:
        products: dict[str, Product] = {}
        for item in self._file.read():
            currency = item.get("currency", "USD")
            products[item["id"]] = Product(
                id=item["id"],
                name=item["name"],
                slug=item["slug"],
                price=Money(Decimal(item["price"]), currency),
                image=item.get("image", ""),
                description=item.get("description", ""),
                categories=item.get("categories", []),
                variants=[
                    ProductVariant(
                        id=v["id"],
                        name=v["name"],
                        price=(
                            Money(Decimal(v["price"]), currency)
                            if v.get("price") is not None
                            else None
                        ),
                    )
                    for v in item.get("variants", [])
                ],
            )
        return products

    def _persist(self, products: dict[str, Product]) -> None:
        self._file.write(
            [
                {
                    "id": p.id,
                    "name": p.name,
                    "slug": p.slug,
                    "price": str(p.price.amount),
                    "currency": p.price.currency,
                    "image": p.image,
                    "description": p.description,
                    "categories": p.categories,
                    "variants": [
                        {
                            "id": v.id,
                            "name": v.name,
                            "price": str(v.price.amount) if v.price is not None else None,
                        }
                        for v in p.variants
                    ],
                }
                for p in products.values()
            ]
        )
