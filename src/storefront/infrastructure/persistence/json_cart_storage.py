"""JSON-file-backed cart storage.

The cart lives under the ``shopping-cart`` key of a small local state
file, next to whatever else a client keeps there.
"""

from __future__ import annotations

from decimal import Decimal
from pathlib import Path

from storefront.domain.model.cart import CartItem
from storefront.domain.model.value_objects import Money
from storefront.domain.repository.cart_storage import CartStorage
from storefront.infrastructure.persistence.json_file import JsonFile

STORAGE_KEY = "shopping-cart"


class JsonCartStorage(CartStorage):

    def __init__(self, file_path: Path) -> None:
        self._file = JsonFile(file_path, default={})

    def load(self) -> list[CartItem]:
        state = self._file.read().get(STORAGE_KEY, {})
        return [
            CartItem(
                id=raw["id"],
                name=raw["name"],
                price=Money(Decimal(raw["price"]), raw.get("currency", "USD")),
                quantity=raw["quantity"],
                image=raw.get("image", ""),
                slug=raw.get("slug", ""),
            )
            for raw in state.get("items", [])
        ]

    def save(self, items: list[CartItem]) -> None:
        with self._file.locked():
            document = self._file.read()
            document[STORAGE_KEY] = {
                "items": [
                    {
                        "id": item.id,
                        "name": item.name,
                        "price": str(item.price.amount),
                        "currency": item.price.currency,
                        "quantity": item.quantity,
                        "image": item.image,
                        "slug": item.slug,
                    }
                    for item in items
                ],
            }
            self._file.write(document)
