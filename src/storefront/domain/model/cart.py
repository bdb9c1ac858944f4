"""Cart store — the shopper's pending selection and its derived totals.

The store is an explicit state container: it is constructed with a
``CartStorage`` and writes every mutation through to it, so the cart
survives restarts without any module-level state.
"""

from __future__ import annotations

from dataclasses import dataclass, replace

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.value_objects import Money
from storefront.domain.repository.cart_storage import CartStorage


@dataclass(frozen=True)
class CartItem:
    """One cart line. ``id`` is the product identity."""

    id: str
    name: str
    price: Money  # snapshot at add-time
    quantity: int = 1
    image: str = ""
    slug: str = ""

    def __post_init__(self) -> None:
        if self.quantity < 1:
            raise ValidationError("Cart item quantity must be at least 1")

    @property
    def line_total(self) -> Money:
        return self.price * self.quantity


class CartStore:

    def __init__(self, storage: CartStorage) -> None:
        self._storage = storage
        self._items: list[CartItem] = storage.load()
        self.total_items = 0
        self.total_price = Money.zero()
        self._recompute()

    @property
    def items(self) -> list[CartItem]:
        return list(self._items)

    @property
    def is_empty(self) -> bool:
        return not self._items

    # --- Mutations ------------------------------------------------------------

    def add_item(self, item: CartItem) -> None:
        """Add one unit of ``item``.

        An existing line with the same id is incremented by one; otherwise
        the item is inserted with quantity 1 (its own quantity is ignored).
        """
        for i, existing in enumerate(self._items):
            if existing.id == item.id:
                self._items[i] = replace(existing, quantity=existing.quantity + 1)
                break
        else:
            self._items.append(replace(item, quantity=1))
        self._commit()

    def remove_item(self, item_id: str) -> None:
        self._items = [item for item in self._items if item.id != item_id]
        self._commit()

    def update_quantity(self, item_id: str, quantity: int) -> None:
        """Set a line's quantity; zero or less removes the line."""
        if quantity <= 0:
            self.remove_item(item_id)
            return
        self._items = [
            replace(item, quantity=quantity) if item.id == item_id else item
            for item in self._items
        ]
        self._commit()

    def clear_cart(self) -> None:
        self._items = []
        self._commit()

    # --- Internal helpers -----------------------------------------------------

    def _recompute(self) -> None:
        self.total_items = sum(item.quantity for item in self._items)
        total = Money.zero()
        for item in self._items:
            total = total + item.line_total
        self.total_price = total

    def _commit(self) -> None:
        self._recompute()
        self._storage.save(self._items)
