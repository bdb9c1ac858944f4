"""Abstract persistence for the cart store."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from storefront.domain.model.cart import CartItem


class CartStorage(ABC):

    @abstractmethod
    def load(self) -> list[CartItem]:
        """Return the persisted cart lines (empty list if none)."""

    @abstractmethod
    def save(self, items: list[CartItem]) -> None:
        """Replace the persisted cart lines."""
