"""Abstract repository for Order aggregate."""

from __future__ import annotations

from abc import ABC, abstractmethod

from storefront.domain.model.order import Order, OrderStatus


class OrderRepository(ABC):

    @abstractmethod
    def next_id(self) -> str:
        """Generate a new unique order ID."""

    @abstractmethod
    def get_by_id(self, order_id: str) -> Order | None:
        """Return an order by its ID, or None if not found."""

    @abstractmethod
    def get_for_user(self, order_id: str, user_id: str) -> Order | None:
        """Return the order only if ``user_id`` owns it, else None."""

    @abstractmethod
    def list_for_user(
        self,
        user_id: str,
        status: OrderStatus | None = None,
        offset: int = 0,
        limit: int | None = None,
    ) -> list[Order]:
        """Return a user's orders, newest first, optionally filtered."""

    @abstractmethod
    def count_for_user(self, user_id: str, status: OrderStatus | None = None) -> int:
        """Count a user's orders, optionally filtered by status."""

    @abstractmethod
    def save(self, order: Order) -> None:
        """Persist a new or updated order together with all of its items."""
