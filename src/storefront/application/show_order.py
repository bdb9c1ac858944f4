"""Application service: Show Order use case (query)."""

from __future__ import annotations

from storefront.application.dto import OrderDetailDTO
from storefront.application.mapping import order_to_dto, timeline_to_dto
from storefront.domain.exceptions import EntityNotFoundError
from storefront.domain.repository.order_repository import OrderRepository
from storefront.domain.repository.user_repository import AddressRepository
from storefront.domain.service.order_timeline import build_timeline


class ShowOrderHandler:

    def __init__(
        self,
        order_repo: OrderRepository,
        address_repo: AddressRepository,
    ) -> None:
        self._order_repo = order_repo
        self._address_repo = address_repo

    def handle(self, order_id: str, user_id: str) -> OrderDetailDTO:
        """Return the caller's order with its synthesized timeline.

        An order owned by someone else is reported exactly like a missing
        one.
        """
        order = self._order_repo.get_for_user(order_id, user_id)
        if order is None:
            raise EntityNotFoundError("Order not found")

        return OrderDetailDTO(
            order=order_to_dto(order, self._address_repo),
            timeline=timeline_to_dto(build_timeline(order)),
        )
