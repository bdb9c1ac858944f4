"""Application service: Cancel Order use case.

Owner-initiated. Only PENDING and PROCESSING orders can be cancelled;
the Order aggregate enforces that rule. Nothing is refunded or released.
"""

from __future__ import annotations

import structlog

from storefront.application.dto import OrderDTO
from storefront.application.mapping import order_to_dto
from storefront.domain.exceptions import EntityNotFoundError
from storefront.domain.repository.order_repository import OrderRepository
from storefront.domain.repository.user_repository import AddressRepository

logger = structlog.get_logger(__name__)


class CancelOrderHandler:

    def __init__(
        self,
        order_repo: OrderRepository,
        address_repo: AddressRepository,
    ) -> None:
        self._order_repo = order_repo
        self._address_repo = address_repo

    def handle(self, order_id: str, user_id: str) -> OrderDTO:
        order = self._order_repo.get_for_user(order_id, user_id)
        if order is None:
            raise EntityNotFoundError("Order not found")

        previous = order.status
        order.cancel()
        self._order_repo.save(order)

        logger.info(
            "order_cancelled",
            order_id=order.id,
            user_id=user_id,
            previous_status=previous.value,
        )
        return order_to_dto(order, self._address_repo)
