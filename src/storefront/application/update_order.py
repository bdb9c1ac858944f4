"""Application service: Update Order use case (admin only).

Admins may overwrite status, payment status and notes. No transition
graph is enforced here; cancellation rules apply only to the customer
facing cancel use case.
"""

from __future__ import annotations

import structlog

from storefront.application.dto import OrderDTO
from storefront.application.mapping import order_to_dto
from storefront.application.schemas import OrderUpdateRequest
from storefront.domain.exceptions import EntityNotFoundError, PermissionDeniedError
from storefront.domain.model.user import User
from storefront.domain.repository.order_repository import OrderRepository
from storefront.domain.repository.user_repository import AddressRepository

logger = structlog.get_logger(__name__)


class UpdateOrderHandler:

    def __init__(
        self,
        order_repo: OrderRepository,
        address_repo: AddressRepository,
    ) -> None:
        self._order_repo = order_repo
        self._address_repo = address_repo

    def handle(self, actor: User, order_id: str, request: OrderUpdateRequest) -> OrderDTO:
        if not actor.is_admin:
            raise PermissionDeniedError("Forbidden")

        order = self._order_repo.get_by_id(order_id)
        if order is None:
            raise EntityNotFoundError("Order not found")

        previous = order.status
        order.apply_update(
            status=request.status,
            payment_status=request.payment_status,
            notes=request.notes,
        )
        self._order_repo.save(order)

        logger.info(
            "order_updated",
            order_id=order.id,
            admin_id=actor.id,
            previous_status=previous.value,
            status=order.status.value,
            payment_status=order.payment_status.value,
        )
        return order_to_dto(order, self._address_repo)
