"""Application service: Track Order use case (query)."""

from __future__ import annotations

from datetime import datetime

from storefront.application.dto import TrackingDTO
from storefront.application.mapping import tracking_to_dto
from storefront.domain.exceptions import EntityNotFoundError
from storefront.domain.repository.order_repository import OrderRepository
from storefront.domain.service.shipping_provider import ShippingProvider


class TrackOrderHandler:

    def __init__(
        self,
        order_repo: OrderRepository,
        shipping_provider: ShippingProvider,
    ) -> None:
        self._order_repo = order_repo
        self._shipping_provider = shipping_provider

    def handle(
        self, order_id: str, user_id: str, now: datetime | None = None
    ) -> TrackingDTO:
        order = self._order_repo.get_for_user(order_id, user_id)
        if order is None:
            raise EntityNotFoundError("Order not found")
        return tracking_to_dto(self._shipping_provider.get_tracking(order, now))
