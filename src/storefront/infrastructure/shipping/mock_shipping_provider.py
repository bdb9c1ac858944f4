"""Mock shipping provider — synthesizes tracking data for development.

Only shipped and delivered orders get a feed. Milestones are offset from
the order's creation date and only appear once the wall clock has passed
them. The tracking number is drawn fresh on every call, so two reads of
the same order disagree; it is not persisted anywhere.
"""

from __future__ import annotations

import random
from datetime import datetime, timedelta, timezone

from storefront.domain.model.order import Order, OrderStatus
from storefront.domain.service.order_timeline import projected_date
from storefront.domain.service.shipping_provider import (
    ShippingProvider,
    TrackingEvent,
    TrackingInfo,
)

CARRIER = "Express Delivery"

_TRACKED_STATUSES = frozenset({OrderStatus.SHIPPED, OrderStatus.DELIVERED})


class MockShippingProvider(ShippingProvider):

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng or random.Random()

    def get_tracking(self, order: Order, now: datetime | None = None) -> TrackingInfo:
        if order.status not in _TRACKED_STATUSES:
            return TrackingInfo.not_shipped()

        now = now or datetime.now(timezone.utc)
        delivered = order.status is OrderStatus.DELIVERED
        placed = order.created_at

        def on_day(days: int) -> datetime:
            return placed + timedelta(days=days)

        events = [
            TrackingEvent(on_day(0), "Order Processing Center", "Order received"),
            TrackingEvent(
                on_day(1),
                "Distribution Center",
                "Order processed and ready for shipping",
            ),
        ]
        if now >= on_day(2):
            events.append(
                TrackingEvent(on_day(2), "Regional Hub", "Package has shipped")
            )
        if now >= on_day(3):
            events.append(
                TrackingEvent(
                    on_day(3), "Local Facility", "Package in transit to destination"
                )
            )
        if now >= on_day(4) and delivered:
            events.append(
                TrackingEvent(
                    on_day(4), "Local Delivery Facility", "Package out for delivery"
                )
            )
        if delivered:
            events.append(TrackingEvent(on_day(5), "Destination", "Package delivered"))

        events.sort(key=lambda event: event.date, reverse=True)

        return TrackingInfo(
            tracking_number=f"TRK{self._rng.randrange(1_000_000):06d}",
            carrier=CARRIER,
            status="Delivered" if delivered else "In Transit",
            estimated_delivery=projected_date(placed, OrderStatus.DELIVERED),
            events=events,
        )
