"""Domain service: delivery timeline synthesis.

The timeline is a projection, not history: each forward stage gets a
projected date offset from the order's creation, and its completed/current
flags are derived from where the current status sits in the fixed
pending -> processing -> shipped -> delivered ordering.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta

from storefront.domain.model.order import Order, OrderStatus


@dataclass(frozen=True)
class TimelineEntry:
    status: str
    label: str
    date: datetime
    completed: bool
    current: bool
    description: str


@dataclass(frozen=True)
class _Stage:
    status: OrderStatus
    label: str
    day_offset: int
    description: str


FORWARD_STAGES = (
    _Stage(
        OrderStatus.PENDING,
        "Order Placed",
        0,
        "Your order has been received and is being processed",
    ),
    _Stage(
        OrderStatus.PROCESSING,
        "Processing",
        1,
        "Your order is being prepared for shipping",
    ),
    _Stage(
        OrderStatus.SHIPPED,
        "Shipped",
        2,
        "Your order has been shipped and is on its way",
    ),
    _Stage(
        OrderStatus.DELIVERED,
        "Delivered",
        5,
        "Your order has been delivered",
    ),
)

# Position of each status in the forward ordering. A cancelled order has not
# progressed past the placed stage.
_PROGRESS = {
    OrderStatus.PENDING: 0,
    OrderStatus.PROCESSING: 1,
    OrderStatus.SHIPPED: 2,
    OrderStatus.DELIVERED: 3,
    OrderStatus.CANCELLED: 0,
}


def build_timeline(order: Order) -> list[TimelineEntry]:
    """Synthesize the display timeline for ``order``."""
    reached = _PROGRESS[order.status]
    timeline = [
        TimelineEntry(
            status=stage.status.value,
            label=stage.label,
            date=order.created_at + timedelta(days=stage.day_offset),
            completed=position <= reached,
            current=order.status is stage.status,
            description=stage.description,
        )
        for position, stage in enumerate(FORWARD_STAGES)
    ]

    if order.status is OrderStatus.CANCELLED:
        timeline.append(
            TimelineEntry(
                status=OrderStatus.CANCELLED.value,
                label="Cancelled",
                date=order.updated_at,
                completed=True,
                current=True,
                description="Your order has been cancelled",
            )
        )
    return timeline


def projected_date(created_at: datetime, status: OrderStatus) -> datetime | None:
    """Projected date of a forward stage, or None for ``cancelled``."""
    for stage in FORWARD_STAGES:
        if stage.status is status:
            return created_at + timedelta(days=stage.day_offset)
    return None
