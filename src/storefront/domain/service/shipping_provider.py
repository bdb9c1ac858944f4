"""Shipping provider port — abstract interface for shipment tracking.

Order handlers program against this port; adapters are selected by the
composition root. The only adapter today is a mock that synthesizes a
plausible event feed, so nothing returned here is authoritative.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from datetime import datetime

from storefront.domain.model.order import Order


@dataclass(frozen=True)
class TrackingEvent:
    date: datetime
    location: str
    description: str


@dataclass(frozen=True)
class TrackingInfo:
    tracking_number: str | None
    carrier: str | None
    status: str
    estimated_delivery: datetime | None
    events: list[TrackingEvent] = field(default_factory=list)

    @staticmethod
    def not_shipped() -> TrackingInfo:
        return TrackingInfo(
            tracking_number=None,
            carrier=None,
            status="Not yet shipped",
            estimated_delivery=None,
            events=[],
        )


class ShippingProvider(ABC):

    @abstractmethod
    def get_tracking(self, order: Order, now: datetime | None = None) -> TrackingInfo:
        """Return the tracking feed for ``order`` as of ``now``."""
