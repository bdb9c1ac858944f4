"""Order aggregate — the core of the domain.

The Order is an aggregate root that owns its line items. Totals are
computed once, at creation, and stored alongside the order so later price
changes never affect a placed order.
"""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from datetime import datetime, timezone
from decimal import Decimal
from enum import Enum

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.value_objects import Money, Quantity


class OrderStatus(Enum):
    PENDING = "pending"
    PROCESSING = "processing"
    SHIPPED = "shipped"
    DELIVERED = "delivered"
    CANCELLED = "cancelled"


class PaymentStatus(Enum):
    PENDING = "pending"
    PAID = "paid"
    FAILED = "failed"
    REFUNDED = "refunded"


# ---------------------------------------------------------------------------
# Constants for business rules
# ---------------------------------------------------------------------------
SHIPPING_COST = Money(Decimal("10.00"))
TAX_RATE = Decimal("0.15")
CANCELLABLE_STATUSES = frozenset({OrderStatus.PENDING, OrderStatus.PROCESSING})


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def generate_order_number(now: datetime, rng: random.Random | None = None) -> str:
    """Build ``ORD-<epoch millis>-<3 digit random>``.

    Uniqueness is probabilistic only; collisions are neither detected nor
    retried. Lookups always go through the order ``id``.
    """
    millis = int(now.timestamp() * 1000)
    suffix = (rng or random).randrange(1000)
    return f"ORD-{millis}-{suffix:03d}"


@dataclass(frozen=True)
class OrderItem:
    """Captures the unit price of a product (or variant) at order time."""

    product_id: str
    product_name: str
    quantity: Quantity
    price: Money  # locked at order-creation time
    variant_id: str | None = None
    variant_name: str | None = None

    @property
    def total(self) -> Money:
        return self.price * self.quantity.value


@dataclass
class Order:
    """Aggregate root for purchase orders.

    Use the ``Order.create()`` factory for new orders; it computes the
    totals.  The ``__init__`` is intentionally simple so the repository can
    reconstitute persisted orders without recomputing anything.
    """

    id: str | None
    order_number: str
    user_id: str
    items: list[OrderItem]
    subtotal: Money
    shipping: Money
    tax: Money
    total: Money
    payment_method: str
    shipping_address_id: str
    billing_address_id: str
    shipping_method: str = ""
    notes: str | None = None
    status: OrderStatus = OrderStatus.PENDING
    payment_status: PaymentStatus = PaymentStatus.PENDING
    created_at: datetime = field(default_factory=_utcnow)
    updated_at: datetime = field(default_factory=_utcnow)

    # --- Factory (used for NEW orders only) -----------------------------------

    @staticmethod
    def create(
        user_id: str,
        items: list[OrderItem],
        payment_method: str,
        shipping_address_id: str,
        billing_address_id: str | None = None,
        shipping_method: str = "",
        notes: str | None = None,
        now: datetime | None = None,
        rng: random.Random | None = None,
    ) -> Order:
        """Create a new pending order and compute its totals.

        Shipping is a flat fee and tax a flat rate of the subtotal; the
        shipping method is recorded but does not influence the price.
        """
        if not user_id:
            raise ValidationError("Order owner is required")
        if not items:
            raise ValidationError("Order must contain at least one item")

        subtotal = Money.zero()
        for item in items:
            subtotal = subtotal + item.total
        shipping = SHIPPING_COST
        tax = subtotal.percentage(TAX_RATE)

        created = now or _utcnow()
        return Order(
            id=None,
            order_number=generate_order_number(created, rng),
            user_id=user_id,
            items=list(items),
            subtotal=subtotal,
            shipping=shipping,
            tax=tax,
            total=subtotal + shipping + tax,
            payment_method=payment_method,
            shipping_address_id=shipping_address_id,
            billing_address_id=billing_address_id or shipping_address_id,
            shipping_method=shipping_method,
            notes=notes,
            created_at=created,
            updated_at=created,
        )

    # --- State transitions ----------------------------------------------------

    @property
    def is_cancellable(self) -> bool:
        return self.status in CANCELLABLE_STATUSES

    def cancel(self, now: datetime | None = None) -> None:
        """Transition PENDING|PROCESSING -> CANCELLED.

        No refund or inventory release happens here.
        """
        if not self.is_cancellable:
            raise ValidationError("This order cannot be cancelled")
        self.status = OrderStatus.CANCELLED
        self.updated_at = now or _utcnow()

    def apply_update(
        self,
        status: OrderStatus | None = None,
        payment_status: PaymentStatus | None = None,
        notes: str | None = None,
        now: datetime | None = None,
    ) -> None:
        """Overwrite any of the administrable fields.

        No transition graph is enforced: any status may be set from any
        status.
        """
        if status is not None:
            self.status = status
        if payment_status is not None:
            self.payment_status = payment_status
        if notes is not None:
            self.notes = notes
        self.updated_at = now or _utcnow()
