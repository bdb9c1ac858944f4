"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry data between the application layer and the CLI / HTTP adapters
without exposing domain internals. Money is rendered as a plain decimal
string (``"125.00"``) and datetimes as ISO-8601 strings so every DTO is
directly JSON-serializable with ``dataclasses.asdict``.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class AddressDTO:
    id: str
    full_name: str
    street: str
    city: str
    state: str | None
    postal_code: str
    country: str


@dataclass(frozen=True)
class OrderItemDTO:
    product_id: str
    product_name: str
    variant_id: str | None
    variant_name: str | None
    quantity: int
    price: str
    total: str


@dataclass(frozen=True)
class OrderDTO:
    id: str
    order_number: str
    user_id: str
    status: str
    payment_status: str
    payment_method: str
    shipping_method: str
    notes: str | None
    items: list[OrderItemDTO]
    subtotal: str
    shipping: str
    tax: str
    total: str
    shipping_address_id: str
    billing_address_id: str
    shipping_address: AddressDTO | None
    billing_address: AddressDTO | None
    created_at: str
    updated_at: str


@dataclass(frozen=True)
class TimelineEntryDTO:
    status: str
    label: str
    date: str
    completed: bool
    current: bool
    description: str


@dataclass(frozen=True)
class OrderDetailDTO:
    order: OrderDTO
    timeline: list[TimelineEntryDTO]


@dataclass(frozen=True)
class PageMeta:
    current_page: int
    total_pages: int
    total_items: int
    page_size: int
    has_more: bool


@dataclass(frozen=True)
class OrderPageDTO:
    orders: list[OrderDTO]
    meta: PageMeta


@dataclass(frozen=True)
class TrackingEventDTO:
    date: str
    location: str
    description: str


@dataclass(frozen=True)
class TrackingDTO:
    tracking_number: str | None
    carrier: str | None
    status: str
    estimated_delivery: str | None
    events: list[TrackingEventDTO]


@dataclass(frozen=True)
class UserDTO:
    """A user as shown to the outside world. Never carries the hash."""

    id: str
    name: str
    email: str
    role: str
    created_at: str


@dataclass(frozen=True)
class VariantDTO:
    id: str
    name: str
    price: str | None


@dataclass(frozen=True)
class ProductDTO:
    id: str
    name: str
    slug: str
    price: str
    image: str
    description: str
    categories: list[str]
    variants: list[VariantDTO]
