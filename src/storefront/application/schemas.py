"""Input schemas — the validated shape of every command entering the system.

These are external contracts shared by the HTTP API and the CLI. Parsing
failures are reported with one entry per offending field.
"""

from __future__ import annotations

from typing import Any, TypeVar

import pydantic
from pydantic import BaseModel, ConfigDict, Field

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.order import OrderStatus, PaymentStatus

EMAIL_PATTERN = r"^[^@\s]+@[^@\s]+\.[^@\s]+$"

M = TypeVar("M", bound=BaseModel)


class _Schema(BaseModel):
    model_config = ConfigDict(extra="ignore", str_strip_whitespace=True)


# ---------------------------------------------------------------------------
# Orders
# ---------------------------------------------------------------------------
class OrderItemInput(_Schema):
    product_id: str = Field(min_length=1)
    variant_id: str | None = None
    quantity: int = Field(gt=0, strict=True)


class OrderCreateRequest(_Schema):
    items: list[OrderItemInput] = Field(min_length=1)
    shipping_address_id: str = Field(min_length=1)
    billing_address_id: str | None = None
    payment_method: str = Field(min_length=1)
    shipping_method: str = Field(min_length=1)
    notes: str | None = None

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "items": [{"product_id": "prod-001", "quantity": 2}],
                    "shipping_address_id": "addr-001",
                    "payment_method": "card",
                    "shipping_method": "standard",
                }
            ]
        }
    }


class OrderUpdateRequest(_Schema):
    status: OrderStatus | None = None
    payment_status: PaymentStatus | None = None
    notes: str | None = None


# ---------------------------------------------------------------------------
# Accounts
# ---------------------------------------------------------------------------
class RegisterRequest(_Schema):
    name: str = Field(min_length=2)
    email: str = Field(pattern=EMAIL_PATTERN)
    password: str = Field(min_length=8)


class LoginRequest(_Schema):
    email: str = Field(min_length=1)
    password: str = Field(min_length=1)


class AddressCreateRequest(_Schema):
    full_name: str = Field(min_length=1)
    street: str = Field(min_length=1)
    city: str = Field(min_length=1)
    state: str | None = None
    postal_code: str = Field(min_length=1)
    country: str = Field(min_length=2)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------
def error_details(exc: pydantic.ValidationError) -> list[dict]:
    """Flatten pydantic errors to ``[{"field": "items.0.quantity", "message": ...}]``."""
    return [
        {
            "field": ".".join(str(part) for part in error["loc"]) or "body",
            "message": error["msg"],
        }
        for error in exc.errors()
    ]


def parse(model: type[M], data: Any) -> M:
    """Validate ``data`` against ``model``, raising the domain ValidationError."""
    try:
        return model.model_validate(data)
    except pydantic.ValidationError as exc:
        raise ValidationError("Invalid data", errors=error_details(exc)) from exc
