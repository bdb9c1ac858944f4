"""Application service: Checkout use case.

Turns the cart store's lines into an order request and hands it to the
Create Order use case. The cart is cleared only once the order exists, so
a failed checkout leaves the shopper's selection intact.
"""

from __future__ import annotations

import structlog

from storefront.application.create_order import CreateOrderHandler
from storefront.application.dto import OrderDTO
from storefront.application.schemas import OrderCreateRequest, parse
from storefront.domain.exceptions import ValidationError
from storefront.domain.model.cart import CartStore

logger = structlog.get_logger(__name__)


class CheckoutHandler:

    def __init__(self, cart: CartStore, create_order: CreateOrderHandler) -> None:
        self._cart = cart
        self._create_order = create_order

    def handle(
        self,
        user_id: str,
        shipping_address_id: str,
        payment_method: str,
        shipping_method: str,
        billing_address_id: str | None = None,
        notes: str | None = None,
    ) -> OrderDTO:
        if self._cart.is_empty:
            raise ValidationError("Cart is empty")

        request = parse(
            OrderCreateRequest,
            {
                "items": [
                    {"product_id": item.id, "quantity": item.quantity}
                    for item in self._cart.items
                ],
                "shipping_address_id": shipping_address_id,
                "billing_address_id": billing_address_id,
                "payment_method": payment_method,
                "shipping_method": shipping_method,
                "notes": notes,
            },
        )
        dto = self._create_order.handle(user_id, request)

        self._cart.clear_cart()
        logger.info("checkout_completed", order_id=dto.id, user_id=user_id)
        return dto
