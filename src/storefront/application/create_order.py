"""Application service: Create Order use case.

Orchestrates the flow between repositories and the domain model. This is
the only place that coordinates multiple aggregates (Product lookup +
Address ownership + Order creation).
"""

from __future__ import annotations

import random

import structlog

from storefront.application.dto import OrderDTO
from storefront.application.mapping import order_to_dto
from storefront.application.schemas import OrderCreateRequest
from storefront.domain.exceptions import ValidationError
from storefront.domain.model.order import Order, OrderItem
from storefront.domain.model.value_objects import Quantity
from storefront.domain.repository.order_repository import OrderRepository
from storefront.domain.repository.product_repository import ProductRepository
from storefront.domain.repository.user_repository import AddressRepository

logger = structlog.get_logger(__name__)


class CreateOrderHandler:

    def __init__(
        self,
        order_repo: OrderRepository,
        product_repo: ProductRepository,
        address_repo: AddressRepository,
        rng: random.Random | None = None,
    ) -> None:
        self._order_repo = order_repo
        self._product_repo = product_repo
        self._address_repo = address_repo
        self._rng = rng

    def handle(self, user_id: str, request: OrderCreateRequest) -> OrderDTO:
        """Place a new order for ``user_id``.

        Steps:
        1. Check both addresses belong to the caller.
        2. Resolve every product in one batch read (fail if any is missing).
        3. Build OrderItems with *current* prices, variant price winning.
        4. Let the Order aggregate compute totals.
        5. Persist order and items in one write and return a DTO.
        """
        self._check_address(request.shipping_address_id, user_id, "Shipping")
        if request.billing_address_id:
            self._check_address(request.billing_address_id, user_id, "Billing")

        products = self._product_repo.get_many(
            [item.product_id for item in request.items]
        )

        items: list[OrderItem] = []
        for line in request.items:
            product = products.get(line.product_id)
            if product is None:
                raise ValidationError(f"Product not found: {line.product_id}")

            variant = product.find_variant(line.variant_id) if line.variant_id else None
            items.append(
                OrderItem(
                    product_id=product.id,
                    product_name=product.name,
                    quantity=Quantity(line.quantity),
                    price=product.unit_price(line.variant_id),  # <-- price snapshot
                    variant_id=variant.id if variant else None,
                    variant_name=variant.name if variant else None,
                )
            )

        order = Order.create(
            user_id=user_id,
            items=items,
            payment_method=request.payment_method,
            shipping_address_id=request.shipping_address_id,
            billing_address_id=request.billing_address_id,
            shipping_method=request.shipping_method,
            notes=request.notes,
            rng=self._rng,
        )
        self._order_repo.save(order)

        logger.info(
            "order_created",
            order_id=order.id,
            order_number=order.order_number,
            user_id=user_id,
            item_count=len(items),
            total=order.total.plain,
        )
        return order_to_dto(order, self._address_repo)

    def _check_address(self, address_id: str, user_id: str, kind: str) -> None:
        address = self._address_repo.get_by_id(address_id)
        if address is None or not address.belongs_to(user_id):
            raise ValidationError(f"{kind} address not found")
