"""Application service: List Orders use case (query)."""

from __future__ import annotations

import math

from storefront.application.dto import OrderPageDTO, PageMeta
from storefront.application.mapping import order_to_dto
from storefront.domain.exceptions import ValidationError
from storefront.domain.model.order import OrderStatus
from storefront.domain.repository.order_repository import OrderRepository
from storefront.domain.repository.user_repository import AddressRepository

DEFAULT_PAGE_SIZE = 10
MAX_PAGE_SIZE = 100


class ListOrdersHandler:

    def __init__(
        self,
        order_repo: OrderRepository,
        address_repo: AddressRepository,
    ) -> None:
        self._order_repo = order_repo
        self._address_repo = address_repo

    def handle(
        self,
        user_id: str,
        page: int = 1,
        limit: int = DEFAULT_PAGE_SIZE,
        status: OrderStatus | None = None,
    ) -> OrderPageDTO:
        """Return one page of the caller's orders, newest first."""
        if page < 1:
            raise ValidationError("Page must be at least 1")
        if not 1 <= limit <= MAX_PAGE_SIZE:
            raise ValidationError(f"Limit must be between 1 and {MAX_PAGE_SIZE}")

        orders = self._order_repo.list_for_user(
            user_id, status=status, offset=(page - 1) * limit, limit=limit
        )
        total_items = self._order_repo.count_for_user(user_id, status=status)
        total_pages = math.ceil(total_items / limit)

        return OrderPageDTO(
            orders=[order_to_dto(order, self._address_repo) for order in orders],
            meta=PageMeta(
                current_page=page,
                total_pages=total_pages,
                total_items=total_items,
                page_size=limit,
                has_more=page < total_pages,
            ),
        )
