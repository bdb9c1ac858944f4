"""JSON-file-backed implementation of OrderRepository.

Each order is stored as one record with its items embedded, so saving an
order is a single atomic file replace: an order is never visible with only
some of its items.
"""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from pathlib import Path
from uuid import uuid4

from storefront.domain.model.order import Order, OrderItem, OrderStatus, PaymentStatus
from storefront.domain.model.value_objects import Money, Quantity
from storefront.domain.repository.order_repository import OrderRepository
from storefront.infrastructure.persistence.json_file import JsonFile


class JsonOrderRepository(OrderRepository):

    def __init__(self, file_path: Path) -> None:
        self._file = JsonFile(file_path, default=[])

    # --- OrderRepository interface --------------------------------------------

    def next_id(self) -> str:
        return uuid4().hex

    def get_by_id(self, order_id: str) -> Order | None:
        for raw in self._file.read():
            if raw["id"] == order_id:
                return self._to_domain(raw)
        return None

    def get_for_user(self, order_id: str, user_id: str) -> Order | None:
        for raw in self._file.read():
            if raw["id"] == order_id and raw["user_id"] == user_id:
                return self._to_domain(raw)
        return None

    def list_for_user(
        self,
        user_id: str,
        status: OrderStatus | None = None,
        offset: int = 0,
        limit: int | None = None,
    ) -> list[Order]:
        records = self._matching(user_id, status)
        records.sort(key=lambda raw: raw["created_at"], reverse=True)
        end = None if limit is None else offset + limit
        return [self._to_domain(raw) for raw in records[offset:end]]

    def count_for_user(self, user_id: str, status: OrderStatus | None = None) -> int:
        return len(self._matching(user_id, status))

    def save(self, order: Order) -> None:
        if order.id is None:
            order.id = self.next_id()

        with self._file.locked():
            orders = self._file.read()
            # Upsert: replace if exists, otherwise append
            for i, raw in enumerate(orders):
                if raw["id"] == order.id:
                    orders[i] = self._to_raw(order)
                    break
            else:
                orders.append(self._to_raw(order))
            self._file.write(orders)

    # --- Serialization --------------------------------------------------------

    def _matching(self, user_id: str, status: OrderStatus | None) -> list[dict]:
        return [
            raw
            for raw in self._file.read()
            if raw["user_id"] == user_id
            and (status is None or raw["status"] == status.value)
        ]

    @staticmethod
    def _to_raw(order: Order) -> dict:
        return {
            "id": order.id,
            "order_number": order.order_number,
            "user_id": order.user_id,
            "status": order.status.value,
            "payment_status": order.payment_status.value,
            "subtotal": str(order.subtotal.amount),
            "shipping": str(order.shipping.amount),
            "tax": str(order.tax.amount),
            "total": str(order.total.amount),
            "currency": order.total.currency,
            "payment_method": order.payment_method,
            "shipping_method": order.shipping_method,
            "notes": order.notes,
            "shipping_address_id": order.shipping_address_id,
            "billing_address_id": order.billing_address_id,
            "created_at": order.created_at.isoformat(),
            "updated_at": order.updated_at.isoformat(),
            "items": [
                {
                    "product_id": item.product_id,
                    "product_name": item.product_name,
                    "variant_id": item.variant_id,
                    "variant_name": item.variant_name,
                    "quantity": item.quantity.value,
                    "price": str(item.price.amount),
                    "total": str(item.total.amount),
                }
                for item in order.items
            ],
        }

    @staticmethod
    def _to_domain(raw: dict) -> Order:
        currency = raw.get("currency", "USD")

        def money(key: str, source: dict = raw) -> Money:
            return Money(Decimal(source[key]), currency)

        items = [
            OrderItem(
                product_id=i["product_id"],
                product_name=i["product_name"],
                quantity=Quantity(i["quantity"]),
                price=money("price", i),
                variant_id=i.get("variant_id"),
                variant_name=i.get("variant_name"),
            )
            for i in raw["items"]
        ]
        return Order(
            id=raw["id"],
            order_number=raw["order_number"],
            user_id=raw["user_id"],
            items=items,
            subtotal=money("subtotal"),
            shipping=money("shipping"),
            tax=money("tax"),
            total=money("total"),
            payment_method=raw["payment_method"],
            shipping_address_id=raw["shipping_address_id"],
            billing_address_id=raw["billing_address_id"],
            shipping_method=raw.get("shipping_method", ""),
            notes=raw.get("notes"),
            status=OrderStatus(raw["status"]),
            payment_status=PaymentStatus(raw["payment_status"]),
            created_at=datetime.fromisoformat(raw["created_at"]),
            updated_at=datetime.fromisoformat(raw["updated_at"]),
        )
