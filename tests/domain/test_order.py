"""Unit tests for the Order aggregate and its business rules."""

import random
import re
from datetime import datetime, timedelta, timezone

import pytest

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.order import (
    Order,
    OrderItem,
    OrderStatus,
    PaymentStatus,
    generate_order_number,
)
from storefront.domain.model.value_objects import Money, Quantity
from tests.fakes import make_order

NOW = datetime(2024, 3, 1, 12, 0, tzinfo=timezone.utc)


def _make_item(name: str = "Widget", qty: int = 1, price: str = "15.00") -> OrderItem:
    """Helper to build a valid line item."""
    return OrderItem(
        product_id="1",
        product_name=name,
        quantity=Quantity(qty),
        price=Money.of(price),
    )


def _create(items: list[OrderItem], **kwargs) -> Order:
    defaults = dict(
        user_id="user-1",
        items=items,
        payment_method="card",
        shipping_address_id="addr-1",
        now=NOW,
    )
    defaults.update(kwargs)
    return Order.create(**defaults)


class TestOrderCreation:

    def test_happy_path(self):
        order = _create([_make_item(qty=2, price="10.00")])
        assert order.user_id == "user-1"
        assert order.status == OrderStatus.PENDING
        assert order.payment_status == PaymentStatus.PENDING
        assert len(order.items) == 1
        assert order.subtotal == Money.of("20.00")

    def test_id_is_none_for_new_orders(self):
        order = _create([_make_item()])
        assert order.id is None  # assigned by repository

    def test_totals_for_a_hundred_subtotal(self):
        order = _create([_make_item(qty=4, price="25.00")])
        assert order.subtotal == Money.of("100")
        assert order.shipping == Money.of("10")
        assert order.tax == Money.of("15")
        assert order.total == Money.of("125")

    def test_subtotal_is_sum_of_line_items(self):
        items = [
            _make_item("Widget", qty=3, price="15.00"),
            _make_item("Gadget", qty=5, price="25.00"),
        ]
        order = _create(items)
        assert order.subtotal == Money.of("170.00")
        assert order.total == order.subtotal + order.shipping + order.tax

    def test_billing_defaults_to_shipping(self):
        order = _create([_make_item()])
        assert order.billing_address_id == "addr-1"

    def test_explicit_billing_address_kept(self):
        order = _create([_make_item()], billing_address_id="addr-2")
        assert order.billing_address_id == "addr-2"

    def test_shipping_method_does_not_change_price(self):
        standard = _create([_make_item()], shipping_method="standard")
        express = _create([_make_item()], shipping_method="overnight")
        assert standard.total == express.total
        assert express.shipping_method == "overnight"

    def test_timestamps_start_equal(self):
        order = _create([_make_item()])
        assert order.created_at == NOW
        assert order.updated_at == NOW

    def test_no_items_rejected(self):
        with pytest.raises(ValidationError, match="at least one item"):
            _create([])

    def test_missing_owner_rejected(self):
        with pytest.raises(ValidationError, match="owner"):
            _create([_make_item()], user_id="")


class TestOrderNumber:

    def test_format(self):
        number = generate_order_number(NOW, random.Random(1))
        assert re.fullmatch(r"ORD-\d{13}-\d{3}", number)
        assert number.startswith(f"ORD-{int(NOW.timestamp() * 1000)}-")

    def test_small_suffix_is_zero_padded(self):
        class Low(random.Random):
            def randrange(self, *args, **kwargs):
                return 7

        assert generate_order_number(NOW, Low()).endswith("-007")

    def test_order_gets_number(self):
        order = _create([_make_item()])
        assert order.order_number.startswith("ORD-")


class TestOrderItem:

    def test_total_calculation(self):
        item = _make_item(qty=3, price="15.00")
        assert item.total == Money.of("45.00")

    def test_item_is_immutable(self):
        item = _make_item()
        with pytest.raises(Exception):
            item.quantity = Quantity(5)


class TestOrderCancellation:

    @pytest.mark.parametrize("status", [OrderStatus.PENDING, OrderStatus.PROCESSING])
    def test_cancellable_statuses(self, status):
        order = make_order(status=status)
        later = order.created_at + timedelta(hours=3)
        order.cancel(now=later)
        assert order.status == OrderStatus.CANCELLED
        assert order.updated_at == later

    @pytest.mark.parametrize(
        "status",
        [OrderStatus.SHIPPED, OrderStatus.DELIVERED, OrderStatus.CANCELLED],
    )
    def test_other_statuses_rejected(self, status):
        order = make_order(status=status)
        with pytest.raises(ValidationError, match="cannot be cancelled"):
            order.cancel()
        assert order.status == status
        assert order.updated_at == order.created_at


class TestOrderAdminUpdate:

    def test_any_transition_allowed(self):
        order = make_order(status=OrderStatus.DELIVERED)
        order.apply_update(status=OrderStatus.PENDING)
        assert order.status == OrderStatus.PENDING

    def test_partial_update_keeps_other_fields(self):
        order = make_order()
        order.apply_update(payment_status=PaymentStatus.PAID)
        assert order.payment_status == PaymentStatus.PAID
        assert order.status == OrderStatus.PENDING
        assert order.notes is None

    def test_refreshes_updated_at(self):
        order = make_order()
        later = order.created_at + timedelta(days=1)
        order.apply_update(notes="Leave at the door", now=later)
        assert order.notes == "Leave at the door"
        assert order.updated_at == later
