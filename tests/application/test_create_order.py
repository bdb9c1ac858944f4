"""Integration tests for the CreateOrder use case.

Uses in-memory fake repositories — no file I/O.
"""

import pytest

from storefront.application.create_order import CreateOrderHandler
from storefront.application.schemas import OrderCreateRequest
from storefront.domain.exceptions import ValidationError
from storefront.domain.model.product import Product, ProductVariant
from storefront.domain.model.value_objects import Money
from tests.fakes import (
    FakeAddressRepository,
    FakeOrderRepository,
    FakeProductRepository,
    make_address,
)


def _setup(
    products: list[Product] | None = None,
) -> tuple[CreateOrderHandler, FakeOrderRepository, FakeProductRepository]:
    """Build handler with fake repos, optionally pre-loaded with products."""
    if products is None:
        products = [
            Product(id="1", name="Widget", slug="widget", price=Money.of("15.00")),
            Product(id="2", name="Gadget", slug="gadget", price=Money.of("25.00")),
            Product(
                id="3",
                name="Phone",
                slug="phone",
                price=Money.of("699.00"),
                variants=[
                    ProductVariant(id="v-128", name="128 GB"),
                    ProductVariant(id="v-256", name="256 GB", price=Money.of("799.00")),
                ],
            ),
        ]
    order_repo = FakeOrderRepository()
    product_repo = FakeProductRepository(products)
    address_repo = FakeAddressRepository(
        [
            make_address("addr-1", "user-1"),
            make_address("addr-2", "user-1"),
            make_address("addr-bob", "user-2"),
        ]
    )
    handler = CreateOrderHandler(order_repo, product_repo, address_repo)
    return handler, order_repo, product_repo


def _request(*items: dict, **overrides) -> OrderCreateRequest:
    data = {
        "items": list(items),
        "shipping_address_id": "addr-1",
        "payment_method": "card",
        "shipping_method": "standard",
    }
    data.update(overrides)
    return OrderCreateRequest(**data)


def _item(product_id: str, quantity: int = 1, variant_id: str | None = None) -> dict:
    return {"product_id": product_id, "quantity": quantity, "variant_id": variant_id}


class TestCreateOrderHappyPath:

    def test_creates_order_with_correct_totals(self):
        handler, _, _ = _setup()
        dto = handler.handle("user-1", _request(_item("1", 3), _item("2", 5)))
        assert dto.subtotal == "170.00"
        assert dto.shipping == "10.00"
        assert dto.tax == "25.50"
        assert dto.total == "205.50"
        assert dto.status == "pending"
        assert dto.payment_status == "pending"
        assert dto.user_id == "user-1"
        assert len(dto.items) == 2

    def test_hundred_subtotal_totals(self):
        handler, _, _ = _setup(
            [Product(id="p", name="Block", slug="block", price=Money.of("25.00"))]
        )
        dto = handler.handle("user-1", _request(_item("p", 4)))
        assert (dto.subtotal, dto.shipping, dto.tax, dto.total) == (
            "100.00",
            "10.00",
            "15.00",
            "125.00",
        )

    def test_assigns_order_id(self):
        handler, _, _ = _setup()
        dto = handler.handle("user-1", _request(_item("1")))
        assert dto.id == "order-1"
        assert dto.order_number.startswith("ORD-")

    def test_persists_order(self):
        handler, order_repo, _ = _setup()
        dto = handler.handle("user-1", _request(_item("1")))
        saved = order_repo.get_by_id(dto.id)
        assert saved is not None
        assert saved.user_id == "user-1"
        assert len(saved.items) == 1

    def test_products_read_in_one_batch(self):
        handler, _, product_repo = _setup()
        handler.handle("user-1", _request(_item("1"), _item("2"), _item("3")))
        assert product_repo.batch_reads == 1

    def test_billing_defaults_to_shipping(self):
        handler, _, _ = _setup()
        dto = handler.handle("user-1", _request(_item("1")))
        assert dto.billing_address_id == "addr-1"
        assert dto.billing_address.id == "addr-1"

    def test_separate_billing_address(self):
        handler, _, _ = _setup()
        dto = handler.handle(
            "user-1", _request(_item("1"), billing_address_id="addr-2")
        )
        assert dto.shipping_address.id == "addr-1"
        assert dto.billing_address.id == "addr-2"

    def test_notes_and_methods_recorded(self):
        handler, _, _ = _setup()
        dto = handler.handle(
            "user-1",
            _request(_item("1"), notes="Ring twice", shipping_method="express"),
        )
        assert dto.notes == "Ring twice"
        assert dto.shipping_method == "express"
        assert dto.payment_method == "card"


class TestCreateOrderVariants:

    def test_variant_price_wins(self):
        handler, _, _ = _setup()
        dto = handler.handle("user-1", _request(_item("3", 1, "v-256")))
        line = dto.items[0]
        assert line.price == "799.00"
        assert line.variant_id == "v-256"
        assert line.variant_name == "256 GB"

    def test_variant_without_price_uses_product_price(self):
        handler, _, _ = _setup()
        dto = handler.handle("user-1", _request(_item("3", 1, "v-128")))
        assert dto.items[0].price == "699.00"

    def test_unknown_variant(self):
        handler, order_repo, _ = _setup()
        with pytest.raises(ValidationError, match="Variant not found"):
            handler.handle("user-1", _request(_item("3", 1, "v-1tb")))
        assert order_repo.all() == []


class TestCreateOrderPriceLock:

    def test_price_snapshot_at_creation(self):
        handler, order_repo, product_repo = _setup()

        dto = handler.handle("user-1", _request(_item("1")))
        assert dto.items[0].price == "15.00"

        # Change the product price
        widget = product_repo.get_by_id("1")
        widget.price = Money.of("99.99")
        product_repo.save(widget)

        # Existing order still has original price
        saved = order_repo.get_by_id(dto.id)
        assert saved.items[0].price == Money.of("15.00")
        assert saved.subtotal == Money.of("15.00")


class TestCreateOrderValidation:

    def test_unknown_product_persists_nothing(self):
        handler, order_repo, _ = _setup()
        with pytest.raises(ValidationError, match="Product not found: nope"):
            handler.handle("user-1", _request(_item("1"), _item("nope")))
        assert order_repo.all() == []

    def test_missing_shipping_address(self):
        handler, order_repo, _ = _setup()
        with pytest.raises(ValidationError, match="Shipping address not found"):
            handler.handle("user-1", _request(_item("1"), shipping_address_id="zzz"))
        assert order_repo.all() == []

    def test_someone_elses_address_rejected(self):
        handler, _, _ = _setup()
        with pytest.raises(ValidationError, match="Shipping address not found"):
            handler.handle("user-1", _request(_item("1"), shipping_address_id="addr-bob"))

    def test_someone_elses_billing_address_rejected(self):
        handler, _, _ = _setup()
        with pytest.raises(ValidationError, match="Billing address not found"):
            handler.handle("user-1", _request(_item("1"), billing_address_id="addr-bob"))

    def test_storage_failure_propagates(self):
        handler, order_repo, _ = _setup()
        order_repo.fail_on_save = True
        with pytest.raises(RuntimeError):
            handler.handle("user-1", _request(_item("1")))
        assert order_repo.all() == []
