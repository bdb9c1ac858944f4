"""Tests for turning a cart into an order."""

import pytest

from storefront.application.checkout import CheckoutHandler
from storefront.application.create_order import CreateOrderHandler
from storefront.domain.exceptions import ValidationError
from storefront.domain.model.cart import CartItem, CartStore
from storefront.domain.model.product import Product
from storefront.domain.model.value_objects import Money
from tests.fakes import (
    FakeAddressRepository,
    FakeCartStorage,
    FakeOrderRepository,
    FakeProductRepository,
    make_address,
)


def _setup(*cart_items: CartItem):
    orders = FakeOrderRepository()
    products = FakeProductRepository(
        [
            Product(id="p1", name="Mug", slug="mug", price=Money.of("8.00")),
            Product(id="p2", name="Tee", slug="tee", price=Money.of("20.00")),
        ]
    )
    create = CreateOrderHandler(
        orders, products, FakeAddressRepository([make_address()])
    )
    cart = CartStore(FakeCartStorage(list(cart_items)))
    return CheckoutHandler(cart, create), cart, orders


def _line(product_id: str, quantity: int, price: str = "1.00") -> CartItem:
    return CartItem(id=product_id, name=product_id, price=Money.of(price), quantity=quantity)


def _checkout(handler: CheckoutHandler, **overrides):
    kwargs = dict(
        user_id="user-1",
        shipping_address_id="addr-1",
        payment_method="card",
        shipping_method="standard",
    )
    kwargs.update(overrides)
    return handler.handle(**kwargs)


def test_places_order_from_cart_and_clears_it():
    handler, cart, orders = _setup(_line("p1", 2), _line("p2", 1))

    dto = _checkout(handler)

    assert [(i.product_id, i.quantity) for i in dto.items] == [("p1", 2), ("p2", 1)]
    assert dto.subtotal == "36.00"
    assert cart.is_empty
    assert len(orders.all()) == 1


def test_order_uses_catalogue_price_not_cart_snapshot():
    handler, _, _ = _setup(_line("p1", 1, price="0.01"))
    dto = _checkout(handler)
    assert dto.items[0].price == "8.00"


def test_empty_cart_rejected():
    handler, _, orders = _setup()
    with pytest.raises(ValidationError, match="Cart is empty"):
        _checkout(handler)
    assert orders.all() == []


def test_failed_checkout_keeps_cart():
    handler, cart, _ = _setup(_line("p1", 1), _line("gone", 1))
    with pytest.raises(ValidationError, match="Product not found: gone"):
        _checkout(handler)
    assert cart.total_items == 2


def test_bad_address_keeps_cart():
    handler, cart, _ = _setup(_line("p1", 1))
    with pytest.raises(ValidationError):
        _checkout(handler, shipping_address_id="elsewhere")
    assert not cart.is_empty


def test_blank_payment_method_is_a_validation_error():
    handler, cart, orders = _setup(_line("p1", 1))
    with pytest.raises(ValidationError) as excinfo:
        _checkout(handler, payment_method="   ")
    assert [e["field"] for e in excinfo.value.errors] == ["payment_method"]
    assert cart.total_items == 1
    assert orders.all() == []
