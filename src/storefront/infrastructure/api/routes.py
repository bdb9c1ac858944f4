"""FastAPI routes — orders, accounts, addresses and product browsing.

Handlers are built per request from the container; every domain failure
propagates to the exception handlers registered in ``app.py``.
"""

from __future__ import annotations

from dataclasses import asdict

from fastapi import APIRouter, Depends, Query

from storefront.application.add_product import ListProductsHandler, ShowProductHandler
from storefront.application.authenticate_user import AuthenticateUserHandler
from storefront.application.cancel_order import CancelOrderHandler
from storefront.application.create_order import CreateOrderHandler
from storefront.application.list_orders import (
    DEFAULT_PAGE_SIZE,
    MAX_PAGE_SIZE,
    ListOrdersHandler,
)
from storefront.application.manage_addresses import (
    AddAddressHandler,
    ListAddressesHandler,
)
from storefront.application.register_user import RegisterUserHandler
from storefront.application.schemas import (
    AddressCreateRequest,
    LoginRequest,
    OrderCreateRequest,
    OrderUpdateRequest,
    RegisterRequest,
)
from storefront.application.show_order import ShowOrderHandler
from storefront.application.track_order import TrackOrderHandler
from storefront.application.update_order import UpdateOrderHandler
from storefront.domain.model.order import OrderStatus
from storefront.domain.model.user import User
from storefront.infrastructure.api.dependencies import current_user, get_container
from storefront.infrastructure.bootstrap import Container

# ---------------------------------------------------------------------------
# Order Router
# ---------------------------------------------------------------------------
order_router = APIRouter(prefix="/orders", tags=["orders"])


@order_router.get("")
def list_orders(
    page: int = Query(1, ge=1),
    limit: int = Query(DEFAULT_PAGE_SIZE, ge=1, le=MAX_PAGE_SIZE),
    status: OrderStatus | None = Query(None),
    user: User = Depends(current_user),
    container: Container = Depends(get_container),
) -> dict:
    handler = ListOrdersHandler(container.orders, container.addresses)
    return asdict(handler.handle(user.id, page=page, limit=limit, status=status))


@order_router.post("", status_code=201)
def create_order(
    body: OrderCreateRequest,
    user: User = Depends(current_user),
    container: Container = Depends(get_container),
) -> dict:
    handler = CreateOrderHandler(
        container.orders, container.products, container.addresses
    )
    order = handler.handle(user.id, body)
    return {"message": "Order created successfully", "order": asdict(order)}


@order_router.get("/{order_id}")
def show_order(
    order_id: str,
    user: User = Depends(current_user),
    container: Container = Depends(get_container),
) -> dict:
    handler = ShowOrderHandler(container.orders, container.addresses)
    return asdict(handler.handle(order_id, user.id))


@order_router.patch("/{order_id}")
def update_order(
    order_id: str,
    body: OrderUpdateRequest,
    user: User = Depends(current_user),
    container: Container = Depends(get_container),
) -> dict:
    handler = UpdateOrderHandler(container.orders, container.addresses)
    return {"order": asdict(handler.handle(user, order_id, body))}


@order_router.post("/{order_id}/cancel")
def cancel_order(
    order_id: str,
    user: User = Depends(current_user),
    container: Container = Depends(get_container),
) -> dict:
    handler = CancelOrderHandler(container.orders, container.addresses)
    order = handler.handle(order_id, user.id)
    return {
        "success": True,
        "message": "Order cancelled successfully",
        "order": asdict(order),
    }


@order_router.get("/{order_id}/tracking")
def track_order(
    order_id: str,
    user: User = Depends(current_user),
    container: Container = Depends(get_container),
) -> dict:
    handler = TrackOrderHandler(container.orders, container.shipping_provider)
    return {"tracking": asdict(handler.handle(order_id, user.id))}


# ---------------------------------------------------------------------------
# Account Router
# ---------------------------------------------------------------------------
auth_router = APIRouter(prefix="/auth", tags=["auth"])


@auth_router.post("/register", status_code=201)
def register(body: RegisterRequest, container: Container = Depends(get_container)) -> dict:
    user = RegisterUserHandler(container.users).handle(body)
    return {"message": "User registered successfully", "user": asdict(user)}


@auth_router.post("/login")
def login(body: LoginRequest, container: Container = Depends(get_container)) -> dict:
    user = AuthenticateUserHandler(container.users).handle(body.email, body.password)
    return {"user": asdict(user)}


address_router = APIRouter(prefix="/addresses", tags=["addresses"])


@address_router.get("")
def list_addresses(
    user: User = Depends(current_user),
    container: Container = Depends(get_container),
) -> dict:
    addresses = ListAddressesHandler(container.addresses).handle(user.id)
    return {"addresses": [asdict(a) for a in addresses]}


@address_router.post("", status_code=201)
def add_address(
    body: AddressCreateRequest,
    user: User = Depends(current_user),
    container: Container = Depends(get_container),
) -> dict:
    address = AddAddressHandler(container.addresses).handle(user.id, body)
    return {"address": asdict(address)}


# ---------------------------------------------------------------------------
# Product Router
# ---------------------------------------------------------------------------
product_router = APIRouter(prefix="/products", tags=["products"])


@product_router.get("")
def list_products(
    category: str | None = Query(None),
    search: str | None = Query(None),
    container: Container = Depends(get_container),
) -> dict:
    products = ListProductsHandler(container.products).handle(
        category=category, search=search
    )
    return {"products": [asdict(p) for p in products]}


@product_router.get("/{slug}")
def show_product(slug: str, container: Container = Depends(get_container)) -> dict:
    return {"product": asdict(ShowProductHandler(container.products).handle(slug))}
