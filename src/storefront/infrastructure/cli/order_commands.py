"""CLI commands for the Order aggregate."""

from __future__ import annotations

import click

from storefront.application.cancel_order import CancelOrderHandler
from storefront.application.create_order import CreateOrderHandler
from storefront.application.dto import OrderDTO, TimelineEntryDTO
from storefront.application.list_orders import DEFAULT_PAGE_SIZE, ListOrdersHandler
from storefront.application.schemas import (
    OrderCreateRequest,
    OrderUpdateRequest,
    parse,
)
from storefront.application.show_order import ShowOrderHandler
from storefront.application.track_order import TrackOrderHandler
from storefront.application.update_order import UpdateOrderHandler
from storefront.domain.exceptions import DomainException
from storefront.domain.model.order import OrderStatus
from storefront.infrastructure.bootstrap import build_container
from storefront.infrastructure.cli.common import fail, resolve_user

USER_OPTION = click.option("--user", "email", required=True, help="Email of the acting user.")
STATUS_CHOICE = click.Choice([s.value for s in OrderStatus])


def _parse_items(raw: str) -> list[dict]:
    """Parse 'prod-1:3,prod-2:1:var-9' into order item dicts."""
    items: list[dict] = []
    for pair in raw.split(","):
        parts = [part.strip() for part in pair.strip().split(":")]
        if len(parts) not in (2, 3):
            raise click.BadParameter(
                f"Invalid item format '{pair}'. Expected 'ProductId:Qty[:VariantId]'."
            )
        try:
            qty = int(parts[1])
        except ValueError:
            raise click.BadParameter(
                f"Invalid quantity '{parts[1]}' for product '{parts[0]}'."
            )
        item = {"product_id": parts[0], "quantity": qty}
        if len(parts) == 3:
            item["variant_id"] = parts[2]
        items.append(item)
    return items


def display_order(dto: OrderDTO) -> None:
    """Shared formatting for displaying an order."""
    click.echo(f"Order {dto.order_number}  (id={dto.id})")
    click.echo(f"Status:   {dto.status}  (payment={dto.payment_status})")
    click.echo(f"Created:  {dto.created_at}")
    click.echo()
    click.echo(f"  {'Product':<24} {'Variant':<12} {'Qty':>5} {'Price':>10} {'Total':>10}")
    click.echo(f"  {'-'*65}")
    for item in dto.items:
        click.echo(
            f"  {item.product_name:<24} {item.variant_name or '':<12} "
            f"{item.quantity:>5} {item.price:>10} {item.total:>10}"
        )
    click.echo(f"  {'-'*65}")
    click.echo(f"  {'Subtotal':<43} {dto.subtotal:>21}")
    click.echo(f"  {'Shipping':<43} {dto.shipping:>21}")
    click.echo(f"  {'Tax':<43} {dto.tax:>21}")
    click.echo(f"  {'Order Total':<43} {dto.total:>21}")


def _display_timeline(timeline: list[TimelineEntryDTO]) -> None:
    click.echo()
    click.echo("Timeline:")
    for entry in timeline:
        mark = ">" if entry.current else ("x" if entry.completed else " ")
        click.echo(f"  [{mark}] {entry.label:<14} {entry.date[:10]}  {entry.description}")


@click.command("create")
@USER_OPTION
@click.option("--items", required=True, help="Items as 'ProductId:Qty[:VariantId],...'.")
@click.option("--shipping-address", required=True, help="Shipping address ID.")
@click.option("--billing-address", default=None, help="Billing address ID (defaults to shipping).")
@click.option("--payment-method", required=True, help="Payment method, e.g. 'card'.")
@click.option("--shipping-method", default="standard", show_default=True)
@click.option("--notes", default=None)
def order_create(
    email: str,
    items: str,
    shipping_address: str,
    billing_address: str | None,
    payment_method: str,
    shipping_method: str,
    notes: str | None,
) -> None:
    """Place a new order."""
    container = build_container()
    user = resolve_user(container, email)
    handler = CreateOrderHandler(
        container.orders, container.products, container.addresses
    )

    try:
        request = parse(
            OrderCreateRequest,
            {
                "items": _parse_items(items),
                "shipping_address_id": shipping_address,
                "billing_address_id": billing_address,
                "payment_method": payment_method,
                "shipping_method": shipping_method,
                "notes": notes,
            },
        )
        dto = handler.handle(user.id, request)
    except DomainException as exc:
        raise fail(exc)

    click.echo("Order created.")
    display_order(dto)


@click.command("list")
@USER_OPTION
@click.option("--page", default=1, type=int, show_default=True)
@click.option("--limit", default=DEFAULT_PAGE_SIZE, type=int, show_default=True)
@click.option("--status", type=STATUS_CHOICE, default=None, help="Only orders in this status.")
def order_list(email: str, page: int, limit: int, status: str | None) -> None:
    """List your orders, newest first."""
    container = build_container()
    user = resolve_user(container, email)
    handler = ListOrdersHandler(container.orders, container.addresses)

    try:
        result = handler.handle(
            user.id,
            page=page,
            limit=limit,
            status=OrderStatus(status) if status else None,
        )
    except DomainException as exc:
        raise fail(exc)

    if not result.orders:
        click.echo("No orders found.")
        return

    click.echo(f"{'Order':<24} {'Status':<12} {'Total':>10}  {'Created':<10}  ID")
    click.echo("-" * 92)
    for order in result.orders:
        click.echo(
            f"{order.order_number:<24} {order.status:<12} {order.total:>10}  "
            f"{order.created_at[:10]:<10}  {order.id}"
        )
    meta = result.meta
    click.echo(
        f"Page {meta.current_page}/{meta.total_pages} "
        f"({meta.total_items} orders{', more available' if meta.has_more else ''})"
    )


@click.command("show")
@USER_OPTION
@click.option("--id", "order_id", required=True, help="Order ID to display.")
def order_show(email: str, order_id: str) -> None:
    """Show an order with its delivery timeline."""
    container = build_container()
    user = resolve_user(container, email)
    handler = ShowOrderHandler(container.orders, container.addresses)

    try:
        detail = handler.handle(order_id, user.id)
    except DomainException as exc:
        raise fail(exc)

    display_order(detail.order)
    _display_timeline(detail.timeline)


@click.command("update")
@USER_OPTION
@click.option("--id", "order_id", required=True, help="Order ID to update.")
@click.option("--status", type=STATUS_CHOICE, default=None)
@click.option(
    "--payment-status",
    type=click.Choice(["pending", "paid", "failed", "refunded"]),
    default=None,
)
@click.option("--notes", default=None)
def order_update(
    email: str,
    order_id: str,
    status: str | None,
    payment_status: str | None,
    notes: str | None,
) -> None:
    """Set status, payment status or notes (admin only)."""
    container = build_container()
    user = resolve_user(container, email)
    handler = UpdateOrderHandler(container.orders, container.addresses)

    try:
        request = parse(
            OrderUpdateRequest,
            {"status": status, "payment_status": payment_status, "notes": notes},
        )
        dto = handler.handle(user, order_id, request)
    except DomainException as exc:
        raise fail(exc)

    click.echo(f"Order {dto.order_number} updated (status={dto.status}, payment={dto.payment_status}).")


@click.command("cancel")
@USER_OPTION
@click.option("--id", "order_id", required=True, help="Order ID to cancel.")
def order_cancel(email: str, order_id: str) -> None:
    """Cancel a pending or processing order."""
    container = build_container()
    user = resolve_user(container, email)
    handler = CancelOrderHandler(container.orders, container.addresses)

    try:
        dto = handler.handle(order_id, user.id)
    except DomainException as exc:
        raise fail(exc)

    click.echo(f"Order {dto.order_number} cancelled.")


@click.command("track")
@USER_OPTION
@click.option("--id", "order_id", required=True, help="Order ID to track.")
def order_track(email: str, order_id: str) -> None:
    """Show shipment tracking for an order."""
    container = build_container()
    user = resolve_user(container, email)
    handler = TrackOrderHandler(container.orders, container.shipping_provider)

    try:
        tracking = handler.handle(order_id, user.id)
    except DomainException as exc:
        raise fail(exc)

    click.echo(f"Status: {tracking.status}")
    if tracking.tracking_number is None:
        return
    click.echo(f"Carrier: {tracking.carrier}  Tracking #: {tracking.tracking_number}")
    click.echo(f"Estimated delivery: {tracking.estimated_delivery[:10]}")
    for event in tracking.events:
        click.echo(f"  {event.date[:10]}  {event.location:<26} {event.description}")
