"""CLI commands for the local cart."""

from __future__ import annotations

import click

from storefront.application.checkout import CheckoutHandler
from storefront.application.create_order import CreateOrderHandler
from storefront.domain.exceptions import DomainException, EntityNotFoundError
from storefront.domain.model.cart import CartItem, CartStore
from storefront.infrastructure.bootstrap import build_container
from storefront.infrastructure.cli.common import fail, resolve_user
from storefront.infrastructure.cli.order_commands import display_order


def _display_cart(cart: CartStore) -> None:
    if cart.is_empty:
        click.echo("Cart is empty.")
        return

    click.echo(f"  {'Product':<24} {'Qty':>5} {'Price':>10} {'Total':>10}  ID")
    click.echo(f"  {'-'*60}")
    for item in cart.items:
        click.echo(
            f"  {item.name:<24} {item.quantity:>5} {item.price.plain:>10} "
            f"{item.line_total.plain:>10}  {item.id}"
        )
    click.echo(f"  {'-'*60}")
    click.echo(f"  {'Items':<24} {cart.total_items:>5} {'':>10} {cart.total_price.plain:>10}")


@click.command("add")
@click.option("--product", "product_ref", required=True, help="Product ID or slug.")
def cart_add(product_ref: str) -> None:
    """Add one unit of a product to the cart."""
    container = build_container()
    product = container.products.get_by_id(product_ref) or container.products.get_by_slug(
        product_ref
    )
    if product is None:
        raise fail(EntityNotFoundError(f"Product not found: {product_ref}"))

    cart = container.cart_store()
    cart.add_item(
        CartItem(
            id=product.id,
            name=product.name,
            price=product.price,
            image=product.image,
            slug=product.slug,
        )
    )
    click.echo(f"Added '{product.name}' to cart.")
    _display_cart(cart)


@click.command("remove")
@click.option("--product", "product_id", required=True, help="Product ID.")
def cart_remove(product_id: str) -> None:
    """Remove a product from the cart."""
    cart = build_container().cart_store()
    cart.remove_item(product_id)
    _display_cart(cart)


@click.command("update")
@click.option("--product", "product_id", required=True, help="Product ID.")
@click.option("--quantity", required=True, type=int, help="New quantity (0 removes).")
def cart_update(product_id: str, quantity: int) -> None:
    """Set the quantity of a cart line."""
    cart = build_container().cart_store()
    cart.update_quantity(product_id, quantity)
    _display_cart(cart)


@click.command("clear")
def cart_clear() -> None:
    """Empty the cart."""
    build_container().cart_store().clear_cart()
    click.echo("Cart cleared.")


@click.command("show")
def cart_show() -> None:
    """Show the cart and its totals."""
    _display_cart(build_container().cart_store())


@click.command("checkout")
@click.option("--user", "email", required=True, help="Email of the buyer.")
@click.option("--shipping-address", required=True, help="Shipping address ID.")
@click.option("--billing-address", default=None, help="Billing address ID (defaults to shipping).")
@click.option("--payment-method", required=True, help="Payment method, e.g. 'card'.")
@click.option("--shipping-method", default="standard", show_default=True)
@click.option("--notes", default=None)
def cart_checkout(
    email: str,
    shipping_address: str,
    billing_address: str | None,
    payment_method: str,
    shipping_method: str,
    notes: str | None,
) -> None:
    """Turn the cart into an order and clear it."""
    container = build_container()
    user = resolve_user(container, email)
    handler = CheckoutHandler(
        container.cart_store(),
        CreateOrderHandler(container.orders, container.products, container.addresses),
    )

    try:
        dto = handler.handle(
            user.id,
            shipping_address_id=shipping_address,
            payment_method=payment_method,
            shipping_method=shipping_method,
            billing_address_id=billing_address,
            notes=notes,
        )
    except DomainException as exc:
        raise fail(exc)

    click.echo("Checkout complete.")
    display_order(dto)
