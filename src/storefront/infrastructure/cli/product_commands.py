"""CLI commands for the Product aggregate."""

from __future__ import annotations

import click

from storefront.application.add_product import (
    AddProductHandler,
    AddVariantHandler,
    ListProductsHandler,
    ShowProductHandler,
)
from storefront.domain.exceptions import DomainException
from storefront.infrastructure.bootstrap import build_container
from storefront.infrastructure.cli.common import fail


@click.command("add")
@click.option("--name", required=True, help="Product name.")
@click.option("--price", required=True, help="Price (e.g. 15.00).")
@click.option("--slug", default=None, help="URL slug (derived from the name if omitted).")
@click.option("--image", default="", help="Image URL.")
@click.option("--description", default="", help="Product description.")
@click.option("--category", "categories", multiple=True, help="Category name (repeatable).")
def product_add(
    name: str,
    price: str,
    slug: str | None,
    image: str,
    description: str,
    categories: tuple[str, ...],
) -> None:
    """Add a new product to the catalogue."""
    handler = AddProductHandler(build_container().products)

    try:
        product = handler.handle(
            name=name,
            price=price,
            slug=slug,
            image=image,
            description=description,
            categories=list(categories),
        )
    except DomainException as exc:
        raise fail(exc)

    click.echo(f"Product '{product.name}' added at ${product.price} (id={product.id})")


@click.command("add-variant")
@click.option("--product", "product_id", required=True, help="Product ID.")
@click.option("--name", required=True, help="Variant name, e.g. 'Blue / 256GB'.")
@click.option("--price", default=None, help="Override price; omit to inherit.")
def product_add_variant(product_id: str, name: str, price: str | None) -> None:
    """Add a variant to a product."""
    handler = AddVariantHandler(build_container().products)

    try:
        product = handler.handle(product_id=product_id, name=name, price=price)
    except DomainException as exc:
        raise fail(exc)

    variant = product.variants[-1]
    click.echo(f"Variant '{variant.name}' added to '{product.name}' (id={variant.id})")


@click.command("list")
@click.option("--category", default=None, help="Only products in this category.")
@click.option("--search", default=None, help="Match against name and categories.")
def product_list(category: str | None, search: str | None) -> None:
    """List products in the catalogue."""
    products = ListProductsHandler(build_container().products).handle(
        category=category, search=search
    )

    if not products:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<34} {'Name':<24} {'Price':>10}")
    click.echo("-" * 70)
    for p in products:
        click.echo(f"{p.id:<34} {p.name:<24} {p.price:>10}")
        for v in p.variants:
            click.echo(f"  {v.id:<32} {v.name:<24} {v.price or p.price:>10}")


@click.command("show")
@click.option("--slug", required=True, help="Product slug.")
def product_show(slug: str) -> None:
    """Show a product with its description and variants."""
    try:
        product = ShowProductHandler(build_container().products).handle(slug)
    except DomainException as exc:
        raise fail(exc)

    click.echo(f"{product.name}  ({product.slug}, id={product.id})")
    click.echo(f"Price:      {product.price}")
    click.echo(f"Categories: {', '.join(product.categories) or '-'}")
    if product.description:
        click.echo(product.description)
    for v in product.variants:
        click.echo(f"  {v.id:<32} {v.name:<24} {v.price or product.price:>10}")
