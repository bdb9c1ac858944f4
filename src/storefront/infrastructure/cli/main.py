import click

from storefront.infrastructure.bootstrap import build_container
from storefront.infrastructure.cli.cart_commands import (
    cart_add,
    cart_checkout,
    cart_clear,
    cart_remove,
    cart_show,
    cart_update,
)
from storefront.infrastructure.cli.order_commands import (
    order_cancel,
    order_create,
    order_list,
    order_show,
    order_track,
    order_update,
)
from storefront.infrastructure.cli.product_commands import (
    product_add,
    product_add_variant,
    product_list,
    product_show,
)
from storefront.infrastructure.cli.user_commands import (
    address_add,
    address_list,
    user_login,
    user_register,
)
from storefront.infrastructure.config import Settings
from storefront.infrastructure.logging_config import configure_logging
from storefront.infrastructure.seed import seed_demo_data


@click.group()
def cli() -> None:
    """Storefront — orders, cart and checkout"""
    configure_logging(Settings.from_env().log_level)


@cli.group()
def order() -> None:
    """Manage orders."""


@cli.group()
def cart() -> None:
    """Manage the local cart."""


@cli.group()
def product() -> None:
    """Manage products."""


@cli.group()
def user() -> None:
    """Manage accounts."""


@cli.group()
def address() -> None:
    """Manage addresses."""


@cli.command()
def seed() -> None:
    """Load demo accounts and catalogue."""
    seed_demo_data(build_container())
    click.echo("Demo data loaded.")


@cli.command()
@click.option("--host", default="127.0.0.1", show_default=True)
@click.option("--port", default=8000, type=int, show_default=True)
@click.option("--reload", is_flag=True, default=False)
def serve(host: str, port: int, reload: bool) -> None:
    """Run the HTTP API."""
    import uvicorn

    uvicorn.run(
        "storefront.infrastructure.api.app:create_app",
        factory=True,
        host=host,
        port=port,
        reload=reload,
    )


# Register subcommands
order.add_command(order_cancel)
order.add_command(order_create)
order.add_command(order_list)
order.add_command(order_show)
order.add_command(order_track)
order.add_command(order_update)
cart.add_command(cart_add)
cart.add_command(cart_checkout)
cart.add_command(cart_clear)
cart.add_command(cart_remove)
cart.add_command(cart_show)
cart.add_command(cart_update)
product.add_command(product_add)
product.add_command(product_add_variant)
product.add_command(product_list)
product.add_command(product_show)
user.add_command(user_login)
user.add_command(user_register)
address.add_command(address_add)
address.add_command(address_list)
