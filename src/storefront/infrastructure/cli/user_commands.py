"""CLI commands for accounts and addresses."""

from __future__ import annotations

import click

from storefront.application.authenticate_user import AuthenticateUserHandler
from storefront.application.manage_addresses import AddAddressHandler, ListAddressesHandler
from storefront.application.register_user import RegisterUserHandler
from storefront.application.schemas import AddressCreateRequest, RegisterRequest, parse
from storefront.domain.exceptions import DomainException
from storefront.infrastructure.bootstrap import build_container
from storefront.infrastructure.cli.common import fail, resolve_user


@click.command("register")
@click.option("--name", required=True)
@click.option("--email", required=True)
@click.password_option()
def user_register(name: str, email: str, password: str) -> None:
    """Create a customer account."""
    handler = RegisterUserHandler(build_container().users)

    try:
        user = handler.handle(
            parse(RegisterRequest, {"name": name, "email": email, "password": password})
        )
    except DomainException as exc:
        raise fail(exc)

    click.echo(f"User '{user.email}' registered (id={user.id}, role={user.role})")


@click.command("login")
@click.option("--email", required=True)
@click.option("--password", prompt=True, hide_input=True)
def user_login(email: str, password: str) -> None:
    """Check credentials and print the user ID to use as X-User-Id."""
    handler = AuthenticateUserHandler(build_container().users)

    try:
        user = handler.handle(email, password)
    except DomainException as exc:
        raise fail(exc)

    click.echo(user.id)


@click.command("add")
@click.option("--user", "email", required=True, help="Email of the owner.")
@click.option("--full-name", required=True)
@click.option("--street", required=True)
@click.option("--city", required=True)
@click.option("--state", default=None)
@click.option("--postal-code", required=True)
@click.option("--country", required=True)
def address_add(
    email: str,
    full_name: str,
    street: str,
    city: str,
    state: str | None,
    postal_code: str,
    country: str,
) -> None:
    """Add a shipping/billing address."""
    container = build_container()
    user = resolve_user(container, email)
    handler = AddAddressHandler(container.addresses)

    try:
        address = handler.handle(
            user.id,
            parse(
                AddressCreateRequest,
                {
                    "full_name": full_name,
                    "street": street,
                    "city": city,
                    "state": state,
                    "postal_code": postal_code,
                    "country": country,
                },
            ),
        )
    except DomainException as exc:
        raise fail(exc)

    click.echo(f"Address added (id={address.id})")


@click.command("list")
@click.option("--user", "email", required=True, help="Email of the owner.")
def address_list(email: str) -> None:
    """List your addresses."""
    container = build_container()
    user = resolve_user(container, email)
    addresses = ListAddressesHandler(container.addresses).handle(user.id)

    if not addresses:
        click.echo("No addresses found.")
        return
    for a in addresses:
        click.echo(f"{a.id}  {a.full_name}, {a.street}, {a.city} {a.postal_code}, {a.country}")
