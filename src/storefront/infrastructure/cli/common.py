"""Helpers shared by the CLI command modules."""

from __future__ import annotations

import click

from storefront.domain.exceptions import DomainException, EntityNotFoundError, ValidationError
from storefront.domain.model.user import User
from storefront.infrastructure.bootstrap import Container


def fail(exc: DomainException) -> click.ClickException:
    """Turn a domain error into a ClickException, listing field errors."""
    message = str(exc)
    if isinstance(exc, ValidationError) and exc.errors:
        details = "\n".join(f"  {e['field']}: {e['message']}" for e in exc.errors)
        message = f"{message}\n{details}"
    return click.ClickException(message)


def resolve_user(container: Container, email: str) -> User:
    user = container.users.get_by_email(email)
    if user is None:
        raise fail(EntityNotFoundError(f"User not found: '{email}'"))
    return user
