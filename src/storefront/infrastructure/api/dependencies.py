"""FastAPI dependencies: the wired container and the calling user.

Session handling is out of scope; the caller is identified by the
``X-User-Id`` header, resolved against the user repository.
"""

from __future__ import annotations

from fastapi import Depends, Header, Request

from storefront.domain.exceptions import AuthenticationError
from storefront.domain.model.user import User
from storefront.infrastructure.bootstrap import Container


def get_container(request: Request) -> Container:
    return request.app.state.container


def current_user(
    x_user_id: str | None = Header(default=None),
    container: Container = Depends(get_container),
) -> User:
    if not x_user_id:
        raise AuthenticationError("Unauthorized")
    user = container.users.get_by_id(x_user_id)
    if user is None:
        raise AuthenticationError("Unauthorized")
    return user
