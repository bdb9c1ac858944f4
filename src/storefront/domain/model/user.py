"""User and Address entities.

Users own orders and addresses. Only the password hash is ever stored.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum


class UserRole(Enum):
    CUSTOMER = "customer"
    ADMIN = "admin"


@dataclass
class User:
    id: str
    name: str
    email: str
    password_hash: str
    role: UserRole = UserRole.CUSTOMER
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @property
    def is_admin(self) -> bool:
        return self.role is UserRole.ADMIN


@dataclass
class Address:
    """A postal address belonging to one user."""

    id: str
    user_id: str
    full_name: str
    street: str
    city: str
    postal_code: str
    country: str
    state: str | None = None

    def belongs_to(self, user_id: str) -> bool:
        return self.user_id == user_id
