"""Abstract repositories for User and Address entities."""

from __future__ import annotations

from abc import ABC, abstractmethod

from storefront.domain.model.user import Address, User


class UserRepository(ABC):

    @abstractmethod
    def get_by_id(self, user_id: str) -> User | None:
        """Return a user by ID, or None."""

    @abstractmethod
    def get_by_email(self, email: str) -> User | None:
        """Return a user by (case-insensitive) email, or None."""

    @abstractmethod
    def save(self, user: User) -> None:
        """Persist a new or updated user."""


class AddressRepository(ABC):

    @abstractmethod
    def get_by_id(self, address_id: str) -> Address | None:
        """Return an address by ID, or None."""

    @abstractmethod
    def list_for_user(self, user_id: str) -> list[Address]:
        """Return every address owned by a user."""

    @abstractmethod
    def save(self, address: Address) -> None:
        """Persist a new or updated address."""
