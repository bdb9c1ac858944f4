"""JSON-file-backed implementations of UserRepository and AddressRepository."""

from __future__ import annotations

from datetime import datetime
from pathlib import Path

from storefront.domain.model.user import Address, User, UserRole
from storefront.domain.repository.user_repository import (
    AddressRepository,
    UserRepository,
)
from storefront.infrastructure.persistence.json_file import JsonFile


class JsonUserRepository(UserRepository):

    def __init__(self, file_path: Path) -> None:
        self._file = JsonFile(file_path, default=[])

    def get_by_id(self, user_id: str) -> User | None:
        for raw in self._file.read():
            if raw["id"] == user_id:
                return self._to_domain(raw)
        return None

    def get_by_email(self, email: str) -> User | None:
        for raw in self._file.read():
            if raw["email"].lower() == email.lower():
                return self._to_domain(raw)
        return None

    def save(self, user: User) -> None:
        with self._file.locked():
            records = self._file.read()
            for i, raw in enumerate(records):
                if raw["id"] == user.id:
                    records[i] = self._to_raw(user)
                    break
            else:
                records.append(self._to_raw(user))
            self._file.write(records)

    @staticmethod
    def _to_raw(user: User) -> dict:
        return {
            "id": user.id,
            "name": user.name,
            "email": user.email,
            "password_hash": user.password_hash,
            "role": user.role.value,
            "created_at": user.created_at.isoformat(),
        }

    @staticmethod
    def _to_domain(raw: dict) -> User:
        return User(
            id=raw["id"],
            name=raw["name"],
            email=raw["email"],
            password_hash=raw["password_hash"],
            role=UserRole(raw.get("role", UserRole.CUSTOMER.value)),
            created_at=datetime.fromisoformat(raw["created_at"]),
        )


class JsonAddressRepository(AddressRepository):

    def __init__(self, file_path: Path) -> None:
        self._file = JsonFile(file_path, default=[])

    def get_by_id(self, address_id: str) -> Address | None:
        for raw in self._file.read():
            if raw["id"] == address_id:
                return Address(**raw)
        return None

    def list_for_user(self, user_id: str) -> list[Address]:
        return [Address(**raw) for raw in self._file.read() if raw["user_id"] == user_id]

    def save(self, address: Address) -> None:
        raw_address = {
            "id": address.id,
            "user_id": address.user_id,
            "full_name": address.full_name,
            "street": address.street,
            "city": address.city,
            "state": address.state,
            "postal_code": address.postal_code,
            "country": address.country,
        }
        with self._file.locked():
            records = self._file.read()
            for i, raw in enumerate(records):
                if raw["id"] == address.id:
                    records[i] = raw_address
                    break
            else:
                records.append(raw_address)
            self._file.write(records)
