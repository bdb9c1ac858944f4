"""Application services: Add Address / List Addresses use cases."""

from __future__ import annotations

from uuid import uuid4

from storefront.application.dto import AddressDTO
from storefront.application.mapping import address_to_dto
from storefront.application.schemas import AddressCreateRequest
from storefront.domain.model.user import Address
from storefront.domain.repository.user_repository import AddressRepository


class AddAddressHandler:

    def __init__(self, address_repo: AddressRepository) -> None:
        self._address_repo = address_repo

    def handle(self, user_id: str, request: AddressCreateRequest) -> AddressDTO:
        address = Address(
            id=uuid4().hex,
            user_id=user_id,
            full_name=request.full_name,
            street=request.street,
            city=request.city,
            state=request.state,
            postal_code=request.postal_code,
            country=request.country,
        )
        self._address_repo.save(address)
        return address_to_dto(address)


class ListAddressesHandler:

    def __init__(self, address_repo: AddressRepository) -> None:
        self._address_repo = address_repo

    def handle(self, user_id: str) -> list[AddressDTO]:
        return [address_to_dto(a) for a in self._address_repo.list_for_user(user_id)]
