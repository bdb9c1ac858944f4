"""Application service: Authenticate User use case (credential check)."""

from __future__ import annotations

from storefront.application.dto import UserDTO
from storefront.application.mapping import user_to_dto
from storefront.domain.exceptions import AuthenticationError
from storefront.domain.repository.user_repository import UserRepository
from storefront.domain.service.password_hasher import verify_password


class AuthenticateUserHandler:

    def __init__(self, user_repo: UserRepository) -> None:
        self._user_repo = user_repo

    def handle(self, email: str, password: str) -> UserDTO:
        # Same message whether the email or the password is wrong.
        user = self._user_repo.get_by_email(email)
        if user is None or not verify_password(password, user.password_hash):
            raise AuthenticationError("Invalid email or password")
        return user_to_dto(user)
