"""Application service: Register User use case."""

from __future__ import annotations

from uuid import uuid4

import structlog

from storefront.application.dto import UserDTO
from storefront.application.mapping import user_to_dto
from storefront.application.schemas import RegisterRequest
from storefront.domain.exceptions import ConflictError
from storefront.domain.model.user import User, UserRole
from storefront.domain.repository.user_repository import UserRepository
from storefront.domain.service.password_hasher import hash_password

logger = structlog.get_logger(__name__)


class RegisterUserHandler:

    def __init__(self, user_repo: UserRepository) -> None:
        self._user_repo = user_repo

    def handle(
        self, request: RegisterRequest, role: UserRole = UserRole.CUSTOMER
    ) -> UserDTO:
        """Create an account. Self-registered users are customers."""
        email = request.email.lower()
        if self._user_repo.get_by_email(email) is not None:
            raise ConflictError("User with this email already exists")

        user = User(
            id=uuid4().hex,
            name=request.name,
            email=email,
            password_hash=hash_password(request.password),
            role=role,
        )
        self._user_repo.save(user)

        logger.info("user_registered", user_id=user.id, role=role.value)
        return user_to_dto(user)
