"""User domain service."""

from datetime import datetime
from uuid import uuid4

import logfire
from sqlalchemy.exc import IntegrityError

from wingman.domain.error import (
    EmailTakenError,
    InvalidCredentialsError,
    NotFoundError,
)
from wingman.domain.model import User
from wingman.domain.repository import UserRepository
from wingman.domain.value import Bio, DisplayName, Email, UserId
from wingman.util.password import hash_password, verify_password

from .base import Service


class UserService(Service):
    """Domain service for user operations."""

    def __init__(self, user_repository: UserRepository) -> None:
        """Initialize user service.

        Args:
            user_repository: User repository
        """
        self.user_repository = user_repository

    async def get_by_id(self, user_id: UserId) -> User:
        """Get user by ID.

        Args:
            user_id: User ID

        Returns:
            User entity

        Raises:
            NotFoundError: If user not found
        """
        with logfire.span("user_service.get_by_id", user_id=str(user_id)):
            user = await self.user_repository.find_by_id(user_id)
            if not user:
                logfire.warn("User not found", user_id=str(user_id))
                raise NotFoundError("User", str(user_id))
            return user

    async def get_user_by_email(self, email: Email) -> User | None:
        """Get user by email.

        Args:
            email: User email

        Returns:
            User if found, None otherwise
        """
        with logfire.span("user_service.get_user_by_email"):
            return await self.user_repository.find_by_email(email)

    async def register(
        self,
        name: DisplayName,
        email: Email,
        password: str,
        bio: Bio | None = None,
    ) -> User:
        """Create a new user account.

        Args:
            name: Display name
            email: Email address
            password: Plain text password, hashed before storage
            bio: Optional bio

        Returns:
            Created user

        Raises:
            EmailTakenError: If the email is already registered
        """
        with logfire.span("user_service.register"):
            if await self.user_repository.find_by_email(email):
                logfire.warn("Registration with existing email")
                raise EmailTakenError(email.root)

            now = datetime.now()
            user = User(
                id=UserId(uuid4()),
                name=name,
                email=email,
                bio=bio,
                password_hash=hash_password(password),
                created_at=now,
                updated_at=now,
            )

            try:
                saved = await self.user_repository.save(user)
            except IntegrityError:
                # Lost a race with a concurrent registration
                logfire.warn("Duplicate email on insert")
                raise EmailTakenError(email.root)

            logfire.info("User registered", user_id=str(saved.id))
            return saved

    async def authenticate(self, email: Email, password: str) -> User:
        """Check credentials and return the matching user.

        Raises:
            InvalidCredentialsError: If no user has this email or the
                password does not match
        """
        with logfire.span("user_service.authenticate"):
            user = await self.user_repository.find_by_email(email)
            if not user or not verify_password(password, user.password_hash):
                logfire.warn("Failed login attempt")
                raise InvalidCredentialsError()
            logfire.info("User authenticated", user_id=str(user.id))
            return user

    async def update_profile(
        self,
        user_id: UserId,
        name: DisplayName | None = None,
        bio: Bio | None = None,
    ) -> User:
        """Update a user's name and/or bio.

        Args:
            user_id: User ID
            name: New display name, unchanged if None
            bio: New bio, unchanged if None

        Returns:
            Updated user

        Raises:
            NotFoundError: If user not found
        """
        with logfire.span("user_service.update_profile", user_id=str(user_id)):
            user = await self.get_by_id(user_id)

            updates: dict = {"updated_at": datetime.now()}
            if name is not None:
                updates["name"] = name
            if bio is not None:
                updates["bio"] = bio

            saved = await self.user_repository.save(user.model_copy(update=updates))
            logfire.info(
                "User profile updated",
                user_id=str(user_id),
                fields=sorted(k for k in updates if k != "updated_at"),
            )
            return saved
