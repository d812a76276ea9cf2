"""User domain service."""

from datetime import datetime, timezone
from typing import Optional
from uuid import uuid4

import logfire

from blog.domain.error import AuthenticationError, DuplicateError, NotFoundError
from blog.domain.model import User
from blog.domain.model.user import normalize_email
from blog.domain.repository import PostRepository, UserRepository
from blog.domain.value import Role, UserId

from .base import Service
from .password_service import PasswordService


class UserService(Service):
    """Domain service for user operations."""

    def __init__(
        self,
        user_repository: UserRepository,
        post_repository: PostRepository,
        password_service: PasswordService,
    ) -> None:
        """Initialize user service.

        Args:
            user_repository: User repository
            post_repository: Post repository (cascade on deletion)
            password_service: Password hashing service
        """
        self.user_repository = user_repository
        self.post_repository = post_repository
        self.password_service = password_service

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

    async def get_by_ids(self, user_ids: list[UserId]) -> dict[UserId, User]:
        """Look up several users at once, e.g. to resolve post authors."""
        if not user_ids:
            return {}
        return await self.user_repository.find_by_ids(list(dict.fromkeys(user_ids)))

    async def get_user_by_email(self, email: str) -> Optional[User]:
        """Get user by email.

        Args:
            email: User email (any case)

        Returns:
            User if found, None otherwise
        """
        with logfire.span("user_service.get_user_by_email"):
            return await self.user_repository.find_by_email(normalize_email(email))

    async def find_ids_by_name(self, fragment: str) -> list[UserId]:
        return await self.user_repository.find_ids_by_name(fragment.strip())

    async def count_admins(self) -> int:
        """Count admin accounts. Queried on every bootstrap call."""
        return await self.user_repository.count(role=Role.ADMIN)

    async def create_user(
        self, name: str, email: str, password: str, role: Role = Role.USER
    ) -> User:
        """Create a user with a hashed password.

        Args:
            name: Display name
            email: Email address (stored lower-cased)
            password: Plain-text password
            role: Role of the new account

        Returns:
            Saved user

        Raises:
            DuplicateError: If the email is already registered
        """
        with logfire.span("user_service.create_user", role=role.value):
            if await self.get_user_by_email(email):
                logfire.warn("Registration with existing email rejected")
                raise DuplicateError("User already exists with this email")

            now = datetime.now(timezone.utc)
            user = User(
                id=UserId(uuid4()),
                name=name,
                email=email,
                password_digest=self.password_service.hash(password),
                role=role,
                created_at=now,
                updated_at=now,
            )
            saved = await self.user_repository.save(user)
            logfire.info("User created", user_id=str(saved.id), role=role.value)
            return saved

    async def authenticate(self, email: str, password: str) -> User:
        """Check credentials.

        Unknown email and wrong password fail the same way.

        Raises:
            AuthenticationError: If the credentials do not match a user
        """
        with logfire.span("user_service.authenticate"):
            user = await self.get_user_by_email(email)
            if not user or not self.password_service.verify(
                password, user.password_digest
            ):
                logfire.warn("Login failed")
                raise AuthenticationError("Invalid credentials")
            logfire.info("User authenticated", user_id=str(user.id))
            return user

    async def update_profile(
        self, user: User, name: Optional[str] = None, email: Optional[str] = None
    ) -> User:
        """Change a user's name and/or email.

        Raises:
            DuplicateError: If the new email belongs to another user
        """
        with logfire.span("user_service.update_profile", user_id=str(user.id)):
            updates: dict = {"updated_at": datetime.now(timezone.utc)}
            if name is not None:
                updates["name"] = name
            if email is not None and normalize_email(email) != user.email:
                other = await self.get_user_by_email(email)
                if other and other.id != user.id:
                    logfire.warn("Profile email already taken", user_id=str(user.id))
                    raise DuplicateError("Email is already taken")
                updates["email"] = email

            updated = User.model_validate({**user.model_dump(), **updates})
            saved = await self.user_repository.save(updated)
            logfire.info("Profile updated", user_id=str(user.id))
            return saved

    async def list_users(self, limit: int, offset: int) -> tuple[list[User], int]:
        """Page of users, newest first, with the total count."""
        with logfire.span("user_service.list_users", limit=limit, offset=offset):
            users = await self.user_repository.find_all(limit=limit, offset=offset)
            total = await self.user_repository.count()
            return users, total

    async def change_role(self, user: User, role: Role) -> User:
        """Set a user's role."""
        with logfire.span(
            "user_service.change_role", user_id=str(user.id), role=role.value
        ):
            updated = user.model_copy(
                update={"role": role, "updated_at": datetime.now(timezone.utc)}
            )
            saved = await self.user_repository.save(updated)
            logfire.info("User role changed", user_id=str(user.id), role=role.value)
            return saved

    async def delete_user(self, user: User) -> None:
        """Delete a user and everything hanging off them.

        Their posts go with them, their likes are removed and their
        comments stay behind with no user attached.
        """
        with logfire.span("user_service.delete_user", user_id=str(user.id)):
            deleted_posts = await self.post_repository.purge_user(user.id)
            await self.user_repository.delete(user.id)
            logfire.info(
                "User deleted", user_id=str(user.id), deleted_posts=deleted_posts
            )
