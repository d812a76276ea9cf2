"""User repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from blog.domain.model.user import User
from blog.domain.value import Role, UserId


class UserRepository(ABC):
    """Repository for User aggregate.

    Defines the contract for user persistence operations.
    Implementations live in the persistence layer.
    """

    @abstractmethod
    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID.

        Args:
            user_id: The user's unique identifier

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_ids(self, user_ids: list[UserId]) -> dict[UserId, User]:
        """Find several users at once.

        Args:
            user_ids: User IDs to look up (unknown IDs are skipped)

        Returns:
            Mapping of user ID to user for the users that exist
        """
        pass

    @abstractmethod
    async def find_by_email(self, email: str) -> Optional[User]:
        """Find a user by email (case-insensitive).

        Args:
            email: Email to search for

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_ids_by_name(self, fragment: str) -> list[UserId]:
        """Find IDs of users whose name contains ``fragment`` (case-insensitive).

        Args:
            fragment: Substring to match against user names

        Returns:
            Matching user IDs
        """
        pass

    @abstractmethod
    async def find_all(self, limit: int = 10, offset: int = 0) -> list[User]:
        """List users, newest first.

        Args:
            limit: Maximum number of users to return
            offset: Number of users to skip

        Returns:
            Page of users
        """
        pass

    @abstractmethod
    async def count(self, role: Optional[Role] = None) -> int:
        """Count users, optionally restricted to one role.

        Args:
            role: Only count users with this role

        Returns:
            Number of matching users
        """
        pass

    @abstractmethod
    async def save(self, user: User) -> User:
        """Save a user (create or update).

        Args:
            user: The user to save

        Returns:
            The saved user

        Raises:
            DuplicateError: If the email belongs to another user
        """
        pass

    @abstractmethod
    async def delete(self, user_id: UserId) -> None:
        """Delete a user (hard delete).

        Args:
            user_id: The user ID to delete
        """
        pass
