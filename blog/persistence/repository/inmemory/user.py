"""In-memory user repository for testing."""

from typing import Optional

from blog.domain.error import DuplicateError
from blog.domain.model.user import User
from blog.domain.repository.user import UserRepository
from blog.domain.value import Role, UserId


class InMemoryUserRepository(UserRepository):
    """In-memory implementation of UserRepository for testing."""

    def __init__(self) -> None:
        self._users: dict[UserId, User] = {}

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID."""
        return self._users.get(user_id)

    async def find_by_ids(self, user_ids: list[UserId]) -> dict[UserId, User]:
        """Find several users at once."""
        return {uid: self._users[uid] for uid in user_ids if uid in self._users}

    async def find_by_email(self, email: str) -> Optional[User]:
        """Find a user by their email."""
        email = email.lower()
        for user in self._users.values():
            if user.email == email:
                return user
        return None

    async def find_ids_by_name(self, fragment: str) -> list[UserId]:
        """Find IDs of users whose name contains the fragment."""
        fragment = fragment.lower()
        return [u.id for u in self._users.values() if fragment in u.name.lower()]

    async def find_all(self, limit: int = 10, offset: int = 0) -> list[User]:
        """List users, newest first."""
        users = sorted(self._users.values(), key=lambda u: u.created_at, reverse=True)
        return users[offset : offset + limit]

    async def count(self, role: Optional[Role] = None) -> int:
        """Count users, optionally only those with a role."""
        return sum(1 for u in self._users.values() if role is None or u.role == role)

    async def save(self, user: User) -> User:
        """Save or update a user (email stays unique)."""
        for other in self._users.values():
            if other.email == user.email and other.id != user.id:
                raise DuplicateError("Email is already taken")
        self._users[user.id] = user
        return user

    async def delete(self, user_id: UserId) -> None:
        """Delete a user."""
        self._users.pop(user_id, None)
