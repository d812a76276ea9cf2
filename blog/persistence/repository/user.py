"""PostgreSQL implementation of User repository."""

from typing import Optional

import logfire
from sqlalchemy import desc, func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from blog.domain.error import DuplicateError
from blog.domain.model import User
from blog.domain.repository import UserRepository
from blog.domain.value import Role, UserId
from blog.persistence.mappers import row_to_user, user_to_dict
from blog.persistence.tables import users_table


class PostgresUserRepository(UserRepository):
    """PostgreSQL implementation of UserRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID.

        Args:
            user_id: User ID to look up

        Returns:
            User if found, None otherwise
        """
        stmt = select(users_table).where(users_table.c.id == user_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_user(dict(row)) if row else None

    async def find_by_ids(self, user_ids: list[UserId]) -> dict[UserId, User]:
        """Find several users in a single query."""
        if not user_ids:
            return {}
        stmt = select(users_table).where(users_table.c.id.in_(user_ids))
        result = await self.session.execute(stmt)
        users = [row_to_user(dict(row)) for row in result.mappings().all()]
        return {user.id: user for user in users}

    async def find_by_email(self, email: str) -> Optional[User]:
        """Find a user by their email.

        Emails are stored lower-cased, so the lookup lower-cases too.
        """
        stmt = select(users_table).where(users_table.c.email == email.lower())
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_user(dict(row)) if row else None

    async def find_ids_by_name(self, fragment: str) -> list[UserId]:
        """Find IDs of users whose name contains the fragment."""
        stmt = select(users_table.c.id).where(
            users_table.c.name.icontains(fragment, autoescape=True)
        )
        result = await self.session.execute(stmt)
        return [UserId(row.id) for row in result.fetchall()]

    async def find_all(self, limit: int = 10, offset: int = 0) -> list[User]:
        """List users, newest first."""
        stmt = (
            select(users_table)
            .order_by(desc(users_table.c.created_at), users_table.c.id)
            .limit(limit)
            .offset(offset)
        )
        result = await self.session.execute(stmt)
        return [row_to_user(dict(row)) for row in result.mappings().all()]

    async def count(self, role: Optional[Role] = None) -> int:
        """Count users, optionally only those with a role."""
        stmt = select(func.count()).select_from(users_table)
        if role is not None:
            stmt = stmt.where(users_table.c.role == role.value)
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def save(self, user: User) -> User:
        """Save a user (create or update).

        Args:
            user: User to save

        Returns:
            Saved user

        Raises:
            DuplicateError: If the email is taken by another user
        """
        existing = await self.find_by_id(user.id)

        user_dict = user_to_dict(user)

        try:
            if existing:
                stmt = (
                    users_table.update()
                    .where(users_table.c.id == user.id)
                    .values(**user_dict)
                )
            else:
                stmt = users_table.insert().values(**user_dict)
            await self.session.execute(stmt)
            await self.session.flush()
        except IntegrityError as e:
            logfire.warn("User email conflict", user_id=str(user.id))
            raise DuplicateError("Email is already taken") from e

        return user

    async def delete(self, user_id: UserId) -> None:
        """Delete a user (hard delete)."""
        stmt = users_table.delete().where(users_table.c.id == user_id)
        await self.session.execute(stmt)
        await self.session.flush()
