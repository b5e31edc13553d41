"""SQLAlchemy User Repository — UserRepository implementation over the users table.

Invariants:
    - find_all ordered by id (insertion order of store-assigned keys)
    - save inserts when id is unset, otherwise upserts by id
    - delete_by_id is a no-op for a missing id; callers check existence first
    - Never commits — runs inside the caller's transaction
"""

import logging

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from users_api.core.domain_types import UserId
from users_api.models.user import User

logger = logging.getLogger(__name__)


class SqlAlchemyUserRepository:
    """Persistence for User entities via an AsyncSession."""

    def __init__(self, db: AsyncSession):
        self._db = db

    async def find_all(self) -> list[User]:
        result = await self._db.execute(select(User).order_by(User.id))
        return list(result.scalars().all())

    async def find_by_id(self, user_id: UserId) -> User | None:
        return await self._db.get(User, user_id)

    async def save(self, user: User) -> User:
        """Insert or update, then flush so the id is assigned and constraints checked."""
        if user.id is None:
            self._db.add(user)
        else:
            # merge: UPDATE when the row exists, INSERT with this id otherwise
            user = await self._db.merge(user)
        await self._db.flush()
        return user

    async def delete_by_id(self, user_id: UserId) -> None:
        result = await self._db.execute(delete(User).where(User.id == user_id))
        if not result.rowcount:
            logger.debug(
                f"delete_by_id: no user row {user_id}",
                extra={"user_id": user_id},
            )
