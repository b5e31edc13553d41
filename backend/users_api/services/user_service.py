"""User Service — list, get, save and delete users inside explicit transactions.

Invariants:
    - Reads run in a read transaction, save/delete in a write transaction
    - All four operations are scoped the same way (delete included)
    - A unique-email violation rolls back and surfaces as EmailConflictError
    - Passwords never reach the logs

Design Decisions:
    - Concrete class over interface + impl: there is exactly one backing store
    - get_user_service builds the service per request from the request-scoped
      session — explicit construction, no container
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import Depends
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from users_api.core.domain_types import UserId
from users_api.core.errors import EmailConflictError, ErrorContext
from users_api.core.repository_protocols import UserRepository
from users_api.infrastructure.database import get_db
from users_api.models.user import User
from users_api.repositories.user_repository import SqlAlchemyUserRepository

logger = logging.getLogger(__name__)


class UserService:
    """User operations over a UserRepository, scoped to one AsyncSession."""

    def __init__(self, db: AsyncSession, repository: UserRepository):
        self._db = db
        self._repository = repository

    @asynccontextmanager
    async def _transaction(self) -> AsyncGenerator[None, None]:
        """Commit on success, roll back on any exception."""
        if self._db.in_transaction():
            # autobegun by an earlier statement on this session — take it over
            try:
                yield
                await self._db.commit()
            except Exception:
                await self._db.rollback()
                raise
        else:
            async with self._db.begin():
                yield

    async def get_all(self) -> list[User]:
        async with self._transaction():
            return await self._repository.find_all()

    async def user_by_id(self, user_id: UserId) -> User | None:
        async with self._transaction():
            return await self._repository.find_by_id(user_id)

    async def save(self, user: User) -> User:
        """Insert (id unset) or update (id set). Raises EmailConflictError on duplicate email."""
        # captured up front: rollback expires the instance
        user_id, email = user.id, user.email
        try:
            async with self._transaction():
                saved = await self._repository.save(user)
        except IntegrityError as e:
            logger.warning(
                f"Rejected user save, email already taken: {e.orig}",
                extra={"user_id": user_id, "error_code": "EMAIL_CONFLICT"},
            )
            raise EmailConflictError(
                email, ErrorContext(user_id=user_id),
            ) from e
        logger.info(
            f"User {saved.id} {'created' if user_id is None else 'updated'}",
            extra={"user_id": saved.id},
        )
        return saved

    async def delete(self, user_id: UserId) -> None:
        async with self._transaction():
            await self._repository.delete_by_id(user_id)
        logger.info(f"User {user_id} deleted", extra={"user_id": user_id})


async def get_user_service(db: AsyncSession = Depends(get_db)) -> UserService:
    """FastAPI dependency — one service per request, bound to the request session."""
    return UserService(db, SqlAlchemyUserRepository(db))
