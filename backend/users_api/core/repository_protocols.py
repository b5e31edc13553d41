"""Boundary Protocols — contracts between the service layer and persistence.

Invariants:
    - Services depend on UserRepository, never on a concrete SQLAlchemy class
    - Repositories never commit — transaction boundaries belong to the service
    - save() flushes, so constraint violations surface inside the caller's transaction

Design Decisions:
    - Protocol over ABC: structural subtyping, no inheritance hierarchy
    - Single capability interface with one variant (SqlAlchemyUserRepository)
"""

from typing import TYPE_CHECKING, Protocol

from users_api.core.domain_types import UserId

if TYPE_CHECKING:
    from users_api.models.user import User


class UserRepository(Protocol):
    """Contract for user persistence — implemented by repositories/."""
    async def find_all(self) -> list["User"]: ...
    async def find_by_id(self, user_id: UserId) -> "User | None": ...
    async def save(self, user: "User") -> "User": ...
    async def delete_by_id(self, user_id: UserId) -> None: ...
