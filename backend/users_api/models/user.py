"""User ORM — the persisted record behind every /users endpoint.

Invariants:
    - id is assigned by the store on insert and never reassigned
    - email is unique across all users (uq_users_email, enforced by the database)
    - password stored exactly as provided; __repr__ never includes it

Design Decisions:
    - Explicit column names on every mapped_column: the field <-> column table is
      spelled out in code and checked against the live database at startup
    - BigInteger id with an INTEGER variant on SQLite: SQLite only auto-increments
      INTEGER PRIMARY KEY columns
"""

from sqlalchemy import BigInteger, Integer, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from users_api.db.base import Base

USER_ID_TYPE = BigInteger().with_variant(Integer, "sqlite")


class User(Base):
    """User entity — name, unique email and password."""
    __tablename__ = "users"
    __table_args__ = (UniqueConstraint("email", name="uq_users_email"),)

    id: Mapped[int] = mapped_column(
        "id", USER_ID_TYPE, primary_key=True, autoincrement=True,
    )
    name: Mapped[str] = mapped_column("name", String(255), nullable=False)
    email: Mapped[str] = mapped_column("email", String(255), nullable=False)
    password: Mapped[str] = mapped_column(
        "password", String(255), nullable=False,
    )

    def __repr__(self) -> str:
        return f"User(id={self.id!r}, name={self.name!r}, email={self.email!r})"
