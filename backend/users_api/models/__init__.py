"""ORM Models — SQLAlchemy declarative models for all domain entities.

Invariants:
    - All models inherit from Base (db/base.py)
    - Every model is imported here so Base.metadata is complete before
      create_all, verify_schema or alembic autogenerate runs

Design Decisions:
    - One file per entity for locality
"""

from users_api.models.user import User  # noqa: F401
