"""Database Package — SQLAlchemy declarative base shared by all ORM models.

Invariants:
    - Single async engine per process (initialized via infrastructure.database.init_db)
    - All sessions are async (AsyncSession)
"""
