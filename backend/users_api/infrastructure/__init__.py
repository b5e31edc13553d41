"""Infrastructure Layer — database session management and logging setup.

Invariants:
    - Infrastructure never imports from services/ or api/
    - Raw driver/SQLAlchemy errors mapped to core.errors types at this boundary
"""
