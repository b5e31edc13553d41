"""Services — business operations mediating between routes and repositories.

Invariants:
    - Services own transaction boundaries; repositories never commit
    - Dependencies are passed in explicitly (no module-level singletons)
"""
