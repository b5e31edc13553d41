"""Repositories — data-access layer, one file per aggregate root.

Convention:
    - Every repository takes the request-scoped AsyncSession in its constructor
    - Repositories flush but never commit; the service owns the transaction
"""
