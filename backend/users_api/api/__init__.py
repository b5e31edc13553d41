"""API Layer — FastAPI routes and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - Error responses use the structured JSON envelope, except users 404s (empty body)

Design Decisions:
    - Thin routes delegate to services
"""
