"""Core Layer — domain types, error hierarchy and boundary contracts. No IO, no DB.

Invariants:
    - No module in core/ imports from services/, api/, infrastructure/, repositories/ or db/
"""
