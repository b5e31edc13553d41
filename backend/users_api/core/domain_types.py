"""Domain Types — rich types that replace bare primitives at layer boundaries.

Invariants:
    - UserId wraps the store-generated integer key — assigned on insert, never reassigned

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
"""

from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

UserId = NewType("UserId", int)
