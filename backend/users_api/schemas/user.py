"""User Schemas — Pydantic models with field-level validation for the /users endpoints.

Invariants:
    - name, email, password: required, 1-255 chars
    - name and email stripped, non-empty after stripping
    - Unknown fields (including "id") are ignored — the store owns ids
    - UserResponse exposes exactly id, name, email, password

Design Decisions:
    - UserUpdate is a full replacement body, not a patch: every field required
    - from_attributes on UserResponse: built straight from the ORM entity
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator


class UserCreate(BaseModel):
    """User creation body."""
    name: str = Field(min_length=1, max_length=255)
    email: str = Field(min_length=1, max_length=255)
    password: str = Field(min_length=1, max_length=255)

    @field_validator("name", "email")
    @classmethod
    def strip_text(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("cannot be empty or whitespace")
        return v


class UserUpdate(UserCreate):
    """User update body — overwrites name, email and password."""


class UserResponse(BaseModel):
    """User response — public-facing user data."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    email: str
    password: str
