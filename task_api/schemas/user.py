"""User Schemas — request/response models for user endpoints.

Invariants:
    - name: 1-100 chars, stripped, non-empty
    - email: basic address shape, surrounding whitespace stripped, stored as sent otherwise
"""

from pydantic import BaseModel, Field, field_validator

_EMAIL_PATTERN = r"^[^@\s]+@[^@\s]+\.[^@\s]+$"


class CreateUserRequest(BaseModel):
    """User creation — validates name and email shape."""
    name: str = Field(min_length=1, max_length=100)
    email: str = Field(max_length=255, pattern=_EMAIL_PATTERN)

    @field_validator("name")
    @classmethod
    def strip_name(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("name cannot be empty or whitespace")
        return v

    @field_validator("email")
    @classmethod
    def strip_email(cls, v: str) -> str:
        return v.strip()


class UserResponse(BaseModel):
    """User response — also embedded as the assignee summary of a task."""
    id: int
    name: str
    email: str
