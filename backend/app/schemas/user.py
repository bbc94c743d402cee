"""
Hauge API — User Request/Response Schemas
==========================================

What:  Pydantic models for the /users API contract.
How:   Request models carry the field rules; their field validators raise
       ValueError with the exact client-facing message, which
       app.services.validation lifts out of pydantic's error list.
       Response models never include the password hash.
"""

from typing import Any, ClassVar, Dict, Optional

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator

USERNAME_MAX_LENGTH = 50


def check_username(value: Any, min_length: int) -> str:
    """Shared username rule: a string of min_length..50 characters."""
    if not isinstance(value, str):
        raise ValueError("Username must be a string")
    if len(value) < min_length:
        raise ValueError(f"Username must be at least {min_length} characters")
    if len(value) > USERNAME_MAX_LENGTH:
        raise ValueError(f"Username must not exceed {USERNAME_MAX_LENGTH} characters")
    return value


# ══════════════════════════════════════════════════════════════════════════
# Request Models
# ══════════════════════════════════════════════════════════════════════════


class UserCreate(BaseModel):
    """
    What:  Full user payload. Both fields required.
    Who:   POST /users and PUT /users/{id}.
    """

    # Fallback messages for errors not raised by our own validators
    error_messages: ClassVar[Dict[str, str]] = {
        "email": "Email must be a valid email",
    }

    model_config = ConfigDict(extra="ignore")

    username: str
    email: EmailStr

    @field_validator("username", mode="before")
    @classmethod
    def validate_username(cls, v: Any) -> str:
        return check_username(v, min_length=2)


class UserUpdate(BaseModel):
    """
    What:  Partial user payload for PATCH /users/{id}.
    How:   Same rules as UserCreate, every field optional. A payload with no
           fields at all is valid and results in a no-op update.
    """

    error_messages: ClassVar[Dict[str, str]] = {
        "email": "Email must be a valid email",
    }

    model_config = ConfigDict(extra="ignore")

    username: Optional[str] = None
    email: Optional[EmailStr] = None

    @field_validator("username", mode="before")
    @classmethod
    def validate_username(cls, v: Any) -> Optional[str]:
        if v is None:
            return None
        return check_username(v, min_length=2)

    def changes(self) -> Dict[str, str]:
        """Only the fields the client actually supplied."""
        return self.model_dump(exclude_none=True)


# ══════════════════════════════════════════════════════════════════════════
# Response Models
# ══════════════════════════════════════════════════════════════════════════


class UserResponse(BaseModel):
    """
    What:  Public representation of a user.
    Who:   Returned by every /users endpoint and inside auth responses.
    """

    id: int = Field(description="Storage-assigned user identifier")
    username: str = Field(description="Display name")
    email: str = Field(description="Email address")

    model_config = ConfigDict(from_attributes=True)
