"""
Hauge API — Authentication Schemas
===================================

What:  Registration/login payloads and the token response.
"""

import re
from typing import Any, ClassVar, Dict

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator

from app.schemas.user import UserResponse, check_username

# At least 8 characters with a lowercase letter, an uppercase letter, a digit
# and a character that is neither letter nor digit.
PASSWORD_POLICY = re.compile(r"(?=.*[a-z])(?=.*[A-Z])(?=.*[0-9])(?=.*[^A-Za-z0-9]).{8,}")
PASSWORD_POLICY_MESSAGE = (
    "Password must be at least 8 characters long and include uppercase, "
    "lowercase, number, and a special character"
)


class RegisterRequest(BaseModel):
    """POST /auth/register body."""

    error_messages: ClassVar[Dict[str, str]] = {
        "email": "Email must be a valid email",
        "password": PASSWORD_POLICY_MESSAGE,
    }

    model_config = ConfigDict(extra="ignore")

    username: str
    email: EmailStr
    password: str

    @field_validator("username", mode="before")
    @classmethod
    def validate_username(cls, v: Any) -> str:
        return check_username(v, min_length=3)

    @field_validator("password", mode="before")
    @classmethod
    def validate_password(cls, v: Any) -> str:
        if not isinstance(v, str) or not PASSWORD_POLICY.fullmatch(v):
            raise ValueError(PASSWORD_POLICY_MESSAGE)
        return v


class LoginRequest(BaseModel):
    """POST /auth/login body. No complexity check on the password here."""

    error_messages: ClassVar[Dict[str, str]] = {
        "email": "Email must be a valid email",
        "password": "Password is required",
    }

    model_config = ConfigDict(extra="ignore")

    email: EmailStr
    password: str

    @field_validator("password", mode="before")
    @classmethod
    def validate_password(cls, v: Any) -> str:
        if not isinstance(v, str) or not v:
            raise ValueError("Password is required")
        return v


class AuthResponse(BaseModel):
    """
    What:  Returned by register (201) and login (200).
    How:   Client sends `token` back as `Authorization: Bearer <token>`.
    """

    token: str = Field(description="Signed bearer token, valid for 24 hours")
    user: UserResponse
