"""
Hauge API — Input Validators
=============================

What:  Pure functions mapping a request payload to a ValidationResult.
How:   Field rules live on the pydantic request models in app.schemas; each
       validator runs one model and translates pydantic's errors into the
       ordered, client-facing messages. Bad input never raises here. The
       route handler calls `unwrap()`, which raises ValidationError (400).
Who:   Called by the route handlers before any storage access.

Validators:
    validate_user_id             route parameter, digits only
    validate_required_user_data  username (2-50) + email, both required
    validate_partial_user_data   same rules, both optional; {} is accepted
    validate_registration        username (3-50) + email + password policy
    validate_login               email + non-empty password
"""

import re
from dataclasses import dataclass
from typing import Any, Generic, List, Optional, Tuple, Type, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from app.exceptions import ValidationError
from app.schemas.auth import LoginRequest, RegisterRequest
from app.schemas.user import UserCreate, UserUpdate

T = TypeVar("T")

USER_ID_PATTERN = re.compile(r"[0-9]+")
USER_ID_MESSAGE = "ID must be a positive number"
NOT_AN_OBJECT_MESSAGE = "Request body must be a JSON object"


@dataclass(frozen=True)
class ValidationResult(Generic[T]):
    """
    Outcome of a validator: either a parsed value or an ordered tuple of
    failure messages. Never both.
    """

    value: Optional[T] = None
    errors: Tuple[str, ...] = ()

    @property
    def ok(self) -> bool:
        return not self.errors

    @classmethod
    def accept(cls, value: T) -> "ValidationResult[T]":
        return cls(value=value)

    @classmethod
    def reject(cls, *errors: str) -> "ValidationResult[T]":
        return cls(errors=tuple(errors))

    def unwrap(self) -> T:
        """Returns the parsed value, or raises ValidationError with the messages."""
        if self.errors:
            raise ValidationError(details=self.errors)
        return self.value


def _label(field: str) -> str:
    return field.replace("_", " ").capitalize()


def _messages(exc: PydanticValidationError, model: Type[BaseModel]) -> List[str]:
    """
    Translate pydantic errors into client-facing messages, in field order.

    Precedence per error:
        1. missing field              -> "<Field> is required"
        2. ValueError from a model
           field validator            -> its message verbatim
        3. anything else              -> the model's fallback for that field
    """
    fallbacks = getattr(model, "error_messages", {})
    messages: List[str] = []
    for err in exc.errors():
        field = str(err["loc"][0]) if err.get("loc") else ""
        if err["type"] == "missing":
            message = f"{_label(field)} is required"
        elif isinstance((err.get("ctx") or {}).get("error"), ValueError):
            message = str(err["ctx"]["error"])
        else:
            message = fallbacks.get(field, err["msg"])
        if message not in messages:
            messages.append(message)
    return messages


def _validate_with(model: Type[BaseModel], payload: Any) -> ValidationResult:
    if not isinstance(payload, dict):
        return ValidationResult.reject(NOT_AN_OBJECT_MESSAGE)
    try:
        return ValidationResult.accept(model.model_validate(payload))
    except PydanticValidationError as exc:
        return ValidationResult.reject(*_messages(exc, model))


def validate_user_id(raw: Any) -> ValidationResult[int]:
    """
    Accept only non-negative integers written as ASCII digits.

    "42" passes; "", "-1", "1.5", "abc", " 7" and "7\\n" are rejected.
    """
    if isinstance(raw, str) and USER_ID_PATTERN.fullmatch(raw):
        return ValidationResult.accept(int(raw))
    return ValidationResult.reject(USER_ID_MESSAGE)


def validate_required_user_data(payload: Any) -> ValidationResult[UserCreate]:
    return _validate_with(UserCreate, payload)


def validate_partial_user_data(payload: Any) -> ValidationResult[UserUpdate]:
    # An empty object passes; PATCH with no fields is a no-op.
    return _validate_with(UserUpdate, payload)


def validate_registration(payload: Any) -> ValidationResult[RegisterRequest]:
    return _validate_with(RegisterRequest, payload)


def validate_login(payload: Any) -> ValidationResult[LoginRequest]:
    return _validate_with(LoginRequest, payload)
