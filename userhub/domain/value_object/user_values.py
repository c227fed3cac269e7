"""
Value objects for user fields.

Each value object is immutable and validates its input on construction.
Invalid input raises InvalidFieldError, so an instance always holds a
well-formed value.
"""
import re
from dataclasses import dataclass
from typing import Optional

from ..exception.user_exceptions import InvalidFieldError

EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")
TAG_NAME_PATTERN = re.compile(r"^[A-Za-z0-9_]{1,30}$")

MAX_UUID_LENGTH = 255
MAX_NAME_LENGTH = 100
MAX_EMAIL_LENGTH = 255
MAX_PASSWORD_LENGTH = 255
MAX_BIO_LENGTH = 500
MAX_PROFILE_IMAGE_LENGTH = 2048


def _require_text(field: str, value, max_length: int) -> str:
    if not isinstance(value, str):
        raise InvalidFieldError(field, "must be a string")
    stripped = value.strip()
    if not stripped:
        raise InvalidFieldError(field, "must not be empty")
    if len(stripped) > max_length:
        raise InvalidFieldError(field, f"must be at most {max_length} characters")
    return stripped


@dataclass(frozen=True)
class UserUuid:
    """Opaque unique user identifier"""
    value: str

    def __post_init__(self):
        object.__setattr__(self, "value", _require_text("uuid", self.value, MAX_UUID_LENGTH))

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class UserName:
    """Display name"""
    value: str

    def __post_init__(self):
        object.__setattr__(self, "value", _require_text("name", self.value, MAX_NAME_LENGTH))

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Email:
    """Email address, normalized to lower case"""
    value: str

    def __post_init__(self):
        email = _require_text("email", self.value, MAX_EMAIL_LENGTH).lower()
        if not EMAIL_PATTERN.match(email):
            raise InvalidFieldError("email", "is not a valid email address")
        object.__setattr__(self, "value", email)

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Password:
    """Pre-hashed password. Stored exactly as given."""
    value: str

    def __post_init__(self):
        _require_text("password", self.value, MAX_PASSWORD_LENGTH)

    def __repr__(self) -> str:
        return "Password(value='***')"


@dataclass(frozen=True)
class TagName:
    """Unique public handle"""
    value: str

    def __post_init__(self):
        tag_name = _require_text("tag_name", self.value, MAX_NAME_LENGTH)
        if not TAG_NAME_PATTERN.match(tag_name):
            raise InvalidFieldError(
                "tag_name", "must be 1-30 characters of letters, digits or underscore"
            )
        object.__setattr__(self, "value", tag_name)

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Bio:
    """Optional free text. None becomes an empty string."""
    value: Optional[str] = ""

    def __post_init__(self):
        value = "" if self.value is None else self.value
        if not isinstance(value, str):
            raise InvalidFieldError("bio", "must be a string")
        if len(value) > MAX_BIO_LENGTH:
            raise InvalidFieldError("bio", f"must be at most {MAX_BIO_LENGTH} characters")
        object.__setattr__(self, "value", value)

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class ProfileImage:
    """Optional profile image reference. None becomes an empty string."""
    value: Optional[str] = ""

    def __post_init__(self):
        value = "" if self.value is None else self.value
        if not isinstance(value, str):
            raise InvalidFieldError("profile_image", "must be a string")
        value = value.strip()
        if len(value) > MAX_PROFILE_IMAGE_LENGTH:
            raise InvalidFieldError(
                "profile_image", f"must be at most {MAX_PROFILE_IMAGE_LENGTH} characters"
            )
        object.__setattr__(self, "value", value)

    def __str__(self) -> str:
        return self.value
