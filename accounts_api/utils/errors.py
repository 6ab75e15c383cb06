from enum import Enum
from typing import Optional

from fastapi import HTTPException


class APIError(HTTPException):
    """Base API error class with predefined status codes and messages."""

    def __init__(self, status_code: int, detail: str):
        super().__init__(status_code=status_code, detail=detail)


class NotFoundError(APIError):
    """Resource not found error."""

    def __init__(self, resource: str, resource_id: Optional[str] = None):
        detail = f"{resource} not found"
        if resource_id:
            detail = f"{resource} with id {resource_id} not found"
        super().__init__(status_code=404, detail=detail)


class UpdateErrorKind(str, Enum):
    """Reasons a single profile field update is rejected."""

    INVALID_CREDENTIALS = "invalid_credentials"
    EMAIL_TAKEN = "email_taken"
    INVALID_STATUS = "invalid_status"
    INVALID_STATUS_DESCRIPTION = "invalid_status_description"
    BIO_TOO_LONG = "bio_too_long"
    USER_ICON_STAFF_ONLY = "user_icon_staff_only"
    PROFILE_PIC_OVERRIDE_STAFF_ONLY = "profile_pic_override_staff_only"
    WORLD_NOT_FOUND = "world_not_found"
    WORLD_PRIVATE = "world_private"

    @property
    def status_code(self) -> int:
        return _ERROR_RESPONSES[self][0]

    @property
    def detail(self) -> str:
        return _ERROR_RESPONSES[self][1]


_ERROR_RESPONSES: dict[UpdateErrorKind, tuple[int, str]] = {
    UpdateErrorKind.INVALID_CREDENTIALS: (401, "Invalid username/email or password"),
    UpdateErrorKind.EMAIL_TAKEN: (409, "A user with this email already exists"),
    UpdateErrorKind.INVALID_STATUS: (400, "Invalid user status"),
    UpdateErrorKind.INVALID_STATUS_DESCRIPTION: (400, "Invalid status description"),
    UpdateErrorKind.BIO_TOO_LONG: (400, "Bio is too long"),
    UpdateErrorKind.USER_ICON_STAFF_ONLY: (
        403,
        "Only staff may set a user icon",
    ),
    UpdateErrorKind.PROFILE_PIC_OVERRIDE_STAFF_ONLY: (
        403,
        "Only staff may set a profile picture override",
    ),
    UpdateErrorKind.WORLD_NOT_FOUND: (404, "World not found"),
    UpdateErrorKind.WORLD_PRIVATE: (
        403,
        "World is private and not owned by the user",
    ),
}


class ProfileUpdateError(APIError):
    """A profile field was rejected."""

    def __init__(self, field: str, kind: UpdateErrorKind):
        self.field = field
        self.kind = kind
        super().__init__(status_code=kind.status_code, detail=kind.detail)


def USER_NOT_FOUND(id):
    return NotFoundError("User", str(id))
