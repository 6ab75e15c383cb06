from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator


class RequestModel(BaseModel):
    """Base request model; a JSON null decodes to the field default"""

    model_config = ConfigDict(populate_by_name=True)

    @field_validator("*", mode="before")
    @classmethod
    def null_as_default(cls, value: Any, info: ValidationInfo) -> Any:
        if value is None:
            return cls.model_fields[info.field_name].get_default(
                call_default_factory=True
            )
        return value


class RegisterRequest(RequestModel):
    """Payload sent to /auth/register."""

    accepted_tos_version: int = Field(default=0, alias="acceptedTOSVersion")
    username: str = ""
    password: str = ""
    email: str = ""
    day: str = ""
    month: str = ""
    year: str = ""
    recaptcha_code: str = Field(default="", alias="recaptchaCode")


class UpdateUserRequest(RequestModel):
    """Partial profile update. Empty strings and empty lists mean "not sent"."""

    accepted_tos_version: int = Field(default=0, alias="acceptedTOSVersion")
    bio: str = ""
    bio_links: list[str] | None = Field(default=None, alias="bioLinks")
    birthday: str = ""
    current_password: str = Field(default="", alias="currentPassword")
    display_name: str = Field(default="", alias="displayName")
    email: str = ""
    password: str = ""
    profile_pic_override: str = Field(default="", alias="profilePicOverride")
    status: str = ""
    status_description: str = Field(default="", alias="statusDescription")
    tags: list[str] | None = None
    unsubscribe: bool = False
    user_icon: str = Field(default="", alias="userIcon")
    home_location: str = Field(default="", alias="homeLocation")
