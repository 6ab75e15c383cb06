from datetime import UTC, datetime
from typing import List, Optional
from uuid import uuid4

from pydantic import EmailStr
from sqlalchemy import JSON
from sqlmodel import Column, DateTime, Field, SQLModel

from accounts_api.core.security import verify_password
from accounts_api.models.types.developer_type import (
    STAFF_DEVELOPER_TYPES,
    DeveloperType,
)
from accounts_api.models.types.release_status import ReleaseStatus
from accounts_api.models.types.user_status import UserStatus


def new_user_id() -> str:
    return f"usr_{uuid4()}"


def new_world_id() -> str:
    return f"wrld_{uuid4()}"


class User(SQLModel, table=True):
    """User account model."""

    __tablename__: str = "app_user"  # "user" is a reserved keyword in PostgreSQL

    id: str = Field(default_factory=new_user_id, primary_key=True, index=True)
    username: str = Field(unique=True, index=True, max_length=32)
    email: EmailStr = Field(unique=True, index=True)
    pending_email: Optional[str] = Field(default=None, index=True)
    hashed_password: str
    developer_type: DeveloperType = Field(default=DeveloperType.NONE)

    status: UserStatus = Field(default=UserStatus.ACTIVE)
    status_description: str = Field(default="")
    bio: str = Field(default="")
    bio_links: List[str] = Field(
        default_factory=list, sa_column=Column(JSON, nullable=False)
    )
    tags: List[str] = Field(
        default_factory=list, sa_column=Column(JSON, nullable=False)
    )
    user_icon: str = Field(default="")
    profile_pic_override: str = Field(default="")
    home_world_id: Optional[str] = Field(default=None, index=True)

    created_at: datetime = Field(
        default_factory=lambda: datetime.now(UTC),
        sa_column=Column(DateTime(timezone=True), nullable=False),
    )
    updated_at: datetime = Field(
        default_factory=lambda: datetime.now(UTC),
        sa_column=Column(DateTime(timezone=True), nullable=False),
    )

    def check_password(self, plain_password: str) -> bool:
        """Verify a plain password against the stored hash"""
        return verify_password(plain_password, self.hashed_password)

    def is_staff(self) -> bool:
        """Whether the account carries staff privilege"""
        return self.developer_type in STAFF_DEVELOPER_TYPES


class World(SQLModel, table=True):
    """World a user can visit or set as their home location."""

    id: str = Field(default_factory=new_world_id, primary_key=True, index=True)
    name: str = Field(max_length=64)
    author_id: str = Field(foreign_key="app_user.id", index=True)
    release_status: ReleaseStatus = Field(default=ReleaseStatus.PRIVATE, index=True)

    created_at: datetime = Field(
        default_factory=lambda: datetime.now(UTC),
        sa_column=Column(DateTime(timezone=True), nullable=False),
    )
    updated_at: datetime = Field(
        default_factory=lambda: datetime.now(UTC),
        sa_column=Column(DateTime(timezone=True), nullable=False),
    )
