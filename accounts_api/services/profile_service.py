from datetime import UTC, datetime
from typing import Callable

from loguru import logger
from sqlmodel import Session

from accounts_api.models.domain import User
from accounts_api.models.schemas.requests.user import UpdateUserRequest
from accounts_api.models.schemas.responses.profile import ProfileUpdateResponse
from accounts_api.repositories.user_repository import UserRepository
from accounts_api.repositories.world_repository import WorldRepository
from accounts_api.services import profile_checks
from accounts_api.services.base_service import BaseService
from accounts_api.services.profile_checks import CheckResult
from accounts_api.utils.errors import USER_NOT_FOUND


class ProfileService(BaseService):
    """Service applying partial profile updates to users"""

    def __init__(self, db: Session):
        super().__init__(db)
        self.user_repository = UserRepository(db)
        self.world_repository = WorldRepository(db)

    def _checks(
        self,
    ) -> list[tuple[str, Callable[[UpdateUserRequest, User], CheckResult]]]:
        """Field checks in the order they run, keyed by JSON field name"""
        return [
            (
                "email",
                lambda request, user: profile_checks.check_email(
                    request, user, self.user_repository
                ),
            ),
            ("status", profile_checks.check_status),
            ("statusDescription", profile_checks.check_status_description),
            ("bio", profile_checks.check_bio),
            ("userIcon", profile_checks.check_user_icon),
            ("profilePicOverride", profile_checks.check_profile_pic_override),
            ("tags", profile_checks.check_tags),
            (
                "homeLocation",
                lambda request, user: profile_checks.check_home_location(
                    request, user, self.world_repository
                ),
            ),
        ]

    def apply_update(
        self, user: User, request: UpdateUserRequest
    ) -> ProfileUpdateResponse:
        """Run every field check against the user without persisting"""
        result = ProfileUpdateResponse()
        for field, check in self._checks():
            applied, error = check(request, user)
            if error is not None:
                logger.debug(f"Field {field} rejected for user {user.id}: {error.value}")
                result.errors[field] = error
            elif applied:
                logger.debug(f"Field {field} applied for user {user.id}")
                result.applied.append(field)
        return result

    def update_profile(
        self, user: User, request: UpdateUserRequest
    ) -> ProfileUpdateResponse:
        """Apply the update and persist the user if any field changed"""
        result = self.apply_update(user, request)
        if result.changed:
            user.updated_at = datetime.now(UTC)
            self.user_repository.update(user)
            logger.info(f"Updated profile of user {user.id}: {result.applied}")
        return result

    def update_profile_by_id(
        self, user_id: str, request: UpdateUserRequest
    ) -> ProfileUpdateResponse:
        """Load a user by ID and apply the update"""
        user = self.user_repository.get(user_id)
        if not user:
            raise USER_NOT_FOUND(user_id)
        return self.update_profile(user, request)
