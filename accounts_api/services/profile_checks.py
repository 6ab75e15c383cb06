"""Field checks for partial profile updates.

Every check returns ``(applied, error)``:

- ``(False, None)`` when the field was not sent; the user is left alone.
- ``(False, kind)`` when the field was sent but rejected; the user is left alone.
- ``(True, None)`` after the user has been updated in place.
"""

from loguru import logger
from sqlalchemy.exc import SQLAlchemyError

from accounts_api.core.config import get_settings
from accounts_api.models.domain import User
from accounts_api.models.schemas.requests.user import UpdateUserRequest
from accounts_api.models.types.release_status import ReleaseStatus
from accounts_api.models.types.user_status import UserStatus
from accounts_api.repositories.ports import EmailLookup, WorldLookup
from accounts_api.utils.errors import UpdateErrorKind

CheckResult = tuple[bool, UpdateErrorKind | None]

SELF_ASSIGNABLE_TAG_PREFIX = "language_"
PRESERVED_TAG_PREFIXES = ("system_", "admin_")

SKIPPED: CheckResult = (False, None)
APPLIED: CheckResult = (True, None)


def check_email(
    request: UpdateUserRequest, user: User, users: EmailLookup
) -> CheckResult:
    """Stage a new email address once the current password is confirmed."""
    if not request.email:
        return SKIPPED

    try:
        password_matches = user.check_password(request.current_password)
    except ValueError:
        logger.warning(f"Stored password hash for user {user.id} is unreadable")
        password_matches = False
    if not password_matches:
        logger.warning(f"Email change for user {user.id} rejected: bad password")
        return False, UpdateErrorKind.INVALID_CREDENTIALS

    if users.email_in_use(request.email):
        return False, UpdateErrorKind.EMAIL_TAKEN

    user.pending_email = request.email
    # TODO: queue the verification email for the pending address
    logger.debug(f"Pending email set for user {user.id}")
    return APPLIED


def check_status(request: UpdateUserRequest, user: User) -> CheckResult:
    if not request.status:
        return SKIPPED

    try:
        status = UserStatus(request.status.lower())
    except ValueError:
        return False, UpdateErrorKind.INVALID_STATUS

    if status == UserStatus.OFFLINE and not user.is_staff():
        return False, UpdateErrorKind.INVALID_STATUS_DESCRIPTION

    user.status = status
    return APPLIED


def check_status_description(request: UpdateUserRequest, user: User) -> CheckResult:
    if not request.status_description:
        return SKIPPED

    if len(request.status_description) > get_settings().STATUS_DESCRIPTION_MAX_LENGTH:
        return False, UpdateErrorKind.INVALID_STATUS_DESCRIPTION

    user.status_description = request.status_description
    return APPLIED


def check_bio(request: UpdateUserRequest, user: User) -> CheckResult:
    if not request.bio:
        return SKIPPED

    if len(request.bio) > get_settings().BIO_MAX_LENGTH:
        return False, UpdateErrorKind.BIO_TOO_LONG

    user.bio = request.bio
    return APPLIED


def check_user_icon(request: UpdateUserRequest, user: User) -> CheckResult:
    if not request.user_icon:
        return SKIPPED

    if not user.is_staff():
        return False, UpdateErrorKind.USER_ICON_STAFF_ONLY

    user.user_icon = request.user_icon
    return APPLIED


def check_profile_pic_override(request: UpdateUserRequest, user: User) -> CheckResult:
    if not request.profile_pic_override:
        return SKIPPED

    if not user.is_staff():
        return False, UpdateErrorKind.PROFILE_PIC_OVERRIDE_STAFF_ONLY

    user.profile_pic_override = request.profile_pic_override
    return APPLIED


def check_tags(request: UpdateUserRequest, user: User) -> CheckResult:
    """Replace the user's tags.

    Non-staff users may only set language tags. System and admin tags already
    on the account always survive.
    """
    if not request.tags:
        return SKIPPED

    staff = user.is_staff()
    tags = [
        tag
        for tag in request.tags
        if staff or tag.startswith(SELF_ASSIGNABLE_TAG_PREFIX)
    ]
    existing = user.tags or []
    tags.extend(tag for tag in existing if tag.startswith(PRESERVED_TAG_PREFIXES))

    user.tags = list(dict.fromkeys(tags))
    return APPLIED


def check_home_location(
    request: UpdateUserRequest, user: User, worlds: WorldLookup
) -> CheckResult:
    """Point the user's home at a world they are allowed to use."""
    if not request.home_location:
        return SKIPPED

    try:
        world = worlds.get(request.home_location)
    except SQLAlchemyError as e:
        logger.error(f"Error looking up world {request.home_location}: {str(e)}")
        raise

    if world is None:
        return False, UpdateErrorKind.WORLD_NOT_FOUND

    if (
        world.release_status == ReleaseStatus.PRIVATE
        and world.author_id != user.id
        and not user.is_staff()
    ):
        return False, UpdateErrorKind.WORLD_PRIVATE

    user.home_world_id = world.id
    return APPLIED
