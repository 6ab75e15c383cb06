from enum import Enum


class DeveloperType(str, Enum):
    """Platform role of an account."""

    NONE = "none"
    TRUSTED = "trusted"
    INTERNAL = "internal"
    MODERATOR = "moderator"


STAFF_DEVELOPER_TYPES = frozenset({DeveloperType.INTERNAL, DeveloperType.MODERATOR})
