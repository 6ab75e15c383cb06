from enum import Enum


class ReleaseStatus(str, Enum):
    """Visibility of a world."""

    PUBLIC = "public"
    PRIVATE = "private"
