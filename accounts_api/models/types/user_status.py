from enum import Enum


class UserStatus(str, Enum):
    """Presence status a user shows to others."""

    JOIN_ME = "join me"
    ACTIVE = "active"
    ASK_ME = "ask me"
    BUSY = "busy"
    OFFLINE = "offline"
