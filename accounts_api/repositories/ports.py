from typing import Protocol

from accounts_api.models.domain import World


class EmailLookup(Protocol):
    """Answers whether an address is already claimed by some account."""

    def email_in_use(self, email: str) -> bool: ...


class WorldLookup(Protocol):
    """Point lookup of worlds by ID.

    Returns None when the world does not exist; any other store failure raises.
    """

    def get(self, id: str) -> World | None: ...
