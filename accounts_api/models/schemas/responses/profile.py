from pydantic import Field

from accounts_api.core.schema import BaseResponse
from accounts_api.utils.errors import ProfileUpdateError, UpdateErrorKind


class ProfileUpdateResponse(BaseResponse):
    """Outcome of every field check of one profile update, keyed by JSON field name."""

    applied: list[str] = Field(default_factory=list)
    errors: dict[str, UpdateErrorKind] = Field(default_factory=dict)

    @property
    def changed(self) -> bool:
        return bool(self.applied)

    def raise_for_errors(self) -> None:
        """Raise for the first rejected field, in check order."""
        if self.errors:
            field, kind = next(iter(self.errors.items()))
            raise ProfileUpdateError(field, kind)
