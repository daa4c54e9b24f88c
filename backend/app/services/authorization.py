"""Ownership checks for idea mutations."""

from backend.app.core.config import settings
from backend.app.core.exceptions import ForbiddenError


class OwnershipGuard:
    """
    Decide whether an acting user may mutate a resource.

    Owned resources may only be changed by their owner. Resources without
    an owner (ideas created before accounts existed) are open to any
    authenticated user when ``legacy_resources_mutable_by_any_user`` is set,
    and immutable otherwise.
    """

    def __init__(self, legacy_resources_mutable_by_any_user: bool = True):
        self.legacy_resources_mutable_by_any_user = legacy_resources_mutable_by_any_user

    @classmethod
    def from_settings(cls) -> "OwnershipGuard":
        return cls(settings.legacy_resources_mutable_by_any_user)

    def can_mutate(self, acting_user_id: int | None, owner_user_id: int | None) -> bool:
        if acting_user_id is None:
            return False
        if owner_user_id is None:
            return self.legacy_resources_mutable_by_any_user
        return acting_user_id == owner_user_id

    def ensure_can_mutate(self, acting_user_id: int | None, owner_user_id: int | None) -> None:
        """Raise ForbiddenError unless ``can_mutate`` allows the change."""
        if not self.can_mutate(acting_user_id, owner_user_id):
            raise ForbiddenError()
