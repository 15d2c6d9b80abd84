from __future__ import annotations

from dataclasses import replace
from typing import Any, Dict, List

from apps.common import get_logger
from .dtos import UserDTO, without_password
from .protocols import UserRepositoryProtocol

logger = get_logger(__name__).bind(component="users", layer="service")

UPDATABLE_FIELDS = ("name", "email", "password")


class UserService:
    def __init__(self, users: UserRepositoryProtocol):
        self.users = users
        self.logger = logger.bind(service="UserService")

    def list_users(self) -> List[UserDTO]:
        self.logger.debug("Listing users")
        return [without_password(u) for u in self.users.list_all()]

    def get_user(self, user_id: int) -> UserDTO:
        self.logger.debug("Fetching user", user_id=user_id)
        return without_password(self.users.get_by_id(user_id))

    def update_user(
        self, user_id: int, data: Dict[str, Any], *, partial: bool = True
    ) -> UserDTO:
        """
        Merge ``data`` into the stored user and persist it.

        A full update (``partial=False``) resets omitted fields to blank except
        the password, which is kept unless a new non-empty one is supplied.
        Raises ``NotFoundError`` for unknown ids.
        """
        self.logger.info("Updating user", user_id=user_id, partial=partial)
        current = self.users.get_by_id(user_id)
        changes = {k: data[k] for k in UPDATABLE_FIELDS if k in data}
        if not changes.get("password"):
            changes.pop("password", None)
        if partial:
            target = replace(current, **changes)
        else:
            target = UserDTO(
                id=current.id,
                name=changes.get("name", ""),
                email=changes.get("email", current.email),
                password=changes.get("password", current.password),
            )
        updated = self.users.update(target)
        self.logger.info("User updated", user_id=user_id)
        return without_password(updated)
