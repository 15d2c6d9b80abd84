from __future__ import annotations

from typing import List, Protocol, TYPE_CHECKING

if TYPE_CHECKING:
    from apps.users.dtos import UserDTO


class UserRepositoryProtocol(Protocol):
    def create(self, user: "UserDTO") -> "UserDTO": ...

    def update(self, user: "UserDTO") -> "UserDTO": ...

    def list_all(self) -> List["UserDTO"]: ...

    def get_by_email(self, email: str) -> "UserDTO": ...

    def get_by_id(self, user_id: int) -> "UserDTO": ...
