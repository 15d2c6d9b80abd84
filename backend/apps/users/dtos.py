from dataclasses import dataclass, replace
from typing import Optional

from .models import User


@dataclass
class UserDTO:
    id: Optional[int]
    name: str
    email: str
    password: str = ""


def user_to_dto(u: User) -> UserDTO:
    return UserDTO(id=u.id, name=u.name, email=u.email, password=u.password)


def without_password(user: UserDTO) -> UserDTO:
    """Copy of ``user`` that is safe to hand to the HTTP layer."""
    return replace(user, password="")
