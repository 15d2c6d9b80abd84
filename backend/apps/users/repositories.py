from dataclasses import replace
from typing import List, Optional

from django.db import DEFAULT_DB_ALIAS, IntegrityError

from apps.common.db import bounded_statement
from apps.common.repository import (
    AlreadyExistsError,
    InMemoryRepository,
    MemoryTable,
    NotFoundError,
)
from .dtos import UserDTO, user_to_dto
from .models import User


class InMemoryUserRepository(InMemoryRepository[UserDTO]):
    entity = "User"

    def __init__(self, table: Optional[MemoryTable[UserDTO]] = None):
        super().__init__(table)

    def _check_unique(self, record: UserDTO, *, exclude_id: Optional[int] = None):
        for stored in self.table.rows.values():
            if stored.id != exclude_id and stored.email == record.email:
                raise AlreadyExistsError(self.entity, "email", record.email)

    def create(self, user: UserDTO) -> UserDTO:
        return self._insert(user)

    def update(self, user: UserDTO) -> UserDTO:
        return self._replace(user)

    def list_all(self) -> List[UserDTO]:
        return self._all()

    def get_by_email(self, email: str) -> UserDTO:
        return self._find(lambda u: u.email == email, email)

    def get_by_id(self, user_id: int) -> UserDTO:
        return self._get(user_id)


class SqlUserRepository:
    entity = "User"

    def __init__(self, using: str = DEFAULT_DB_ALIAS):
        self.model = User
        self.using = using

    def _queryset(self):
        return self.model.objects.using(self.using)

    def create(self, user: UserDTO) -> UserDTO:
        try:
            with bounded_statement(self.using):
                row = self._queryset().create(
                    name=user.name, email=user.email, password=user.password
                )
        except IntegrityError as exc:
            raise AlreadyExistsError(self.entity, "email", user.email) from exc
        return user_to_dto(row)

    def update(self, user: UserDTO) -> UserDTO:
        try:
            with bounded_statement(self.using):
                updated = (
                    self._queryset()
                    .filter(id=user.id)
                    .update(name=user.name, email=user.email, password=user.password)
                )
        except IntegrityError as exc:
            raise AlreadyExistsError(self.entity, "email", user.email) from exc
        if not updated:
            raise NotFoundError(self.entity, user.id)
        return replace(user)

    def list_all(self) -> List[UserDTO]:
        with bounded_statement(self.using):
            return [user_to_dto(u) for u in self._queryset().order_by("id")]

    def get_by_email(self, email: str) -> UserDTO:
        with bounded_statement(self.using):
            row = self._queryset().filter(email=email).first()
        if row is None:
            raise NotFoundError(self.entity, email)
        return user_to_dto(row)

    def get_by_id(self, user_id: int) -> UserDTO:
        with bounded_statement(self.using):
            row = self._queryset().filter(id=user_id).first()
        if row is None:
            raise NotFoundError(self.entity, user_id)
        return user_to_dto(row)
