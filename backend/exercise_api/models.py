"""SQLModel data models.

This module defines the persisted entities. Each class maps to one table
and carries no relationships or behaviour beyond plain attributes.
"""

from typing import Optional
from sqlmodel import SQLModel, Field


class _IdentityByIdMixin:
    """Equality and hashing by primary key alone.

    Instances without an `id` fall back to object identity.
    """

    def __eq__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        if self.id is None or other.id is None:
            return self is other
        return self.id == other.id

    def __hash__(self):
        # the store assigns `id` on insert; the hash must not change with it
        return hash(type(self).__name__)


class Question(_IdentityByIdMixin, SQLModel, table=True):
    """A programming exercise.

    The identifier is assigned by the caller; the column does not
    autoincrement.
    """
    __tablename__ = "questions"

    id: Optional[int] = Field(default=None, primary_key=True, sa_column_kwargs={"autoincrement": False})
    name: Optional[str] = None
    statement: Optional[str] = None
    source_code: Optional[str] = None


class User(_IdentityByIdMixin, SQLModel, table=True):
    """A registered user.

    Fields are stored exactly as submitted. There is no hashing of
    `password` and no uniqueness constraint on any column.
    """
    __tablename__ = "users"

    id: Optional[int] = Field(default=None, primary_key=True)
    name: Optional[str] = None
    password: Optional[str] = None
    email: Optional[str] = None
