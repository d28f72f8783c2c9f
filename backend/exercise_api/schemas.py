"""Pydantic request schemas used by the HTTP handlers.

Parameter names on the wire are kept as the form fields the existing
front end submits (`nome`, `senha`, `email`); every field is optional
and accepted as-is.
"""

from typing import Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field

from . import models


class UserForm(BaseModel):
    """Form parameters of the insert-user endpoint."""
    model_config = ConfigDict(populate_by_name=True)

    name: Optional[str] = Field(default=None, alias="nome")
    password: Optional[str] = Field(default=None, alias="senha")
    email: Optional[str] = Field(default=None, alias="email")

    @classmethod
    def from_params(cls, params: Mapping[str, str]) -> "UserForm":
        return cls.model_validate({k: params.get(k) for k in ("nome", "senha", "email")})

    def to_entity(self) -> models.User:
        return models.User(name=self.name, password=self.password, email=self.email)
