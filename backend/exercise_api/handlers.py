"""Request handlers registered against the application's route table.

A handler is any object with a `handle(params)` method that takes the
merged request parameters and returns a response. Handlers are plain
synchronous objects; the web layer runs them on a threadpool.
"""

import logging
from typing import Mapping, Protocol

from fastapi.responses import PlainTextResponse, Response

from .dao import UserDAO
from .schemas import UserForm

logger = logging.getLogger("exercise_api.handlers")

INSERT_USER_SUCCESS = "Cadastro realizado com sucesso!"


class RequestHandler(Protocol):
    def handle(self, params: Mapping[str, str]) -> Response:
        ...


class InsertUserHandler:
    """Create a `User` from the `nome`/`senha`/`email` parameters.

    Parameters are not validated; absent ones are stored as NULL.
    Persistence failures propagate as `PersistenceError` and are turned
    into responses by the application's exception handler.
    """
    def __init__(self, dao: UserDAO):
        self.dao = dao

    def handle(self, params: Mapping[str, str]) -> Response:
        user = UserForm.from_params(params).to_entity()
        saved = self.dao.insert(user)
        logger.info("user_inserted id=%s", saved.id)
        return PlainTextResponse(INSERT_USER_SUCCESS)
