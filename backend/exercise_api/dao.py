"""Data-access objects encapsulating database operations.

Each DAO is bound to an injected `SessionFactory` and opens one session
per call. Writes run inside a single transaction that is committed
before the call returns; any ORM failure is rolled back and re-raised as
a `PersistenceError` subclass.
"""

import logging
from typing import Optional

from sqlalchemy.exc import SQLAlchemyError

from . import models
from .database import SessionFactory
from .errors import translate_error

logger = logging.getLogger("exercise_api.dao")


class _BaseDAO:
    entity_name = "entity"

    def __init__(self, session_factory: SessionFactory):
        self.session_factory = session_factory

    def _persist(self, entity):
        """Add `entity` in its own transaction and return it once committed."""
        with self.session_factory() as session:
            try:
                with session.begin():
                    session.add(entity)
                    session.flush()
            except SQLAlchemyError as exc:
                logger.warning("insert_failed entity=%s error=%s", self.entity_name, exc.__class__.__name__)
                raise translate_error(exc, self.entity_name, "save") from exc
        logger.debug("inserted entity=%s id=%s", self.entity_name, entity.id)
        return entity

    def _get(self, model, pk) -> Optional[object]:
        with self.session_factory() as session:
            try:
                return session.get(model, pk)
            except SQLAlchemyError as exc:
                raise translate_error(exc, self.entity_name, "read") from exc


class UserDAO(_BaseDAO):
    """Insert and look up `User` rows."""
    entity_name = "user"

    def insert(self, user: models.User) -> models.User:
        """Persist a new user and return it with its generated id."""
        return self._persist(user)

    def get(self, user_id: int) -> Optional[models.User]:
        """Get a `User` by primary key or `None` if not found."""
        return self._get(models.User, user_id)


class QuestionDAO(_BaseDAO):
    """Insert and look up `Question` rows."""
    entity_name = "question"

    def insert(self, question: models.Question) -> models.Question:
        """Persist a question whose id was assigned by the caller.

        Raises ValueError when `question.id` is not set.
        """
        if question.id is None:
            raise ValueError("question id must be assigned before insert")
        return self._persist(question)

    def get(self, question_id: int) -> Optional[models.Question]:
        return self._get(models.Question, question_id)
