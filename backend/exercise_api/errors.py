"""Failure kinds raised at the data-access boundary.

DAOs translate SQLAlchemy exceptions into these types so the web layer
can map each kind to its own status code without importing the ORM.
"""

from sqlalchemy.exc import DisconnectionError, IntegrityError, InterfaceError, OperationalError


class PersistenceError(Exception):
    """A write or read against the storage layer failed."""
    status_code = 500

    def __init__(self, message: str, entity: str = None):
        super().__init__(message)
        self.entity = entity


class DuplicateRecordError(PersistenceError):
    """The store rejected the row because of a constraint violation."""
    status_code = 409


class StorageUnavailableError(PersistenceError):
    """The store could not be reached or refused the operation."""
    status_code = 503


def translate_error(exc: Exception, entity: str, action: str = "save") -> PersistenceError:
    """Return the `PersistenceError` matching a SQLAlchemy exception.

    `action` names the failed operation in the message (`save`, `read`).
    """
    if isinstance(exc, IntegrityError):
        return DuplicateRecordError(f"{entity} violates a storage constraint", entity)
    if isinstance(exc, (OperationalError, InterfaceError, DisconnectionError)):
        return StorageUnavailableError(f"storage unavailable, could not {action} {entity}", entity)
    return PersistenceError(f"could not {action} {entity}", entity)
