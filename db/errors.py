"""
db/errors.py
------------
Error taxonomy shared by the store, repository and handler layers.

Store errors derive from StorageError. Repositories wrap them in a
RepositoryError chained to the original, so the underlying kind can
still be found with `error_is`.
"""

from typing import Optional, Type


class StorageError(Exception):
    """Base class for every error raised by a store."""


class NotFound(StorageError):
    """Zero rows matched the requested id."""


class MultipleFound(StorageError):
    """More than one row matched a primary-key lookup."""


class ConstraintViolation(StorageError):
    """A unique or foreign-key constraint rejected the statement."""


class RowCountMismatch(StorageError):
    """An update or delete affected a number of rows other than one."""

    def __init__(self, message: str, rows_affected: int):
        super().__init__(message)
        self.rows_affected = rows_affected


class QueryCompilationError(StorageError):
    """The partial-update compiler could not build a statement."""


class MalformedRequest(Exception):
    """The request body or path parameter could not be decoded."""


class RepositoryError(Exception):
    """A store failure with repository-level context attached."""


def error_is(err: Optional[BaseException], kind: Type[BaseException]) -> bool:
    """
    Walk the exception chain and report whether any link is a `kind`.

    Args:
        err: The exception to inspect.
        kind: The exception class to look for.

    Returns:
        True if `err` or one of its causes is an instance of `kind`.
    """
    seen = set()
    while err is not None and id(err) not in seen:
        if isinstance(err, kind):
            return True
        seen.add(id(err))
        err = err.__cause__ or err.__context__
    return False
