"""
repositories/base.py
--------------------
Orchestration shared by all resource repositories.

A repository composes store calls into resource-level operations and
attaches context to every failure. The original store error stays on
the exception chain, so `db.errors.error_is` can still tell NotFound
apart from other failures.
"""

from typing import Iterable, Optional

from psycopg2.extensions import QueryCanceledError

from db.errors import RepositoryError
from stores.base import Storage
from utils.logger import get_logger

logger = get_logger(__name__)


class CrudRepository:
    """Create/Read/Update/Delete for one resource on top of a Storage."""

    resource: str = ""

    def __init__(self, store: Storage):
        self.store = store

    def _fail(self, op: str, err: Exception) -> RepositoryError:
        msg = f"cannot {op} {self.resource}: {err}"
        logger.error(msg)
        return RepositoryError(msg)

    # ── CREATE ────────────────────────────────────────────

    def create(self, record):
        """
        Persist a new record.

        Returns:
            The same record with its `id` populated.
        """
        try:
            record.id = self.store.create(record)
        except QueryCanceledError:
            raise
        except Exception as e:
            raise self._fail("create", e) from e
        return record

    # ── READ ──────────────────────────────────────────────

    def read(self, record_id: int):
        """Fetch a record by id."""
        try:
            return self.store.read(record_id)
        except QueryCanceledError:
            raise
        except Exception as e:
            raise self._fail("read", e) from e

    # ── UPDATE ────────────────────────────────────────────

    def update(self, record, fields: Optional[Iterable[str]] = None):
        """
        Apply a partial update.

        Returns:
            The submitted record. Columns filled in by the database are
            not read back.
        """
        try:
            return self.store.update(record, fields)
        except QueryCanceledError:
            raise
        except Exception as e:
            raise self._fail("update", e) from e

    # ── DELETE ────────────────────────────────────────────

    def delete(self, record_id: int):
        """
        Delete a record and return what was deleted.

        The row is read first; if that fails nothing is deleted. The read
        and the delete are separate statements, so a concurrent delete in
        between surfaces as a RowCountMismatch from the second step.
        """
        snapshot = self.read(record_id)
        try:
            self.store.delete(record_id)
        except QueryCanceledError:
            raise
        except Exception as e:
            raise self._fail("delete", e) from e
        return snapshot
