"""
stores/base.py
--------------
Common machinery for the per-table stores.

A store maps exactly one record type onto exactly one table and issues
parameterized SQL through the shared connection pool. Subclasses supply
the table name, the record class and the INSERT statement.
"""

from abc import ABC, abstractmethod
from typing import Any, Iterable, Optional, Protocol

import psycopg2

from db.connection import get_connection, release_connection
from db.errors import ConstraintViolation, MultipleFound, NotFound, RowCountMismatch
from db.query import compile_update
from utils.logger import get_logger

logger = get_logger(__name__)


class Storage(Protocol):
    """Capability every store offers; repositories depend only on this."""

    def create(self, record: Any) -> int: ...

    def read(self, record_id: int) -> Any: ...

    def update(self, record: Any, fields: Optional[Iterable[str]] = None) -> Any: ...

    def delete(self, record_id: int) -> None: ...


class TableStore(ABC):
    """Create/Read/Update/Delete against one table."""

    table: str = ""
    resource: str = ""
    model: type = object
    insert_sql: str = ""
    # Per-column SQL expressions used by partial updates.
    update_placeholders: dict[str, str] = {}

    # ── CREATE ────────────────────────────────────────────

    @abstractmethod
    def insert_params(self, record) -> tuple:
        """Bound parameters for `insert_sql`, in placeholder order."""

    def after_insert(self, record, row: tuple) -> None:
        """Hook for stamping extra RETURNING columns onto the record."""

    def create(self, record) -> int:
        """
        Insert a new row.

        Args:
            record: The record to persist; its id is ignored.

        Returns:
            The id generated by the database.

        Raises:
            ConstraintViolation: On a unique or foreign-key violation.
        """
        conn = get_connection()
        try:
            with conn.cursor() as cur:
                cur.execute(self.insert_sql, self.insert_params(record))
                row = cur.fetchone()
            conn.commit()
        except psycopg2.IntegrityError as e:
            conn.rollback()
            logger.error(f"Failed to create {self.resource}: {e}")
            raise ConstraintViolation(f"create {self.resource}: {e}".strip()) from e
        except Exception as e:
            conn.rollback()
            logger.error(f"Failed to create {self.resource}: {e}")
            raise
        finally:
            release_connection(conn)

        self.after_insert(record, row)
        logger.info(f"Created {self.resource} #{row[0]}")
        return row[0]

    # ── READ ──────────────────────────────────────────────

    def read(self, record_id: int):
        """
        Fetch a single row by primary key.

        Raises:
            NotFound: If no row has this id.
            MultipleFound: If more than one row has this id.
        """
        sql = f"SELECT * FROM {self.table} WHERE id = %s;"
        conn = get_connection()
        try:
            with conn.cursor() as cur:
                cur.execute(sql, (record_id,))
                rows = cur.fetchall()
        finally:
            release_connection(conn)

        if not rows:
            raise NotFound(f"not found: {self.resource} id {record_id}")
        if len(rows) > 1:
            raise MultipleFound(f"multiple found: {self.resource} id {record_id}")
        return self.model.from_row(rows[0])

    # ── UPDATE ────────────────────────────────────────────

    def update(self, record, fields: Optional[Iterable[str]] = None):
        """
        Update only the changed columns of one row.

        Args:
            record: Record carrying the id and the new values.
            fields: Keys the client submitted; when None, columns are
                compared against the zero-value record instead.

        Returns:
            The record as submitted (the row is not read back).

        Raises:
            QueryCompilationError: If the record has no id or nothing changed.
            ConstraintViolation: On a unique or foreign-key violation.
            RowCountMismatch: If the statement did not touch exactly one row.
        """
        sql, params = compile_update(
            self.table, record, self.model(), fields, self.update_placeholders
        )
        conn = get_connection()
        try:
            with conn.cursor() as cur:
                cur.execute(sql, params)
                rows_affected = cur.rowcount
            if rows_affected != 1:
                conn.rollback()
                raise RowCountMismatch(
                    f"update {self.resource} error: {rows_affected} rows affected",
                    rows_affected,
                )
            conn.commit()
        except psycopg2.IntegrityError as e:
            conn.rollback()
            logger.error(f"Failed to update {self.resource} #{record.id}: {e}")
            raise ConstraintViolation(f"update {self.resource}: {e}".strip()) from e
        except RowCountMismatch:
            raise
        except Exception as e:
            conn.rollback()
            logger.error(f"Failed to update {self.resource} #{record.id}: {e}")
            raise
        finally:
            release_connection(conn)

        logger.info(f"Updated {self.resource} #{record.id}")
        return record

    # ── DELETE ────────────────────────────────────────────

    def delete(self, record_id: int) -> None:
        """
        Delete one row by primary key.

        Raises:
            RowCountMismatch: If the statement did not delete exactly one row.
        """
        sql = f"DELETE FROM {self.table} WHERE id = %s;"
        conn = get_connection()
        try:
            with conn.cursor() as cur:
                cur.execute(sql, (record_id,))
                rows_affected = cur.rowcount
            if rows_affected != 1:
                conn.rollback()
                raise RowCountMismatch(
                    f"delete {self.resource} error: {rows_affected} rows affected",
                    rows_affected,
                )
            conn.commit()
        except RowCountMismatch:
            raise
        except Exception as e:
            conn.rollback()
            logger.error(f"Failed to delete {self.resource} #{record_id}: {e}")
            raise
        finally:
            release_connection(conn)

        logger.info(f"Deleted {self.resource} #{record_id}")
