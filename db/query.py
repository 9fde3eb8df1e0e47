"""
db/query.py
-----------
Partial-update query compiler.

Builds an `UPDATE` statement that only touches the columns a caller
actually changed. Values are always bound as parameters; column names
come from the record's own field list, never from request input.
"""

from dataclasses import asdict, is_dataclass
from typing import Any, Iterable, Optional

from db.errors import QueryCompilationError

ID_COLUMN = "id"


def _to_map(obj: Any) -> dict:
    if not is_dataclass(obj) or isinstance(obj, type):
        raise QueryCompilationError(f"cannot convert {type(obj).__name__} to a column map")
    return asdict(obj)


def changed_columns(
    record_map: dict, baseline_map: dict, fields: Optional[Iterable[str]] = None
) -> list[str]:
    """
    Decide which non-id columns belong in the statement.

    With `fields` (the keys a client submitted) every submitted column is
    included, so an explicit zero value still counts as a change.
    Without it, a column is included when it differs from the baseline.
    """
    if fields is not None:
        submitted = set(fields)
        return [k for k in record_map if k != ID_COLUMN and k in submitted]
    return [
        k for k, v in record_map.items()
        if k != ID_COLUMN and v != baseline_map.get(k)
    ]


def compile_update(
    table: str,
    record: Any,
    baseline: Any,
    fields: Optional[Iterable[str]] = None,
    placeholders: Optional[dict[str, str]] = None,
) -> tuple[str, list]:
    """
    Compile a partial `UPDATE` for one row.

    Args:
        table: Target table name.
        record: Dataclass record carrying the new values and the row id.
        baseline: Zero-value record of the same type.
        fields: Optional set of submitted keys; overrides baseline diffing.
        placeholders: Optional per-column SQL expressions wrapping `%s`,
            e.g. ``{"password": "crypt(%s, gen_salt('bf', 8))"}``.

    Returns:
        Tuple of (sql, params) ready for ``cursor.execute``.

    Raises:
        QueryCompilationError: If the record has no id or nothing changed.
    """
    record_map = _to_map(record)
    if record_map.get(ID_COLUMN) is None:
        raise QueryCompilationError("no id specified")
    baseline_map = _to_map(baseline)
    placeholders = placeholders or {}

    columns = changed_columns(record_map, baseline_map, fields)
    if not columns:
        raise QueryCompilationError(
            f"nothing to update for {table} id {record_map[ID_COLUMN]}"
        )

    params = [record_map[c] for c in columns]
    params.append(record_map[ID_COLUMN])
    values = [placeholders.get(c, "%s") for c in columns]

    # A one-element tuple assignment is rejected by PostgreSQL.
    if len(columns) == 1:
        sql = f"UPDATE {table} SET {columns[0]} = {values[0]} WHERE id = %s;"
    else:
        sql = (
            f"UPDATE {table} SET ({', '.join(columns)}) = ({', '.join(values)}) "
            f"WHERE id = %s;"
        )
    return sql, params
