"""
models/record.py
----------------
Shared (de)serialization for the blog records.

Every record is a dataclass whose field names match its table columns
and its JSON keys. Subclasses declare a `_coercers` mapping from field
name to a function that turns a decoded JSON value into the field type.
"""

from dataclasses import asdict, fields
from datetime import datetime
from typing import Any, Callable, ClassVar, Optional

from db.errors import MalformedRequest


def optional_int(value: Any) -> Optional[int]:
    """Accept an integer or null; bools are rejected even though they are ints."""
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"expected integer, got {type(value).__name__}")
    if isinstance(value, float):
        if not value.is_integer():
            raise ValueError(f"expected integer, got {value}")
        value = int(value)
    return value


def text(value: Any) -> str:
    if value is None:
        return ""
    if not isinstance(value, str):
        raise ValueError(f"expected string, got {type(value).__name__}")
    return value


def flag(value: Any) -> bool:
    if value is None:
        return False
    if not isinstance(value, bool):
        raise ValueError(f"expected boolean, got {type(value).__name__}")
    return value


def timestamp(value: Any) -> Optional[datetime]:
    """Parse an ISO-8601 timestamp; a trailing 'Z' is accepted for UTC."""
    if value is None or isinstance(value, datetime):
        return value
    if not isinstance(value, str):
        raise ValueError(f"expected timestamp string, got {type(value).__name__}")
    if value.endswith("Z"):
        value = value[:-1] + "+00:00"
    return datetime.fromisoformat(value)


class Record:
    """Mixin for dataclass records mapped one-to-one onto a table."""

    _coercers: ClassVar[dict[str, Callable[[Any], Any]]] = {}

    @classmethod
    def columns(cls) -> list[str]:
        """Column names in table order (the JSON keys as well)."""
        return [f.name for f in fields(cls)]

    @classmethod
    def from_dict(cls, data: Any):
        """
        Build a record from a decoded JSON object.

        Unknown keys are ignored and missing keys keep the field default.

        Raises:
            MalformedRequest: If `data` is not an object or a value has the wrong type.
        """
        if not isinstance(data, dict):
            raise MalformedRequest("request body must be a JSON object")
        kwargs = {}
        for name in cls.columns():
            if name not in data:
                continue
            try:
                kwargs[name] = cls._coercers[name](data[name])
            except ValueError as e:
                raise MalformedRequest(f"field '{name}': {e}") from e
        return cls(**kwargs)

    @classmethod
    def from_row(cls, row: tuple):
        """Convert a `SELECT *` row tuple into a record."""
        return cls(*row)

    def to_dict(self) -> dict:
        """JSON-ready dict; timestamps become ISO-8601 strings."""
        data = asdict(self)
        for key, value in data.items():
            if isinstance(value, datetime):
                data[key] = value.isoformat()
        return data
