"""Rows and the scalar values they hold."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Optional, Union

Value = Optional[Union[bool, int, float, str]]
"""A scalar cell value: ``None`` is SQL NULL."""


@dataclass
class Tuple:
    """A row: column names mapped to values."""

    values: Dict[str, Value] = field(default_factory=dict)

    def insert(self, column: str, value: Value) -> None:
        """Set ``column`` to ``value``, replacing any previous value."""
        self.values[column] = value

    def get(self, column: str) -> Value:
        """Return the value of ``column``, or ``None`` if it is absent."""
        return self.values.get(column)

    def columns(self) -> List[str]:
        """Return the names of the columns present in the row."""
        return list(self.values)

    def copy(self) -> "Tuple":
        """Return a shallow copy of the row."""
        return Tuple(dict(self.values))

    def __contains__(self, column: object) -> bool:
        return column in self.values

    def __len__(self) -> int:
        return len(self.values)

    def __iter__(self) -> Iterator[str]:
        return iter(self.values)


def as_int(value: Value) -> Optional[int]:
    """Return ``value`` if it is an integer (booleans excluded), else ``None``."""
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    return None


def as_float(value: Value) -> Optional[float]:
    """Return ``value`` as a float if it is numeric (booleans excluded), else ``None``."""
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return float(value)
    return None


def as_str(value: Value) -> Optional[str]:
    """Return ``value`` if it is a string, else ``None``."""
    return value if isinstance(value, str) else None


def as_bool(value: Value) -> Optional[bool]:
    """Return ``value`` if it is a boolean, else ``None``."""
    return value if isinstance(value, bool) else None


def is_null(value: Value) -> bool:
    """Return whether ``value`` is NULL."""
    return value is None