"""An in-memory relation of fixed-width tuples with optional per-field indexes."""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

logger = logging.getLogger(__name__)

_SUPPORTED_FIELDS = (2,)

Row = Tuple[Any, ...]


class Relation:
    """A set of tuples of a fixed width, searchable by indexed fields."""

    def __init__(self, fields: int) -> None:
        if fields not in _SUPPORTED_FIELDS:
            raise ValueError(f"no tuple hash for {fields}")
        self.fields = fields
        self._all: Dict[Row, None] = {}
        self._indexes: List[Optional[Dict[Any, Dict[Row, None]]]] = [None] * fields

    def _check_field(self, field: int) -> None:
        if not 0 <= field < self.fields:
            raise IndexError(f"field {field} out of range for a relation of {self.fields} fields")

    def _index_for(self, field: int) -> Dict[Any, Dict[Row, None]]:
        self._check_field(field)
        table = self._indexes[field]
        if table is None:
            raise ValueError(f"field {field} is not indexed")
        return table

    def _make_row(self, args: Tuple[Any, ...]) -> Row:
        if len(args) != self.fields:
            raise TypeError(f"expected {self.fields} values, got {len(args)}")
        return tuple(args)

    def index(self, field: int) -> None:
        """Create an index on ``field``; only allowed while the relation is empty."""
        self._check_field(field)
        if self._all:
            raise ValueError("an index can only be added to an empty relation")
        if self._indexes[field] is not None:
            raise ValueError(f"field {field} is already indexed")
        self._indexes[field] = {}

    def insert(self, *args: Any) -> None:
        """Add a tuple to the relation and to every index."""
        row = self._make_row(args)
        self._all[row] = None
        for key, table in zip(row, self._indexes):
            if table is not None:
                table.setdefault(key, {})[row] = None

    def delete(self, key: Any, field: int) -> int:
        """Remove every tuple whose ``field`` equals ``key``; return how many went."""
        table = self._index_for(field)
        rows = table.pop(key, None)
        if rows is None:
            return 0
        for row in rows:
            for other_field, other in enumerate(self._indexes):
                if other is None or other_field == field:
                    continue
                per_key = other.get(row[other_field])
                if per_key is not None:
                    per_key.pop(row, None)
                    if not per_key:
                        del other[row[other_field]]
            self._all.pop(row, None)
        return len(rows)

    def select(self, key: Any, field: int) -> List[Row]:
        """Return the tuples whose ``field`` equals ``key``."""
        table = self._index_for(field)
        return list(table.get(key, ()))

    def count(self, key: Any, field: int) -> int:
        """Return how many tuples have ``field`` equal to ``key``."""
        table = self._index_for(field)
        return len(table.get(key, ()))

    def exists(self, *args: Any) -> bool:
        """Return whether the given tuple is in the relation."""
        return self._make_row(args) in self._all

    def dump(self) -> List[str]:
        """Describe every tuple and index; the lines are also logged at INFO level."""
        lines = [f"*** all tuples ({len(self._all)})"]
        lines.extend(self._format_row(row) for row in self._all)
        for field, table in enumerate(self._indexes):
            if table is None:
                continue
            lines.append(f"*** index {field}")
            for key, rows in table.items():
                lines.append(f"*** key {key!r}")
                lines.extend(self._format_row(row) for row in rows)
        for line in lines:
            logger.info("%s", line)
        return lines

    @staticmethod
    def _format_row(row: Row) -> str:
        return "[" + ",".join(repr(value) for value in row) + "]"

    def __len__(self) -> int:
        return len(self._all)