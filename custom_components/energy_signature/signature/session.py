"""Editable observation table and the current result snapshot.

The table is what a user edits between computations. The store keeps the
last successful result as one versioned snapshot: a computation either
replaces it entirely or leaves it untouched.

Editing the table does not clear the stored result. A snapshot remembers the
table revision it was computed from, so callers can tell when the displayed
result no longer matches the input.
"""

from dataclasses import dataclass, fields, replace
from itertools import count
import logging
from typing import Any, Iterable, Mapping

from .engine import compute_signature
from .models import RawObservation, SignatureResult
from .options import SignatureOptions

_LOGGER = logging.getLogger(__name__)

ROW_FIELDS = tuple(f.name for f in fields(RawObservation))


class ObservationTable:
    """Ordered monthly rows keyed by a monotonically increasing id.

    Ids are never reused, even after a row is removed or the table cleared.
    """

    def __init__(self, rows: Iterable[RawObservation | Mapping[str, Any]] = ()) -> None:
        """Initialize the table, with one blank row when no rows are given."""
        self._ids = count(1)
        self._rows: dict[int, RawObservation] = {}
        self.revision = 0
        self.load(rows)

    def __len__(self) -> int:
        return len(self._rows)

    def __contains__(self, row_id: object) -> bool:
        return row_id in self._rows

    @property
    def row_ids(self) -> list[int]:
        """Return the row ids in table order."""
        return list(self._rows)

    def items(self) -> list[tuple[int, RawObservation]]:
        """Return (id, row) pairs in table order."""
        return list(self._rows.items())

    def get(self, row_id: int) -> RawObservation:
        """Return a row by id, raising KeyError when it does not exist."""
        return self._rows[row_id]

    def add_row(self, row: RawObservation | Mapping[str, Any] | None = None) -> int:
        """Append a row, blank unless values are given, and return its id."""
        row_id = next(self._ids)
        self._rows[row_id] = _as_observation(row)
        self.revision += 1
        return row_id

    def update_row(self, row_id: int, **values: Any) -> RawObservation:
        """Replace some fields of an existing row.

        Raises:
            KeyError: If the row does not exist.
            ValueError: If a field name is unknown.

        """
        unknown = set(values) - set(ROW_FIELDS)
        if unknown:
            raise ValueError(f"Unknown row fields: {', '.join(sorted(unknown))}")
        row = replace(
            self._rows[row_id],
            **{key: "" if value is None else str(value) for key, value in values.items()},
        )
        self._rows[row_id] = row
        self.revision += 1
        return row

    def remove_row(self, row_id: int) -> bool:
        """Remove a row.

        The last remaining row is never removed so the table always has a
        line to type into.

        Returns:
            True if the row was removed, False if it was the last one.

        Raises:
            KeyError: If the row does not exist.

        """
        if row_id not in self._rows:
            raise KeyError(row_id)
        if len(self._rows) <= 1:
            _LOGGER.debug("Refusing to remove the last row %d", row_id)
            return False
        del self._rows[row_id]
        self.revision += 1
        return True

    def clear(self) -> None:
        """Drop every row, leaving a single blank one."""
        self._rows.clear()
        self.add_row()

    def load(self, rows: Iterable[RawObservation | Mapping[str, Any]]) -> None:
        """Replace the content of the table with the given rows."""
        self._rows.clear()
        for row in rows:
            self._rows[next(self._ids)] = _as_observation(row)
        if not self._rows:
            self._rows[next(self._ids)] = RawObservation()
        self.revision += 1

    def snapshot(self) -> tuple[RawObservation, ...]:
        """Return the rows in order as an immutable tuple."""
        return tuple(self._rows.values())


def _as_observation(row: RawObservation | Mapping[str, Any] | None) -> RawObservation:
    if row is None:
        return RawObservation()
    if isinstance(row, RawObservation):
        return row
    return RawObservation.from_mapping(row)


@dataclass(frozen=True)
class ResultSnapshot:
    """A computed result together with where it came from."""

    version: int
    result: SignatureResult
    table_revision: int


class ResultStore:
    """Holder of the current result snapshot."""

    def __init__(self) -> None:
        """Initialize an empty store."""
        self._current: ResultSnapshot | None = None

    @property
    def current(self) -> ResultSnapshot | None:
        """Return the current snapshot, None before the first computation."""
        return self._current

    def compute(
        self,
        table: ObservationTable,
        area: object,
        options: SignatureOptions | None = None,
    ) -> ResultSnapshot:
        """Recompute from the table and swap in the new snapshot.

        On error the previous snapshot is kept and the error propagates.
        """
        revision = table.revision
        result = compute_signature(table.snapshot(), area, options)
        version = self._current.version + 1 if self._current else 1
        self._current = ResultSnapshot(
            version=version, result=result, table_revision=revision
        )
        _LOGGER.debug(
            "Stored result version %d (table revision %d)", version, revision
        )
        return self._current

    def is_stale(self, table: ObservationTable) -> bool:
        """Return True if the table was edited after the current snapshot."""
        if self._current is None:
            return False
        return self._current.table_revision != table.revision
