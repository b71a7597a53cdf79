"""In-process query value built from ranges.

A Query names a table, selects rows by key (explicit keys and/or row-key
ranges) and optionally filters cells by a timestamp range. It is the layer
that consumes ByteRange and TimestampRange values: it never builds a request
message, it only answers whether a row key or a cell timestamp is selected.
"""

import logging
from dataclasses import dataclass, replace
from typing import Any

from rowrange.ranges import ByteRange, TimestampRange, to_bytes

logger = logging.getLogger(__name__)


@dataclass(frozen=True, kw_only=True)
class Query:
    """Immutable description of a row read.

    Attributes:
        table_id: Table to read from
        row_keys: Individually selected row keys
        row_ranges: Selected row-key ranges
        timestamp_filter: Cell-version filter, None to keep every version
        row_limit: Maximum number of rows, 0 for no limit

    An empty row set (no keys and no ranges) selects every row.
    """

    table_id: str
    row_keys: tuple[bytes, ...] = ()
    row_ranges: tuple[ByteRange, ...] = ()
    timestamp_filter: TimestampRange | None = None
    row_limit: int = 0

    def __post_init__(self) -> None:
        if not isinstance(self.table_id, str) or not self.table_id:
            raise ValueError(
                f"Query requires a non-empty table id, got {self.table_id!r}.\n"
                f"Example: Query.create('user-events')"
            )
        if (
            isinstance(self.row_limit, bool)
            or not isinstance(self.row_limit, int)
            or self.row_limit < 0
        ):
            raise ValueError(
                f"Row limit must be a non-negative int, got {self.row_limit!r}.\n"
                f"Use 0 for no limit."
            )

    @classmethod
    def create(cls, table_id: str) -> "Query":
        return cls(table_id=table_id)

    def row_key(self, key: bytes | str) -> "Query":
        """Return a copy that also selects ``key``."""
        encoded = to_bytes(key)
        return replace(self, row_keys=self.row_keys + (encoded,))

    def range(self, row_range: ByteRange | tuple[Any, Any]) -> "Query":
        """Return a copy that also selects every key in ``row_range``.

        A ``(start, end)`` pair is shorthand for ``ByteRange.create(start, end)``.
        """
        if isinstance(row_range, tuple):
            row_range = ByteRange.create(*row_range)
        if not isinstance(row_range, ByteRange):
            raise TypeError(
                f"Row ranges must be ByteRange values.\n"
                f"Got {type(row_range).__name__!r}: {row_range!r}\n"
                f"Example: query.range(ByteRange.create('a', 'm'))"
            )
        if row_range.is_empty():
            logger.debug(
                f"Query on {self.table_id}: row range {row_range} matches no rows"
            )
        return replace(self, row_ranges=self.row_ranges + (row_range,))

    def prefix(self, prefix: bytes | str) -> "Query":
        """Return a copy that also selects every key starting with ``prefix``."""
        return self.range(ByteRange.prefix(prefix))

    def timestamp_range(
        self, ts_range: TimestampRange | tuple[Any, Any]
    ) -> "Query":
        """Return a copy whose cell filter is ``ts_range`` (replacing any other)."""
        if isinstance(ts_range, tuple):
            ts_range = TimestampRange.create(*ts_range)
        if not isinstance(ts_range, TimestampRange):
            raise TypeError(
                f"Timestamp filters must be TimestampRange values.\n"
                f"Got {type(ts_range).__name__!r}: {ts_range!r}\n"
                f"Example: query.timestamp_range(TimestampRange.create(0, 1000))"
            )
        if ts_range.is_empty():
            logger.debug(
                f"Query on {self.table_id}: timestamp filter {ts_range} "
                f"matches no cells"
            )
        return replace(self, timestamp_filter=ts_range)

    def limit(self, n: int) -> "Query":
        return replace(self, row_limit=n)

    def matches_row(self, key: bytes | str) -> bool:
        """Return True if the row with ``key`` is selected by this query."""
        if not self.row_keys and not self.row_ranges:
            return True
        encoded = to_bytes(key)
        if encoded in self.row_keys:
            return True
        return any(r.contains(encoded) for r in self.row_ranges)

    def matches_cell(self, timestamp: Any) -> bool:
        """Return True if a cell written at ``timestamp`` passes the filter."""
        if self.timestamp_filter is None:
            return True
        return self.timestamp_filter.contains(timestamp)
