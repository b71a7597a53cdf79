"""Immutable one-dimensional ranges over ordered domains.

A range is a pair of bounds, one per side. Each side is either unbounded,
closed (the value is included) or open (the value is excluded). Ranges are
frozen values: every bound-changing method returns a new range and leaves
the receiver untouched.

Two domains are provided:
- ByteRange: row keys, ordered lexicographically by raw bytes
- TimestampRange: cell timestamps in microseconds, ordered numerically
"""

from dataclasses import dataclass, replace
from enum import Enum
from typing import Any, Generic, TypeVar

from typing_extensions import Self, override

from rowrange.errors import UnboundedRangeError
from rowrange.timestamps import Edge, to_micros

T = TypeVar("T")


def to_bytes(value: Any, edge: Edge = "start") -> bytes:
    """Convert a row key to bytes.

    Bytes-like input is copied to ``bytes``; text is encoded as UTF-8.

    Raises:
        TypeError: If value is neither bytes-like nor str
    """
    if isinstance(value, str):
        return value.encode("utf-8")
    if isinstance(value, (bytes, bytearray, memoryview)):
        return bytes(value)
    raise TypeError(
        f"Row key {edge} must be bytes or str.\n"
        f"Got {type(value).__name__!r}: {value!r}\n"
        f"Examples:\n"
        f"  ByteRange.create(b'user#0001', b'user#0100')\n"
        f"  ByteRange.create('user#0001', 'user#0100')  # UTF-8 encoded"
    )


class BoundType(Enum):
    UNBOUNDED = "unbounded"
    CLOSED = "closed"
    OPEN = "open"


@dataclass(frozen=True)
class Bound(Generic[T]):
    """One side of a range.

    ``value`` is present if and only if ``type`` is CLOSED or OPEN. Prefer the
    ``unbounded()``, ``closed()`` and ``open()`` constructors.
    """

    type: BoundType
    value: T | None = None

    def __post_init__(self) -> None:
        if self.type is BoundType.UNBOUNDED and self.value is not None:
            raise ValueError(
                f"An unbounded side cannot carry a value, got {self.value!r}.\n"
                f"Use Bound.closed(value) or Bound.open(value) instead."
            )
        if self.type is not BoundType.UNBOUNDED and self.value is None:
            raise ValueError(
                f"A {self.type.value} side requires a value.\n"
                f"Use Bound.unbounded() for a side without a value."
            )

    @classmethod
    def unbounded(cls) -> "Bound[Any]":
        return cls(BoundType.UNBOUNDED)

    @classmethod
    def closed(cls, value: T) -> "Bound[T]":
        return cls(BoundType.CLOSED, value)

    @classmethod
    def open(cls, value: T) -> "Bound[T]":
        return cls(BoundType.OPEN, value)

    @property
    def is_bounded(self) -> bool:
        return self.type is not BoundType.UNBOUNDED


_UNBOUNDED: Bound[Any] = Bound(BoundType.UNBOUNDED)


@dataclass(frozen=True)
class Range(Generic[T]):
    """Generic immutable range over an ordered domain.

    Subclasses bind the domain by overriding ``_coerce`` (turning caller input
    into a stored value) and optionally ``_successor`` and ``_minimum`` for
    discrete domains with a least value. They add no state.

    No ordering is enforced between start and end: a range whose start lies
    past its end is representable and simply contains nothing, see
    ``is_empty()``.
    """

    lower: Bound[T] = _UNBOUNDED
    upper: Bound[T] = _UNBOUNDED

    def __post_init__(self) -> None:
        # Sides built directly still hold values of this domain
        for name, edge in (("lower", "start"), ("upper", "end")):
            bound = getattr(self, name)
            if not isinstance(bound, Bound):
                raise TypeError(
                    f"Range {edge} side must be a Bound.\n"
                    f"Got {type(bound).__name__!r}: {bound!r}\n"
                    f"Example: {type(self).__name__}.unbounded().{edge}_closed(value)"
                )
            if not bound.is_bounded:
                continue
            coerced = self._coerce(bound.value, edge)
            if type(coerced) is not type(bound.value) or coerced != bound.value:
                object.__setattr__(self, name, Bound(bound.type, coerced))

    @classmethod
    def unbounded(cls) -> Self:
        """Return a range with no constraint on either side."""
        return cls()

    @classmethod
    def create(cls, start: Any, end: Any) -> Self:
        """Return the half-open range ``[start, end)``."""
        return cls(
            Bound.closed(cls._coerce(start, "start")),
            Bound.open(cls._coerce(end, "end")),
        )

    @classmethod
    def _coerce(cls, value: Any, edge: Edge) -> T:
        """Convert caller input to a stored value of this domain."""
        return value

    @classmethod
    def _successor(cls, value: T) -> T | None:
        """Return the next value after ``value``, or None for dense domains."""
        return None

    @classmethod
    def _minimum(cls) -> T | None:
        """Return the smallest value of the domain, or None if there is none."""
        return None

    @property
    def start_bound(self) -> BoundType:
        return self.lower.type

    @property
    def end_bound(self) -> BoundType:
        return self.upper.type

    @property
    def start(self) -> T:
        """The start value.

        Raises:
            UnboundedRangeError: If the start side is unbounded
        """
        if not self.lower.is_bounded:
            raise UnboundedRangeError("start")
        return self.lower.value  # type: ignore[return-value]

    @property
    def end(self) -> T:
        """The end value.

        Raises:
            UnboundedRangeError: If the end side is unbounded
        """
        if not self.upper.is_bounded:
            raise UnboundedRangeError("end")
        return self.upper.value  # type: ignore[return-value]

    def start_open(self, value: Any) -> Self:
        return replace(self, lower=Bound.open(self._coerce(value, "start")))

    def start_closed(self, value: Any) -> Self:
        return replace(self, lower=Bound.closed(self._coerce(value, "start")))

    def end_open(self, value: Any) -> Self:
        return replace(self, upper=Bound.open(self._coerce(value, "end")))

    def end_closed(self, value: Any) -> Self:
        return replace(self, upper=Bound.closed(self._coerce(value, "end")))

    def contains(self, value: Any) -> bool:
        """Return True if ``value`` lies within this range."""
        point = self._coerce(value, "value")
        lower, upper = self.lower, self.upper

        if lower.type is BoundType.CLOSED and point < lower.value:  # type: ignore[operator]
            return False
        if lower.type is BoundType.OPEN and point <= lower.value:  # type: ignore[operator]
            return False
        if upper.type is BoundType.CLOSED and point > upper.value:  # type: ignore[operator]
            return False
        if upper.type is BoundType.OPEN and point >= upper.value:  # type: ignore[operator]
            return False
        return True

    def __contains__(self, value: Any) -> bool:
        return self.contains(value)

    def is_empty(self) -> bool:
        """Return True if no value of the domain lies within this range.

        An unbounded end never makes a range empty. An unbounded start does
        only when the end is open at the smallest value of the domain. For
        discrete domains a range open on both sides around two adjacent
        values is empty too. Integers are unbounded Python ints here, so no
        64-bit limit is treated as a domain edge.
        """
        if not self.upper.is_bounded:
            return False
        if not self.lower.is_bounded:
            minimum = self._minimum()
            return (
                minimum is not None
                and self.upper.type is BoundType.OPEN
                and self.upper.value == minimum
            )

        low, high = self.lower.value, self.upper.value
        if low > high:  # type: ignore[operator]
            return True
        if low == high:
            both_closed = (
                self.lower.type is BoundType.CLOSED
                and self.upper.type is BoundType.CLOSED
            )
            return not both_closed

        both_open = (
            self.lower.type is BoundType.OPEN and self.upper.type is BoundType.OPEN
        )
        return both_open and self._successor(low) == high  # type: ignore[arg-type]

    def __str__(self) -> str:
        """Interval notation, e.g. ``[b'a', b'z')`` or ``(-inf, 100]``."""
        if self.lower.type is BoundType.UNBOUNDED:
            left = "(-inf"
        else:
            bracket = "[" if self.lower.type is BoundType.CLOSED else "("
            left = f"{bracket}{self.lower.value!r}"

        if self.upper.type is BoundType.UNBOUNDED:
            right = "+inf)"
        else:
            bracket = "]" if self.upper.type is BoundType.CLOSED else ")"
            right = f"{self.upper.value!r}{bracket}"

        return f"{left}, {right}"


class ByteRange(Range[bytes]):
    """Range of row keys, compared lexicographically by raw bytes.

    Every method taking a value accepts bytes-like input (copied to ``bytes``)
    or text, which is encoded as UTF-8:

        >>> ByteRange.create("a", "z") == ByteRange.create(b"a", b"z")
        True
    """

    @classmethod
    @override
    def _coerce(cls, value: Any, edge: Edge) -> bytes:
        return to_bytes(value, edge)

    @classmethod
    @override
    def _successor(cls, value: bytes) -> bytes:
        return value + b"\x00"

    @classmethod
    @override
    def _minimum(cls) -> bytes:
        return b""

    @classmethod
    def prefix(cls, prefix: Any) -> "ByteRange":
        """Return the range of every row key starting with ``prefix``.

        The empty prefix matches every key. A prefix made only of 0xff bytes
        has no finite upper limit, so its end is left unbounded.
        """
        start = cls._coerce(prefix, "start")
        if not start:
            return cls.unbounded()

        # Drop trailing 0xff bytes, then increment the last remaining byte
        stem = start.rstrip(b"\xff")
        if not stem:
            return cls.unbounded().start_closed(start)
        return cls.create(start, stem[:-1] + bytes([stem[-1] + 1]))


class TimestampRange(Range[int]):
    """Range of cell timestamps in microseconds since the Unix epoch.

    Integers are stored as given. As a convenience every method taking a
    value also accepts timezone-aware datetimes, dates and ISO-8601 text; see
    ``rowrange.timestamps.to_micros``.

    ``is_empty()`` uses unbounded integer semantics: values past the 64-bit
    limits are neither rejected nor treated as the ends of the domain.
    """

    @classmethod
    @override
    def _coerce(cls, value: Any, edge: Edge) -> int:
        return to_micros(value, edge)

    @classmethod
    @override
    def _successor(cls, value: int) -> int:
        return value + 1
