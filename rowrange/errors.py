"""Exceptions raised by rowrange."""

from typing import Literal


class UnboundedRangeError(ValueError):
    """Raised when reading the value of an unbounded side of a range.

    An unbounded side has no value to return. Callers are expected to check
    ``start_bound`` / ``end_bound`` before dereferencing ``start`` / ``end``.
    """

    def __init__(self, side: Literal["start", "end"]):
        self.side: Literal["start", "end"] = side
        super().__init__(
            f"Range {side} is unbounded and has no value.\n"
            f"Hint: check the bound type before reading the value:\n"
            f"  if rng.{side}_bound is not BoundType.UNBOUNDED:\n"
            f"      value = rng.{side}"
        )
