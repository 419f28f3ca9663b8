"""Data contracts for Brain IO."""

from __future__ import annotations

from typing import Sequence

FRESH = "FRESH"
WARM = "WARM"


class WidthMismatch(ValueError):
    """A flattened vector does not have the width its codec declares.

    Raised for codec definition bugs (field order or width arithmetic) and for
    transforms that return the wrong number of values. Never retried.
    """

    def __init__(self, what: str, expected: int, actual: int) -> None:
        super().__init__(f"{what}: expected width {expected}, got {actual}")
        self.what = what
        self.expected = expected
        self.actual = actual


def check_width(what: str, values: Sequence[float], expected: int) -> None:
    if len(values) != expected:
        raise WidthMismatch(what, expected, len(values))


__all__ = ["FRESH", "WARM", "WidthMismatch", "check_width"]
