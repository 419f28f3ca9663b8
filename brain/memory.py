"""Persisted recurrent state of one brain."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, List, Sequence, Tuple

from .codecs import Codec
from .contracts import WidthMismatch, check_width


@dataclass(frozen=True)
class Memory(Codec):
    """Fixed-size feedback vector carried from one think-cycle to the next."""

    values: Tuple[float, ...]

    SIZE: ClassVar[int] = 5
    INPUT_WIDTH: ClassVar[int] = SIZE
    OUTPUT_WIDTH: ClassVar[int] = SIZE

    def __post_init__(self) -> None:
        if len(self.values) != self.SIZE:
            raise WidthMismatch("Memory", self.SIZE, len(self.values))
        object.__setattr__(self, "values", tuple(float(v) for v in self.values))

    @classmethod
    def zeros(cls) -> "Memory":
        return cls((0.0,) * cls.SIZE)

    def encode(self) -> List[float]:
        return list(self.values)

    @classmethod
    def decode(cls, output: Sequence[float]) -> "Memory":
        check_width("Memory", output, cls.OUTPUT_WIDTH)
        return cls(tuple(output))


__all__ = ["Memory"]
