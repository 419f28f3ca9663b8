"""Codecs between structured brain values and flat real vectors.

Every codec declares two widths: how many reals it produces when encoded as
brain input, and how many reals it consumes when decoded from brain output.
The two may differ (``HsvColor`` senses a full color but only decides a hue).

Composite codecs are dataclasses whose fields are codecs; their widths and
encodings are the concatenation of their fields in declaration order.
"""

from __future__ import annotations

import colorsys
import math
from abc import ABC, abstractmethod
from dataclasses import dataclass, fields
from functools import lru_cache
from typing import ClassVar, List, Sequence, Tuple, Type, TypeVar, get_type_hints

import numpy as np

from .contracts import WidthMismatch, check_width

C = TypeVar("C", bound="Codec")


class Codec(ABC):
    INPUT_WIDTH: ClassVar[int]
    OUTPUT_WIDTH: ClassVar[int]

    @classmethod
    def input_width(cls) -> int:
        return cls.INPUT_WIDTH

    @classmethod
    def output_width(cls) -> int:
        return cls.OUTPUT_WIDTH

    @abstractmethod
    def encode(self) -> List[float]:
        """Flatten to exactly ``input_width()`` reals."""

    @classmethod
    @abstractmethod
    def decode(cls: Type[C], output: Sequence[float]) -> C:
        """Rebuild from exactly ``output_width()`` reals."""


@dataclass(frozen=True)
class Float(Codec):
    value: float

    INPUT_WIDTH: ClassVar[int] = 1
    OUTPUT_WIDTH: ClassVar[int] = 1

    def encode(self) -> List[float]:
        return [float(self.value)]

    @classmethod
    def decode(cls, output: Sequence[float]) -> "Float":
        check_width("Float", output, cls.OUTPUT_WIDTH)
        return cls(float(output[0]))


@dataclass(frozen=True)
class Bool(Codec):
    value: bool

    INPUT_WIDTH: ClassVar[int] = 1
    OUTPUT_WIDTH: ClassVar[int] = 1
    THRESHOLD: ClassVar[float] = 0.5

    def encode(self) -> List[float]:
        return [1.0 if self.value else 0.0]

    @classmethod
    def decode(cls, output: Sequence[float]) -> "Bool":
        check_width("Bool", output, cls.OUTPUT_WIDTH)
        return cls(bool(output[0] >= cls.THRESHOLD))

    def __bool__(self) -> bool:
        return self.value


@dataclass(frozen=True)
class Vector2(Codec):
    """2D vector. Decoding remaps raw [0, 1] outputs onto [-1, 1]."""

    x: float
    y: float

    INPUT_WIDTH: ClassVar[int] = 2
    OUTPUT_WIDTH: ClassVar[int] = 2

    def encode(self) -> List[float]:
        return [float(self.x), float(self.y)]

    @classmethod
    def decode(cls, output: Sequence[float]) -> "Vector2":
        check_width("Vector2", output, cls.OUTPUT_WIDTH)
        return cls(float(output[0]) * 2.0 - 1.0, float(output[1]) * 2.0 - 1.0)

    @classmethod
    def zero(cls) -> "Vector2":
        return cls(0.0, 0.0)

    def magnitude(self) -> float:
        return math.hypot(self.x, self.y)

    def as_array(self) -> np.ndarray:
        return np.array([self.x, self.y], dtype=np.float64)


@dataclass(frozen=True)
class HsvColor(Codec):
    """HSV color with the hue in radians.

    Encoded as (hue, saturation, value). Decoded from a single hue fraction:
    ``h * 2pi - pi``, always at full saturation and value.
    """

    hue: float
    saturation: float = 1.0
    value: float = 1.0

    INPUT_WIDTH: ClassVar[int] = 3
    OUTPUT_WIDTH: ClassVar[int] = 1

    def encode(self) -> List[float]:
        return [float(self.hue), float(self.saturation), float(self.value)]

    @classmethod
    def decode(cls, output: Sequence[float]) -> "HsvColor":
        check_width("HsvColor", output, cls.OUTPUT_WIDTH)
        return cls(hue=float(output[0]) * 2.0 * math.pi - math.pi, saturation=1.0, value=1.0)

    @classmethod
    def from_rgb(cls, r: float, g: float, b: float) -> "HsvColor":
        h, s, v = colorsys.rgb_to_hsv(r, g, b)
        hue = h * 2.0 * math.pi
        # canonical range (-pi, pi]
        if hue > math.pi:
            hue -= 2.0 * math.pi
        return cls(hue=hue, saturation=s, value=v)


class Composite(Codec):
    """Codec made of codec-typed dataclass fields, in declaration order."""

    @classmethod
    def input_width(cls) -> int:
        return sum(codec.input_width() for _, codec in _field_codecs(cls))

    @classmethod
    def output_width(cls) -> int:
        return sum(codec.output_width() for _, codec in _field_codecs(cls))

    def encode(self) -> List[float]:
        encoded: List[float] = []
        for name, _ in _field_codecs(type(self)):
            encoded.extend(getattr(self, name).encode())
        check_width(type(self).__name__, encoded, type(self).input_width())
        return encoded

    @classmethod
    def decode(cls, output: Sequence[float]):
        check_width(cls.__name__, output, cls.output_width())
        values = {}
        offset = 0
        for name, codec in _field_codecs(cls):
            width = codec.output_width()
            values[name] = codec.decode(output[offset : offset + width])
            offset += width
        return cls(**values)


@lru_cache(maxsize=None)
def _field_codecs(cls: type) -> Tuple[Tuple[str, Type[Codec]], ...]:
    hints = get_type_hints(cls)
    resolved = []
    for f in fields(cls):
        codec = hints[f.name]
        if not (isinstance(codec, type) and issubclass(codec, Codec)):
            raise TypeError(f"{cls.__name__}.{f.name} is not a codec: {codec!r}")
        resolved.append((f.name, codec))
    return tuple(resolved)


def codec_layout(cls: Type[Composite], *, direction: str = "output") -> List[Tuple[str, str, int, int]]:
    """Return ``(field, codec, offset, width)`` rows for a composite."""
    if direction not in ("input", "output"):
        raise ValueError(f"direction must be 'input' or 'output', got {direction!r}")
    rows = []
    offset = 0
    for name, codec in _field_codecs(cls):
        width = codec.input_width() if direction == "input" else codec.output_width()
        rows.append((name, codec.__name__, offset, width))
        offset += width
    return rows


__all__ = [
    "Bool",
    "Codec",
    "Composite",
    "Float",
    "HsvColor",
    "Vector2",
    "WidthMismatch",
    "codec_layout",
]
