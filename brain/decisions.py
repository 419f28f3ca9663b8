"""Brain output: what a creature decided to do this tick."""

from __future__ import annotations

from dataclasses import dataclass

from .codecs import Bool, Composite, HsvColor, Vector2
from .memory import Memory


@dataclass(frozen=True)
class Decisions(Composite):
    force: Vector2  # [-1, 1] per axis
    reproduction_will: Bool
    color: HsvColor  # hue only, full saturation/value
    memory: Memory


__all__ = ["Decisions"]
