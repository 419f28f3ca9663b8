"""Brain input: what a creature senses about its body and surroundings."""

from __future__ import annotations

from dataclasses import dataclass, field, replace

from .codecs import Composite, Float, HsvColor, Vector2
from .memory import Memory


@dataclass(frozen=True)
class BodyPerception(Composite):
    energy: Float
    mass: Float


@dataclass(frozen=True)
class EnvironmentPerception(Composite):
    velocity: Vector2
    tile_color: HsvColor


@dataclass(frozen=True)
class Perception(Composite):
    """Body, environment and memory, flattened in that order.

    Callers only fill in ``body`` and ``environment``; the memory slot is
    overwritten by the brain with its own previous memory before encoding.
    """

    body: BodyPerception
    environment: EnvironmentPerception
    memory: Memory = field(default_factory=Memory.zeros)

    def with_memory(self, memory: Memory) -> "Perception":
        return replace(self, memory=memory)


__all__ = ["BodyPerception", "EnvironmentPerception", "Perception"]
