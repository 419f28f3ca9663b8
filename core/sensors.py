"""Sensor outputs and Perception construction."""

from __future__ import annotations

import hashlib

from brain import BodyPerception, EnvironmentPerception, Float, Perception, Vector2
from core.entities import Creature
from core.tiles import TileGrid


def gather_perception(creature: Creature, tiles: TileGrid) -> Perception:
    """Collect the body and environment a creature senses.

    The memory slot is left at its default; the creature's brain fills it.
    """
    return Perception(
        body=BodyPerception(energy=Float(creature.energy), mass=Float(creature.mass)),
        environment=EnvironmentPerception(
            velocity=Vector2(*creature.velocity),
            tile_color=tiles.tile_at(creature.pos).color,
        ),
    )


def perception_checksum(perception: Perception) -> str:
    """Compute a stable checksum of the caller-supplied part of a perception."""
    values = perception.body.encode() + perception.environment.encode()
    payload = ",".join(repr(float(v)) for v in values).encode("utf-8")
    return hashlib.sha256(payload).hexdigest()


__all__ = ["gather_perception", "perception_checksum"]
