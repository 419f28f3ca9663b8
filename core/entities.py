"""Entity definitions for the simulation world."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Tuple

from brain import Brain, HsvColor, Vector2
from core.physiology import Metabolism
from genes.brain_gene import BrainGene

Vector = Tuple[float, float]


@dataclass
class Entity:
    """Base entity."""

    id: int
    pos: Vector


@dataclass
class Creature(Entity):
    """A body driven by its own brain."""

    gene: BrainGene
    velocity: Vector = (0.0, 0.0)
    mass: float = 1.0
    color: HsvColor = HsvColor(hue=0.0)
    metabolism: Metabolism = field(default_factory=Metabolism)
    brain: Brain = field(init=False, repr=False)
    generation: int = 0

    def __post_init__(self) -> None:
        # one brain per creature, built at birth
        self.brain = Brain(self.gene)

    @property
    def energy(self) -> float:
        return self.metabolism.energy

    @property
    def alive(self) -> bool:
        return self.metabolism.alive

    def apply_force(self, force: Vector2, dt: float, *, force_scale: float = 1.0, max_speed: float = math.inf) -> None:
        """Integrate ``force`` (already in [-1, 1] per axis) over ``dt``."""
        ax = force.x * force_scale / self.mass
        ay = force.y * force_scale / self.mass
        vx = self.velocity[0] + ax * dt
        vy = self.velocity[1] + ay * dt
        speed = math.hypot(vx, vy)
        if speed > max_speed:
            vx, vy = vx * max_speed / speed, vy * max_speed / speed
        self.velocity = (vx, vy)
        x, y = self.pos
        self.pos = (x + vx * dt, y + vy * dt)


__all__ = ["Creature", "Entity"]
