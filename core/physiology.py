"""Simple deterministic creature energy model."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Metabolism:
    energy: float = 100.0
    basal_cost: float = 0.05
    force_cost: float = 0.5
    energy_gain: float = 0.0
    energy_floor: float = 0.0

    @property
    def alive(self) -> bool:
        return self.energy > self.energy_floor

    def tick(self, force_magnitude: float, dt: float) -> float:
        """Pay for one tick of effort; return the energy left."""
        cost = (self.basal_cost + self.force_cost * max(force_magnitude, 0.0)) * dt
        self.energy += self.energy_gain * dt - cost
        self.energy = max(self.energy_floor, self.energy)
        return self.energy

    def split(self) -> "Metabolism":
        """Give half of the energy to an offspring metabolism."""
        half = self.energy / 2.0
        self.energy -= half
        return Metabolism(
            energy=half,
            basal_cost=self.basal_cost,
            force_cost=self.force_cost,
            energy_gain=self.energy_gain,
            energy_floor=self.energy_floor,
        )


__all__ = ["Metabolism"]
