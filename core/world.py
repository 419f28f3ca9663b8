"""Deterministic world stepping."""

from __future__ import annotations

from typing import Dict, List, Tuple

from brain import Decisions, Perception
from core.config import SimulationConfig
from core.entities import Creature
from core.physiology import Metabolism
from core.rng import RNG
from core.tiles import TileGrid
from genes.population import generate_population


def _clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


class World:
    """World holds tiles and creatures and applies decisions deterministically."""

    def __init__(self, config: SimulationConfig) -> None:
        self.config = config
        self.rng = RNG(seed=config.seed)
        self.tiles = TileGrid(config.width_tiles, config.height_tiles, config.tile_size)
        self.bounds: Tuple[float, float] = config.world_size
        self.creatures: List[Creature] = []
        self.next_id = 0
        self.births = 0
        self.deaths = 0

    def populate(self) -> None:
        genes = generate_population(
            seed=self.config.seed,
            n=self.config.creatures,
            input_width=Perception.input_width(),
            output_width=Decisions.output_width(),
            hidden_layers=self.config.hidden_layers,
            scale=self.config.weight_scale,
        )
        spawn = self.rng.stream("spawn")
        for gene in genes:
            pos = (spawn.uniform(0.0, self.bounds[0]), spawn.uniform(0.0, self.bounds[1]))
            self.add_creature(
                Creature(
                    id=self.next_id,
                    pos=pos,
                    gene=gene,
                    mass=self.config.initial_mass,
                    metabolism=self._metabolism(self.config.initial_energy),
                )
            )

    def _metabolism(self, energy: float) -> Metabolism:
        return Metabolism(
            energy=energy,
            basal_cost=self.config.basal_cost,
            force_cost=self.config.force_cost,
            energy_gain=self.config.energy_gain,
        )

    def add_creature(self, creature: Creature) -> None:
        self.creatures.append(creature)
        self.next_id = max(self.next_id, creature.id + 1)

    def creature(self, creature_id: int) -> Creature:
        for creature in self.creatures:
            if creature.id == creature_id:
                return creature
        raise KeyError(f"No creature with id {creature_id}")

    def apply(self, creature: Creature, decisions: Decisions) -> None:
        """Apply force and color for one creature; energy is paid for the force."""
        dt = self.config.dt
        creature.apply_force(
            decisions.force, dt, force_scale=self.config.force_scale, max_speed=self.config.max_speed
        )
        creature.color = decisions.color
        creature.metabolism.tick(decisions.force.magnitude(), dt)

        # Blocked axes lose their velocity component.
        x, y = creature.pos
        vx, vy = creature.velocity
        cx = _clamp(x, 0.0, self.bounds[0])
        cy = _clamp(y, 0.0, self.bounds[1])
        creature.velocity = (vx if cx == x else 0.0, vy if cy == y else 0.0)
        creature.pos = (cx, cy)

    def reproduce(self, decisions: Dict[int, Decisions]) -> List[Creature]:
        """Spawn one offspring per willing creature with enough energy."""
        offspring: List[Creature] = []
        for creature in list(self.creatures):
            wants = decisions.get(creature.id)
            if wants is None or not wants.reproduction_will:
                continue
            if creature.energy < self.config.reproduction_energy:
                continue
            if len(self.creatures) >= self.config.max_creatures:
                break
            child = Creature(
                id=self.next_id,
                pos=creature.pos,
                gene=creature.gene,
                mass=creature.mass,
                color=creature.color,
                metabolism=creature.metabolism.split(),
                generation=creature.generation + 1,
            )
            self.add_creature(child)
            offspring.append(child)
            self.births += 1
        return offspring

    def remove_dead(self) -> List[Creature]:
        dead = [c for c in self.creatures if not c.alive]
        if dead:
            self.creatures = [c for c in self.creatures if c.alive]
            self.deaths += len(dead)
        return dead


__all__ = ["World"]
