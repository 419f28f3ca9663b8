"""Deterministic engine that executes the tick pipeline over a world of creatures."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Dict, List

from brain import Decisions, Perception
from core.config import SimulationConfig
from core.entities import Creature
from core.pipeline import PIPELINE_ORDER, Pipeline
from core.sensors import gather_perception, perception_checksum
from core.world import World
from metrics.schema import TickData


@dataclass
class EngineContext:
    """Mutable tick state passed through the pipeline."""

    tick: int
    perceptions: Dict[int, Perception] = field(default_factory=dict)
    checksums: Dict[int, str] = field(default_factory=dict)
    decisions: Dict[int, Decisions] = field(default_factory=dict)
    born: List[Creature] = field(default_factory=list)
    dead: List[Creature] = field(default_factory=list)
    tick_data: List[TickData] = field(default_factory=list)


class Engine:
    """Runs sense -> think -> act for every creature, emitting TickData each tick."""

    def __init__(self, config: SimulationConfig | None = None, *, seed: int | None = None) -> None:
        config = config or SimulationConfig()
        if seed is not None:
            config = replace(config, seed=seed)
        self.config = config
        self.seed = config.seed
        self.world = World(config)
        self.world.populate()
        self._ctx = EngineContext(tick=-1)
        self.pipeline = Pipeline(
            handlers={
                "pre_tick": self._pre_tick,
                "tiles": self._tiles_step,
                "sensors": self._sensors_step,
                "brain": self._brain_step,
                "physics": self._physics_step,
                "reproduction": self._reproduction_step,
                "log": self._log_tick,
            },
            order=PIPELINE_ORDER,
        )

    def _pre_tick(self, ctx: EngineContext) -> None:
        ctx.perceptions.clear()
        ctx.checksums.clear()
        ctx.decisions.clear()
        ctx.born = []
        ctx.dead = []
        ctx.tick_data = []

    def _tiles_step(self, ctx: EngineContext) -> None:
        self.world.tiles.update()

    def _sensors_step(self, ctx: EngineContext) -> None:
        for creature in self.world.creatures:
            perception = gather_perception(creature, self.world.tiles)
            ctx.perceptions[creature.id] = perception
            ctx.checksums[creature.id] = perception_checksum(perception)

    def _brain_step(self, ctx: EngineContext) -> None:
        for creature in self.world.creatures:
            perception = ctx.perceptions.get(creature.id)
            if perception is None:
                raise RuntimeError(f"Perception missing before brain step for creature {creature.id}")
            ctx.decisions[creature.id] = creature.brain.think(perception)

    def _physics_step(self, ctx: EngineContext) -> None:
        for creature in self.world.creatures:
            self.world.apply(creature, ctx.decisions[creature.id])

    def _reproduction_step(self, ctx: EngineContext) -> None:
        ctx.dead = self.world.remove_dead()
        ctx.born = self.world.reproduce(ctx.decisions)

    def _log_tick(self, ctx: EngineContext) -> None:
        thinkers = [c for c in self.world.creatures + ctx.dead if c.id in ctx.decisions]
        population = len(self.world.creatures)
        for creature in sorted(thinkers, key=lambda c: c.id):
            decisions = ctx.decisions[creature.id]
            perception = ctx.perceptions[creature.id]
            ctx.tick_data.append(
                TickData(
                    tick=ctx.tick,
                    creature_id=creature.id,
                    generation=creature.generation,
                    gene_fingerprint=creature.gene.fingerprint(),
                    pos=creature.pos,
                    velocity=creature.velocity,
                    energy=creature.energy,
                    mass=creature.mass,
                    alive=creature.alive,
                    tile_hue=perception.environment.tile_color.hue,
                    perception_checksum=ctx.checksums[creature.id],
                    force=(decisions.force.x, decisions.force.y),
                    reproduction_will=decisions.reproduction_will.value,
                    hue=decisions.color.hue,
                    memory=list(decisions.memory.values),
                    brain_state=creature.brain.state,
                    population=population,
                )
            )

    @property
    def tick(self) -> int:
        """Index of the last completed tick, -1 before the first."""
        return self._ctx.tick

    def run(self, ticks: int) -> List[TickData]:
        """Execute the pipeline for N more ticks and return their TickData stream."""
        ctx = self._ctx
        trace: List[TickData] = []
        for _ in range(ticks):
            ctx.tick += 1
            self.pipeline.run(ctx)
            trace.extend(ctx.tick_data)
        return trace


__all__ = ["Engine", "EngineContext"]
