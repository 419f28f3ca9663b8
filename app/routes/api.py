from __future__ import annotations

from dataclasses import replace
from typing import Any, Dict, List

from flask import jsonify, request

from app.routes import bp
from core.config import SimulationConfig
from core.engine import Engine
from core.entities import Creature
from metrics.schema import TickData


class EngineState:
    """Wrapper to hold engine and history for API responses."""

    def __init__(self, config: SimulationConfig) -> None:
        self.config = config
        self.engine = Engine(config)
        self.history: List[TickData] = []

    def step(self, batch_size: int) -> Dict[str, Any]:
        ticks = self.engine.run(batch_size)
        self.history.extend(ticks)
        world = self.engine.world
        return {
            "tick": self.engine.tick,
            "population": len(world.creatures),
            "births": world.births,
            "deaths": world.deaths,
            "creatures": [serialize_creature(c) for c in world.creatures],
        }


state: EngineState | None = None


def init_state(config: SimulationConfig) -> None:
    global state
    state = EngineState(config)


def serialize_creature(creature: Creature) -> Dict[str, Any]:
    return {
        "id": creature.id,
        "generation": creature.generation,
        "pos": list(creature.pos),
        "velocity": list(creature.velocity),
        "energy": creature.energy,
        "mass": creature.mass,
        "hue": creature.color.hue,
        "brain": creature.brain.get_diagnostics(),
    }


@bp.route("/", methods=["GET"])
def index() -> Any:
    assert state is not None, "Engine state not initialized"
    return jsonify({"status": "ok", "seed": state.config.seed})


@bp.route("/step", methods=["POST"])
def step() -> Any:
    assert state is not None, "Engine state not initialized"
    req = request.get_json(silent=True) or {}
    batch_size = int(req.get("batch_size", 1))
    batch_size = max(1, min(batch_size, 100))
    return jsonify(state.step(batch_size))


@bp.route("/reset", methods=["POST"])
def reset() -> Any:
    assert state is not None, "Engine state not initialized"
    req = request.get_json(silent=True) or {}
    new_seed = int(req.get("seed", state.config.seed))
    init_state(replace(state.config, seed=new_seed))
    return jsonify({"status": "reset", "seed": new_seed})


@bp.route("/creatures", methods=["GET"])
def creatures() -> Any:
    assert state is not None, "Engine state not initialized"
    return jsonify([serialize_creature(c) for c in state.engine.world.creatures])


@bp.route("/history", methods=["GET"])
def history() -> Any:
    assert state is not None, "Engine state not initialized"
    return jsonify([t.to_ordered_dict() for t in state.history])
