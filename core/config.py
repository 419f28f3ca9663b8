"""Simulation configuration with defaults, loaded from JSON or a mapping."""

from __future__ import annotations

import json
from dataclasses import asdict, dataclass, field, fields
from pathlib import Path
from typing import Any, Dict, Mapping, Tuple

from model_contracts import assert_non_negative, assert_positive, assert_range


@dataclass(frozen=True)
class SimulationConfig:
    seed: int = 1337
    creatures: int = 8
    max_creatures: int = 64
    # Tile grid
    width_tiles: int = 32
    height_tiles: int = 24
    tile_size: float = 20.0
    # Physics
    dt: float = 0.1
    force_scale: float = 50.0
    max_speed: float = 100.0
    initial_mass: float = 1.0
    # Metabolism
    initial_energy: float = 100.0
    basal_cost: float = 0.05
    force_cost: float = 0.5
    reproduction_energy: float = 80.0
    energy_gain: float = 0.0
    # Brain genes
    hidden_layers: Tuple[int, ...] = field(default_factory=lambda: (8,))
    weight_scale: float = 1.0

    def __post_init__(self) -> None:
        object.__setattr__(self, "hidden_layers", tuple(int(n) for n in self.hidden_layers))
        self.validate()

    def validate(self) -> None:
        assert_range(self.creatures, 0, self.max_creatures, name="creatures")
        for name in ("width_tiles", "height_tiles", "tile_size", "dt", "initial_mass", "initial_energy"):
            assert_positive(getattr(self, name), name=name)
        for name in ("basal_cost", "force_cost", "energy_gain", "force_scale", "max_speed", "weight_scale"):
            assert_non_negative(getattr(self, name), name=name)
        if any(n <= 0 for n in self.hidden_layers):
            raise ValueError(f"hidden_layers must be positive sizes, got {self.hidden_layers}")

    @property
    def world_size(self) -> Tuple[float, float]:
        return (self.width_tiles * self.tile_size, self.height_tiles * self.tile_size)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None = None) -> "SimulationConfig":
        data = dict(data or {})
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ValueError(f"Unknown config keys: {', '.join(unknown)}")
        return cls(**data)

    @classmethod
    def from_json(cls, path: str | Path) -> "SimulationConfig":
        return cls.from_dict(json.loads(Path(path).read_text()))

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["hidden_layers"] = list(self.hidden_layers)
        return data


__all__ = ["SimulationConfig"]
