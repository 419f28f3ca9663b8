"""Canonical metrics schema definitions."""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from typing import Any, Dict, List, Tuple

SCHEMA_VERSION = "1.0.0"


@dataclass
class TickData:
    """One creature at one tick: what it sensed, decided and became."""

    schema_version: str = SCHEMA_VERSION
    tick: int = 0
    creature_id: int = 0
    generation: int = 0
    gene_fingerprint: str = ""
    # Body
    pos: Tuple[float, float] = (0.0, 0.0)
    velocity: Tuple[float, float] = (0.0, 0.0)
    energy: float = 0.0
    mass: float = 0.0
    alive: bool = True
    # Perception summary
    tile_hue: float = 0.0
    perception_checksum: str = ""
    # Decisions
    force: Tuple[float, float] = (0.0, 0.0)
    reproduction_will: bool = False
    hue: float = 0.0
    memory: List[float] = field(default_factory=list)
    brain_state: str = "FRESH"
    # Population
    population: int = 0

    def to_ordered_dict(self) -> Dict[str, Any]:
        """Return a plain dict in schema order for deterministic serialization."""
        return {f.name: getattr(self, f.name) for f in fields(self)}
