"""Deterministic RNG authority for the simulation.

Gene weights, spawn positions and any other randomness draw from named
streams derived from one base seed, so a run is reproducible from its seed.
"""

from __future__ import annotations

import hashlib
import random
from dataclasses import dataclass, field
from typing import Dict


def _derive_seed(base_seed: int, name: str) -> int:
    """Derive a deterministic child seed from a base seed and a stream name."""
    payload = f"{base_seed}:{name}".encode("utf-8")
    digest = hashlib.sha256(payload).digest()
    # Constrain to Python's Random seed range while preserving entropy.
    return int.from_bytes(digest[:8], "big") & ((1 << 63) - 1)


@dataclass
class RNGStream:
    """Named random stream with a dedicated Random instance."""

    seed: int
    _random: random.Random = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._random = random.Random(self.seed)

    def uniform(self, a: float, b: float) -> float:
        return self._random.uniform(a, b)

    def gauss(self, mu: float, sigma: float) -> float:
        return self._random.gauss(mu, sigma)


class RNG:
    """Seeded RNG factory that spawns named, isolated streams."""

    def __init__(self, seed: int) -> None:
        self.seed = seed
        self._streams: Dict[str, RNGStream] = {}

    def stream(self, name: str) -> RNGStream:
        """Return a deterministic RNGStream for a given name (cached)."""
        if name not in self._streams:
            self._streams[name] = RNGStream(seed=_derive_seed(self.seed, name))
        return self._streams[name]


__all__ = ["RNG", "RNGStream"]
