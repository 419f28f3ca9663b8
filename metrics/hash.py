"""Hash utilities for TickData traces."""

from __future__ import annotations

import hashlib
from typing import Any, Dict, Iterable, List, Mapping, Union

from .logger import canonical_json, normalize_tick
from .schema import TickData

TickLike = Union[TickData, Mapping[str, Any]]


def tick_hash(tick: TickLike) -> str:
    """Return a deterministic hash for a single creature tick."""
    canonical = canonical_json(normalize_tick(tick))
    return hashlib.sha256(canonical.encode("utf-8")).hexdigest()


class RunHash:
    """Accumulator for a full run; feeds on per-tick hashes."""

    def __init__(self) -> None:
        self._hasher = hashlib.sha256()
        self.count = 0

    def update(self, tick: TickLike) -> str:
        digest = tick_hash(tick)
        self._hasher.update(digest.encode("utf-8"))
        self.count += 1
        return digest

    def hexdigest(self) -> str:
        return self._hasher.hexdigest()


def trace_hashes(ticks: Iterable[TickData]) -> List[Dict[str, Any]]:
    """Per-row hashes followed by the run hash, for comparing two traces."""
    run_hash = RunHash()
    rows: List[Dict[str, Any]] = []
    for tick in ticks:
        digest = run_hash.update(tick)
        rows.append({"tick": tick.tick, "creature_id": tick.creature_id, "hash": digest})
    rows.append({"tick": "run", "creature_id": None, "hash": run_hash.hexdigest()})
    return rows


__all__ = ["RunHash", "tick_hash", "trace_hashes"]
