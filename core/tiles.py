"""Tile grid the creatures walk on; each tile has a tint the creatures sense."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import List, Tuple

from brain.codecs import HsvColor

Vector = Tuple[float, float]


class TileType(Enum):
    NEUTRAL = "neutral"
    BLUE = "blue"
    RED = "red"


@dataclass
class Tile:
    x: int
    y: int
    color: HsvColor = HsvColor(hue=0.0, saturation=0.0, value=1.0)
    ttype: TileType = TileType.NEUTRAL


class TileGrid:
    """Row-major grid of ``width * height`` square tiles of side ``size``."""

    def __init__(self, width: int, height: int, size: float) -> None:
        self.width = width
        self.height = height
        self.size = size
        self.tiles: List[Tile] = [Tile(x=x, y=y) for y in range(height) for x in range(width)]
        self.update()

    def tint(self, x: int, y: int) -> HsvColor:
        # red ramps along x, green along y, blue saturated
        return HsvColor.from_rgb(x / self.width, y / self.height, 1.0)

    def update(self) -> None:
        """Per-tick hook: recompute every tile tint."""
        for tile in self.tiles:
            tile.color = self.tint(tile.x, tile.y)

    def index_of(self, pos: Vector) -> Tuple[int, int]:
        x = int(pos[0] // self.size)
        y = int(pos[1] // self.size)
        return max(0, min(self.width - 1, x)), max(0, min(self.height - 1, y))

    def tile_at(self, pos: Vector) -> Tile:
        x, y = self.index_of(pos)
        return self.tiles[y * self.width + x]


__all__ = ["Tile", "TileGrid", "TileType"]
