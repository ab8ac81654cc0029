"""Tiled background for the arena: walls around the edge, random floor inside."""

from __future__ import annotations

import random
import time
from collections.abc import Iterator
from dataclasses import dataclass, field

TILE_SIZE = 50
TILE_TYPES = 3
VERTS_IN_QUAD = 4

Point = tuple[float, float]


@dataclass(frozen=True)
class Arena:
    """Integer rectangle describing the playable area."""

    left: int = 0
    top: int = 0
    width: int = 0
    height: int = 0


@dataclass(frozen=True)
class Vertex:
    """A corner of a textured quad: where it sits and where it samples the sheet."""

    position: Point
    tex_coords: Point


@dataclass
class Background:
    """Vertices of the background quads, four per tile, plus the tile size."""

    vertices: list[Vertex] = field(default_factory=list)
    tile_size: int = TILE_SIZE

    def __len__(self) -> int:
        return len(self.vertices)

    def quads(self) -> Iterator[tuple[Vertex, Vertex, Vertex, Vertex]]:
        """Yield the vertices grouped into quads."""
        corners = iter(self.vertices)
        return zip(corners, corners, corners, corners)


def _square(x: float, y: float, size: float) -> tuple[Point, Point, Point, Point]:
    return (x, y), (x + size, y), (x + size, y + size), (x, y + size)


def create_background(arena: Arena, seed: int | None = None) -> Background:
    """Lay out the tiles covering ``arena``.

    Border tiles use the wall texture (the last row of the sheet); inner tiles
    pick one of the floor textures.  The floor choice is derived from ``seed``
    (the current time when omitted) and the tile's grid coordinates.
    """
    base = int(time.time()) if seed is None else seed
    world_width = max(0, int(arena.width / TILE_SIZE))
    world_height = max(0, int(arena.height / TILE_SIZE))

    vertices: list[Vertex] = []
    for w in range(world_width):
        for h in range(world_height):
            positions = _square(w * TILE_SIZE, h * TILE_SIZE, TILE_SIZE)
            on_edge = h in (0, world_height - 1) or w in (0, world_width - 1)
            if on_edge:
                offset = TILE_TYPES * TILE_SIZE
            else:
                floor_type = random.Random(base + h * w - h).randrange(TILE_TYPES)
                offset = floor_type * TILE_SIZE
            textures = _square(0, offset, TILE_SIZE)
            vertices.extend(Vertex(p, t) for p, t in zip(positions, textures))

    return Background(vertices=vertices, tile_size=TILE_SIZE)