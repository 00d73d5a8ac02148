from __future__ import annotations

import math
from typing import Dict, Iterable, List, Tuple

from pygame.math import Vector2

from .agent import Bird


class SpatialGrid:
    """Uniform hash grid over bird positions.

    Positions are not clamped to the world, so buckets are keyed by floor
    division and may have negative indices.
    """

    def __init__(self, cell_size: float) -> None:
        self._cell_size = cell_size
        self._cells: Dict[Tuple[int, int], List[Bird]] = {}
        self._active_keys: List[Tuple[int, int]] = []

    @property
    def cell_size(self) -> float:
        return self._cell_size

    def clear(self) -> None:
        for key in self._active_keys:
            bucket = self._cells.get(key)
            if bucket:
                bucket.clear()
        self._active_keys.clear()

    def insert(self, bird: Bird) -> None:
        key = self._cell_key(bird.position)
        bucket = self._cells.get(key)
        if bucket is None:
            bucket = []
            self._cells[key] = bucket
            self._active_keys.append(key)
        elif not bucket:
            # Bucket exists but was cleared at the start of this tick; mark it active again.
            self._active_keys.append(key)
        bucket.append(bird)

    def rebuild(self, birds: Iterable[Bird]) -> None:
        self.clear()
        for bird in birds:
            self.insert(bird)

    def get_neighbors(self, position: Vector2, radius: float) -> List[Bird]:
        found: List[Bird] = []
        base_key = self._cell_key(position)
        cell_range = int(math.ceil(radius / self._cell_size))
        radius_sq = radius * radius
        pos_x = position.x
        pos_y = position.y

        for dx in range(-cell_range, cell_range + 1):
            for dy in range(-cell_range, cell_range + 1):
                bucket = self._cells.get((base_key[0] + dx, base_key[1] + dy))
                if not bucket:
                    continue
                for bird in bucket:
                    pos = bird.position
                    offset_x = pos.x - pos_x
                    offset_y = pos.y - pos_y
                    if offset_x * offset_x + offset_y * offset_y <= radius_sq:
                        found.append(bird)
        return found

    def _cell_key(self, position: Vector2) -> Tuple[int, int]:
        return (int(position.x // self._cell_size), int(position.y // self._cell_size))
