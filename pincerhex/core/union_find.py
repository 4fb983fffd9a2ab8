from __future__ import annotations

from dataclasses import dataclass
from typing import Dict

from .tile import Tile


@dataclass
class _Element:
    parent: Tile
    rank: int = 0


class UnionFind:
    """Disjoint sets over tiles, including the ``EDGE1``/``EDGE2`` sentinels.

    Map-backed because regular tiles and the sentinels share one key space.
    Unseen keys are created as singleton roots the first time they are found.
    """

    def __init__(self) -> None:
        self._set: Dict[Tile, _Element] = {}

    def __len__(self) -> int:
        return len(self._set)

    def __contains__(self, tile: object) -> bool:
        return tile in self._set

    def copy(self) -> "UnionFind":
        clone = UnionFind()
        clone._set = {tile: _Element(elem.parent, elem.rank) for tile, elem in self._set.items()}
        return clone

    def find(self, x: Tile) -> Tile:
        while True:
            element = self._set.get(x)
            if element is None:
                self._set[x] = _Element(parent=x)
                return x
            if element.parent == x:
                return x
            grandparent = self._set[element.parent].parent
            if grandparent == element.parent:
                return element.parent
            # Path halving: skip one level, then continue from the grandparent.
            element.parent = grandparent
            x = grandparent

    def union(self, x: Tile, y: Tile) -> None:
        rep_x = self.find(x)
        rep_y = self.find(y)
        if rep_x == rep_y:
            return
        elem_x = self._set[rep_x]
        elem_y = self._set[rep_y]
        if elem_x.rank < elem_y.rank:
            elem_x.parent = rep_y
        elif elem_x.rank > elem_y.rank:
            elem_y.parent = rep_x
        else:
            elem_x.parent = rep_y
            elem_y.rank += 1

    def connected(self, x: Tile, y: Tile) -> bool:
        return self.find(x) == self.find(y)
