"""Search-tree nodes and the straight-line cost model."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator

CELL = 10

Position = tuple[int, int]


def distance(a: Position, b: Position) -> int:
    return round(math.sqrt((a[0] - b[0]) ** 2 + (a[1] - b[1]) ** 2))


def heuristic(position: Position, target: Position) -> int:
    return distance(position, target)


def neighbor_positions(position: Position, cell: int = CELL) -> Iterator[Position]:
    x, y = position
    for i in (-1, 0, 1):
        for j in (-1, 0, 1):
            if i == 0 and j == 0:
                continue
            yield (x + cell * i, y + cell * j)


@dataclass(eq=False)
class Node:
    """A search-tree entry.

    Equality and hashing only look at ``position`` so a bare ``Node(pos)`` can
    look up any set or frontier entry.
    """

    position: Position
    parent: Node | None = None
    g_cost: int = 0
    h_cost: int = 0

    @classmethod
    def create(cls, position: Position, parent: Node | None, target: Position) -> Node:
        g_cost = 0 if parent is None else parent.cost_to(position)
        return cls(
            position=position,
            parent=parent,
            g_cost=g_cost,
            h_cost=heuristic(position, target),
        )

    @property
    def f_cost(self) -> int:
        return self.g_cost + self.h_cost

    @property
    def x(self) -> int:
        return self.position[0]

    @property
    def y(self) -> int:
        return self.position[1]

    def cost_to(self, position: Position) -> int:
        """Accumulated cost of reaching ``position`` through this node."""
        return self.g_cost + distance(self.position, position)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Node):
            return NotImplemented
        return self.position == other.position

    def __hash__(self) -> int:
        return hash(self.position)
