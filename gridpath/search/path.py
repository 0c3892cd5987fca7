"""Rebuild the found path from parent links."""

from __future__ import annotations

from gridpath.search.nodes import Node, Position, distance


def reconstruct_path(node: Node) -> list[Position]:
    """Return positions from the root of ``node``'s tree to ``node``."""
    path: list[Position] = []
    current: Node | None = node
    while current is not None:
        path.append(current.position)
        current = current.parent
    path.reverse()
    return path


def path_cost(path: list[Position]) -> int:
    return sum(distance(a, b) for a, b in zip(path, path[1:]))
