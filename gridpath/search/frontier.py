"""Open set for the A* search: a lazy-deletion heap indexed by position."""

from __future__ import annotations

import heapq
import itertools

from gridpath.search.nodes import Node, Position


class Frontier:
    """Candidate nodes ordered by ``(f_cost, h_cost, insertion order)``.

    Removed or replaced entries stay in the heap and are skipped when they
    surface; the position index is the source of truth for membership.
    """

    def __init__(self) -> None:
        self._heap: list[tuple[int, int, int, Node]] = []
        self._entries: dict[Position, Node] = {}
        self._counter = itertools.count()

    def insert(self, node: Node) -> None:
        self._entries[node.position] = node
        heapq.heappush(
            self._heap, (node.f_cost, node.h_cost, next(self._counter), node)
        )

    def extract_min(self) -> Node | None:
        while self._heap:
            _, _, _, node = heapq.heappop(self._heap)
            if self._entries.get(node.position) is node:
                del self._entries[node.position]
                return node
        return None

    def find(self, position: Position) -> Node | None:
        return self._entries.get(position)

    def remove(self, node: Node) -> None:
        current = self._entries.get(node.position)
        if current is not None:
            del self._entries[node.position]
        if not self._entries:
            self._heap.clear()

    def clear(self) -> None:
        self._heap.clear()
        self._entries.clear()

    def positions(self) -> list[Position]:
        return list(self._entries)

    def __contains__(self, item: object) -> bool:
        if isinstance(item, Node):
            return item.position in self._entries
        return item in self._entries

    def __len__(self) -> int:
        return len(self._entries)
