"""Collaborator interfaces for the search engine: bounds and render sinks."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Protocol

from gridpath.search.contracts import SearchState
from gridpath.search.nodes import Position


class BoundsProvider(Protocol):
    @property
    def width(self) -> int:
        """Current playable width in grid units."""

    @property
    def height(self) -> int:
        """Current playable height in grid units."""


class RenderSink(Protocol):
    def on_cell_explored(self, position: Position) -> None:
        """A cell was popped from the frontier and expanded."""

    def on_cell_frontier(self, position: Position) -> None:
        """A cell entered the frontier or got a cheaper entry."""

    def on_cell_path(self, position: Position) -> None:
        """A cell belongs to the reconstructed path."""

    def on_state_changed(self, state: SearchState) -> None:
        """The engine moved to a new state."""


@dataclass(frozen=True)
class FixedBounds:
    width: int
    height: int


class NullSink(RenderSink):
    def on_cell_explored(self, position: Position) -> None:
        return None

    def on_cell_frontier(self, position: Position) -> None:
        return None

    def on_cell_path(self, position: Position) -> None:
        return None

    def on_state_changed(self, state: SearchState) -> None:
        return None


@dataclass
class RecordingSink(RenderSink):
    """Keep every notification in arrival order."""

    events: list[tuple[str, object]] = field(default_factory=list)

    def on_cell_explored(self, position: Position) -> None:
        self.events.append(("explored", position))

    def on_cell_frontier(self, position: Position) -> None:
        self.events.append(("frontier", position))

    def on_cell_path(self, position: Position) -> None:
        self.events.append(("path", position))

    def on_state_changed(self, state: SearchState) -> None:
        self.events.append(("state", state))

    def positions(self, kind: str) -> list[Position]:
        return [value for name, value in self.events if name == kind]

    def states(self) -> list[SearchState]:
        return [value for name, value in self.events if name == "state"]
