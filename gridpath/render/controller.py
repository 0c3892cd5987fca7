"""Translate pointer gestures on the grid into engine commands."""

from __future__ import annotations

from dataclasses import dataclass, field

from gridpath.search.base import BoundsProvider
from gridpath.search.contracts import SearchState
from gridpath.search.engine import SearchEngine
from gridpath.search.nodes import Position


@dataclass
class GridController:
    """Mouse and button semantics for the visualizer.

    Pressing on the start or target cell arms a relocation that completes on
    release, unless the release cell is blocked. Clicking or dragging anywhere
    else draws obstacles, never over the start or target.

    While a run is active the engine only queues commands, so the controller
    checks gestures against what it has requested rather than against the
    engine's not-yet-updated view.
    """

    engine: SearchEngine
    dragging: str | None = None
    last_message: str = ""
    start: Position = field(init=False)
    target: Position = field(init=False)
    drawn: set[Position] = field(init=False, default_factory=set)
    relocated: bool = field(init=False, default=False)

    def __post_init__(self) -> None:
        self.start = self.engine.start_position
        self.target = self.engine.target_position

    def press(self, position: Position) -> None:
        self.relocated = False
        if position == self.start:
            self.dragging = "start"
        elif position == self.target:
            self.dragging = "target"
        else:
            self.dragging = None

    def drag(self, position: Position) -> None:
        if self.dragging is None:
            self._draw_obstacle(position)

    def release(self, position: Position) -> None:
        dragging = self.dragging
        if dragging is None:
            return
        # Textual follows the release with a click on the same cell.
        self.relocated = True
        if self.is_blocked(position):
            self.last_message = f"Cannot move {dragging} onto an obstacle."
            return
        if dragging == "start":
            self._move_start(position)
        else:
            self._move_target(position)
        self.last_message = f"Moved {dragging} to {position[0]}, {position[1]}."

    def click(self, position: Position) -> None:
        if self.relocated:
            self.relocated = False
        else:
            self._draw_obstacle(position)
        self.dragging = None

    def is_blocked(self, position: Position) -> bool:
        return position in self.drawn or self.engine.is_blocked(position)

    def start_search(self) -> bool:
        state = self.engine.state
        if state.is_terminal:
            self.last_message = "Search finished. Press r to reset."
            return False
        if state == SearchState.RUNNING:
            return False
        started = self.engine.run()
        if started:
            self.last_message = "Searching..."
        return started

    def reset_search(self) -> None:
        self.engine.reset()
        self.drawn.clear()
        self.dragging = None
        self.relocated = False
        self.last_message = "Reset."

    def clamp_into(self, bounds: BoundsProvider) -> None:
        """Pull start and target back inside ``bounds`` if they fell outside."""
        if bounds.width <= 0 or bounds.height <= 0:
            return
        start = _clamp_position(self.start, bounds, self.engine.cell)
        if start != self.start:
            self._move_start(start)
        target = _clamp_position(self.target, bounds, self.engine.cell)
        if target != self.target:
            self._move_target(target)

    def _move_start(self, position: Position) -> None:
        self.start = position
        self.engine.set_start(position)

    def _move_target(self, position: Position) -> None:
        self.target = position
        self.engine.set_target(position)

    def _draw_obstacle(self, position: Position) -> None:
        if position in (self.start, self.target):
            return
        self.drawn.add(position)
        self.engine.add_blocked(position)


def _clamp_position(
    position: Position, bounds: BoundsProvider, cell: int
) -> Position:
    max_x = max(0, (bounds.width - 1) // cell * cell)
    max_y = max(0, (bounds.height - 1) // cell * cell)
    x, y = position
    return (max(0, min(max_x, x)), max(0, min(max_y, y)))
