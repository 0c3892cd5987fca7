"""Incremental A* search engine driven step by step for live rendering."""

from __future__ import annotations

import logging
import queue
import threading
from functools import partial
from typing import Callable

from gridpath.search.base import BoundsProvider, NullSink, RenderSink
from gridpath.search.contracts import GridBounds, SearchSnapshot, SearchState
from gridpath.search.frontier import Frontier
from gridpath.search.nodes import CELL, Node, Position, neighbor_positions
from gridpath.search.path import reconstruct_path

logger = logging.getLogger(__name__)

DEFAULT_START: Position = (40, 500)
DEFAULT_TARGET: Position = (720, 20)
DEFAULT_STEP_DELAY = 0.01

Command = Callable[[], None]


class SearchEngine:
    """A* over an implicit 8-connected grid of ``cell``-sized squares.

    The engine owns the frontier, explored, blocked and path collections. A
    run either steps synchronously (``step``/``solve``) or on one background
    worker (``run``). While a worker is active, mutating commands are queued
    and applied by the worker between steps; otherwise they apply at once.
    ``reset`` is the only way to stop a run and is honoured within one step.

    The engine never checks that start or target sit on a blocked cell; that
    is the controller's job.
    """

    def __init__(
        self,
        bounds: BoundsProvider,
        *,
        sink: RenderSink | None = None,
        start: Position = DEFAULT_START,
        target: Position = DEFAULT_TARGET,
        cell: int = CELL,
        step_delay: float = DEFAULT_STEP_DELAY,
    ) -> None:
        self._bounds = bounds
        self._sink = sink or NullSink()
        self._cell = cell
        self._step_delay = step_delay
        self._start = start
        self._target = target

        self._frontier = Frontier()
        self._explored: set[Position] = set()
        self._blocked: set[Position] = set()
        self._path: list[Position] = []
        self._terminal: Node | None = None
        self._state = SearchState.IDLE

        self._state_lock = threading.RLock()
        self._command_lock = threading.Lock()
        self._commands: queue.SimpleQueue[Command] = queue.SimpleQueue()
        self._cancel = threading.Event()
        self._worker: threading.Thread | None = None
        self._worker_active = False

    # --- Queries ---

    @property
    def cell(self) -> int:
        return self._cell

    @property
    def state(self) -> SearchState:
        return self._state

    @property
    def start_position(self) -> Position:
        return self._start

    @property
    def target_position(self) -> Position:
        return self._target

    @property
    def terminal_node(self) -> Node | None:
        return self._terminal

    def is_running(self) -> bool:
        return self._state == SearchState.RUNNING

    def is_blocked(self, position: Position) -> bool:
        with self._state_lock:
            return position in self._blocked

    def frontier_positions(self) -> list[Position]:
        with self._state_lock:
            return self._frontier.positions()

    def frontier_node(self, position: Position) -> Node | None:
        with self._state_lock:
            return self._frontier.find(position)

    def explored_positions(self) -> set[Position]:
        with self._state_lock:
            return set(self._explored)

    def blocked_positions(self) -> set[Position]:
        with self._state_lock:
            return set(self._blocked)

    def path_positions(self) -> list[Position]:
        with self._state_lock:
            return list(self._path)

    def snapshot(self) -> SearchSnapshot:
        with self._state_lock:
            return SearchSnapshot(
                state=self._state,
                cell=self._cell,
                start=self._start,
                target=self._target,
                frontier=sorted(self._frontier.positions()),
                explored=sorted(self._explored),
                blocked=sorted(self._blocked),
                path=list(self._path),
                bounds=GridBounds(
                    width=self._bounds.width, height=self._bounds.height
                ),
                path_cost=self._terminal.g_cost if self._terminal else None,
            )

    # --- Commands ---

    def add_blocked(self, position: Position) -> None:
        self._submit(partial(self._blocked.add, position))

    def set_start(self, position: Position) -> None:
        self._submit(partial(setattr, self, "_start", position))

    def set_target(self, position: Position) -> None:
        self._submit(partial(setattr, self, "_target", position))

    def start(self) -> bool:
        """Seed the frontier with the start node and enter ``running``."""
        with self._command_lock:
            if self._worker_active:
                logger.debug("start ignored: a worker is already active")
                return False
            with self._state_lock:
                return self._begin()

    def step(self) -> SearchState:
        """Run one iteration of the search loop and return the new state."""
        if self._worker_active and threading.current_thread() is not self._worker:
            logger.debug("step ignored: the search is driven by a worker")
            return self._state
        with self._state_lock:
            self._drain_commands()
            return self._advance()

    def solve(self) -> SearchState:
        """Run synchronously, without pacing, until a terminal state."""
        if self._worker_active:
            logger.debug("solve ignored: the search is driven by a worker")
            return self._state
        if self._state == SearchState.IDLE and not self.start():
            return self._state
        while self.step() == SearchState.RUNNING:
            pass
        return self._state

    def run(self) -> bool:
        """Start a run on a background worker with paced steps."""
        previous = self._worker
        if previous is not None and self._cancel.is_set():
            previous.join()
        with self._command_lock:
            if self._worker_active:
                logger.debug("run ignored: a worker is already active")
                return False
            with self._state_lock:
                if not self._begin():
                    return False
            self._cancel.clear()
            self._worker_active = True
            self._worker = threading.Thread(
                target=self._worker_loop, name="gridpath-search", daemon=True
            )
            self._worker.start()
        return True

    def wait(self, timeout: float | None = None) -> bool:
        """Join the worker; ``True`` once no worker is running."""
        worker = self._worker
        if worker is None:
            return True
        worker.join(timeout)
        return not worker.is_alive()

    def reset(self) -> None:
        """Stop any run and clear frontier, explored, blocked and path."""
        self._cancel.set()
        with self._state_lock:
            self._drain_commands()
            self._frontier.clear()
            self._explored.clear()
            self._blocked.clear()
            self._path = []
            self._terminal = None
            self._set_state(SearchState.IDLE)

    # --- Private helpers ---

    def _submit(self, command: Command) -> None:
        with self._command_lock:
            if self._worker_active:
                self._commands.put(command)
                return
            with self._state_lock:
                command()

    def _drain_commands(self) -> None:
        while True:
            try:
                command = self._commands.get_nowait()
            except queue.Empty:
                return
            command()

    def _worker_loop(self) -> None:
        try:
            while not self._cancel.is_set():
                with self._state_lock:
                    if self._cancel.is_set():
                        break
                    self._drain_commands()
                    try:
                        state = self._advance()
                    except Exception:
                        logger.exception("Search step failed; stopping the run")
                        # The sink may be what failed, so it is not notified.
                        self._state = SearchState.FAILED
                        break
                if state != SearchState.RUNNING:
                    break
                self._cancel.wait(self._step_delay)
        finally:
            with self._command_lock:
                with self._state_lock:
                    self._drain_commands()
                self._worker_active = False

    def _begin(self) -> bool:
        if self._state != SearchState.IDLE:
            logger.debug("start ignored in state %s", self._state.value)
            return False
        self._frontier.insert(Node.create(self._start, None, self._target))
        self._set_state(SearchState.RUNNING)
        logger.info("Search started: %s -> %s", self._start, self._target)
        return True

    def _advance(self) -> SearchState:
        if self._state != SearchState.RUNNING:
            return self._state

        current = self._frontier.extract_min()
        if current is None:
            logger.info(
                "No path found after exploring %d cells", len(self._explored)
            )
            self._set_state(SearchState.FAILED)
            return self._state

        if current.position == self._target:
            self._finish(current)
            return self._state

        self._explored.add(current.position)
        self._sink.on_cell_explored(current.position)

        for position in neighbor_positions(current.position, self._cell):
            if not self._in_bounds(position):
                continue
            if position in self._explored or position in self._blocked:
                continue
            candidate = current.cost_to(position)
            existing = self._frontier.find(position)
            if existing is None:
                self._frontier.insert(Node.create(position, current, self._target))
                self._sink.on_cell_frontier(position)
            elif existing.g_cost > candidate:
                self._frontier.remove(existing)
                self._frontier.insert(Node.create(position, current, self._target))
                self._sink.on_cell_frontier(position)
        return self._state

    def _finish(self, node: Node) -> None:
        self._terminal = node
        self._path = reconstruct_path(node)
        for position in reversed(self._path):
            self._sink.on_cell_path(position)
        logger.info(
            "Path found: %d steps, cost %d, %d cells explored",
            len(self._path) - 1,
            node.g_cost,
            len(self._explored),
        )
        self._set_state(SearchState.SUCCEEDED)

    def _in_bounds(self, position: Position) -> bool:
        x, y = position
        return 0 <= x < self._bounds.width and 0 <= y < self._bounds.height

    def _set_state(self, state: SearchState) -> None:
        if state == self._state:
            return
        self._state = state
        self._sink.on_state_changed(state)
