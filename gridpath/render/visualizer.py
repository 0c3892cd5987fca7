"""Interactive Textual visualizer for the A* search engine."""

from __future__ import annotations

from rich.console import Group, RenderableType
from rich.panel import Panel
from rich.text import Text
from textual.app import App, ComposeResult
from textual.containers import Vertical
from textual.screen import Screen
from textual.widgets import Header, Static

from gridpath.render.controller import GridController
from gridpath.render.grid_view import render_grid_lines, render_legend
from gridpath.render.textual_widgets import (
    GridClicked,
    GridDragged,
    GridPressed,
    GridReleased,
    GridResized,
    GridWidget,
    ViewBounds,
)
from gridpath.search.base import RenderSink
from gridpath.search.contracts import SearchSnapshot, SearchState
from gridpath.search.engine import (
    DEFAULT_START,
    DEFAULT_STEP_DELAY,
    DEFAULT_TARGET,
    SearchEngine,
)
from gridpath.search.layout import Layout, apply_layout
from gridpath.search.nodes import CELL, Position

REFRESH_INTERVAL = 1 / 30


class RefreshSink(RenderSink):
    """Remember that something changed; the screen repaints on its timer.

    Called from the search worker, so it only sets plain attributes.
    """

    def __init__(self) -> None:
        self.dirty = True
        self.last_explored: Position | None = None

    def on_cell_explored(self, position: Position) -> None:
        self.last_explored = position
        self.dirty = True

    def on_cell_frontier(self, position: Position) -> None:
        self.dirty = True

    def on_cell_path(self, position: Position) -> None:
        self.dirty = True

    def on_state_changed(self, state: SearchState) -> None:
        if state == SearchState.IDLE:
            self.last_explored = None
        self.dirty = True


class VisualizerScreen(Screen):
    CSS = """
    Screen {
        layout: vertical;
    }
    #status-bar {
        height: 3;
    }
    #grid {
        height: 1fr;
        border: round $accent;
    }
    #legend {
        height: 1;
    }
    """

    BINDINGS = [
        ("s", "start_search", "Start"),
        ("r", "reset_search", "Reset"),
        ("q", "quit", "Quit"),
    ]

    def __init__(
        self,
        *,
        start: Position = DEFAULT_START,
        target: Position = DEFAULT_TARGET,
        cell: int = CELL,
        step_delay: float = DEFAULT_STEP_DELAY,
        max_size: tuple[int, int] | None = None,
        layout: Layout | None = None,
    ) -> None:
        super().__init__()
        if layout is not None:
            start, target, cell = layout.start, layout.target, layout.cell
            max_size = (layout.bounds.width, layout.bounds.height)
        self._cell = cell
        self._max_size = max_size
        self.view_bounds = ViewBounds(cell)
        self.sink = RefreshSink()
        self.engine = SearchEngine(
            self.view_bounds,
            sink=self.sink,
            start=start,
            target=target,
            cell=cell,
            step_delay=step_delay,
        )
        if layout is not None:
            apply_layout(self.engine, layout)
        self.controller = GridController(self.engine)
        self._grid: GridWidget | None = None
        self._status_bar: Static | None = None

    def compose(self) -> ComposeResult:
        yield Header()
        with Vertical(id="root"):
            yield Static(id="status-bar")
            yield GridWidget(
                self._render_grid,
                cell=self._cell,
                max_size=self._max_size,
                view_bounds=self.view_bounds,
                id="grid",
            )
            yield Static(render_legend(), id="legend")

    def on_mount(self) -> None:
        self._grid = self.query_one("#grid", GridWidget)
        self._status_bar = self.query_one("#status-bar", Static)
        self._grid.border_title = "Grid"
        self.set_interval(REFRESH_INTERVAL, self._refresh_if_dirty)
        self._refresh_ui()

    def on_unmount(self) -> None:
        self.engine.reset()

    def on_grid_resized(self, event: GridResized) -> None:
        if self.engine.state == SearchState.IDLE:
            self.controller.clamp_into(self.view_bounds)
        self._refresh_ui()

    def on_grid_pressed(self, event: GridPressed) -> None:
        self.controller.press(event.position)

    def on_grid_dragged(self, event: GridDragged) -> None:
        self.controller.drag(event.position)
        self.sink.dirty = True

    def on_grid_released(self, event: GridReleased) -> None:
        self.controller.release(event.position)
        self.sink.dirty = True

    def on_grid_clicked(self, event: GridClicked) -> None:
        self.controller.click(event.position)
        self.sink.dirty = True

    def action_start_search(self) -> None:
        self.controller.start_search()
        self._refresh_ui()

    def action_reset_search(self) -> None:
        self.controller.reset_search()
        self._refresh_ui()

    def action_quit(self) -> None:
        self.app.exit()

    def _refresh_if_dirty(self) -> None:
        if not self.sink.dirty:
            return
        self._refresh_ui()

    def _refresh_ui(self) -> None:
        self.sink.dirty = False
        if self._status_bar:
            self._status_bar.update(
                Panel(Text(self._status_text(self.engine.snapshot())), padding=(0, 1))
            )
        if self._grid:
            self._grid.refresh()

    def _render_grid(self) -> RenderableType:
        lines = render_grid_lines(
            self.engine.snapshot(), highlight=self.sink.last_explored
        )
        return Group(*lines)

    def _status_text(self, snapshot: SearchSnapshot) -> str:
        parts = [
            "s=start | r=reset | q=quit | click/drag=obstacles | drag S/T=move",
            f"state={snapshot.state.value}",
            f"explored={len(snapshot.explored)}",
            f"frontier={len(snapshot.frontier)}",
        ]
        if snapshot.state == SearchState.SUCCEEDED:
            parts.append(f"steps={snapshot.steps} cost={snapshot.path_cost}")
        if self.controller.last_message:
            parts.append(self.controller.last_message)
        return " | ".join(parts)


class VisualizerApp(App):
    """Host a single visualizer screen under a header naming the grid."""

    TITLE = "A* Path Finding Visualizer"

    def __init__(self, screen: VisualizerScreen) -> None:
        super().__init__()
        self._visualizer = screen

    def get_default_screen(self) -> Screen:
        return self._visualizer

    def on_mount(self) -> None:
        self.sub_title = f"cell size {self._visualizer.engine.cell}"


def run_visualizer(
    *,
    start: Position = DEFAULT_START,
    target: Position = DEFAULT_TARGET,
    cell: int = CELL,
    step_delay: float = DEFAULT_STEP_DELAY,
    max_size: tuple[int, int] | None = None,
    layout: Layout | None = None,
) -> None:
    screen = VisualizerScreen(
        start=start,
        target=target,
        cell=cell,
        step_delay=step_delay,
        max_size=max_size,
        layout=layout,
    )
    VisualizerApp(screen).run()
