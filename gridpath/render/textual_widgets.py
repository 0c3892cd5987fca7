"""Textual widget that paints the search grid and reports pointer input."""

from __future__ import annotations

from typing import Callable

from rich.console import RenderableType
from textual.events import Click, MouseDown, MouseEvent, MouseMove, MouseUp, Resize
from textual.geometry import Size
from textual.message import Message
from textual.widget import Widget

from gridpath.render.grid_view import CELL_WIDTH
from gridpath.search.nodes import CELL, Position


class GridPointerMessage(Message):
    """Base for pointer messages resolved to grid positions."""

    def __init__(self, *, position: Position) -> None:
        super().__init__()
        self.position = position


class GridPressed(GridPointerMessage):
    pass


class GridDragged(GridPointerMessage):
    pass


class GridReleased(GridPointerMessage):
    pass


class GridClicked(GridPointerMessage):
    pass


class GridResized(Message):
    """Message emitted when the playable area changes size."""


class ViewBounds:
    """Playable area of a grid widget, read by the engine as its bounds.

    Plain ints so the search worker can read them without touching the
    widget tree.
    """

    def __init__(self, cell: int = CELL) -> None:
        self.cell = cell
        self.columns = 0
        self.rows = 0

    @property
    def width(self) -> int:
        return self.columns * self.cell

    @property
    def height(self) -> int:
        return self.rows * self.cell


class GridWidget(Widget):
    """Render the grid and emit pointer messages in grid coordinates.

    The playable area is whatever fits in the widget: each cell takes
    ``CELL_WIDTH`` terminal columns and one row.
    """

    def __init__(
        self,
        render_grid: Callable[[], RenderableType],
        *,
        cell: int = CELL,
        max_size: tuple[int, int] | None = None,
        view_bounds: ViewBounds | None = None,
        id: str | None = None,
    ) -> None:
        super().__init__(id=id)
        self._render_grid = render_grid
        self._cell = cell
        self._max_size = max_size
        self.view_bounds = view_bounds or ViewBounds(cell)

    def on_resize(self, event: Resize) -> None:
        self._update_shape(self.content_size)

    def on_mount(self) -> None:
        self._update_shape(self.content_size)

    def render(self) -> RenderableType:
        return self._render_grid()

    def on_mouse_down(self, event: MouseDown) -> None:
        self._post_for(event, GridPressed)

    def on_mouse_move(self, event: MouseMove) -> None:
        if event.button == 0:
            return
        self._post_for(event, GridDragged)

    def on_mouse_up(self, event: MouseUp) -> None:
        self._post_for(event, GridReleased)

    def on_click(self, event: Click) -> None:
        self._post_for(event, GridClicked)

    def _update_shape(self, size: Size) -> None:
        columns = size.width // CELL_WIDTH
        rows = size.height
        if self._max_size is not None:
            columns = min(columns, self._max_size[0] // self._cell)
            rows = min(rows, self._max_size[1] // self._cell)
        self.view_bounds.columns = max(0, columns)
        self.view_bounds.rows = max(0, rows)
        self.post_message(GridResized())

    def _post_for(
        self, event: MouseEvent, message_type: type[GridPointerMessage]
    ) -> None:
        position = self._resolve(event)
        if position is None:
            return
        self.post_message(message_type(position=position))

    def _resolve(self, event: MouseEvent) -> Position | None:
        offset = event.get_content_offset(self)
        if offset is None:
            return None
        x, y = offset
        col, row = x // CELL_WIDTH, y
        bounds = self.view_bounds
        if not (0 <= col < bounds.columns and 0 <= row < bounds.rows):
            return None
        return (col * self._cell, row * self._cell)
