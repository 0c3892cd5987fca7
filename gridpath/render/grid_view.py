"""Render search snapshots as styled terminal rows."""

from __future__ import annotations

from rich.text import Text

from gridpath.search.contracts import SearchSnapshot, SearchState
from gridpath.search.nodes import Position

CELL_WIDTH = 2

CELL_GLYPHS = {
    "empty": ". ",
    "blocked": "##",
    "frontier": "o ",
    "explored": "x ",
    "path": "**",
    "start": "S ",
    "target": "T ",
}

CELL_STYLES = {
    "empty": "grey39 on grey93",
    "blocked": "grey85 on black",
    "frontier": "white on blue",
    "explored": "white on red",
    "path": "black on green3",
    "start": "bold black on cyan",
    "target": "bold black on orange1",
}

HIGHLIGHT_STYLE = "bold white on magenta"


def grid_shape(snapshot: SearchSnapshot) -> tuple[int, int]:
    """Columns and rows covered by the snapshot's bounds."""
    if snapshot.bounds is None:
        return (0, 0)
    return (
        snapshot.bounds.width // snapshot.cell,
        snapshot.bounds.height // snapshot.cell,
    )


def classify_cells(snapshot: SearchSnapshot) -> dict[Position, str]:
    """Map each non-empty position to the kind it should be painted as.

    Run progress is only painted once a run has started; later kinds win.
    """
    kinds: dict[Position, str] = {}
    for position in snapshot.blocked:
        kinds[position] = "blocked"
    if snapshot.state != SearchState.IDLE:
        for position in snapshot.frontier:
            kinds[position] = "frontier"
        for position in snapshot.explored:
            kinds[position] = "explored"
        for position in snapshot.path:
            kinds[position] = "path"
    kinds[snapshot.start] = "start"
    kinds[snapshot.target] = "target"
    return kinds


def render_grid_lines(
    snapshot: SearchSnapshot, *, highlight: Position | None = None
) -> list[Text]:
    """One styled row per grid row; ``highlight`` marks the latest explored cell."""
    columns, rows = grid_shape(snapshot)
    kinds = classify_cells(snapshot)
    cell = snapshot.cell

    lines: list[Text] = []
    for row in range(rows):
        line = Text()
        for col in range(columns):
            position = (col * cell, row * cell)
            kind = kinds.get(position, "empty")
            style = CELL_STYLES[kind]
            if position == highlight and kind == "explored":
                style = HIGHLIGHT_STYLE
            line.append(CELL_GLYPHS[kind], style=style)
        lines.append(line)
    return lines


def render_legend() -> Text:
    legend = Text()
    for kind in ("start", "target", "blocked", "frontier", "explored", "path"):
        legend.append(CELL_GLYPHS[kind], style=CELL_STYLES[kind])
        legend.append(f" {kind}  ")
    return legend
