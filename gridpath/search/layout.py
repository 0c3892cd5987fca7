"""Load grid layouts from ASCII maps."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from gridpath.search.base import FixedBounds
from gridpath.search.engine import SearchEngine
from gridpath.search.nodes import CELL, Position

BLOCKED_SYMBOL = "#"
START_SYMBOL = "S"
TARGET_SYMBOL = "T"


class LayoutError(ValueError):
    """Raised when a layout map cannot be turned into a grid."""


@dataclass(frozen=True)
class Layout:
    bounds: FixedBounds
    start: Position
    target: Position
    blocked: frozenset[Position] = field(default_factory=frozenset)
    cell: int = CELL


def parse_layout(text: str, *, cell: int = CELL) -> Layout:
    lines = [line.rstrip("\n") for line in text.splitlines()]
    while lines and not lines[-1].strip():
        lines.pop()
    if not lines:
        raise LayoutError("layout is empty")
    columns = max(len(line) for line in lines)

    start: Position | None = None
    target: Position | None = None
    blocked: set[Position] = set()
    for row, line in enumerate(lines):
        for col, symbol in enumerate(line):
            position = (col * cell, row * cell)
            if symbol == BLOCKED_SYMBOL:
                blocked.add(position)
            elif symbol == START_SYMBOL:
                if start is not None:
                    raise LayoutError(f"duplicate start at row {row}, column {col}")
                start = position
            elif symbol == TARGET_SYMBOL:
                if target is not None:
                    raise LayoutError(f"duplicate target at row {row}, column {col}")
                target = position

    if start is None:
        raise LayoutError(f"layout has no start cell ({START_SYMBOL!r})")
    if target is None:
        raise LayoutError(f"layout has no target cell ({TARGET_SYMBOL!r})")
    return Layout(
        bounds=FixedBounds(width=columns * cell, height=len(lines) * cell),
        start=start,
        target=target,
        blocked=frozenset(blocked),
        cell=cell,
    )


def load_layout(path: Path, *, cell: int = CELL) -> Layout:
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError as exc:
        raise LayoutError(f"layout file not found: {path}") from exc
    return parse_layout(text, cell=cell)


def apply_layout(engine: SearchEngine, layout: Layout) -> None:
    engine.set_start(layout.start)
    engine.set_target(layout.target)
    for position in sorted(layout.blocked):
        engine.add_blocked(position)


def build_engine(layout: Layout, **kwargs) -> SearchEngine:
    engine = SearchEngine(
        layout.bounds,
        start=layout.start,
        target=layout.target,
        cell=layout.cell,
        **kwargs,
    )
    for position in sorted(layout.blocked):
        engine.add_blocked(position)
    return engine
