"""Application entry points: interactive visualizer and headless runs."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from rich.console import Console, Group, RenderableType
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from gridpath.render.grid_view import render_grid_lines, render_legend
from gridpath.render.visualizer import run_visualizer
from gridpath.search.base import FixedBounds, RenderSink
from gridpath.search.contracts import SearchSnapshot, SearchState
from gridpath.search.engine import (
    DEFAULT_START,
    DEFAULT_STEP_DELAY,
    DEFAULT_TARGET,
    SearchEngine,
)
from gridpath.search.layout import Layout, build_engine, load_layout
from gridpath.search.nodes import CELL, Position

DEFAULT_WIDTH = 800
DEFAULT_HEIGHT = 600


@dataclass(frozen=True)
class VisualizerConfig:
    width: int = DEFAULT_WIDTH
    height: int = DEFAULT_HEIGHT
    cell: int = CELL
    start: Position = DEFAULT_START
    target: Position = DEFAULT_TARGET
    step_delay: float = DEFAULT_STEP_DELAY
    layout_path: Path | None = None


def resolve_config(
    *,
    width: int | None = None,
    height: int | None = None,
    start: Position | None = None,
    target: Position | None = None,
    step_delay: float | None = None,
    layout_path: Path | None = None,
) -> VisualizerConfig:
    """Merge explicit values over environment variables over defaults."""
    env_layout = os.getenv("GRIDPATH_LAYOUT")
    return VisualizerConfig(
        width=(
            width if width is not None else _env_int("GRIDPATH_WIDTH", DEFAULT_WIDTH)
        ),
        height=(
            height
            if height is not None
            else _env_int("GRIDPATH_HEIGHT", DEFAULT_HEIGHT)
        ),
        start=start if start is not None else DEFAULT_START,
        target=target if target is not None else DEFAULT_TARGET,
        step_delay=(
            step_delay
            if step_delay is not None
            else _env_float("GRIDPATH_DELAY", DEFAULT_STEP_DELAY)
        ),
        layout_path=(
            layout_path
            if layout_path is not None
            else (Path(env_layout) if env_layout else None)
        ),
    )


def load_config_layout(config: VisualizerConfig) -> Layout | None:
    if config.layout_path is None:
        return None
    return load_layout(config.layout_path, cell=config.cell)


def run_interactive(config: VisualizerConfig) -> None:
    run_visualizer(
        start=config.start,
        target=config.target,
        cell=config.cell,
        step_delay=config.step_delay,
        max_size=(config.width, config.height),
        layout=load_config_layout(config),
    )


def build_headless_engine(
    config: VisualizerConfig, *, sink: RenderSink | None = None
) -> SearchEngine:
    layout = load_config_layout(config)
    if layout is not None:
        return build_engine(layout, sink=sink, step_delay=0.0)
    return SearchEngine(
        FixedBounds(width=config.width, height=config.height),
        sink=sink,
        start=config.start,
        target=config.target,
        cell=config.cell,
        step_delay=0.0,
    )


def run_headless(
    config: VisualizerConfig,
    *,
    console: Console | None = None,
    as_json: bool = False,
    show_grid: bool = True,
) -> SearchSnapshot:
    engine = build_headless_engine(config)
    engine.solve()
    snapshot = engine.snapshot()
    console = console or Console()
    if as_json:
        console.print_json(snapshot.model_dump_json())
    else:
        console.print(render_summary(snapshot, show_grid=show_grid))
    return snapshot


def render_summary(
    snapshot: SearchSnapshot, *, show_grid: bool = True
) -> RenderableType:
    table = Table(title="Search Result", show_header=False)
    table.add_column("Field")
    table.add_column("Value")
    table.add_row("Outcome", _outcome_label(snapshot.state))
    table.add_row("Start", f"{snapshot.start[0]}, {snapshot.start[1]}")
    table.add_row("Target", f"{snapshot.target[0]}, {snapshot.target[1]}")
    table.add_row("Explored", str(len(snapshot.explored)))
    table.add_row("Frontier", str(len(snapshot.frontier)))
    table.add_row("Blocked", str(len(snapshot.blocked)))
    if snapshot.state == SearchState.SUCCEEDED:
        table.add_row("Steps", str(snapshot.steps))
        table.add_row("Path cost", str(snapshot.path_cost))
    if not show_grid:
        return table
    grid = Panel(Group(*render_grid_lines(snapshot), render_legend()), title="Grid")
    return Group(table, grid)


def parse_position(raw: str, *, cell: int = CELL) -> Position:
    """Parse ``"x,y"`` into a cell-aligned position."""
    parts = raw.replace(" ", "").split(",")
    if len(parts) != 2:
        raise ValueError(f"expected x,y but got {raw!r}")
    try:
        x, y = int(parts[0]), int(parts[1])
    except ValueError as exc:
        raise ValueError(f"expected integer coordinates but got {raw!r}") from exc
    if x % cell or y % cell:
        raise ValueError(f"position {raw!r} is not a multiple of {cell}")
    return (x, y)


def _outcome_label(state: SearchState) -> Text:
    if state == SearchState.SUCCEEDED:
        return Text("path found", style="bold green")
    if state == SearchState.FAILED:
        return Text("no path", style="bold red")
    return Text(state.value)


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError as exc:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from exc


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        return float(raw)
    except ValueError as exc:
        raise ValueError(f"{name} must be a number, got {raw!r}") from exc
