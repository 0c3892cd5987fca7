from pathlib import Path

import pytest

from gridpath.search.contracts import SearchState
from gridpath.search.engine import SearchEngine
from gridpath.search.base import FixedBounds
from gridpath.search.layout import (
    LayoutError,
    apply_layout,
    build_engine,
    load_layout,
    parse_layout,
)

LAYOUT_DIR = Path(__file__).resolve().parent.parent / "layouts"


def test_parse_layout_reads_cells() -> None:
    layout = parse_layout("S.#\n..#\n#.T\n")

    assert layout.start == (0, 0)
    assert layout.target == (20, 20)
    assert layout.blocked == frozenset({(20, 0), (20, 10), (0, 20)})
    assert (layout.bounds.width, layout.bounds.height) == (30, 30)


def test_parse_layout_pads_short_rows() -> None:
    layout = parse_layout("S....\n.T\n\n")

    assert (layout.bounds.width, layout.bounds.height) == (50, 20)


@pytest.mark.parametrize(
    "text",
    ["", "....\n..T.", "S...\n....", "S.S.\n...T", "S..T\nT..."],
)
def test_parse_layout_rejects_bad_maps(text: str) -> None:
    with pytest.raises(LayoutError):
        parse_layout(text)


def test_load_layout_missing_file(tmp_path: Path) -> None:
    with pytest.raises(LayoutError):
        load_layout(tmp_path / "missing.txt")


def test_wall_layout_routes_around_the_wall() -> None:
    layout = load_layout(LAYOUT_DIR / "wall.txt")
    engine = build_engine(layout, step_delay=0.0)

    assert engine.solve() == SearchState.SUCCEEDED
    assert not set(engine.path_positions()) & layout.blocked


def test_enclosed_layout_has_no_path() -> None:
    layout = load_layout(LAYOUT_DIR / "enclosed.txt")
    engine = build_engine(layout, step_delay=0.0)

    assert engine.solve() == SearchState.FAILED
    assert engine.frontier_positions() == []


def test_apply_layout_configures_existing_engine() -> None:
    layout = parse_layout("S#.\n.#T\n...")
    engine = SearchEngine(FixedBounds(width=30, height=30), step_delay=0.0)

    apply_layout(engine, layout)

    assert engine.start_position == (0, 0)
    assert engine.target_position == (20, 10)
    assert engine.blocked_positions() == {(10, 0), (10, 10)}
    assert engine.solve() == SearchState.SUCCEEDED
    assert engine.path_positions()[-1] == (20, 10)
