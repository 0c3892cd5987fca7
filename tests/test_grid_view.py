from rich.console import Console

from gridpath.render.grid_view import (
    CELL_GLYPHS,
    CELL_STYLES,
    HIGHLIGHT_STYLE,
    classify_cells,
    grid_shape,
    render_grid_lines,
    render_legend,
)
from gridpath.search.base import FixedBounds
from gridpath.search.engine import SearchEngine


def _engine() -> SearchEngine:
    engine = SearchEngine(
        FixedBounds(width=60, height=40),
        start=(0, 0),
        target=(50, 30),
        step_delay=0.0,
    )
    engine.add_blocked((30, 10))
    return engine


def _export(lines) -> str:
    console = Console(record=True, width=120)
    for line in lines:
        console.print(line)
    return console.export_text()


def test_idle_grid_shows_endpoints_and_obstacles_only() -> None:
    engine = _engine()
    engine.start()
    engine.step()
    engine.reset()
    engine.add_blocked((30, 10))
    snapshot = engine.snapshot()

    lines = render_grid_lines(snapshot)

    assert grid_shape(snapshot) == (6, 4)
    assert [line.plain for line in lines] == [
        "S . . . . . ",
        ". . . ##. . ",
        ". . . . . . ",
        ". . . . . T ",
    ]
    assert "S " in _export(lines)


def test_classify_cells_hides_progress_until_started() -> None:
    engine = _engine()
    idle = classify_cells(engine.snapshot())

    assert idle == {(0, 0): "start", (50, 30): "target", (30, 10): "blocked"}


def test_solved_grid_paints_path_under_endpoints() -> None:
    engine = _engine()
    engine.solve()
    snapshot = engine.snapshot()

    kinds = classify_cells(snapshot)
    text = _export(render_grid_lines(snapshot))

    assert kinds[(0, 0)] == "start"
    assert kinds[(50, 30)] == "target"
    assert all(kinds[p] == "path" for p in snapshot.path[1:-1])
    assert CELL_GLYPHS["path"] in text
    assert "S " in text
    assert "T" in text


def test_latest_explored_cell_is_highlighted() -> None:
    engine = _engine()
    engine.start()
    engine.step()
    engine.step()
    snapshot = engine.snapshot()

    assert (10, 10) in snapshot.explored
    plain = render_grid_lines(snapshot)
    marked = render_grid_lines(snapshot, highlight=(10, 10))

    assert plain[1].spans[1].style == CELL_STYLES["explored"]
    assert marked[1].spans[1].style == HIGHLIGHT_STYLE
    assert marked[1].plain == plain[1].plain


def test_legend_lists_every_kind() -> None:
    legend = render_legend().plain

    for kind in ("start", "target", "blocked", "frontier", "explored", "path"):
        assert kind in legend
