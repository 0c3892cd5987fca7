import time
from typing import Callable

from gridpath.render.controller import GridController
from gridpath.search.base import FixedBounds
from gridpath.search.contracts import SearchState
from gridpath.search.engine import SearchEngine


def _wait_for(condition: Callable[[], bool], timeout: float = 5.0) -> bool:
    deadline = time.monotonic() + timeout
    while time.monotonic() < deadline:
        if condition():
            return True
        time.sleep(0.01)
    return condition()


def _running_controller() -> GridController:
    engine = SearchEngine(
        FixedBounds(width=400, height=400),
        start=(0, 0),
        target=(200, 200),
        step_delay=0.05,
    )
    for x in (190, 200, 210):
        for y in (190, 200, 210):
            if (x, y) != (200, 200):
                engine.add_blocked((x, y))
    controller = GridController(engine)
    assert controller.start_search() is True
    return controller


def _controller(step_delay: float = 0.0) -> GridController:
    engine = SearchEngine(
        FixedBounds(width=200, height=200),
        start=(0, 0),
        target=(150, 150),
        step_delay=step_delay,
    )
    return GridController(engine)


def test_press_and_release_moves_start() -> None:
    controller = _controller()

    controller.press((0, 0))
    controller.release((50, 60))

    assert controller.engine.start_position == (50, 60)
    assert controller.last_message == "Moved start to 50, 60."


def test_press_and_release_moves_target() -> None:
    controller = _controller()

    controller.press((150, 150))
    controller.drag((100, 100))
    controller.release((100, 100))

    assert controller.engine.target_position == (100, 100)
    assert controller.engine.blocked_positions() == set()


def test_release_onto_obstacle_is_refused() -> None:
    controller = _controller()
    controller.click((40, 40))

    controller.press((0, 0))
    controller.release((40, 40))

    assert controller.engine.start_position == (0, 0)
    assert controller.last_message == "Cannot move start onto an obstacle."


def test_release_without_press_on_endpoint_does_nothing() -> None:
    controller = _controller()

    controller.press((70, 70))
    controller.release((90, 90))

    assert controller.engine.start_position == (0, 0)
    assert controller.engine.target_position == (150, 150)


def test_drag_and_click_draw_obstacles_but_not_on_endpoints() -> None:
    controller = _controller()

    controller.press((20, 20))
    controller.drag((20, 20))
    controller.drag((30, 20))
    controller.click((0, 0))
    controller.click((150, 150))
    controller.click((90, 10))

    assert controller.engine.blocked_positions() == {(20, 20), (30, 20), (90, 10)}
    assert controller.dragging is None


def test_clamp_into_pulls_endpoints_inside() -> None:
    controller = _controller()

    controller.clamp_into(FixedBounds(width=100, height=80))

    assert controller.engine.start_position == (0, 0)
    assert controller.engine.target_position == (90, 70)


def test_clamp_into_ignores_empty_bounds() -> None:
    controller = _controller()

    controller.clamp_into(FixedBounds(width=0, height=0))

    assert controller.engine.target_position == (150, 150)


def test_start_search_runs_once_until_reset() -> None:
    controller = _controller()

    assert controller.start_search() is True
    assert controller.last_message == "Searching..."
    assert controller.engine.wait(timeout=10)
    assert controller.engine.state == SearchState.SUCCEEDED

    assert controller.start_search() is False
    assert controller.last_message == "Search finished. Press r to reset."

    controller.reset_search()
    assert controller.last_message == "Reset."
    assert controller.engine.state == SearchState.IDLE
    assert controller.start_search() is True
    assert controller.engine.wait(timeout=10)


def test_start_search_ignored_while_running() -> None:
    controller = _controller(step_delay=0.2)

    assert controller.start_search() is True
    assert controller.start_search() is False

    controller.reset_search()
    assert controller.engine.wait(timeout=2)


def test_click_after_relocation_during_a_run_does_not_block_the_start() -> None:
    controller = _running_controller()
    engine = controller.engine

    controller.press((0, 0))
    controller.release((300, 300))
    controller.click((300, 300))

    assert controller.start == (300, 300)
    assert _wait_for(lambda: engine.start_position == (300, 300))
    assert not engine.is_blocked((300, 300))
    assert engine.is_running()

    controller.reset_search()
    assert engine.wait(timeout=2)


def test_release_onto_queued_obstacle_is_refused_during_a_run() -> None:
    controller = _running_controller()
    engine = controller.engine

    controller.press((50, 50))
    controller.click((50, 50))
    controller.press((200, 200))
    controller.release((50, 50))
    controller.click((50, 50))

    assert controller.last_message == "Cannot move target onto an obstacle."
    assert controller.target == (200, 200)
    assert _wait_for(lambda: engine.is_blocked((50, 50)))
    assert engine.target_position == (200, 200)

    controller.reset_search()
    assert engine.wait(timeout=2)
    assert not controller.is_blocked((50, 50))


def test_clicks_draw_again_after_a_relocation() -> None:
    controller = _controller()

    controller.press((0, 0))
    controller.release((30, 30))
    controller.click((30, 30))
    controller.press((60, 60))
    controller.click((60, 60))

    assert controller.engine.start_position == (30, 30)
    assert controller.engine.blocked_positions() == {(60, 60)}
