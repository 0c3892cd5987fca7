import pytest
from pydantic import ValidationError

from gridpath.search.contracts import GridBounds, SearchSnapshot, SearchState


def test_snapshot_round_trips_through_json() -> None:
    snapshot = SearchSnapshot(
        state=SearchState.SUCCEEDED,
        start=(0, 0),
        target=(20, 10),
        explored=[(0, 0), (10, 0)],
        path=[(0, 0), (10, 0), (20, 10)],
        bounds=GridBounds(width=100, height=100),
        path_cost=24,
    )

    restored = SearchSnapshot.model_validate_json(snapshot.model_dump_json())

    assert restored == snapshot
    assert restored.steps == 2
    assert not restored.is_running


def test_snapshot_rejects_positions_off_the_grid() -> None:
    with pytest.raises(ValidationError):
        SearchSnapshot(state=SearchState.IDLE, start=(5, 0), target=(10, 10))
    with pytest.raises(ValidationError):
        SearchSnapshot(
            state=SearchState.IDLE,
            start=(0, 0),
            target=(10, 10),
            blocked=[(10, 15)],
        )


def test_snapshot_forbids_unknown_fields() -> None:
    with pytest.raises(ValidationError):
        SearchSnapshot.model_validate(
            {"state": "idle", "start": [0, 0], "target": [10, 10], "extra": 1}
        )


def test_state_terminal_flags() -> None:
    assert SearchState.SUCCEEDED.is_terminal
    assert SearchState.FAILED.is_terminal
    assert not SearchState.IDLE.is_terminal
    assert not SearchState.RUNNING.is_terminal
    assert SearchState("running") == SearchState.RUNNING
