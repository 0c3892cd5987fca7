"""Data contracts shared by the search engine and its renderers."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, model_validator

from gridpath.search.nodes import CELL, Position


class SearchState(str, Enum):
    IDLE = "idle"
    RUNNING = "running"
    SUCCEEDED = "succeeded"
    FAILED = "failed"

    @property
    def is_terminal(self) -> bool:
        return self in (SearchState.SUCCEEDED, SearchState.FAILED)


class GridBounds(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    width: int = Field(ge=0)
    height: int = Field(ge=0)


class SearchSnapshot(BaseModel):
    """Point-in-time copy of everything a renderer needs to repaint."""

    model_config = ConfigDict(extra="forbid")

    state: SearchState
    cell: int = CELL
    start: Position
    target: Position
    frontier: list[Position] = Field(default_factory=list)
    explored: list[Position] = Field(default_factory=list)
    blocked: list[Position] = Field(default_factory=list)
    path: list[Position] = Field(default_factory=list)
    bounds: GridBounds | None = None
    path_cost: int | None = None

    @model_validator(mode="after")
    def validate_alignment(self) -> "SearchSnapshot":
        if self.cell <= 0:
            raise ValueError("cell must be positive")
        groups = {
            "start": [self.start],
            "target": [self.target],
            "frontier": self.frontier,
            "explored": self.explored,
            "blocked": self.blocked,
            "path": self.path,
        }
        for name, positions in groups.items():
            for x, y in positions:
                if x % self.cell or y % self.cell:
                    raise ValueError(f"{name} position {(x, y)} is not cell aligned")
        return self

    @property
    def is_running(self) -> bool:
        return self.state == SearchState.RUNNING

    @property
    def steps(self) -> int:
        return max(0, len(self.path) - 1)
