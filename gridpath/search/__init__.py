"""A* search core: nodes, frontier, engine and layouts."""

from gridpath.search.base import (
    BoundsProvider,
    FixedBounds,
    NullSink,
    RecordingSink,
    RenderSink,
)
from gridpath.search.contracts import GridBounds, SearchSnapshot, SearchState
from gridpath.search.engine import (
    DEFAULT_START,
    DEFAULT_STEP_DELAY,
    DEFAULT_TARGET,
    SearchEngine,
)
from gridpath.search.frontier import Frontier
from gridpath.search.layout import (
    Layout,
    LayoutError,
    apply_layout,
    build_engine,
    load_layout,
    parse_layout,
)
from gridpath.search.nodes import (
    CELL,
    Node,
    Position,
    distance,
    heuristic,
    neighbor_positions,
)
from gridpath.search.path import path_cost, reconstruct_path

__all__ = [
    "BoundsProvider",
    "CELL",
    "DEFAULT_START",
    "DEFAULT_STEP_DELAY",
    "DEFAULT_TARGET",
    "FixedBounds",
    "Frontier",
    "GridBounds",
    "Layout",
    "LayoutError",
    "Node",
    "NullSink",
    "Position",
    "RecordingSink",
    "RenderSink",
    "SearchEngine",
    "SearchSnapshot",
    "SearchState",
    "apply_layout",
    "build_engine",
    "distance",
    "heuristic",
    "load_layout",
    "neighbor_positions",
    "parse_layout",
    "path_cost",
    "reconstruct_path",
]
