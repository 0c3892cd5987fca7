"""Module entry point for `python -m gridpath`."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path

from gridpath.app import (
    parse_position,
    resolve_config,
    run_headless,
    run_interactive,
)
from gridpath.logging_config import configure_logging
from gridpath.search.contracts import SearchState
from gridpath.search.layout import LayoutError


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Visualize A* path finding on a grid."
    )
    parser.add_argument(
        "--headless",
        action="store_true",
        help="Run the search without the UI and print the result.",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the final snapshot as JSON (headless mode only).",
    )
    parser.add_argument(
        "--no-grid",
        action="store_true",
        help="Omit the rendered grid from the headless summary.",
    )
    parser.add_argument(
        "--layout",
        type=Path,
        default=None,
        help="ASCII layout file: '#' obstacle, 'S' start, 'T' target.",
    )
    parser.add_argument(
        "--width",
        type=int,
        default=None,
        help="Grid width in grid units (defaults to 800).",
    )
    parser.add_argument(
        "--height",
        type=int,
        default=None,
        help="Grid height in grid units (defaults to 600).",
    )
    parser.add_argument(
        "--start",
        default=None,
        help="Start position as x,y (multiples of the cell size).",
    )
    parser.add_argument(
        "--target",
        default=None,
        help="Target position as x,y (multiples of the cell size).",
    )
    parser.add_argument(
        "--delay",
        type=float,
        default=None,
        help="Seconds to pause between search steps in the visualizer.",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging.",
    )
    args = parser.parse_args(argv)

    if args.verbose:
        configure_logging(logging.DEBUG)
    else:
        configure_logging(logging.INFO if args.headless else logging.WARNING)

    try:
        config = resolve_config(
            width=args.width,
            height=args.height,
            start=parse_position(args.start) if args.start else None,
            target=parse_position(args.target) if args.target else None,
            step_delay=args.delay,
            layout_path=args.layout,
        )
        if args.headless:
            snapshot = run_headless(
                config, as_json=args.json, show_grid=not args.no_grid
            )
            return 0 if snapshot.state == SearchState.SUCCEEDED else 1
        run_interactive(config)
    except LayoutError as exc:
        raise SystemExit(f"Invalid layout: {exc}") from exc
    except ValueError as exc:
        raise SystemExit(str(exc)) from exc
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
