"""
Command-line interface for the Crucible pathfinder.

Reads a grid file, runs one constrained search and prints the minimum
cost. Defaults come from config.json; flags override them.

Example:
    python main.py input.txt
    python main.py input.txt --min-run 4 --max-run 10
    python main.py input.txt --render debug/debug_path.png
"""

import logging
import argparse
from datetime import datetime
from typing import List, Optional, Tuple

from .render import DEBUG_DIR, render_path
from .search import (
    CostGrid,
    CrucibleError,
    RunConstraints,
    SearchCancelledError,
    Solver,
    get_strategy_names,
)
from .settings import load_settings

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def configure_logging(debug: bool = False, log_file: Optional[str] = None) -> None:
    """
    Configure root logging for a CLI run.

    Args:
        debug: Log at DEBUG instead of INFO
        log_file: Optional file to mirror console output into
    """
    handlers: List[logging.Handler] = [logging.StreamHandler()]
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode='w', encoding='utf-8'))
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO,
        format=LOG_FORMAT,
        datefmt="%H:%M:%S",
        handlers=handlers,
    )


def parse_location(text: str) -> Tuple[int, int]:
    """Parse "row,col" into a location tuple."""
    try:
        row, col = (int(part) for part in text.split(","))
    except ValueError:
        raise argparse.ArgumentTypeError(f"Expected ROW,COL, got {text!r}")
    return (row, col)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Crucible - minimum cost across a grid with limited straight runs"
    )
    parser.add_argument("grid", help="Grid file, one row of digits per line")
    parser.add_argument("--min-run", type=int, help="Moves required before turning")
    parser.add_argument("--max-run", type=int, help="Moves allowed before a forced turn")
    parser.add_argument(
        "--strategy", "-s",
        choices=get_strategy_names(),
        help="Search strategy (default from settings)"
    )
    parser.add_argument("--start", type=parse_location, help="Start cell ROW,COL (default top-left)")
    parser.add_argument("--target", type=parse_location, help="Target cell ROW,COL (default bottom-right)")
    parser.add_argument(
        "--seeds",
        help="Comma-separated first-move directions, e.g. E,S (default from settings)"
    )
    parser.add_argument("--timeout", type=float, help="Give up after this many seconds")
    parser.add_argument("--config", "-c", help="Settings file (default config.json)")
    parser.add_argument(
        "--render", "-r",
        nargs="?",
        const="",
        help="Save a PNG of the path (default name under ./debug)"
    )
    parser.add_argument("--log-file", help="Also write log output to this file")
    parser.add_argument(
        "--debug", "-d",
        action="store_true",
        help="Enable debug logging"
    )
    return parser.parse_args(argv)


def build_constraints(args: argparse.Namespace, settings: dict) -> RunConstraints:
    """Merge CLI flags over settings into a RunConstraints value."""
    merged = dict(settings)
    if args.min_run is not None:
        merged["min_run"] = args.min_run
    if args.max_run is not None:
        merged["max_run"] = args.max_run
    if args.seeds:
        merged["seed_directions"] = [s for s in args.seeds.split(",") if s.strip()]
    return RunConstraints.from_settings(merged)


def main(argv: Optional[List[str]] = None) -> int:
    """
    Run one search from the command line.

    Returns:
        Exit code (0 on success, 1 on any pathfinder error)
    """
    args = parse_args(argv)
    configure_logging(args.debug, args.log_file)
    settings = load_settings(args.config)
    if settings.get("debug_enabled"):
        logging.getLogger().setLevel(logging.DEBUG)

    try:
        constraints = build_constraints(args, settings)
        grid = CostGrid.from_file(args.grid)
        strategy = args.strategy or settings.get("strategy_name")
        timeout = args.timeout if args.timeout is not None else settings.get("timeout_sec")

        solver = Solver(grid, constraints, strategy)
        solution = solver.solve(args.start, args.target, timeout_sec=timeout)
        if solution.was_cancelled:
            raise SearchCancelledError(f"Search timed out after {timeout}s")
    except OSError as e:
        logger.error(f"Could not read grid: {e}")
        return 1
    except CrucibleError as e:
        logger.error(str(e))
        return 1

    logger.info(
        f"{solution.metrics.strategy_name}: {solution.metrics.states_expanded} states "
        f"expanded in {solution.metrics.computation_time_ms:.1f}ms"
    )
    logger.debug("Runs: " + " ".join(f"{d.symbol}{n}" for d, n in solution.runs))

    if args.render is not None:
        target = args.render or DEBUG_DIR / f"debug_{datetime.now():%Y%m%d_%H%M%S}.png"
        render_path(grid, solution, target)

    print(solution.cost)
    return 0
