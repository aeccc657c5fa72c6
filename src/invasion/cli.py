"""
Command-line interface.

    invasion generate world.map --height 6 --width 8 --cities 30 --dot world.dot
    invasion run world.map --aliens 20 --iterations 10000 --output result.map
    invasion analyze world.map result.map world.dot result.dot
"""

from __future__ import annotations

import argparse
import logging
from pathlib import Path

from invasion.core.config import MapConfig, SimulationConfig
from invasion.core.engine import SimulationEngine
from invasion.core.errors import InvasionError
from invasion.core.map_generators import generate_map_from_config
from invasion.core.rendering import highlight_cities, render_dot
from invasion.core.world import destroyed_cities
from invasion.io.map_files import load_map, save_map, write_text

logger = logging.getLogger(__name__)


class CommandError(InvasionError):
    """A subcommand failed; the message says what it was doing."""


def _wrap(context: str, exc: Exception) -> CommandError:
    return CommandError(f"error {context}: {exc}")


# ---------------------------------------------------------------------------
# Parsers
# ---------------------------------------------------------------------------
def _build_generate_parser(sub: argparse._SubParsersAction) -> None:
    defaults = MapConfig()
    p = sub.add_parser("generate", help="Generate a world map")
    p.set_defaults(func=_handle_generate)
    p.add_argument("output", type=Path, help="output map file")
    p.add_argument("--height", type=int, default=defaults.height, help="grid height")
    p.add_argument("--width", type=int, default=defaults.width, help="grid width")
    p.add_argument(
        "-c", "--cities", type=int, default=defaults.cities_count, help="cities count",
    )
    p.add_argument(
        "-d", "--dot", type=Path, default=None, help="output dot file (graphviz format)",
    )
    p.add_argument("--seed", type=int, default=None, help="random seed")


def _build_run_parser(sub: argparse._SubParsersAction) -> None:
    defaults = SimulationConfig()
    p = sub.add_parser("run", help="Run simulation")
    p.set_defaults(func=_handle_run)
    p.add_argument("map", type=Path, help="input map file")
    p.add_argument(
        "-i", "--iterations", type=int, default=defaults.iteration_limit,
        help="iterations limit",
    )
    p.add_argument(
        "-a", "--aliens", type=int, default=defaults.alien_count, help="aliens count",
    )
    p.add_argument(
        "-o", "--output", type=Path, default=None,
        help="output world map file (printed to STDOUT by default)",
    )
    p.add_argument("--seed", type=int, default=None, help="random seed")


def _build_analyze_parser(sub: argparse._SubParsersAction) -> None:
    p = sub.add_parser(
        "analyze",
        help="Mark cities destroyed by a simulation red in a dot graph",
    )
    p.set_defaults(func=_handle_analyze)
    p.add_argument("initial_map", type=Path, help="initial map file")
    p.add_argument("result_map", type=Path, help="result map file")
    p.add_argument("initial_dot", type=Path, help="initial dot file")
    p.add_argument("output_dot", type=Path, help="output dot file")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="invasion", description="Alien invasion simulation util",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="log every simulation step",
    )
    sub = parser.add_subparsers(dest="command", required=True)
    _build_generate_parser(sub)
    _build_run_parser(sub)
    _build_analyze_parser(sub)
    return parser


# ---------------------------------------------------------------------------
# Handlers
# ---------------------------------------------------------------------------
def _handle_generate(args: argparse.Namespace) -> None:
    config = MapConfig(
        height=args.height,
        width=args.width,
        cities_count=args.cities,
        random_seed=args.seed,
    )
    try:
        grid_map = generate_map_from_config(config)
    except InvasionError as exc:
        raise _wrap("generating map", exc) from exc

    try:
        write_text(args.output, grid_map.to_text())
    except OSError as exc:
        raise _wrap("writing generated map to file", exc) from exc

    if args.dot is not None:
        try:
            write_text(args.dot, render_dot(grid_map))
        except OSError as exc:
            raise _wrap("writing generated dot graph to file", exc) from exc


def _handle_run(args: argparse.Namespace) -> None:
    try:
        world = load_map(args.map)
    except (InvasionError, OSError) as exc:
        raise _wrap("loading world map", exc) from exc

    config = SimulationConfig(
        iteration_limit=args.iterations,
        alien_count=args.aliens,
        random_seed=args.seed,
    )
    try:
        engine = SimulationEngine(world, config)
    except InvasionError as exc:
        raise _wrap("initializing simulation", exc) from exc

    result = engine.run()
    summary = engine.summary()
    logger.info(
        "Stopped after %d iterations (%s): %d cities and %d aliens left",
        summary.iterations, summary.stop_reason,
        summary.cities_remaining, summary.aliens_remaining,
    )

    if args.output is not None:
        try:
            save_map(args.output, result)
        except OSError as exc:
            raise _wrap("saving result world map", exc) from exc
    elif len(result) == 0:
        print("Whole world destroyed!")
    else:
        print(f"\nWorld map after invasion:\n\n{result.to_text()}", end="")


def _handle_analyze(args: argparse.Namespace) -> None:
    try:
        initial = load_map(args.initial_map)
    except (InvasionError, OSError) as exc:
        raise _wrap("loading initial map", exc) from exc

    try:
        result = load_map(args.result_map)
    except (InvasionError, OSError) as exc:
        raise _wrap("loading result map", exc) from exc

    try:
        graph = args.initial_dot.read_text(encoding="utf-8")
    except OSError as exc:
        raise _wrap("reading dot graph", exc) from exc

    destroyed = destroyed_cities(initial, result)
    logger.info("%d of %d cities destroyed", len(destroyed), len(initial))

    try:
        write_text(args.output_dot, highlight_cities(graph, destroyed))
    except OSError as exc:
        raise _wrap("writing generated dot graph to file", exc) from exc


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------
def main(argv: list[str] | None = None) -> int:
    """CLI entrypoint with subcommands. Returns the process exit status."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(message)s",
    )

    try:
        args.func(args)
    except CommandError as exc:
        logger.error("%s", exc)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
