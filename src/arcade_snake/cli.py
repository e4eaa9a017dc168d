"""Command-line tools for running the engine headless."""

from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import replace
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from arcade_snake.config import GameConfig

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="arcade-snake",
        description="Arcade Snake headless simulation, benchmarking and config tools.",
    )
    sub = parser.add_subparsers(dest="command", help="Available commands.")

    # --- simulate ---
    sim_p = sub.add_parser("simulate", help="Run a headless session with random input.")
    sim_p.add_argument(
        "--config", type=str, default=None,
        help="Path to a JSON config file.",
    )
    sim_p.add_argument("--frames", type=int, default=1_000)
    sim_p.add_argument("--seed", type=int, default=None)
    sim_p.add_argument("--turn-probability", type=float, default=0.05)
    sim_p.add_argument("--obstacles", type=int, default=None)
    sim_p.add_argument(
        "--no-restart", action="store_true",
        help="Stay on the game-over screen instead of restarting.",
    )

    # --- benchmark ---
    bench_p = sub.add_parser("benchmark", help="Measure engine throughput.")
    bench_p.add_argument("--num-games", type=int, default=20)
    bench_p.add_argument("--max-frames", type=int, default=5_000)
    bench_p.add_argument("--turn-probability", type=float, default=0.05)

    # --- config ---
    config_p = sub.add_parser("config", help="Write a configuration file.")
    config_p.add_argument("output", help="Path for the JSON config.")
    config_p.add_argument(
        "--config", type=str, default=None,
        help="Existing config to start from instead of the defaults.",
    )
    config_p.add_argument("--seed", type=int, default=None)

    return parser


def _load_config(path: str | None) -> GameConfig:
    from arcade_snake.config import GameConfig

    return GameConfig.load(path) if path else GameConfig()


def _run_simulate(args: argparse.Namespace) -> int:
    from arcade_snake.simulation import run_simulation

    config = _load_config(args.config)
    overrides: dict = {}
    if args.seed is not None:
        overrides["seed"] = args.seed
    if args.obstacles is not None:
        overrides["obstacle_count"] = args.obstacles
    if overrides:
        config = replace(config, **overrides)

    summary = run_simulation(
        config,
        frames=args.frames,
        turn_probability=args.turn_probability,
        auto_restart=not args.no_restart,
    )
    print(summary.model_dump_json(indent=2))  # noqa: T201
    return 0


def _run_benchmark(args: argparse.Namespace) -> int:
    from arcade_snake.benchmark import benchmark_throughput

    result = benchmark_throughput(
        num_games=args.num_games,
        max_frames=args.max_frames,
        turn_probability=args.turn_probability,
    )
    print(result.summary())  # noqa: T201
    return 0


def _run_config(args: argparse.Namespace) -> int:
    config = _load_config(args.config)
    if args.seed is not None:
        config = replace(config, seed=args.seed)
    config.save(args.output)
    print(f"Wrote config to {args.output}")  # noqa: T201
    return 0


def main(argv: list[str] | None = None) -> int:
    """Entry point for the ``arcade-snake`` CLI."""
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    handlers = {
        "simulate": _run_simulate,
        "benchmark": _run_benchmark,
        "config": _run_config,
    }
    try:
        return handlers[args.command](args)
    except (ValueError, OSError) as exc:
        logger.error("%s", exc)
        return 2


if __name__ == "__main__":
    sys.exit(main())
