"""Throughput benchmarking for the game engine."""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, replace

import numpy as np

from arcade_snake.config import GameConfig
from arcade_snake.engine import GameEngine
from arcade_snake.simulation import RandomInputSource

logger = logging.getLogger(__name__)


@dataclass
class BenchmarkResult:
    """Results from a throughput benchmark run."""

    total_games: int
    total_frames: int
    wall_time_seconds: float
    games_per_second: float
    frames_per_second: float

    def summary(self) -> str:
        return (
            f"Benchmark: {self.total_games} games, {self.total_frames} frames in "
            f"{self.wall_time_seconds:.2f}s | "
            f"{self.games_per_second:.1f} games/s, "
            f"{self.frames_per_second:.1f} frames/s"
        )


def benchmark_throughput(
    *,
    num_games: int = 20,
    max_frames: int = 5_000,
    turn_probability: float = 0.05,
    config: GameConfig | None = None,
) -> BenchmarkResult:
    """Measure raw engine throughput with random input.

    Each game runs until game over or *max_frames* frames, whichever comes
    first.
    """
    if num_games < 1:
        raise ValueError("num_games must be at least 1.")
    if max_frames < 1:
        raise ValueError("max_frames must be at least 1.")

    base = config or GameConfig()
    rng = np.random.default_rng(42)
    total_frames = 0
    start = time.perf_counter()

    for _ in range(num_games):
        engine = GameEngine(replace(base, seed=int(rng.integers(2**31))))
        source = RandomInputSource(turn_probability, rng=rng, auto_restart=False)
        for _ in range(max_frames):
            engine.update(source.poll(engine))
            total_frames += 1
            if engine.game_over:
                break

    elapsed = time.perf_counter() - start
    result = BenchmarkResult(
        total_games=num_games,
        total_frames=total_frames,
        wall_time_seconds=elapsed,
        games_per_second=num_games / max(elapsed, 1e-9),
        frames_per_second=total_frames / max(elapsed, 1e-9),
    )
    logger.info(result.summary())
    return result
