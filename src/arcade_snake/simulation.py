"""Headless drivers that feed intents to an engine without a renderer."""

from __future__ import annotations

import logging

import numpy as np

from arcade_snake.config import GameConfig
from arcade_snake.engine import GameEngine
from arcade_snake.intents import Intent
from arcade_snake.models import SimulationSummary

logger = logging.getLogger(__name__)


class RandomInputSource:
    """Stand-in for a keyboard: random turns, restart after game over."""

    def __init__(
        self,
        turn_probability: float = 0.05,
        rng: np.random.Generator | None = None,
        auto_restart: bool = True,
    ) -> None:
        if not 0.0 <= turn_probability <= 1.0:
            raise ValueError("turn_probability must be between 0 and 1.")
        self.turn_probability = turn_probability
        self.rng = rng if rng is not None else np.random.default_rng()
        self.auto_restart = auto_restart

    def poll(self, engine: GameEngine) -> list[Intent]:
        """Return the intents observed for the coming frame."""
        if engine.game_over:
            return [Intent.RESTART] if self.auto_restart else []
        if self.rng.random() < self.turn_probability:
            if self.rng.random() < 0.5:
                return [Intent.TURN_CLOCKWISE]
            return [Intent.TURN_ANTICLOCKWISE]
        return []


def run_simulation(
    config: GameConfig | None = None,
    *,
    frames: int = 1_000,
    turn_probability: float = 0.05,
    auto_restart: bool = True,
) -> SimulationSummary:
    """Drive a session for *frames* frames with random input.

    The input RNG is derived from the config seed, so a seeded config gives
    a reproducible run.
    """
    if frames < 1:
        raise ValueError("frames must be at least 1.")
    cfg = config or GameConfig()
    engine = GameEngine(cfg)
    source = RandomInputSource(
        turn_probability,
        rng=np.random.default_rng(None if cfg.seed is None else cfg.seed + 1),
        auto_restart=auto_restart,
    )

    games = 1
    best = 0
    snapshot = engine.snapshot()
    for _ in range(frames):
        intents = source.poll(engine)
        if engine.game_over and Intent.RESTART in intents:
            games += 1
        snapshot = engine.update(intents)
        best = max(best, snapshot.score)

    logger.info("Simulated %d frames, %d game(s), best score %d.", frames, games, best)
    return SimulationSummary(
        seed=cfg.seed,
        frames=frames,
        games_played=games,
        best_score=best,
        final=snapshot,
    )
