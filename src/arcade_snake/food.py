"""Food spawning logic."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import TYPE_CHECKING

import numpy as np

from arcade_snake.arena import SpawnCapacityError

if TYPE_CHECKING:
    from arcade_snake.arena import Arena
    from arcade_snake.snake import Cell

logger = logging.getLogger(__name__)


class FoodSpawner:
    """Places food on a random free interior cell.

    Uses rejection sampling against the snake and the obstacles, drawing from
    the session RNG so placements are reproducible under a fixed seed.
    """

    def __init__(
        self,
        arena: Arena,
        rng: np.random.Generator | None = None,
        max_attempts: int = 10_000,
    ) -> None:
        if max_attempts < 1:
            raise ValueError("max_attempts must be at least 1.")
        self.arena = arena
        self.rng = rng if rng is not None else np.random.default_rng()
        self.max_attempts = max_attempts

    def spawn(
        self,
        segments: Iterable[Cell] = (),
        obstacles: Iterable[Cell] = (),
    ) -> Cell:
        """Return a cell not covered by any snake segment or obstacle.

        Raises :class:`SpawnCapacityError` once ``max_attempts`` draws
        have all landed on occupied cells.
        """
        blocked = set(segments)
        blocked.update(obstacles)

        for _ in range(self.max_attempts):
            cell = self.arena.random_cell(self.rng)
            if cell not in blocked:
                logger.debug("Spawned food at %s.", cell)
                return cell

        raise SpawnCapacityError(
            f"No free cell for food after {self.max_attempts} attempts."
        )
