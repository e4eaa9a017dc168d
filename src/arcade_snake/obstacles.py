"""Obstacle spawning logic."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from typing import TYPE_CHECKING

import numpy as np

from arcade_snake.arena import SpawnCapacityError

if TYPE_CHECKING:
    from arcade_snake.arena import Arena
    from arcade_snake.snake import Cell

logger = logging.getLogger(__name__)

BLOCK_SIZES: tuple[int, ...] = (1, 2, 3)


def block_cells(origin: Cell, size: int) -> list[Cell]:
    """Return every cell of the ``size``x``size`` square at ``origin``."""
    x, y = origin
    return [(x + dx, y + dy) for dx in range(size) for dy in range(size)]


class ObstacleSpawner:
    """Places square obstacle blocks (1x1, 2x2 or 3x3) on free cells.

    Block sizes are drawn with ``size_weights`` (one weight per entry of
    :data:`BLOCK_SIZES`). A placement is rejected when any of its cells
    touches the snake, the food or an obstacle placed earlier.
    """

    def __init__(
        self,
        arena: Arena,
        rng: np.random.Generator | None = None,
        size_weights: Sequence[float] = (0.4, 0.3, 0.3),
        max_attempts: int = 10_000,
    ) -> None:
        if len(size_weights) != len(BLOCK_SIZES):
            raise ValueError(
                f"size_weights needs {len(BLOCK_SIZES)} entries, got {len(size_weights)}."
            )
        weights = np.asarray(size_weights, dtype=np.float64)
        if np.any(weights < 0) or weights.sum() <= 0:
            raise ValueError("size_weights must be non-negative with a positive sum.")
        if max_attempts < 1:
            raise ValueError("max_attempts must be at least 1.")
        self.arena = arena
        self.rng = rng if rng is not None else np.random.default_rng()
        self.probabilities = weights / weights.sum()
        self.max_attempts = max_attempts

    def spawn(
        self,
        count: int,
        segments: Iterable[Cell] = (),
        food: Cell | None = None,
    ) -> list[Cell]:
        """Place ``count`` blocks and return all of their cells.

        Each block gets up to ``max_attempts`` tries before
        :class:`SpawnCapacityError` is raised.
        """
        if count < 0:
            raise ValueError("count must be non-negative.")

        blocked = set(segments)
        if food is not None:
            blocked.add(food)
        obstacles: list[Cell] = []

        for index in range(count):
            size = int(self.rng.choice(BLOCK_SIZES, p=self.probabilities))
            placed = self._place_block(size, blocked)
            if placed is None:
                raise SpawnCapacityError(
                    f"No room for obstacle {index + 1} of {count} "
                    f"({size}x{size}) after {self.max_attempts} attempts."
                )
            obstacles.extend(placed)
            blocked.update(placed)

        logger.debug("Spawned %d obstacle blocks covering %d cells.", count, len(obstacles))
        return obstacles

    def _place_block(self, size: int, blocked: set[Cell]) -> list[Cell] | None:
        for _ in range(self.max_attempts):
            origin = self.arena.random_cell(self.rng, size=size)
            cells = block_cells(origin, size)
            if not any(cell in blocked for cell in cells):
                return cells
        return None
