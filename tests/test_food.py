"""Tests for the FoodSpawner module."""

import numpy as np
import pytest

from arcade_snake.arena import Arena, SpawnCapacityError
from arcade_snake.food import FoodSpawner


class TestFoodSpawnerInit:
    def test_invalid_max_attempts(self):
        with pytest.raises(ValueError, match="at least 1"):
            FoodSpawner(Arena(), max_attempts=0)


class TestFoodSpawning:
    def test_never_on_snake_or_obstacle(self):
        arena = Arena()
        rng = np.random.default_rng(7)
        spawner = FoodSpawner(arena, rng=rng)
        snake = [(x, 5) for x in range(1, 40)]
        obstacles = [(x, y) for x in range(10, 30) for y in range(10, 30)]
        blocked = set(snake) | set(obstacles)
        for _ in range(1000):
            cell = spawner.spawn(snake, obstacles)
            assert cell not in blocked
            assert not arena.hits_border(cell)

    def test_spawn_deterministic(self):
        assert self._spawn_with_seed(42) == self._spawn_with_seed(42)

    def test_spawn_different_seeds(self):
        assert self._spawn_with_seed(1) != self._spawn_with_seed(2)

    def test_only_free_cell_found(self):
        arena = Arena(screen_width=50, screen_height=90)
        snake = [(x, y) for x in range(1, 4) for y in range(1, 4) if (x, y) != (2, 2)]
        spawner = FoodSpawner(arena, rng=np.random.default_rng(0))
        assert spawner.spawn(snake) == (2, 2)

    def test_saturated_arena_raises(self):
        arena = Arena(screen_width=50, screen_height=90)
        snake = [(x, y) for x in range(1, 4) for y in range(1, 4)]
        spawner = FoodSpawner(arena, rng=np.random.default_rng(0), max_attempts=50)
        with pytest.raises(SpawnCapacityError, match="50 attempts"):
            spawner.spawn(snake)

    @staticmethod
    def _spawn_with_seed(seed: int) -> list[tuple[int, int]]:
        spawner = FoodSpawner(Arena(), rng=np.random.default_rng(seed))
        return [spawner.spawn() for _ in range(5)]
