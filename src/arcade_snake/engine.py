"""Frame-driven game engine composing arena, snake, food and obstacles."""

from __future__ import annotations

import logging
from collections.abc import Iterable

import numpy as np

from arcade_snake.arena import SpawnCapacityError
from arcade_snake.config import GameConfig
from arcade_snake.food import FoodSpawner
from arcade_snake.intents import Intent
from arcade_snake.models import GameSnapshot
from arcade_snake.obstacles import ObstacleSpawner
from arcade_snake.snake import Cell, Direction, Snake, Turn

logger = logging.getLogger(__name__)


class GameEngine:
    """Single-snake, frame-driven game engine.

    :meth:`update` is called once per rendered frame. Game logic only runs on
    frames where ``frame_count % speed == 0``, so a lower ``speed`` means a
    faster snake. The engine owns a seeded RNG shared by both spawners; the
    same seed and the same inputs replay the same session.
    """

    def __init__(self, config: GameConfig | None = None) -> None:
        self.config = config or GameConfig()
        self.arena = self.config.build_arena()
        self.rng = np.random.default_rng(self.config.seed)
        self.food_spawner = FoodSpawner(
            self.arena, rng=self.rng,
            max_attempts=self.config.max_spawn_attempts,
        )
        self.obstacle_spawner = ObstacleSpawner(
            self.arena, rng=self.rng,
            size_weights=self.config.obstacle_size_weights,
            max_attempts=self.config.max_spawn_attempts,
        )

        self.snake = Snake(self.config.start_segments, self.config.direction)
        self.food: Cell | None = None
        self.obstacles: list[Cell] = []
        self.frame_count = 0
        self.speed = self.config.initial_speed
        self.speed_increment = self.config.speed_increment
        self.score = 0
        self.game_over = False
        self._pending_direction: Direction | None = None

        self.reset()

    def reset(self) -> None:
        """Start a new session in place: fresh snake, food and obstacles.

        The RNG is not reseeded, so consecutive sessions differ while the
        whole run stays reproducible.
        """
        cfg = self.config
        self.snake = Snake(cfg.start_segments, cfg.direction)
        self.frame_count = 0
        self.score = 0
        self.game_over = False
        self.speed = cfg.initial_speed
        self.speed_increment = cfg.speed_increment
        self._pending_direction = None

        self.food = None
        self.obstacles = []
        self.food = self.food_spawner.spawn(self.snake.segments)
        self.obstacles = self.obstacle_spawner.spawn(
            cfg.obstacle_count, self.snake.segments, self.food,
        )
        logger.info(
            "New game: food at %s, %d obstacle cells.", self.food, len(self.obstacles),
        )

    def turn(self, turn: Turn) -> None:
        """Rotate the heading applied at the next logical step.

        Turns observed between steps accumulate, so opposite turns cancel.
        """
        current = self._pending_direction
        if current is None:
            current = self.snake.direction
        self._pending_direction = current.turned(turn)

    def update(self, intents: Iterable[Intent] = ()) -> GameSnapshot:
        """Advance the engine by one frame.

        Returns the snapshot renderers should draw for this frame.
        """
        intents = list(intents)

        if self.game_over:
            if Intent.RESTART in intents:
                self.reset()
            else:
                return self.snapshot()

        self.frame_count += 1
        for intent in intents:
            if intent.turn is not None:
                self.turn(intent.turn)

        if self.frame_count % self.speed == 0:
            self.step()

        if self.frame_count % self.config.food_refresh_interval == 0:
            self._respawn_food()

        return self.snapshot()

    def step(self) -> None:
        """Run one logical step: turn, then resolve collisions and move."""
        if self.game_over:
            return

        if self._pending_direction is not None:
            self.snake.direction = self._pending_direction
            self._pending_direction = None

        new_head = self.snake.next_head()

        # --- border ---
        if self.arena.hits_border(new_head):
            self._end_game("border")
            return

        # --- food ---
        if self.food is not None and new_head == self.food:
            self._eat()
            return

        # --- self ---
        if new_head in self.snake.body:
            self._end_game("self")
            return

        # --- obstacle (current head) ---
        if self.snake.head in self.obstacles:
            self._end_game("obstacle")
            return

        self.snake.move()

    def snapshot(self) -> GameSnapshot:
        """Return the read-only state for renderers."""
        return GameSnapshot(
            frame_count=self.frame_count,
            score=self.score,
            speed=self.speed,
            game_over=self.game_over,
            direction=self.snake.direction.name.lower(),
            snake=list(self.snake.segments),
            food=self.food,
            obstacles=list(self.obstacles),
        )

    def get_state(self) -> dict:
        """Return the full, JSON-serializable game state."""
        return self.snapshot().model_dump(mode="json")

    def occupancy(self) -> np.ndarray:
        """Return the arena occupancy array for the current state."""
        return self.arena.occupancy(self.snake.segments, self.food, self.obstacles)

    def _eat(self) -> None:
        previous = self.score
        self.snake.grow()
        self.score += self.config.food_reward

        crossed = self.score // self.speed_increment - previous // self.speed_increment
        for _ in range(crossed):
            if self.speed > self.config.min_speed:
                self.speed -= 1
                logger.debug("Speed raised: %d frames per step.", self.speed)

        self._respawn_food()

    def _respawn_food(self) -> None:
        try:
            self.food = self.food_spawner.spawn(self.snake.segments, self.obstacles)
        except SpawnCapacityError:
            logger.warning("Arena saturated; no food until a free cell appears.")
            self.food = None

    def _end_game(self, cause: str) -> None:
        self.game_over = True
        logger.info(
            "Game over (%s) at frame %d with score %d.",
            cause, self.frame_count, self.score,
        )
