"""Arcade Snake: frame-driven Snake game-state engine."""

from arcade_snake.arena import Arena, CellType, SpawnCapacityError
from arcade_snake.config import GameConfig
from arcade_snake.engine import GameEngine
from arcade_snake.food import FoodSpawner
from arcade_snake.intents import KEY_BINDINGS, Intent, intents_for_keys
from arcade_snake.models import GameSnapshot
from arcade_snake.obstacles import ObstacleSpawner
from arcade_snake.snake import Direction, Snake, Turn

__all__ = [
    "KEY_BINDINGS",
    "Arena",
    "CellType",
    "Direction",
    "FoodSpawner",
    "GameConfig",
    "GameEngine",
    "GameSnapshot",
    "Intent",
    "ObstacleSpawner",
    "Snake",
    "SpawnCapacityError",
    "Turn",
    "intents_for_keys",
]
