"""Game configuration."""

from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass, fields
from pathlib import Path

from arcade_snake.arena import Arena
from arcade_snake.snake import Direction

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GameConfig:
    """All tunable constants of a game session.

    Supports JSON serialization so a session can be reproduced from a file
    together with its ``seed``.
    """

    # Arena (pixels)
    screen_width: int = 640
    screen_height: int = 480
    border_width: int = 10
    header_height: int = 40
    segment_size: int = 10

    # Snake
    start_segments: tuple[tuple[int, int], ...] = ((5, 5), (4, 5), (3, 5))
    start_direction: str = "right"

    # Pace
    initial_speed: int = 5
    min_speed: int = 2
    speed_increment: int = 10
    food_reward: int = 10
    food_refresh_interval: int = 500

    # Spawning
    obstacle_count: int = 10
    obstacle_size_weights: tuple[float, float, float] = (0.4, 0.3, 0.3)
    max_spawn_attempts: int = 10_000

    seed: int | None = None

    def __post_init__(self) -> None:
        if self.min_speed < 1:
            raise ValueError("min_speed must be at least 1.")
        if self.initial_speed < self.min_speed:
            raise ValueError("initial_speed cannot be below min_speed.")
        if self.speed_increment < 1:
            raise ValueError("speed_increment must be at least 1.")
        if self.food_reward < 0:
            raise ValueError("food_reward must be non-negative.")
        if self.food_refresh_interval < 1:
            raise ValueError("food_refresh_interval must be at least 1.")
        if self.obstacle_count < 0:
            raise ValueError("obstacle_count must be non-negative.")
        if self.max_spawn_attempts < 1:
            raise ValueError("max_spawn_attempts must be at least 1.")
        if len(self.obstacle_size_weights) != 3:
            raise ValueError("obstacle_size_weights needs exactly three entries.")
        if any(w < 0 for w in self.obstacle_size_weights) or sum(
            self.obstacle_size_weights,
        ) <= 0:
            raise ValueError(
                "obstacle_size_weights must be non-negative with a positive sum."
            )
        Direction.from_name(self.start_direction)

        if not self.start_segments:
            raise ValueError("start_segments needs at least one cell.")
        arena = self.build_arena()
        for cell in self.start_segments:
            if arena.hits_border(tuple(cell)):
                raise ValueError(
                    f"start segment {tuple(cell)} lies outside the playable area."
                )
        for (ax, ay), (bx, by) in zip(
            self.start_segments, self.start_segments[1:], strict=False,
        ):
            if abs(ax - bx) + abs(ay - by) != 1:
                raise ValueError("start_segments must be a contiguous chain of cells.")

    @property
    def direction(self) -> Direction:
        return Direction.from_name(self.start_direction)

    def build_arena(self) -> Arena:
        """Create the arena described by the pixel settings."""
        return Arena(
            screen_width=self.screen_width,
            screen_height=self.screen_height,
            border_width=self.border_width,
            header_height=self.header_height,
            segment_size=self.segment_size,
        )

    def to_dict(self) -> dict:
        """Serialize to a plain dict."""
        return asdict(self)

    def save(self, path: str | Path) -> None:
        """Write config to a JSON file."""
        p = Path(path)
        p.parent.mkdir(parents=True, exist_ok=True)
        p.write_text(json.dumps(self.to_dict(), indent=2))
        logger.info("Config saved to %s", p)

    @classmethod
    def from_dict(cls, raw: dict) -> GameConfig:
        data = dict(raw)
        unknown = sorted(set(data) - {f.name for f in fields(cls)})
        if unknown:
            raise ValueError(f"Unknown config keys: {', '.join(unknown)}.")
        if "start_segments" in data:
            data["start_segments"] = tuple(
                (int(x), int(y)) for x, y in data["start_segments"]
            )
        if "obstacle_size_weights" in data:
            data["obstacle_size_weights"] = tuple(data["obstacle_size_weights"])
        return cls(**data)

    @classmethod
    def load(cls, path: str | Path) -> GameConfig:
        """Load config from a JSON file."""
        return cls.from_dict(json.loads(Path(path).read_text()))
