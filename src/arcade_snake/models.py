"""Pydantic models for the per-frame state handed to renderers."""

from __future__ import annotations

from pydantic import BaseModel, Field


class GameSnapshot(BaseModel):
    """Read-only view of a game session after a frame."""

    frame_count: int = Field(ge=0)
    score: int = Field(ge=0)
    speed: int = Field(ge=1)
    game_over: bool
    direction: str
    snake: list[tuple[int, int]]
    food: tuple[int, int] | None = None
    obstacles: list[tuple[int, int]] = Field(default_factory=list)


class SimulationSummary(BaseModel):
    """Outcome of a headless simulation run."""

    seed: int | None
    frames: int
    games_played: int
    best_score: int
    final: GameSnapshot
