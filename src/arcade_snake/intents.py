"""Discrete input intents and their default key bindings."""

from __future__ import annotations

import enum
from collections.abc import Iterable

from arcade_snake.snake import Turn


class Intent(enum.Enum):
    """Player input observed during a frame."""

    TURN_CLOCKWISE = "turn_clockwise"
    TURN_ANTICLOCKWISE = "turn_anticlockwise"
    RESTART = "restart"

    @property
    def turn(self) -> Turn | None:
        """The rotation this intent requests, if any."""
        return _TURNS.get(self)


_TURNS: dict[Intent, Turn] = {
    Intent.TURN_CLOCKWISE: Turn.CLOCKWISE,
    Intent.TURN_ANTICLOCKWISE: Turn.ANTICLOCKWISE,
}

KEY_BINDINGS: dict[str, Intent] = {
    "a": Intent.TURN_ANTICLOCKWISE,
    "d": Intent.TURN_CLOCKWISE,
    "r": Intent.RESTART,
}


def intents_for_keys(keys: Iterable[str]) -> list[Intent]:
    """Translate pressed key names into intents; unbound keys are ignored."""
    return [KEY_BINDINGS[k.lower()] for k in keys if k.lower() in KEY_BINDINGS]
