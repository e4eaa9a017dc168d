"""Tests for input intents and key bindings."""

from arcade_snake.intents import Intent, intents_for_keys
from arcade_snake.snake import Turn


class TestIntent:
    def test_turns(self):
        assert Intent.TURN_CLOCKWISE.turn is Turn.CLOCKWISE
        assert Intent.TURN_ANTICLOCKWISE.turn is Turn.ANTICLOCKWISE
        assert Intent.RESTART.turn is None


class TestKeyBindings:
    def test_default_keys(self):
        assert intents_for_keys(["a", "d", "r"]) == [
            Intent.TURN_ANTICLOCKWISE,
            Intent.TURN_CLOCKWISE,
            Intent.RESTART,
        ]

    def test_case_insensitive(self):
        assert intents_for_keys(["D"]) == [Intent.TURN_CLOCKWISE]

    def test_unbound_keys_ignored(self):
        assert intents_for_keys(["x", "space"]) == []
