"""Tests for the Snake module."""

import pytest

from arcade_snake.snake import Direction, Snake, Turn


class TestDirection:
    def test_clockwise_cycle(self):
        assert Direction.UP.clockwise() == Direction.RIGHT
        assert Direction.RIGHT.clockwise() == Direction.DOWN
        assert Direction.DOWN.clockwise() == Direction.LEFT
        assert Direction.LEFT.clockwise() == Direction.UP

    def test_anticlockwise_cycle(self):
        assert Direction.UP.anticlockwise() == Direction.LEFT
        assert Direction.LEFT.anticlockwise() == Direction.DOWN

    @pytest.mark.parametrize("direction", list(Direction))
    def test_turns_cancel_out(self, direction):
        assert direction.turned(Turn.CLOCKWISE).turned(Turn.ANTICLOCKWISE) == direction
        assert direction.turned(Turn.ANTICLOCKWISE).turned(Turn.CLOCKWISE) == direction

    def test_four_turns_return_home(self):
        d = Direction.RIGHT
        for _ in range(4):
            d = d.clockwise()
        assert d == Direction.RIGHT

    def test_from_name(self):
        assert Direction.from_name("up") == Direction.UP
        assert Direction.from_name("Left") == Direction.LEFT

    def test_from_name_unknown(self):
        with pytest.raises(ValueError, match="Unknown direction"):
            Direction.from_name("north")


class TestSnakeInit:
    def test_default_creation(self):
        snake = Snake([(5, 5), (4, 5), (3, 5)])
        assert snake.head == (5, 5)
        assert snake.length == 3
        assert snake.direction == Direction.RIGHT

    def test_segments_are_copied(self):
        start = [(5, 5), (4, 5)]
        snake = Snake(start)
        snake.move()
        assert start == [(5, 5), (4, 5)]

    def test_empty_segments_rejected(self):
        with pytest.raises(ValueError, match="at least one segment"):
            Snake([])

    def test_length_below_segment_count_rejected(self):
        with pytest.raises(ValueError, match="cannot be smaller"):
            Snake([(5, 5), (4, 5)], length=1)


class TestSnakeMovement:
    def test_move_up_example(self):
        snake = Snake([(10, 10), (10, 11), (10, 12)], Direction.UP)
        snake.move()
        assert snake.segments == [(10, 9), (10, 10), (10, 11)]

    def test_move_right(self):
        snake = Snake([(10, 10), (10, 11), (10, 12)], Direction.RIGHT)
        snake.move()
        assert snake.segments == [(11, 10), (10, 10), (10, 11)]

    @pytest.mark.parametrize("direction", list(Direction))
    def test_move_changes_one_coordinate(self, direction):
        snake = Snake([(10, 10), (9, 10), (8, 10)], direction)
        old = snake.head
        snake.move()
        dx = snake.head[0] - old[0]
        dy = snake.head[1] - old[1]
        assert abs(dx) + abs(dy) == 1
        assert len(snake.segments) == snake.length

    def test_next_head_does_not_move(self):
        snake = Snake([(5, 5), (4, 5)])
        assert snake.next_head() == (6, 5)
        assert snake.head == (5, 5)

    def test_grow_keeps_tail(self):
        snake = Snake([(5, 5), (4, 5), (3, 5)])
        snake.grow()
        assert snake.length == 4
        assert snake.segments == [(6, 5), (5, 5), (4, 5), (3, 5)]

    def test_short_snake_fills_up_to_length(self):
        snake = Snake([(5, 5)], length=3)
        snake.move()
        assert len(snake.segments) == 2
        snake.move()
        snake.move()
        assert len(snake.segments) == 3


class TestSnakeQueries:
    def test_body_excludes_head(self):
        snake = Snake([(5, 5), (4, 5), (3, 5)])
        assert snake.body == [(4, 5), (3, 5)]
