"""Tests for the Snake module."""

import pytest

from browser_snake.snake import Direction, Snake


class TestDirection:
    def test_deltas_use_screen_coordinates(self):
        assert Direction.UP.value == (0, -1)
        assert Direction.DOWN.value == (0, 1)
        assert Direction.LEFT.value == (-1, 0)
        assert Direction.RIGHT.value == (1, 0)

    def test_opposites(self):
        assert Direction.UP.opposite() == Direction.DOWN
        assert Direction.DOWN.opposite() == Direction.UP
        assert Direction.LEFT.opposite() == Direction.RIGHT
        assert Direction.RIGHT.opposite() == Direction.LEFT


class TestSnakeInit:
    def test_single_cell(self):
        snake = Snake([(10, 10)])
        assert snake.head == (10, 10)
        assert len(snake) == 1
        assert snake.direction == Direction.RIGHT

    def test_body_order_is_head_first(self):
        snake = Snake([(5, 5), (4, 5), (3, 5)])
        assert list(snake.body) == [(5, 5), (4, 5), (3, 5)]

    def test_empty_body_rejected(self):
        with pytest.raises(ValueError, match="at least 1"):
            Snake([])


class TestSnakeDirection:
    def test_set_valid_direction(self):
        snake = Snake([(5, 5)], Direction.RIGHT)
        assert snake.set_direction(Direction.UP)
        assert snake.direction == Direction.UP

    def test_ignore_180_reversal(self):
        snake = Snake([(5, 5)], Direction.RIGHT)
        assert not snake.set_direction(Direction.LEFT)
        assert snake.direction == Direction.RIGHT

    def test_ignore_180_reversal_vertical(self):
        snake = Snake([(5, 5)], Direction.UP)
        assert not snake.set_direction(Direction.DOWN)
        assert snake.direction == Direction.UP


class TestSnakeMovement:
    def test_next_head(self):
        snake = Snake([(5, 5)], Direction.RIGHT)
        assert snake.next_head() == (6, 5)

    def test_next_head_up_decrements_y(self):
        snake = Snake([(5, 5)], Direction.UP)
        assert snake.next_head() == (5, 4)

    def test_next_head_does_not_wrap(self):
        snake = Snake([(0, 0)], Direction.LEFT)
        assert snake.next_head() == (-1, 0)

    def test_advance_without_growth(self):
        snake = Snake([(5, 5), (4, 5), (3, 5)])
        vacated = snake.advance((6, 5))
        assert snake.head == (6, 5)
        assert len(snake) == 3
        assert vacated == (3, 5)

    def test_advance_with_growth(self):
        snake = Snake([(5, 5), (4, 5)])
        vacated = snake.advance((6, 5), grow=True)
        assert list(snake.body) == [(6, 5), (5, 5), (4, 5)]
        assert vacated is None


class TestSnakeOccupancy:
    def test_occupies(self):
        snake = Snake([(5, 5), (4, 5), (3, 5)])
        assert snake.occupies(5, 5)
        assert snake.occupies(3, 5)
        assert not snake.occupies(0, 0)
