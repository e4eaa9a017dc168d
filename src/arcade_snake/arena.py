"""Play-area geometry: borders, header band and grid cells."""

from __future__ import annotations

import enum
from collections.abc import Iterable

import numpy as np

from arcade_snake.snake import Cell


class SpawnCapacityError(RuntimeError):
    """Raised when a spawner cannot find a free placement."""


class CellType(enum.IntEnum):
    """Integer codes stored in the occupancy array."""

    EMPTY = 0
    SNAKE = 1
    FOOD = 2
    OBSTACLE = 3
    BORDER = 4


class Arena:
    """Pixel screen divided into square cells, framed by a border.

    The header band sits above the play area and is not part of the grid;
    cell ``(x, y)`` maps to pixel ``(x * size, y * size + header_height)``.
    """

    def __init__(
        self,
        screen_width: int = 640,
        screen_height: int = 480,
        border_width: int = 10,
        header_height: int = 40,
        segment_size: int = 10,
    ) -> None:
        if segment_size < 1:
            raise ValueError("segment_size must be at least 1.")
        if border_width < 0 or header_height < 0:
            raise ValueError("border_width and header_height must be non-negative.")
        self.screen_width = screen_width
        self.screen_height = screen_height
        self.border_width = border_width
        self.header_height = header_height
        self.segment_size = segment_size

        self.min_x = -(-border_width // segment_size)
        self.min_y = self.min_x
        self.max_x = (screen_width - border_width) // segment_size - 1
        self.max_y = (screen_height - header_height - border_width) // segment_size - 1
        if self.max_x < self.min_x or self.max_y < self.min_y:
            raise ValueError("Arena has no playable cells.")

    @property
    def columns(self) -> int:
        """Grid columns, border included."""
        return self.screen_width // self.segment_size

    @property
    def rows(self) -> int:
        """Grid rows below the header, border included."""
        return (self.screen_height - self.header_height) // self.segment_size

    @property
    def interior_width(self) -> int:
        return self.max_x - self.min_x + 1

    @property
    def interior_height(self) -> int:
        return self.max_y - self.min_y + 1

    def hits_border(self, cell: Cell) -> bool:
        """Check whether a cell overlaps the border or lies outside it."""
        x, y = cell
        size = self.segment_size
        return (
            x * size < self.border_width
            or y * size < self.border_width
            or (x + 1) * size > self.screen_width - self.border_width
            or (y + 1) * size
            > self.screen_height - self.header_height - self.border_width
        )

    def random_cell(self, rng: np.random.Generator, size: int = 1) -> Cell:
        """Draw the top-left cell of a ``size``x``size`` block that fits inside."""
        if size > self.interior_width or size > self.interior_height:
            raise ValueError(f"A {size}x{size} block does not fit in the arena.")
        x = int(rng.integers(self.min_x, self.max_x - size + 2))
        y = int(rng.integers(self.min_y, self.max_y - size + 2))
        return x, y

    def cell_rect(self, cell: Cell) -> tuple[int, int, int, int]:
        """Return the pixel rectangle ``(x, y, width, height)`` of a cell."""
        x, y = cell
        size = self.segment_size
        return x * size, y * size + self.header_height, size, size

    def occupancy(
        self,
        segments: Iterable[Cell] = (),
        food: Cell | None = None,
        obstacles: Iterable[Cell] = (),
    ) -> np.ndarray:
        """Paint entities onto a ``(rows, columns)`` array of :class:`CellType`.

        Coordinates outside the grid are skipped.
        """
        cells = np.full((self.rows, self.columns), CellType.BORDER, dtype=np.int8)
        cells[self.min_y:self.max_y + 1, self.min_x:self.max_x + 1] = CellType.EMPTY

        def paint(cell: Cell, cell_type: CellType) -> None:
            x, y = cell
            if 0 <= y < self.rows and 0 <= x < self.columns:
                cells[y, x] = cell_type

        for cell in obstacles:
            paint(cell, CellType.OBSTACLE)
        if food is not None:
            paint(food, CellType.FOOD)
        for cell in segments:
            paint(cell, CellType.SNAKE)
        return cells
