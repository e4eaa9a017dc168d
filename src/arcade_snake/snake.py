"""Snake representation, direction state machine and movement logic."""

from __future__ import annotations

import enum
from collections.abc import Iterable

Cell = tuple[int, int]


class Turn(enum.Enum):
    """Rotation applied to the current heading."""

    CLOCKWISE = "clockwise"
    ANTICLOCKWISE = "anticlockwise"


class Direction(enum.Enum):
    """Cardinal headings with (dx, dy) unit displacements.

    Members are declared in clockwise order, so the cycle of
    :meth:`clockwise` / :meth:`anticlockwise` follows declaration order.
    """

    UP = (0, -1)
    RIGHT = (1, 0)
    DOWN = (0, 1)
    LEFT = (-1, 0)

    def clockwise(self) -> Direction:
        """Return the next heading in the clockwise cycle."""
        members = list(Direction)
        return members[(members.index(self) + 1) % len(members)]

    def anticlockwise(self) -> Direction:
        """Return the previous heading in the clockwise cycle."""
        members = list(Direction)
        return members[(members.index(self) - 1) % len(members)]

    def turned(self, turn: Turn) -> Direction:
        if turn is Turn.CLOCKWISE:
            return self.clockwise()
        return self.anticlockwise()

    @classmethod
    def from_name(cls, name: str) -> Direction:
        """Look up a direction by case-insensitive name (``"up"``, ...)."""
        try:
            return cls[name.upper()]
        except KeyError:
            raise ValueError(f"Unknown direction: {name!r}.") from None


class Snake:
    """A snake stored as a list of (x, y) segments, head first.

    ``length`` is the target size; :meth:`move` keeps exactly ``length``
    segments, :meth:`grow` extends the target by one and keeps the tail.
    """

    def __init__(
        self,
        segments: Iterable[Cell],
        direction: Direction = Direction.RIGHT,
        length: int | None = None,
    ) -> None:
        self.segments: list[Cell] = [(int(x), int(y)) for x, y in segments]
        if not self.segments:
            raise ValueError("Snake needs at least one segment.")
        self.length = len(self.segments) if length is None else length
        if self.length < len(self.segments):
            raise ValueError("Snake length cannot be smaller than its segment count.")
        self.direction = direction

    @property
    def head(self) -> Cell:
        """Return the head coordinate."""
        return self.segments[0]

    @property
    def body(self) -> list[Cell]:
        """Segments behind the head."""
        return self.segments[1:]

    def next_head(self) -> Cell:
        """Compute the next head position without moving."""
        dx, dy = self.direction.value
        x, y = self.head
        return x + dx, y + dy

    def move(self) -> None:
        """Advance one cell, dropping tail segments beyond ``length``."""
        self.segments.insert(0, self.next_head())
        del self.segments[self.length:]

    def grow(self) -> None:
        """Advance one cell and extend the target length by one."""
        self.length += 1
        self.segments.insert(0, self.next_head())
        del self.segments[self.length:]
