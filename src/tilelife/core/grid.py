"""Bounded cell grid with a double-buffered alive layer."""
from enum import Enum
from typing import Iterator, NamedTuple

import numpy as np


class Position(NamedTuple):
    """Integer cell coordinate. ``y`` grows upwards on screen."""
    x: int
    y: int


class Boundary(Enum):
    """How neighbour lookups treat coordinates outside the grid."""
    BOUNDED = "bounded"    # outside cells are absent, i.e. dead
    TOROIDAL = "toroidal"  # edges wrap around


class Grid:
    """Fixed-size grid of cells.

    Two layers are kept: ``alive`` holds the current tick and
    ``will_be_alive`` the next tick computed by the step function. Both are
    bool arrays indexed ``[y, x]``.
    """

    def __init__(self, width: int, height: int):
        """Create an all-dead grid.

        Args:
            width: Grid width in cells
            height: Grid height in cells
        """
        if width <= 0 or height <= 0:
            raise ValueError(f"Grid dimensions must be positive, got {width}x{height}")
        self.width = width
        self.height = height
        self.alive = np.zeros((height, width), dtype=bool)
        self.will_be_alive = np.zeros((height, width), dtype=bool)

    def __repr__(self):
        return f"Grid({self.width}x{self.height}, alive={self.alive_count})"

    @property
    def shape(self):
        return self.alive.shape

    @property
    def alive_count(self) -> int:
        return int(np.count_nonzero(self.alive))

    def in_bounds(self, pos: Position) -> bool:
        x, y = pos
        return 0 <= x < self.width and 0 <= y < self.height

    def is_alive(self, pos: Position) -> bool:
        """Current state of a cell; cells outside the grid are dead."""
        if not self.in_bounds(pos):
            return False
        x, y = pos
        return bool(self.alive[y, x])

    def set_alive(self, pos: Position, alive: bool = True) -> None:
        """Set the current state of a cell.

        Both layers are written so a paused grid shows the edit and the next
        commit does not undo it.
        """
        if not self.in_bounds(pos):
            raise IndexError(f"Cell {tuple(pos)} outside {self.width}x{self.height} grid")
        x, y = pos
        self.alive[y, x] = alive
        self.will_be_alive[y, x] = alive

    def toggle(self, pos: Position) -> bool:
        """Flip a cell and return its new state."""
        alive = not self.is_alive(pos)
        self.set_alive(pos, alive)
        return alive

    def clear(self) -> None:
        self.alive.fill(False)
        self.will_be_alive.fill(False)

    def positions(self) -> Iterator[Position]:
        """Yield every coordinate exactly once, column by column."""
        for x in range(self.width):
            for y in range(self.height):
                yield Position(x, y)

    def snapshot(self) -> np.ndarray:
        """Read-only copy of the current layer."""
        snap = self.alive.copy()
        snap.setflags(write=False)
        return snap

    def set_field(self, field: np.ndarray) -> None:
        """Replace the current layer.

        Args:
            field: Array of shape (height, width); non-zero means alive
        """
        field = np.asarray(field)
        if field.shape != self.shape:
            raise ValueError(f"Field shape {field.shape} doesn't match grid shape {self.shape}")
        self.alive[...] = field.astype(bool)
        self.will_be_alive[...] = self.alive

    def commit(self) -> None:
        """Make the next-tick layer current."""
        self.alive[...] = self.will_be_alive

    def copy(self) -> "Grid":
        other = Grid(self.width, self.height)
        other.alive[...] = self.alive
        other.will_be_alive[...] = self.will_be_alive
        return other

    @classmethod
    def from_cells(cls, width: int, height: int, cells) -> "Grid":
        """Build a grid with the given (x, y) cells alive."""
        grid = cls(width, height)
        for x, y in cells:
            grid.set_alive(Position(x, y))
        return grid

    def alive_cells(self) -> set:
        """Set of positions currently alive."""
        ys, xs = np.nonzero(self.alive)
        return {Position(int(x), int(y)) for x, y in zip(xs, ys)}
