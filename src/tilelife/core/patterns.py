"""Starting and stamp patterns."""
from typing import Optional

import numpy as np

from .grid import Grid, Position

# Relative offsets, y up
BLINKER = [(0, 0), (1, 0), (2, 0)]
BLOCK = [(0, 0), (1, 0), (0, 1), (1, 1)]
GLIDER = [(1, 2), (2, 1), (0, 0), (1, 0), (2, 0)]


def stamp(grid: Grid, offsets, origin: Position) -> int:
    """Set cells alive at ``origin + offset``; offsets off the grid are skipped.

    Returns:
        Number of cells placed
    """
    placed = 0
    for dx, dy in offsets:
        pos = Position(origin.x + dx, origin.y + dy)
        if grid.in_bounds(pos):
            grid.set_alive(pos)
            placed += 1
    return placed


def _centre(grid: Grid, offsets) -> Position:
    span_x = max(dx for dx, _ in offsets) + 1
    span_y = max(dy for _, dy in offsets) + 1
    return Position((grid.width - span_x) // 2, (grid.height - span_y) // 2)


def column(grid: Grid, x: int = 2) -> int:
    """Make every cell in column ``x`` alive."""
    return stamp(grid, [(0, y) for y in range(grid.height)], Position(x, 0))


def blinker(grid: Grid, origin: Optional[Position] = None) -> int:
    return stamp(grid, BLINKER, origin if origin is not None else _centre(grid, BLINKER))


def block(grid: Grid, origin: Optional[Position] = None) -> int:
    return stamp(grid, BLOCK, origin if origin is not None else _centre(grid, BLOCK))


def glider(grid: Grid, origin: Optional[Position] = None) -> int:
    return stamp(grid, GLIDER, origin if origin is not None else _centre(grid, GLIDER))


def noise(grid: Grid, density: float = 0.3, seed: Optional[int] = None) -> int:
    """Randomly bring cells to life.

    Args:
        grid: Grid to modify
        density: Probability of a cell being set alive (0.0 to 1.0)
        seed: Optional seed for reproducible fills

    Returns:
        Number of cells set alive
    """
    if not 0.0 <= density <= 1.0:
        raise ValueError(f"Noise density must be between 0 and 1, got {density}")
    rng = np.random.default_rng(seed)
    mask = rng.random(grid.shape) < density
    grid.set_field(grid.alive | mask)
    return int(np.count_nonzero(mask))


def empty(grid: Grid) -> int:
    return 0


PATTERNS = {
    'column': column,
    'blinker': blinker,
    'block': block,
    'glider': glider,
    'noise': noise,
    'empty': empty,
}


def apply_pattern(grid: Grid, name: str, **kwargs) -> int:
    """Apply a named pattern to a grid.

    Raises:
        KeyError: if the pattern name is unknown
    """
    try:
        pattern = PATTERNS[name]
    except KeyError:
        raise KeyError(f"Unknown pattern {name!r}, expected one of {sorted(PATTERNS)}") from None
    return pattern(grid, **kwargs)
