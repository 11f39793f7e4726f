"""Step function and simulation controller for the tile Game of Life."""
from enum import Enum
from typing import Optional
import logging

import numpy as np

from .grid import Boundary, Grid, Position
from .patterns import apply_pattern
from .rules import BIRTH_TABLE, SURVIVE_TABLE, BinaryRule, rule_name
from ..utils.config import Config

# Global logger
LOG = logging.getLogger(__name__)
LOG.setLevel(logging.DEBUG)
handler = logging.StreamHandler()
handler.setFormatter(logging.Formatter('%(levelname)s: %(message)s'))
LOG.addHandler(handler)

# Moore neighbourhood, self excluded
NEIGHBOUR_OFFSETS = [(dx, dy) for dx in (-1, 0, 1) for dy in (-1, 0, 1) if (dx, dy) != (0, 0)]


def _check_wrap(shape, boundary: Boundary) -> None:
    # narrower wraps revisit the cell itself or the same neighbour twice
    if boundary is Boundary.TOROIDAL and min(shape) < 3:
        height, width = shape
        raise ValueError(f"Toroidal edges need a grid of at least 3x3, got {width}x{height}")


def count_alive_neighbours(snapshot: np.ndarray, pos: Position,
                           boundary: Boundary = Boundary.BOUNDED) -> int:
    """Count alive cells in the Moore neighbourhood of ``pos``.

    Args:
        snapshot: Bool array indexed [y, x] holding the previous tick
        pos: Cell whose neighbours are counted
        boundary: BOUNDED skips coordinates outside the grid, TOROIDAL wraps them

    Returns:
        Number of alive neighbours (0-8)
    """
    _check_wrap(snapshot.shape, boundary)
    height, width = snapshot.shape
    count = 0
    for dx, dy in NEIGHBOUR_OFFSETS:
        x, y = pos.x + dx, pos.y + dy
        if boundary is Boundary.TOROIDAL:
            x, y = x % width, y % height
        elif not (0 <= x < width and 0 <= y < height):
            continue
        if snapshot[y, x]:
            count += 1
    return count


def neighbour_counts(snapshot: np.ndarray, boundary: Boundary = Boundary.BOUNDED) -> np.ndarray:
    """Alive neighbour count for every cell at once.

    Returns:
        Int array with the same shape as ``snapshot``
    """
    _check_wrap(snapshot.shape, boundary)
    cells = snapshot.astype(np.int8)
    height, width = cells.shape
    if boundary is Boundary.TOROIDAL:
        counts = np.zeros((height, width), dtype=np.int8)
        for dx, dy in NEIGHBOUR_OFFSETS:
            counts += np.roll(cells, (dy, dx), axis=(0, 1))
        return counts

    padded = np.pad(cells, 1)
    counts = np.zeros((height, width), dtype=np.int8)
    for dx, dy in NEIGHBOUR_OFFSETS:
        counts += padded[1 + dy:1 + dy + height, 1 + dx:1 + dx + width]
    return counts


def step(grid: Grid, next_grid: Optional[Grid] = None,
         rule: BinaryRule = BinaryRule.TWO_THREE,
         boundary: Boundary = Boundary.BOUNDED) -> int:
    """Advance a grid by one generation.

    All next states are computed from a read-only snapshot of the current
    layer before any of them is committed.

    Args:
        grid: Grid holding the current tick
        next_grid: Optional grid receiving the result; ``grid`` is left
            untouched when given
        rule: Birth/survival rule
        boundary: Neighbour lookup policy at the grid edges

    Returns:
        Number of alive cells after the step
    """
    target = grid if next_grid is None else next_grid
    if target.shape != grid.shape:
        raise ValueError(f"Next grid shape {target.shape} doesn't match grid shape {grid.shape}")

    snapshot = grid.snapshot()
    counts = neighbour_counts(snapshot, boundary)
    rule_id = int(rule)
    target.will_be_alive[...] = np.where(snapshot,
                                         SURVIVE_TABLE[rule_id][counts],
                                         BIRTH_TABLE[rule_id][counts])
    target.commit()
    return target.alive_count


class RunState(Enum):
    """Whether the fixed-timestep callback advances the automaton."""
    PAUSED = "paused"
    RUNNING = "running"


class LifeEngine:
    """Simulation controller owning a single grid."""

    def __init__(self, width: int = Config.ARENA_WIDTH, height: int = Config.ARENA_HEIGHT,
                 rule: BinaryRule = BinaryRule(Config.DEFAULT_RULE),
                 boundary: Boundary = Boundary(Config.DEFAULT_BOUNDARY),
                 pattern: str = Config.DEFAULT_PATTERN):
        """Initialize the engine.

        Args:
            width: Arena width in cells
            height: Arena height in cells
            rule: Birth/survival rule
            boundary: Neighbour lookup policy at the grid edges
            pattern: Name of the starting pattern, restored by ``reset``
        """
        for name, size in (('width', width), ('height', height)):
            if not Config.MIN_ARENA_SIZE <= size <= Config.MAX_ARENA_SIZE:
                raise ValueError(f"Arena {name} must be between {Config.MIN_ARENA_SIZE} and "
                                 f"{Config.MAX_ARENA_SIZE}, got {size}")
        self.grid = Grid(width, height)
        self.rule = BinaryRule(rule)
        self.boundary = Boundary(boundary)
        self.pattern = pattern
        self.generation = 0
        self.state = RunState.PAUSED

        apply_pattern(self.grid, pattern)
        LOG.info(f"Engine {width}x{height} using {self.rule_name}, {self.boundary.value} edges, "
                 f"pattern={pattern}")

    @property
    def width(self) -> int:
        return self.grid.width

    @property
    def height(self) -> int:
        return self.grid.height

    @property
    def is_running(self) -> bool:
        return self.state is RunState.RUNNING

    @property
    def alive_count(self) -> int:
        return self.grid.alive_count

    @property
    def rule_name(self) -> str:
        """Get human-readable name of current rule."""
        return rule_name(self.rule)

    def toggle(self) -> RunState:
        """Switch between paused and running."""
        if self.state is RunState.PAUSED:
            self.state = RunState.RUNNING
        else:
            self.state = RunState.PAUSED
        LOG.info(f"Simulation {self.state.value} at generation {self.generation}")
        return self.state

    def start(self) -> None:
        if not self.is_running:
            self.toggle()

    def pause(self) -> None:
        if self.is_running:
            self.toggle()

    def tick(self) -> bool:
        """Fixed-timestep callback.

        Returns:
            True if a generation was computed, False while paused
        """
        if self.state is RunState.PAUSED:
            return False
        self.step()
        return True

    def step(self, steps: int = 1) -> None:
        """Advance simulation by the given number of generations, ignoring run state."""
        for _ in range(steps):
            alive = step(self.grid, rule=self.rule, boundary=self.boundary)
            self.generation += 1
            LOG.debug(f"Step {self.generation}: alive_cells={alive}")

    def reset(self) -> None:
        """Restore the starting pattern and pause."""
        self.grid.clear()
        apply_pattern(self.grid, self.pattern)
        self.generation = 0
        self.state = RunState.PAUSED
        LOG.info(f"Reset to pattern {self.pattern}")

    def clear(self) -> None:
        """Kill every cell."""
        self.grid.clear()
        self.generation = 0

    def set_rule(self, rule: BinaryRule) -> None:
        self.rule = BinaryRule(rule)
        LOG.info(f"Rule set to {self.rule_name}")

    def toggle_cell(self, x: int, y: int) -> bool:
        """Flip a cell from user input.

        Returns:
            True if a cell changed, False if (x, y) is outside the arena
        """
        pos = Position(x, y)
        if not self.grid.in_bounds(pos):
            return False
        alive = self.grid.toggle(pos)
        LOG.debug(f"Cell {x},{y} -> {'alive' if alive else 'dead'}")
        return True

    def add_pattern(self, name: str, **kwargs) -> int:
        """Stamp a named pattern on top of the current field."""
        placed = apply_pattern(self.grid, name, **kwargs)
        LOG.info(f"Added {name}: {placed} cells")
        return placed

    def add_noise(self, density: float = Config.DEFAULT_NOISE_DENSITY,
                  seed: Optional[int] = None) -> int:
        return self.add_pattern('noise', density=density, seed=seed)

    def get_field(self) -> np.ndarray:
        """Copy of the current alive layer, indexed [y, x]."""
        return self.grid.alive.copy()
