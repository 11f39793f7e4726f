import numpy as np
import pytest

from tilelife.core.grid import Boundary, Grid, Position
from tilelife.core.life_engine import (LifeEngine, RunState, count_alive_neighbours,
                                       neighbour_counts, step)
from tilelife.core.patterns import blinker, noise
from tilelife.core.rules import BinaryRule, next_state
from tilelife.utils.config import Config


def test_corner_ignores_cells_outside_grid():
    grid = Grid.from_cells(3, 3, [(2, 2), (2, 0), (0, 2)])
    snap = grid.snapshot()
    assert count_alive_neighbours(snap, Position(0, 0)) == 0
    assert count_alive_neighbours(snap, Position(0, 0), Boundary.TOROIDAL) == 3


def test_cell_does_not_count_itself():
    grid = Grid.from_cells(3, 3, [(1, 1)])
    assert count_alive_neighbours(grid.snapshot(), Position(1, 1)) == 0


@pytest.mark.parametrize("boundary", list(Boundary))
def test_vectorised_counts_match_per_cell(boundary):
    grid = Grid(12, 9)
    noise(grid, 0.4, seed=7)
    snap = grid.snapshot()
    counts = neighbour_counts(snap, boundary)
    for pos in grid.positions():
        assert counts[pos.y, pos.x] == count_alive_neighbours(snap, pos, boundary)


@pytest.mark.parametrize("rule", list(BinaryRule))
def test_dead_grid_stays_dead(rule):
    grid = Grid(16, 16)
    for _ in range(10):
        assert step(grid, rule=rule) == 0


def test_step_uses_only_previous_tick():
    grid = Grid(16, 16)
    noise(grid, 0.35, seed=3)
    snap = grid.snapshot()
    expected = np.zeros_like(snap)
    for pos in grid.positions():
        count = count_alive_neighbours(snap, pos)
        expected[pos.y, pos.x] = next_state(bool(snap[pos.y, pos.x]), count)

    step(grid)
    assert np.array_equal(grid.alive, expected)


def test_blinker_has_period_two():
    grid = Grid(5, 5)
    blinker(grid, Position(1, 2))
    start = grid.alive_cells()

    step(grid, rule=BinaryRule.CONWAY_LIFE)
    assert grid.alive_cells() == {Position(2, 1), Position(2, 2), Position(2, 3)}
    step(grid, rule=BinaryRule.CONWAY_LIFE)
    assert grid.alive_cells() == start


def test_step_into_next_grid_leaves_source_untouched():
    grid = Grid(5, 5)
    blinker(grid, Position(1, 2))
    before = grid.alive.copy()
    target = Grid(5, 5)

    alive = step(grid, target, rule=BinaryRule.CONWAY_LIFE)
    assert alive == 3
    assert np.array_equal(grid.alive, before)
    assert target.alive_cells() == {Position(2, 1), Position(2, 2), Position(2, 3)}


def test_step_into_mismatched_grid():
    with pytest.raises(ValueError):
        step(Grid(4, 4), Grid(5, 4))


def test_toroidal_edges_wrap():
    # a blinker across the left/right seam keeps oscillating
    grid = Grid.from_cells(6, 6, [(5, 3), (0, 3), (1, 3)])
    step(grid, rule=BinaryRule.CONWAY_LIFE, boundary=Boundary.TOROIDAL)
    assert grid.alive_cells() == {Position(0, 2), Position(0, 3), Position(0, 4)}


def test_engine_starts_paused_with_column():
    engine = LifeEngine()
    assert engine.state is RunState.PAUSED
    assert engine.generation == 0
    assert engine.alive_count == 16
    assert all(engine.grid.is_alive(Position(2, y)) for y in range(16))


def test_paused_ticks_change_nothing():
    engine = LifeEngine()
    before = engine.get_field()
    for _ in range(5):
        assert engine.tick() is False
    assert engine.generation == 0
    assert np.array_equal(engine.get_field(), before)


def test_running_tick_applies_one_step():
    engine = LifeEngine()
    assert engine.toggle() is RunState.RUNNING
    assert engine.tick() is True
    assert engine.generation == 1
    # column ends die, interior survives, both side columns are born
    assert engine.alive_count == 14 + 16 + 16
    assert not engine.grid.is_alive(Position(2, 0))
    assert engine.grid.is_alive(Position(1, 0))


def test_toggle_back_to_paused():
    engine = LifeEngine()
    engine.toggle()
    engine.tick()
    assert engine.toggle() is RunState.PAUSED
    field = engine.get_field()
    engine.tick()
    assert np.array_equal(engine.get_field(), field)


def test_start_and_pause_are_idempotent():
    engine = LifeEngine()
    engine.start()
    engine.start()
    assert engine.is_running
    engine.pause()
    engine.pause()
    assert not engine.is_running


def test_single_step_ignores_run_state():
    engine = LifeEngine()
    engine.step(3)
    assert engine.generation == 3
    assert engine.state is RunState.PAUSED


def test_reset_restores_starting_pattern():
    engine = LifeEngine(pattern='blinker', rule=BinaryRule.CONWAY_LIFE)
    start = engine.get_field()
    engine.start()
    engine.tick()
    engine.reset()
    assert engine.generation == 0
    assert engine.state is RunState.PAUSED
    assert np.array_equal(engine.get_field(), start)


def test_toggle_cell():
    engine = LifeEngine(pattern='empty')
    assert engine.toggle_cell(3, 4) is True
    assert engine.grid.is_alive(Position(3, 4))
    assert engine.toggle_cell(16, 0) is False
    assert engine.toggle_cell(-1, 0) is False
    assert engine.alive_count == 1


def test_clear_and_rule_change():
    engine = LifeEngine(width=32, height=32)
    engine.step()
    engine.clear()
    assert engine.alive_count == 0
    assert engine.generation == 0

    engine.set_rule(BinaryRule.HIGHLIFE)
    assert engine.rule_name == "HighLife (B36/S23)"


def test_add_noise_is_reproducible():
    first = LifeEngine(pattern='empty')
    second = LifeEngine(pattern='empty')
    first.add_noise(0.5, seed=11)
    second.add_noise(0.5, seed=11)
    assert np.array_equal(first.get_field(), second.get_field())
    assert first.alive_count > 0


@pytest.mark.parametrize("width,height", [(Config.MAX_ARENA_SIZE + 1, 16),
                                          (16, Config.MIN_ARENA_SIZE - 1),
                                          (132, 2)])
def test_engine_rejects_arena_size_outside_limits(width, height):
    with pytest.raises(ValueError):
        LifeEngine(width=width, height=height)


def test_engine_accepts_arena_size_limits():
    assert LifeEngine(width=Config.MIN_ARENA_SIZE, height=Config.MAX_ARENA_SIZE).alive_count > 0


@pytest.mark.parametrize("width,height", [(1, 1), (2, 5), (5, 2)])
def test_toroidal_counts_need_three_cells_per_axis(width, height):
    grid = Grid.from_cells(width, height, [(0, 0)])
    snap = grid.snapshot()
    with pytest.raises(ValueError):
        count_alive_neighbours(snap, Position(0, 0), Boundary.TOROIDAL)
    with pytest.raises(ValueError):
        neighbour_counts(snap, Boundary.TOROIDAL)
    # bounded lookups never wrap onto the cell itself
    assert count_alive_neighbours(snap, Position(0, 0)) == 0
    assert neighbour_counts(snap)[0, 0] == 0
