"""Core module for the tile Game of Life automaton."""
from .grid import Boundary, Grid, Position
from .life_engine import LifeEngine, RunState, count_alive_neighbours, neighbour_counts, step
from .projection import CellView, WindowUnavailableError, cell_views, project
from .rules import BinaryRule, next_state, rule_name

__all__ = ['Boundary', 'Grid', 'Position', 'LifeEngine', 'RunState',
           'count_alive_neighbours', 'neighbour_counts', 'step',
           'CellView', 'WindowUnavailableError', 'cell_views', 'project',
           'BinaryRule', 'next_state', 'rule_name']
