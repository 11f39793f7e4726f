"""Conway's Game of Life on a small tile arena."""

__version__ = "0.1.0"
__author__ = "Life Game"

from .core.life_engine import LifeEngine, RunState, step
from .core.projection import CellView, project

__all__ = ['LifeEngine', 'RunState', 'step', 'CellView', 'project', '__version__']
