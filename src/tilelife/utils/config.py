"""Configuration constants for the tile Game of Life application."""
from dataclasses import dataclass
from typing import Tuple


@dataclass
class Config:
    """Application configuration."""

    # Window settings
    WINDOW_WIDTH: int = 1000
    WINDOW_HEIGHT: int = 1000
    WINDOW_TITLE: str = "Game of Life"

    # Arena settings
    ARENA_WIDTH: int = 16
    ARENA_HEIGHT: int = 16
    MIN_ARENA_SIZE: int = 3
    MAX_ARENA_SIZE: int = 32

    # Colors (RGBA)
    ALIVE_COLOR: Tuple[float, float, float, float] = (0.75, 0.85, 0.5, 1.0)
    DEAD_COLOR: Tuple[float, float, float, float] = (0.3, 0.3, 0.3, 1.0)
    BACKGROUND_COLOR: Tuple[float, float, float, float] = (0.1, 0.1, 0.1, 1.0)

    # Layout
    BORDER_SIZE: float = 25.0   # pixels trimmed from the window before placing tiles
    TILE_FILL: float = 0.9      # fraction of a tile covered by its sprite

    # Timing
    STEP_INTERVAL: float = 0.3  # seconds between automaton steps
    DEFAULT_FPS: int = 60

    # Simulation defaults
    DEFAULT_RULE: int = 0       # BinaryRule.TWO_THREE
    DEFAULT_BOUNDARY: str = "bounded"
    DEFAULT_PATTERN: str = "column"
    DEFAULT_NOISE_DENSITY: float = 0.3
