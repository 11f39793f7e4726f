"""Grid-to-screen transform and per-cell draw data."""
from dataclasses import dataclass
from typing import List, Optional, Tuple

from .grid import Grid, Position
from ..utils.config import Config

Color = Tuple[float, float, float, float]


class WindowUnavailableError(RuntimeError):
    """Raised when there is no primary display surface to project onto."""


@dataclass(frozen=True)
class CellView:
    """Everything the renderer needs to draw one cell."""
    color: Color
    position: Tuple[float, float]
    scale: Tuple[float, float]


def project(coord: float, window_size: float, grid_size: float) -> float:
    """Map a grid coordinate to a pixel coordinate centred on the window.

    Args:
        coord: Cell coordinate along one axis
        window_size: Window extent along that axis in pixels
        grid_size: Grid extent along that axis in cells

    Returns:
        Pixel coordinate of the tile centre, origin at the window centre
    """
    tile_size = window_size / grid_size
    return coord / grid_size * window_size - window_size / 2 + tile_size / 2


def screen_to_cell(pixel: float, window_size: float, grid_size: int) -> Optional[int]:
    """Inverse of ``project``: the cell under a centred pixel coordinate.

    Returns:
        Cell index, or None when the pixel lies outside the grid
    """
    tile_size = window_size / grid_size
    cell = int((pixel + window_size / 2) // tile_size)
    if 0 <= cell < grid_size:
        return cell
    return None


def tile_scale(window_size: float, grid_size: float, fill: float = Config.TILE_FILL) -> float:
    """Sprite extent of one tile along an axis."""
    return fill / grid_size * window_size


def check_window(window_size) -> Tuple[float, float]:
    """Validate the primary window dimensions.

    Raises:
        WindowUnavailableError: if there is no window or it has no area
    """
    if window_size is None:
        raise WindowUnavailableError("No primary window to render into")
    width, height = window_size
    if width <= 0 or height <= 0:
        raise WindowUnavailableError(f"Primary window has no drawable area ({width}x{height})")
    return float(width), float(height)


def cell_views(grid: Grid, window_size, config=Config) -> List[CellView]:
    """Build draw data for every cell of the grid.

    Positions use the window minus the border, scales the full window.

    Args:
        grid: Grid to render
        window_size: (width, height) of the primary window in pixels
        config: Source of colours, border and tile fill

    Returns:
        One CellView per cell, in ``Grid.positions`` order
    """
    width, height = check_window(window_size)
    scale = (tile_scale(width, grid.width, config.TILE_FILL),
             tile_scale(height, grid.height, config.TILE_FILL))
    inner_width = width - config.BORDER_SIZE
    inner_height = height - config.BORDER_SIZE

    views = []
    for pos in grid.positions():
        color = config.ALIVE_COLOR if grid.alive[pos.y, pos.x] else config.DEAD_COLOR
        position = (project(pos.x, inner_width, grid.width),
                    project(pos.y, inner_height, grid.height))
        views.append(CellView(color, position, scale))
    return views


def cell_at(grid: Grid, pixel: Tuple[float, float], window_size,
            config=Config) -> Optional[Position]:
    """Cell under a centred, y-up pixel coordinate, or None."""
    width, height = check_window(window_size)
    x = screen_to_cell(pixel[0], width - config.BORDER_SIZE, grid.width)
    y = screen_to_cell(pixel[1], height - config.BORDER_SIZE, grid.height)
    if x is None or y is None:
        return None
    return Position(x, y)
