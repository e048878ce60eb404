from .axis import build_labels
from .bounds import validate_bounds
from .palette import colorize_grid, map_to_color

__all__ = ['build_labels', 'validate_bounds', 'colorize_grid', 'map_to_color']
