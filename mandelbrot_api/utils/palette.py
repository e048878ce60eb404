"""
Iteration count to color mapping.

Counts are normalized against the min/max observed in the current grid, so
the full palette is used whatever the zoom level.
"""
from typing import List, Sequence

import numpy as np


def map_to_color(itn: int, global_min: int, global_max: int, palette: Sequence[str]) -> str:
    """
    Map one iteration count to a palette entry.

    Lower counts get the lighter (first) colors, global_max gets the last one.
    A flat grid (global_min == global_max) maps everything to the first color,
    as does any count outside [global_min, global_max].
    """
    if global_max == global_min:
        return palette[0]
    if itn < global_min or itn > global_max:
        itn = global_min

    scale = (len(palette) - 1) / (global_max - global_min)
    # round half up
    return palette[int(scale * (itn - global_min) + 0.5)]


def colorize_grid(counts: np.ndarray, global_min: int, global_max: int, palette: Sequence[str]) -> List[str]:
    """Flat, row-major list of colors for the whole grid."""
    return [map_to_color(int(itn), global_min, global_max, palette) for itn in counts.ravel()]
