"""
Validation of user supplied zoom bounds.

The four bounds are all-or-nothing: unless every one of them is given, the
default window is plotted. Bad input never raises; it is logged, replaced by
the defaults and reported back to the user through the status line.
"""
import logging
import math
import re
from typing import Optional, Tuple

from mandelbrot_api.services.mandelbrot import PlaneBounds

logger = logging.getLogger(__name__)

PARSE_ERROR = "x or y values are not numbers."
X_RANGE_ERROR = "values are not in x range."
Y_RANGE_ERROR = "values are not in y range."

# Plain ASCII decimal, no whitespace, underscores or other digit scripts
DECIMAL_PATTERN = re.compile(r"[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?", re.ASCII)


def plotted_status(bounds: PlaneBounds) -> str:
    return f"Status: Data plotted from ({bounds.xmin},{bounds.ymin}) to ({bounds.xmax},{bounds.ymax})"


def _error_status(error: str, defaults: PlaneBounds) -> str:
    return f"Error: {error} {plotted_status(defaults)}"


def _parse(raw: str) -> float:
    if not DECIMAL_PATTERN.fullmatch(raw):
        raise ValueError(f"not a decimal number: {raw!r}")
    value = float(raw)
    if not math.isfinite(value):
        raise ValueError(f"not a finite number: {raw!r}")
    return value


def _in_window(start: float, end: float, low: float, high: float) -> bool:
    return low <= start <= high and low <= end <= high and start < end


def validate_bounds(
    xstart: Optional[str],
    xend: Optional[str],
    ystart: Optional[str],
    yend: Optional[str],
    defaults: PlaneBounds,
) -> Tuple[PlaneBounds, str]:
    """
    Turn the raw form values into plane bounds plus a status message.

    Returns the defaults when any value is missing, cannot be parsed, or lies
    outside the default window (or start >= end on either axis).
    """
    raw = (xstart, xend, ystart, yend)
    if not all(raw):
        return defaults, plotted_status(defaults)

    try:
        x1, x2, y1, y2 = (_parse(value) for value in raw)
    except ValueError as e:
        logger.warning(f"Zoom bounds rejected, not numbers: {raw} ({e})")
        return defaults, _error_status(PARSE_ERROR, defaults)

    if not _in_window(x1, x2, defaults.xmin, defaults.xmax):
        logger.warning(f"Zoom bounds rejected, start or end value not in x range: ({x1}, {x2})")
        return defaults, _error_status(X_RANGE_ERROR, defaults)

    if not _in_window(y1, y2, defaults.ymin, defaults.ymax):
        logger.warning(f"Zoom bounds rejected, start or end value not in y range: ({y1}, {y2})")
        return defaults, _error_status(Y_RANGE_ERROR, defaults)

    bounds = PlaneBounds(xmin=x1, xmax=x2, ymin=y1, ymax=y2)
    return bounds, plotted_status(bounds)
