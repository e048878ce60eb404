"""
Mandelbrot escape-time computation.

Each row of the grid is computed by its own worker thread; the coordinator
gathers the rows in whatever order they finish and reduces the per-row
iteration extrema into the global range used for coloring.
"""
from concurrent.futures import ThreadPoolExecutor, as_completed
from dataclasses import dataclass
from typing import Optional
import logging

import numpy as np

logger = logging.getLogger(__name__)

# |v| beyond this radius always diverges
ESCAPE_RADIUS = 2.0


@dataclass(frozen=True)
class PlaneBounds:
    """Visible window of the complex plane."""

    xmin: float
    xmax: float
    ymin: float
    ymax: float

    def __post_init__(self):
        if not (self.xmin < self.xmax and self.ymin < self.ymax):
            raise ValueError(f"Invalid plane bounds: {self}")


@dataclass(frozen=True)
class GridShape:
    rows: int
    columns: int
    max_iterations: int

    @classmethod
    def from_settings(cls, settings) -> "GridShape":
        return cls(settings.ROWS, settings.COLUMNS, settings.MAX_ITERATIONS)


@dataclass(frozen=True)
class RowResult:
    row: int
    minits: int
    maxits: int
    its: np.ndarray  # read-only, length = columns


@dataclass(frozen=True)
class GridResult:
    counts: np.ndarray  # shape (rows, columns), row 0 is the top of the plot
    minits: int
    maxits: int


def evaluate(row: int, col: int, bounds: PlaneBounds, shape: GridShape) -> int:
    """
    Return the iteration at which the orbit of the cell's point escapes.

    The cell (row, col) maps linearly onto the plane; row 0 is the largest y.
    Points that stay bounded for the whole budget return max_iterations.
    """
    x = col / (shape.columns - 1) * (bounds.xmax - bounds.xmin) + bounds.xmin
    y = bounds.ymax - row / (shape.rows - 1) * (bounds.ymax - bounds.ymin)
    z = complex(x, y)

    v = 0j
    for n in range(shape.max_iterations):
        v = v * v + z
        if abs(v) > ESCAPE_RADIUS:
            return n
    return shape.max_iterations


def process_row(row: int, bounds: PlaneBounds, shape: GridShape) -> RowResult:
    """Evaluate every cell in one row and track the row's iteration range."""
    its = np.empty(shape.columns, dtype=np.int64)
    minits = shape.max_iterations
    maxits = 0

    for col in range(shape.columns):
        n = evaluate(row, col, bounds, shape)
        if n > maxits:
            maxits = n
        if n < minits:
            minits = n
        its[col] = n

    its.flags.writeable = False
    return RowResult(row=row, minits=minits, maxits=maxits, its=its)


def compute_grid(bounds: PlaneBounds, shape: GridShape, workers: Optional[int] = None) -> GridResult:
    """
    Compute the whole grid, one concurrent task per row.

    Blocks until every row has reported back. Rows are placed by the index
    they carry, so completion order does not matter.
    """
    max_workers = workers or shape.rows
    counts = np.zeros((shape.rows, shape.columns), dtype=np.int64)
    minits = shape.max_iterations
    maxits = 0

    with ThreadPoolExecutor(max_workers=max_workers, thread_name_prefix="mandelbrot-row") as executor:
        futures = [executor.submit(process_row, row, bounds, shape) for row in range(shape.rows)]

        for future in as_completed(futures):
            result = future.result()
            minits = min(minits, result.minits)
            maxits = max(maxits, result.maxits)
            counts[result.row] = result.its

    logger.debug(f"Grid {shape.rows}x{shape.columns} computed with {max_workers} workers: iterations {minits}..{maxits}")
    return GridResult(counts=counts, minits=minits, maxits=maxits)
