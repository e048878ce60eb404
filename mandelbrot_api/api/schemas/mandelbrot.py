# mandelbrot_api/api/schemas/mandelbrot.py
from pydantic import BaseModel
from typing import List


class PlotData(BaseModel):
    """Everything the plot template needs."""
    status: str
    grid: List[str]  # rows * columns colors, row-major, top row first
    xlabels: List[str]
    ylabels: List[str]


class GridInfo(BaseModel):
    rows: int
    columns: int
    max_iterations: int
    palette: List[str]
