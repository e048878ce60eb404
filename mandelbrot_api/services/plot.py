"""
Assembles the plot handed to the renderer: colored grid, axis labels, status.
"""
import logging
import time
from datetime import datetime

from mandelbrot_api.api.schemas.mandelbrot import PlotData
from mandelbrot_api.config.settings import Settings
from mandelbrot_api.services.mandelbrot import GridShape, PlaneBounds, compute_grid
from mandelbrot_api.utils import build_labels, colorize_grid

logger = logging.getLogger(__name__)


def default_bounds(settings: Settings) -> PlaneBounds:
    return PlaneBounds(
        xmin=settings.DEFAULT_XMIN,
        xmax=settings.DEFAULT_XMAX,
        ymin=settings.DEFAULT_YMIN,
        ymax=settings.DEFAULT_YMAX,
    )


def build_plot(bounds: PlaneBounds, status: str, settings: Settings) -> PlotData:
    """
    Compute the grid for the given bounds and turn it into plot data.
    Synchronous and CPU bound; the routers run it in a worker thread.
    """
    start_time = time.time()
    logger.info(f"Start Time: {datetime.now().isoformat(timespec='seconds')}")

    shape = GridShape.from_settings(settings)
    result = compute_grid(bounds, shape, workers=settings.ROW_WORKERS)

    plot = PlotData(
        status=status,
        grid=colorize_grid(result.counts, result.minits, result.maxits, settings.PALETTE),
        xlabels=build_labels(bounds.xmin, bounds.xmax, settings.X_LABELS, settings.LABEL_DECIMALS),
        ylabels=build_labels(bounds.ymin, bounds.ymax, settings.Y_LABELS, settings.LABEL_DECIMALS),
    )

    logger.info(f"End Time: {datetime.now().isoformat(timespec='seconds')}")
    logger.info(f"Elapsed time: {time.time() - start_time:.3f}s for {bounds}")
    return plot
