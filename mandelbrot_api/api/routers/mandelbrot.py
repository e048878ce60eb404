# mandelbrot_api/api/routers/mandelbrot.py
"""
Mandelbrot plot endpoints.
The zoom window comes from the optional xstart/xend/ystart/yend fields,
either as query parameters (GET) or as an HTML form (POST).
"""
import logging
import asyncio
import traceback
from typing import Optional

from fastapi import APIRouter, Depends, Form, HTTPException, Query, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from mandelbrot_api.api.schemas.mandelbrot import PlotData
from mandelbrot_api.config.settings import Settings, get_settings
from mandelbrot_api.services.plot import build_plot, default_bounds
from mandelbrot_api.utils import validate_bounds


router = APIRouter(prefix="/mandelbrot", tags=["Mandelbrot"])
logger = logging.getLogger(__name__)

# Template location is fixed for the life of the process; parsed templates
# are cached by the Jinja environment and shared by all requests
TEMPLATE_DIR = get_settings().TEMPLATE_DIR
TEMPLATE_NAME = get_settings().TEMPLATE_NAME
templates = Jinja2Templates(directory=TEMPLATE_DIR)


def load_template(name: str = TEMPLATE_NAME):
    """Parse the plot template up front so a broken template fails at startup."""
    return templates.get_template(name)


async def _compute_plot(
    settings: Settings,
    xstart: Optional[str],
    xend: Optional[str],
    ystart: Optional[str],
    yend: Optional[str],
) -> PlotData:
    bounds, status = validate_bounds(xstart, xend, ystart, yend, default_bounds(settings))
    logger.info(f"Plotting {bounds} on a {settings.ROWS}x{settings.COLUMNS} grid")

    try:
        # CPU bound, keep it off the event loop
        return await asyncio.to_thread(build_plot, bounds, status, settings)
    except Exception as e:
        logger.error(f"Error computing Mandelbrot grid for {bounds}: {e}")
        logger.error(traceback.format_exc())
        raise HTTPException(status_code=500, detail="Error computing Mandelbrot grid")


def _render(request: Request, plot: PlotData, settings: Settings):
    try:
        return templates.TemplateResponse(
            request,
            TEMPLATE_NAME,
            {"plot": plot, "rows": settings.ROWS, "columns": settings.COLUMNS},
        )
    except Exception as e:
        logger.exception(f"Write to HTTP output using template {TEMPLATE_NAME} failed: {e}")
        raise HTTPException(status_code=500, detail="Error rendering Mandelbrot plot")


@router.get("", response_class=HTMLResponse)
async def plot_mandelbrot(
    request: Request,
    xstart: Optional[str] = Query(None),
    xend: Optional[str] = Query(None),
    ystart: Optional[str] = Query(None),
    yend: Optional[str] = Query(None),
    settings: Settings = Depends(get_settings),
):
    """Render the Mandelbrot plot for the requested (or default) window."""
    plot = await _compute_plot(settings, xstart, xend, ystart, yend)
    return _render(request, plot, settings)


@router.post("", response_class=HTMLResponse)
async def plot_mandelbrot_form(
    request: Request,
    xstart: Optional[str] = Form(None),
    xend: Optional[str] = Form(None),
    ystart: Optional[str] = Form(None),
    yend: Optional[str] = Form(None),
    settings: Settings = Depends(get_settings),
):
    """Same as GET, for the zoom form posted by the page itself."""
    plot = await _compute_plot(settings, xstart, xend, ystart, yend)
    return _render(request, plot, settings)


@router.get("/data", response_model=PlotData)
async def plot_mandelbrot_data(
    xstart: Optional[str] = Query(None),
    xend: Optional[str] = Query(None),
    ystart: Optional[str] = Query(None),
    yend: Optional[str] = Query(None),
    settings: Settings = Depends(get_settings),
):
    """Plot data as JSON: status, colored grid and axis labels."""
    return await _compute_plot(settings, xstart, xend, ystart, yend)
