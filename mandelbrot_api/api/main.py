# mandelbrot_api/api/main.py
from contextlib import asynccontextmanager
from fastapi import FastAPI, status
from fastapi.responses import JSONResponse
from mandelbrot_api.config.settings import get_settings
from mandelbrot_api.api.routers import mandelbrot
from mandelbrot_api.api.schemas.mandelbrot import GridInfo
from mandelbrot_api.state import app_state
import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path
from datetime import datetime

settings = get_settings()


class HealthCheckFilter(logging.Filter):
    def filter(self, record):
        return "/health" not in record.getMessage()


def configure_logging(log_level: str, log_file: str | None = None) -> None:
    handlers = [logging.StreamHandler()]
    if log_file:
        try:
            Path(log_file).parent.mkdir(parents=True, exist_ok=True)
            handlers.append(RotatingFileHandler(log_file, maxBytes=5*1024*1024, backupCount=3))
        except OSError as e:
            print(f"Failed to initialize log file {log_file}: {e}")

    logging.basicConfig(
        level=log_level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=handlers,
    )
    logging.getLogger("uvicorn.access").addFilter(HealthCheckFilter())


configure_logging(settings.LOG_LEVEL, settings.LOG_FILE)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Parse the plot template once before serving any request."""
    logger.info("Starting Mandelbrot Plot API")
    app_state.initialization_start = datetime.now()
    app_state.failure_reason = None

    try:
        mandelbrot.load_template()
        app_state.ready = True
        logger.info(f"Template {mandelbrot.TEMPLATE_NAME} loaded from {mandelbrot.TEMPLATE_DIR}")
        logger.info(f"Grid {settings.ROWS}x{settings.COLUMNS}, max iterations {settings.MAX_ITERATIONS}, {len(settings.PALETTE)} colors")
    except Exception as e:
        app_state.failure_reason = f"Template {mandelbrot.TEMPLATE_NAME} could not be loaded: {e}"
        app_state.ready = False
        logger.critical(f"Initialization failed: {app_state.failure_reason}")
        logger.exception(e)

    app_state.initialization_end = datetime.now()
    yield
    logger.info("Shutting down Mandelbrot Plot API")


app = FastAPI(
    title="Mandelbrot Plot API",
    description="Escape-time plots of the Mandelbrot set, computed one row per thread",
    version=settings.APP_VERSION,
    lifespan=lifespan,
)


@app.middleware("http")
async def readiness_check(request, call_next):
    """Answer 503 for everything but health checks until startup succeeded."""
    if not app_state.ready and request.url.path not in ["/health", "/status"]:
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={"detail": f"Service initializing: {app_state.failure_reason or 'Not ready'}"},
        )
    return await call_next(request)


@app.get("/health", include_in_schema=False)
async def health_check():
    return {"status": "healthy"}


@app.get("/status")
async def status_check():
    """Readiness and active grid configuration"""
    return {
        "status": "ready" if app_state.ready else "initializing",
        "version": settings.APP_VERSION,
        "failure_reason": app_state.failure_reason,
        "grid": GridInfo(
            rows=settings.ROWS,
            columns=settings.COLUMNS,
            max_iterations=settings.MAX_ITERATIONS,
            palette=settings.PALETTE,
        ),
        "initialization_time": (
            (app_state.initialization_end - app_state.initialization_start).total_seconds()
            if app_state.initialization_end and app_state.initialization_start
            else None
        ),
    }


@app.get("/")
async def root():
    """API root endpoint"""
    return {
        "title": "Mandelbrot Plot API",
        "version": settings.APP_VERSION,
        "endpoints": {
            "plot": "/mandelbrot",
            "data": "/mandelbrot/data",
        },
        "documentation": {
            "swagger": "/docs",
            "redoc": "/redoc"
        },
        "status": {
            "health": "/health",
            "detailed_status": "/status"
        }
    }


app.include_router(mandelbrot.router)
