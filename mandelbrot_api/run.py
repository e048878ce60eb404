# mandelbrot_api/run.py
import uvicorn
from mandelbrot_api.config.settings import get_settings


def main():
    settings = get_settings()
    uvicorn.run(
        app="mandelbrot_api.api.main:app",  # Standard import path format
        host=settings.HOST,
        port=settings.PORT,
    )


if __name__ == "__main__":
    main()
