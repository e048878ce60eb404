from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field, field_validator, model_validator
from functools import lru_cache
from pathlib import Path
from typing import List, Optional
import logging

logger = logging.getLogger(__name__)
BASE_DIR = Path(__file__).resolve().parent.parent


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_prefix="MANDELBROT_", extra="ignore")

    APP_VERSION: str = "1.0.0"
    HOST: str = "127.0.0.1"
    PORT: int = 8080

    # Grid, e.g. MANDELBROT_ROWS=300 MANDELBROT_COLUMNS=300 for a finer plot
    ROWS: int = Field(200, ge=2)
    COLUMNS: int = Field(200, ge=2)
    MAX_ITERATIONS: int = Field(200, ge=1)
    ROW_WORKERS: Optional[int] = Field(None, ge=1)  # None = one thread per row

    # Shades of gray, lightest (escapes fast) to darkest (in the set)
    PALETTE: List[str] = ["gray1", "gray2", "gray3", "gray4", "gray5"]

    X_LABELS: int = Field(11, ge=2)
    Y_LABELS: int = Field(11, ge=2)
    LABEL_DECIMALS: int = Field(2, ge=0)

    # Default window in the complex plane, shows the whole set
    DEFAULT_XMIN: float = -1.6
    DEFAULT_XMAX: float = 0.8
    DEFAULT_YMIN: float = -1.2
    DEFAULT_YMAX: float = 1.2

    TEMPLATE_DIR: str = str(BASE_DIR / "templates")
    TEMPLATE_NAME: str = "plotdata.html"

    LOG_LEVEL: str = "INFO"
    LOG_FILE: Optional[str] = None

    @field_validator("PALETTE")
    @classmethod
    def validate_palette(cls, v):
        if len(v) < 2:
            raise ValueError("PALETTE needs at least 2 colors")
        return v

    @model_validator(mode="after")
    def validate_default_window(self):
        if self.DEFAULT_XMIN >= self.DEFAULT_XMAX:
            raise ValueError("DEFAULT_XMIN must be less than DEFAULT_XMAX")
        if self.DEFAULT_YMIN >= self.DEFAULT_YMAX:
            raise ValueError("DEFAULT_YMIN must be less than DEFAULT_YMAX")
        return self


@lru_cache
def get_settings() -> Settings:
    settings = Settings()
    logger.debug(f"Settings loaded: grid={settings.ROWS}x{settings.COLUMNS}, max_iterations={settings.MAX_ITERATIONS}")
    return settings
