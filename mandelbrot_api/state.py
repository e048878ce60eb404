# mandelbrot_api/state.py
from typing import Optional
from datetime import datetime


class AppState:
    def __init__(self):
        self.ready = False
        self.failure_reason: Optional[str] = None
        self.initialization_start: Optional[datetime] = None
        self.initialization_end: Optional[datetime] = None


app_state = AppState()
