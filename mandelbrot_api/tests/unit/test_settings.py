import pytest
from pydantic import ValidationError

from mandelbrot_api.config.settings import Settings
from mandelbrot_api.services.mandelbrot import GridShape
from mandelbrot_api.services.plot import build_plot, default_bounds


def test_defaults():
    settings = Settings()

    assert (settings.ROWS, settings.COLUMNS) == (200, 200)
    assert settings.MAX_ITERATIONS == 200
    assert len(settings.PALETTE) == 5
    assert default_bounds(settings).xmin == -1.6


def test_environment_override(monkeypatch):
    monkeypatch.setenv("MANDELBROT_ROWS", "300")
    monkeypatch.setenv("MANDELBROT_COLUMNS", "300")

    settings = Settings()
    assert GridShape.from_settings(settings) == GridShape(rows=300, columns=300, max_iterations=200)


@pytest.mark.parametrize("overrides", [
    {"PALETTE": ["black"]},
    {"ROWS": 1},
    {"COLUMNS": 0},
    {"X_LABELS": 1},
    {"MAX_ITERATIONS": 0},
    {"DEFAULT_XMIN": 1.0, "DEFAULT_XMAX": -1.0},
    {"DEFAULT_YMIN": 0.0, "DEFAULT_YMAX": 0.0},
])
def test_invalid_configuration_rejected(overrides):
    with pytest.raises(ValidationError):
        Settings(**overrides)


def test_build_plot_two_by_two():
    settings = Settings(ROWS=2, COLUMNS=2, MAX_ITERATIONS=10, X_LABELS=3, Y_LABELS=2)
    bounds = default_bounds(Settings(DEFAULT_XMIN=-1, DEFAULT_XMAX=1, DEFAULT_YMIN=-1, DEFAULT_YMAX=1))

    plot = build_plot(bounds, "ok", settings)

    assert plot.status == "ok"
    assert plot.grid == ["gray5", "gray1", "gray5", "gray1"]
    assert plot.xlabels == ["-1.00", "0.00", "1.00"]
    assert plot.ylabels == ["-1.00", "1.00"]


def test_build_plot_flat_grid():
    settings = Settings(ROWS=3, COLUMNS=3, MAX_ITERATIONS=10)
    bounds = default_bounds(Settings(DEFAULT_XMIN=3, DEFAULT_XMAX=4, DEFAULT_YMIN=3, DEFAULT_YMAX=4))

    plot = build_plot(bounds, "far away", settings)
    assert plot.grid == ["gray1"] * 9
