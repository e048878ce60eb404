import numpy as np
import pytest

from mandelbrot_api.utils import colorize_grid, map_to_color

PALETTE = ["gray1", "gray2", "gray3", "gray4", "gray5"]


def test_extremes_map_to_first_and_last_color():
    assert map_to_color(3, 3, 200, PALETTE) == "gray1"
    assert map_to_color(200, 3, 200, PALETTE) == "gray5"


def test_every_count_lands_in_palette():
    for itn in range(0, 101):
        assert map_to_color(itn, 0, 100, PALETTE) in PALETTE


def test_round_half_up():
    # scale = 4 / 8 = 0.5: 1 -> 0.5 -> bucket 1, 3 -> 1.5 -> bucket 2, 5 -> 2.5 -> bucket 3
    assert map_to_color(1, 0, 8, PALETTE) == "gray2"
    assert map_to_color(3, 0, 8, PALETTE) == "gray3"
    assert map_to_color(5, 0, 8, PALETTE) == "gray4"


@pytest.mark.parametrize("itn", [0, 7, 200])
def test_flat_grid_uses_single_color(itn):
    assert map_to_color(itn, 7, 7, PALETTE) == "gray1"


@pytest.mark.parametrize("itn", [-5, 2, 11, 500])
def test_out_of_range_count_gets_min_color(itn):
    assert map_to_color(itn, 3, 10, PALETTE) == "gray1"


def test_two_color_palette():
    assert map_to_color(4, 0, 10, ["white", "black"]) == "white"
    assert map_to_color(5, 0, 10, ["white", "black"]) == "black"


def test_colorize_grid_is_row_major():
    counts = np.array([[2, 1], [2, 1]])
    assert colorize_grid(counts, 1, 2, PALETTE) == ["gray5", "gray1", "gray5", "gray1"]


def test_colorize_flat_grid():
    counts = np.zeros((3, 4), dtype=np.int64)
    assert colorize_grid(counts, 0, 0, PALETTE) == ["gray1"] * 12
