import numpy as np
import pytest

from asciify.pixels import PixelGrid
from asciify.sampling import output_height, sample_cell, sample_stride, sampling_window


def test_output_height_applies_scale():
    assert output_height(200, 100, 80, 0.5) == 20
    assert output_height(100, 50, 100, 0.15) == 7


def test_output_height_truncates():
    assert output_height(10, 9, 10, 0.5) == 4


def test_output_height_clamps_to_one():
    assert output_height(1000, 1, 10, 0.15) == 1
    assert output_height(2, 2, 2, 0.1) == 1


@pytest.mark.parametrize("width", [0, -3])
def test_output_height_rejects_bad_width(width):
    with pytest.raises(ValueError, match="width"):
        output_height(10, 10, width, 0.5)


@pytest.mark.parametrize("scale", [0.0, -1.0, float("nan"), float("inf")])
def test_output_height_rejects_bad_scale(scale):
    with pytest.raises(ValueError, match="Scale"):
        output_height(10, 10, 5, scale)


def test_sampling_window_partitions_extent():
    windows = [sampling_window(i, 4, 10) for i in range(4)]
    assert windows == [(0, 2), (2, 5), (5, 7), (7, 10)]


def test_sampling_window_never_empty_when_upscaling():
    windows = [sampling_window(i, 7, 3) for i in range(7)]
    for start, end in windows:
        assert 0 <= start < end <= 3
        assert end - start == 1


def test_sample_stride():
    assert sample_stride(0, 1) == 1
    assert sample_stride(0, 5) == 1
    assert sample_stride(0, 9) == 3
    assert sample_stride(10, 30) == 6


def test_sample_cell_uniform():
    arr = np.full((12, 12, 3), (10, 200, 90), dtype=np.uint8)
    grid = PixelGrid.from_array(arr)
    assert sample_cell(grid, 1, 1, 3, 3) == (10 * 257, 200 * 257, 90 * 257)


def test_sample_cell_reads_strided_points_only():
    # 9x9 window, stride 3: only pixels at offsets 0, 3, 6 are read
    arr = np.zeros((9, 9, 3), dtype=np.uint8)
    arr[1, 1] = (255, 255, 255)
    grid = PixelGrid.from_array(arr)
    assert sample_cell(grid, 0, 0, 1, 1) == (0, 0, 0)

    arr[3, 3] = (255, 255, 255)
    grid = PixelGrid.from_array(arr)
    assert sample_cell(grid, 0, 0, 1, 1) == (65535 // 9,) * 3


def test_sample_cell_matches_strided_mean():
    rng = np.random.default_rng(7)
    arr = rng.integers(0, 256, size=(6, 6, 3), dtype=np.uint8)
    grid = PixelGrid.from_array(arr)
    block = arr[0:6:2, 0:3].astype(np.uint64) * 257
    expected = tuple(int(v) for v in block.reshape(-1, 3).sum(axis=0) // 9)
    assert sample_cell(grid, 0, 0, 2, 1) == expected


def test_sample_cell_single_pixel_window():
    arr = np.zeros((2, 2, 3), dtype=np.uint8)
    arr[1, 1] = (255, 0, 0)
    grid = PixelGrid.from_array(arr)
    # 8x8 output over a 2x2 source: the last cell maps onto pixel (1, 1)
    assert sample_cell(grid, 7, 7, 8, 8) == (65535, 0, 0)
    assert sample_cell(grid, 0, 0, 8, 8) == (0, 0, 0)
