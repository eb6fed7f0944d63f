import math

import numpy as np

from asciify.pixels import PixelGrid

# Samples per axis within a cell's window (3x3 grid)
SAMPLES_PER_AXIS = 3


def output_height(src_width: int, src_height: int, width: int, scale: float) -> int:
    """Number of output rows for a given output width.

    Terminal cells are roughly twice as tall as wide, so ``scale`` shrinks the
    vertical sampling density. Never returns less than 1.
    """
    if width <= 0:
        raise ValueError(f"Output width must be positive, got {width}")
    if not (scale > 0 and math.isfinite(scale)):
        raise ValueError(f"Scale must be a positive number, got {scale}")
    height = int(src_height * width / src_width * scale)
    return max(height, 1)


def sampling_window(index: int, count: int, extent: int) -> tuple[int, int]:
    """Half-open source span [start, end) covered by output cell ``index`` of ``count``."""
    start = index * extent // count
    end = min((index + 1) * extent // count, extent)
    # When the output is denser than the source the span can be empty
    return start, max(end, start + 1)


def sample_stride(start: int, end: int) -> int:
    return max(1, (end - start) // SAMPLES_PER_AXIS)


def sample_cell(grid: PixelGrid, x: int, y: int, width: int, height: int) -> tuple[int, int, int]:
    """Average colour of output cell (x, y) in a width x height output grid.

    Only every ``stride``-th pixel along each axis is read, about nine points
    per cell. Channels stay in 16-bit scale and the mean is floored.
    """
    x0, x1 = sampling_window(x, width, grid.width)
    y0, y1 = sampling_window(y, height, grid.height)
    block = grid.pixels[y0:y1 : sample_stride(y0, y1), x0:x1 : sample_stride(x0, x1)]
    count = block.shape[0] * block.shape[1]
    totals = block.reshape(-1, 3).sum(axis=0, dtype=np.uint64)
    r, g, b = (int(t) // count for t in totals)
    return r, g, b
