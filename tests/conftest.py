import numpy as np
import pytest
from PIL import Image

from asciify.pixels import PixelGrid

ESC = "\033"


def split_image(width: int, height: int) -> Image.Image:
    """Left half black, right half white."""
    img = Image.new("RGB", (width, height), (0, 0, 0))
    pixels = img.load()
    for y in range(height):
        for x in range(width // 2, width):
            pixels[x, y] = (255, 255, 255)
    return img


def strip_escapes(line: str) -> str:
    """Drop truecolor escapes, leaving just the glyphs."""
    out = []
    i = 0
    while i < len(line):
        if line[i] == ESC:
            i = line.index("m", i) + 1
        else:
            out.append(line[i])
            i += 1
    return "".join(out)


@pytest.fixture
def noise_grid():
    rng = np.random.default_rng(1234)
    return PixelGrid.from_array(rng.integers(0, 256, size=(41, 67, 3), dtype=np.uint8))
