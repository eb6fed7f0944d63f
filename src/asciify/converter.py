from __future__ import annotations

from pathlib import Path

from loguru import logger
from PIL import Image

from asciify.config import DEFAULT_OPTIONS, RenderOptions
from asciify.glyphs import format_cell
from asciify.pixels import PixelGrid
from asciify.sampling import output_height, sample_cell
from asciify.scheduler import schedule_rows


def render_row(grid: PixelGrid, y: int, width: int, height: int, palette: str, colour: bool) -> str:
    """Sample and format every cell of output row ``y``."""
    cells = [""] * width
    for x in range(width):
        cells[x] = format_cell(sample_cell(grid, x, y, width, height), palette, colour)
    return "".join(cells)


def convert(grid: PixelGrid, options: RenderOptions = DEFAULT_OPTIONS) -> list[str]:
    """Convert a pixel grid into output rows, top to bottom."""
    width = options.width
    height = output_height(grid.width, grid.height, width, options.scale)
    logger.debug(
        "Converting {}x{} image to {}x{} cells (colour={})", grid.width, grid.height, width, height, options.colour
    )
    return schedule_rows(
        lambda y: render_row(grid, y, width, height, options.palette, options.colour),
        height,
        parallel=options.parallel,
        max_workers=options.max_workers,
    )


def image_to_ascii(
    image: Image.Image | str | Path,
    options: RenderOptions = DEFAULT_OPTIONS,
    **overrides,
) -> list[str]:
    """Convert a Pillow image, or a path to one, into output rows.

    Keyword overrides are applied on top of ``options``.
    """
    if overrides:
        options = options.replace(**overrides)
    if not isinstance(image, Image.Image):
        logger.debug("Loading image from {}", image)
        with Image.open(image) as img:
            grid = PixelGrid.from_image(img)
    else:
        grid = PixelGrid.from_image(image)
    return convert(grid, options)
