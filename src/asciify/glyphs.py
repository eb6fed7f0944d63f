from asciify.charsets import PALETTE

RESET = "\033[0m"


def luminance(rgb: tuple[int, int, int]) -> int:
    """Perceptual brightness of a 16-bit colour, reduced to 0-255."""
    r, g, b = rgb
    return (299 * r + 587 * g + 114 * b) // 1000 // 256


def glyph_index(gray: int, palette_size: int) -> int:
    idx = max(gray, 0) * (palette_size - 1) // 255
    return min(idx, palette_size - 1)


def to_8bit(rgb: tuple[int, int, int]) -> tuple[int, int, int]:
    r, g, b = rgb
    return r >> 8, g >> 8, b >> 8


def format_cell(rgb: tuple[int, int, int], palette: str = PALETTE, colour: bool = False) -> str:
    """Render one averaged colour as a glyph, optionally wrapped in a truecolor escape.

    Coloured cells carry their own reset so they can be concatenated or cut
    without the colour leaking into following text.
    """
    char = palette[glyph_index(luminance(rgb), len(palette))]
    if not colour:
        return char
    r, g, b = to_8bit(rgb)
    return f"\033[38;2;{r};{g};{b}m{char}{RESET}"
