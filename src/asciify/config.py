from __future__ import annotations

import dataclasses
import math
from dataclasses import dataclass

from asciify.charsets import PALETTE


def _is_int(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


@dataclass(frozen=True)
class RenderOptions:
    width: int = 100
    scale: float = 0.15
    colour: bool = True
    palette: str = PALETTE
    parallel: bool = True
    max_workers: int | None = None

    def __post_init__(self):
        if not _is_int(self.width) or self.width <= 0:
            raise ValueError(f"width must be a positive integer, got {self.width!r}")
        if (
            isinstance(self.scale, bool)
            or not isinstance(self.scale, (int, float))
            or not (self.scale > 0 and math.isfinite(self.scale))
        ):
            raise ValueError(f"scale must be a positive number, got {self.scale!r}")
        if not self.palette:
            raise ValueError("palette must contain at least one character")
        if self.max_workers is not None and (not _is_int(self.max_workers) or self.max_workers <= 0):
            raise ValueError(f"max_workers must be a positive integer, got {self.max_workers!r}")

    def replace(self, **changes) -> RenderOptions:
        return dataclasses.replace(self, **changes)


# Flag-driven variant: wide, strongly squashed, coloured
DEFAULT_OPTIONS = RenderOptions()

# Fixed-aspect variant: 2:1 cell aspect, plain text
LEGACY_OPTIONS = RenderOptions(width=80, scale=0.5, colour=False)
