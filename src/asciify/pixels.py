from __future__ import annotations

from dataclasses import dataclass

import numpy as np
from PIL import Image

# 8-bit channels widen to 16-bit by replication (0xAB -> 0xABAB)
_WIDEN = 257


@dataclass(frozen=True)
class PixelGrid:
    """Read-only RGB pixel grid in 16-bit channel scale, shape (height, width, 3)."""

    pixels: np.ndarray

    def __post_init__(self):
        if self.pixels.ndim != 3 or self.pixels.shape[2] != 3:
            raise ValueError(f"Expected an (H, W, 3) array, got shape {self.pixels.shape}")
        if self.pixels.shape[0] == 0 or self.pixels.shape[1] == 0:
            raise ValueError("Pixel grid must be at least 1x1")
        self.pixels.flags.writeable = False

    @property
    def width(self) -> int:
        return self.pixels.shape[1]

    @property
    def height(self) -> int:
        return self.pixels.shape[0]

    def colour_at(self, x: int, y: int) -> tuple[int, int, int]:
        r, g, b = self.pixels[y, x]
        return int(r), int(g), int(b)

    @classmethod
    def from_array(cls, arr: np.ndarray) -> PixelGrid:
        """Wrap an (H, W, 3) array. uint8 input is widened to 16-bit, uint16 is used as is."""
        arr = np.asarray(arr)
        if arr.dtype == np.uint8:
            return cls(arr.astype(np.uint16) * _WIDEN)
        if arr.dtype == np.uint16:
            return cls(np.array(arr, copy=True))
        raise ValueError(f"Pixel arrays must be uint8 or uint16, got {arr.dtype}")

    @classmethod
    def from_image(cls, image: Image.Image) -> PixelGrid:
        """Build a grid from a decoded Pillow image. Alpha is dropped."""
        return cls.from_array(np.asarray(image.convert("RGB"), dtype=np.uint8))
