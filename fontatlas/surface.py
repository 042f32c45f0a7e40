# fontatlas/surface.py
"""RGBA pixel canvas backed by a numpy array."""

from __future__ import annotations

from pathlib import Path
from typing import Tuple

import numpy as np
from PIL import Image

from fontatlas.errors import AtlasOverflowError

Rgba = Tuple[int, int, int, int]


class PixelSurface:
    """
    2D RGBA surface, row-major, shape (height, width, 4), uint8.

    Coordinates are (x, y) with the origin at the top-left corner.
    """

    def __init__(self, pixels: np.ndarray):
        if pixels.ndim != 3 or pixels.shape[2] != 4:
            raise ValueError(f"Expected (H, W, 4) array, got shape {pixels.shape}")
        self._pixels = pixels

    @classmethod
    def blank(cls, width: int, height: int) -> "PixelSurface":
        """Fully transparent surface."""
        return cls(np.zeros((height, width, 4), dtype=np.uint8))

    @property
    def width(self) -> int:
        return self._pixels.shape[1]

    @property
    def height(self) -> int:
        return self._pixels.shape[0]

    @property
    def size(self) -> Tuple[int, int]:
        return self.width, self.height

    @property
    def pixels(self) -> np.ndarray:
        """Read-only view of the pixel array."""
        view = self._pixels.view()
        view.flags.writeable = False
        return view

    def contains(self, x: int, y: int, w: int = 1, h: int = 1) -> bool:
        return x >= 0 and y >= 0 and x + w <= self.width and y + h <= self.height

    def get_pixel(self, x: int, y: int) -> Rgba:
        if not self.contains(x, y):
            raise IndexError(f"Pixel ({x}, {y}) outside {self.width}x{self.height} surface")
        r, g, b, a = self._pixels[y, x]
        return int(r), int(g), int(b), int(a)

    def set_pixel(self, x: int, y: int, rgba: Rgba) -> None:
        if not self.contains(x, y):
            raise IndexError(f"Pixel ({x}, {y}) outside {self.width}x{self.height} surface")
        self._pixels[y, x] = rgba

    def blit_coverage(self, x: int, y: int, coverage: np.ndarray) -> None:
        """
        Write a coverage mask at (x, y) as white pixels with alpha = coverage.

        The whole mask rectangle must lie inside the surface.
        """
        h, w = coverage.shape
        if not self.contains(x, y, w, h):
            raise AtlasOverflowError(
                f"{w}x{h} bitmap at ({x}, {y}) does not fit {self.width}x{self.height} canvas"
            )
        region = self._pixels[y:y + h, x:x + w]
        region[..., :3] = 255
        region[..., 3] = coverage

    def to_image(self) -> Image.Image:
        return Image.fromarray(self._pixels)

    def save(self, path: str | Path) -> None:
        self.to_image().save(str(path))
