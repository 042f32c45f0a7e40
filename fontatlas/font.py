# fontatlas/font.py
"""Font loading and glyph rasterization through FreeType."""

from __future__ import annotations

import io
import os
import sys
import threading
from abc import ABC, abstractmethod
from contextlib import contextmanager
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Iterator

import freetype
import numpy as np

from fontatlas import log
from fontatlas.errors import FontBusyError, FontLoadError, GlyphRasterizationError

if TYPE_CHECKING:
    from fontatlas.atlas import AtlasResult
    from fontatlas.config import AtlasConfig


def find_system_font(monospace: bool = False) -> str | None:
    """Find a system font file."""
    candidates = []

    if sys.platform == "win32":
        fonts_dir = os.path.join(os.environ.get("WINDIR", "C:\\Windows"), "Fonts")
        if monospace:
            candidates = [
                os.path.join(fonts_dir, "consola.ttf"),
                os.path.join(fonts_dir, "cour.ttf"),
            ]
        else:
            candidates = [
                os.path.join(fonts_dir, "segoeui.ttf"),
                os.path.join(fonts_dir, "arial.ttf"),
                os.path.join(fonts_dir, "tahoma.ttf"),
            ]
    elif sys.platform == "darwin":
        if monospace:
            candidates = [
                "/System/Library/Fonts/Menlo.ttc",
                "/System/Library/Fonts/Monaco.ttf",
                "/Library/Fonts/Courier New.ttf",
            ]
        else:
            candidates = [
                "/System/Library/Fonts/SFNSText.ttf",
                "/System/Library/Fonts/Helvetica.ttc",
                "/Library/Fonts/Arial.ttf",
            ]
    else:  # Linux
        if monospace:
            candidates = [
                "/usr/share/fonts/truetype/dejavu/DejaVuSansMono.ttf",
                "/usr/share/fonts/truetype/liberation/LiberationMono-Regular.ttf",
                "/usr/share/fonts/truetype/freefont/FreeMono.ttf",
                "/usr/share/fonts/TTF/DejaVuSansMono.ttf",
            ]
        else:
            candidates = [
                "/usr/share/fonts/truetype/dejavu/DejaVuSans.ttf",
                "/usr/share/fonts/truetype/liberation/LiberationSans-Regular.ttf",
                "/usr/share/fonts/truetype/freefont/FreeSans.ttf",
                "/usr/share/fonts/TTF/DejaVuSans.ttf",
            ]

    for path in candidates:
        if os.path.exists(path):
            return path
    return None


@dataclass(frozen=True)
class SizeMetrics:
    """Font-level metrics at the current pixel size, in 26.6 units."""
    height: int
    max_advance: int


@dataclass(frozen=True)
class RasterizedGlyph:
    """One rendered glyph as produced by a rasterizer."""
    char: str
    width: int
    height: int
    # (height, width) uint8 coverage, 0 = empty, 255 = full
    coverage: np.ndarray
    bearing_left: int
    bearing_top: int
    # 26.6 fixed point
    advance: int


class Rasterizer(ABC):
    """
    Source of glyph bitmaps for the atlas packer.

    Implementations reuse internal buffers between rasterize() calls, so a
    rasterizer may serve only one packing session at a time; see session().
    """

    def __init__(self, name: str):
        self.name = name
        self._session_lock = threading.Lock()

    @abstractmethod
    def set_pixel_height(self, pixel_height: int) -> None:
        """Select square pixel size (0, pixel_height)."""

    @abstractmethod
    def size_metrics(self) -> SizeMetrics:
        """Line height and max advance at the current size."""

    @abstractmethod
    def rasterize(self, char: str) -> RasterizedGlyph:
        """
        Render a single character at the current size.

        Raises:
            GlyphRasterizationError: the font has no glyph for char.
        """

    @contextmanager
    def session(self) -> Iterator["Rasterizer"]:
        """Exclusive use of this rasterizer. Raises FontBusyError if already in use."""
        if not self._session_lock.acquire(blocking=False):
            raise FontBusyError(f"Font '{self.name}' is already used by another packing session")
        try:
            yield self
        finally:
            self._session_lock.release()

    def pack(self, pixel_height: int, config: "AtlasConfig | None" = None) -> "AtlasResult":
        """Rasterize the character set at pixel_height and pack it into an atlas."""
        from fontatlas.packer import AtlasPacker

        return AtlasPacker(config).pack(self, pixel_height)


class FontHandle(Rasterizer):
    """Loaded font face. Wraps freetype.Face."""

    def __init__(self, name: str, face: freetype.Face, path: str | None = None):
        super().__init__(name)
        self.face = face
        self.path = path

    def __repr__(self) -> str:
        return f"FontHandle(name={self.name!r}, path={self.path!r})"

    def set_pixel_height(self, pixel_height: int) -> None:
        try:
            self.face.set_pixel_sizes(0, pixel_height)
        except freetype.ft_errors.FT_Exception as exc:
            raise FontLoadError(f"Font '{self.name}' cannot be scaled to {pixel_height}px: {exc}") from exc

    def size_metrics(self) -> SizeMetrics:
        size = self.face.size
        return SizeMetrics(height=size.height, max_advance=size.max_advance)

    def rasterize(self, char: str) -> RasterizedGlyph:
        if self.face.get_char_index(ord(char)) == 0:
            raise GlyphRasterizationError(char, f"font '{self.name}' has no glyph for it")
        try:
            self.face.load_char(char, freetype.FT_LOAD_RENDER)
        except freetype.ft_errors.FT_Exception as exc:
            raise GlyphRasterizationError(char, str(exc)) from exc

        glyph = self.face.glyph
        bitmap = glyph.bitmap
        w = bitmap.width
        h = bitmap.rows

        if w > 0 and h > 0:
            pitch = abs(bitmap.pitch)
            coverage = np.array(bitmap.buffer, dtype=np.uint8).reshape(h, pitch)[:, :w]
            if bitmap.pitch < 0:
                coverage = coverage[::-1]
        else:
            coverage = np.zeros((h, w), dtype=np.uint8)

        return RasterizedGlyph(
            char=char,
            width=w,
            height=h,
            coverage=coverage,
            bearing_left=glyph.bitmap_left,
            bearing_top=glyph.bitmap_top,
            advance=glyph.advance.x,
        )


class FontLoader:
    """Creates FontHandle objects from files or in-memory font data."""

    def load_font(self, name: str, source: str | Path | bytes) -> FontHandle:
        if isinstance(source, (bytes, bytearray)):
            path = None
            stream = io.BytesIO(bytes(source))
        else:
            path = str(source)
            if not os.path.exists(path):
                raise FontLoadError(f"Font file not found: {path}")
            stream = path

        try:
            face = freetype.Face(stream)
        except freetype.ft_errors.FT_Exception as exc:
            raise FontLoadError(f"Failed to load font '{name}' from {path or '<bytes>'}: {exc}") from exc

        log.debug(f"[Font] Loaded '{name}' ({face.family_name!r}) from {path or '<bytes>'}")
        return FontHandle(name, face, path)


def load_font(name: str, source: str | Path | bytes) -> FontHandle:
    """Load a font face from a path or from font file bytes."""
    return FontLoader().load_font(name, source)
