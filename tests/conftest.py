import numpy as np
import pytest

from fontatlas.errors import GlyphRasterizationError
from fontatlas.font import Rasterizer, RasterizedGlyph, SizeMetrics, find_system_font
from fontatlas.table import GlyphRecord, GlyphTable


class SyntheticFont(Rasterizer):
    """
    Rasterizer with hand-written glyphs.

    glyphs: char -> (width, height, advance_px, bearing_left, bearing_top)
    Every bitmap pixel has coverage `coverage`.
    """

    def __init__(self, glyphs, line_height=20, max_advance=None, coverage=200, name="synthetic"):
        super().__init__(name)
        self.glyphs = dict(glyphs)
        self.line_height = line_height
        self.max_advance = max_advance if max_advance is not None else max(g[2] for g in self.glyphs.values())
        self.coverage = coverage
        self.pixel_heights = []
        self.rasterized = []

    def set_pixel_height(self, pixel_height):
        self.pixel_heights.append(pixel_height)

    def size_metrics(self):
        return SizeMetrics(height=self.line_height * 64, max_advance=self.max_advance * 64)

    def rasterize(self, char):
        if char not in self.glyphs:
            raise GlyphRasterizationError(char, "not in synthetic font")
        self.rasterized.append(char)
        w, h, advance, left, top = self.glyphs[char]
        return RasterizedGlyph(
            char=char,
            width=w,
            height=h,
            coverage=np.full((h, w), self.coverage, dtype=np.uint8),
            bearing_left=left,
            bearing_top=top,
            advance=advance * 64,
        )


def uniform_glyphs(chars, width=20, height=16, advance=20, left=1, top=14):
    return {ch: (width, height, advance, left, top) for ch in chars}


def make_table(advances, heights=None, pixel_height=16):
    """Glyph table with given advances; positions are irrelevant for measurement."""
    heights = heights or {}
    records = [
        GlyphRecord(
            id=ch, x=0, y=0, width=adv, height=heights.get(ch, 10),
            x_offset=0, y_offset=0, x_advance=adv,
        )
        for ch, adv in advances.items()
    ]
    return GlyphTable(records, pixel_height)


@pytest.fixture
def synthetic_font():
    return SyntheticFont


@pytest.fixture
def system_font_path():
    path = find_system_font(monospace=True)
    if path is None:
        pytest.skip("no monospace system font available")
    return path
