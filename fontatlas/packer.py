# fontatlas/packer.py
"""Shelf packing of rasterized glyphs into a single RGBA atlas."""

from __future__ import annotations

import math
from dataclasses import dataclass, replace
from typing import List, Tuple

from fontatlas import log
from fontatlas.atlas import AtlasResult
from fontatlas.config import AtlasConfig
from fontatlas.errors import AtlasConfigError, AtlasOverflowError
from fontatlas.font import Rasterizer
from fontatlas.metrics import to_pixels
from fontatlas.surface import PixelSurface
from fontatlas.table import GlyphRecord, GlyphTable


@dataclass(frozen=True)
class CanvasLayout:
    """Canvas size derived from font metrics before any glyph is placed."""
    width: int
    height: int
    line_height: int
    max_advance: int
    glyphs_per_row: int
    rows: int


def plan_canvas(config: AtlasConfig, glyph_count: int, line_height: int, max_advance: int) -> CanvasLayout:
    """
    Estimate canvas size for glyph_count glyphs.

    Width is the fixed budget; height is rows * line_height plus the
    configured slack, rows being derived from the widest advance.
    """
    width = config.canvas_width
    if width < config.left_inset + max_advance + config.pad_x:
        raise AtlasConfigError(
            f"canvas_width {width} is too small for glyphs up to {max_advance}px wide"
        )
    glyphs_per_row = max(1, width // max(1, max_advance))
    rows = math.ceil(glyph_count / glyphs_per_row)
    height = rows * line_height + config.vertical_slack
    return CanvasLayout(
        width=width,
        height=height,
        line_height=line_height,
        max_advance=max_advance,
        glyphs_per_row=glyphs_per_row,
        rows=rows,
    )


class AtlasPacker:
    """
    Places glyph bitmaps left to right in rows, wrapping to the next row
    when a glyph would cross the right edge.

    A pack is all-or-nothing: any rasterization or overflow error aborts
    it and nothing is returned.
    """

    def __init__(self, config: AtlasConfig | None = None):
        self.config = (config or AtlasConfig()).validate()

    def pack(self, font: Rasterizer, pixel_height: int) -> AtlasResult:
        if pixel_height <= 0:
            raise AtlasConfigError(f"pixel_height must be positive, got {pixel_height}")

        with font.session():
            surface, table = self._pack(font, pixel_height)

        log.info(
            f"[Atlas] Packed {len(table)} glyphs of '{font.name}' at {pixel_height}px "
            f"into {surface.width}x{surface.height}"
        )
        return AtlasResult(name=font.name, pixel_height=pixel_height, glyph_table=table, image=surface)

    def _pack(self, font: Rasterizer, pixel_height: int) -> Tuple[PixelSurface, GlyphTable]:
        config = self.config
        font.set_pixel_height(pixel_height)

        size = font.size_metrics()
        line_height = to_pixels(size.height)
        max_advance = to_pixels(size.max_advance)

        layout = plan_canvas(config, len(config.charset), line_height, max_advance)
        log.debug(
            f"[Atlas] Canvas {layout.width}x{layout.height}: "
            f"{layout.glyphs_per_row} glyphs/row, {layout.rows} rows, line height {line_height}"
        )

        surface = PixelSurface.blank(layout.width, layout.height)

        pen_x = config.left_inset
        pen_y = line_height + config.top_inset
        records: List[GlyphRecord] = []

        for ch in config.charset:
            glyph = font.rasterize(ch)
            advance = to_pixels(glyph.advance)

            if pen_x + glyph.width > surface.width:
                pen_y += line_height + config.pad_y
                pen_x = config.left_inset
                log.debug(f"[Atlas] Row wrap before {ch!r}, y={pen_y}")

            if not surface.contains(pen_x, pen_y, glyph.width, glyph.height):
                raise AtlasOverflowError(
                    f"Glyph {ch!r} ({glyph.width}x{glyph.height}) at ({pen_x}, {pen_y}) "
                    f"falls outside the {surface.width}x{surface.height} canvas; "
                    f"increase vertical_slack or canvas_width"
                )

            if ch != " ":
                surface.blit_coverage(pen_x, pen_y, glyph.coverage)

            records.append(GlyphRecord(
                id=ch,
                x=pen_x,
                y=pen_y,
                width=glyph.width,
                height=glyph.height,
                x_offset=glyph.bearing_left,
                y_offset=glyph.bearing_top - glyph.height,
                x_advance=advance,
            ))

            pen_x += advance + config.pad_x

        return surface, GlyphTable(records, pixel_height)


def pack(
    font: Rasterizer,
    charset: str,
    pixel_height: int,
    pad_x: int,
    pad_y: int,
    config: AtlasConfig | None = None,
) -> Tuple[PixelSurface, GlyphTable]:
    """Pack charset with explicit paddings; other settings come from config."""
    config = replace(config or AtlasConfig(), charset=charset, pad_x=pad_x, pad_y=pad_y)
    result = AtlasPacker(config).pack(font, pixel_height)
    return result.image, result.glyph_table
