"""
fontatlas - bitmap font atlas builder.

Rasterizes a character set with FreeType, shelf-packs the glyphs into one
RGBA image and keeps per-glyph metrics for text layout.

Modules:
- font - loading fonts, glyph rasterization
- packer - shelf packing into the atlas canvas
- measure - text width/height and truncate-to-fit
"""

from .atlas import AtlasResult
from .config import DEFAULT_CHARSET, AtlasConfig
from .errors import (
    AtlasConfigError,
    AtlasOverflowError,
    EmptyMeasurementError,
    FontAtlasError,
    FontBusyError,
    FontLoadError,
    GlyphRasterizationError,
    UnknownGlyphError,
)
from .font import FontHandle, FontLoader, Rasterizer, RasterizedGlyph, SizeMetrics, load_font
from .metrics import to_pixels
from .packer import AtlasPacker, pack
from .table import GlyphRecord, GlyphTable

__version__ = '0.1.0'

__all__ = [
    'AtlasConfig',
    'AtlasConfigError',
    'AtlasOverflowError',
    'AtlasPacker',
    'AtlasResult',
    'DEFAULT_CHARSET',
    'EmptyMeasurementError',
    'FontAtlasError',
    'FontBusyError',
    'FontHandle',
    'FontLoadError',
    'FontLoader',
    'GlyphRasterizationError',
    'GlyphRecord',
    'GlyphTable',
    'RasterizedGlyph',
    'Rasterizer',
    'SizeMetrics',
    'UnknownGlyphError',
    'load_font',
    'pack',
    'to_pixels',
]
