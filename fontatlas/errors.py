# fontatlas/errors.py
"""Exceptions raised while loading fonts, packing atlases and measuring text."""


class FontAtlasError(Exception):
    """Base class for all fontatlas errors."""


class FontLoadError(FontAtlasError):
    """Font file is missing, unreadable or not a font."""


class GlyphRasterizationError(FontAtlasError):
    """Font cannot produce a glyph required by the character set."""

    def __init__(self, char: str, reason: str = ""):
        self.char = char
        msg = f"Cannot rasterize glyph {char!r} (U+{ord(char):04X})"
        if reason:
            msg += f": {reason}"
        super().__init__(msg)


class UnknownGlyphError(FontAtlasError, KeyError):
    """Character is not present in the glyph table."""

    def __init__(self, char: str):
        self.char = char
        super().__init__(char)

    def __str__(self) -> str:
        return f"Glyph {self.char!r} is not in the atlas"


class EmptyMeasurementError(FontAtlasError):
    """Measurement requested on input without usable characters."""


class AtlasConfigError(FontAtlasError, ValueError):
    """Invalid atlas configuration."""


class AtlasOverflowError(FontAtlasError):
    """Glyph placement falls outside the computed canvas."""


class FontBusyError(FontAtlasError):
    """Font handle is already used by another packing session."""
