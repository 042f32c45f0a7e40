# fontatlas/measure.py
"""
Text measurement against a glyph table.

Two families of entry points exist with different whitespace handling:

- measure_width / fit_count take a string; whitespace characters
  (str.isspace) are not looked up and count as WHITESPACE_WIDTH each.
- measure_width_sequence / fit_count_sequence take a character sequence;
  every character, space included, is looked up in the table.
"""

from __future__ import annotations

from typing import Optional, Sequence

from fontatlas.errors import EmptyMeasurementError
from fontatlas.table import GlyphTable

WHITESPACE_WIDTH = 10


def measure_width(table: GlyphTable, text: str) -> int:
    """Pen advance for text, in pixels."""
    width = 0
    for ch in text:
        if ch.isspace():
            width += WHITESPACE_WIDTH
        else:
            width += table.get(ch).x_advance
    return width


def measure_width_sequence(table: GlyphTable, chars: Sequence[str]) -> int:
    """Sum of advances of chars. Whitespace is looked up like any other glyph."""
    width = 0
    for ch in chars:
        width += table.get(ch).x_advance
    return width


def measure_height(table: GlyphTable, text: str) -> float:
    """
    Average bitmap height of the non-whitespace characters of text.

    Raises:
        EmptyMeasurementError: text has no non-whitespace characters.
    """
    total = 0
    count = 0
    for ch in text:
        if ch.isspace():
            continue
        total += table.get(ch).height
        count += 1
    if count == 0:
        raise EmptyMeasurementError(f"No measurable characters in {text!r}")
    return total / count


def fit_count(table: GlyphTable, width: float, text: str) -> Optional[int]:
    """
    Shrink text from the end until it fits width.

    Returns the index of the last character that still fits (i.e. the
    fitting length minus one), or None if not even the first character
    fits. Empty text gives None.
    """
    if not text:
        return None

    length = len(text)
    while measure_width(table, text[:length]) > width:
        if length <= 1:
            return None
        length -= 1
    return length - 1


def fit_count_sequence(table: GlyphTable, width: float, chars: Sequence[str]) -> Optional[int]:
    """fit_count() over a character sequence, measured with measure_width_sequence()."""
    if not chars:
        return None

    chars = list(chars)
    length = len(chars)
    while measure_width_sequence(table, chars[:length]) > width:
        if length <= 1:
            return None
        length -= 1
    return length - 1
