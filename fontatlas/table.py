# fontatlas/table.py
"""Glyph placement records and the immutable glyph table."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Dict, Iterable, Iterator, Mapping, Tuple

from fontatlas.errors import UnknownGlyphError


@dataclass(frozen=True)
class GlyphRecord:
    """Where a glyph sits in the atlas and how to place it relative to the pen."""
    id: str
    # Top-left corner of the bitmap in the atlas
    x: int
    y: int
    width: int
    height: int
    # Left bearing
    x_offset: int
    # Bitmap bottom relative to the baseline (top bearing - height)
    y_offset: int
    x_advance: int

    def to_dict(self) -> dict:
        return asdict(self)


class GlyphTable(Mapping[str, GlyphRecord]):
    """
    Character -> GlyphRecord mapping built by one packing pass.

    Records are kept in a tuple in packing order; lookup goes through a
    char -> index dict.
    """

    __slots__ = ("_records", "_index", "_pixel_height")

    def __init__(self, records: Iterable[GlyphRecord], pixel_height: int):
        self._records: Tuple[GlyphRecord, ...] = tuple(records)
        index: Dict[str, int] = {}
        for i, record in enumerate(self._records):
            if record.id in index:
                raise ValueError(f"Duplicate glyph record for {record.id!r}")
            index[record.id] = i
        self._index = index
        self._pixel_height = pixel_height

    @property
    def pixel_height(self) -> int:
        return self._pixel_height

    @property
    def records(self) -> Tuple[GlyphRecord, ...]:
        return self._records

    def get(self, char: str) -> GlyphRecord:
        """Record for char. Raises UnknownGlyphError when absent."""
        i = self._index.get(char)
        if i is None:
            raise UnknownGlyphError(char)
        return self._records[i]

    def __getitem__(self, char: str) -> GlyphRecord:
        return self.get(char)

    def __contains__(self, char) -> bool:
        return char in self._index

    def __iter__(self) -> Iterator[str]:
        return (r.id for r in self._records)

    def __len__(self) -> int:
        return len(self._records)

    def __repr__(self) -> str:
        return f"GlyphTable(pixel_height={self._pixel_height}, glyphs={len(self._records)})"
