# fontatlas/atlas.py
"""Packed atlas: image plus glyph table, with text measurement helpers."""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Sequence

from fontatlas import measure
from fontatlas.surface import PixelSurface
from fontatlas.table import GlyphRecord, GlyphTable


@dataclass(frozen=True)
class AtlasResult:
    """Output of one packing pass. Neither the table nor the image change afterwards."""
    name: str
    pixel_height: int
    glyph_table: GlyphTable
    image: PixelSurface

    def get(self, char: str) -> GlyphRecord:
        return self.glyph_table.get(char)

    def measure_width(self, text: str) -> int:
        return measure.measure_width(self.glyph_table, text)

    def measure_width_sequence(self, chars: Sequence[str]) -> int:
        return measure.measure_width_sequence(self.glyph_table, chars)

    def measure_height(self, text: str) -> float:
        return measure.measure_height(self.glyph_table, text)

    def fit_count(self, width: float, text: str) -> Optional[int]:
        return measure.fit_count(self.glyph_table, width, text)

    def fit_count_sequence(self, width: float, chars: Sequence[str]) -> Optional[int]:
        return measure.fit_count_sequence(self.glyph_table, width, chars)

    def to_dict(self) -> dict:
        """Glyph metrics in a JSON-friendly form."""
        return {
            "name": self.name,
            "pixel_height": self.pixel_height,
            "width": self.image.width,
            "height": self.image.height,
            "glyphs": [record.to_dict() for record in self.glyph_table.records],
        }

    def save(self, png_path: str | Path, json_path: str | Path | None = None) -> Path:
        """
        Write the atlas image and its glyph metrics.

        Args:
            png_path: Image destination, format picked by Pillow from the suffix.
            json_path: Metrics destination. Defaults to png_path with .json suffix.

        Returns:
            Path of the written metrics file.
        """
        png_path = Path(png_path)
        json_path = Path(json_path) if json_path is not None else png_path.with_suffix(".json")

        png_path.parent.mkdir(parents=True, exist_ok=True)
        json_path.parent.mkdir(parents=True, exist_ok=True)

        self.image.save(png_path)
        with open(json_path, "w", encoding="utf-8") as f:
            json.dump(self.to_dict(), f, ensure_ascii=False, indent=2)
        return json_path
