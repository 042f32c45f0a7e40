# fontatlas/config.py
"""Atlas packing configuration."""

from __future__ import annotations

import json
from dataclasses import asdict, dataclass, fields
from pathlib import Path

from fontatlas.errors import AtlasConfigError


DEFAULT_CHARSET = (
    "0123456789"
    "abcdefghijklmnopqrstuvwxyz"
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
    "!№;%:?*()_+-=.,/|\"'@#$^&{}[]"
    "üäöß"
    " "
)


@dataclass
class AtlasConfig:
    """
    Settings for one packing pass.

    Can be stored as JSON next to the font (e.g. font.ttf.atlas.json).
    """

    # Characters to rasterize, in placement order
    charset: str = DEFAULT_CHARSET
    # Fixed canvas width budget
    canvas_width: int = 2000
    # Gap between neighbouring glyphs in a row
    pad_x: int = 12
    # Gap between rows, added to the line height
    pad_y: int = 20
    # Pen x at the start of every row
    left_inset: int = 10
    # Extra room above the first row, added to the line height
    top_inset: int = 20
    # Rows are estimated from max advance; slack covers paddings and insets
    vertical_slack: int = 1000

    def validate(self) -> "AtlasConfig":
        """Raise AtlasConfigError when the settings cannot produce an atlas."""
        if not isinstance(self.charset, str) or not self.charset:
            raise AtlasConfigError("Character set must be a non-empty string")
        for name in ("canvas_width", "pad_x", "pad_y", "left_inset", "top_inset", "vertical_slack"):
            value = getattr(self, name)
            if not isinstance(value, int) or isinstance(value, bool):
                raise AtlasConfigError(f"{name} must be an integer, got {value!r}")
        seen = set()
        for ch in self.charset:
            if ch in seen:
                raise AtlasConfigError(f"Duplicate character {ch!r} in character set")
            seen.add(ch)
        if self.canvas_width <= 0:
            raise AtlasConfigError(f"canvas_width must be positive, got {self.canvas_width}")
        for name in ("pad_x", "pad_y", "left_inset", "top_inset", "vertical_slack"):
            if getattr(self, name) < 0:
                raise AtlasConfigError(f"{name} must not be negative, got {getattr(self, name)}")
        return self

    def to_dict(self) -> dict:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict) -> "AtlasConfig":
        known = {f.name for f in fields(cls)}
        unknown = set(data) - known
        if unknown:
            raise AtlasConfigError(f"Unknown atlas options: {', '.join(sorted(unknown))}")
        try:
            config = cls(**data)
        except TypeError as exc:
            raise AtlasConfigError(str(exc)) from exc
        return config.validate()

    @classmethod
    def load(cls, config_path: str | Path) -> "AtlasConfig":
        """Load config from file. Missing file gives defaults."""
        path = Path(config_path)
        if not path.exists():
            return cls()

        try:
            with open(path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as exc:
            raise AtlasConfigError(f"Cannot read atlas config {path}: {exc}") from exc
        if not isinstance(data, dict):
            raise AtlasConfigError(f"Atlas config {path} must contain a JSON object")
        return cls.from_dict(data)

    def save(self, config_path: str | Path) -> None:
        """Save config to file."""
        with open(Path(config_path), "w", encoding="utf-8") as f:
            json.dump(self.to_dict(), f, ensure_ascii=False, indent=2)
