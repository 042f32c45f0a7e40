# fontatlas/cli.py
"""Command line entry point: bake an atlas PNG and JSON metrics from a font."""

from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import replace
from pathlib import Path
from typing import List, Optional

from fontatlas import log
from fontatlas.config import AtlasConfig
from fontatlas.errors import FontAtlasError
from fontatlas.font import find_system_font, load_font


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(description="Bake a bitmap font atlas and glyph metrics.")
    parser.add_argument(
        "--font",
        default=None,
        help="Path to a TTF/OTF font. Defaults to a monospace system font.",
    )
    parser.add_argument("--size", type=int, default=32, help="Pixel height to rasterize at.")
    parser.add_argument("--out", default="atlas.png", help="Output image path.")
    parser.add_argument("--map", default=None, help="Output metrics JSON path (default: next to --out).")
    parser.add_argument("--name", default=None, help="Font name stored in the metrics file.")
    parser.add_argument("--config", default=None, help="Atlas config JSON file.")
    parser.add_argument("--charset", default=None, help="Characters to include, overrides the config.")
    parser.add_argument("--verbose", "-v", action="store_true", help="Debug logging.")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)

    logging.basicConfig(format="%(levelname)s %(name)s: %(message)s")
    log.set_level("DEBUG" if args.verbose else "INFO")

    font_path = args.font or find_system_font(monospace=True)
    if font_path is None:
        log.error("No --font given and no system font found")
        return 1

    try:
        config = AtlasConfig.load(args.config) if args.config else AtlasConfig()
        if args.charset is not None:
            config = replace(config, charset=args.charset).validate()

        font = load_font(args.name or Path(font_path).stem, font_path)
        result = font.pack(args.size, config)
        json_path = result.save(args.out, args.map)
    except FontAtlasError as e:
        log.error(e, "Atlas baking failed")
        return 1

    log.info(f"Wrote {args.out} and {json_path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
