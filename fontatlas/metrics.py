# fontatlas/metrics.py
"""26.6 fixed-point conversion."""

FIXED_POINT_SCALE = 64


def to_pixels(fixed_value: int) -> int:
    """Convert a 26.6 fixed-point value (1/64 px units) to whole pixels, rounding down."""
    return int(fixed_value) // FIXED_POINT_SCALE
