import pytest

from fontatlas.metrics import to_pixels


@pytest.mark.parametrize("fixed, pixels", [
    (0, 0),
    (64, 1),
    (127, 1),
    (128, 2),
    (2048, 32),
    (63, 0),
])
def test_to_pixels_positive(fixed, pixels):
    assert to_pixels(fixed) == pixels


def test_to_pixels_rounds_down_for_negative_values():
    # Bearings can be negative; floor, not truncation toward zero.
    assert to_pixels(-1) == -1
    assert to_pixels(-64) == -1
    assert to_pixels(-65) == -2
