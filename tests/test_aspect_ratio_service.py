from fractions import Fraction

import pytest

from sprite_trim.models.geometry import ASPECT_ENVELOPE, AspectEnvelope, Rectangle
from sprite_trim.services.aspect_ratio_service import AspectRatioService


@pytest.mark.parametrize("width,height", [(100, 100), (2, 5), (5, 2), (40, 100), (250, 100)])
def test_inside_envelope_is_noop(width, height):
    assert AspectRatioService().clamp(width, height) == Rectangle.full(width, height)


def test_too_tall_keeps_width_and_centres_vertically():
    # 10x100: height shrinks to floor(10 * 5/2) = 25, top = (100 - 25) // 2
    assert AspectRatioService().clamp(10, 100) == Rectangle(0, 37, 10, 62)


def test_too_wide_keeps_height_and_centres_horizontally():
    assert AspectRatioService().clamp(100, 10) == Rectangle(37, 0, 62, 10)


def test_odd_leftover_biases_towards_top_left():
    # 101 - 25 = 76 -> even split; 102 - 25 = 77 -> extra pixel goes below
    assert AspectRatioService().clamp(10, 101).top == 38
    assert AspectRatioService().clamp(10, 102).top == 38
    assert AspectRatioService().clamp(102, 10).left == 38


def test_window_always_inside_source_and_envelope():
    service = AspectRatioService()
    for width in range(1, 80):
        for height in range(1, 80):
            window = service.clamp(width, height)
            assert 0 <= window.left < window.right <= width
            assert 0 <= window.top < window.bottom <= height
            assert ASPECT_ENVELOPE.contains(window.width, window.height)


@pytest.mark.parametrize("width,height", [(0, 10), (10, 0), (-1, 5)])
def test_empty_dimensions_rejected(width, height):
    with pytest.raises(ValueError):
        AspectRatioService().clamp(width, height)


def test_custom_envelope_drives_the_noop_check():
    square_only = AspectRatioService(AspectEnvelope(Fraction(1), Fraction(1)))
    assert square_only.clamp(7, 7) == Rectangle.full(7, 7)
    assert square_only.clamp(3, 2) == Rectangle(0, 0, 2, 2)
    assert square_only.clamp(2, 5) == Rectangle(0, 1, 2, 3)
