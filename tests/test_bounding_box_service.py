import numpy as np

from sprite_trim.models.geometry import Rectangle
from sprite_trim.models.image import Image
from sprite_trim.services.bounding_box_service import BoundingBoxService

from conftest import make_rgba


def test_padded_sprite_box(padded_sprite):
    assert BoundingBoxService().detect(padded_sprite) == Rectangle(100, 0, 200, 100)


def test_single_pixel():
    pixels = make_rgba(10, 8)
    pixels[5, 3, 3] = 255
    assert BoundingBoxService().detect(Image(pixels)) == Rectangle(3, 5, 4, 6)


def test_box_spans_separate_blobs():
    pixels = make_rgba(10, 8)
    pixels[1, 2, 3] = 255
    pixels[6, 7, 3] = 255
    assert BoundingBoxService().detect(Image(pixels)) == Rectangle(2, 1, 8, 7)


def test_any_nonzero_alpha_counts_as_content():
    pixels = make_rgba(6, 6)
    pixels[2, 4, 3] = 1
    assert BoundingBoxService().detect(Image(pixels)) == Rectangle(4, 2, 5, 3)


def test_colour_without_alpha_is_transparent():
    pixels = make_rgba(6, 6)
    pixels[:, :, :3] = 255
    pixels[3, 3, 3] = 200
    assert BoundingBoxService().detect(Image(pixels)) == Rectangle(3, 3, 4, 4)


def test_fully_transparent_is_noop():
    pixels = make_rgba(30, 12)
    assert BoundingBoxService().detect(Image(pixels)) == Rectangle.full(30, 12)


def test_fully_opaque_is_noop():
    pixels = make_rgba(7, 9, alpha=255)
    assert BoundingBoxService().detect(Image(pixels)) == Rectangle.full(7, 9)


def test_matches_minimal_box_on_random_masks():
    rng = np.random.default_rng(0)
    service = BoundingBoxService()
    for _ in range(50):
        h, w = rng.integers(1, 40, size=2)
        alpha = (rng.random((h, w)) > 0.97).astype(np.uint8) * 255
        if not alpha.any():
            alpha[rng.integers(h), rng.integers(w)] = 255
        ys, xs = np.nonzero(alpha)
        expected = Rectangle(int(xs.min()), int(ys.min()), int(xs.max()) + 1, int(ys.max()) + 1)
        assert service.detect_alpha(alpha) == expected
