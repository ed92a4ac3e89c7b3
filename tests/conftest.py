from pathlib import Path

import numpy as np
import pytest
from PIL import Image as PILImage

from sprite_trim.models.image import Image


def make_rgba(width: int, height: int, alpha: int = 0) -> np.ndarray:
    """(H, W, 4) uint8 buffer, every pixel mid-gray with the given alpha."""
    pixels = np.full((height, width, 4), 128, dtype=np.uint8)
    pixels[:, :, 3] = alpha
    return pixels


def make_gradient(width: int, height: int) -> np.ndarray:
    """Opaque buffer whose R encodes the row and G the column, for crop checks."""
    pixels = np.zeros((height, width, 4), dtype=np.uint8)
    pixels[:, :, 0] = (np.arange(height) % 256)[:, None]
    pixels[:, :, 1] = (np.arange(width) % 256)[None, :]
    pixels[:, :, 3] = 255
    return pixels


def write_png(path: Path, pixels: np.ndarray) -> Path:
    PILImage.fromarray(pixels).save(path, format="PNG")
    return path


@pytest.fixture
def padded_sprite() -> Image:
    """100x100 opaque square centred on a 300x100 transparent canvas."""
    pixels = make_rgba(300, 100)
    pixels[:, 100:200, 3] = 255
    return Image(pixels=pixels)


@pytest.fixture
def sprite_dir(tmp_path):
    """Directory with three valid PNGs, one corrupt PNG and one ignored JPEG."""
    folder = tmp_path / "sprites"
    folder.mkdir()
    for i, (w, h) in enumerate([(40, 40), (10, 100), (120, 30)]):
        pixels = make_rgba(w + 20, h + 20)
        pixels[10:10 + h, 10:10 + w, 3] = 255
        write_png(folder / f"sprite_{i}.png", pixels)
    (folder / "broken.png").write_bytes(b"definitely not a png")
    (folder / "photo.jpg").write_bytes(b"ignored by the glob")
    return folder
