from pathlib import Path
from typing import List, Union
import logging

import numpy as np

from ..models.image import Image
from ..models.geometry import Rectangle
from ..repositories.image_repository import ImageRepository

logger = logging.getLogger(__name__)


class ImageService:
    """I/O helpers and pixel slicing.  No geometry decisions in here."""
    def __init__(self):
        self.image_repository = ImageRepository()

    def create_image(self, pixels: np.ndarray, path: Union[str, Path] = None) -> Image:
        return self.image_repository.create_image(pixels, path)

    def load(self, path: str | Path) -> Image:
        """Load a single image from disk into an RGBA Image object."""
        return self.image_repository.load(path)

    def save(self, image: Image) -> None:
        """
        Business-level method to save the image to its path as PNG.
        """
        self.image_repository.save(image)

    def list_inputs(self, folder: str | Path, pattern: str | None = None) -> List[Path]:
        return self.image_repository.list_dir(folder, pattern)

    def ensure_dir(self, folder: str | Path) -> Path:
        return self.image_repository.ensure_dir(folder)

    def get_image_dimensions(self, img: Image):
        """Returns (height, width)."""
        return self.image_repository.retrieve_image_dimensions(img)

    @staticmethod
    def get_alpha(img: Image) -> np.ndarray:
        """(H, W) view of the alpha channel."""
        return img.pixels[:, :, 3]

    def crop_pixels(self, img: Image, box: Rectangle) -> np.ndarray:
        img_h, img_w = self.get_image_dimensions(img)

        if not (0 <= box.left < box.right <= img_w and 0 <= box.top < box.bottom <= img_h):
            logger.debug("Invalid crop bounds %s for %dx%d image", box, img_w, img_h)
            raise ValueError(
                f"Invalid crop bounds ({box.left},{box.top},{box.right},{box.bottom}) "
                f"for {img_w}x{img_h} image"
            )

        return img.pixels[box.top:box.bottom, box.left:box.right].copy()

    def crop(self, img: Image, box: Rectangle) -> Image:
        """
        Return a *new* Image holding the box's pixels; the source keeps its buffer.
        """
        return self.create_image(self.crop_pixels(img, box), img.path)
