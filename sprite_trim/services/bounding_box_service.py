import numpy as np

from ..models.image import Image
from ..models.geometry import Rectangle
from .image_service import ImageService


class BoundingBoxService:
    """
    Finds the minimal rectangle enclosing every pixel with non-zero alpha.

    Each edge is scanned from the outside in and stops at the first hit, so
    images that are already tight cost one row/column per edge.  A fully
    transparent image yields the full-image rectangle (no-op crop).
    """

    def __init__(self, image_service: ImageService = None):
        self.image_service = image_service or ImageService()

    @staticmethod
    def _first_opaque(lines, default: int) -> int:
        for index, line in lines:
            if line.any():
                return index
        return default

    def detect_alpha(self, alpha: np.ndarray) -> Rectangle:
        height, width = alpha.shape[:2]

        top = self._first_opaque(
            ((y, alpha[y]) for y in range(height)), default=0)
        bottom = self._first_opaque(
            ((y + 1, alpha[y]) for y in reversed(range(height))), default=height)

        # columns are only inspected inside the [top, bottom) row band
        band = alpha[top:bottom]
        left = self._first_opaque(
            ((x, band[:, x]) for x in range(width)), default=0)
        right = self._first_opaque(
            ((x + 1, band[:, x]) for x in reversed(range(width))), default=width)

        return Rectangle(left=left, top=top, right=right, bottom=bottom)

    def detect(self, img: Image) -> Rectangle:
        return self.detect_alpha(self.image_service.get_alpha(img))
