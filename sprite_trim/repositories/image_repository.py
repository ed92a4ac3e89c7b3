from pathlib import Path
from typing import Union, List
import logging
import os

import cv2
import numpy as np
from PIL import Image as PILImage, UnidentifiedImageError
from dotenv import load_dotenv

from ..errors import DecodeError, EncodeError
from ..models.image import Image

# Load environment variables
load_dotenv()

logger = logging.getLogger(__name__)


class ImageRepository:
    """
    Handles file I/O and enumeration for Image entities.
    Everything that leaves this class is RGBA uint8.
    """
    def __init__(self):
        self.INPUT_GLOB = os.getenv("INPUT_GLOB", "*.png")

    @staticmethod
    def create_image(pixels: np.ndarray, path: Union[str, Path] = None) -> Image:
        if path is None:
            return Image(pixels)
        return Image(pixels=pixels, path=Path(path))

    def retrieve_image_dimensions(self, img: Image):
        return img.pixels.shape[:2]

    @staticmethod
    def _to_rgba8(arr: np.ndarray) -> np.ndarray:
        """Normalise whatever cv2 decoded (gray, BGR, BGRA, 8/16 bit) to RGBA8."""
        if arr.dtype == np.uint16:
            arr = np.round(arr / 257.0).astype(np.uint8)
        elif arr.dtype != np.uint8:
            raise DecodeError(f"Unsupported sample type {arr.dtype}")

        if arr.ndim == 2:
            return cv2.cvtColor(arr, cv2.COLOR_GRAY2RGBA)
        channels = arr.shape[2]
        if channels == 1:
            return cv2.cvtColor(arr[:, :, 0], cv2.COLOR_GRAY2RGBA)
        if channels == 3:
            return cv2.cvtColor(arr, cv2.COLOR_BGR2RGBA)
        if channels == 4:
            return cv2.cvtColor(arr, cv2.COLOR_BGRA2RGBA)
        raise DecodeError(f"Unsupported channel count {channels}")

    @staticmethod
    def _apply_gray_transparency(path: Path, arr: np.ndarray, pixels: np.ndarray) -> np.ndarray:
        """
        cv2 ignores the tRNS colour key of grayscale PNGs; read the key with
        Pillow and turn matching samples transparent.
        """
        try:
            im = PILImage.open(path)
        except UnidentifiedImageError:
            # decodable by cv2 only, so no tRNS to honour
            return pixels

        with im:
            key = im.info.get("transparency")
            if key is None:
                return pixels
            if im.mode not in ("I;16", "I"):
                return np.asarray(im.convert("RGBA")).copy()

        # 16-bit gray: compare the raw samples against the 16-bit key
        pixels[:, :, 3] = np.where(arr.reshape(arr.shape[:2]) == key, 0, 255)
        return pixels

    def load(self, path: Union[str, Path]) -> Image:
        path = Path(path)
        if not path.is_file():
            raise DecodeError(f"Image not found: {path}")

        # IMREAD_UNCHANGED keeps the alpha channel and 16-bit depth
        arr = cv2.imread(str(path), cv2.IMREAD_UNCHANGED)
        if arr is None:
            raise DecodeError(f"Image unreadable or not a supported format: {path}")
        if arr.size == 0:
            raise DecodeError(f"Image has a zero dimension: {path}")

        try:
            pixels = self._to_rgba8(arr)
            if arr.ndim == 2 or arr.shape[2] == 1:
                pixels = self._apply_gray_transparency(path, arr, pixels)
        except (cv2.error, OSError) as err:
            raise DecodeError(f"Could not convert {path} to RGBA: {err}") from err

        logger.debug("Loaded %s (%dx%d)", path, pixels.shape[1], pixels.shape[0])
        return Image(pixels=pixels, path=path)

    @staticmethod
    def save(image: Image) -> None:
        """Encode the image as PNG at image.path."""
        if image.path is None:
            raise EncodeError("Image has no output path")

        pixels = image.pixels
        if not pixels.flags['C_CONTIGUOUS']:
            pixels = np.ascontiguousarray(pixels)

        try:
            PILImage.fromarray(pixels).save(image.path, format="PNG")
        except (OSError, ValueError) as err:
            raise EncodeError(f"Could not write {image.path}: {err}") from err

    def list_dir(self, folder: Union[str, Path], pattern: str | None = None) -> List[Path]:
        """
        Regular files in *folder* matching the glob pattern (non-recursive),
        sorted by name.
        """
        folder = Path(folder)
        if not folder.is_dir():
            raise NotADirectoryError(folder)

        matches = []
        for p in sorted(folder.glob(pattern or self.INPUT_GLOB)):
            if not p.is_file():
                logger.debug("Skipping because not file: %s", p)
                continue
            matches.append(p)
        return matches

    @staticmethod
    def ensure_dir(folder: Union[str, Path]) -> Path:
        folder = Path(folder)
        folder.mkdir(parents=True, exist_ok=True)
        return folder
