import logging
import math

from ..models.geometry import AspectEnvelope, Rectangle, ASPECT_ENVELOPE

logger = logging.getLogger(__name__)


class AspectRatioService:
    """
    Computes the centred crop window that brings a width x height image
    inside the aspect envelope.  Geometry only, no pixel access.
    """

    def __init__(self, envelope: AspectEnvelope = ASPECT_ENVELOPE):
        self.envelope = envelope

    def clamp(self, width: int, height: int) -> Rectangle:
        """
        Args:
            width: Width of the (already trimmed) image, >= 1.
            height: Height of the (already trimmed) image, >= 1.

        Returns:
            Rectangle: Crop window relative to the image.  Equals the full
            image when the ratio is already inside the envelope.

        The short side is always kept whole and the long side is shrunk to
        the envelope edge.  Centring uses floor division, so odd leftovers
        bias the window one pixel towards the top/left.
        """
        if width < 1 or height < 1:
            raise ValueError(f"Cannot clamp a {width}x{height} image")

        if self.envelope.contains(width, height):
            return Rectangle.full(width, height)

        ratio = width / height

        if ratio < self.envelope.min_ratio:
            # too tall: keep width, shrink height
            new_height = math.floor(width / self.envelope.min_ratio)
            new_top = (height - new_height) // 2
            logger.debug("Ratio %.3f below envelope, height %d -> %d", ratio, height, new_height)
            return Rectangle(left=0, top=new_top, right=width, bottom=new_top + new_height)

        # too wide: keep height, shrink width
        new_width = math.floor(height * self.envelope.max_ratio)
        new_left = (width - new_width) // 2
        logger.debug("Ratio %.3f above envelope, width %d -> %d", ratio, width, new_width)
        return Rectangle(left=new_left, top=0, right=new_left + new_width, bottom=height)
