from ..models.image import Image
from ..services.cropping_service import CroppingService


def trim_and_clamp(
    img: Image,
    cropping_service: CroppingService = CroppingService(),
) -> Image:
    """
    Detect the opaque bounding box, crop to it, then crop again so the
    width/height ratio lands inside the aspect envelope.

    Returns a new Image; *img* itself is left untouched.
    """
    # Step 1+2: bounding box of non-transparent pixels, then crop
    trimmed = cropping_service.trim_transparent_edges(img)

    # Step 3+4: aspect window on the trimmed image, then crop again
    return cropping_service.crop_to_aspect_ratio(trimmed)
