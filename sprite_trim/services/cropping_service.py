from ..models.image import Image
from .image_service import ImageService
from .bounding_box_service import BoundingBoxService
from .aspect_ratio_service import AspectRatioService


class CroppingService:
    def __init__(self):
        self.image_service = ImageService()
        self.bounding_box_service = BoundingBoxService(self.image_service)
        self.aspect_ratio_service = AspectRatioService()

    def trim_transparent_edges(self, img: Image) -> Image:
        box = self.bounding_box_service.detect(img)
        return self.image_service.crop(img, box)

    def crop_to_aspect_ratio(self, img: Image) -> Image:
        # Get image dimensions
        height_img, width_img = self.image_service.get_image_dimensions(img)

        window = self.aspect_ratio_service.clamp(width_img, height_img)
        return self.image_service.crop(img, window)
