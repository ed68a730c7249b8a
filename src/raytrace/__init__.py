from .image import Image, ImageSaveError
from .vec3 import Vec3

__all__ = ["Image", "ImageSaveError", "Vec3"]
