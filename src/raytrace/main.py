import argparse
import logging
from typing import List, Optional

from .image import Image, ImageSaveError
from .logger import init_logger
from .vec3 import Vec3

WIDTH = 256
HEIGHT = 256
OUTPUT = "gradient.png"


def vector_walkthrough() -> List[str]:
    """Return the lines describing two sample vectors and their sum and difference."""
    vector1 = Vec3(1.0, 2.0, 3.0)
    vector2 = Vec3(0.5, 0.3, 0.2)
    return [
        f"Vector 1 value is {vector1}",
        f"Vector 2 value is {vector2}",
        f"Vector addition result is {vector1 + vector2}",
        f"Vector substraction result is {vector1 - vector2}",
    ]


def gradient_colour(i: int, j: int, width: int, height: int) -> Vec3:
    """
    Map a pixel to a colour: red grows to the right, green grows upwards, blue is fixed.

    Args:
        i: Column, counted from the left.
        j: Row, counted from the bottom.
        width: Image width in pixels.
        height: Image height in pixels.
    """
    u = i / (width - 1) if width > 1 else 0.0
    v = j / (height - 1) if height > 1 else 0.0
    return Vec3(u, v, 0.2)


def render_gradient(width: int, height: int) -> Image:
    img = Image(width, height)
    for j in range(height):
        # image rows run top to bottom
        y = height - 1 - j
        for i in range(width):
            img.set_pixel(i, y, gradient_colour(i, j, width, height))
    return img


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Vec3 walkthrough and gradient image demo")
    parser.add_argument("-W", "--width", type=int, default=WIDTH, help="image width in pixels")
    parser.add_argument("-H", "--height", type=int, default=HEIGHT, help="image height in pixels")
    parser.add_argument("-o", "--output", default=OUTPUT, help="png file to write")
    parser.add_argument("--no-image", action="store_true", help="only print the vector walkthrough")
    parser.add_argument("-v", "--verbose", action="store_true", help="enable debug logging")
    args = parser.parse_args(argv)
    if args.width <= 0 or args.height <= 0:
        parser.error("width and height must be positive")

    logger = init_logger(logging.DEBUG if args.verbose else logging.INFO)

    for line in vector_walkthrough():
        print(line)

    if args.no_image:
        return 0

    logger.info("rendering %dx%d gradient", args.width, args.height)
    img = render_gradient(args.width, args.height)
    try:
        img.save(args.output)
    except ImageSaveError as e:
        logger.error("%s", e)
        return 1
    logger.info("saved %s", args.output)
    return 0
