from typing import Tuple, Union

import numpy as np
from PIL import Image as PILImage

from .logger import get_logger
from .vec3 import Vec3

logger = get_logger("image")

Colour = Union[Vec3, tuple, None]


class ImageSaveError(Exception):
    """Raised when an image cannot be written to disk."""


class Image:
    """An RGB pixel buffer built on numpy and Pillow."""

    def __init__(self, width: int, height: int, fill_colour: Colour = None):
        """
        Initialize the Image object.

        Args:
            width: The width of the image in pixels.
            height: The height of the image in pixels.
            fill_colour: The initial colour of the image. Can be a Vec3 colour in
                         the [0, 1) range, a 3 element tuple of bytes, or None for black.
        """
        for name, value in (("width", width), ("height", height)):
            if not isinstance(value, int) or value <= 0:
                raise ValueError(f"{name} must be a positive integer, but got {value!r}")
        self._width = width
        self._height = height
        self._rgb_data = np.full((height, width, 3), self._validate_rgb(fill_colour), dtype=np.uint8)

    def _check_bounds(self, x: int, y: int) -> None:
        """
        Check if the given x,y coordinates are within the bounds of the image.

        Raises:
            IndexError: If the coordinates are out of range.
        """
        if not (0 <= x < self._width and 0 <= y < self._height):
            raise IndexError(f"x,y values out of range {x=} {self._width=} {y=} {self._height=}")

    @staticmethod
    def _validate_rgb(value: Colour) -> Tuple[int, int, int]:
        """
        Check to see if a colour is correct and return a tuple of RGB bytes.

        Args:
            value: The colour to check.

        Returns:
            A tuple of RGB values.
        """
        match value:
            case None:
                return (0, 0, 0)
            case Vec3():
                return value.to_rgb()
            case (r, g, b):
                for component in (r, g, b):
                    if not isinstance(component, int) or not (0 <= component <= 255):
                        raise ValueError(f"RGB components must be integers between 0 and 255, but got {value}")
                return (r, g, b)
            case tuple():
                raise ValueError(f"RGB tuple must have 3 elements, but got {len(value)}")
            case _:
                raise TypeError(f"Invalid type for RGB colour: {type(value).__name__}")

    @property
    def width(self) -> int:
        """Get the width of the image in pixels."""
        return self._width

    @property
    def height(self) -> int:
        """Get the height of the image in pixels."""
        return self._height

    @property
    def shape(self) -> tuple[int, ...]:
        return self._rgb_data.shape

    @property
    def pixels(self) -> np.ndarray:
        """Get the raw pixel data as a (height, width, 3) uint8 array."""
        return self._rgb_data

    def set_pixel(self, x: int, y: int, colour: Colour) -> None:
        """
        Set the colour of a single pixel.

        Args:
            x: The x-coordinate of the pixel.
            y: The y-coordinate of the pixel.
            colour: A Vec3 colour or RGB tuple.
        """
        self._check_bounds(x, y)
        self._rgb_data[y, x] = self._validate_rgb(colour)

    def get_pixel(self, x: int, y: int) -> Tuple[int, int, int]:
        self._check_bounds(x, y)
        r, g, b = self._rgb_data[y, x]
        return (int(r), int(g), int(b))

    def clear(self, colour: Colour) -> None:
        self._rgb_data[:] = self._validate_rgb(colour)

    def __getitem__(self, key: tuple[int, int]) -> Tuple[int, int, int]:
        x, y = key
        return self.get_pixel(x, y)

    def __setitem__(self, key: tuple[int, int], colour: Colour) -> None:
        x, y = key
        self.set_pixel(x, y, colour)

    def save(self, name: str) -> None:
        """
        Save the image to a file.

        Args:
            name: The path to save the file to. The format is determined from the extension.

        Raises:
            ImageSaveError: If Pillow cannot write the file.
        """
        img = PILImage.fromarray(self._rgb_data)
        try:
            img.save(name)
        except (OSError, ValueError) as e:
            raise ImageSaveError(f"could not save image to {name}: {e}") from e
        logger.debug("saved %dx%d image to %s", self._width, self._height, name)
