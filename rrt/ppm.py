"""In-memory images that can be written in the plain-text PPM (P3) format."""

from __future__ import annotations

from itertools import product
from os import PathLike
from typing import Iterator, List, TextIO, Tuple, Type, Union

from rrt.types import Pixel

PIXEL_DEPTH = 255


class Image:
    """A width x height grid of pixels stored in row-major order."""

    def __init__(self, width: int, height: int, pixel_type: Type[Pixel]) -> None:
        if width < 0 or height < 0:
            raise ValueError(f"invalid image size {width}x{height}")
        self._width = width
        self._height = height
        self.pixel_type = pixel_type
        self._data: List[Pixel] = [pixel_type.black()] * (width * height)

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    def __iter__(self) -> Iterator[Tuple[int, int, Pixel]]:
        """Yield ``(x, y, pixel)`` row by row, left to right."""
        for (x, y), pixel in zip(self.coordinates(), self._data):
            yield x, y, pixel

    def coordinates(self) -> Iterator[Tuple[int, int]]:
        """Yield every ``(x, y)`` position in storage order."""
        for y, x in product(range(self._height), range(self._width)):
            yield x, y

    def _index(self, x: int, y: int) -> int:
        if not (0 <= x < self._width and 0 <= y < self._height):
            raise IndexError(
                f"pixel ({x}, {y}) outside {self._width}x{self._height} image"
            )
        return x + y * self._width

    def set_pixel(self, x: int, y: int, pixel: Pixel) -> None:
        self._data[self._index(x, y)] = pixel

    def get_pixel(self, x: int, y: int) -> Pixel:
        return self._data[self._index(x, y)]

    def write(self, stream: TextIO) -> None:
        """Write the image as P3 text to an open text stream."""
        stream.write(f"P3\n{self._width} {self._height}\n{PIXEL_DEPTH}\n")
        for pixel in self._data:
            stream.write(f"{pixel.red8()} {pixel.green8()} {pixel.blue8()}\n")

    def save(self, path: Union[str, PathLike]) -> None:
        """Write the image to ``path`` as a P3 file."""
        with open(path, "w", encoding="ascii", newline="\n") as stream:
            self.write(stream)

    def __imul__(self, factor: float) -> Image:
        self._data = [pixel * factor for pixel in self._data]
        return self

    def __iadd__(self, other: Image) -> Image:
        if not isinstance(other, Image):
            return NotImplemented
        if len(self._data) != len(other._data) or self._width != other._width:
            raise ValueError("attempted to add two images with different shape")
        self._data = [a + b for a, b in zip(self._data, other._data)]
        return self