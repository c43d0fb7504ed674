"""Geometric vectors and the pixel types the renderer produces."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Iterator, Tuple

NUM_COLOR_MAX = 255
_SCALE_TO_U8 = 255.999


def _is_number(value: object) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _saturate_u8(value: float) -> int:
    """Truncate a float to an 8-bit channel, clamping out-of-range values."""
    if math.isnan(value) or value <= 0:
        return 0
    if value >= NUM_COLOR_MAX:
        return NUM_COLOR_MAX
    return int(value)


def _check_u8(value: int) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"8-bit channel must be an int, got {value!r}")
    if not 0 <= value <= NUM_COLOR_MAX:
        raise ValueError(f"8-bit channel out of range: {value}")
    return value


@dataclass(frozen=True)
class Vec3:
    """An immutable three-component vector of floats."""

    x: float
    y: float
    z: float

    @classmethod
    def zeros(cls) -> Vec3:
        return cls(0.0, 0.0, 0.0)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def dot(self, other: Vec3) -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def norm_squared(self) -> float:
        return self.dot(self)

    def norm(self) -> float:
        return math.sqrt(self.norm_squared())

    def normalize(self) -> Vec3:
        """Return the unit vector pointing the same way."""
        length = self.norm()
        return Vec3(self.x / length, self.y / length, self.z / length)

    def scale(self, factor: float) -> Vec3:
        return Vec3(self.x * factor, self.y * factor, self.z * factor)

    def __add__(self, other: Vec3) -> Vec3:
        if not isinstance(other, Vec3):
            return NotImplemented
        return Vec3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vec3) -> Vec3:
        if not isinstance(other, Vec3):
            return NotImplemented
        return Vec3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __neg__(self) -> Vec3:
        return Vec3(-self.x, -self.y, -self.z)

    def __mul__(self, factor: float) -> Vec3:
        if not _is_number(factor):
            return NotImplemented
        return self.scale(factor)

    def __rmul__(self, factor: float) -> Vec3:
        return self.__mul__(factor)


class Pixel(ABC):
    """An RGB colour value; concrete types differ in how channels are stored."""

    @abstractmethod
    def red(self) -> float:
        """Red channel as a ratio in [0, 1]."""

    @abstractmethod
    def green(self) -> float:
        """Green channel as a ratio in [0, 1]."""

    @abstractmethod
    def blue(self) -> float:
        """Blue channel as a ratio in [0, 1]."""

    @abstractmethod
    def red8(self) -> int:
        """Red channel as an 8-bit value."""

    @abstractmethod
    def green8(self) -> int:
        """Green channel as an 8-bit value."""

    @abstractmethod
    def blue8(self) -> int:
        """Blue channel as an 8-bit value."""

    @abstractmethod
    def __mul__(self, factor: float) -> Pixel:
        """Scale every channel by ``factor``."""

    @abstractmethod
    def __add__(self, other: Pixel) -> Pixel:
        """Add two pixels channel by channel."""

    @classmethod
    @abstractmethod
    def _channel_from_ratio(cls, value: float):
        """Convert a normalised ratio to this type's channel value."""

    @classmethod
    @abstractmethod
    def _channel_from_u8(cls, value: int):
        """Convert an 8-bit value to this type's channel value."""

    @classmethod
    @abstractmethod
    def _channels_of(cls, value: Pixel) -> Tuple:
        """Extract channel values from any pixel in this type's representation."""

    @classmethod
    def from_rgb_normalized(cls, r: float, g: float, b: float) -> Pixel:
        return cls(*(cls._channel_from_ratio(v) for v in (r, g, b)))

    @classmethod
    def from_rgb8(cls, r: int, g: int, b: int) -> Pixel:
        return cls(*(cls._channel_from_u8(_check_u8(v)) for v in (r, g, b)))

    @classmethod
    def black(cls) -> Pixel:
        return cls.from_rgb8(0, 0, 0)

    @classmethod
    def from_pixel(cls, value: Pixel) -> Pixel:
        return cls(*cls._channels_of(value))


@dataclass(frozen=True)
class PixelU8(Pixel):
    """A pixel with 8-bit integer channels."""

    r: int
    g: int
    b: int

    def __post_init__(self) -> None:
        for channel in (self.r, self.g, self.b):
            _check_u8(channel)

    def red(self) -> float:
        return self.r / NUM_COLOR_MAX

    def green(self) -> float:
        return self.g / NUM_COLOR_MAX

    def blue(self) -> float:
        return self.b / NUM_COLOR_MAX

    def red8(self) -> int:
        return self.r

    def green8(self) -> int:
        return self.g

    def blue8(self) -> int:
        return self.b

    def __mul__(self, factor: float) -> PixelU8:
        if not _is_number(factor):
            return NotImplemented
        return PixelU8(*(_saturate_u8(c * factor) for c in (self.r, self.g, self.b)))

    def __add__(self, other: PixelU8) -> PixelU8:
        if not isinstance(other, PixelU8):
            return NotImplemented
        sums = (self.r + other.r, self.g + other.g, self.b + other.b)
        if any(s > NUM_COLOR_MAX for s in sums):
            raise OverflowError(f"8-bit channel overflow adding {self} and {other}")
        return PixelU8(*sums)

    def __str__(self) -> str:
        return f"Pixel8(r={self.r}, g={self.g}, b={self.b})"

    @classmethod
    def _channel_from_ratio(cls, value: float) -> int:
        return _saturate_u8(value * _SCALE_TO_U8)

    @classmethod
    def _channel_from_u8(cls, value: int) -> int:
        return value

    @classmethod
    def _channels_of(cls, value: Pixel) -> Tuple[int, int, int]:
        return value.red8(), value.green8(), value.blue8()


@dataclass(frozen=True)
class PixelF64(Pixel):
    """A pixel with floating-point channels, nominally in [0, 1]."""

    r: float
    g: float
    b: float

    def red(self) -> float:
        return self.r

    def green(self) -> float:
        return self.g

    def blue(self) -> float:
        return self.b

    def red8(self) -> int:
        return _saturate_u8(self.r * _SCALE_TO_U8)

    def green8(self) -> int:
        return _saturate_u8(self.g * _SCALE_TO_U8)

    def blue8(self) -> int:
        return _saturate_u8(self.b * _SCALE_TO_U8)

    def __mul__(self, factor: float) -> PixelF64:
        if not _is_number(factor):
            return NotImplemented
        return PixelF64(self.r * factor, self.g * factor, self.b * factor)

    def __add__(self, other: PixelF64) -> PixelF64:
        if not isinstance(other, PixelF64):
            return NotImplemented
        return PixelF64(self.r + other.r, self.g + other.g, self.b + other.b)

    @classmethod
    def _channel_from_ratio(cls, value: float) -> float:
        return float(value)

    @classmethod
    def _channel_from_u8(cls, value: int) -> float:
        return value / 255.0

    @classmethod
    def _channels_of(cls, value: Pixel) -> Tuple[float, float, float]:
        return value.red(), value.green(), value.blue()