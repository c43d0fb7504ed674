"""Cameras, scenes and the objects a ray can hit."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Type

from rrt.ppm import Image
from rrt.ray import Ray
from rrt.types import Pixel, PixelF64, Vec3


class Scene(ABC):
    """Describes how objects in the world are organised.

    Concrete scenes expose ``pixel_type``, the pixel class they produce.
    """

    pixel_type: Type[Pixel]

    @abstractmethod
    def get_color(self, ray: Ray) -> Pixel:
        """Return the colour seen along ``ray``."""


@dataclass(frozen=True)
class Camera:
    """Viewer parameters; the origin of the coordinate system is the focus point."""

    pos: Vec3
    width: int
    height: int
    pixel_width: float
    pixel_height: float
    focus_length: float

    def get_image(self, scene: Scene, rnd_x: float, rnd_y: float) -> Image:
        """Render one sample of ``scene``.

        ``rnd_x`` and ``rnd_y`` (0 <= value < 1) offset each ray inside its
        pixel; averaging many such images gives an anti-aliased result.
        """
        image = Image(self.width, self.height, scene.pixel_type)
        origin = Vec3.zeros()
        bias = Vec3(rnd_x * self.pixel_width, -rnd_y * self.pixel_height, 0.0)
        for x, y in image.coordinates():
            direction = (self.pixel_position(x, y) - origin + bias).normalize()
            image.set_pixel(x, y, scene.get_color(Ray(origin, direction)))
        return image

    def pixel_position(self, x: int, y: int) -> Vec3:
        """Position of the upper-left corner of pixel ``(x, y)`` in camera space."""
        sensor_center = Vec3(0.0, 0.0, -self.focus_length)
        upper_left = sensor_center + Vec3(
            -(self.width * self.pixel_width / 2.0),
            self.height * self.pixel_height / 2.0,
            0.0,
        )
        return upper_left + Vec3(
            self.pixel_width * x,
            -(self.pixel_height * y),
            0.0,
        )


@dataclass(frozen=True)
class DemoSkyScene(Scene):
    """A plain sky gradient."""

    pixel_type: Type[Pixel] = PixelF64

    def get_color(self, ray: Ray) -> Pixel:
        a = 0.5 * (ray.direction.y + 1.0)
        return self.pixel_type.from_rgb_normalized(1.0 - 0.5 * a, 1.0 - 0.3 * a, 1.0)


def _hit_discriminant(center: Vec3, radius: float, ray: Ray):
    oc = ray.origin - center
    a = ray.direction.norm_squared()
    b = 2.0 * oc.dot(ray.direction)
    c = oc.norm_squared() - radius * radius
    return a, b, b * b - 4.0 * a * c


@dataclass(frozen=True)
class AbsoluteSphereScene(Scene):
    """A single sphere drawn in one flat colour in front of the sky."""

    sphere_center: Vec3
    sphere_radius: float
    sphere_color: Pixel

    @property
    def pixel_type(self) -> Type[Pixel]:
        return type(self.sphere_color)

    def get_color(self, ray: Ray) -> Pixel:
        _, _, delta = _hit_discriminant(self.sphere_center, self.sphere_radius, ray)
        if delta > 0.0:
            return self.sphere_color
        return DemoSkyScene(self.pixel_type).get_color(ray)


@dataclass(frozen=True)
class NormVectorVisualizedSphereScene(Scene):
    """A single sphere coloured by its surface normal, in front of the sky."""

    sphere_center: Vec3
    sphere_radius: float
    pixel_type: Type[Pixel] = PixelF64

    def get_color(self, ray: Ray) -> Pixel:
        a, b, delta = _hit_discriminant(self.sphere_center, self.sphere_radius, ray)
        if delta < 0.0:
            return DemoSkyScene(self.pixel_type).get_color(ray)
        t = (-b - math.sqrt(delta)) / (2.0 * a)
        normal = (ray.at(t) - self.sphere_center).normalize()
        color = 0.5 * (normal + Vec3(1.0, 1.0, 1.0))
        return self.pixel_type.from_rgb_normalized(color.x, color.y, color.z)


@dataclass(frozen=True)
class HitEvent:
    """The result of a ray hitting an object."""

    hit_pos: Vec3
    surface_nv: Vec3
    t: float
    color: Pixel


class Hittable(ABC):
    """An object that rays can hit."""

    @abstractmethod
    def try_hit(self, ray: Ray, t1: float, t2: float) -> Optional[HitEvent]:
        """Return the earliest hit with ``t1 <= t < t2``, or None."""


@dataclass
class SkiedWorld(Scene):
    """A collection of hittable objects in front of the sky."""

    objects: Sequence[Hittable] = field(default_factory=list)
    pixel_type: Type[Pixel] = PixelF64

    def get_color(self, ray: Ray) -> Pixel:
        nearest: Optional[HitEvent] = None
        t_max = math.inf
        for obj in self.objects:
            hit = obj.try_hit(ray, 0.0, t_max)
            if hit is not None and hit.t < t_max:
                t_max = hit.t
                nearest = hit
        if nearest is None:
            return DemoSkyScene(self.pixel_type).get_color(ray)
        return nearest.color


__all__: List[str] = [
    "Scene",
    "Camera",
    "DemoSkyScene",
    "AbsoluteSphereScene",
    "NormVectorVisualizedSphereScene",
    "HitEvent",
    "Hittable",
    "SkiedWorld",
]