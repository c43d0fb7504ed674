"""Sphere objects for a hittable world."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional, Type

from rrt.ray import Ray
from rrt.scene import HitEvent, Hittable
from rrt.types import Pixel, PixelF64, Vec3


@dataclass(frozen=True)
class NormalVectorVisualizedSphere(Hittable):
    """A sphere coloured by its outward surface normal."""

    center: Vec3
    radius: float
    pixel_type: Type[Pixel] = PixelF64

    def try_hit(self, ray: Ray, t1: float, t2: float) -> Optional[HitEvent]:
        oc = ray.origin - self.center
        a = ray.direction.norm_squared()
        b = 2.0 * oc.dot(ray.direction)
        c = oc.norm_squared() - self.radius * self.radius
        delta = b * b - 4.0 * a * c
        if delta < 0.0:
            return None
        root = math.sqrt(delta)
        t = (-b - root) / (2.0 * a)
        if t < t1 or t >= t2:
            t = (-b + root) / (2.0 * a)
            if t < t1 or t >= t2:
                return None
        hit_pos = ray.at(t)
        surface_nv = (hit_pos - self.center).normalize()
        color = 0.5 * (surface_nv + Vec3(1.0, 1.0, 1.0))
        return HitEvent(
            hit_pos=hit_pos,
            surface_nv=surface_nv,
            t=t,
            color=self.pixel_type.from_rgb_normalized(color.x, color.y, color.z),
        )