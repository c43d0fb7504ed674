"""Rays: a starting point and a direction."""

from __future__ import annotations

from dataclasses import dataclass

from rrt.types import Vec3


@dataclass(frozen=True)
class Ray:
    origin: Vec3
    direction: Vec3

    def at(self, t: float) -> Vec3:
        """Return the ray's position at time ``t``."""
        return self.origin + self.direction.scale(t)