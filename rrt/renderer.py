"""Multi-sample rendering of a scene through a camera."""

from __future__ import annotations

import logging
import os
import random
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from itertools import repeat
from os import PathLike
from typing import Optional, Sequence, Type, Union

from rrt.ppm import Image
from rrt.scene import (
    AbsoluteSphereScene,
    Camera,
    DemoSkyScene,
    Hittable,
    NormVectorVisualizedSphereScene,
    Scene,
    SkiedWorld,
)
from rrt.types import Pixel, PixelF64, Vec3

log = logging.getLogger(__name__)


@dataclass
class Renderer:
    """Renders a scene through a camera, averaging many jittered samples."""

    camera: Camera
    scene: Scene

    def render(
        self,
        samples: int,
        path: Union[str, PathLike] = "result.ppm",
        workers: Optional[int] = None,
    ) -> Image:
        """Average ``samples`` jittered images, save the result to ``path`` and return it."""
        if workers is None:
            workers = os.cpu_count() or 1
        if workers < 1:
            raise ValueError(f"worker count must be positive, got {workers}")
        if samples < 0:
            raise ValueError(f"sample count must not be negative, got {samples}")
        if samples == 0:
            raise RuntimeError("no image generated")
        log.info("Worker threads: %d", workers)
        per_worker = samples // workers
        counts = [per_worker] * (workers - 1) + [per_worker + samples % workers]
        factor = 1.0 / samples
        with ThreadPoolExecutor(max_workers=workers) as pool:
            partials = list(pool.map(self._work, range(workers), counts, repeat(factor)))
        total = self._blank()
        for partial in partials:
            total += partial
        total.save(path)
        return total

    def _blank(self) -> Image:
        return Image(self.camera.width, self.camera.height, self.scene.pixel_type)

    def _work(self, worker_id: int, iter_count: int, factor: float) -> Image:
        log.debug("Worker started (id: %d), iter_count: %d", worker_id, iter_count)
        rng = random.Random()
        partial = self._blank()
        for _ in range(iter_count):
            image = self.camera.get_image(self.scene, rng.random(), rng.random())
            image *= factor
            partial += image
        return partial


def _camera(pixel_size: float) -> Camera:
    return Camera(
        pos=Vec3.zeros(),
        width=640,
        height=480,
        pixel_width=pixel_size,
        pixel_height=pixel_size,
        focus_length=1.0,
    )


def new_demo_renderer(pixel_type: Type[Pixel] = PixelF64) -> Renderer:
    return Renderer(_camera(0.125), DemoSkyScene(pixel_type))


def new_sphere_renderer(pixel_type: Type[Pixel] = PixelF64) -> Renderer:
    scene = AbsoluteSphereScene(Vec3(0.0, 0.0, -1.0), 0.5, pixel_type.black())
    return Renderer(_camera(1.0 / 256.0), scene)


def new_norm_visualized_sphere_renderer(pixel_type: Type[Pixel] = PixelF64) -> Renderer:
    scene = NormVectorVisualizedSphereScene(Vec3(0.0, 0.0, -1.0), 0.5, pixel_type)
    return Renderer(_camera(1.0 / 256.0), scene)


def new_skied_world(
    objects: Sequence[Hittable], pixel_type: Type[Pixel] = PixelF64
) -> Renderer:
    return Renderer(_camera(1.0 / 256.0), SkiedWorld(list(objects), pixel_type))