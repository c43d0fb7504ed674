"""Command line entry point: render a sphere in a sky to a PPM file."""

from __future__ import annotations

import argparse
import dataclasses
import logging
from typing import Optional, Sequence

from rrt.renderer import new_skied_world
from rrt.sphere import NormalVectorVisualizedSphere
from rrt.types import PixelF64, Vec3

log = logging.getLogger(__name__)


def _positive(text: str) -> int:
    value = int(text)
    if value < 1:
        raise argparse.ArgumentTypeError(f"must be positive: {text}")
    return value


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="rrt", description="Render a sphere under the sky to a PPM image."
    )
    parser.add_argument("--samples", type=_positive, default=100)
    parser.add_argument("--output", default="result.ppm")
    parser.add_argument("--workers", type=_positive, default=None)
    parser.add_argument("--width", type=_positive, default=None)
    parser.add_argument("--height", type=_positive, default=None)
    parser.add_argument("--verbose", action="store_true")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = _parser().parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO)
    log.debug("Debug logging is enabled")
    sphere = NormalVectorVisualizedSphere(Vec3(0.0, 0.0, -1.0), 0.5, PixelF64)
    renderer = new_skied_world([sphere], PixelF64)
    sizes = {
        name: value
        for name, value in (("width", args.width), ("height", args.height))
        if value is not None
    }
    if sizes:
        renderer.camera = dataclasses.replace(renderer.camera, **sizes)
    renderer.render(args.samples, args.output, args.workers)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())