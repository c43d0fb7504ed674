import math

import pytest

from rrt.ray import Ray
from rrt.scene import SkiedWorld
from rrt.sphere import NormalVectorVisualizedSphere
from rrt.types import PixelF64, PixelU8, Vec3

CENTER = Vec3(0.0, 0.0, -1.0)
RADIUS = 0.5
FORWARD = Ray(Vec3.zeros(), Vec3(0.0, 0.0, -1.0))


def test_front_hit():
    hit = NormalVectorVisualizedSphere(CENTER, RADIUS).try_hit(FORWARD, 0.0, math.inf)
    assert hit.t == pytest.approx(0.5)
    assert tuple(hit.hit_pos) == pytest.approx((0.0, 0.0, -0.5))
    assert (hit.color.r, hit.color.g, hit.color.b) == pytest.approx((0.5, 0.5, 1.0))
    assert hit.surface_nv.norm() == pytest.approx(1.0)


def test_second_root_when_first_excluded():
    sphere = NormalVectorVisualizedSphere(CENTER, RADIUS)
    first = sphere.try_hit(FORWARD, 0.0, math.inf)
    second = sphere.try_hit(FORWARD, first.t + 1e-9, math.inf)
    assert second.t > first.t
    assert tuple(second.hit_pos) == pytest.approx(tuple(FORWARD.at(second.t)))
    assert (second.hit_pos - CENTER).norm() == pytest.approx(RADIUS)
    assert second.surface_nv.dot(FORWARD.direction) > 0


def test_upper_bound_is_exclusive():
    sphere = NormalVectorVisualizedSphere(CENTER, RADIUS)
    first = sphere.try_hit(FORWARD, 0.0, math.inf)
    assert sphere.try_hit(FORWARD, 0.0, first.t) is None


def test_miss():
    sphere = NormalVectorVisualizedSphere(CENTER, RADIUS)
    assert sphere.try_hit(Ray(Vec3.zeros(), Vec3(0.0, 1.0, 0.0)), 0.0, math.inf) is None


def test_ray_from_inside_hits_far_side():
    sphere = NormalVectorVisualizedSphere(CENTER, RADIUS)
    hit = sphere.try_hit(Ray(CENTER, Vec3(1.0, 0.0, 0.0)), 0.0, math.inf)
    assert hit.t == pytest.approx(RADIUS)
    assert tuple(hit.surface_nv) == pytest.approx((1.0, 0.0, 0.0))


def test_u8_pixel_type():
    f64 = NormalVectorVisualizedSphere(CENTER, RADIUS).try_hit(FORWARD, 0.0, math.inf)
    u8 = NormalVectorVisualizedSphere(CENTER, RADIUS, PixelU8).try_hit(
        FORWARD, 0.0, math.inf
    )
    assert isinstance(u8.color, PixelU8)
    assert u8.color == PixelU8.from_pixel(f64.color)
    assert u8.color.blue8() == 255


def test_in_skied_world():
    sphere = NormalVectorVisualizedSphere(CENTER, RADIUS)
    world = SkiedWorld([sphere])
    hit = sphere.try_hit(FORWARD, 0.0, math.inf)
    assert world.get_color(FORWARD) == hit.color
    assert isinstance(world.get_color(FORWARD), PixelF64)


def test_nearer_sphere_wins_in_world():
    near = NormalVectorVisualizedSphere(CENTER, RADIUS)
    far = NormalVectorVisualizedSphere(Vec3(0.0, 0.0, -5.0), 2.0)
    expected = near.try_hit(FORWARD, 0.0, math.inf).color
    assert SkiedWorld([far, near]).get_color(FORWARD) == expected
    assert SkiedWorld([near, far]).get_color(FORWARD) == expected