import pytest

from rrt.renderer import (
    Renderer,
    new_demo_renderer,
    new_norm_visualized_sphere_renderer,
    new_skied_world,
    new_sphere_renderer,
)
from rrt.scene import AbsoluteSphereScene, Camera, DemoSkyScene, Scene, SkiedWorld
from rrt.sphere import NormalVectorVisualizedSphere
from rrt.types import PixelF64, PixelU8, Vec3

CONSTANT = PixelF64(0.25, 0.5, 0.75)


class ConstantScene(Scene):
    pixel_type = PixelF64

    def get_color(self, ray):
        return CONSTANT


def _small_camera():
    return Camera(Vec3.zeros(), 4, 3, 0.25, 0.25, 1.0)


def test_render_writes_ppm(tmp_path):
    path = tmp_path / "out.ppm"
    image = Renderer(_small_camera(), DemoSkyScene()).render(3, path, workers=2)
    lines = path.read_text().splitlines()
    assert lines[:3] == ["P3", "4 3", "255"]
    assert len(lines) == 3 + 12
    assert all(pixel.blue8() == 255 for _, _, pixel in image)


@pytest.mark.parametrize("samples,workers", [(1, 1), (2, 4), (5, 2), (7, 3)])
def test_render_constant_scene_averages_to_constant(tmp_path, samples, workers):
    image = Renderer(_small_camera(), ConstantScene()).render(
        samples, tmp_path / "c.ppm", workers=workers
    )
    for _, _, pixel in image:
        assert (pixel.r, pixel.g, pixel.b) == pytest.approx((0.25, 0.5, 0.75))


def test_render_u8(tmp_path):
    color = PixelU8.from_rgb8(200, 100, 50)
    scene = AbsoluteSphereScene(Vec3(0.0, 0.0, -10.0), 100.0, color)
    image = Renderer(_small_camera(), scene).render(1, tmp_path / "u.ppm", workers=1)
    assert all(pixel == color for _, _, pixel in image)


def test_render_zero_samples(tmp_path):
    with pytest.raises(RuntimeError):
        Renderer(_small_camera(), DemoSkyScene()).render(0, tmp_path / "z.ppm", workers=2)


def test_render_bad_workers(tmp_path):
    with pytest.raises(ValueError):
        Renderer(_small_camera(), DemoSkyScene()).render(1, tmp_path / "w.ppm", workers=0)


def test_demo_renderer_camera():
    renderer = new_demo_renderer()
    assert (renderer.camera.width, renderer.camera.height) == (640, 480)
    assert renderer.camera.pixel_width == 0.125
    assert renderer.scene == DemoSkyScene(PixelF64)


def test_sphere_renderer_uses_black():
    renderer = new_sphere_renderer(PixelU8)
    assert renderer.scene.sphere_color == PixelU8.black()
    assert renderer.camera.pixel_height == 1.0 / 256.0


def test_norm_renderer_pixel_type():
    renderer = new_norm_visualized_sphere_renderer(PixelU8)
    assert renderer.scene.pixel_type is PixelU8
    assert renderer.scene.sphere_radius == 0.5


def test_skied_world_renderer():
    sphere = NormalVectorVisualizedSphere(Vec3(0.0, 0.0, -1.0), 0.5)
    renderer = new_skied_world([sphere])
    assert isinstance(renderer.scene, SkiedWorld)
    assert list(renderer.scene.objects) == [sphere]