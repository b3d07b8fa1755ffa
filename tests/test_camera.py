import pytest

from raytracer.camera import Camera
from raytracer.quality import QualityOptions
from raytracer.vector import Vector3


POS = Vector3(1.0, 2.0, 3.0)
LOOKAT = Vector3(4.0, 5.0, -6.0)


def _camera(defocus_angle=0.0):
    return Camera(
        QualityOptions(samples_per_pixel=4, max_depth=5, img_width=20),
        img_aspect=2.0,
        pos=POS,
        vert_fov=40.0,
        lookat=LOOKAT,
        vup=Vector3(0.0, 1.0, 0.0),
        defocus_angle=defocus_angle,
        focus_dist=(LOOKAT - POS).length(),
        num_threads=2,
    )


def test_too_short_image_is_rejected():
    with pytest.raises(ValueError):
        Camera(QualityOptions(1, 1, 2), img_aspect=2.0)


def test_total_pixels_is_width_times_height():
    camera = _camera()
    assert camera.total_pixels() == camera.img_width * camera.img_height
    assert camera.img_width == 20


def test_quality_is_carried_over():
    camera = _camera()
    assert camera.samples_per_pixel == 4
    assert camera.max_depth == 5
    assert camera.pixel_samples_scale * camera.samples_per_pixel == pytest.approx(1.0)


def test_image_centre_is_lookat_at_focus_distance():
    camera = _camera()
    centre = (
        camera.pixel00
        + camera.pixel_du * ((camera.img_width - 1) / 2)
        + camera.pixel_dv * ((camera.img_height - 1) / 2)
    )
    assert tuple(centre) == pytest.approx(tuple(LOOKAT))


def test_pixels_are_square_and_face_the_view():
    camera = _camera()
    view = LOOKAT - POS
    assert camera.pixel_du.length() == pytest.approx(camera.pixel_dv.length())
    assert camera.pixel_du.dot(view) == pytest.approx(0.0, abs=1e-9)
    assert camera.pixel_dv.dot(view) == pytest.approx(0.0, abs=1e-9)


@pytest.mark.parametrize("i,j", [(0, 0), (19, 9), (7, 3)])
def test_ray_passes_through_its_pixel(i, j):
    camera = _camera()
    for _ in range(50):
        ray = camera.get_ray(i, j)
        assert ray.origin == POS
        assert 0.0 <= ray.time < 1.0
        delta = ray.origin + ray.direction - (
            camera.pixel00 + camera.pixel_du * i + camera.pixel_dv * j
        )
        du = delta.dot(camera.pixel_du) / camera.pixel_du.length_squared()
        dv = delta.dot(camera.pixel_dv) / camera.pixel_dv.length_squared()
        assert -0.5 <= du <= 0.5
        assert -0.5 <= dv <= 0.5


def test_defocus_origins_lie_on_lens_plane():
    camera = _camera(defocus_angle=5.0)
    view = LOOKAT - POS
    for _ in range(50):
        ray = camera.get_ray(3, 4)
        assert (ray.origin - POS).dot(view) == pytest.approx(0.0, abs=1e-9)