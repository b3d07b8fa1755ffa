import pytest
from PIL import Image

from raytracer.color import Color
from raytracer.image import ImgData
from raytracer.texture import CheckerTexture, ImageTexture, SolidTexture, Texture
from raytracer.vector import Vector3

EVEN = Color(0.2, 0.3, 0.1)
ODD = Color(0.9, 0.9, 0.9)
ORIGIN = Vector3()


def test_solid_texture():
    tex = SolidTexture(EVEN)
    assert tex.value(0.1, 0.9, Vector3(5.0, 6.0, 7.0)) == EVEN


def test_solid_from_rgb():
    assert SolidTexture.from_rgb(0.4, 0.2, 0.1).value(0.0, 0.0, ORIGIN) == Color(
        0.4, 0.2, 0.1
    )


@pytest.mark.parametrize(
    "point, expected",
    [
        (Vector3(0.1, 0.1, 0.1), EVEN),
        (Vector3(1.5, 0.1, 0.1), ODD),
        (Vector3(1.5, 1.5, 0.1), EVEN),
        (Vector3(-0.5, 0.0, 0.0), ODD),
        (Vector3(-0.5, -0.5, 0.0), EVEN),
    ],
)
def test_checker_parity(point, expected):
    tex = CheckerTexture.from_colors(1.0, EVEN, ODD)
    assert tex.value(0.0, 0.0, point) == expected


def test_checker_scale():
    tex = CheckerTexture(0.5, SolidTexture(EVEN), SolidTexture(ODD))
    assert tex.value(0.0, 0.0, Vector3(0.75, 0.0, 0.0)) == ODD
    assert tex.value(0.0, 0.0, Vector3(1.25, 0.0, 0.0)) == EVEN


def test_image_texture_lookup():
    image = ImgData(bytes([10, 20, 30, 40, 50, 60]), 2, 1)
    tex = ImageTexture(image)
    assert tex.value(0.0, 1.0, ORIGIN) == image.pixel(0, 0)
    assert tex.value(0.5, 1.0, ORIGIN) == image.pixel(1, 0)


@pytest.mark.parametrize("u, v", [(1.5, 0.5), (-0.1, 0.5), (0.5, 1.1), (0.5, -0.1)])
def test_image_texture_out_of_range_is_cyan(u, v):
    tex = ImageTexture(ImgData(bytes(12), 2, 2))
    assert tex.value(u, v, ORIGIN) == Color.CYAN


def test_image_texture_from_file(tmp_path):
    path = tmp_path / "tex.png"
    img = Image.new("RGB", (2, 2))
    img.putpixel((0, 0), (100, 150, 200))
    img.save(path)
    tex = ImageTexture.from_file(path)
    assert tex.value(0.0, 1.0, ORIGIN) == Color(100 / 256, 150 / 256, 200 / 256)


def test_texture_is_abstract():
    with pytest.raises(TypeError):
        Texture()