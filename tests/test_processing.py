import pytest
from PIL import Image

from imgservice.processing import (
    ImageProcessingError,
    process_blur,
    process_gray,
    process_resize,
)


@pytest.fixture
def colour_image(tmp_path):
    path = tmp_path / "input.png"
    img = Image.new("RGB", (20, 10), (0, 0, 0))
    for x in range(10, 20):
        for y in range(10):
            img.putpixel((x, y), (255, 255, 255))
    img.save(path)
    return path


def test_gray_output_is_single_channel(colour_image, tmp_path):
    out = tmp_path / "gray.png"
    result = process_gray(colour_image, out)
    assert result == out
    with Image.open(out) as img:
        assert img.mode == "L"
        assert img.size == (20, 10)
        assert img.getpixel((0, 0)) == 0
        assert img.getpixel((19, 0)) == 255


def test_gray_missing_input(tmp_path):
    with pytest.raises(ImageProcessingError):
        process_gray(tmp_path / "missing.png", tmp_path / "out.png")


def test_gray_non_image_input(tmp_path):
    bogus = tmp_path / "notimage.jpg"
    bogus.write_bytes(b"not an image")
    with pytest.raises(ImageProcessingError):
        process_gray(bogus, tmp_path / "out.png")


def test_gray_unknown_output_extension(colour_image, tmp_path):
    with pytest.raises(ImageProcessingError):
        process_gray(colour_image, tmp_path / "out.unknownext")


def test_gray_jpeg_output(colour_image, tmp_path):
    out = tmp_path / "output.jpg"
    process_gray(colour_image, out)
    with Image.open(out) as img:
        assert img.format == "JPEG"
        assert img.mode == "L"


@pytest.mark.parametrize("size", [(5, 7), (40, 3), (1, 1)])
def test_resize_dimensions(colour_image, tmp_path, size):
    out = tmp_path / "resized.png"
    process_resize(colour_image, out, *size)
    with Image.open(out) as img:
        assert img.size == size


@pytest.mark.parametrize("size", [(0, 5), (5, 0), (-1, 4)])
def test_resize_invalid_size(colour_image, tmp_path, size):
    with pytest.raises(ImageProcessingError):
        process_resize(colour_image, tmp_path / "out.png", *size)


def test_resize_missing_input(tmp_path):
    with pytest.raises(ImageProcessingError):
        process_resize(tmp_path / "missing.png", tmp_path / "out.png", 4, 4)


def test_blur_keeps_size_and_smooths_edge(colour_image, tmp_path):
    out = tmp_path / "blur.png"
    process_blur(colour_image, out, 5, 5)
    with Image.open(out) as img:
        assert img.size == (20, 10)
        edge = img.getpixel((10, 5))
        assert 0 < edge[0] < 255
        assert img.getpixel((0, 5)) == (0, 0, 0)


def test_blur_uniform_image_unchanged(tmp_path):
    src = tmp_path / "flat.png"
    Image.new("RGB", (8, 8), (40, 80, 120)).save(src)
    out = tmp_path / "flat_blur.png"
    process_blur(src, out, 3, 3)
    with Image.open(out) as img:
        assert set(img.getdata()) == {(40, 80, 120)}


def test_blur_unit_kernel_is_identity(colour_image, tmp_path):
    out = tmp_path / "same.png"
    process_blur(colour_image, out, 1, 1)
    with Image.open(colour_image) as original, Image.open(out) as blurred:
        assert list(blurred.convert("RGB").getdata()) == list(original.convert("RGB").getdata())


def test_blur_invalid_size(colour_image, tmp_path):
    with pytest.raises(ImageProcessingError):
        process_blur(colour_image, tmp_path / "out.png", 0, 3)


def test_blur_missing_input(tmp_path):
    with pytest.raises(ImageProcessingError):
        process_blur(tmp_path / "missing.png", tmp_path / "out.png", 3, 3)