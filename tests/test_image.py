import pytest
from PIL import Image as PILImage

from brickbreaker.colors import Color
from brickbreaker.image import Image, ImageType


@pytest.fixture
def jpeg_path(tmp_path):
    path = tmp_path / "brick.jpg"
    PILImage.new("RGB", (8, 4), (255, 255, 255)).save(path, "JPEG", quality=95)
    return path


def test_empty_image():
    image = Image()
    assert image.width == 0
    assert image.height == 0
    assert image.image_type is None


def test_open_jpeg(jpeg_path):
    image = Image(jpeg_path)
    assert (image.width, image.height) == (8, 4)
    assert image.image_type is ImageType.JPEG
    colour = image.pixel(3, 2)
    assert min(colour.red, colour.green, colour.blue) >= 250


def test_open_replaces_contents(jpeg_path, tmp_path):
    other = tmp_path / "other.jpg"
    PILImage.new("RGB", (2, 3), (0, 0, 0)).save(other, "JPEG")
    image = Image(jpeg_path)
    image.open(other)
    assert (image.width, image.height) == (2, 3)
    assert max(image.pixel(1, 1).red, image.pixel(1, 1).blue) <= 5


def test_copy_is_independent(jpeg_path):
    image = Image(jpeg_path)
    duplicate = image.copy()
    assert duplicate.to_pil().tobytes() == image.to_pil().tobytes()
    assert duplicate.image_type is image.image_type
    image.open(jpeg_path)
    assert (duplicate.width, duplicate.height) == (image.width, image.height)


def test_from_pil_round_trip():
    picture = PILImage.new("RGB", (3, 2), (10, 20, 30))
    image = Image.from_pil(picture)
    assert image.image_type is ImageType.SCREEN
    assert image.pixel(2, 1) == Color(10, 20, 30)
    assert image.to_pil().tobytes() == picture.tobytes()


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        Image(tmp_path / "absent.jpg")


def test_non_jpeg_rejected(tmp_path):
    path = tmp_path / "brick.png"
    PILImage.new("RGB", (2, 2)).save(path, "PNG")
    with pytest.raises(ValueError):
        Image(path)


def test_garbage_rejected(tmp_path):
    path = tmp_path / "junk.jpg"
    path.write_bytes(b"not an image at all")
    with pytest.raises(ValueError):
        Image(path)


def test_screen_type_cannot_be_opened(jpeg_path):
    with pytest.raises(ValueError):
        Image(jpeg_path, ImageType.SCREEN)


@pytest.mark.parametrize("x, y", [(-1, 0), (8, 0), (0, 4)])
def test_pixel_out_of_bounds(jpeg_path, x, y):
    image = Image(jpeg_path)
    with pytest.raises(IndexError):
        image.pixel(x, y)