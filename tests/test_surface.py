import pytest

from brickbreaker.colors import BLACK, BLUE, RED, WHITE, Color
from brickbreaker.image import Image, ImageType
from brickbreaker.surface import Font, FontFamily, FontStyle, Surface


def _bytes(surface):
    return surface.to_pil().tobytes()


def test_default_font():
    surface = Surface(20, 20)
    assert surface.font == Font(10, FontStyle.PLAIN, FontFamily.SWISS, None)


def test_set_font_drops_strikeout():
    surface = Surface(20, 20)
    font = surface.set_font(12, FontStyle.BOLD | FontStyle.STRIKEOUT, FontFamily.ROMAN)
    assert font.style == FontStyle.BOLD
    assert surface.font.size == 12
    assert surface.font.family is FontFamily.ROMAN


def test_set_font_rejects_nonpositive_size():
    with pytest.raises(ValueError):
        Surface(20, 20).set_font(0, FontStyle.PLAIN, FontFamily.SWISS)


def test_draw_string_uses_pen_colour():
    surface = Surface(120, 40)
    surface.set_pen(BLACK)
    surface.draw_string(5, 5, "HELLO")
    colours = {surface.get_color(x, y) for x in range(120) for y in range(40)}
    assert BLACK in colours


def test_draw_empty_string_changes_nothing():
    surface = Surface(30, 30)
    before = _bytes(surface)
    surface.draw_string(2, 2, "")
    assert _bytes(surface) == before


def test_string_size_grows_with_text():
    surface = Surface(10, 10)
    short_w, _ = surface.string_size("ab")
    long_w, _ = surface.string_size("abababab")
    assert long_w > short_w > 0
    assert surface.string_size("") == (0, 0)


def test_number_sizes_match_their_text():
    surface = Surface(10, 10)
    assert surface.integer_size(42) == surface.string_size("42")
    assert surface.double_size(1.5) == surface.string_size("1.500000")


def test_draw_integer_matches_draw_string():
    a = Surface(80, 30)
    b = Surface(80, 30)
    a.set_pen(BLUE)
    b.set_pen(BLUE)
    a.draw_integer(3, 3, 1234)
    b.draw_string(3, 3, "1234")
    assert _bytes(a) == _bytes(b)


def test_draw_double_matches_draw_string():
    a = Surface(120, 30)
    b = Surface(120, 30)
    a.draw_double(1, 1, 2.25)
    b.draw_string(1, 1, "2.250000")
    assert _bytes(a) == _bytes(b)


def test_store_image_round_trip():
    surface = Surface(20, 20)
    surface.set_pen(RED)
    surface.set_brush(RED)
    surface.draw_rectangle(5, 5, 10, 10)
    stored = surface.store_image(4, 4, 8, 8)
    assert stored.image_type is ImageType.SCREEN
    assert (stored.width, stored.height) == (8, 8)
    for x in range(8):
        for y in range(8):
            assert stored.pixel(x, y) == surface.get_color(x + 4, y + 4)


def test_draw_image_copies_pixels():
    source = Surface(10, 10)
    source.set_pen(BLUE)
    source.set_brush(BLUE)
    source.draw_rectangle(0, 0, 5, 5)
    image = source.store_image(0, 0, 10, 10)
    target = Surface(30, 30)
    target.draw_image(image, 7, 9)
    for x in range(10):
        for y in range(10):
            assert target.get_color(x + 7, y + 9) == image.pixel(x, y)


def test_draw_image_scales():
    source = Surface(2, 2, background=Color(10, 20, 30))
    image = source.store_image(0, 0, 2, 2)
    target = Surface(10, 10)
    target.draw_image(image, 1, 1, 6, 6)
    assert target.get_color(6, 6) == Color(10, 20, 30)
    assert target.get_color(7, 7) == WHITE


def test_draw_empty_image_does_nothing():
    surface = Surface(10, 10)
    before = _bytes(surface)
    surface.draw_image(Image(), 0, 0)
    assert _bytes(surface) == before


def test_store_image_outside_raises():
    surface = Surface(10, 10)
    with pytest.raises(ValueError):
        surface.store_image(5, 5, 6, 2)
    with pytest.raises(ValueError):
        surface.store_image(-1, 0, 2, 2)