import pytest

from brickbreaker.colors import (
    BLACK,
    BLUE,
    DARKSLATEGRAY,
    DARKSLATEGREY,
    LAVENDER,
    RED,
    WHITE,
    Color,
)


def test_default_is_black():
    assert Color() == BLACK


def test_named_constant_values_from_palette():
    assert LAVENDER == Color(230, 230, 250)
    assert BLUE == Color(0, 0, 255)


def test_equality_and_inequality():
    assert Color(1, 2, 3) == Color(1, 2, 3)
    assert (Color(1, 2, 3) != Color(1, 2, 4)) is True
    assert DARKSLATEGRAY == DARKSLATEGREY


def test_colors_are_hashable():
    assert len({WHITE, Color(255, 255, 255), BLACK}) == 2


def test_from_floats_full_intensity():
    assert Color.from_floats(1.0, 0.0, 0.0) == RED
    assert Color.from_floats(1.0, 1.0, 1.0) == WHITE


def test_from_floats_truncates():
    assert Color.from_floats(0.5, 0.0, 0.0).red == 127


def test_as_floats_extremes():
    assert WHITE.as_floats() == (1.0, 1.0, 1.0)
    assert BLACK.as_floats() == (0.0, 0.0, 0.0)


def test_as_floats_in_unit_range():
    assert all(0.0 <= value <= 1.0 for value in LAVENDER.as_floats())


@pytest.mark.parametrize("components", [(256, 0, 0), (0, -1, 0), (0, 0, 1.5)])
def test_invalid_components_rejected(components):
    with pytest.raises(ValueError):
        Color(*components)


@pytest.mark.parametrize("intensities", [(1.5, 0.0, 0.0), (0.0, -0.1, 0.0)])
def test_from_floats_out_of_range(intensities):
    with pytest.raises(ValueError):
        Color.from_floats(*intensities)