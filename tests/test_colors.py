import pytest

from sunvale.components.colors import COLOR_HEX, ColorPalette, ColorValue, hex_to_rgb


def test_color_values_run_from_one_to_eight():
    assert [int(color) for color in ColorValue] == list(range(1, 9))
    assert ColorValue.RED < ColorValue.BLACK


def test_palette_names_follow_enumeration_order():
    palette = ColorPalette()
    assert palette.names() == ["Red", "Orange", "Yellow", "Green", "Blue", "Violet", "White", "Black"]


def test_palette_round_trips_names_and_values():
    palette = ColorPalette()
    for name in palette.names():
        assert palette.name_of(palette.value_of(name)) == name


def test_unknown_names_and_values_raise():
    palette = ColorPalette()
    with pytest.raises(KeyError):
        palette.value_of("Magenta")
    with pytest.raises(KeyError):
        palette.name_of(9)
    assert not palette.is_known("Magenta")
    assert not palette.is_known(None)


def test_swatches_match_hex_codes():
    palette = ColorPalette()
    assert palette.swatch_for("Red") == (0xEF, 0x44, 0x44)
    assert palette.swatch_for("Black") == hex_to_rgb(COLOR_HEX["Black"])


def test_hex_to_rgb_rejects_short_codes():
    with pytest.raises(ValueError):
        hex_to_rgb("#fff")


def test_step_wraps_in_both_directions():
    palette = ColorPalette()
    assert palette.step("Black", 1) == "Red"
    assert palette.step("Red", -1) == "Black"
    assert palette.step("Green", 2) == "Violet"
