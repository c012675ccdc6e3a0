import numpy as np
import pytest

from ascii_pic.charsets import get_charset
from ascii_pic.mapper import brightness_curve, glyph_indices, map_rows, pixels_to_ascii
from ascii_pic.resampler import PixelGrid


def grid(rows):
    return PixelGrid(np.array(rows, dtype=np.uint8))


def test_white_selects_first_glyph_and_black_last():
    charset = get_charset('detailed')
    text = pixels_to_ascii(grid([[255, 0]]), charset, contrast=1.0)
    assert text == '@ \n'


def test_invert_swaps_extremes():
    charset = get_charset('detailed')
    text = pixels_to_ascii(grid([[255, 0]]), charset, contrast=1.0, invert=True)
    assert text == ' @\n'


def test_midtone_index_uses_floor_and_reversal():
    charset = get_charset('detailed')
    # 128/255 * 9 = 4.52 -> idx 4 -> position 9 - 4 = 5
    text = pixels_to_ascii(grid([[128]]), charset, contrast=1.0)
    assert text == '=\n'


def test_contrast_is_a_power_curve():
    pixels = np.array([[64, 128, 192]], dtype=np.uint8)
    expected = np.power(pixels / 255.0, 1 / 2.5)
    np.testing.assert_array_equal(brightness_curve(pixels, 2.5), expected)


def test_brightness_stays_in_unit_interval():
    pixels = np.arange(256, dtype=np.uint8).reshape(16, 16)
    for contrast in (0.1, 1.0, 5.0):
        values = brightness_curve(pixels, contrast)
        assert values.min() >= 0.0
        assert values.max() <= 1.0


def test_glyph_indices_cover_full_range():
    indices = glyph_indices(np.array([0.0, 0.5, 1.0]), 10)
    assert indices.tolist() == [9, 5, 0]


def test_inversion_law():
    pixels = np.arange(256, dtype=np.uint8).reshape(8, 32)
    n = len(get_charset('classic'))
    plain = brightness_curve(pixels, 1.7)
    inverted = glyph_indices(brightness_curve(pixels, 1.7, invert=True), n)
    np.testing.assert_array_equal(inverted, glyph_indices(1.0 - plain, n))


def test_rows_have_exact_width_and_trailing_newline():
    pixels = np.random.default_rng(7).integers(0, 256, size=(6, 13), dtype=np.uint8)
    text = pixels_to_ascii(PixelGrid(pixels), get_charset('blocks'), contrast=1.2)
    assert text.endswith('\n')
    rows = text.split('\n')[:-1]
    assert len(rows) == 6
    assert all(len(row) == 13 for row in rows)


@pytest.mark.parametrize('name', ['detailed', 'numbers', 'retro'])
def test_only_charset_glyphs_are_emitted(name):
    charset = get_charset(name)
    pixels = np.arange(256, dtype=np.uint8).reshape(16, 16)
    rows = map_rows(PixelGrid(pixels), charset, contrast=0.8)
    assert set(''.join(rows)) <= set(charset.glyphs)
    # A full 0-255 ramp reaches both ends of the palette
    assert charset.darkest in rows[-1]
    assert charset.lightest in rows[0]


def test_empty_grid_renders_empty_string():
    empty = PixelGrid(np.zeros((0, 10), dtype=np.uint8))
    assert pixels_to_ascii(empty, get_charset('simple'), contrast=1.0) == ''
