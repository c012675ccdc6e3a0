"""
ASCII-PIC - Brightness Mapping
==============================
Maps a luminance grid to rows of glyphs.

For each pixel value ``v``:

    b   = (v / 255) ** (1 / contrast)     clamped to [0, 1]
    b   = 1 - b                           if invert
    idx = floor(b * (N - 1))
    glyph = charset[N - 1 - idx]

so a white pixel selects the first glyph of the charset and a black pixel
the last one (unless inverted).
"""

from typing import List

import numpy as np

from ascii_pic.charsets import Charset
from ascii_pic.resampler import PixelGrid


def brightness_curve(pixels: np.ndarray, contrast: float,
                     invert: bool = False) -> np.ndarray:
    """
    Normalize pixel values and apply the contrast power curve.

    Args:
        pixels: Luminance values in [0, 255]
        contrast: Curve parameter, the exponent applied is ``1 / contrast``
        invert: Flip the curve output

    Returns:
        float64 array of brightness values in [0, 1]
    """
    brightness = np.asarray(pixels, dtype=np.float64) / 255.0
    brightness = np.power(brightness, 1.0 / contrast)
    brightness = np.clip(brightness, 0.0, 1.0)

    if invert:
        brightness = 1.0 - brightness

    return brightness


def glyph_indices(brightness: np.ndarray, num_glyphs: int) -> np.ndarray:
    """Charset positions for brightness values, ``N - 1 - floor(b * (N - 1))``."""
    idx = np.floor(brightness * (num_glyphs - 1)).astype(np.intp)
    return (num_glyphs - 1) - idx


def map_rows(grid: PixelGrid, charset: Charset, contrast: float,
             invert: bool = False) -> List[str]:
    """Convert a PixelGrid to one string per pixel row."""
    brightness = brightness_curve(grid.pixels, contrast, invert)
    indices = glyph_indices(brightness, len(charset))
    glyphs = np.array(charset.glyphs, dtype=object)

    return [''.join(row) for row in glyphs[indices]]


def pixels_to_ascii(grid: PixelGrid, charset: Charset, contrast: float,
                    invert: bool = False) -> str:
    """
    Render a PixelGrid as ASCII art.

    Returns:
        ``height`` rows of ``width`` glyphs, each terminated by ``\\n``
    """
    return ''.join(row + '\n' for row in map_rows(grid, charset, contrast, invert))
