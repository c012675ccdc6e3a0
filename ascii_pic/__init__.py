"""
ASCII-PIC - Image to ASCII Art
==============================
Converts raster images to text by mapping pixel brightness to glyphs.

Example:
    from ascii_pic import convert_to_ascii, AsciiPic

    print(convert_to_ascii("photo.jpg", width=100, charset="blocks"))

    converter = AsciiPic(width=60, invert=True)
    result = converter.convert_to_file("photo.jpg")
    print(result.summary())

For debug logging, enable with:

    import logging
    logging.basicConfig(level=logging.DEBUG)
"""

import logging

# Silent unless the application configures logging
logger = logging.getLogger("ascii_pic")
logger.addHandler(logging.NullHandler())

from ascii_pic.charsets import (
    CHARSETS,
    Charset,
    get_available_charsets,
    get_charset,
    get_charset_info,
    is_valid_charset,
)
from ascii_pic.converter import (
    AsciiPic,
    ConversionResult,
    convert_and_save,
    convert_to_ascii,
    get_image_info,
    preview_ascii,
    save_to_file,
)
from ascii_pic.exceptions import (
    AsciiPicError,
    DecodeError,
    InputNotFoundError,
    InvalidOptionError,
    ResizeError,
    UnknownCharsetError,
    UnsupportedFormatError,
    WriteError,
)
from ascii_pic.mapper import brightness_curve, glyph_indices, pixels_to_ascii
from ascii_pic.options import ConversionOptions, validate_options
from ascii_pic.resampler import ImageInfo, PixelGrid, load_pixel_grid
from ascii_pic.utils import (
    Dimensions,
    calculate_dimensions,
    format_file_size,
    generate_output_path,
    is_supported_image_format,
)

__version__ = "1.0.0"

__all__ = [
    # Main class
    'AsciiPic',

    # Core functions
    'convert_to_ascii',
    'convert_and_save',
    'save_to_file',
    'preview_ascii',
    'get_image_info',

    # Data types
    'ConversionOptions',
    'ConversionResult',
    'ImageInfo',
    'PixelGrid',
    'Dimensions',

    # Charsets
    'CHARSETS',
    'Charset',
    'get_available_charsets',
    'get_charset',
    'is_valid_charset',
    'get_charset_info',

    # Pipeline stages
    'validate_options',
    'load_pixel_grid',
    'brightness_curve',
    'glyph_indices',
    'pixels_to_ascii',

    # Utilities
    'is_supported_image_format',
    'generate_output_path',
    'format_file_size',
    'calculate_dimensions',

    # Errors
    'AsciiPicError',
    'InvalidOptionError',
    'UnknownCharsetError',
    'DecodeError',
    'InputNotFoundError',
    'UnsupportedFormatError',
    'ResizeError',
    'WriteError',
]
