"""
ASCII-PIC - Conversion
======================
Composes option validation, decoding, resampling and brightness mapping
into whole-image conversions.

``convert_to_ascii``, ``preview_ascii`` and ``get_image_info`` raise typed
``AsciiPicError`` subclasses. ``convert_and_save`` never raises: failures
come back as a ``ConversionResult`` with ``success=False``.
"""

import logging
import os
import time
from dataclasses import asdict, dataclass
from typing import Any, Dict, Optional

from PIL import Image

from ascii_pic.charsets import get_charset
from ascii_pic.constants import DEFAULT_PREVIEW_LINES, TRUNCATION_MARKER
from ascii_pic.exceptions import AsciiPicError, InvalidOptionError, WriteError
from ascii_pic.mapper import pixels_to_ascii
from ascii_pic.options import OptionsLike, validate_options
from ascii_pic.resampler import (
    ImageInfo,
    ImageSource,
    describe_source,
    load_pixel_grid,
    read_image_info,
)
from ascii_pic.utils import PathType, format_file_size, generate_output_path

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ConversionResult:
    """Outcome of ``convert_and_save``."""
    success: bool
    input_file: str
    output_file: str
    processing_time: float                   # Seconds
    file_size: Optional[int] = None          # Bytes written
    lines: Optional[int] = None
    characters: Optional[int] = None
    error: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    def summary(self) -> str:
        """One-line human readable description."""
        if not self.success:
            return f"FAILED {self.input_file}: {self.error}"
        return (
            f"{self.input_file} -> {self.output_file} "
            f"({self.lines} lines, {format_file_size(self.file_size)}, "
            f"{self.processing_time * 1000:.0f} ms)"
        )


# =============================================================================
# CORE FUNCTIONS
# =============================================================================

def convert_to_ascii(source: ImageSource, options: OptionsLike = None,
                     **overrides: Any) -> str:
    """
    Convert an image to ASCII art.

    Args:
        source: Image path, encoded image bytes, or a PIL Image
        options: ConversionOptions or a mapping of option names
        **overrides: Individual option values (width, charset, contrast,
            aspect_ratio, invert)

    Returns:
        Rows of ``width`` glyphs, each ending with a newline

    Raises:
        InvalidOptionError, UnknownCharsetError, InputNotFoundError,
        UnsupportedFormatError, DecodeError, ResizeError
    """
    opts = validate_options(options, **overrides)
    charset = get_charset(opts.charset)

    grid = load_pixel_grid(source, opts.width, opts.aspect_ratio)
    logger.debug("Mapping %dx%d grid from %s with charset %r",
                 grid.width, grid.height, describe_source(source), charset.name)

    return pixels_to_ascii(grid, charset, opts.contrast, opts.invert)


def save_to_file(ascii_art: str, file_path: PathType) -> None:
    """
    Write ASCII art to a UTF-8 text file with LF line endings.

    Raises:
        WriteError: If the file cannot be written
    """
    try:
        with open(file_path, 'w', encoding='utf-8', newline='\n') as f:
            f.write(ascii_art)
    except OSError as exc:
        raise WriteError(file_path, exc.strerror or str(exc)) from exc


def _ensure_parent_dir(output_path: PathType) -> None:
    parent = os.path.dirname(os.path.abspath(os.fspath(output_path)))
    try:
        os.mkdir(parent)
    except FileExistsError:
        pass
    except OSError as exc:
        raise WriteError(output_path, exc.strerror or str(exc)) from exc


def _check_output_path(output_path: PathType) -> None:
    if not isinstance(output_path, (str, os.PathLike)):
        raise WriteError(repr(output_path), "output path must be str or os.PathLike")


def convert_and_save(source: ImageSource, output_path: PathType,
                     options: OptionsLike = None, create_dir: bool = False,
                     **overrides: Any) -> ConversionResult:
    """
    Convert an image and write the result to ``output_path``.

    Never raises for conversion or write failures; check ``result.success``.

    Args:
        source: Image path, encoded image bytes, or a PIL Image
        output_path: Destination text file
        options: ConversionOptions or a mapping of option names
        create_dir: Create the parent directory of ``output_path`` if missing
            (a single level, not a whole tree)
        **overrides: Individual option values

    Returns:
        ConversionResult with size, line and timing statistics
    """
    start = time.perf_counter()
    input_file = describe_source(source)
    if isinstance(output_path, (str, os.PathLike)):
        output_file = os.fspath(output_path)
    else:
        output_file = repr(output_path)

    try:
        _check_output_path(output_path)
        ascii_art = convert_to_ascii(source, options, **overrides)
        if create_dir:
            _ensure_parent_dir(output_path)
        save_to_file(ascii_art, output_path)
        file_size = os.path.getsize(output_path)
    except AsciiPicError as exc:
        logger.warning("Conversion of %s failed: %s", input_file, exc)
        return ConversionResult(
            success=False,
            input_file=input_file,
            output_file=output_file,
            processing_time=time.perf_counter() - start,
            error=str(exc),
        )
    except Exception as exc:
        logger.exception("Unexpected error converting %s", input_file)
        return ConversionResult(
            success=False,
            input_file=input_file,
            output_file=output_file,
            processing_time=time.perf_counter() - start,
            error=f"Image conversion failed: {exc}",
        )

    logger.debug("Saved %s (%s)", output_file, format_file_size(file_size))
    return ConversionResult(
        success=True,
        input_file=input_file,
        output_file=output_file,
        processing_time=time.perf_counter() - start,
        file_size=file_size,
        lines=ascii_art.count('\n'),
        characters=len(ascii_art),
    )


def preview_ascii(source: ImageSource, options: OptionsLike = None,
                  preview_lines: int = DEFAULT_PREVIEW_LINES,
                  **overrides: Any) -> str:
    """
    Convert an image and keep only the first ``preview_lines`` rows.

    A truncation marker line is appended when rows were dropped.
    """
    if isinstance(preview_lines, bool) or not isinstance(preview_lines, int) \
            or preview_lines < 1:
        raise InvalidOptionError('preview_lines',
                                 message='preview_lines must be a positive integer')

    rows = convert_to_ascii(source, options, **overrides).split('\n')[:-1]
    preview = '\n'.join(rows[:preview_lines])
    if len(rows) > preview_lines:
        preview += '\n' + TRUNCATION_MARKER
    return preview


def get_image_info(source: ImageSource) -> ImageInfo:
    """
    Read image metadata (format, width, height, channels, alpha, density,
    encoded size) without converting.
    """
    return read_image_info(source)


# =============================================================================
# OBJECT API
# =============================================================================

class AsciiPic:
    """Converter holding default options; each call may override them."""

    def __init__(self, options: OptionsLike = None, **defaults: Any):
        """Validate and store the default options."""
        self.default_options = validate_options(options, **defaults)

    def __repr__(self) -> str:
        return f"AsciiPic({self.default_options!r})"

    def with_options(self, **overrides: Any) -> 'AsciiPic':
        """Return a new converter with ``overrides`` applied to the defaults."""
        return AsciiPic(self.default_options, **overrides)

    def convert(self, source: ImageSource, **overrides: Any) -> str:
        """Convert a single image to ASCII art."""
        return convert_to_ascii(source, self.default_options, **overrides)

    def convert_to_file(self, source: ImageSource,
                        output: Optional[PathType] = None,
                        create_dir: bool = False,
                        **overrides: Any) -> ConversionResult:
        """
        Convert and save an image.

        When ``output`` is omitted the text is written next to the input as
        ``<name>.ascii.txt``, which requires ``source`` to be a path.
        """
        if output is None:
            if isinstance(source, (bytes, bytearray, memoryview, Image.Image)):
                raise InvalidOptionError(
                    'output', message='An output path is required for in-memory input'
                )
            output = generate_output_path(source)
        return convert_and_save(source, output, self.default_options,
                                create_dir=create_dir, **overrides)

    def preview(self, source: ImageSource,
                preview_lines: int = DEFAULT_PREVIEW_LINES,
                **overrides: Any) -> str:
        """Convert and truncate to ``preview_lines`` rows."""
        return preview_ascii(source, self.default_options, preview_lines, **overrides)

    def get_image_info(self, source: ImageSource) -> ImageInfo:
        return get_image_info(source)
