"""
ASCII-PIC - Decoding and Resampling
===================================
Turns an image source (path, encoded bytes, or PIL Image) into a
single-channel pixel grid at the target resolution.

Pipeline order is fixed: decode -> flatten transparency -> resize (Lanczos)
-> grayscale. Decoding is delegated to Pillow; SVG goes through cairosvg and
HEIF/HEIC through the pillow-heif opener when those are installed.
"""

import io
import logging
import os
from contextlib import contextmanager
from dataclasses import asdict, dataclass
from typing import Any, Dict, Iterator, Optional, Tuple, Union

import numpy as np
from PIL import Image, UnidentifiedImageError

from ascii_pic.constants import (
    BACKGROUND_COLOR,
    BUFFER_LABEL,
    IMAGE_LABEL,
    SVG_EXTENSIONS,
)
from ascii_pic.exceptions import (
    DecodeError,
    InputNotFoundError,
    ResizeError,
    UnsupportedFormatError,
)
from ascii_pic.utils import calculate_dimensions, is_supported_image_format

try:
    import cairosvg
except (ImportError, OSError):
    # OSError: cairosvg installed but the cairo shared library is missing
    cairosvg = None

logger = logging.getLogger(__name__)


ImageSource = Union[str, os.PathLike, bytes, bytearray, memoryview, Image.Image]

RESAMPLE_FILTER = Image.Resampling.LANCZOS


def _register_heif_opener() -> bool:
    try:
        from pillow_heif import register_heif_opener
    except ImportError:
        logger.debug("pillow-heif not installed, HEIF/HEIC input disabled")
        return False
    register_heif_opener()
    return True


HEIF_SUPPORT = _register_heif_opener()


# =============================================================================
# DATA TYPES
# =============================================================================

@dataclass(frozen=True)
class PixelGrid:
    """Resampled luminance values (0-255), row-major, shape (height, width)."""
    pixels: np.ndarray

    @property
    def width(self) -> int:
        return int(self.pixels.shape[1])

    @property
    def height(self) -> int:
        return int(self.pixels.shape[0])


@dataclass(frozen=True)
class ImageInfo:
    """Image metadata read without converting."""
    format: Optional[str]
    width: int
    height: int
    channels: int
    has_alpha: bool
    density: Optional[float] = None     # Horizontal DPI when recorded
    size: Optional[int] = None          # Encoded size in bytes

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


# =============================================================================
# SOURCE HANDLING
# =============================================================================

def describe_source(source: ImageSource) -> str:
    """Label used in errors and results for a source."""
    if isinstance(source, Image.Image):
        return IMAGE_LABEL
    if isinstance(source, (bytes, bytearray, memoryview)):
        return BUFFER_LABEL
    if not isinstance(source, (str, os.PathLike)):
        return f"<{type(source).__name__}>"
    return os.fspath(source)


def _is_svg_bytes(data: bytes) -> bool:
    head = data[:1024].lstrip().lower()
    return head.startswith(b'<svg') or (head.startswith(b'<?xml') and b'<svg' in head)


def _is_svg(source: ImageSource) -> bool:
    if isinstance(source, Image.Image):
        return False
    if isinstance(source, (bytes, bytearray, memoryview)):
        return _is_svg_bytes(bytes(source))
    ext = os.path.splitext(os.fspath(source))[1].lower()
    return ext in SVG_EXTENSIONS


def _check_path(path: str) -> None:
    if not os.path.isfile(path) or not os.access(path, os.R_OK):
        raise InputNotFoundError(path)
    if not is_supported_image_format(path):
        raise UnsupportedFormatError(path)


def _rasterize_svg(source: ImageSource, label: str) -> io.BytesIO:
    if cairosvg is None:
        raise UnsupportedFormatError(
            label, f"SVG support requires cairosvg (pip install cairosvg): {label}"
        )
    try:
        if isinstance(source, (bytes, bytearray, memoryview)):
            png_data = cairosvg.svg2png(bytestring=bytes(source))
        else:
            png_data = cairosvg.svg2png(url=os.fspath(source))
    except Exception as exc:
        # cairosvg surfaces XML and rendering failures with many exception types
        raise DecodeError(label, f"Unable to rasterize SVG {label}: {exc}") from exc
    return io.BytesIO(png_data)


def _decode(fp, label: str, load: bool) -> Image.Image:
    try:
        image = Image.open(fp)
    except UnidentifiedImageError as exc:
        raise UnsupportedFormatError(
            label, f"Unsupported or corrupted image format: {label}"
        ) from exc
    except FileNotFoundError as exc:
        raise InputNotFoundError(label) from exc
    except (OSError, ValueError, Image.DecompressionBombError) as exc:
        raise DecodeError(label, f"Unable to read image file {label}: {exc}") from exc

    if load:
        try:
            image.load()
        except (OSError, SyntaxError, ValueError, Image.DecompressionBombError) as exc:
            # SyntaxError: some plugins report corrupt chunks this way
            image.close()
            raise DecodeError(label, f"Image decoding failed for {label}: {exc}") from exc
    return image


@contextmanager
def open_image(source: ImageSource, load: bool = True) -> Iterator[Image.Image]:
    """
    Open an image source as a PIL Image.

    Files opened here are closed when the block exits. A PIL Image passed in
    directly is yielded unchanged and left open.

    Raises:
        InputNotFoundError: Path missing or unreadable
        UnsupportedFormatError: Extension or codec rejected the input
        DecodeError: Codec failed while parsing the data
    """
    if isinstance(source, Image.Image):
        yield source
        return

    label = describe_source(source)
    if not isinstance(source, (str, os.PathLike, bytes, bytearray, memoryview)):
        raise UnsupportedFormatError(
            label, f"Unsupported image source type: {type(source).__name__}"
        )
    if not isinstance(source, (bytes, bytearray, memoryview)):
        _check_path(label)

    if _is_svg(source):
        fp = _rasterize_svg(source, label)
    elif isinstance(source, (bytes, bytearray, memoryview)):
        fp = io.BytesIO(bytes(source))
    else:
        fp = label

    image = _decode(fp, label, load)
    try:
        yield image
    finally:
        image.close()


# =============================================================================
# RESAMPLING
# =============================================================================

def _rescale_to_8bit(image: Image.Image) -> Image.Image:
    """Scale 16-bit, 32-bit integer or float luminance down to mode L."""
    arr = np.asarray(image, dtype=np.float64)
    if image.mode == 'F':
        # Float data is taken as 0-1 unless it is already in 8-bit range
        peak = 1.0 if arr.size == 0 or arr.max() <= 1.0 else 255.0
    else:
        peak = 65535.0
    scaled = np.rint(np.clip(arr / peak, 0.0, 1.0) * 255.0)
    return Image.fromarray(scaled.astype(np.uint8), 'L')


def _flatten(image: Image.Image) -> Image.Image:
    """Composite transparent images onto white, normalize to L or RGB."""
    has_alpha = image.mode in ('RGBA', 'LA', 'PA') or (
        image.mode == 'P' and 'transparency' in image.info
    )
    if has_alpha:
        rgba = image.convert('RGBA')
        background = Image.new('RGB', rgba.size, BACKGROUND_COLOR)
        background.paste(rgba, mask=rgba.getchannel('A'))
        return background
    if image.mode in ('L', 'RGB'):
        return image
    if image.mode == '1':
        return image.convert('L')
    if image.mode in ('I', 'F') or image.mode.startswith('I;16'):
        return _rescale_to_8bit(image)
    return image.convert('RGB')


def resample_to_grid(image: Image.Image, width: int, aspect_ratio: float,
                     label: str = IMAGE_LABEL) -> PixelGrid:
    """
    Resize a decoded image and reduce it to luminance.

    Args:
        image: Decoded image
        width: Target columns
        aspect_ratio: Vertical compression factor
        label: Source label for error messages

    Returns:
        PixelGrid of shape (height, width)

    Raises:
        ResizeError: If the source is empty or the computed height is not
            positive
    """
    img_width, img_height = image.size
    if img_width <= 0 or img_height <= 0:
        raise ResizeError(label, img_width, img_height)

    dims = calculate_dimensions(img_width, img_height, width, aspect_ratio)
    if dims.height <= 0:
        raise ResizeError(label, dims.width, dims.height)

    logger.debug("Resampling %s from %dx%d (%s) to %dx%d",
                 label, img_width, img_height, image.mode, dims.width, dims.height)

    flat = _flatten(image)
    resized = flat.resize((dims.width, dims.height), RESAMPLE_FILTER)
    gray = resized if resized.mode == 'L' else resized.convert('L')

    return PixelGrid(np.array(gray, dtype=np.uint8))


def load_pixel_grid(source: ImageSource, width: int, aspect_ratio: float) -> PixelGrid:
    """Decode ``source`` and resample it to a PixelGrid ``width`` columns wide."""
    label = describe_source(source)
    with open_image(source) as image:
        return resample_to_grid(image, width, aspect_ratio, label)


def _source_size(source: ImageSource) -> Optional[int]:
    if isinstance(source, Image.Image):
        return None
    if isinstance(source, (bytes, bytearray, memoryview)):
        return len(source)
    return os.path.getsize(source)


def _density(image: Image.Image) -> Optional[float]:
    dpi: Optional[Tuple[float, float]] = image.info.get('dpi')
    if not dpi:
        return None
    return float(dpi[0])


def read_image_info(source: ImageSource) -> ImageInfo:
    """Read format, size and channel layout without decoding pixel data."""
    with open_image(source, load=False) as image:
        if _is_svg(source):
            fmt = 'svg'
        else:
            fmt = image.format.lower() if image.format else None
        bands = image.getbands()
        return ImageInfo(
            format=fmt,
            width=image.width,
            height=image.height,
            channels=len(bands),
            has_alpha='A' in bands or 'transparency' in image.info,
            density=_density(image),
            size=_source_size(source),
        )
