"""
ASCII-PIC - Constants
=====================
Defaults, valid ranges and format tables shared across the package.
"""

from typing import Tuple


# =============================================================================
# OPTION DEFAULTS
# =============================================================================

DEFAULT_WIDTH: int = 80
DEFAULT_CHARSET: str = 'detailed'
DEFAULT_CONTRAST: float = 1.2
DEFAULT_ASPECT_RATIO: float = 0.5        # Terminal cells are ~2x taller than wide
DEFAULT_INVERT: bool = False

DEFAULT_PREVIEW_LINES: int = 10


# =============================================================================
# OPTION RANGES (inclusive)
# =============================================================================

WIDTH_RANGE: Tuple[int, int] = (10, 500)
CONTRAST_RANGE: Tuple[float, float] = (0.1, 5.0)
ASPECT_RATIO_RANGE: Tuple[float, float] = (0.1, 2.0)


# =============================================================================
# FORMATS
# =============================================================================

SUPPORTED_EXTENSIONS: Tuple[str, ...] = (
    '.jpg', '.jpeg', '.png', '.webp', '.gif', '.tiff', '.tif',
    '.bmp', '.svg', '.avif', '.heif', '.heic',
)

SVG_EXTENSIONS: Tuple[str, ...] = ('.svg',)

# Background used when flattening transparent images
BACKGROUND_COLOR: Tuple[int, int, int] = (255, 255, 255)


# =============================================================================
# LABELS
# =============================================================================

BUFFER_LABEL: str = '[Buffer]'
IMAGE_LABEL: str = '[Image]'
TRUNCATION_MARKER: str = '... (truncated)'
FILE_SIZE_UNITS: Tuple[str, ...] = ('B', 'KB', 'MB', 'GB')
