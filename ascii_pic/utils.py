"""
ASCII-PIC - Utilities
=====================
Path, size and dimension helpers.
"""

import math
import os
from dataclasses import dataclass
from typing import Optional, Union

from ascii_pic.constants import FILE_SIZE_UNITS, SUPPORTED_EXTENSIONS


PathType = Union[str, os.PathLike]


@dataclass(frozen=True)
class Dimensions:
    """Target size of an ASCII rendering."""
    width: int
    height: int
    original_ratio: float               # Source width / height
    new_ratio: Optional[float] = None   # Target width / height, None if height is 0


def is_supported_image_format(file_path: PathType) -> bool:
    """Check the file extension against the supported raster formats."""
    ext = os.path.splitext(os.fspath(file_path))[1].lower()
    return ext in SUPPORTED_EXTENSIONS


def generate_output_path(input_path: PathType,
                         output_dir: Optional[PathType] = None,
                         suffix: str = 'ascii') -> str:
    """
    Build the text file path for an input image.

    ``photos/cat.png`` becomes ``photos/cat.ascii.txt``, or
    ``<output_dir>/cat.ascii.txt`` when an output directory is given.
    """
    input_path = os.fspath(input_path)
    base_name = os.path.splitext(os.path.basename(input_path))[0]
    filename = f"{base_name}.{suffix}.txt"

    if output_dir:
        return os.path.join(os.fspath(output_dir), filename)
    return os.path.join(os.path.dirname(input_path), filename)


def format_file_size(num_bytes: int) -> str:
    """Format a byte count for display, e.g. ``1.5 KB``."""
    if num_bytes == 0:
        return '0 B'

    i = min(int(math.floor(math.log(num_bytes, 1024))), len(FILE_SIZE_UNITS) - 1)
    size = num_bytes / math.pow(1024, i)
    return f"{size:.1f} {FILE_SIZE_UNITS[i]}"


def calculate_dimensions(img_width: int, img_height: int,
                         target_width: int, aspect_ratio: float) -> Dimensions:
    """
    Compute the resampled size for a conversion.

    The height keeps the source proportions, scaled by ``aspect_ratio`` to
    compensate for character cells being taller than they are wide.
    """
    target_height = math.floor(img_height / img_width * target_width * aspect_ratio)

    return Dimensions(
        width=target_width,
        height=target_height,
        original_ratio=img_width / img_height,
        new_ratio=target_width / target_height if target_height > 0 else None,
    )
