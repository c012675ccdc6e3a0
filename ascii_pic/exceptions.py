"""
ASCII-PIC - Errors
==================
Every failure raised by the library derives from ``AsciiPicError``.
"""

import os
from typing import Optional, Tuple, Union


class AsciiPicError(Exception):
    """Base class for all conversion errors."""


class InvalidOptionError(AsciiPicError, ValueError):
    """A conversion option failed type or range validation."""

    def __init__(self, field: str, valid_range: Optional[Tuple] = None,
                 message: Optional[str] = None):
        self.field = field
        self.valid_range = valid_range
        if message is None:
            if valid_range is not None:
                low, high = valid_range
                message = f"{field} must be a number between {low} and {high}"
            else:
                message = f"Invalid option: {field}"
        super().__init__(message)


class UnknownCharsetError(AsciiPicError, LookupError):
    """The requested charset name is not registered."""

    def __init__(self, name: object, available: Tuple[str, ...] = ()):
        self.name = name
        self.available = available
        message = f"Unknown charset: {name}"
        if available:
            message += f". Available: {', '.join(available)}"
        super().__init__(message)


class DecodeError(AsciiPicError):
    """The image source could not be decoded."""

    def __init__(self, source: str, message: Optional[str] = None):
        self.source = source
        super().__init__(message or f"Unable to decode image: {source}")


class InputNotFoundError(DecodeError):
    """The input path does not exist or is not readable."""

    def __init__(self, source: str):
        super().__init__(source, f"File not found: {source}")


class UnsupportedFormatError(DecodeError):
    """The file extension or the codec rejected the input."""

    def __init__(self, source: str, message: Optional[str] = None):
        super().__init__(source, message or f"Unsupported image format: {source}")


class ResizeError(AsciiPicError):
    """The computed target dimensions are degenerate."""

    def __init__(self, source: str, width: int, height: int):
        self.source = source
        self.width = width
        self.height = height
        super().__init__(
            f"Cannot resize {source} to {width}x{height}: "
            "target dimensions must be positive"
        )


class WriteError(AsciiPicError):
    """The ASCII art could not be written to disk."""

    def __init__(self, path: Union[str, os.PathLike], message: str):
        self.path = str(path)
        super().__init__(f"Failed to save file {self.path}: {message}")
