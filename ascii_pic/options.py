"""
ASCII-PIC - Conversion Options
==============================
The tunable parameters of a conversion and their validation.
"""

from dataclasses import asdict, dataclass, fields
from numbers import Integral, Real
from typing import Any, Dict, Mapping, Union

from ascii_pic.constants import (
    ASPECT_RATIO_RANGE,
    CONTRAST_RANGE,
    DEFAULT_ASPECT_RATIO,
    DEFAULT_CHARSET,
    DEFAULT_CONTRAST,
    DEFAULT_INVERT,
    DEFAULT_WIDTH,
    WIDTH_RANGE,
)
from ascii_pic.exceptions import InvalidOptionError


@dataclass(frozen=True)
class ConversionOptions:
    """Validated configuration for a single conversion."""

    width: int = DEFAULT_WIDTH                   # Output columns
    charset: str = DEFAULT_CHARSET               # Registry key
    contrast: float = DEFAULT_CONTRAST           # Exponent is 1/contrast
    aspect_ratio: float = DEFAULT_ASPECT_RATIO   # Vertical compression
    invert: bool = DEFAULT_INVERT

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


OptionsLike = Union[ConversionOptions, Mapping[str, Any], None]

_FIELD_NAMES = tuple(f.name for f in fields(ConversionOptions))


def _is_number(value: Any) -> bool:
    # bool is an int subclass but never a valid numeric option
    return isinstance(value, Real) and not isinstance(value, bool)


def _check_range(field: str, value: Any, valid_range, integer: bool = False) -> None:
    low, high = valid_range
    if integer:
        type_ok = isinstance(value, Integral) and not isinstance(value, bool)
    else:
        type_ok = _is_number(value)
    if not type_ok or not (low <= value <= high):
        raise InvalidOptionError(field, valid_range)


def validate_options(options: OptionsLike = None, **overrides: Any) -> ConversionOptions:
    """
    Merge options over the defaults and validate them.

    Args:
        options: A ConversionOptions, a mapping of option names, or None
        **overrides: Option values applied on top of ``options``

    Returns:
        A fully populated ConversionOptions

    Raises:
        InvalidOptionError: On an unknown key, a wrong type, or a value
            outside its valid range. Values are never clamped.

    The charset name is only type-checked here; whether it is registered is
    decided by ``get_charset`` when the conversion runs.
    """
    if isinstance(options, ConversionOptions):
        merged = options.to_dict()
    else:
        merged = asdict(ConversionOptions())
        if options is not None:
            if not isinstance(options, Mapping):
                raise InvalidOptionError(
                    'options', message='Options must be a mapping or ConversionOptions'
                )
            merged.update(options)
    merged.update(overrides)

    for key in merged:
        if key not in _FIELD_NAMES:
            raise InvalidOptionError(key, message=f"Unknown option: {key}")

    _check_range('width', merged['width'], WIDTH_RANGE, integer=True)
    _check_range('contrast', merged['contrast'], CONTRAST_RANGE)
    _check_range('aspect_ratio', merged['aspect_ratio'], ASPECT_RATIO_RANGE)

    if not isinstance(merged['charset'], str):
        raise InvalidOptionError('charset', message='charset must be a string')
    if not isinstance(merged['invert'], bool):
        raise InvalidOptionError('invert', message='invert must be a boolean')

    return ConversionOptions(
        width=int(merged['width']),
        charset=merged['charset'],
        contrast=float(merged['contrast']),
        aspect_ratio=float(merged['aspect_ratio']),
        invert=merged['invert'],
    )

