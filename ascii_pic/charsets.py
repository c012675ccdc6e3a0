"""
ASCII-PIC - Character Sets
==========================
Named glyph palettes used for brightness mapping.

Glyphs are ordered from darkest to lightest. The registry is built once at
import time and is read-only afterwards, so it can be shared freely between
concurrent conversions.
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Dict, List, Mapping, Tuple

from ascii_pic.exceptions import UnknownCharsetError


@dataclass(frozen=True)
class Charset:
    """An ordered, dark-to-light sequence of glyphs."""
    name: str
    glyphs: Tuple[str, ...]

    def __post_init__(self):
        if len(self.glyphs) < 2:
            raise ValueError(f"Charset {self.name!r} needs at least two glyphs")

    @classmethod
    def from_string(cls, name: str, chars: str) -> 'Charset':
        return cls(name, tuple(chars))

    @property
    def chars(self) -> str:
        return ''.join(self.glyphs)

    @property
    def darkest(self) -> str:
        return self.glyphs[0]

    @property
    def lightest(self) -> str:
        return self.glyphs[-1]

    def __len__(self) -> int:
        return len(self.glyphs)

    def __getitem__(self, index: int) -> str:
        return self.glyphs[index]


# =============================================================================
# REGISTRY
# =============================================================================

_PRESETS: Tuple[Tuple[str, str], ...] = (
    ('detailed', "@%#*+=-:. "),           # 10-level gradient
    ('blocks', "█▉▊▋▌▍▎▏ "),              # Unicode partial blocks
    ('classic', "@#S%?*+;:,."),
    ('simple', "██▓▒░ "),                 # High contrast shades
    ('minimal', "█▓░ "),                  # For small outputs
    ('numbers', "9876543210 "),
    ('binary', "█ "),
    ('retro', "▓▒░ "),
)

CHARSETS: Mapping[str, Charset] = MappingProxyType({
    name: Charset.from_string(name, chars) for name, chars in _PRESETS
})


def get_available_charsets() -> List[str]:
    """Return the registered charset names in registration order."""
    return list(CHARSETS)


def get_charset(name: str) -> Charset:
    """
    Look up a charset by name.

    Args:
        name: Registered charset name

    Returns:
        The matching Charset

    Raises:
        UnknownCharsetError: If no charset is registered under ``name``
    """
    if not is_valid_charset(name):
        raise UnknownCharsetError(name, tuple(CHARSETS))
    return CHARSETS[name]


def is_valid_charset(name: object) -> bool:
    """Check whether ``name`` is a registered charset."""
    return isinstance(name, str) and name in CHARSETS


def get_charset_info() -> List[Dict[str, object]]:
    """Describe every charset for display (name, glyphs, visible preview)."""
    info = []
    for name, charset in CHARSETS.items():
        preview = charset.chars.strip()
        info.append({
            'name': name,
            'chars': charset.chars,
            'length': len(preview),
            'preview': preview,
        })
    return info
