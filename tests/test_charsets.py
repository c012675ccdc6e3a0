import pytest

from ascii_pic.charsets import (
    CHARSETS,
    Charset,
    get_available_charsets,
    get_charset,
    get_charset_info,
    is_valid_charset,
)
from ascii_pic.exceptions import UnknownCharsetError


def test_registry_has_eight_named_charsets_in_order():
    assert get_available_charsets() == [
        'detailed', 'blocks', 'classic', 'simple',
        'minimal', 'numbers', 'binary', 'retro',
    ]


@pytest.mark.parametrize('name', get_available_charsets())
def test_every_charset_has_at_least_two_glyphs(name):
    assert len(get_charset(name)) >= 2


def test_get_charset_returns_dark_to_light_glyphs():
    detailed = get_charset('detailed')
    assert detailed.chars == "@%#*+=-:. "
    assert detailed.darkest == '@'
    assert detailed.lightest == ' '


def test_get_charset_unknown_name_lists_available():
    with pytest.raises(UnknownCharsetError) as excinfo:
        get_charset('nonexistent')
    assert excinfo.value.name == 'nonexistent'
    assert 'detailed' in str(excinfo.value)


def test_unknown_charset_error_is_lookup_error():
    with pytest.raises(LookupError):
        get_charset('')


@pytest.mark.parametrize('name, expected', [
    ('detailed', True),
    ('binary', True),
    ('', False),
    ('nonexistent', False),
    ('Detailed', False),
    (None, False),
    (42, False),
])
def test_is_valid_charset(name, expected):
    assert is_valid_charset(name) is expected


def test_registry_is_read_only():
    with pytest.raises(TypeError):
        CHARSETS['custom'] = Charset.from_string('custom', 'ab')
    assert 'custom' not in CHARSETS


def test_charset_requires_two_glyphs():
    with pytest.raises(ValueError):
        Charset.from_string('single', '@')


def test_charset_info_describes_every_charset():
    info = get_charset_info()
    assert [item['name'] for item in info] == get_available_charsets()
    detailed = info[0]
    assert detailed['chars'] == "@%#*+=-:. "
    assert detailed['preview'] == "@%#*+=-:."
    assert detailed['length'] == 9
