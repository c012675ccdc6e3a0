import os

import pytest

from ascii_pic.utils import (
    calculate_dimensions,
    format_file_size,
    generate_output_path,
    is_supported_image_format,
)


@pytest.mark.parametrize('path', [
    'a.jpg', 'a.JPEG', 'dir/b.png', 'c.webp', 'd.gif', 'e.tif', 'f.tiff',
    'g.bmp', 'h.svg', 'i.avif', 'j.heif', 'k.HEIC',
])
def test_supported_extensions(path):
    assert is_supported_image_format(path)


@pytest.mark.parametrize('path', ['notes.txt', 'archive.png.zip', 'noext', ''])
def test_unsupported_extensions(path):
    assert not is_supported_image_format(path)


def test_generate_output_path_next_to_input():
    assert generate_output_path(os.path.join('photos', 'cat.png')) == \
        os.path.join('photos', 'cat.ascii.txt')


def test_generate_output_path_in_output_dir():
    assert generate_output_path('photos/cat.png', 'out', suffix='art') == \
        os.path.join('out', 'cat.art.txt')


@pytest.mark.parametrize('size, expected', [
    (0, '0 B'),
    (512, '512.0 B'),
    (1536, '1.5 KB'),
    (5 * 1024 * 1024 + 1, '5.0 MB'),
])
def test_format_file_size(size, expected):
    assert format_file_size(size) == expected


def test_calculate_dimensions():
    dims = calculate_dimensions(200, 100, 80, 0.5)
    assert (dims.width, dims.height) == (80, 20)
    assert dims.original_ratio == 2.0
    assert dims.new_ratio == 4.0


def test_calculate_dimensions_degenerate_height():
    dims = calculate_dimensions(1000, 1, 10, 0.5)
    assert dims.height == 0
    assert dims.new_ratio is None
