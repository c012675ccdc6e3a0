import io

import numpy as np
import pytest
from PIL import Image, ImageDraw


def encode(image: Image.Image, fmt: str = 'PNG') -> bytes:
    buf = io.BytesIO()
    image.save(buf, format=fmt)
    return buf.getvalue()


def bordered_image() -> Image.Image:
    """100x100 white square with a 90x90 black inset."""
    image = Image.new('RGB', (100, 100), (255, 255, 255))
    draw = ImageDraw.Draw(image)
    draw.rectangle((5, 5, 94, 94), fill=(0, 0, 0))
    return image


@pytest.fixture
def bordered_png() -> bytes:
    return encode(bordered_image())


@pytest.fixture
def gradient_png() -> bytes:
    image = Image.new('L', (256, 64))
    image.putdata([x for _ in range(64) for x in range(256)])
    return encode(image)


@pytest.fixture
def png_file(tmp_path, bordered_png):
    path = tmp_path / 'square.png'
    path.write_bytes(bordered_png)
    return path


@pytest.fixture
def encode_image():
    return encode


@pytest.fixture
def gray16_png() -> bytes:
    """40x40 16-bit grayscale PNG at 50% gray."""
    return encode(Image.fromarray(np.full((40, 40), 32768, dtype=np.uint16)))


SQUARE_SVG = (
    b'<?xml version="1.0" encoding="UTF-8"?>\n'
    b'<svg xmlns="http://www.w3.org/2000/svg" width="40" height="40">'
    b'<rect width="40" height="40" fill="black"/></svg>'
)


@pytest.fixture
def square_svg() -> bytes:
    return SQUARE_SVG
