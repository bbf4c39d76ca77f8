from io import BytesIO

import pytest
from PIL import Image

from cookbook.jpeg import to_jpeg


def _image_bytes(fmt, mode="RGB"):
    buf = BytesIO()
    Image.new(mode, (10, 6), (200, 10, 10) if mode == "RGB" else 1).save(buf, format=fmt)
    buf.seek(0)
    return buf


def test_png_to_jpeg(capsys):
    out = BytesIO()
    assert to_jpeg(_image_bytes("PNG"), out) == "png"
    assert "Input format = png" in capsys.readouterr().err
    out.seek(0)
    img = Image.open(out)
    assert img.format == "JPEG"
    assert img.size == (10, 6)


def test_rgba_png_is_converted():
    buf = BytesIO()
    Image.new("RGBA", (4, 4)).save(buf, format="PNG")
    buf.seek(0)
    out = BytesIO()
    to_jpeg(buf, out)
    out.seek(0)
    assert Image.open(out).size == (4, 4)


def test_unknown_format():
    with pytest.raises(ValueError, match="image: unknown format"):
        to_jpeg(BytesIO(b"not an image"), BytesIO())


def test_gif_rejected():
    with pytest.raises(ValueError, match="unknown format"):
        to_jpeg(_image_bytes("GIF", "P"), BytesIO())