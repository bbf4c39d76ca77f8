"""Convert a PNG image to JPEG."""

from __future__ import annotations

import sys
from typing import BinaryIO, Sequence

from PIL import Image, UnidentifiedImageError

_ACCEPTED = {"PNG": "png", "JPEG": "jpeg"}


def to_jpeg(src: BinaryIO, dst: BinaryIO) -> str:
    """Decode an image from src, write it to dst as JPEG and return the input format."""
    try:
        img = Image.open(src)
        kind = _ACCEPTED.get(img.format or "")
        if kind is None:
            raise ValueError("image: unknown format")
        img.load()
    except (UnidentifiedImageError, OSError) as exc:
        if isinstance(exc, UnidentifiedImageError):
            raise ValueError("image: unknown format") from None
        raise ValueError(str(exc)) from exc
    print("Input format =", kind, file=sys.stderr)
    if img.mode not in ("RGB", "L", "CMYK"):
        img = img.convert("RGB")
    img.save(dst, format="JPEG", quality=95)
    return kind


def main(argv: Sequence[str] | None = None) -> int:
    """Read an image from standard input and write it as JPEG to standard output."""
    try:
        to_jpeg(sys.stdin.buffer, sys.stdout.buffer)
    except (ValueError, OSError) as exc:
        print(f"jpeg: {exc}", file=sys.stderr)
        return 1
    sys.stdout.buffer.flush()
    return 0