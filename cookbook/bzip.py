"""A writer that bzip2-compresses what is written to it."""

from __future__ import annotations

import bz2
import shutil
import sys
from typing import BinaryIO, Sequence

_BLOCK_SIZE = 9


class BzipWriter:
    """Compress written bytes with bzip2 into an underlying binary stream.

    Closing flushes the compressed stream but does not close the underlying one.
    """

    def __init__(self, out: BinaryIO) -> None:
        self._out = out
        self._compressor: bz2.BZ2Compressor | None = bz2.BZ2Compressor(_BLOCK_SIZE)

    def write(self, data: bytes) -> int:
        """Compress data, write any output produced, and return the bytes consumed."""
        if self._compressor is None:
            raise ValueError("closed")
        data = bytes(data)
        chunk = self._compressor.compress(data)
        if chunk:
            self._out.write(chunk)
        return len(data)

    def close(self) -> None:
        """Flush the remaining compressed data and finish the stream."""
        if self._compressor is None:
            raise ValueError("closed")
        compressor, self._compressor = self._compressor, None
        tail = compressor.flush()
        if tail:
            self._out.write(tail)

    @property
    def closed(self) -> bool:
        """Whether the writer has been closed."""
        return self._compressor is None

    def __enter__(self) -> "BzipWriter":
        return self

    def __exit__(self, *args: object) -> None:
        if self._compressor is not None:
            self.close()


def main(argv: Sequence[str] | None = None) -> int:
    """Read standard input, bzip2-compress it, and write it to standard output."""
    out = sys.stdout.buffer
    writer = BzipWriter(out)
    try:
        shutil.copyfileobj(sys.stdin.buffer, writer)
    except OSError as exc:
        print(f"bzipper: {exc}", file=sys.stderr)
        return 1
    try:
        writer.close()
        out.flush()
    except OSError as exc:
        print(f"bzipper: close: {exc}", file=sys.stderr)
        return 1
    return 0