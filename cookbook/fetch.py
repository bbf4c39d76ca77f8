"""Fetch the content found at URLs, one after another or in parallel."""

from __future__ import annotations

import argparse
import http.client
import sys
import time
import urllib.error
import urllib.request
from concurrent.futures import ThreadPoolExecutor, as_completed
from typing import BinaryIO, Iterable, Iterator, Sequence

from cookbook.textfmt import quote

_CHUNK = 32 * 1024
_READ_ERRORS = (OSError, http.client.HTTPException)


class FetchError(Exception):
    """Raised when a URL cannot be requested or its body cannot be read."""


def _open(url: str):
    """Open url; a non-2xx answer is returned as a response, not raised."""
    try:
        return urllib.request.urlopen(url)
    except urllib.error.HTTPError as exc:
        return exc
    except (urllib.error.URLError, ValueError, OSError, http.client.HTTPException) as exc:
        reason = exc.reason if isinstance(exc, urllib.error.URLError) else exc
        raise FetchError(f"Get {quote(url)}: {reason}") from exc


def _chunks(resp) -> Iterator[bytes]:
    while True:
        chunk = resp.read(_CHUNK)
        if not chunk:
            return
        yield chunk


def _get(url: str) -> tuple[int, bytes]:
    """Return the status code and the whole body found at url."""
    resp = _open(url)
    try:
        body = resp.read()
    except _READ_ERRORS as exc:
        raise FetchError(f"reading {url}: {exc}") from exc
    finally:
        resp.close()
    return resp.getcode(), body


def fetch(url: str) -> bytes:
    """Return the body found at url, whatever the status of the response."""
    return _get(url)[1]


def copy_url(url: str, out: BinaryIO) -> int:
    """Stream the body found at url into out and return the number of bytes copied."""
    resp = _open(url)
    total = 0
    try:
        for chunk in _chunks(resp):
            out.write(chunk)
            total += len(chunk)
    except _READ_ERRORS as exc:
        raise FetchError(f"copying {url} to output: {exc}") from exc
    finally:
        resp.close()
    return total


def normalize_url(url: str) -> str:
    """Turn url into an https URL, replacing http:// or adding the scheme."""
    if url.startswith("http://"):
        url = "https://" + url[len("http://"):]
    if not url.startswith("https://"):
        url = "https://" + url
    return url


def _fetch_timed(url: str) -> str:
    start = time.perf_counter()
    try:
        resp = _open(url)
    except FetchError as exc:
        return str(exc)
    try:
        nbytes = sum(len(chunk) for chunk in _chunks(resp))
    except _READ_ERRORS as exc:
        return f"while reading {url}: {exc}"
    finally:
        resp.close()
    secs = time.perf_counter() - start
    return f"{secs:.2f}s  {nbytes:7d}  {url}"


def fetch_all(urls: Iterable[str]) -> Iterator[str]:
    """Fetch urls in parallel, yielding a time, size and URL line as each finishes."""
    urls = list(urls)
    if not urls:
        return
    with ThreadPoolExecutor(max_workers=len(urls)) as pool:
        futures = [pool.submit(_fetch_timed, url) for url in urls]
        for future in as_completed(futures):
            yield future.result()


def main(argv: Sequence[str] | None = None) -> int:
    """Print the content found at each URL given."""
    parser = argparse.ArgumentParser(prog="fetch")
    parser.add_argument(
        "--copy", action="store_true", help="stream each body and report its size"
    )
    parser.add_argument(
        "--https", action="store_true", help="force https and report each URL fetched"
    )
    parser.add_argument(
        "--status", action="store_true", help="like --https, also reporting the status code"
    )
    parser.add_argument("urls", nargs="*")
    ns = parser.parse_args(argv)

    out = sys.stdout
    secure = ns.https or ns.status
    for url in ns.urls:
        if secure:
            url = normalize_url(url)
        try:
            if ns.copy:
                out.flush()
                n = copy_url(url, out.buffer)
                out.buffer.flush()
                print(f"{n} bytes copied.")
                continue
            status, body = _get(url)
        except FetchError as exc:
            print(f"fetch: {exc}", file=sys.stderr)
            return 1
        out.flush()
        out.buffer.write(body)
        out.buffer.flush()
        if secure:
            print()
            line = f"Fetched content from {url}"
            if ns.status:
                line += f" [{status}] "
            print(line)
    return 0


def fetchall_main(argv: Sequence[str] | None = None) -> int:
    """Fetch URLs in parallel and report their times and sizes."""
    urls = sys.argv[1:] if argv is None else list(argv)
    start = time.perf_counter()
    for message in fetch_all(urls):
        print(message)
    print(f"{time.perf_counter() - start:.2f}s elapsed")
    return 0