"""Minimal echo, counter and request-dump web servers."""

from __future__ import annotations

import argparse
import threading
import urllib.parse
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer
from typing import Mapping, Sequence

from cookbook.textfmt import quote


def echo_path(path: str) -> str:
    """Return the line echoing a URL path."""
    return f"URL.Path = {quote(path)}\n"


def _quote_list(values: Sequence[str]) -> str:
    return "[" + " ".join(quote(v) for v in values) + "]"


def describe_request(
    method: str,
    url: str,
    proto: str,
    headers: Mapping[str, Sequence[str]],
    host: str,
    remote_addr: str,
    form: Mapping[str, Sequence[str]],
) -> str:
    """Render a request's line, headers, host, peer address and form values."""
    lines = [f"{method} {url} {proto}\n"]
    lines.extend(f"Header[{quote(k)}] = {_quote_list(v)}\n" for k, v in headers.items())
    lines.append(f"Host = {quote(host)}\n")
    lines.append(f"RemoteAddr = {quote(remote_addr)}\n")
    lines.extend(f"Form[{quote(k)}] = {_quote_list(v)}\n" for k, v in form.items())
    return "".join(lines)


def _canonical(key: str) -> str:
    return "-".join(part[:1].upper() + part[1:].lower() for part in key.split("-"))


class _Base(BaseHTTPRequestHandler):
    def _reply(self, text: str) -> None:
        body = text.encode("utf-8")
        self.send_response(200)
        self.send_header("Content-Type", "text/plain; charset=utf-8")
        self.send_header("Content-Length", str(len(body)))
        self.end_headers()
        self.wfile.write(body)

    def _path(self) -> str:
        return urllib.parse.unquote(urllib.parse.urlsplit(self.path).path)

    def log_message(self, format: str, *args: object) -> None:
        pass


class EchoHandler(_Base):
    """Echo the path component of the requested URL."""

    def do_GET(self) -> None:  # noqa: N802
        self._reply(echo_path(self._path()))

    do_POST = do_GET


class CounterHandler(_Base):
    """Echo the path and count requests; /count reports the number so far."""

    def do_GET(self) -> None:  # noqa: N802
        server = self.server
        if self._path() == "/count":
            with server.lock:
                text = f"Count {server.count}\n"
            self._reply(text)
            return
        with server.lock:
            server.count += 1
        self._reply(echo_path(self._path()))

    do_POST = do_GET


class RequestDumpHandler(_Base):
    """Echo the whole HTTP request back as text."""

    def do_GET(self) -> None:  # noqa: N802
        headers: dict[str, list[str]] = {}
        for key in self.headers.keys():
            name = _canonical(key)
            if name == "Host" or name in headers:
                continue
            headers[name] = list(self.headers.get_all(key, []))
        form: dict[str, list[str]] = {}
        length = int(self.headers.get("Content-Length") or 0)
        ctype = (self.headers.get("Content-Type") or "").split(";")[0].strip()
        if length and ctype == "application/x-www-form-urlencoded":
            body = self.rfile.read(length).decode("utf-8", "replace")
            for k, v in urllib.parse.parse_qsl(body, keep_blank_values=True):
                form.setdefault(k, []).append(v)
        query = urllib.parse.urlsplit(self.path).query
        for k, v in urllib.parse.parse_qsl(query, keep_blank_values=True):
            form.setdefault(k, []).append(v)
        peer = f"{self.client_address[0]}:{self.client_address[1]}"
        self._reply(
            describe_request(
                self.command,
                self.path,
                self.request_version,
                headers,
                self.headers.get("Host", ""),
                peer,
                form,
            )
        )

    do_POST = do_GET


def make_server(
    handler_class: type[BaseHTTPRequestHandler],
    host: str = "localhost",
    port: int = 8000,
) -> ThreadingHTTPServer:
    """Create a threaded server with a shared, locked request counter."""
    server = ThreadingHTTPServer((host, port), handler_class)
    server.lock = threading.Lock()
    server.count = 0
    return server


_HANDLERS = {"echo": EchoHandler, "counter": CounterHandler, "dump": RequestDumpHandler}


def main(argv: Sequence[str] | None = None) -> int:
    """Serve one of the handlers on localhost:8000."""
    parser = argparse.ArgumentParser(prog="server")
    parser.add_argument("variant", nargs="?", default="echo", choices=sorted(_HANDLERS))
    ns = parser.parse_args(argv)
    with make_server(_HANDLERS[ns.variant]) as server:
        server.serve_forever()
    return 0