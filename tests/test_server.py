import threading
import urllib.request

import pytest

from cookbook.server import (
    CounterHandler,
    EchoHandler,
    RequestDumpHandler,
    describe_request,
    echo_path,
    make_server,
)


def _start(handler):
    server = make_server(handler, "127.0.0.1", 0)
    thread = threading.Thread(target=server.serve_forever, daemon=True)
    thread.start()
    return server, f"http://127.0.0.1:{server.server_address[1]}"


def _get(url):
    with urllib.request.urlopen(url) as resp:
        return resp.read().decode("utf-8")


@pytest.fixture
def serve():
    servers = []

    def start(handler):
        server, base = _start(handler)
        servers.append(server)
        return base

    yield start
    for server in servers:
        server.shutdown()
        server.server_close()


def test_echo_path():
    assert echo_path("/a b") == 'URL.Path = "/a b"\n'


def test_echo_handler(serve):
    base = serve(EchoHandler)
    assert _get(base + "/hello?x=1") == echo_path("/hello")


def test_counter_handler(serve):
    base = serve(CounterHandler)
    _get(base + "/a")
    _get(base + "/b")
    assert _get(base + "/count") == "Count 2\n"


def test_describe_request():
    text = describe_request(
        "GET", "/?q=1", "HTTP/1.1", {"Accept": ["*/*"]}, "localhost:8000",
        "127.0.0.1:1234", {"q": ["1"]},
    )
    assert text.splitlines() == [
        "GET /?q=1 HTTP/1.1",
        'Header["Accept"] = ["*/*"]',
        'Host = "localhost:8000"',
        'RemoteAddr = "127.0.0.1:1234"',
        'Form["q"] = ["1"]',
    ]


def test_dump_handler(serve):
    base = serve(RequestDumpHandler)
    text = _get(base + "/x?q=query&q=more")
    lines = text.splitlines()
    assert lines[0] == "GET /x?q=query&q=more HTTP/1.1"
    assert 'Form["q"] = ["query" "more"]' in lines