"""
Pytest configuration for integration tests

Serves tests/integration/pages over HTTP and skips when Chromium is not
installed (run `playwright install chromium` to enable these tests).
"""

import functools
import socket
import threading
from http.server import ThreadingHTTPServer, SimpleHTTPRequestHandler
from pathlib import Path

import pytest

PAGES_DIR = Path(__file__).parent / "pages"


class QuietHandler(SimpleHTTPRequestHandler):
    def log_message(self, format, *args):
        pass


@pytest.fixture(scope="session", autouse=True)
def chromium_available():
    from playwright.sync_api import sync_playwright, Error

    try:
        with sync_playwright() as p:
            browser = p.chromium.launch(headless=True)
            browser.close()
    except Error as e:
        pytest.skip(f"Chromium not available: {e}")


@pytest.fixture(scope="session")
def base_url():
    """Base URL of the local demo page server"""
    handler = functools.partial(QuietHandler, directory=str(PAGES_DIR))
    server = ThreadingHTTPServer(("127.0.0.1", 0), handler)
    thread = threading.Thread(target=server.serve_forever, daemon=True)
    thread.start()
    yield f"http://127.0.0.1:{server.server_address[1]}"
    server.shutdown()
    server.server_close()


@pytest.fixture
def closed_port_url():
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as s:
        s.bind(("127.0.0.1", 0))
        port = s.getsockname()[1]
    return f"http://127.0.0.1:{port}"
