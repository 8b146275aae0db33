"""Tests for logging helpers and the reachability diagnosis."""

import logging
import socket

import requests

from democap_core import diagnostics
from democap_core.diagnostics import diagnose_url_issue, get_logger, is_reachable


def _free_port():
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as s:
        s.bind(("127.0.0.1", 0))
        return s.getsockname()[1]


def test_get_logger_is_cached():
    a = get_logger("democap_core.test_cache")
    b = get_logger("democap_core.test_cache")

    assert a is b
    assert len(a.handlers) == 1
    assert a.propagate is False


def test_configure_logging_updates_cached_loggers():
    lg = get_logger("democap_core.test_level")

    diagnostics.configure_logging("ERROR")
    assert lg.level == logging.ERROR

    diagnostics.configure_logging("INFO")
    assert lg.level == logging.INFO


def test_closed_port_reported():
    port = _free_port()

    diag = diagnose_url_issue(f"http://127.0.0.1:{port}")

    assert diag["dns_resolves"] is True
    assert diag["port"] == port
    assert diag["tcp_open"] is False
    assert "http_probe" not in diag
    assert not is_reachable(diag)


def test_open_port_probed(monkeypatch):
    server = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    server.bind(("127.0.0.1", 0))
    server.listen(1)
    port = server.getsockname()[1]

    class DummyResp:
        status_code = 200

    monkeypatch.setattr(diagnostics.requests, "get", lambda url, **kw: DummyResp())
    try:
        diag = diagnose_url_issue(f"http://127.0.0.1:{port}")
    finally:
        server.close()

    assert diag["tcp_open"] is True
    assert diag["http_probe"] == {"status": 200}
    assert is_reachable(diag)


def test_http_probe_error_recorded(monkeypatch):
    server = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    server.bind(("127.0.0.1", 0))
    server.listen(1)
    port = server.getsockname()[1]

    def fake_get(url, **kw):
        raise requests.exceptions.ReadTimeout("read timed out")

    monkeypatch.setattr(diagnostics.requests, "get", fake_get)
    try:
        diag = diagnose_url_issue(f"http://127.0.0.1:{port}")
    finally:
        server.close()

    assert "read timed out" in diag["http_probe"]["error"]
    assert not is_reachable(diag)


def test_server_error_not_reachable():
    assert not is_reachable({"http_probe": {"status": 502}})
    assert is_reachable({"http_probe": {"status": 404}})
