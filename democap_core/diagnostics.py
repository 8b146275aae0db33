import socket
from typing import Any, Dict
from urllib.parse import urlparse
import requests
import logging
import os


_LOGGER_CACHE: Dict[str, logging.Logger] = {}

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def get_logger(name: str) -> logging.Logger:
    """Return a configured logger.

    Respects DEMOCAP_DEBUG env var to set DEBUG/INFO level.
    Ensures we don't duplicate handlers across multiple imports.
    """
    lg = _LOGGER_CACHE.get(name)
    if lg:
        return lg
    lg = logging.getLogger(name)
    if not lg.handlers:
        level = logging.DEBUG if str(os.getenv("DEMOCAP_DEBUG", "false")).lower() == "true" else logging.INFO
        lg.setLevel(level)
        handler = logging.StreamHandler()
        handler.setLevel(level)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        lg.addHandler(handler)
        lg.propagate = False
    _LOGGER_CACHE[name] = lg
    return lg


def configure_logging(level: str = "INFO"):
    """
    Set the level of every democap logger and the root logger.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR)
    """
    numeric = getattr(logging, level.upper())
    logging.basicConfig(level=numeric, format=LOG_FORMAT)
    for lg in _LOGGER_CACHE.values():
        lg.setLevel(numeric)
        for handler in lg.handlers:
            handler.setLevel(numeric)


def diagnose_url_issue(url: str) -> Dict[str, Any]:
    out: Dict[str, Any] = {"url": url}
    try:
        pr = urlparse(url)
        host = pr.hostname or ""
        scheme = pr.scheme or "http"
        port = pr.port or (443 if scheme == "https" else 80)
        out["host"] = host
        out["port"] = port
        out["scheme"] = scheme

        # DNS resolution
        try:
            infos = socket.getaddrinfo(host, None)
            ips = []
            for i in infos:
                ip = i[4][0]
                if ip not in ips:
                    ips.append(ip)
            out["dns_resolves"] = True
            out["ips"] = ips
        except OSError as e:
            out["dns_resolves"] = False
            out["dns_error"] = str(e)
            return out

        # TCP connectivity
        try:
            with socket.create_connection((host, port), timeout=5):
                out["tcp_open"] = True
        except OSError as e:
            out["tcp_open"] = False
            out["tcp_error"] = str(e)
            return out

        # HTTP probe
        try:
            r = requests.get(url, timeout=6, allow_redirects=True)
            out["http_probe"] = {"status": getattr(r, "status_code", None)}
        except requests.exceptions.RequestException as e:
            out["http_probe"] = {"error": str(e)}
    except Exception as e:
        out["diagnostic_error"] = str(e)
    return out


def is_reachable(diag: Dict[str, Any]) -> bool:
    """True when the diagnosis got an HTTP answer below 500."""
    status = (diag.get("http_probe") or {}).get("status")
    return status is not None and status < 500
