#!/usr/bin/env python3
from dataclasses import dataclass
import os
from pathlib import Path
from typing import Any, Dict, Optional
from dotenv import load_dotenv

from .dev_server import load_dev_server_config

load_dotenv()

TRUTHY = ("true", "1", "yes")


def _env_bool(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() in TRUTHY


@dataclass
class Config:
    """Capture run configuration"""
    base_url: str = "http://localhost:5173"
    screenshot_dir: Path = Path("screenshots")
    headless: bool = True
    task_text: str = "Fix the bug in the login form"
    results_timeout_ms: int = 5000
    navigation_timeout_ms: int = 30000
    viewport_width: int = 1280
    viewport_height: int = 720
    debug: bool = False
    dev_server_config: Path = Path("devserver.yaml")

    @classmethod
    def from_env(cls, dev_server_path: Optional[str] = None) -> 'Config':
        """Create config from environment variables.

        The target address defaults to the dev server's own address so a
        changed port in devserver.yaml is picked up without extra settings.
        """
        dev_path = Path(dev_server_path or os.getenv("DEMOCAP_DEV_SERVER_CONFIG", "devserver.yaml"))
        base_url = os.getenv("DEMOCAP_BASE_URL") or load_dev_server_config(dev_path).base_url
        return cls(
            base_url=base_url,
            screenshot_dir=Path(os.getenv("DEMOCAP_SCREENSHOT_DIR", "screenshots")),
            headless=_env_bool("DEMOCAP_HEADLESS", "true"),
            task_text=os.getenv("DEMOCAP_TASK_TEXT", "Fix the bug in the login form"),
            results_timeout_ms=int(os.getenv("DEMOCAP_RESULTS_TIMEOUT_MS", "5000")),
            navigation_timeout_ms=int(os.getenv("DEMOCAP_NAVIGATION_TIMEOUT_MS", "30000")),
            viewport_width=int(os.getenv("DEMOCAP_VIEWPORT_WIDTH", "1280")),
            viewport_height=int(os.getenv("DEMOCAP_VIEWPORT_HEIGHT", "720")),
            debug=_env_bool("DEMOCAP_DEBUG", "false"),
            dev_server_config=dev_path,
        )


def describe_config(cfg: Optional[Config] = None) -> Dict[str, Any]:
    """Map env variable names to the values in effect, for logging."""
    cfg = cfg or config
    return {
        "DEMOCAP_BASE_URL": cfg.base_url,
        "DEMOCAP_SCREENSHOT_DIR": str(cfg.screenshot_dir),
        "DEMOCAP_HEADLESS": cfg.headless,
        "DEMOCAP_TASK_TEXT": cfg.task_text,
        "DEMOCAP_RESULTS_TIMEOUT_MS": cfg.results_timeout_ms,
        "DEMOCAP_NAVIGATION_TIMEOUT_MS": cfg.navigation_timeout_ms,
        "DEMOCAP_VIEWPORT_WIDTH": cfg.viewport_width,
        "DEMOCAP_VIEWPORT_HEIGHT": cfg.viewport_height,
        "DEMOCAP_DEBUG": cfg.debug,
        "DEMOCAP_DEV_SERVER_CONFIG": str(cfg.dev_server_config),
    }


config = Config.from_env()
