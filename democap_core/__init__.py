"""
democap_core: screenshot capture of the workshop demo page

Usage:
    from democap_core import CaptureSequencer, config

    result = asyncio.run(CaptureSequencer(config).run())
    print(result.paths)
"""
from .config import Config, config
from .dev_server import DevServerConfig, load_dev_server_config
from .exceptions import (
    CaptureError,
    NavigationError,
    ElementNotFoundError,
    WaitTimeoutError,
    ScreenshotWriteError,
)
from .steps import CaptureStep, build_capture_steps
from .browser_setup import BrowserSession, open_session
from .sequencer import CaptureSequencer, CaptureResult, run_capture

__all__ = [
    # Configuration
    "Config",
    "config",
    "DevServerConfig",
    "load_dev_server_config",
    # Errors
    "CaptureError",
    "NavigationError",
    "ElementNotFoundError",
    "WaitTimeoutError",
    "ScreenshotWriteError",
    # Capture
    "CaptureStep",
    "build_capture_steps",
    "BrowserSession",
    "open_session",
    "CaptureSequencer",
    "CaptureResult",
    "run_capture",
]

__version__ = '1.0.0'
