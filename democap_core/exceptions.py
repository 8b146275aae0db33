"""
Capture exceptions

Every failure of a capture run surfaces as one of these. The underlying
automation-layer exception is chained as ``__cause__``.
"""


class CaptureError(Exception):
    """Base exception for a failed capture run"""

    def __init__(self, step: str, cause: object):
        self.step = step
        self.description = str(cause)
        super().__init__(f"[{step}] {self.description}")


class NavigationError(CaptureError):
    """Target address unreachable or page never settled"""
    pass


class ElementNotFoundError(CaptureError):
    """Expected input or control absent from the page"""
    pass


class WaitTimeoutError(CaptureError):
    """Awaited element did not become visible in time"""
    pass


class ScreenshotWriteError(CaptureError):
    """Screenshot could not be written to disk"""
    pass
