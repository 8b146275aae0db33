"""
User-Friendly Error Handler.

Turns a failed capture run into a short message with a suggestion.
"""

from typing import Dict, Optional
import logging

from .exceptions import (
    CaptureError,
    NavigationError,
    ElementNotFoundError,
    WaitTimeoutError,
    ScreenshotWriteError,
)

logger = logging.getLogger(__name__)


CATEGORY_BY_CLASS = (
    (NavigationError, "navigation"),
    (ElementNotFoundError, "element"),
    (WaitTimeoutError, "timeout"),
    (ScreenshotWriteError, "filesystem"),
)

# Message keywords, checked in order, for errors not raised by the sequencer
CATEGORY_KEYWORDS = (
    ("connection refused", "navigation"),
    ("err_connection", "navigation"),
    ("net::", "navigation"),
    ("name_not_resolved", "navigation"),
    ("permission denied", "filesystem"),
    ("no space left", "filesystem"),
    ("no such file or directory", "filesystem"),
    ("timeout", "timeout"),
    ("selector", "element"),
)

MESSAGES = {
    "navigation": {
        "message": "Could not load the demo page",
        "suggestion": "Start the dev server (npm run dev) and check that the base URL is correct",
    },
    "element": {
        "message": "Expected element was not found on the page",
        "suggestion": "Check that the page has #task-input and a submit button inside a form",
    },
    "timeout": {
        "message": "Results did not appear in time",
        "suggestion": "Check that submitting the form removes the 'hidden' class from #results-container",
    },
    "filesystem": {
        "message": "Screenshot could not be written",
        "suggestion": "Check permissions and free space for the screenshot directory",
    },
    "unknown": {
        "message": "Unexpected error while taking screenshots",
        "suggestion": "Re-run with --verbose and check the log output",
    },
}


def get_error_category(error: Exception) -> str:
    """
    Categorize error type.

    Returns:
        Category name: "navigation", "element", "timeout", "filesystem", "unknown"
    """
    for cls, category in CATEGORY_BY_CLASS:
        if isinstance(error, cls):
            return category

    if isinstance(error, (PermissionError, IsADirectoryError)):
        return "filesystem"

    error_str = str(error).lower()
    for keyword, category in CATEGORY_KEYWORDS:
        if keyword in error_str:
            return category
    return "unknown"


def format_user_friendly_error(
    error: Exception,
    technical_details: Optional[str] = None
) -> Dict:
    """
    Convert technical error to user-friendly message.

    Returns:
        {
            "message": str,      # User-friendly message
            "suggestion": str,   # Actionable suggestion
            "technical": str,    # Technical details
            "category": str,     # navigation / element / timeout / filesystem / unknown
            "step": str | None,  # Capture step that failed
        }
    """
    category = get_error_category(error)
    result = dict(MESSAGES[category])
    result["category"] = category
    result["step"] = error.step if isinstance(error, CaptureError) else None
    if technical_details:
        result["technical"] = technical_details
    elif isinstance(error, CaptureError):
        result["technical"] = error.description
    else:
        result["technical"] = str(error)
    logger.debug(f"Mapped error to user-friendly: {result['message']}")
    return result


def format_error_for_logging(error: Exception) -> str:
    """Format error as a multi-line block for logs and stderr."""
    friendly = format_user_friendly_error(error)

    lines = [
        f"❌ {friendly['message']}",
        f"💡 {friendly['suggestion']}",
        f"🔧 Technical: {friendly['technical']}",
    ]
    if friendly["step"]:
        lines.insert(0, f"📍 Step: {friendly['step']}")

    return "\n".join(lines)
