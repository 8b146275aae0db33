"""
Capture Steps - the fixed, ordered capture pipeline

Each step runs its action first, then its wait, then takes one screenshot.
A step's wait can only be met once the previous steps have changed the page,
so the order returned by build_capture_steps() must not be changed.
"""

from dataclasses import dataclass
from typing import Optional, Union, List

from .config import Config

TASK_INPUT_SELECTOR = "#task-input"
SUBMIT_SELECTOR = 'form [type="submit"]'
RESULTS_VISIBLE_SELECTOR = "#results-container:not(.hidden)"


@dataclass(frozen=True)
class Navigate:
    url: str


@dataclass(frozen=True)
class Fill:
    selector: str
    value: str


@dataclass(frozen=True)
class Click:
    selector: str


@dataclass(frozen=True)
class NetworkIdle:
    """No network connections for the browser's quiet window (500 ms)."""
    timeout_ms: int


@dataclass(frozen=True)
class ElementVisible:
    selector: str
    timeout_ms: int


Action = Union[Navigate, Fill, Click]
Wait = Union[NetworkIdle, ElementVisible]


@dataclass(frozen=True)
class CaptureStep:
    name: str
    announce: str
    filename: str
    full_page: bool = True
    action: Optional[Action] = None
    wait: Optional[Wait] = None
    capture_announce: Optional[str] = None  # logged after the wait, before the screenshot


def build_capture_steps(cfg: Config) -> List[CaptureStep]:
    """Return the four capture steps in execution order."""
    return [
        CaptureStep(
            name="full-page",
            announce=f"📱 Navigating to {cfg.base_url}...",
            filename="main-page-full.png",
            full_page=True,
            action=Navigate(cfg.base_url),
            wait=NetworkIdle(cfg.navigation_timeout_ms),
            capture_announce="📸 Taking full page screenshot...",
        ),
        CaptureStep(
            name="viewport",
            announce="📸 Taking viewport screenshot...",
            filename="main-page-viewport.png",
            full_page=False,
        ),
        CaptureStep(
            name="with-input",
            announce="✍️  Filling in example task...",
            filename="main-page-with-input.png",
            full_page=True,
            action=Fill(TASK_INPUT_SELECTOR, cfg.task_text),
        ),
        CaptureStep(
            name="with-results",
            announce="🔍 Submitting task and capturing results...",
            filename="main-page-with-results.png",
            full_page=True,
            action=Click(SUBMIT_SELECTOR),
            wait=ElementVisible(RESULTS_VISIBLE_SELECTOR, cfg.results_timeout_ms),
        ),
    ]
