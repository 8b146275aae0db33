"""
Capture Sequencer - drives one browser session through the capture steps

    🚀 launch → 📱 navigate + network idle → 📸 full page
              → 📸 viewport
              → ✍️  fill #task-input → 📸 full page
              → 🔍 submit + wait for results → 📸 full page
              → close

Steps run strictly one after another against the same page. The first
failure stops the run; the session is closed on every exit path and the
failure is raised as a CaptureError subclass naming the step.
"""

import asyncio
import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

from playwright.async_api import Error as PlaywrightError

from .browser_setup import open_session
from .config import Config, config
from .diagnostics import get_logger
from .exceptions import (
    NavigationError,
    ElementNotFoundError,
    WaitTimeoutError,
    ScreenshotWriteError,
)
from .screenshots import capture_page
from .steps import (
    CaptureStep,
    Navigate,
    Fill,
    Click,
    NetworkIdle,
    ElementVisible,
    build_capture_steps,
)

logger = get_logger(__name__)

STEP_ERRORS = (PlaywrightError, OSError)


@dataclass
class CaptureResult:
    paths: List[str] = field(default_factory=list)
    elapsed: float = 0.0


class CaptureSequencer:
    def __init__(
        self,
        cfg: Optional[Config] = None,
        steps: Optional[List[CaptureStep]] = None,
        session_factory=open_session,
    ):
        self.config = cfg or config
        self.steps = steps if steps is not None else build_capture_steps(self.config)
        self.session_factory = session_factory

    async def run(self) -> CaptureResult:
        started = time.time()
        result = CaptureResult()

        logger.info("🚀 Launching browser...")
        async with self.session_factory(self.config) as session:
            for step in self.steps:
                logger.info(step.announce)
                path = await self._run_step(session.page, step)
                result.paths.append(path)

        result.elapsed = time.time() - started
        logger.debug(f"Capture finished in {result.elapsed:.2f}s")
        return result

    async def _run_step(self, page, step: CaptureStep) -> str:
        if step.action is not None:
            await self._perform(page, step)
        if step.wait is not None:
            await self._wait(page, step)

        if step.capture_announce:
            logger.info(step.capture_announce)
        path =Path(self.config.screenshot_dir) / step.filename
        try:
            return await capture_page(page, path, full_page=step.full_page)
        except STEP_ERRORS as e:
            raise ScreenshotWriteError(step.name, e) from e

    async def _perform(self, page, step: CaptureStep):
        action = step.action
        try:
            if isinstance(action, Navigate):
                await page.goto(action.url, timeout=self.config.navigation_timeout_ms)
            elif isinstance(action, Fill):
                await page.fill(action.selector, action.value)
            elif isinstance(action, Click):
                await page.click(action.selector)
            else:
                raise TypeError(f"Unknown capture action: {action!r}")
        except STEP_ERRORS as e:
            if isinstance(action, Navigate):
                self._log_navigation_hint(action.url, e)
                raise NavigationError(step.name, e) from e
            raise ElementNotFoundError(step.name, e) from e

    async def _wait(self, page, step: CaptureStep):
        wait = step.wait
        if isinstance(wait, NetworkIdle):
            try:
                await page.wait_for_load_state("networkidle", timeout=wait.timeout_ms)
            except STEP_ERRORS as e:
                raise NavigationError(step.name, e) from e
        elif isinstance(wait, ElementVisible):
            try:
                await page.wait_for_selector(wait.selector, state="visible", timeout=wait.timeout_ms)
            except STEP_ERRORS as e:
                raise WaitTimeoutError(step.name, e) from e
        else:
            raise TypeError(f"Unknown capture wait: {wait!r}")

    def _log_navigation_hint(self, url: str, error: Exception):
        if "ERR_CONNECTION_REFUSED" in str(error):
            logger.warning(f"Nothing is listening at {url}; is the dev server running? (democap --diagnose)")


def run_capture(cfg: Optional[Config] = None) -> CaptureResult:
    """Synchronous entry: run the full capture sequence once."""
    return asyncio.run(CaptureSequencer(cfg).run())
