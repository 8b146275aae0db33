#!/usr/bin/env python3
from contextlib import asynccontextmanager
from typing import Optional

from playwright.async_api import async_playwright, Error as PlaywrightError

from .config import Config, config
from .diagnostics import get_logger
from .exceptions import CaptureError

logger = get_logger(__name__)

LAUNCH_ARGS = [
    "--no-sandbox",
    "--disable-dev-shm-usage",
]


class BrowserSession:
    """One Playwright driver, one Chromium browser and the single page used for a run."""

    def __init__(self, playwright, browser, page):
        self.playwright = playwright
        self.browser = browser
        self.page = page
        self.closed = False

    async def close(self):
        if self.closed:
            return
        self.closed = True
        try:
            await self.browser.close()
        finally:
            await self.playwright.stop()
        logger.debug("Browser session closed")


async def launch_session(cfg: Config) -> BrowserSession:
    playwright = await async_playwright().start()
    try:
        browser = await playwright.chromium.launch(
            headless=bool(cfg.headless),
            args=list(LAUNCH_ARGS),
        )
    except Exception:
        await playwright.stop()
        raise
    try:
        page = await browser.new_page(
            viewport={"width": cfg.viewport_width, "height": cfg.viewport_height},
        )
    except Exception:
        await browser.close()
        await playwright.stop()
        raise
    return BrowserSession(playwright, browser, page)


@asynccontextmanager
async def open_session(cfg: Optional[Config] = None):
    """
    Open a browser session and close it on every exit path.

    Usage:
        async with open_session(config) as session:
            await session.page.goto(config.base_url)
    """
    try:
        session = await launch_session(cfg or config)
    except PlaywrightError as e:
        raise CaptureError("launch", e) from e
    try:
        yield session
    except BaseException:
        # The failure that stopped the run is the one reported
        try:
            await session.close()
        except PlaywrightError as close_error:
            logger.warning(f"Browser close failed after an earlier error: {close_error}")
        raise
    await session.close()
