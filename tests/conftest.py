"""
Shared fixtures: a recording stand-in for a Playwright page and a session
factory that hands it to the sequencer.
"""

from contextlib import asynccontextmanager
from pathlib import Path
from types import SimpleNamespace

import pytest
from playwright.async_api import TimeoutError as PlaywrightTimeoutError

from democap_core.config import Config


class FakePage:
    """Records every call; writes a tiny file for each screenshot."""

    def __init__(self, fail_on=None, results_appear=True):
        self.calls = []
        self.values = {}
        self.results_visible = False
        self.shots = []
        self.fail_on = fail_on or {}
        self.results_appear = results_appear

    def _maybe_fail(self, name):
        if name in self.fail_on:
            raise self.fail_on[name]

    async def goto(self, url, timeout=None):
        self.calls.append(("goto", url))
        self._maybe_fail("goto")

    async def wait_for_load_state(self, state, timeout=None):
        self.calls.append(("wait_for_load_state", state))
        self._maybe_fail("wait_for_load_state")

    async def fill(self, selector, value):
        self.calls.append(("fill", selector, value))
        self._maybe_fail("fill")
        self.values[selector] = value

    async def click(self, selector):
        self.calls.append(("click", selector))
        self._maybe_fail("click")
        if self.results_appear:
            self.results_visible = True

    async def wait_for_selector(self, selector, state="visible", timeout=None):
        self.calls.append(("wait_for_selector", selector, state, timeout))
        self._maybe_fail("wait_for_selector")
        if not self.results_visible:
            raise PlaywrightTimeoutError(f"Timeout {timeout}ms exceeded waiting for {selector}")

    async def input_value(self, selector):
        return self.values.get(selector, "")

    async def screenshot(self, path, full_page=False):
        self.calls.append(("screenshot", Path(path).name, full_page))
        self._maybe_fail("screenshot")
        self.shots.append({
            "path": path,
            "full_page": full_page,
            "task_input": self.values.get("#task-input", ""),
            "results_visible": self.results_visible,
        })
        Path(path).parent.mkdir(parents=True, exist_ok=True)
        Path(path).write_bytes(b"\x89PNG\r\n\x1a\n")


class SessionRecorder:
    def __init__(self, page):
        self.page = page
        self.opened = 0
        self.closed = 0

    @asynccontextmanager
    async def __call__(self, cfg):
        self.opened += 1
        try:
            yield SimpleNamespace(page=self.page)
        finally:
            self.closed += 1


@pytest.fixture
def capture_config(tmp_path):
    return Config(
        base_url="http://localhost:5173",
        screenshot_dir=tmp_path / "screenshots",
        results_timeout_ms=5000,
    )


@pytest.fixture
def fake_page():
    return FakePage()


@pytest.fixture
def session_recorder(fake_page):
    return SessionRecorder(fake_page)
