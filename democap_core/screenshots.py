"""
Screenshot utilities.
"""
from pathlib import Path
from typing import List, Optional, Union
import logging

from .config import Config, config
from .steps import CaptureStep, build_capture_steps

logger = logging.getLogger(__name__)


async def capture_page(page, path: Union[str, Path], full_page: bool = True) -> str:
    """
    Capture a screenshot, overwriting any file already at path.

    Args:
        page: Playwright page
        path: Output PNG path
        full_page: Capture the full scrollable page instead of the viewport

    Returns:
        The path written, as a string
    """
    path = str(path)
    await page.screenshot(path=path, full_page=full_page)
    logger.debug(f"Screenshot saved: {path}")
    return path


def screenshot_paths(
    cfg: Optional[Config] = None,
    steps: Optional[List[CaptureStep]] = None
) -> List[Path]:
    """Output paths of a capture run, in step order."""
    cfg = cfg or config
    steps = steps if steps is not None else build_capture_steps(cfg)
    return [Path(cfg.screenshot_dir) / step.filename for step in steps]
