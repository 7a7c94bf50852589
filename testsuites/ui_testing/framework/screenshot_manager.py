"""
================================================================================
Screenshot Manager
================================================================================

Full-page screenshot capture for reports and failure diagnostics.

A capture waits for the network to go idle plus a short settle delay, writes a
timestamped PNG to disk and attaches the same bytes to the Allure report.
Capture problems are logged and never fail the calling test.

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from datetime import datetime
from pathlib import Path
from typing import Callable, Optional

from loguru import logger
from playwright.sync_api import Error as PlaywrightError
from playwright.sync_api import Page

from swaglabs_tools.report_tools.allure_utils import attach_png

from .suite_config import DEFAULT_SCREENSHOT_DIR


# Extra wait after network idle so late paints land in the image
SETTLE_DELAY_MS = 1000

TIMESTAMP_FORMAT = "%Y-%m-%d_%H-%M-%S"

UNKNOWN_BROWSER = "unknown"


class ScreenshotManager:
    """
    Captures screenshots of one page.

    Usage:
        screenshots = ScreenshotManager(page, browser_kind="firefox")
        png = screenshots.capture("After Login")
        # reports/screenshots/After Login_firefox_2024-05-01_12-00-00.png
    """

    def __init__(
        self,
        page: Optional[Page],
        browser_kind: Optional[str] = None,
        directory: Path = DEFAULT_SCREENSHOT_DIR,
        settle_delay_ms: int = SETTLE_DELAY_MS,
        clock: Callable[[], datetime] = datetime.now,
    ):
        """
        Initialize screenshot manager.

        Args:
            page: Page to capture (None means nothing can be captured)
            browser_kind: Browser name used in file names
            directory: Target directory, created on first capture
            settle_delay_ms: Fixed delay after network idle
            clock: Source of the file name timestamp
        """
        self.page = page
        self.browser_kind = browser_kind or UNKNOWN_BROWSER
        self.directory = Path(directory)
        self.settle_delay_ms = settle_delay_ms
        self._clock = clock

    def build_filename(self, label: str) -> str:
        """Return `<label>_<browser>_<timestamp>.png`."""
        timestamp = self._clock().strftime(TIMESTAMP_FORMAT)
        return f"{label}_{self.browser_kind}_{timestamp}.png"

    def capture(self, label: str) -> bytes:
        """
        Capture a full-page screenshot and attach it to Allure.

        Args:
            label: Attachment name and file name prefix

        Returns:
            PNG bytes, or b"" when nothing could be captured
        """
        if self.page is None:
            logger.warning(f"Page object is None, cannot capture screenshot for attachment: {label}")
            return b""

        try:
            self.page.wait_for_load_state("networkidle")
            self.page.wait_for_timeout(self.settle_delay_ms)

            filename = self.build_filename(label)
            path = self.directory / filename
            path.parent.mkdir(parents=True, exist_ok=True)

            screenshot = self.page.screenshot(path=str(path), full_page=True)
        except (OSError, PlaywrightError) as e:
            logger.error(f"Failed to capture screenshot '{label}'. Error: {e}")
            return b""

        attach_png(screenshot, name=label)
        logger.info(f"Screenshot '{filename}' captured and attached to Allure with name: {label}")
        return screenshot


__all__ = [
    "ScreenshotManager",
    "SETTLE_DELAY_MS",
    "TIMESTAMP_FORMAT",
]
