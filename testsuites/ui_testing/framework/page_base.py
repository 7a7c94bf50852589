"""
================================================================================
Base Page Object
================================================================================

Foundation class for Page Object Model implementation.

Provides:
    - Element interaction wrapper bound to the page
    - Screenshot capture
    - Wait strategies

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from typing import Optional

from loguru import logger
from playwright.sync_api import Locator, Page

from .element_actions import ElementActions
from .screenshot_manager import ScreenshotManager


class BasePage:
    """
    Base class for all page objects.

    Subclasses declare their locators once in __init__ and expose
    user-intent methods built on `self.actions`.

    Usage:
        class LoginPage(BasePage):
            def __init__(self, page, screenshots=None):
                super().__init__(page, screenshots)
                self.username_input = self.locator("#user-name")

            def enter_username(self, username: str) -> None:
                self.actions.enter_text(self.username_input, username, "Username Input Field")
    """

    PAGE_NAME: str = ""

    def __init__(
        self,
        page: Page,
        screenshots: Optional[ScreenshotManager] = None,
    ):
        """
        Initialize page object.

        Args:
            page: Playwright Page object
            screenshots: Screenshot capture for this page; a manager with an
                         unknown browser kind is created when omitted
        """
        self.page = page
        self.actions = ElementActions(page)
        self.screenshots = screenshots or ScreenshotManager(page)
        logger.debug(f"{self.PAGE_NAME or type(self).__name__} object initialized with ElementActions.")

    def locator(self, selector: str) -> Locator:
        """Declare a locator on this page."""
        return self.page.locator(selector)

    def capture(self, label: str) -> bytes:
        """Take a screenshot and attach it to the report."""
        return self.screenshots.capture(label)

    def wait_for_page_load(
        self,
        state: str = "networkidle",
        timeout: int = 15000,
    ) -> None:
        """
        Wait for the page to reach a stable load state.

        Args:
            state: Playwright load state ('load', 'domcontentloaded', 'networkidle')
            timeout: Timeout in milliseconds
        """
        self.page.wait_for_load_state(state, timeout=timeout)


__all__ = [
    "BasePage",
    "PageBase",
]

# Backward-compatible alias (many Page Objects prefer PageBase naming)
PageBase = BasePage
