"""
================================================================================
Browser Manager
================================================================================

Browser session lifecycle management for UI automation.

Features:
    - One fresh Playwright driver, browser, context and page per test
    - Explicit session objects owned by a single worker
    - Guaranteed release of every handle, even when setup or capture fails
    - Failure screenshots on teardown
    - Browser kind fallback for unsupported names

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

import os
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Any, Callable, Dict, Iterator, Optional

from loguru import logger
from playwright.sync_api import (
    sync_playwright,
    Browser,
    BrowserContext,
    Page,
    Playwright,
)

from swaglabs_tools.report_tools.allure_utils import attach_text

from .screenshot_manager import ScreenshotManager
from .suite_config import DEFAULT_BROWSER, SuiteConfig


SUPPORTED_BROWSERS = ("chromium", "firefox", "webkit")


class SessionStateError(RuntimeError):
    """Raised when a session is opened while another one is still live."""
    pass


@dataclass
class BrowserSession:
    """
    Driver resources owned by one worker for the duration of one test.

    Attributes:
        playwright: Running Playwright driver
        browser: Launched browser
        context: Isolated browser context
        page: Page navigated to the base URL
        browser_kind: Browser that was actually launched
        environment: Environment the session targets
        base_url: URL the page was opened on
        screenshots: Screenshot capture bound to the page
    """
    playwright: Playwright
    browser: Browser
    context: BrowserContext
    page: Optional[Page]
    browser_kind: str
    environment: str
    base_url: str
    screenshots: ScreenshotManager


def worker_name() -> str:
    """Name of the current pytest-xdist worker ("main" when not distributed)."""
    return os.environ.get("PYTEST_XDIST_WORKER", "main")


def resolve_browser_kind(requested: Optional[str]) -> str:
    """
    Map a requested browser name onto a supported Playwright browser.

    Unsupported names fall back to chromium with a warning.
    """
    kind = (requested or "").strip().lower()
    if kind in SUPPORTED_BROWSERS:
        return kind
    logger.warning(
        f"Unsupported browser type: {requested}. Launching {DEFAULT_BROWSER} "
        f"by default for worker: {worker_name()}"
    )
    return DEFAULT_BROWSER


class BrowserManager:
    """
    Opens and closes browser sessions for one worker.

    At most one session is live per manager. Each test gets its own
    Playwright driver and browser; nothing is shared between tests.

    Usage:
        manager = BrowserManager(load_suite_config())
        with manager.session(browser_kind="firefox") as session:
            session.page.locator("#user-name").fill("standard_user")

        # Or split across fixture setup / teardown
        session = manager.open_session()
        ...
        manager.close_session(failed=True, test_name="test_login")
    """

    # Default context options
    DEFAULT_CONTEXT_OPTIONS: Dict[str, Any] = {
        "viewport": {"width": 1920, "height": 1080},
        "ignore_https_errors": True,
    }

    def __init__(
        self,
        config: SuiteConfig,
        playwright_factory: Callable[[], Any] = sync_playwright,
    ):
        """
        Initialize browser manager.

        Args:
            config: Suite configuration
            playwright_factory: Returns an object whose start() yields a Playwright driver
        """
        self.config = config
        self._playwright_factory = playwright_factory
        self._session: Optional[BrowserSession] = None

    @property
    def active_session(self) -> Optional[BrowserSession]:
        """The live session, or None between tests."""
        return self._session

    def open_session(
        self,
        browser_kind: Optional[str] = None,
        environment: Optional[str] = None,
    ) -> BrowserSession:
        """
        Start a driver, launch a browser and open a page on the base URL.

        Args:
            browser_kind: Explicit browser kind, overrides configuration
            environment: Explicit environment, overrides configuration

        Returns:
            The new BrowserSession

        Raises:
            SessionStateError: A session is already live on this manager
        """
        if self._session is not None:
            raise SessionStateError(
                f"A browser session is already active for worker {worker_name()}; "
                f"close it before opening another"
            )

        worker = worker_name()
        logger.info(f"--- Setting up browser session for worker: {worker} ---")

        settings = self.config.resolve(browser_kind, environment)
        kind = resolve_browser_kind(settings.browser_kind)

        playwright = self._playwright_factory().start()
        logger.info(f"Playwright instance created for worker: {worker}")

        browser: Optional[Browser] = None
        try:
            logger.info(f"Launching browser: {kind} (Headless: {settings.headless}) for worker: {worker}")
            browser = getattr(playwright, kind).launch(headless=settings.headless)

            context = browser.new_context(**self.DEFAULT_CONTEXT_OPTIONS)
            logger.info(f"New browser context created for worker: {worker}")

            page = context.new_page()
            logger.info(
                f"Navigating to base URL for environment '{settings.environment}': "
                f"{settings.base_url} for worker: {worker}"
            )
            page.goto(settings.base_url)
        except Exception:
            logger.error(f"Browser session setup failed for worker: {worker}. Releasing handles.")
            self._release(browser, playwright)
            raise

        self._session = BrowserSession(
            playwright=playwright,
            browser=browser,
            context=context,
            page=page,
            browser_kind=kind,
            environment=settings.environment,
            base_url=settings.base_url,
            screenshots=ScreenshotManager(
                page,
                browser_kind=kind,
                directory=self.config.screenshot_dir,
            ),
        )
        return self._session

    def close_session(self, failed: bool = False, test_name: str = "") -> None:
        """
        Tear down the live session.

        Captures a `<test_name>_FAILURE` screenshot when the test failed, then
        always closes the browser, stops the driver and forgets the session.

        Args:
            failed: Whether the test that used the session failed
            test_name: Test name used as screenshot label
        """
        worker = worker_name()
        session = self._session
        if session is None:
            logger.warning(f"No active browser session to close for worker: {worker}")
            return

        logger.info(f"--- Tearing down browser session for worker: {worker} ---")
        try:
            if session.page is None:
                logger.warning(
                    f"Page object was None during teardown for worker: {worker}. "
                    f"Cannot capture screenshot."
                )
            elif failed:
                logger.error(f"Test failed: {test_name}. Capturing screenshot for worker: {worker}")
                session.screenshots.capture(f"{test_name}_FAILURE")
                attach_text(session.page.url, name="Current URL")
            else:
                logger.info(f"Test passed: {test_name} for worker: {worker}")
        finally:
            self._session = None
            self._release(session.browser, session.playwright)
            logger.info(f"Browser session released for worker: {worker}")

    @contextmanager
    def session(
        self,
        browser_kind: Optional[str] = None,
        environment: Optional[str] = None,
        test_name: str = "",
    ) -> Iterator[BrowserSession]:
        """
        Scoped session: opened on entry, closed on exit.

        An exception escaping the block counts as a failure and triggers a
        failure screenshot before the exception propagates.
        """
        session = self.open_session(browser_kind, environment)
        failed = False
        try:
            yield session
        except BaseException:
            failed = True
            raise
        finally:
            self.close_session(failed=failed, test_name=test_name)

    def _release(self, browser: Optional[Browser], playwright: Optional[Playwright]) -> None:
        """Close browser and stop driver; errors are logged so both run."""
        worker = worker_name()
        if browser is not None:
            try:
                browser.close()
                logger.info(f"Browser closed for worker: {worker}")
            except Exception as e:
                logger.error(f"Failed to close browser for worker: {worker}. Error: {e}")
        if playwright is not None:
            try:
                playwright.stop()
                logger.info(f"Playwright instance closed for worker: {worker}")
            except Exception as e:
                logger.error(f"Failed to stop Playwright for worker: {worker}. Error: {e}")


__all__ = [
    "BrowserManager",
    "BrowserSession",
    "SessionStateError",
    "SUPPORTED_BROWSERS",
    "resolve_browser_kind",
]
