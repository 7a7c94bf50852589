"""
================================================================================
UI Testing Pytest Configuration
================================================================================

This module configures pytest for UI tests, providing fixtures for browser
session management, page objects, and test setup/teardown.

Key Features:
- One browser session per test, released after the test
- Page Object fixtures bound to the session page
- Screenshot capture on failure
- Explicit browser/environment parameters via command-line options

================================================================================
"""

from typing import Generator, Tuple

import pytest
from playwright.sync_api import Page

from testsuites.ui_testing.framework.browser_manager import BrowserManager, BrowserSession
from testsuites.ui_testing.framework.element_actions import ElementActions
from testsuites.ui_testing.framework.suite_config import SuiteConfig
from testsuites.ui_testing.pages.login_page import LoginPage
from testsuites.ui_testing.pages.products_page import ProductsPage


# ================================================================================
# Browser Fixtures
# ================================================================================

@pytest.fixture(scope="session")
def browser_manager(suite_config: SuiteConfig) -> Generator[BrowserManager, None, None]:
    """
    Session-scoped browser manager fixture.

    Each xdist worker process gets its own manager; the manager opens at most
    one browser session at a time.
    """
    manager = BrowserManager(suite_config)
    yield manager
    if manager.active_session is not None:
        manager.close_session(test_name="session_end")


@pytest.fixture(scope="function")
def browser_session(
    request: pytest.FixtureRequest,
    browser_manager: BrowserManager,
) -> Generator[BrowserSession, None, None]:
    """
    Function-scoped browser session fixture.

    Opens a fresh driver, browser, context and page on the base URL before the
    test and tears everything down afterwards, capturing a screenshot first
    when the test failed.
    """
    session = browser_manager.open_session(
        browser_kind=request.config.getoption("--browser-kind"),
        environment=request.config.getoption("--environment"),
    )
    yield session
    browser_manager.close_session(
        failed=_test_failed(request.node),
        test_name=request.node.name,
    )


@pytest.fixture(scope="function")
def page(browser_session: BrowserSession) -> Page:
    """The session page, already on the base URL."""
    return browser_session.page


# ================================================================================
# Page Object Fixtures
# ================================================================================

@pytest.fixture
def actions(page: Page) -> ElementActions:
    """Element actions for assertions in test bodies."""
    return ElementActions(page)


@pytest.fixture
def login_page(browser_session: BrowserSession) -> LoginPage:
    """
    Provides LoginPage instance.

    Use this fixture for tests that interact with the login page.
    """
    return LoginPage(browser_session.page, screenshots=browser_session.screenshots)


@pytest.fixture
def products_page(browser_session: BrowserSession) -> ProductsPage:
    """
    Provides ProductsPage instance.

    Use this fixture for tests that interact with the inventory.
    """
    return ProductsPage(browser_session.page, screenshots=browser_session.screenshots)


# ================================================================================
# Test Data Fixtures
# ================================================================================

@pytest.fixture
def standard_user(suite_config: SuiteConfig) -> Tuple[str, str]:
    """Standard account from configuration (standard.username / standard.password)."""
    if not suite_config.username or not suite_config.password:
        pytest.skip("standard.username / standard.password are not configured")
    return suite_config.username, suite_config.password


# ================================================================================
# Test Lifecycle Hooks
# ================================================================================

@pytest.hookimpl(hookwrapper=True)
def pytest_runtest_makereport(item, call):
    """
    Keep each phase report on the item.

    The browser_session fixture reads them during teardown to decide whether
    a failure screenshot is needed.
    """
    outcome = yield
    report = outcome.get_result()
    setattr(item, f"rep_{report.when}", report)


def _test_failed(item: pytest.Item) -> bool:
    """True when setup or call failed, including expected failures."""
    for when in ("setup", "call"):
        report = getattr(item, f"rep_{when}", None)
        if report is None:
            continue
        if report.failed or (report.skipped and hasattr(report, "wasxfail")):
            return True
    return False
