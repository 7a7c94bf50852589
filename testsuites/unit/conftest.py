"""
In-memory stand-ins for the Playwright objects used by the framework.

They record every call so tests can assert on the exact driver traffic
without launching a browser.
"""

from pathlib import Path

import pytest
from loguru import logger


class FakeLocator:
    def __init__(self, selector, visible=True, enabled=True, text="", texts=None, error=None):
        self.selector = selector
        self.visible = visible
        self.enabled = enabled
        self.text = text
        self.texts = texts or []
        self.error = error
        self.calls = []

    def _act(self, name, *args, **kwargs):
        self.calls.append((name, args, kwargs))
        if self.error is not None:
            raise self.error

    @property
    def first(self):
        return self

    def click(self):
        self._act("click")

    def fill(self, text):
        self._act("fill", text)

    def select_option(self, value=None):
        self._act("select_option", value=value)

    def wait_for(self, state=None, timeout=None):
        self._act("wait_for", state=state, timeout=timeout)

    def is_visible(self):
        self._act("is_visible")
        return self.visible

    def is_enabled(self):
        self._act("is_enabled")
        return self.enabled

    def text_content(self):
        self._act("text_content")
        return self.text

    def all_text_contents(self):
        self._act("all_text_contents")
        return list(self.texts)


class FakePage:
    def __init__(self, url="about:blank", screenshot_bytes=b"\x89PNG-fake", screenshot_error=None, goto_error=None):
        self.url = url
        self.screenshot_bytes = screenshot_bytes
        self.screenshot_error = screenshot_error
        self.goto_error = goto_error
        self.locators = {}
        self.calls = []

    def locator(self, selector):
        return self.locators.setdefault(selector, FakeLocator(selector))

    def goto(self, url):
        self.calls.append(("goto", url))
        if self.goto_error is not None:
            raise self.goto_error
        self.url = url

    def wait_for_load_state(self, state="load", timeout=None):
        self.calls.append(("wait_for_load_state", state))

    def wait_for_timeout(self, timeout):
        self.calls.append(("wait_for_timeout", timeout))

    def screenshot(self, path=None, full_page=False):
        self.calls.append(("screenshot", path, full_page))
        if self.screenshot_error is not None:
            raise self.screenshot_error
        if path:
            Path(path).write_bytes(self.screenshot_bytes)
        return self.screenshot_bytes


class FakeContext:
    def __init__(self, driver, options):
        self.driver = driver
        self.options = options

    def new_page(self):
        page = FakePage(goto_error=self.driver.goto_error)
        self.driver.pages.append(page)
        return page


class FakeBrowser:
    def __init__(self, name, options, driver):
        self.name = name
        self.options = options
        self.driver = driver
        self.closed = False
        self.contexts = []

    def new_context(self, **options):
        context = FakeContext(self.driver, options)
        self.contexts.append(context)
        return context

    def close(self):
        self.closed = True


class FakeBrowserType:
    def __init__(self, name, driver):
        self.name = name
        self.driver = driver

    def launch(self, **options):
        if self.driver.launch_error is not None:
            raise self.driver.launch_error
        browser = FakeBrowser(self.name, options, self.driver)
        self.driver.browsers.append(browser)
        return browser


class FakePlaywright:
    def __init__(self, driver):
        self.chromium = FakeBrowserType("chromium", driver)
        self.firefox = FakeBrowserType("firefox", driver)
        self.webkit = FakeBrowserType("webkit", driver)
        self.stopped = False

    def stop(self):
        self.stopped = True


class FakeDriver:
    """Plays the role of `sync_playwright`: calling it returns an object with start()."""

    def __init__(self):
        self.instances = []
        self.browsers = []
        self.pages = []
        self.launch_error = None
        self.goto_error = None

    def __call__(self):
        return self

    def start(self):
        playwright = FakePlaywright(self)
        self.instances.append(playwright)
        return playwright


class RecordingScreenshots:
    def __init__(self):
        self.labels = []

    def capture(self, label):
        self.labels.append(label)
        return b"png"


@pytest.fixture
def fake_page():
    return FakePage(url="https://www.saucedemo.com/")


@pytest.fixture
def fake_driver():
    return FakeDriver()


@pytest.fixture
def screenshots():
    return RecordingScreenshots()


@pytest.fixture
def log_messages():
    """Loguru records as 'LEVEL: message' strings."""
    messages = []
    handler_id = logger.add(
        lambda m: messages.append(f"{m.record['level'].name}: {m.record['message']}"),
        level="DEBUG",
    )
    yield messages
    logger.remove(handler_id)
