# ================================================================================
# Element Actions Module
# ================================================================================
#
# This module wraps Playwright element interactions with logging, Allure steps
# and uniform failure translation.
#
# Key Features:
#   - Every action carries a human-readable element name for diagnostics
#   - Mutating actions re-raise driver errors as ElementInteractionError
#   - Visibility / enabled checks degrade to False instead of raising
#   - Logged assertion helpers for test cases
#   - Allure step integration
#
# ================================================================================

from typing import Any, Union

import allure
from loguru import logger
from playwright.sync_api import Error as PlaywrightError
from playwright.sync_api import Locator, Page


class ElementInteractionError(RuntimeError):
    """Raised when a driver-level error occurs while acting on an element."""

    def __init__(self, message: str, element_name: str):
        super().__init__(message)
        self.element_name = element_name


class ElementActions:
    """
    A utility class wrapping element interactions for page objects.

    Callers never need to interpret Playwright error types: actions that change
    the page raise ElementInteractionError, queries answer False.

    Example:
        actions = ElementActions(page)
        actions.enter_text("#user-name", "standard_user", "Username Input Field")
        actions.click_element(page.locator("#login-button"), "Login Button")
    """

    def __init__(self, page: Page):
        """
        Initialize ElementActions with a Playwright page.

        Args:
            page: Playwright Page object
        """
        self.page = page
        logger.debug(f"ElementActions initialized for page: {page.url}")

    @allure.step("Clicking element: {element_name}")
    def click_element(self, selector: Union[str, Locator], element_name: str) -> None:
        """
        Click an element.

        Args:
            selector: CSS selector or Locator object
            element_name: Human-readable element name for reporting

        Raises:
            ElementInteractionError: The driver failed to click
        """
        locator = self._get_locator(selector)
        try:
            logger.info(f"Attempting to click element: '{element_name}'")
            locator.click()
            logger.info(f"Successfully clicked element: '{element_name}'")
        except PlaywrightError as e:
            logger.error(f"Failed to click element '{element_name}'. Error: {e}")
            raise ElementInteractionError(
                f"Failed to click element '{element_name}'", element_name
            ) from e

    @allure.step("Entering text into element: {element_name}")
    def enter_text(
        self,
        selector: Union[str, Locator],
        text: str,
        element_name: str,
    ) -> None:
        """
        Fill an input field with text.

        Args:
            selector: CSS selector or Locator object
            text: Text to enter
            element_name: Human-readable element name for reporting

        Raises:
            ElementInteractionError: The driver failed to fill the field
        """
        locator = self._get_locator(selector)
        shown = "*" * len(text) if "password" in element_name.lower() else text
        try:
            logger.info(f"Attempting to enter text '{shown}' into element: '{element_name}'")
            locator.fill(text)
            logger.info(f"Successfully entered text into element: '{element_name}'")
        except PlaywrightError as e:
            logger.error(f"Failed to enter text into element '{element_name}'. Error: {e}")
            raise ElementInteractionError(
                f"Failed to enter text into element '{element_name}'", element_name
            ) from e

    @allure.step("Selecting dropdown option '{value}' for element: {element_name}")
    def select_dropdown_by_value(
        self,
        selector: Union[str, Locator],
        value: str,
        element_name: str,
    ) -> None:
        """
        Select a dropdown option by its value attribute.

        Args:
            selector: CSS selector or Locator object
            value: Option value to select
            element_name: Human-readable element name for reporting

        Raises:
            ElementInteractionError: The driver failed to select the option
        """
        locator = self._get_locator(selector)
        try:
            logger.info(
                f"Attempting to select dropdown option '{value}' by value "
                f"for element: '{element_name}'"
            )
            locator.select_option(value=value)
            logger.info(f"Successfully selected dropdown option '{value}' for element: '{element_name}'")
        except PlaywrightError as e:
            logger.error(
                f"Failed to select dropdown option '{value}' for element "
                f"'{element_name}'. Error: {e}"
            )
            raise ElementInteractionError(
                f"Failed to select dropdown option '{value}' for element '{element_name}'",
                element_name,
            ) from e

    @allure.step("Get text: {element_name}")
    def get_text(self, selector: Union[str, Locator], element_name: str) -> str:
        """
        Get text content of an element.

        Args:
            selector: CSS selector or Locator object
            element_name: Human-readable element name for reporting

        Returns:
            Text content of the element ("" when it has none)

        Raises:
            ElementInteractionError: The driver failed to read the element
        """
        locator = self._get_locator(selector)
        try:
            text = locator.text_content() or ""
        except PlaywrightError as e:
            logger.error(f"Failed to read text of element '{element_name}'. Error: {e}")
            raise ElementInteractionError(
                f"Failed to read text of element '{element_name}'", element_name
            ) from e
        logger.info(f"Element '{element_name}' text: '{text}'")
        return text

    @allure.step("Waiting for element: {element_name} to be visible (timeout: {timeout_seconds}s)")
    def wait_for_locator(
        self,
        selector: Union[str, Locator],
        timeout_seconds: float,
        element_name: str,
    ) -> None:
        """
        Wait for an element to become visible.

        Args:
            selector: CSS selector or Locator object
            timeout_seconds: Wait timeout in seconds
            element_name: Human-readable element name for reporting

        Raises:
            ElementInteractionError: The element was not visible in time
        """
        locator = self._get_locator(selector)
        try:
            logger.info(f"Waiting for element '{element_name}' to be visible for {timeout_seconds} seconds...")
            locator.wait_for(state="visible", timeout=timeout_seconds * 1000)
            logger.info(f"Element '{element_name}' is visible.")
        except PlaywrightError as e:
            logger.error(
                f"Element '{element_name}' was not visible within "
                f"{timeout_seconds} seconds. Error: {e}"
            )
            raise ElementInteractionError(
                f"Element '{element_name}' was not visible within {timeout_seconds} seconds",
                element_name,
            ) from e

    @allure.step("Checking visibility of element: {element_name}")
    def is_visible(self, selector: Union[str, Locator], element_name: str) -> bool:
        """
        Check if an element is visible.

        Returns:
            True if visible, False otherwise (including on driver errors)
        """
        try:
            visible = self._get_locator(selector).is_visible()
        except PlaywrightError as e:
            logger.error(f"Failed to check visibility of element '{element_name}'. Error: {e}")
            return False
        logger.info(f"Element '{element_name}' visibility status: {visible}")
        return visible

    @allure.step("Checking enabled status of element: {element_name}")
    def is_enabled(self, selector: Union[str, Locator], element_name: str) -> bool:
        """
        Check if an element is enabled.

        Returns:
            True if enabled, False otherwise (including on driver errors)
        """
        try:
            enabled = self._get_locator(selector).is_enabled()
        except PlaywrightError as e:
            logger.error(f"Failed to check enabled status of element '{element_name}'. Error: {e}")
            return False
        logger.info(f"Element '{element_name}' enabled status: {enabled}")
        return enabled

    @allure.step("Asserting that '{actual}' equals '{expected}'")
    def assert_equals(self, actual: Any, expected: Any, message: str) -> None:
        """Assert equality with logging before and after."""
        logger.info(f"Asserting equality: Actual='{actual}', Expected='{expected}'")
        assert actual == expected, f"{message} expected [{expected}] but found [{actual}]"
        logger.info("Assertion successful: Actual and Expected are equal.")

    @allure.step("Asserting that condition is true: {message}")
    def assert_true(self, condition: bool, message: str) -> None:
        """Assert a condition with logging before and after."""
        logger.info(f"Asserting condition is true. Condition: {condition}. Message: {message}")
        assert condition, message
        logger.info("Assertion successful: Condition is true.")

    def _get_locator(self, selector: Union[str, Locator]) -> Locator:
        """Convert selector to Locator if needed."""
        if isinstance(selector, str):
            return self.page.locator(selector)
        return selector


__all__ = [
    "ElementActions",
    "ElementInteractionError",
]
