"""
================================================================================
Login Page Object
================================================================================

Login screen of the Swag Labs shop.

Locators are the ids and data-test attributes the shop ships with, so no
fallback strategies are needed.

================================================================================
"""

from __future__ import annotations

from typing import Optional

import allure
from loguru import logger
from playwright.sync_api import Page

from testsuites.ui_testing.framework.page_base import PageBase
from testsuites.ui_testing.framework.screenshot_manager import ScreenshotManager


class LoginPage(PageBase):
    """Login page object."""

    PAGE_NAME = "LoginPage"

    def __init__(self, page: Page, screenshots: Optional[ScreenshotManager] = None):
        super().__init__(page, screenshots)
        self.username_input = self.locator("#user-name")
        self.password_input = self.locator("#password")
        self.login_button = self.locator("#login-button")
        self.error_message = self.locator("[data-test='error']")

    @allure.step("Enter username: {username}")
    def enter_username(self, username: str) -> None:
        self.actions.enter_text(self.username_input, username, "Username Input Field")

    @allure.step("Enter password")
    def enter_password(self, password: str) -> None:
        self.actions.enter_text(self.password_input, password, "Password Input Field")

    @allure.step("Click Login button")
    def click_login_button(self) -> None:
        self.actions.click_element(self.login_button, "Login Button")

    @allure.step("Perform login with username: {username}")
    def login(self, username: str, password: str) -> None:
        """
        Fill the form and submit it.

        A screenshot of the resulting page is attached whether or not the
        credentials were accepted.
        """
        self.enter_username(username)
        self.enter_password(password)
        self.click_login_button()
        logger.info("Login action performed.")
        self.capture("After Login - Successful")

    @allure.step("Verify error message is displayed")
    def is_error_message_displayed(self) -> bool:
        return self.actions.is_visible(self.error_message, "Login Error Message")

    @allure.step("Get error message text")
    def get_error_message_text(self) -> str:
        return self.actions.get_text(self.error_message, "Login Error Message")

    @allure.step("Verify Login button is enabled")
    def is_login_button_enabled(self) -> bool:
        return self.actions.is_enabled(self.login_button, "Login Button")
