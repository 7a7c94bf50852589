"""
================================================================================
UI Testing Framework
================================================================================

Playwright-based UI automation framework for the Swag Labs shop.

Components:
    - suite_config: Immutable suite configuration and session settings
    - element_actions: Logged element interactions with uniform failures
    - screenshot_manager: Screenshot capture and report attachment
    - browser_manager: Browser session lifecycle management
    - page_base: Base page object for common operations
    - data_providers: Parameter sets for parametrized tests

Author: Automation Team
License: MIT
================================================================================
"""

from .suite_config import SuiteConfig, SessionSettings, load_suite_config
from .element_actions import ElementActions, ElementInteractionError
from .screenshot_manager import ScreenshotManager
from .browser_manager import BrowserManager, BrowserSession, SessionStateError
from .page_base import BasePage

__all__ = [
    "SuiteConfig",
    "SessionSettings",
    "load_suite_config",
    "ElementActions",
    "ElementInteractionError",
    "ScreenshotManager",
    "BrowserManager",
    "BrowserSession",
    "SessionStateError",
    "BasePage",
]
