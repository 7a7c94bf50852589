"""
================================================================================
Page Objects
================================================================================

Page Object Model implementations for the Swag Labs pages.

Each page class encapsulates:
    - Element locators
    - Page-specific actions
    - Verification methods

Author: Automation Team
License: MIT
================================================================================
"""

from .login_page import LoginPage
from .products_page import ProductsPage

__all__ = [
    "LoginPage",
    "ProductsPage",
]
