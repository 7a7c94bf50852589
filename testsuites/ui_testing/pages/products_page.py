"""
================================================================================
Products Page Object
================================================================================

Inventory screen shown after a successful login.

Add-to-cart buttons are addressed through an explicit product catalog that
maps each product's display name to its button id. The catalog is checked
when the page object is built, so a broken mapping fails fast instead of
surfacing as a locator timeout in the middle of a scenario.

================================================================================
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Dict, List, Mapping, Optional

import allure
from loguru import logger
from playwright.sync_api import Page

from testsuites.ui_testing.framework.element_actions import ElementInteractionError
from testsuites.ui_testing.framework.page_base import PageBase
from testsuites.ui_testing.framework.screenshot_manager import ScreenshotManager


PRODUCT_NAMES = (
    "Sauce Labs Backpack",
    "Sauce Labs Bike Light",
    "Sauce Labs Bolt T-Shirt",
    "Sauce Labs Fleece Jacket",
    "Sauce Labs Onesie",
    "Test.allTheThings() T-Shirt (Red)",
)


def add_to_cart_button_id(product_name: str) -> str:
    """Button id the shop renders for a product: lower-cased, spaces hyphenated."""
    return "add-to-cart-" + product_name.lower().replace(" ", "-")


DEFAULT_PRODUCT_CATALOG: Mapping[str, str] = MappingProxyType(
    {name: add_to_cart_button_id(name) for name in PRODUCT_NAMES}
)


def validate_catalog(catalog: Mapping[str, str]) -> Dict[str, str]:
    """
    Check a product catalog and return a copy of it.

    Raises:
        ValueError: The catalog is empty, has blank names or ids, or maps two
                    products onto the same button id
    """
    if not catalog:
        raise ValueError("Product catalog is empty")

    seen: Dict[str, str] = {}
    for name, button_id in catalog.items():
        if not name or not name.strip():
            raise ValueError("Product catalog contains a blank product name")
        if not button_id or not button_id.strip():
            raise ValueError(f"Product '{name}' has a blank add-to-cart button id")
        if button_id in seen:
            raise ValueError(
                f"Products '{seen[button_id]}' and '{name}' share the button id '{button_id}'"
            )
        seen[button_id] = name
    return dict(catalog)


class ProductsPage(PageBase):
    """Products (inventory) page object."""

    PAGE_NAME = "ProductsPage"

    # Values of the sort dropdown options
    SORT_NAME_ASC = "az"
    SORT_NAME_DESC = "za"
    SORT_PRICE_ASC = "lohi"
    SORT_PRICE_DESC = "hilo"

    def __init__(
        self,
        page: Page,
        screenshots: Optional[ScreenshotManager] = None,
        catalog: Mapping[str, str] = DEFAULT_PRODUCT_CATALOG,
    ):
        super().__init__(page, screenshots)
        self.catalog = validate_catalog(catalog)
        self.products_page_title = self.locator(".title")
        self.add_to_cart_buttons = self.locator("[id^='add-to-cart']")
        self.shopping_cart_link = self.locator(".shopping_cart_link")
        self.shopping_cart_badge = self.locator(".shopping_cart_badge")
        self.sort_dropdown = self.locator(".product_sort_container")
        self.item_names = self.locator(".inventory_item_name")

    @allure.step("Verify Products page title is displayed")
    def is_products_page_displayed(self) -> bool:
        return self.actions.is_visible(self.products_page_title, "Products Page Title")

    @allure.step("Get Products page title text")
    def get_products_page_title(self) -> str:
        title = self.actions.get_text(self.products_page_title, "Products Page Title")
        self.capture("On Products Page - Successful Login")
        return title

    @allure.step("Wait for inventory to load")
    def wait_for_inventory(self, timeout_seconds: float = 10) -> None:
        self.actions.wait_for_locator(
            self.add_to_cart_buttons.first, timeout_seconds, "Add to Cart Buttons"
        )

    @allure.step("Add item '{item_name}' to cart")
    def add_item_to_cart(self, item_name: str) -> None:
        """
        Click the add-to-cart button of a catalog product.

        Raises:
            KeyError: The product is not in the catalog
        """
        try:
            button_id = self.catalog[item_name]
        except KeyError:
            raise KeyError(
                f"Unknown product '{item_name}'. Known products: {sorted(self.catalog)}"
            ) from None
        # Attribute selector: ids such as "test.allthethings()-t-shirt-(red)" are not valid CSS #ids
        button = self.locator(f"[id='{button_id}']")
        self.actions.click_element(button, f"Add to Cart Button for {item_name}")

    @allure.step("Click shopping cart link")
    def click_shopping_cart(self) -> None:
        self.actions.click_element(self.shopping_cart_link, "Shopping Cart Link")
        self.wait_for_page_load()

    @allure.step("Get shopping cart item count")
    def get_shopping_cart_item_count(self) -> int:
        """
        Badge count, or 0 when the cart is empty and no badge (or an empty one) is shown.

        Raises:
            ElementInteractionError: The badge shows something other than a number
        """
        if not self.actions.is_visible(self.shopping_cart_badge, "Shopping Cart Badge"):
            logger.info("Shopping cart is empty (no badge found).")
            return 0

        text = self.actions.get_text(self.shopping_cart_badge, "Shopping Cart Badge").strip()
        if not text:
            logger.info("Shopping cart is empty (badge has no count).")
            return 0
        try:
            count = int(text)
        except ValueError:
            raise ElementInteractionError(
                f"Shopping cart badge shows '{text}' instead of an item count",
                "Shopping Cart Badge",
            ) from None
        logger.info(f"Shopping cart has {count} items.")
        return count

    @allure.step("Sort products by '{option_value}'")
    def sort_products(self, option_value: str) -> None:
        self.actions.select_dropdown_by_value(self.sort_dropdown, option_value, "Product Sort Dropdown")

    @allure.step("Get product names")
    def get_item_names(self) -> List[str]:
        names = self.item_names.all_text_contents()
        logger.info(f"Products listed: {names}")
        return names
