"""
================================================================================
Test Suites Pytest Configuration
================================================================================

This module registers the markers used across the suites and tags collected
tests by the directory they live in.

================================================================================
"""

import pytest


def pytest_configure(config):
    """Configure pytest with project-wide custom markers."""

    # Priority markers
    config.addinivalue_line(
        "markers", "P0: Critical priority tests - must pass for deployment"
    )
    config.addinivalue_line(
        "markers", "P1: High priority tests - important functionality"
    )
    config.addinivalue_line(
        "markers", "P2: Medium priority tests - edge cases and minor features"
    )
    config.addinivalue_line(
        "markers", "P3: Low priority tests - extensive validation"
    )

    # Test type markers
    config.addinivalue_line(
        "markers", "smoke: Quick verification tests"
    )
    config.addinivalue_line(
        "markers", "sanity: Core user journeys checked after every deployment"
    )
    config.addinivalue_line(
        "markers", "regression: Full regression test suite"
    )
    config.addinivalue_line(
        "markers", "e2e: End-to-end tests simulating user flows"
    )

    # Domain markers
    config.addinivalue_line(
        "markers", "ui: Browser-driven tests against the shop"
    )
    config.addinivalue_line(
        "markers", "unit: Framework tests that run without a browser"
    )

    # Feature markers
    config.addinivalue_line(
        "markers", "auth: Tests related to authentication"
    )
    config.addinivalue_line(
        "markers", "cart: Tests related to the shopping cart"
    )


def pytest_collection_modifyitems(config, items):
    """
    Modify collected test items.

    Tags tests with 'ui' or 'unit' from their location so that
    `-m unit` runs everything that needs no browser.
    """
    for item in items:
        if "ui_testing" in item.path.parts:
            item.add_marker(pytest.mark.ui)

        if "unit" in item.path.parts:
            item.add_marker(pytest.mark.unit)


def pytest_report_header(config):
    """Add custom header to pytest output."""
    return [
        "",
        "=" * 60,
        "Swag Labs UI Automation Suite",
        "=" * 60,
        "",
    ]
