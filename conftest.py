"""
Repository-level pytest configuration.

Why this exists:
  - Register the command-line parameters of the UI suite (browser, environment)
  - Load the suite configuration exactly once per process and share it
  - Initialize logging before any test module runs
  - Feed the data providers into parametrized tests

Important:
  The suite configuration is immutable after `pytest_configure`; fixtures and
  hooks read it, nothing writes it.
"""

from __future__ import annotations

import pytest

from swaglabs_tools.common import init_logger
from testsuites.ui_testing.framework.data_providers import product_to_add, user_credentials
from testsuites.ui_testing.framework.suite_config import SuiteConfig, load_suite_config


# Exposes the `pytester` fixture to the unit tests of the pytest integration
pytest_plugins = ["pytester"]

SUITE_CONFIG_KEY = pytest.StashKey[SuiteConfig]()


def pytest_addoption(parser):
    """Explicit session parameters; they win over config/config.yaml."""
    group = parser.getgroup("swaglabs", "Swag Labs UI suite")
    group.addoption(
        "--browser-kind",
        action="store",
        default=None,
        help="Browser for UI tests: chromium, firefox or webkit (default: from config)",
    )
    group.addoption(
        "--environment",
        action="store",
        default=None,
        help="Target environment, e.g. dev, qa, prod (default: from config)",
    )


def pytest_configure(config):
    """Load configuration once and set up logging."""
    suite_config = load_suite_config()
    config.stash[SUITE_CONFIG_KEY] = suite_config
    init_logger(level=suite_config.log_level, log_file=suite_config.log_file)


def pytest_generate_tests(metafunc):
    """
    Parametrize tests from the data providers.

    `credentials` follows the effective environment; an environment without
    accounts raises and aborts collection.
    """
    if "credentials" in metafunc.fixturenames:
        suite_config = metafunc.config.stash[SUITE_CONFIG_KEY]
        environment = metafunc.config.getoption("--environment") or suite_config.environment
        rows = user_credentials(environment)
        metafunc.parametrize("credentials", rows, ids=[username for username, _ in rows])

    if "product_name" in metafunc.fixturenames:
        metafunc.parametrize("product_name", [name for (name,) in product_to_add()])


@pytest.fixture(scope="session")
def suite_config(request) -> SuiteConfig:
    """The configuration loaded at startup."""
    return request.config.stash[SUITE_CONFIG_KEY]
