"""
Test suites package.

`testsuites` stays importable so that:
  - the UI framework and page objects can be imported by tests and fixtures
  - `run_tests.py` and CI jobs can reference suite paths and modules

Contents:
  - ui_testing: Playwright framework, page objects and live-shop tests
  - unit: framework tests that run without a browser
"""
