"""
================================================================================
Swag Labs Suite Tools
================================================================================

Support utilities shared by the test suites and the runner script.

Modules:
    - common: Loguru logging setup
    - report_tools: Allure attachment helpers and result summaries

Example:
    from swaglabs_tools.common import init_logger
    from swaglabs_tools.report_tools.allure_utils import AllureReportProcessor

    init_logger(level="DEBUG")
    AllureReportProcessor(Path("reports/allure-results")).print_summary()

================================================================================
"""

__version__ = "1.0.0"

__all__ = [
    "common",
    "report_tools",
]
