"""
================================================================================
Allure Report Utilities
================================================================================

This module provides helpers for Allure attachments and for summarising and
generating reports from an allure-results directory.

Features:
- Attachment helpers
- Result summary generation
- HTML report generation with history carry-over

================================================================================
"""

import json
import shutil
import subprocess
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Optional

import allure
from loguru import logger


# ================================================================================
# Attachment Helpers
# ================================================================================

def attach_png(data: bytes, name: str = "Screenshot") -> None:
    """
    Attach PNG bytes to Allure report. Empty payloads are skipped.

    Args:
        data: PNG image bytes
        name: Attachment name
    """
    if not data:
        logger.debug(f"Skipping empty attachment: {name}")
        return
    allure.attach(
        data,
        name=name,
        attachment_type=allure.attachment_type.PNG
    )


def attach_text(text: str, name: str = "Text") -> None:
    """
    Attach text content to Allure report.

    Args:
        text: Text to attach
        name: Attachment name
    """
    allure.attach(
        text,
        name=name,
        attachment_type=allure.attachment_type.TEXT
    )


# ================================================================================
# Report Processing
# ================================================================================

@dataclass
class TestResultSummary:
    """Summary of test execution results."""
    __test__ = False  # not a pytest test class

    total: int = 0
    passed: int = 0
    failed: int = 0
    broken: int = 0
    skipped: int = 0
    unknown: int = 0
    duration_ms: int = 0
    timestamp: str = field(default_factory=lambda: datetime.now().isoformat())

    @property
    def pass_rate(self) -> float:
        """Calculate pass rate percentage."""
        if self.total == 0:
            return 0.0
        return (self.passed / self.total) * 100

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "total": self.total,
            "passed": self.passed,
            "failed": self.failed,
            "broken": self.broken,
            "skipped": self.skipped,
            "unknown": self.unknown,
            "pass_rate": f"{self.pass_rate:.2f}%",
            "duration_ms": self.duration_ms,
            "timestamp": self.timestamp,
        }


class AllureReportProcessor:
    """
    Processes Allure results and generates reports.

    Provides methods for analyzing results, generating summaries,
    and building the HTML report.
    """

    def __init__(
        self,
        results_dir: Path,
        report_dir: Optional[Path] = None,
    ):
        """
        Initialize processor.

        Args:
            results_dir: Allure results directory
            report_dir: Output report directory
        """
        self.results_dir = Path(results_dir)
        self.report_dir = Path(report_dir or self.results_dir.parent / "allure-report")

    def parse_results(self) -> List[Dict[str, Any]]:
        """
        Parse Allure result files.

        Returns:
            List of test result dictionaries
        """
        results = []

        for result_file in self.results_dir.glob("*-result.json"):
            try:
                with open(result_file, encoding="utf-8") as f:
                    results.append(json.load(f))
            except (OSError, json.JSONDecodeError) as e:
                logger.warning(f"Failed to parse {result_file}: {e}")

        return results

    def generate_summary(self) -> TestResultSummary:
        """
        Generate summary from results.

        Returns:
            TestResultSummary object
        """
        results = self.parse_results()
        summary = TestResultSummary()
        summary.total = len(results)

        for result in results:
            status = result.get("status", "unknown")
            if status == "passed":
                summary.passed += 1
            elif status == "failed":
                summary.failed += 1
            elif status == "broken":
                summary.broken += 1
            elif status == "skipped":
                summary.skipped += 1
            else:
                summary.unknown += 1

            # Add duration
            start = result.get("start", 0)
            stop = result.get("stop", 0)
            summary.duration_ms += (stop - start)

        return summary

    def copy_history(self) -> None:
        """Copy history from previous report to results."""
        history_source = self.report_dir / "history"
        history_dest = self.results_dir / "history"

        if history_source.exists():
            if history_dest.exists():
                shutil.rmtree(history_dest)
            shutil.copytree(history_source, history_dest)
            logger.info("Copied history from previous report")

    def generate_report(self) -> bool:
        """
        Generate Allure HTML report.

        Returns:
            True if successful
        """
        self.copy_history()

        cmd = [
            "allure", "generate",
            str(self.results_dir),
            "-o", str(self.report_dir),
            "--clean"
        ]

        try:
            result = subprocess.run(cmd, capture_output=True, text=True)
        except FileNotFoundError:
            logger.warning("Allure CLI not found. Please install Allure to generate reports.")
            return False

        if result.returncode == 0:
            logger.info(f"Report generated at {self.report_dir}")
            return True

        logger.error(f"Report generation failed: {result.stderr}")
        return False

    def print_summary(self) -> TestResultSummary:
        """Log summary and return it."""
        summary = self.generate_summary()

        logger.info("=" * 60)
        logger.info("TEST EXECUTION SUMMARY")
        logger.info("=" * 60)
        logger.info(f"Total Tests:    {summary.total}")
        logger.info(f"Passed:         {summary.passed}")
        logger.info(f"Failed:         {summary.failed}")
        logger.info(f"Broken:         {summary.broken}")
        logger.info(f"Skipped:        {summary.skipped}")
        logger.info(f"Pass Rate:      {summary.pass_rate:.2f}%")
        logger.info(f"Duration:       {summary.duration_ms / 1000:.2f}s")
        logger.info("=" * 60)
        return summary
