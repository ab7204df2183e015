"""
Reporters Layer - 报告层

包含 Rich 终端报告器、JSON 报告器和汇总统计。
"""

from content_checker.reporters.base import Reporter
from content_checker.reporters.rich_reporter import RichReporter
from content_checker.reporters.json_reporter import JsonReporter
from content_checker.reporters.summary import Summary, summarize, EXIT_OK, EXIT_ERRORS

__all__ = [
    "Reporter",
    "RichReporter",
    "JsonReporter",
    "Summary",
    "summarize",
    "EXIT_OK",
    "EXIT_ERRORS",
]
