"""
报告器基类 - 定义报告器接口
"""

from typing import Protocol, Sequence

from content_checker.core.models import ValidationResult
from content_checker.reporters.summary import Summary


class Reporter(Protocol):
    """报告器协议"""

    def report(self, results: Sequence[ValidationResult], summary: Summary) -> None:
        """生成报告"""
        ...
