"""
汇总统计 - 所有文件的检查结果汇总与退出码
"""

from dataclasses import dataclass, asdict
from typing import Iterable, Literal

from content_checker.core.models import ValidationResult

EXIT_OK = 0
EXIT_ERRORS = 1


@dataclass(frozen=True)
class Summary:
    """
    汇总统计

    Attributes:
        files_clean: 无错误且无警告的文件数
        files_with_issues: 有错误或警告的文件数
        errors: 错误总数
        warnings: 警告总数
        info: 提示总数
    """
    files_clean: int = 0
    files_with_issues: int = 0
    errors: int = 0
    warnings: int = 0
    info: int = 0

    @property
    def total_files(self) -> int:
        return self.files_clean + self.files_with_issues

    @property
    def status(self) -> Literal["failed", "warnings", "passed"]:
        if self.errors > 0:
            return "failed"
        if self.warnings > 0:
            return "warnings"
        return "passed"

    @property
    def exit_code(self) -> int:
        """Only errors fail the run."""
        return EXIT_ERRORS if self.errors > 0 else EXIT_OK

    def to_dict(self) -> dict[str, object]:
        data: dict[str, object] = asdict(self)
        data["exit_code"] = self.exit_code
        data["status"] = self.status
        return data


def summarize(results: Iterable[ValidationResult]) -> Summary:
    """汇总所有文件的检查结果"""
    results = list(results)
    files_with_issues = sum(1 for r in results if not r.is_clean)
    return Summary(
        files_clean=len(results) - files_with_issues,
        files_with_issues=files_with_issues,
        errors=sum(len(r.errors) for r in results),
        warnings=sum(len(r.warnings) for r in results),
        info=sum(len(r.info) for r in results),
    )
