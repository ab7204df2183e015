"""Finding and per-document validation result models."""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Optional


class Severity(str, Enum):
    """Finding severity. Only errors fail a run."""
    ERROR = "error"
    WARNING = "warning"
    INFO = "info"


# 规则代码
RULES: dict[Severity, tuple[str, ...]] = {
    Severity.ERROR: (
        "single-h1",
        "required-frontmatter",
        "valid-locale",
        "mdx-syntax",
        "code-block-language",
        "read-error",
    ),
    Severity.WARNING: (
        "h2-count",
        "heading-hierarchy",
        "h2-length",
        "description-length",
        "tag-count",
    ),
    Severity.INFO: (
        "code-language-specified",
        "reading-time",
        "empty-sections",
    ),
}

_RULE_SEVERITY: dict[str, Severity] = {
    code: severity for severity, codes in RULES.items() for code in codes
}


def rule_severity(code: str) -> Severity:
    """
    查询规则的严重程度

    Raises:
        KeyError: 未知的规则代码
    """
    return _RULE_SEVERITY[code]


@dataclass(frozen=True)
class Finding:
    """
    检查发现

    Attributes:
        severity: 严重程度 (error, warning, info)
        code: 规则代码 (如 single-h1, tag-count)
        message: 问题描述
        line: 行号（与整个文件相关时为 None）
    """
    severity: Severity
    code: str
    message: str
    line: Optional[int] = None


@dataclass
class ValidationResult:
    """
    单个文档的验证结果

    Findings are kept in detection order; the severity views preserve
    that order within each class.
    """
    path: Path
    findings: list[Finding] = field(default_factory=list)

    def add(self, code: str, message: str, line: Optional[int] = None) -> None:
        """Record a finding; the severity comes from the rule table."""
        self.findings.append(Finding(rule_severity(code), code, message, line))

    def _by_severity(self, severity: Severity) -> list[Finding]:
        return [f for f in self.findings if f.severity is severity]

    @property
    def errors(self) -> list[Finding]:
        return self._by_severity(Severity.ERROR)

    @property
    def warnings(self) -> list[Finding]:
        return self._by_severity(Severity.WARNING)

    @property
    def info(self) -> list[Finding]:
        return self._by_severity(Severity.INFO)

    @property
    def has_errors(self) -> bool:
        return bool(self.errors)

    @property
    def is_clean(self) -> bool:
        """No errors and no warnings; info findings are allowed."""
        return not self.errors and not self.warnings
