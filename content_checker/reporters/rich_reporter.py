"""
Rich 终端报告器 - 使用 Rich 库输出彩色终端格式

每个文件：无问题时一行成功提示；否则打印文件头，然后依次打印错误、警告和提示。
最后输出汇总和结论。
"""

import os
from typing import Sequence

from rich.console import Console
from rich.markup import escape

from content_checker.core.models import Finding, Severity, ValidationResult
from content_checker.reporters.summary import Summary

ICONS = {
    Severity.ERROR: "🔴",
    Severity.WARNING: "🟡",
    Severity.INFO: "💡",
}

STYLES = {
    Severity.ERROR: "red",
    Severity.WARNING: "yellow",
    Severity.INFO: "blue",
}

SUCCESS_ICON = "✅"


def _plural(count: int, word: str) -> str:
    return f"{count} {word}{'' if count == 1 else 's'}"


class RichReporter:
    """Rich 终端报告器"""

    def __init__(self, console: Console | None = None):
        self.console = console or Console()

    def report(self, results: Sequence[ValidationResult], summary: Summary) -> None:
        """生成 Rich 格式报告"""
        for result in results:
            self.print_result(result)
        self._print_summary(summary)
        self._print_conclusion(summary)

    def print_result(self, result: ValidationResult) -> None:
        """打印单个文件的检查结果"""
        filename = escape(os.path.relpath(result.path))

        if result.is_clean:
            self.console.print(f"{SUCCESS_ICON} [green]{filename}[/green]")
            return

        self.console.print()
        self.console.print("─" * 80, style="dim")
        self.console.print(f"📄 [blue]{filename}[/blue]")
        self.console.print("─" * 80, style="dim")

        for findings in (result.errors, result.warnings, result.info):
            for finding in findings:
                self._print_finding(finding)

    def _print_finding(self, finding: Finding) -> None:
        style = STYLES[finding.severity]
        label = finding.severity.value.upper()
        location = f" [dim](line {finding.line})[/dim]" if finding.line else ""
        self.console.print(
            f"  {ICONS[finding.severity]} [{style}]{label}[/{style}]: "
            f"{escape(finding.message)}{location}"
        )

    def _print_summary(self, summary: Summary) -> None:
        """打印汇总"""
        self.console.print()
        self.console.print("═" * 80, style="dim")
        self.console.print()
        self.console.print("📊 [blue]Summary[/blue]:")
        self.console.print(f"  {SUCCESS_ICON} {_plural(summary.files_clean, 'file')} passed")
        if summary.files_with_issues > 0:
            self.console.print(f"  ❌ {_plural(summary.files_with_issues, 'file')} with issues")
        self.console.print(f"  {ICONS[Severity.ERROR]} {_plural(summary.errors, 'error')}")
        self.console.print(f"  {ICONS[Severity.WARNING]} {_plural(summary.warnings, 'warning')}")
        self.console.print(f"  {ICONS[Severity.INFO]} {summary.info} info")
        self.console.print()

    def _print_conclusion(self, summary: Summary) -> None:
        """打印结论"""
        if summary.status == "failed":
            self.console.print("[red]❌ Validation failed with errors.[/red]")
        elif summary.status == "warnings":
            self.console.print("[yellow]⚠️  Validation passed with warnings.[/yellow]")
        else:
            self.console.print("[green]✅ All validations passed![/green]")
        self.console.print()
