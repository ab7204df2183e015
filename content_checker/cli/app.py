"""
CLI 入口模块 - 使用 Typer 构建命令行界面

检查流程：
1. 选择文件（显式路径 / Git 变更 / 全量扫描）
2. 逐个验证
3. 生成报告
4. 根据错误数设置退出码
"""

import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler

from content_checker import __version__
from content_checker.config import CheckerConfig, DEFAULT_CONTENT_DIRS, DEFAULT_LOCALES
from content_checker.core import validate_files
from content_checker.errors import ConfigError
from content_checker.repo import select_files
from content_checker.reporters import JsonReporter, Reporter, RichReporter, summarize

EXIT_USAGE = 2

OUTPUT_FORMATS = ("rich", "json")

# 创建 Typer 应用实例
app = typer.Typer(
    name="content-checker",
    help="content-checker: Lint markdown/MDX content before publication.",
    add_completion=False,
)

# Rich Console 用于输出
console = Console()
err_console = Console(stderr=True)


def configure_logging(verbose: bool) -> None:
    """Route package logs to stderr through Rich."""
    package_logger = logging.getLogger("content_checker")
    package_logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    if not any(isinstance(h, RichHandler) for h in package_logger.handlers):
        package_logger.addHandler(
            RichHandler(console=err_console, show_time=False, show_path=False)
        )
    package_logger.propagate = False


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"[bold]content-checker[/bold] v{__version__}")
        raise typer.Exit()


@app.command()
def check(
    target: Optional[str] = typer.Argument(
        None,
        help="Single file to validate (default: every file under the content directories)",
    ),
    changed: bool = typer.Option(
        False,
        "--changed",
        help="Only validate files changed in git (staged, then unstaged)",
    ),
    content_dir: Optional[list[str]] = typer.Option(
        None,
        "--content-dir",
        "-d",
        help="Content directory to scan, relative to the current directory (repeatable)",
    ),
    locale: Optional[list[str]] = typer.Option(
        None,
        "--locale",
        "-l",
        help="Locale tag allowed in filenames (repeatable)",
    ),
    format: str = typer.Option(
        "rich",
        "--format",
        "-f",
        help="Output format: rich (default) or json",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Show debug logging",
    ),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show the version and exit",
    ),
) -> None:
    """
    Validate heading structure, frontmatter, locale naming and MDX syntax.

    Examples:
        content-checker
        content-checker docs/intro/guide.en.md
        content-checker --changed
        content-checker --locale en --locale es --locale pt
    """
    configure_logging(verbose)

    if format not in OUTPUT_FORMATS:
        err_console.print(f"[red]Error:[/red] Unknown format: {format}")
        raise typer.Exit(EXIT_USAGE)

    try:
        config = CheckerConfig(
            project_root=Path.cwd(),
            content_dirs=tuple(content_dir) if content_dir else DEFAULT_CONTENT_DIRS,
            locales=tuple(locale) if locale else DEFAULT_LOCALES,
        )
    except ConfigError as e:
        err_console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(EXIT_USAGE)

    rich_output = format == "rich"
    notice_console = console if rich_output else err_console

    if rich_output:
        console.print()
        console.print("🔍 [blue]Content Validator[/blue]")
        console.print("═" * 80, style="dim")
        console.print()

    selection = select_files(config, target=target, changed=changed)

    if selection.notice:
        notice_console.print(f"[yellow]Warning:[/yellow] {selection.notice}")

    if not selection.files and rich_output:
        console.print("[yellow]No files to validate.[/yellow]")
        console.print()
        raise typer.Exit(0)

    if rich_output:
        count = len(selection.files)
        console.print(f"Validating {count} file{'s' if count > 1 else ''}...")
        console.print()

    results = validate_files(selection.files, config)
    summary = summarize(results)

    reporter: Reporter = RichReporter(console) if rich_output else JsonReporter()
    reporter.report(results, summary)

    raise typer.Exit(summary.exit_code)


if __name__ == "__main__":
    app()
