"""
文件选择器 - 确定本次需要检查的文件

三种模式：
1. 显式路径：只检查该文件
2. --changed：暂存区变更，没有则取工作区变更；Git 查询失败时退回全量扫描
3. 默认：扫描内容目录下所有可识别的文件
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Literal, Optional

from content_checker.config import CheckerConfig
from content_checker.errors import ChangedFilesError
from content_checker.repo.changes import git_changed_files
from content_checker.repo.pathspec_filter import PathspecFilter, build_content_spec

logger = logging.getLogger(__name__)

GIT_FALLBACK_NOTICE = "Could not get git changes, validating all files."


@dataclass
class FileSelection:
    """
    文件选择结果

    Attributes:
        files: 待检查的文件（无重复）
        mode: 实际使用的选择模式
        notice: 需要提示给用户的说明（如 Git 查询失败）
    """
    files: list[Path]
    mode: Literal["explicit", "changed", "all"]
    notice: Optional[str] = None


def _unique(paths: list[Path]) -> list[Path]:
    return list(dict.fromkeys(paths))


def scan_content_files(config: CheckerConfig) -> list[Path]:
    """
    扫描内容目录

    Files ignored by the project's ``.gitignore`` are skipped. Missing
    content directories are skipped silently.
    """
    root = config.project_root.resolve()
    ignore_filter = PathspecFilter(root)
    files: list[Path] = []

    for directory in config.content_dirs:
        content_root = root / directory
        if not content_root.is_dir():
            logger.debug(f"Content directory not found: {content_root}")
            continue
        candidates = [
            path for path in content_root.rglob("*")
            if path.is_file() and config.is_content_file(path.name)
        ]
        files.extend(ignore_filter.filter_paths(candidates))

    return _unique(files)


def filter_changed_files(paths: list[Path], config: CheckerConfig) -> list[Path]:
    """Keep changed files that are recognized files under a content directory."""
    root = config.project_root.resolve()
    content_spec = build_content_spec(config)
    selected: list[Path] = []

    for path in paths:
        try:
            relative = path.relative_to(root)
        except ValueError:
            continue
        if content_spec.match_file(relative.as_posix()):
            selected.append(path)

    return _unique(selected)


def changed_content_files(config: CheckerConfig) -> list[Path]:
    """
    获取变更的内容文件

    Raises:
        ChangedFilesError: Git 查询失败
    """
    root = config.project_root.resolve()
    staged = filter_changed_files(git_changed_files(root, staged=True), config)
    if staged:
        return staged
    return filter_changed_files(git_changed_files(root, staged=False), config)


def select_files(
    config: CheckerConfig,
    target: Optional[str] = None,
    changed: bool = False,
) -> FileSelection:
    """
    选择待检查的文件

    Args:
        config: 检查配置
        target: 显式指定的文件路径（优先级最高）
        changed: 是否只检查 Git 变更文件

    Returns:
        FileSelection 对象
    """
    if target:
        return FileSelection(files=[Path(target).resolve()], mode="explicit")

    notice = None
    if changed:
        try:
            files = changed_content_files(config)
            logger.debug(f"Selected {len(files)} changed files")
            return FileSelection(files=files, mode="changed")
        except ChangedFilesError as e:
            logger.debug(f"Git query failed: {e}")
            notice = GIT_FALLBACK_NOTICE

    files = scan_content_files(config)
    logger.debug(f"Selected {len(files)} files from {', '.join(config.content_dirs)}")
    return FileSelection(files=files, mode="all", notice=notice)
