"""
Repository Layer - 仓库层

负责文件选择、Git 变更查询和文件过滤。
"""

from content_checker.repo.changes import git_changed_files
from content_checker.repo.pathspec_filter import (
    PathspecFilter,
    DEFAULT_IGNORE_PATTERNS,
    build_content_spec,
)
from content_checker.repo.selector import (
    select_files,
    scan_content_files,
    changed_content_files,
    filter_changed_files,
    FileSelection,
    GIT_FALLBACK_NOTICE,
)

__all__ = [
    # changes
    "git_changed_files",
    # pathspec_filter
    "PathspecFilter",
    "DEFAULT_IGNORE_PATTERNS",
    "build_content_spec",
    # selector
    "select_files",
    "scan_content_files",
    "changed_content_files",
    "filter_changed_files",
    "FileSelection",
    "GIT_FALLBACK_NOTICE",
]
