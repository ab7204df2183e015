"""
Git 查询 - 获取暂存区和工作区中变更的文件
"""

import logging
import os
from pathlib import Path

# 找不到 git 可执行文件时不在导入阶段报错，而是在调用时抛出 GitCommandNotFound
os.environ.setdefault("GIT_PYTHON_REFRESH", "quiet")

from git import Repo  # noqa: E402
from git.exc import GitError

from content_checker.errors import ChangedFilesError

logger = logging.getLogger(__name__)


def git_changed_files(project_root: Path, staged: bool) -> list[Path]:
    """
    查询变更文件

    Deleted files are excluded. Paths are absolute.

    Args:
        project_root: 仓库内的任意目录
        staged: True 查询暂存区 (``--cached``)，False 查询工作区

    Returns:
        变更文件路径列表

    Raises:
        ChangedFilesError: 不是 Git 仓库、找不到 git 或命令执行失败
    """
    args = ["--name-only", "--diff-filter=d"]
    if staged:
        args.append("--cached")

    try:
        repo = Repo(project_root, search_parent_directories=True)
        if repo.working_tree_dir is None:
            raise ChangedFilesError(f"Repository has no working tree: {repo.git_dir}")
        # 保留非 ASCII 文件名（如西班牙语文件名）原样输出
        output = repo.git(c="core.quotepath=off").diff(*args)
    except GitError as e:
        raise ChangedFilesError(str(e)) from e

    working_tree = Path(repo.working_tree_dir).resolve()
    names = [name.strip() for name in output.splitlines() if name.strip()]
    logger.debug(f"git diff {' '.join(args)}: {len(names)} files")
    return [working_tree / name for name in names]
