"""
CLI Layer - 命令行接口层

提供命令行入口。
"""

from content_checker.cli.app import app, check

__all__ = [
    "app",
    "check",
]
