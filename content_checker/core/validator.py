"""
核心验证器模块 - 对单个内容文件运行全部检查

执行以下验证：
1. 标题结构：唯一 H1、H2 数量、层级和长度
2. Frontmatter：必需字段、description 长度、标签数量
3. 文件名语言标记
4. MDX 语法："<" 和花括号
5. 代码块语言标记
6. 阅读时间
"""

import logging
from pathlib import Path
from typing import Iterable, Optional

from content_checker.config import CheckerConfig
from content_checker.core.models import ValidationResult
from content_checker.core.parser import Document, load_document
from content_checker.core.rules import ALL_CHECKS

logger = logging.getLogger(__name__)


def validate_document(document: Document, config: Optional[CheckerConfig] = None) -> ValidationResult:
    """
    验证已解析的文档

    Args:
        document: 文档
        config: 检查配置（可选）

    Returns:
        ValidationResult 对象
    """
    if config is None:
        config = CheckerConfig()

    result = ValidationResult(path=document.path)
    for check in ALL_CHECKS:
        check(document, result, config)
    return result


def validate_file(path: Path, config: Optional[CheckerConfig] = None) -> ValidationResult:
    """
    读取并验证单个文件

    A file that cannot be read or decoded yields a single ``read-error``
    finding instead of raising.
    """
    try:
        document = load_document(path)
    except (OSError, UnicodeDecodeError) as e:
        logger.warning(f"Failed to read {path}: {e}")
        result = ValidationResult(path=path)
        result.add("read-error", f"Failed to read or parse file: {e}")
        return result

    result = validate_document(document, config)
    logger.debug(
        f"{path}: {len(result.errors)} errors, "
        f"{len(result.warnings)} warnings, {len(result.info)} info"
    )
    return result


def validate_files(paths: Iterable[Path], config: Optional[CheckerConfig] = None) -> list[ValidationResult]:
    """Validate files sequentially, in the given order."""
    return [validate_file(path, config) for path in paths]
