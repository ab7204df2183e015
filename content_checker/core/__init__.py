"""
Core Layer - 核心层

包含 frontmatter 解析器、文档解析器、检查规则和验证器。
"""

from content_checker.core.frontmatter import (
    parse_frontmatter,
    split_frontmatter,
    Frontmatter,
)
from content_checker.core.parser import (
    parse_document,
    load_document,
    extract_headings,
    iter_prose_lines,
    iter_fence_openings,
    Document,
    Heading,
)
from content_checker.core.models import (
    Severity,
    Finding,
    ValidationResult,
    RULES,
    rule_severity,
)
from content_checker.core.validator import (
    validate_document,
    validate_file,
    validate_files,
)

__all__ = [
    # frontmatter
    "parse_frontmatter",
    "split_frontmatter",
    "Frontmatter",
    # parser
    "parse_document",
    "load_document",
    "extract_headings",
    "iter_prose_lines",
    "iter_fence_openings",
    "Document",
    "Heading",
    # models
    "Severity",
    "Finding",
    "ValidationResult",
    "RULES",
    "rule_severity",
    # validator
    "validate_document",
    "validate_file",
    "validate_files",
]
