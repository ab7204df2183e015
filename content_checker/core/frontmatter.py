"""
Frontmatter 解析器 - 解析文档开头 ``---`` 之间的元数据块

Only the small YAML subset used by the content corpus is understood:
scalar ``key: value`` pairs, inline lists (``[a, b]``) and block lists
(``key:`` followed by ``- item`` lines). Repeated keys overwrite earlier
ones.
"""

import re
from enum import Enum
from typing import Iterable, Optional, Union

FRONTMATTER_DELIMITER = "---"

# 单个值：字符串或字符串列表
FrontmatterValue = Union[str, list[str]]
Frontmatter = dict[str, FrontmatterValue]

_QUOTES_PATTERN = re.compile(r"^[\"']|[\"']$")


class ParserState(Enum):
    """Line parser states."""
    KEY = "key"    # expecting ``key: value`` lines
    LIST = "list"  # collecting ``- item`` lines for the last key


def strip_quotes(value: str) -> str:
    """Remove one leading and one trailing quote character, if present."""
    return _QUOTES_PATTERN.sub("", value)


def find_frontmatter_end(lines: list[str]) -> Optional[int]:
    """
    查找 frontmatter 结束分隔符

    Args:
        lines: 文档的所有行

    Returns:
        结束分隔符所在行的下标；文档不以 ``---`` 开头或没有结束分隔符时返回 None
    """
    if not lines or lines[0].rstrip() != FRONTMATTER_DELIMITER:
        return None
    for index in range(1, len(lines)):
        if lines[index].rstrip() == FRONTMATTER_DELIMITER:
            return index
    return None


def _parse_inline_list(value: str) -> list[str]:
    inner = value[1:-1]
    if not inner.strip():
        return []
    return [strip_quotes(item.strip()) for item in inner.split(",")]


def parse_frontmatter_lines(lines: Iterable[str]) -> Frontmatter:
    """
    解析 frontmatter 块内部的行

    Args:
        lines: 两个分隔符之间的行

    Returns:
        键值映射
    """
    frontmatter: Frontmatter = {}
    state = ParserState.KEY
    current_list: list[str] = []

    for line in lines:
        stripped = line.strip()

        if state is ParserState.LIST:
            if stripped.startswith("-"):
                current_list.append(strip_quotes(stripped[1:].strip()))
                continue
            state = ParserState.KEY

        colon = line.find(":")
        if colon <= 0:
            continue

        key = line[:colon].strip()
        if not key:
            continue
        raw_value = line[colon + 1:].strip()

        if raw_value == "":
            current_list = []
            frontmatter[key] = current_list
            state = ParserState.LIST
            continue

        value = strip_quotes(raw_value)
        if value.startswith("[") and value.endswith("]"):
            frontmatter[key] = _parse_inline_list(value)
        else:
            frontmatter[key] = value

    return frontmatter


def split_frontmatter(text: str) -> tuple[Optional[Frontmatter], str, int]:
    """
    拆分 frontmatter 与正文

    Args:
        text: 文档全文（换行符已统一为 ``\\n``）

    Returns:
        (frontmatter 或 None, 正文, 正文第一行在文件中的行号)
    """
    lines = text.split("\n")
    end = find_frontmatter_end(lines)
    if end is None:
        return None, text, 1

    frontmatter = parse_frontmatter_lines(lines[1:end])
    body = "\n".join(lines[end + 1:])
    return frontmatter, body, end + 2


def parse_frontmatter(text: str) -> Optional[Frontmatter]:
    """Parse the frontmatter of a document; ``None`` means there is none."""
    frontmatter, _, _ = split_frontmatter(text)
    return frontmatter
