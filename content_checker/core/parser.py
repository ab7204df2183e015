"""
文档解析模块 - 读取内容文件并提取结构化信息

Provides the Document model, the fence-aware line scanner shared by the
rules, and heading extraction. Every scan keeps its own fence state, so
the rules can run independently and in any order.
"""

import re
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Iterator, Optional

from content_checker.core.frontmatter import Frontmatter, split_frontmatter

FENCE_MARKER = "```"

# 一到四级标题：井号 + 空白 + 非井号文本
HEADING_PATTERN = re.compile(r"^(#{1,4})\s+[^#]")
HEADING_MARKER_PATTERN = re.compile(r"^#+\s+")


class FenceState(Enum):
    """Whether the scanner is inside a fenced code block."""
    NORMAL = "normal"
    IN_CODE_BLOCK = "in_code_block"


@dataclass(frozen=True)
class Heading:
    """
    标题数据模型

    Attributes:
        level: 标题级别 (1-4)
        line: 在原文件中的行号
        text: 原始行文本（包含井号）
    """
    level: int
    line: int
    text: str

    @property
    def title(self) -> str:
        """Heading text without the leading ``#`` marker."""
        return HEADING_MARKER_PATTERN.sub("", self.text).strip()


@dataclass(frozen=True)
class Document:
    """
    内容文档

    Attributes:
        path: 文件路径
        text: 文件全文
        frontmatter: 解析后的 frontmatter，不存在时为 None
        body: 去掉 frontmatter 后的正文
        body_start_line: 正文第一行在文件中的行号
    """
    path: Path
    text: str
    frontmatter: Optional[Frontmatter]
    body: str
    body_start_line: int = 1

    @property
    def filename(self) -> str:
        return self.path.name

    @property
    def headings(self) -> list["Heading"]:
        return extract_headings(self.body, self.body_start_line)


def is_fence_line(line: str) -> bool:
    """A line whose trimmed text starts with the code fence marker."""
    return line.strip().startswith(FENCE_MARKER)


def _toggle(state: FenceState) -> FenceState:
    if state is FenceState.IN_CODE_BLOCK:
        return FenceState.NORMAL
    return FenceState.IN_CODE_BLOCK


def iter_prose_lines(text: str, start_line: int = 1) -> Iterator[tuple[int, str]]:
    """
    遍历代码块之外的行

    Fence lines themselves are never yielded.

    Args:
        text: 正文
        start_line: 正文第一行的行号

    Yields:
        (行号, 行文本)
    """
    state = FenceState.NORMAL
    for offset, line in enumerate(text.split("\n")):
        if is_fence_line(line):
            state = _toggle(state)
            continue
        if state is FenceState.NORMAL:
            yield start_line + offset, line


def iter_fence_openings(text: str, start_line: int = 1) -> Iterator[tuple[int, str]]:
    """
    遍历代码块的起始行

    Yields:
        (行号, 语言标记) - 语言标记为 fence 之后的全部文本
    """
    state = FenceState.NORMAL
    for offset, line in enumerate(text.split("\n")):
        if not is_fence_line(line):
            continue
        if state is FenceState.NORMAL:
            yield start_line + offset, line.strip()[len(FENCE_MARKER):]
        state = _toggle(state)


def extract_headings(text: str, start_line: int = 1) -> list[Heading]:
    """Extract level 1-4 headings outside fenced code blocks, in order."""
    headings: list[Heading] = []
    for line_number, line in iter_prose_lines(text, start_line):
        match = HEADING_PATTERN.match(line)
        if match:
            headings.append(Heading(
                level=len(match.group(1)),
                line=line_number,
                text=line,
            ))
    return headings


def parse_document(path: Path, text: str) -> Document:
    """
    解析文档内容

    Args:
        path: 文件路径
        text: 文件内容

    Returns:
        Document 对象
    """
    text = text.replace("\r\n", "\n")
    frontmatter, body, body_start_line = split_frontmatter(text)
    return Document(
        path=path,
        text=text,
        frontmatter=frontmatter,
        body=body,
        body_start_line=body_start_line,
    )


def load_document(path: Path) -> Document:
    """
    从磁盘读取并解析文档

    Raises:
        OSError: 文件无法读取
        UnicodeDecodeError: 文件不是 UTF-8 编码
    """
    return parse_document(path, path.read_text(encoding="utf-8"))
