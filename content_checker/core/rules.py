"""
检查规则 - 每个函数负责一类检查

Each check reads a parsed Document and appends findings to the
ValidationResult in detection order. Checks never raise for content
problems.
"""

import math
import re

from markdown_it import MarkdownIt

from content_checker.config import CheckerConfig
from content_checker.core.models import ValidationResult
from content_checker.core.parser import (
    Document,
    iter_fence_openings,
    iter_prose_lines,
)

# 被 MDX 误认为标签开始的 "<5"、"<$10"
LESS_THAN_PATTERN = re.compile(r"<\s*[\d$]")
CURLY_BRACES_PATTERN = re.compile(r"\{[^}]+\}")
INLINE_CODE_PATTERN = re.compile(r"(`+)(.+?)\1")

PLACEHOLDER_LANGUAGE = "language"


def check_heading_structure(document: Document, result: ValidationResult, config: CheckerConfig) -> None:
    """H1 唯一性、H2 数量、层级跳跃和 H2 长度"""
    headings = document.headings
    h1_headings = [h for h in headings if h.level == 1]

    if not h1_headings:
        result.add(
            "single-h1",
            "No H1 heading found. Document must have exactly one H1 title.",
        )
    elif len(h1_headings) > 1:
        result.add(
            "single-h1",
            f"Multiple H1 headings found ({len(h1_headings)}). "
            "Only the document title should be H1.",
            h1_headings[-1].line,
        )

    h2_headings = [h for h in headings if h.level == 2]
    if len(h2_headings) < config.min_h2_sections:
        result.add(
            "h2-count",
            f"Only {len(h2_headings)} H2 sections found. "
            f'Recommended: {config.min_h2_sections}+ for "On This Page" navigation.',
        )

    sections = [h for h in headings if h.level > 1]
    for prev, curr in zip(sections, sections[1:]):
        if curr.level - prev.level > 1:
            result.add(
                "heading-hierarchy",
                f"Heading hierarchy skip: H{prev.level} → H{curr.level}. "
                "Use progressive hierarchy.",
                curr.line,
            )

    for heading in h2_headings:
        title = heading.title
        word_count = len(title.split())
        if word_count > config.max_h2_words:
            result.add(
                "h2-length",
                f'H2 heading too long ({word_count} words): "{title[:50]}...". '
                f"Keep under {config.max_h2_words} words.",
                heading.line,
            )


def check_empty_sections(document: Document, result: ValidationResult, config: CheckerConfig) -> None:
    """
    空章节检查

    A level 2-4 heading is empty when the next top-level block is a
    heading of the same or a higher level, or when nothing follows it.
    """
    tokens = MarkdownIt().parse(document.body)
    blocks = [
        (index, token)
        for index, token in enumerate(tokens)
        if token.level == 0 and token.nesting >= 0
    ]

    for position, (index, token) in enumerate(blocks):
        if token.type != "heading_open":
            continue
        level = int(token.tag[1])
        if not 2 <= level <= 4:
            continue

        following = blocks[position + 1][1] if position + 1 < len(blocks) else None
        if following is not None and (
            following.type != "heading_open" or int(following.tag[1]) > level
        ):
            continue

        title = tokens[index + 1].content if index + 1 < len(tokens) else ""
        line = document.body_start_line + token.map[0] if token.map else None
        result.add(
            "empty-sections",
            f'Empty section: "{title}" has no content before the next heading.',
            line,
        )


def check_frontmatter(document: Document, result: ValidationResult, config: CheckerConfig) -> None:
    """必需字段、description 长度和标签数量"""
    frontmatter = document.frontmatter
    # 空的 frontmatter 与缺失的 frontmatter 按同一种错误处理
    if not frontmatter:
        result.add(
            "required-frontmatter",
            "No frontmatter found. Frontmatter is required.",
        )
        return

    # 空列表视为已填写，由标签数量检查报告
    for name in config.required_fields:
        if frontmatter.get(name) in (None, ""):
            result.add(
                "required-frontmatter",
                f'Missing required frontmatter field: "{name}"',
            )

    description = frontmatter.get("description")
    if isinstance(description, str) and len(description) > config.description_max_length:
        result.add(
            "description-length",
            f"Description too long ({len(description)} chars). "
            f"Recommended: under {config.description_max_length} for SEO.",
        )

    tags = frontmatter.get("tags")
    if tags in (None, ""):
        return
    if not isinstance(tags, list):
        result.add(
            "tag-count",
            f"Tags should be a list. Recommended: {config.min_tags}-{config.max_tags} tags.",
        )
    elif len(tags) < config.min_tags:
        result.add(
            "tag-count",
            f"Only {len(tags)} tags. "
            f"Recommended: {config.min_tags}-{config.max_tags} tags for better discoverability.",
        )
    elif len(tags) > config.max_tags:
        result.add(
            "tag-count",
            f"Too many tags ({len(tags)}). Recommended: {config.min_tags}-{config.max_tags} tags.",
        )


def check_locale(document: Document, result: ValidationResult, config: CheckerConfig) -> None:
    """文件名必须带语言标记，如 guide.en.md"""
    filename = document.filename
    if config.locale_filename_pattern.match(filename):
        return

    examples = " or ".join(f'"*.{locale}.md"' for locale in config.locales)
    result.add(
        "valid-locale",
        f'Filename must include locale: "{filename}" should be {examples}',
    )


def check_mdx_syntax(document: Document, result: ValidationResult, config: CheckerConfig) -> None:
    """会破坏 MDX 渲染的 "<" 和花括号"""
    for line_number, line in iter_prose_lines(document.body, document.body_start_line):
        if LESS_THAN_PATTERN.search(line):
            result.add(
                "mdx-syntax",
                'Unescaped "<" before number/dollar sign. Use &lt; or wrap in backticks.',
                line_number,
            )

        match = CURLY_BRACES_PATTERN.search(INLINE_CODE_PATTERN.sub("", line))
        if match:
            result.add(
                "mdx-syntax",
                f'Unescaped curly braces: "{match.group(0)}". Wrap in backticks or escape.',
                line_number,
            )


def check_code_blocks(document: Document, result: ValidationResult, config: CheckerConfig) -> None:
    """代码块语言标记"""
    for line_number, language in iter_fence_openings(document.body, document.body_start_line):
        if "[" in language or language.lower() == PLACEHOLDER_LANGUAGE:
            result.add(
                "code-block-language",
                f'Invalid code block language: "{language}". '
                "Use actual language (typescript, bash, etc).",
                line_number,
            )
        elif not language:
            result.add(
                "code-language-specified",
                "Code block without language specified. Consider adding for syntax highlighting.",
                line_number,
            )


def estimate_reading_time(text: str, words_per_minute: int = 200) -> tuple[int, int]:
    """
    估算阅读时间

    Returns:
        (词数, 分钟数 - 向上取整)
    """
    word_count = len(text.split())
    return word_count, math.ceil(word_count / words_per_minute)


def check_quality(document: Document, result: ValidationResult, config: CheckerConfig) -> None:
    """阅读时间提示，仅为 info"""
    _, minutes = estimate_reading_time(document.body, config.words_per_minute)

    if minutes < config.min_reading_minutes:
        result.add(
            "reading-time",
            f"Short content ({minutes} min read). Consider adding more detail.",
        )
    elif minutes > config.max_reading_minutes:
        result.add(
            "reading-time",
            f"Long content ({minutes} min read). Consider breaking into multiple docs.",
        )


# 执行顺序即输出顺序
ALL_CHECKS = (
    check_heading_structure,
    check_empty_sections,
    check_frontmatter,
    check_locale,
    check_mdx_syntax,
    check_code_blocks,
    check_quality,
)
