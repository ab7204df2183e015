"""
检查配置 - 内容目录、语言标记和各项阈值

All tunables of the checker live in one dataclass so the CLI can
override them and tests can build small variants.
"""

import re
from dataclasses import dataclass, field
from pathlib import Path

from content_checker.errors import ConfigError


DEFAULT_CONTENT_DIRS: tuple[str, ...] = ("docs", "blogs")
DEFAULT_EXTENSIONS: tuple[str, ...] = (".md", ".mdx")
DEFAULT_LOCALES: tuple[str, ...] = ("en", "es")
DEFAULT_REQUIRED_FIELDS: tuple[str, ...] = ("title", "description", "tags")

LOCALE_TAG_PATTERN = re.compile(r"^[a-z]{2}$")


@dataclass(frozen=True)
class CheckerConfig:
    """
    检查配置

    Attributes:
        project_root: 项目根目录（内容目录相对于此路径）
        content_dirs: 需要扫描的内容目录
        extensions: 识别的文件扩展名
        locales: 文件名中允许的语言标记
        required_fields: 必需的 frontmatter 字段
        description_max_length: description 的最大长度（SEO）
        min_tags: 推荐的最少标签数
        max_tags: 推荐的最多标签数
        min_h2_sections: 推荐的最少 H2 数量
        max_h2_words: H2 标题的最大词数
        words_per_minute: 阅读速度
        min_reading_minutes: 阅读时间下限
        max_reading_minutes: 阅读时间上限
    """
    project_root: Path = field(default_factory=Path.cwd)
    content_dirs: tuple[str, ...] = DEFAULT_CONTENT_DIRS
    extensions: tuple[str, ...] = DEFAULT_EXTENSIONS
    locales: tuple[str, ...] = DEFAULT_LOCALES
    required_fields: tuple[str, ...] = DEFAULT_REQUIRED_FIELDS
    description_max_length: int = 160
    min_tags: int = 4
    max_tags: int = 8
    min_h2_sections: int = 3
    max_h2_words: int = 8
    words_per_minute: int = 200
    min_reading_minutes: int = 2
    max_reading_minutes: int = 20

    def __post_init__(self) -> None:
        if not self.locales:
            raise ConfigError("At least one locale is required")
        for locale in self.locales:
            if not LOCALE_TAG_PATTERN.match(locale):
                raise ConfigError(
                    f"Invalid locale tag: {locale!r} (expected two lowercase letters)"
                )
        if not self.content_dirs:
            raise ConfigError("At least one content directory is required")
        if not self.extensions:
            raise ConfigError("At least one file extension is required")

    @property
    def locale_filename_pattern(self) -> re.Pattern[str]:
        """Filename pattern ``<base>.<locale>.<ext>`` built from the locale set."""
        locales = "|".join(re.escape(locale) for locale in self.locales)
        exts = "|".join(re.escape(ext.lstrip(".")) for ext in self.extensions)
        return re.compile(rf"^.+\.({locales})\.({exts})$")

    def is_content_file(self, name: str) -> bool:
        """Check whether a filename carries a recognized extension."""
        return name.endswith(self.extensions)
