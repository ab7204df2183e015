"""Pathspec-based file filtering.

Two specs are used when selecting content files: the project's root
``.gitignore`` (or a default ignore list) and a content spec built from the
configured content directories and extensions.
"""

import logging
from pathlib import Path

import pathspec

from content_checker.config import CheckerConfig

logger = logging.getLogger(__name__)


# Default ignore patterns when no .gitignore exists
DEFAULT_IGNORE_PATTERNS: list[str] = [
    "node_modules/",
    ".git/",
    ".docusaurus/",
    ".next/",
    "build/",
    "dist/",
]


def build_content_spec(config: CheckerConfig) -> pathspec.PathSpec:
    """
    Build a spec matching recognized files under the content directories.

    For ``docs`` and ``.md`` this is the pattern ``docs/**/*.md``.
    """
    patterns = [
        f"{directory.strip('/')}/**/*{extension}"
        for directory in config.content_dirs
        for extension in config.extensions
    ]
    return pathspec.GitIgnoreSpec.from_lines(patterns)


class PathspecFilter:
    """File filter based on the project's root .gitignore."""

    def __init__(self, project_root: Path):
        self.project_root = project_root
        self._spec = self._load_gitignore()

    def _load_gitignore(self) -> pathspec.PathSpec:
        gitignore_path = self.project_root / ".gitignore"

        if not gitignore_path.is_file():
            return pathspec.GitIgnoreSpec.from_lines(DEFAULT_IGNORE_PATTERNS)

        try:
            lines = gitignore_path.read_text(encoding="utf-8").splitlines()
        except (OSError, UnicodeDecodeError) as e:
            logger.warning(f"Failed to read {gitignore_path}, using default ignore patterns: {e}")
            return pathspec.GitIgnoreSpec.from_lines(DEFAULT_IGNORE_PATTERNS)
        return pathspec.GitIgnoreSpec.from_lines(lines)

    def should_ignore(self, path: Path) -> bool:
        """Check if a file should be ignored. Paths outside the root never are."""
        try:
            relative = path.relative_to(self.project_root) if path.is_absolute() else path
        except ValueError:
            return False
        return self._spec.match_file(relative.as_posix())

    def filter_paths(self, paths: list[Path]) -> list[Path]:
        """Filter paths, returning those that should NOT be ignored."""
        return [p for p in paths if not self.should_ignore(p)]

