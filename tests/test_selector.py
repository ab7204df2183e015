"""Tests for file selection."""

import shutil
from pathlib import Path
from typing import Callable

import pytest

from content_checker.config import CheckerConfig
from content_checker.errors import ChangedFilesError
from content_checker.repo import selector
from content_checker.repo.changes import git_changed_files
from content_checker.repo.selector import (
    GIT_FALLBACK_NOTICE,
    filter_changed_files,
    scan_content_files,
    select_files,
)

requires_git = pytest.mark.skipif(shutil.which("git") is None, reason="git executable not available")


def _relative(paths: list[Path], root: Path) -> list[str]:
    return sorted(p.relative_to(root.resolve()).as_posix() for p in paths)


@pytest.fixture
def corpus(write_file: Callable[[str, str], Path]) -> None:
    write_file("docs/intro.en.md")
    write_file("docs/guides/setup.es.mdx")
    write_file("docs/guides/notes.txt")
    write_file("blogs/launch.en.md")
    write_file("drafts/idea.en.md")
    write_file("docs/node_modules/pkg/readme.md")


def test_scan_finds_recognized_files_in_content_dirs(corpus: None, config: CheckerConfig, tmp_path: Path) -> None:
    assert _relative(scan_content_files(config), tmp_path) == [
        "blogs/launch.en.md",
        "docs/guides/setup.es.mdx",
        "docs/intro.en.md",
    ]


def test_scan_honors_gitignore(corpus: None, config: CheckerConfig, tmp_path: Path,
                               write_file: Callable[[str, str], Path]) -> None:
    write_file(".gitignore", "docs/guides/\nnode_modules/\n")
    assert _relative(scan_content_files(config), tmp_path) == [
        "blogs/launch.en.md",
        "docs/intro.en.md",
    ]


def test_scan_skips_missing_content_dirs(tmp_path: Path) -> None:
    assert scan_content_files(CheckerConfig(project_root=tmp_path)) == []


def test_scan_custom_content_dirs(corpus: None, tmp_path: Path) -> None:
    config = CheckerConfig(project_root=tmp_path, content_dirs=("drafts",))
    assert _relative(scan_content_files(config), tmp_path) == ["drafts/idea.en.md"]


def test_overlapping_content_dirs_do_not_duplicate(corpus: None, tmp_path: Path) -> None:
    config = CheckerConfig(project_root=tmp_path, content_dirs=("docs", "docs/guides"))
    files = scan_content_files(config)
    assert len(files) == len(set(files)) == 2


def test_explicit_target_wins(corpus: None, config: CheckerConfig, tmp_path: Path,
                              monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.chdir(tmp_path)
    selection = select_files(config, target="drafts/idea.en.md", changed=True)
    assert selection.mode == "explicit"
    assert selection.files == [(tmp_path / "drafts" / "idea.en.md").resolve()]


def test_filter_changed_files(config: CheckerConfig, tmp_path: Path) -> None:
    root = tmp_path.resolve()
    paths = [
        root / "docs" / "a.en.md",
        root / "docs" / "deep" / "b.es.mdx",
        root / "README.md",
        root / "docs" / "image.png",
        root / "docs" / "a.en.md",
        Path("/elsewhere/docs/c.en.md"),
    ]
    assert _relative(filter_changed_files(paths, config), tmp_path) == [
        "docs/a.en.md",
        "docs/deep/b.es.mdx",
    ]


def test_changed_falls_back_to_full_scan(corpus: None, config: CheckerConfig, tmp_path: Path,
                                         monkeypatch: pytest.MonkeyPatch) -> None:
    def fail(project_root: Path, staged: bool) -> list[Path]:
        raise ChangedFilesError("not a git repository")

    monkeypatch.setattr(selector, "git_changed_files", fail)
    selection = select_files(config, changed=True)
    assert selection.mode == "all"
    assert selection.notice == GIT_FALLBACK_NOTICE
    assert len(selection.files) == 3


def test_changed_prefers_staged(config: CheckerConfig, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    root = tmp_path.resolve()

    def fake(project_root: Path, staged: bool) -> list[Path]:
        return [root / "docs" / ("staged.en.md" if staged else "unstaged.en.md")]

    monkeypatch.setattr(selector, "git_changed_files", fake)
    selection = select_files(config, changed=True)
    assert selection.mode == "changed"
    assert _relative(selection.files, tmp_path) == ["docs/staged.en.md"]


def test_changed_uses_unstaged_when_no_staged_content(config: CheckerConfig, tmp_path: Path,
                                                      monkeypatch: pytest.MonkeyPatch) -> None:
    root = tmp_path.resolve()

    def fake(project_root: Path, staged: bool) -> list[Path]:
        if staged:
            return [root / "README.md"]
        return [root / "blogs" / "post.es.md"]

    monkeypatch.setattr(selector, "git_changed_files", fake)
    assert _relative(select_files(config, changed=True).files, tmp_path) == ["blogs/post.es.md"]


def test_default_mode_scans(corpus: None, config: CheckerConfig) -> None:
    selection = select_files(config)
    assert selection.mode == "all"
    assert selection.notice is None
    assert len(selection.files) == 3


# --- real git repositories ---

def _init_repo(root: Path):
    from git import Repo

    repo = Repo.init(root)
    with repo.config_writer() as writer:
        writer.set_value("user", "name", "Content Checker")
        writer.set_value("user", "email", "checker@example.com")
    return repo


@requires_git
def test_git_changed_files_outside_repository_raises(tmp_path: Path) -> None:
    with pytest.raises(ChangedFilesError):
        git_changed_files(tmp_path / "does-not-exist", staged=True)


@requires_git
def test_staged_and_unstaged_changes(config: CheckerConfig, tmp_path: Path,
                                     write_file: Callable[[str, str], Path]) -> None:
    repo = _init_repo(tmp_path)
    write_file("docs/first.en.md")
    repo.index.add(["docs/first.en.md"])
    repo.index.commit("Add first doc")

    write_file("docs/first.en.md", "# Changed\n")
    assert _relative(select_files(config, changed=True).files, tmp_path) == ["docs/first.en.md"]

    write_file("docs/second.es.md")
    write_file("notes.md")
    repo.index.add(["docs/second.es.md", "notes.md"])
    selection = select_files(config, changed=True)
    assert selection.mode == "changed"
    assert _relative(selection.files, tmp_path) == ["docs/second.es.md"]


@requires_git
def test_deleted_files_are_not_selected(config: CheckerConfig, tmp_path: Path,
                                        write_file: Callable[[str, str], Path]) -> None:
    repo = _init_repo(tmp_path)
    write_file("docs/old.en.md")
    repo.index.add(["docs/old.en.md"])
    repo.index.commit("Add old doc")

    (tmp_path / "docs" / "old.en.md").unlink()
    assert select_files(config, changed=True).files == []
