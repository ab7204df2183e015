"""Shared fixtures for content-checker tests."""

from pathlib import Path
from typing import Callable

import pytest

from content_checker.config import CheckerConfig

VALID_DOC = """\
---
title: "Getting Started"
description: "Install the toolkit and run your first example."
tags: [python, tutorial, setup, basics]
---

# Getting Started

This guide walks through the installation.

## Install

Run the installer for your platform.

## Configure

Edit the configuration file.

## Run

Start the example and check the output.
"""


@pytest.fixture
def config(tmp_path: Path) -> CheckerConfig:
    return CheckerConfig(project_root=tmp_path)


@pytest.fixture
def write_file(tmp_path: Path) -> Callable[[str, str], Path]:
    """Write a file relative to tmp_path, creating parent directories."""

    def _write(relative: str, content: str = VALID_DOC) -> Path:
        path = tmp_path / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        return path

    return _write
