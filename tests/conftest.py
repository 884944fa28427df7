# SPDX-License-Identifier: MIT
# Copyright (c) 2026 LlamaIndex Inc.
from __future__ import annotations

import logging
import os
import subprocess
from pathlib import Path
from typing import Iterator
from unittest.mock import Mock

import pytest


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Drop any action inputs or output file inherited from the real environment."""
    for name in list(os.environ):
        if name.startswith("INPUT_") or name in ("GITHUB_OUTPUT", "RUNNER_DEBUG"):
            monkeypatch.delenv(name, raising=False)


@pytest.fixture(autouse=True)
def reset_package_logger() -> Iterator[None]:
    """Undo CLI logging setup so caplog sees records in every test."""
    yield
    package_logger = logging.getLogger("describe_tag")
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
    package_logger.setLevel(logging.NOTSET)
    package_logger.propagate = True


@pytest.fixture
def git_repo(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Initialize a git repository and change into it."""
    repo = tmp_path / "repo"
    repo.mkdir()
    subprocess.run(["git", "init"], cwd=repo, check=True, capture_output=True)
    subprocess.run(
        ["git", "config", "user.email", "dev@example.com"], cwd=repo, check=True
    )
    subprocess.run(["git", "config", "user.name", "Dev User"], cwd=repo, check=True)
    subprocess.run(["git", "config", "commit.gpgSign", "false"], cwd=repo, check=True)
    subprocess.run(["git", "config", "tag.gpgSign", "false"], cwd=repo, check=True)
    monkeypatch.chdir(repo)
    return repo


def commit(repo_path: Path, filename: str, content: str) -> None:
    """Create or overwrite a file and commit it."""
    (repo_path / filename).write_text(content)
    subprocess.run(["git", "add", filename], cwd=repo_path, check=True)
    subprocess.run(
        ["git", "commit", "-m", f"Update {filename}"],
        cwd=repo_path,
        check=True,
        capture_output=True,
    )


def commit_and_tag(repo_path: Path, filename: str, content: str, tag: str) -> None:
    """Create a file, commit it, and tag it."""
    commit(repo_path, filename, content)
    subprocess.run(["git", "tag", tag], cwd=repo_path, check=True)


def completed(returncode: int = 0, stdout: str = "", stderr: str = "") -> Mock:
    """Return a stand-in for ``subprocess.CompletedProcess``."""
    return Mock(returncode=returncode, stdout=stdout, stderr=stderr)
