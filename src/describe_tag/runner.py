# SPDX-License-Identifier: MIT
# Copyright (c) 2026 LlamaIndex Inc.
"""Run ``git describe`` and publish the tag it finds as a step output."""

from __future__ import annotations

import logging
import subprocess
from pathlib import Path

from . import gha
from .command import build_command
from .config import ActionInputs

logger = logging.getLogger(__name__)

OUTPUT_KEY = "tag"


class DescribeTagError(RuntimeError):
    """Base class for failures that should end the step with exit code 1."""


class NoEarlierTagError(DescribeTagError):
    """Raised when the describe command fails or cannot be started."""

    def __init__(self, stderr: str = "") -> None:
        self.stderr = stderr
        super().__init__(f"Unable to find an earlier tag.\n{stderr}".rstrip())


class OutputSinkMissingError(DescribeTagError):
    """Raised when there is nowhere to write the step output."""

    def __init__(self) -> None:
        super().__init__(
            f"Unable to set output state. {gha.OUTPUT_ENV} environment variable not found!"
        )


def execute(command: str, cwd: str | Path | None = None) -> str:
    """Run ``command`` through the shell and return its trimmed stdout."""
    try:
        result = subprocess.run(
            command,
            shell=True,
            capture_output=True,
            encoding="utf-8",
            errors="replace",
            cwd=cwd,
        )
    except OSError as exc:
        raise NoEarlierTagError(str(exc)) from exc

    if result.returncode != 0:
        logger.debug("Command exited with status %s", result.returncode)
        raise NoEarlierTagError(result.stderr or "")

    tag = result.stdout.strip()
    logger.info("Found tag: %s", tag)
    return tag


def publish(tag: str, output_path: str | Path | None = None) -> None:
    """Append ``tag=<tag>`` to the step output file."""
    target = gha.resolve_output_path(output_path)
    if target is None:
        raise OutputSinkMissingError()
    gha.set_output(OUTPUT_KEY, tag, target)


def run(
    inputs: ActionInputs,
    output_path: str | Path | None = None,
    cwd: str | Path | None = None,
) -> str:
    """Describe the configured commit and publish the resulting tag.

    Either exactly one output line is written, or an exception is raised and
    the output file is left untouched.
    """
    command = build_command(inputs)
    tag = execute(command, cwd=cwd)
    publish(tag, output_path)
    return tag
