# SPDX-License-Identifier: MIT
# Copyright (c) 2026 LlamaIndex Inc.
from __future__ import annotations

from .cli import cli
from .config import ActionInputs, read_configuration
from .runner import (
    DescribeTagError,
    NoEarlierTagError,
    OutputSinkMissingError,
    build_command,
    execute,
    publish,
    run,
)

__all__ = [
    "ActionInputs",
    "DescribeTagError",
    "NoEarlierTagError",
    "OutputSinkMissingError",
    "build_command",
    "cli",
    "execute",
    "main",
    "publish",
    "read_configuration",
    "run",
]


def main() -> None:
    """Console script entry point."""
    cli()
