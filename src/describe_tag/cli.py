# SPDX-License-Identifier: MIT
# Copyright (c) 2026 LlamaIndex Inc.
"""CLI entry point for describe-tag."""

from __future__ import annotations

import logging
import os
import sys
from pathlib import Path

import click

from . import config, runner

LOG_FORMAT = "%(levelname)s %(message)s"


def _default_log_level() -> str:
    # GitHub sets RUNNER_DEBUG=1 when a job is re-run with debug logging
    return "DEBUG" if os.environ.get("RUNNER_DEBUG") == "1" else "INFO"


def configure_logging(level: str) -> None:
    """Send package logs to stderr, replacing any handler from a previous call."""
    package_logger = logging.getLogger("describe_tag")
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    package_logger.addHandler(handler)
    package_logger.setLevel(level)
    package_logger.propagate = False


def _merge_overrides(
    environ: dict[str, str], overrides: dict[str, str | None]
) -> dict[str, str]:
    merged = dict(environ)
    for key, value in overrides.items():
        if value is not None:
            merged[config.input_variable(key)] = value
    return merged


@click.command()
@click.option("--include", default=None, help="Only consider tags matching this glob.")
@click.option("--exclude", default=None, help="Ignore tags matching this glob.")
@click.option(
    "--commit-ish",
    default=None,
    help="Commit to describe from. Use HEAD~ for the tag before the current one.",
)
@click.option(
    "--abbrev",
    default=None,
    help="Hex digits for the abbreviated commit, or 'false' to omit the option.",
)
@click.option(
    "--skip-unshallow/--no-skip-unshallow",
    default=None,
    help="Skip 'git fetch --unshallow' before describing.",
)
@click.option(
    "--output",
    type=click.Path(dir_okay=False),
    default=None,
    help="Step output file. Defaults to $GITHUB_OUTPUT.",
)
@click.option(
    "--cwd",
    type=click.Path(exists=True, file_okay=False),
    default=None,
    help="Repository to run git in.",
)
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default=_default_log_level,
    show_default="INFO",
)
def cli(
    include: str | None,
    exclude: str | None,
    commit_ish: str | None,
    abbrev: str | None,
    skip_unshallow: bool | None,
    output: str | None,
    cwd: str | None,
    log_level: str,
) -> None:
    """Find the most recent tag reachable from a commit and publish it as the
    ``tag`` step output.

    Inputs are read from the INPUT_* variables GitHub Actions sets; any option
    given on the command line takes precedence.
    """
    configure_logging(log_level.upper())

    overrides: dict[str, str | None] = {
        "include": include,
        "exclude": exclude,
        "commit-ish": commit_ish,
        "abbrev": abbrev,
        "skip-unshallow": None
        if skip_unshallow is None
        else ("true" if skip_unshallow else "false"),
    }
    try:
        inputs = config.read_configuration(_merge_overrides(dict(os.environ), overrides))
        runner.run(inputs, output_path=Path(output) if output else None, cwd=cwd)
    except runner.DescribeTagError as exc:
        raise click.ClickException(str(exc)) from exc
    except Exception as exc:
        raise click.ClickException(f"Unexpected failure: {exc}") from exc
