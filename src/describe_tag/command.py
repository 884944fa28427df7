# SPDX-License-Identifier: MIT
# Copyright (c) 2026 LlamaIndex Inc.
"""Assemble the ``git describe`` shell command."""

from __future__ import annotations

import logging
import re

from .config import ActionInputs

logger = logging.getLogger(__name__)

# actions/checkout does a shallow clone, so tags are missing until unshallowed
UNSHALLOW_COMMAND = "git fetch --prune --unshallow &&"
DESCRIBE_COMMAND = "git describe --tags"
ABBREV_DISABLED = "false"
CURRENT_REVISION = "HEAD"

_SPACES_RE = re.compile(r" +")


def _quote(value: str) -> str:
    # Globs and refs are passed through as given; embedded quotes are not escaped.
    return f"'{value}'"


def build_command(inputs: ActionInputs) -> str:
    """Return the shell command line for ``inputs``.

    Options that are not set are dropped and the gaps they leave are
    collapsed, so the result never has doubled or edge whitespace.
    """
    unshallow = "" if inputs.skip_unshallow else UNSHALLOW_COMMAND

    abbrev_option = ""
    if inputs.abbrev is not None and inputs.abbrev != ABBREV_DISABLED:
        abbrev_option = f"--abbrev={inputs.abbrev}"

    include_option = ""
    if inputs.include:
        include_option = f"--match {_quote(inputs.include)}"

    exclude_option = ""
    if inputs.exclude:
        exclude_option = f"--exclude {_quote(inputs.exclude)}"

    commit_ish_option = ""
    if inputs.commit_ish is not None:
        if inputs.commit_ish in ("", CURRENT_REVISION):
            logger.warning(
                'Passing empty string or HEAD to commit-ish will get the "current" '
                'tag rather than "previous". For previous tag, try "HEAD~".'
            )
        commit_ish_option = _quote(inputs.commit_ish)

    parts = [
        unshallow,
        DESCRIBE_COMMAND,
        abbrev_option,
        include_option,
        exclude_option,
        commit_ish_option,
    ]
    cmd = _SPACES_RE.sub(" ", " ".join(parts)).strip()
    logger.info("Executing: %s", cmd)
    return cmd
