# SPDX-License-Identifier: MIT
# Copyright (c) 2026 LlamaIndex Inc.
"""Action inputs, read from the ``INPUT_*`` environment variables."""

from __future__ import annotations

import logging
import os
from typing import Mapping, Optional

from pydantic import BaseModel, ConfigDict

logger = logging.getLogger(__name__)

INPUT_PREFIX = "INPUT_"

# action input names, in the order they are read
INPUT_KEYS = ("include", "exclude", "commit-ish", "skip-unshallow", "abbrev")


def input_variable(key: str) -> str:
    """Return the environment variable GitHub Actions uses for an input."""
    return f"{INPUT_PREFIX}{key}".upper()


class ActionInputs(BaseModel):
    """Resolved inputs for a single describe run.

    ``None`` means the input was not provided; such options are left out of
    the command entirely.
    """

    model_config = ConfigDict(frozen=True)

    include: Optional[str] = None
    exclude: Optional[str] = None
    commit_ish: Optional[str] = None
    skip_unshallow: bool = False
    abbrev: Optional[str] = None


def read_configuration(environ: Optional[Mapping[str, str]] = None) -> ActionInputs:
    """Build the inputs from ``environ`` (defaults to ``os.environ``)."""
    env = os.environ if environ is None else environ
    raw: dict[str, Optional[str]] = {}
    for key in INPUT_KEYS:
        value = env.get(input_variable(key))
        logger.info("Using input for %s: %s", key, value)
        raw[key] = value

    return ActionInputs(
        include=raw["include"],
        exclude=raw["exclude"],
        commit_ish=raw["commit-ish"],
        skip_unshallow=raw["skip-unshallow"] == "true",
        abbrev=raw["abbrev"],
    )
