# SPDX-License-Identifier: MIT
# Copyright (c) 2026 LlamaIndex Inc.
from __future__ import annotations

import logging
import os
from pathlib import Path

logger = logging.getLogger(__name__)

OUTPUT_ENV = "GITHUB_OUTPUT"


def resolve_output_path(output_path: str | Path | None = None) -> str | None:
    """Return the step output file, preferring an explicit path over the env."""
    if output_path:
        return str(output_path)
    return os.environ.get(OUTPUT_ENV) or None


def set_output(key: str, value: str, output_path: str | Path) -> None:
    """Append a ``key=value`` line to the GitHub Actions step output file."""
    logger.info("Appending to %s: %s=%s", OUTPUT_ENV, key, value)
    with open(output_path, "a", encoding="utf-8") as handle:
        handle.write(f"{key}={value}\n")
