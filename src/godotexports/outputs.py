"""Publish named outputs to the calling workflow ($GITHUB_OUTPUT) or the console."""

from __future__ import annotations

import logging
import os
import uuid
from pathlib import Path

from godotexports.presets import ArtifactOutputs

logger = logging.getLogger(__name__)

GITHUB_OUTPUT_ENV = "GITHUB_OUTPUT"


def set_output(name: str, value: str, output_file: Path | str | None = None) -> None:
    """
    Set one workflow output.

    Appends to output_file (default: $GITHUB_OUTPUT). Multi-line values use the
    heredoc form with a random delimiter. Without an output file the pair is
    printed to stdout for local runs.
    """
    if output_file is None:
        output_file = os.environ.get(GITHUB_OUTPUT_ENV) or None
    if output_file:
        with open(output_file, "a", encoding="utf-8") as f:
            if "\n" in value:
                delimiter = uuid.uuid4().hex
                f.write(f"{name}<<{delimiter}\n{value}\n{delimiter}\n")
            else:
                f.write(f"{name}={value}\n")
        logger.debug("Output %s=%s", name, value)
    else:
        print(f"[OUTPUT] {name} = {value}")


def emit_outputs(outputs: ArtifactOutputs, output_file: Path | str | None = None) -> dict[str, str]:
    """Set every output in outputs; returns what was emitted."""
    emitted = outputs.as_outputs()
    for name, value in emitted.items():
        set_output(name, value, output_file)
    return emitted
