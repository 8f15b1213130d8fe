"""Outputs command: the action itself. Read the Godot project and publish artifact outputs."""

from __future__ import annotations

import logging
import sys
from argparse import Namespace

from godotexports.config import project_root_from
from godotexports.errors import GodotExportsError
from godotexports.outputs import emit_outputs
from godotexports.presets import collect_outputs

logger = logging.getLogger(__name__)


def run(args: Namespace) -> None:
    """
    Run the outputs command.

    Warnings (unconfigured presets, missing itch project) do not fail the run.
    A missing export_presets.cfg or any unexpected error is logged and exits 1
    before any output is written.
    """
    project_root = project_root_from(getattr(args, "path", None))
    output_file = getattr(args, "github_output", None)
    logger.debug("Project root: %s", project_root.as_posix())

    try:
        outputs = collect_outputs(project_root)
    except GodotExportsError as e:
        logger.error("%s", e)
        sys.exit(1)
    except Exception as e:
        logger.exception("Unexpected error reading %s: %s", project_root.as_posix(), e)
        sys.exit(1)

    emit_outputs(outputs, output_file)
