"""Logging setup: console (plain or GitHub workflow commands) plus optional log file."""

from __future__ import annotations

import logging
import os
import sys
from pathlib import Path

from godotexports.config import load_config

LOGGER_NAME = "godotexports"
DEFAULT_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def running_in_github_actions() -> bool:
    return os.environ.get("GITHUB_ACTIONS", "").lower() == "true"


class WorkflowCommandFormatter(logging.Formatter):
    """
    Render records as GitHub Actions workflow commands.

    WARNING -> ``::warning::``, ERROR and above -> ``::error::``,
    DEBUG -> ``::debug::``; INFO lines are printed as-is.
    """

    def __init__(self) -> None:
        super().__init__("%(message)s")

    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)
        if record.levelno >= logging.ERROR:
            command = "error"
        elif record.levelno >= logging.WARNING:
            command = "warning"
        elif record.levelno < logging.INFO:
            command = "debug"
        else:
            return message
        # Workflow commands are single-line; escape as @actions/core does
        escaped = message.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")
        return f"::{command}::{escaped}"


def setup_logging(
    verbose: bool = False,
    quiet: bool = False,
    project_root: Path | None = None,
) -> logging.Logger:
    """
    Configure the package logger: level from --verbose/--quiet or config, console handler,
    optional file handler from config.
    """
    config = load_config(project_root)
    log_cfg = config.get("logging") or {}
    if verbose:
        level_name = "DEBUG"
    elif quiet:
        level_name = "ERROR"
    else:
        level_name = str(log_cfg.get("level") or "INFO").upper()
    level = getattr(logging, level_name, logging.INFO)
    root = logging.getLogger(LOGGER_NAME)
    root.setLevel(level)
    if not root.handlers:
        fmt = logging.Formatter(DEFAULT_FORMAT)
        console = logging.StreamHandler(sys.stderr)
        console.setFormatter(WorkflowCommandFormatter() if running_in_github_actions() else fmt)
        root.addHandler(console)
        log_file = log_cfg.get("file")
        if log_file:
            try:
                fh = logging.FileHandler(Path(log_file).expanduser(), encoding="utf-8")
                fh.setFormatter(fmt)
                root.addHandler(fh)
            except OSError:
                pass
    return root
