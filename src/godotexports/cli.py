"""CLI entry point: argument parsing and subcommand dispatch."""

from __future__ import annotations

import argparse
from pathlib import Path

from godotexports import __version__
from godotexports.config import project_root_from
from godotexports.logs import setup_logging


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="godot-exports",
        description="Publish Godot export preset artifact names as CI workflow outputs.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    log_group = parser.add_mutually_exclusive_group()
    log_group.add_argument("-v", "--verbose", action="store_true", help="Verbose (DEBUG) output.")
    log_group.add_argument("-q", "--quiet", action="store_true", help="Quiet (errors only).")

    # Same flags on subparsers so "godot-exports outputs . -v" works
    global_flags = argparse.ArgumentParser(add_help=False)
    log_grp = global_flags.add_mutually_exclusive_group()
    log_grp.add_argument("-v", "--verbose", action="store_true", help=argparse.SUPPRESS)
    log_grp.add_argument("-q", "--quiet", action="store_true", help=argparse.SUPPRESS)

    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND", required=True)

    # outputs (what the action runs)
    p_outputs = subparsers.add_parser(
        "outputs",
        help="Read export_presets.cfg and project.godot and set workflow outputs.",
        parents=[global_flags],
    )
    p_outputs.add_argument(
        "path",
        type=Path,
        nargs="?",
        default=None,
        help="Godot project root (default: $INPUT_RELATIVE_PROJECT_PATH, else .).",
    )
    p_outputs.add_argument(
        "--github-output",
        metavar="FILE",
        help="File to append outputs to (default: $GITHUB_OUTPUT; console if unset).",
    )
    p_outputs.set_defaults(run="outputs")

    # presets
    p_presets = subparsers.add_parser(
        "presets",
        help="List export presets and the artifact each one maps to.",
        parents=[global_flags],
    )
    p_presets.add_argument("path", type=Path, nargs="?", default=None, help="Godot project root (default: .).")
    p_presets.add_argument("--format", "-f", choices=("json", "csv"), default="json", help="Output format.")
    p_presets.set_defaults(run="presets")
    return parser


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)

    # Resolve the project root once so config, logging and the command agree
    args.path = project_root_from(args.path)
    setup_logging(
        verbose=getattr(args, "verbose", False),
        quiet=getattr(args, "quiet", False),
        project_root=args.path,
    )

    if args.run == "outputs":
        from godotexports.commands.outputs_cmd import run as cmd_run
    else:
        from godotexports.commands.presets_cmd import run as cmd_run

    cmd_run(args)
