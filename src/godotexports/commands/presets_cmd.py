"""List the presets of a Godot project as JSON or CSV."""

from __future__ import annotations

import csv
import json
import logging
import sys
from argparse import Namespace

from godotexports.config import EXPORT_PRESETS_FILE, project_root_from
from godotexports.ini import parse_ini_file
from godotexports.presets import Preset, archive_name, load_presets

logger = logging.getLogger(__name__)

FIELDNAMES = [
    "section",
    "name",
    "platform",
    "export_path",
    "configured",
    "archive",
    "slot",
]


def _preset_to_dict(p: Preset) -> dict:
    """Convert Preset to a JSON-serializable dict."""
    archive = None
    if p.configured and p.name is not None:
        archive = archive_name(p)
    return {
        "section": p.section,
        "name": p.name,
        "platform": p.platform,
        "export_path": p.export_path,
        "configured": p.configured,
        "archive": archive,
        "slot": p.slot if p.configured else None,
    }


def _export_json(presets: list[Preset], out: object) -> None:
    """Write presets as JSON array to out (e.g. sys.stdout)."""
    data = [_preset_to_dict(p) for p in presets]
    json.dump(data, out, indent=2)
    out.write("\n")


def _export_csv(presets: list[Preset], out: object) -> None:
    """Write presets as flat CSV to out (e.g. sys.stdout)."""
    writer = csv.DictWriter(out, fieldnames=FIELDNAMES, lineterminator="\n")
    writer.writeheader()
    for p in presets:
        row = _preset_to_dict(p)
        # CSV: normalize None to empty string, bool to true/false
        for k, v in row.items():
            if v is None:
                row[k] = ""
            elif isinstance(v, bool):
                row[k] = "true" if v else "false"
        writer.writerow(row)


def run(args: Namespace) -> None:
    """Run the presets command."""
    project_root = project_root_from(getattr(args, "path", None))
    fmt = getattr(args, "format", "json")

    export_file = project_root / EXPORT_PRESETS_FILE
    if not export_file.is_file():
        print(f"No {EXPORT_PRESETS_FILE} found in {project_root.as_posix()}.", file=sys.stderr)
        sys.exit(1)

    try:
        presets = load_presets(parse_ini_file(export_file))
    except Exception as e:
        logger.exception("Unexpected error reading %s: %s", export_file.as_posix(), e)
        sys.exit(1)

    if fmt == "json":
        _export_json(presets, sys.stdout)
    else:
        _export_csv(presets, sys.stdout)
