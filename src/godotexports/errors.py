"""Exceptions that abort a run."""

from __future__ import annotations


class GodotExportsError(Exception):
    """Base class for fatal godot-exports errors."""


class ExportPresetsNotFoundError(GodotExportsError, FileNotFoundError):
    """The project root has no export_presets.cfg."""


class PresetError(GodotExportsError):
    """A configured preset is missing a field needed to map its artifact."""

    def __init__(self, section: str, field: str) -> None:
        self.section = section
        self.field = field
        super().__init__(f"Preset [{section}] has an export_path but no '{field}' field")
