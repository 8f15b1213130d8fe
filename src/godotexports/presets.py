"""Export presets: read them from a parsed export_presets.cfg and map them to artifact outputs."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator, Optional

from pathvalidate import sanitize_filename

from godotexports.config import (
    EXPORT_PRESETS_FILE,
    GLOBAL_SECTION,
    GODOT_PROJECT_FILE,
    ITCH_PROJECT_KEY,
)
from godotexports.errors import ExportPresetsNotFoundError, PresetError
from godotexports.ini import Document, parse_ini_file

logger = logging.getLogger(__name__)

OPTIONS_SUFFIX = ".options"
ARCHIVE_EXTENSION = ".zip"
FALLBACK_ARCHIVE_STEM = "export"
# ext4 caps a file name at 255 bytes; NTFS and APFS at 255 characters
MAX_FILENAME_BYTES = 255

# Godot platform label -> output slot
PLATFORM_SLOTS: dict[str, str] = {
    "Windows Desktop": "windows_artifact",
    "HTML5": "html5_artifact",
    "Mac OSX": "osx_artifact",
    "Linux/X11": "linux_artifact",
    "Android": "android_artifact",
}

# Platforms whose packaging step runs Windows tooling
WINE_PLATFORMS = frozenset({"Windows Desktop"})


@dataclass(frozen=True)
class Preset:
    """One [preset.N] section of export_presets.cfg."""

    section: str
    name: Optional[str] = None
    platform: Optional[str] = None
    export_path: Optional[str] = None

    @classmethod
    def from_section(cls, section: str, values: dict[str, str]) -> Preset:
        return cls(
            section=section,
            name=values.get("name"),
            platform=values.get("platform"),
            export_path=values.get("export_path"),
        )

    @property
    def configured(self) -> bool:
        """True if the preset has a non-empty export_path."""
        return bool(self.export_path)

    @property
    def slot(self) -> str | None:
        """Output slot for this preset's platform, None for unmapped platforms."""
        if self.platform is None:
            return None
        return PLATFORM_SLOTS.get(self.platform)

    @property
    def display_name(self) -> str:
        if self.name is None:
            return self.section
        return sanitize_name(self.name)


@dataclass
class ArtifactOutputs:
    """Named outputs published for the downstream pipeline step."""

    require_wine: bool = False
    windows_artifact: Optional[str] = None
    html5_artifact: Optional[str] = None
    osx_artifact: Optional[str] = None
    linux_artifact: Optional[str] = None
    android_artifact: Optional[str] = None
    itch_project: Optional[str] = None

    def as_outputs(self) -> dict[str, str]:
        """Output name -> string value; unset slots are left out."""
        outputs = {"require_wine": "true" if self.require_wine else "false"}
        for slot in PLATFORM_SLOTS.values():
            value = getattr(self, slot)
            if value is not None:
                outputs[slot] = value
        if self.itch_project is not None:
            outputs["itch_project"] = self.itch_project
        return outputs


def sanitize_name(name: str, max_len: int = MAX_FILENAME_BYTES) -> str:
    """
    Make name safe to use as a file name on Windows, macOS and Linux.

    Path separators, control characters and other reserved characters are
    removed; reserved device names (CON, NUL, ...) get a suffix. The result is
    at most max_len bytes of UTF-8. An empty result falls back to "export".
    """
    cleaned = sanitize_filename(name, platform="universal", max_len=max_len)
    return cleaned or FALLBACK_ARCHIVE_STEM


def archive_name(preset: Preset) -> str:
    """Zip file name for a preset: <sanitized name>.zip, within the file name byte limit."""
    if preset.name is None:
        raise PresetError(preset.section, "name")
    stem = sanitize_name(preset.name, max_len=MAX_FILENAME_BYTES - len(ARCHIVE_EXTENSION.encode("utf-8")))
    return stem + ARCHIVE_EXTENSION


def iter_preset_sections(document: Document) -> Iterator[tuple[str, dict[str, str]]]:
    """
    Yield (section name, values) for sections that describe a preset.

    Skips the top-level section and *.options blocks.
    """
    for section in document.section_names():
        if section.endswith(OPTIONS_SUFFIX):
            continue
        yield section, document[section]


def load_presets(document: Document) -> list[Preset]:
    """All presets in document order, configured or not."""
    return [Preset.from_section(section, values) for section, values in iter_preset_sections(document)]


def extract_artifacts(document: Document) -> ArtifactOutputs:
    """
    Map every configured preset onto its platform's output slot.

    Presets without an export_path are skipped with a warning. Unknown
    platforms are ignored. A later preset on the same platform replaces an
    earlier one. Raises PresetError for a configured preset without a name or
    platform.
    """
    outputs = ArtifactOutputs()
    valid: list[Preset] = []
    for preset in load_presets(document):
        if not preset.configured:
            logger.warning("No path set for preset '%s'. Skipping!", preset.display_name)
            continue
        valid.append(preset)

    for preset in valid:
        archive = archive_name(preset)
        if preset.platform is None:
            raise PresetError(preset.section, "platform")
        logger.info("Found %s on platform '%s'", archive, preset.platform)
        slot = preset.slot
        if slot is None:
            logger.debug("No output slot for platform '%s'", preset.platform)
            continue
        setattr(outputs, slot, archive)
        if preset.platform in WINE_PLATFORMS:
            outputs.require_wine = True
    return outputs


def find_itch_project(project_root: Path) -> str | None:
    """
    Read [global] itch_project from project.godot.

    Missing file, section or key only logs a warning and returns None.
    """
    godot_file = project_root / GODOT_PROJECT_FILE
    value = None
    if godot_file.is_file():
        document = parse_ini_file(godot_file)
        value = document.get_value(GLOBAL_SECTION, ITCH_PROJECT_KEY)
    else:
        logger.debug("%s not found in %s", GODOT_PROJECT_FILE, project_root)
    if not value:
        logger.warning(
            "Unable to find '%s' in '%s'. Set '%s'= the itch.io project name to export to.",
            ITCH_PROJECT_KEY,
            GODOT_PROJECT_FILE,
            ITCH_PROJECT_KEY,
        )
        return None
    logger.info("Itch project found: %s", value)
    return value


def collect_outputs(project_root: Path) -> ArtifactOutputs:
    """
    Build all outputs for the Godot project at project_root.

    Raises ExportPresetsNotFoundError when export_presets.cfg is missing.
    """
    export_file = project_root / EXPORT_PRESETS_FILE
    if not export_file.is_file():
        raise ExportPresetsNotFoundError(
            f"No {EXPORT_PRESETS_FILE} found in {project_root}. "
            "You must have at least one export defined via the Godot editor!"
        )
    outputs = extract_artifacts(parse_ini_file(export_file))
    outputs.itch_project = find_itch_project(project_root)
    return outputs
