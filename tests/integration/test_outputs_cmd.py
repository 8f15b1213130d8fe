"""Integration tests: godot-exports outputs against the testing_grounds Godot project."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from godotexports.commands.outputs_cmd import run as outputs_run
from godotexports.config import PROJECT_PATH_ENV


def _read_outputs(path: Path) -> dict[str, str]:
    return dict(line.split("=", 1) for line in path.read_text().splitlines())


def test_outputs_for_fixture_project(fixture_project: Path, tmp_path: Path) -> None:
    """Configured presets map to slots; the unconfigured Mac preset is left out."""
    out = tmp_path / "github_output"
    args = type("Args", (), {"path": fixture_project, "github_output": out})()
    outputs_run(args)
    assert _read_outputs(out) == {
        "require_wine": "true",
        "windows_artifact": "Windows Desktop.zip",
        "html5_artifact": "HTML5.zip",
        "linux_artifact": "LinuxX11.zip",
        "itch_project": "sky-raider",
    }


def test_outputs_warns_for_unconfigured_preset(
    fixture_project: Path, tmp_path: Path, caplog: pytest.LogCaptureFixture
) -> None:
    args = type("Args", (), {"path": fixture_project, "github_output": tmp_path / "out"})()
    with caplog.at_level(logging.INFO, logger="godotexports"):
        outputs_run(args)
    assert "No path set for preset 'Mac OSX'. Skipping!" in caplog.messages
    assert "Found Windows Desktop.zip on platform 'Windows Desktop'" in caplog.messages
    assert "Itch project found: sky-raider" in caplog.messages


def test_outputs_uses_github_output_env(
    fixture_project: Path, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    out = tmp_path / "env_output"
    monkeypatch.setenv("GITHUB_OUTPUT", str(out))
    monkeypatch.setenv(PROJECT_PATH_ENV, str(fixture_project))
    outputs_run(type("Args", (), {})())
    assert _read_outputs(out)["html5_artifact"] == "HTML5.zip"


def test_outputs_without_project_godot_still_succeeds(fixture_project: Path, tmp_path: Path) -> None:
    (fixture_project / "project.godot").unlink()
    out = tmp_path / "out"
    outputs_run(type("Args", (), {"path": fixture_project, "github_output": out})())
    emitted = _read_outputs(out)
    assert "itch_project" not in emitted
    assert emitted["windows_artifact"] == "Windows Desktop.zip"


def test_outputs_missing_export_presets_fails(
    fixture_project: Path, tmp_path: Path, caplog: pytest.LogCaptureFixture
) -> None:
    """No export_presets.cfg: exit 1 and no outputs written."""
    (fixture_project / "export_presets.cfg").unlink()
    out = tmp_path / "out"
    with pytest.raises(SystemExit) as exc_info:
        outputs_run(type("Args", (), {"path": fixture_project, "github_output": out})())
    assert exc_info.value.code == 1
    assert not out.exists()
    assert any("No export_presets.cfg found" in m for m in caplog.messages)


def test_outputs_malformed_preset_fails(fixture_project: Path, tmp_path: Path) -> None:
    (fixture_project / "export_presets.cfg").write_text('[preset.0]\n\nexport_path="x"\n', encoding="utf-8")
    out = tmp_path / "out"
    with pytest.raises(SystemExit) as exc_info:
        outputs_run(type("Args", (), {"path": fixture_project, "github_output": out})())
    assert exc_info.value.code == 1
    assert not out.exists()


def test_outputs_unexpected_error_fails(fixture_project: Path, tmp_path: Path) -> None:
    """An unreadable export file is reported as a failure, not a traceback."""
    (fixture_project / "export_presets.cfg").write_bytes(b"\xff\xfe[preset.0]\x00\x81")
    out = tmp_path / "out"
    with pytest.raises(SystemExit) as exc_info:
        outputs_run(type("Args", (), {"path": fixture_project, "github_output": out})())
    assert exc_info.value.code == 1
    assert not out.exists()
