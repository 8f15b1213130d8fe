"""INI-style parser for Godot's export_presets.cfg and project.godot files."""

from __future__ import annotations

import re
from pathlib import Path


class _TopLevel:
    """Sentinel key for key-value pairs that appear outside any section."""

    def __repr__(self) -> str:
        return "TOP_LEVEL"

    def __reduce__(self) -> str:
        return "TOP_LEVEL"


TOP_LEVEL = _TopLevel()

_COMMENT_RE = re.compile(r"^\s*;")
_PARAM_RE = re.compile(r"^\s*([^=]+?)\s*=\s*(.*?)\s*$")
_SECTION_RE = re.compile(r"^\s*\[\s*([^\]]*?)\s*\]\s*$")
_LINE_BREAK_RE = re.compile(r"\r\n|\r|\n")


class Document(dict):
    """
    Parsed INI content: section name -> {key: value}.

    Pairs found before any header (or after a closing blank line) live under
    the TOP_LEVEL key, which is always present.
    """

    def __init__(self) -> None:
        super().__init__()
        self[TOP_LEVEL] = {}

    @property
    def top_level(self) -> dict[str, str]:
        return self[TOP_LEVEL]

    def section_names(self) -> list[str]:
        """Named sections in file order (TOP_LEVEL excluded)."""
        return [name for name in self if name is not TOP_LEVEL]

    def get_value(self, section: str, key: str) -> str | None:
        """Value of key in section, or None if either is missing."""
        values = self.get(section)
        if values is None:
            return None
        return values.get(key)


def _unquote(text: str) -> str:
    if len(text) >= 2 and text[0] == '"' and text[-1] == '"':
        return text[1:-1]
    return text


class _Parser:
    """Single-pass line classifier; `section` is the open section or None."""

    def __init__(self) -> None:
        self.document = Document()
        self.section: str | None = None

    def feed(self, line: str) -> None:
        if _COMMENT_RE.match(line):
            return
        match = _PARAM_RE.match(line)
        if match:
            key = _unquote(match.group(1))
            value = _unquote(match.group(2))
            if self.section is None:
                self.document.top_level[key] = value
            else:
                self.document[self.section][key] = value
            return
        match = _SECTION_RE.match(line)
        if match:
            name = match.group(1)
            if not name:
                # `[]` names no section; its pairs belong to the top level
                self.section = None
                return
            self.section = name
            self.document[self.section] = {}
            return
        # Godot pads every header with one blank line; only a blank line after
        # content closes the section.
        if line == "" and self.section is not None and self.document[self.section]:
            self.section = None


def parse_ini_string(text: str) -> Document:
    """
    Parse INI-style text into a Document.

    Lines are classified in order: ``;`` comment, ``key = value`` pair,
    ``[section]`` header, blank line. Anything else is ignored. Surrounding
    whitespace and one pair of surrounding double quotes are stripped from keys
    and values. Later duplicate keys win; a repeated header resets its section.
    An empty ``[]`` header switches back to the top-level section.
    """
    parser = _Parser()
    for line in _LINE_BREAK_RE.split(text):
        parser.feed(line)
    return parser.document


def parse_ini_file(path: Path | str) -> Document:
    """Read path as UTF-8 and parse it. Raises FileNotFoundError if missing."""
    text = Path(path).read_text(encoding="utf-8")
    return parse_ini_string(text)
