"""A small INI reader and writer for engine and mod settings."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import IntEnum
from pathlib import Path

_C_SPACE = " \t\n\v\f\r"

_SECTION_RE = re.compile(r"\[([^\[\]]+)")
_KEY_RE = re.compile(r"([^;=]+)=")
_VALUE_RE = re.compile(r"[^\t\r\n]+")
_INT_RE = re.compile(r"[ \t\n\v\f\r]*([+-]?\d+)")
_FLOAT_RE = re.compile(
    r"[ \t\n\v\f\r]*([+-]?(?:\d+\.?\d*(?:[eE][+-]?\d+)?"
    r"|\.\d+(?:[eE][+-]?\d+)?|inf(?:inity)?|nan))",
    re.IGNORECASE,
)


class ItemType(IntEnum):
    """How an item's value was stored, which decides how it is written."""

    STRING = 0
    INT = 1
    FLOAT = 2
    BOOL = 3
    COMMENT = 4


@dataclass
class ConfigItem:
    """One key/value entry (or comment) belonging to a section."""

    section: str = ""
    key: str = ""
    value: str = ""
    has_section: bool = False
    item_type: ItemType = ItemType.STRING


def _atoi(text: str) -> int:
    match = _INT_RE.match(text)
    return int(match.group(1)) if match else 0


def _atof(text: str) -> float:
    match = _FLOAT_RE.match(text)
    return float(match.group(1)) if match else 0.0


@dataclass
class IniParser:
    """An ordered list of configuration items with typed access."""

    items: list[ConfigItem] = field(default_factory=list)

    @classmethod
    def from_file(cls, path) -> IniParser:
        """Read and parse the file at ``path``."""
        with open(path, encoding="utf-8", newline="") as handle:
            return cls.parse(handle.read())

    @classmethod
    def parse(cls, text: str) -> IniParser:
        """Parse INI text; lines that are neither sections nor key=value are ignored."""
        parser = cls()
        section = ""
        has_section = False
        for line in text.splitlines(keepends=True):
            if line.startswith("#"):
                continue
            section_match = _SECTION_RE.match(line)
            if section_match:
                section = section_match.group(1)
                has_section = True
                continue
            key_match = _KEY_RE.match(line)
            if not key_match:
                continue
            rest = line[key_match.end():]
            value_match = _VALUE_RE.match(rest.lstrip(_C_SPACE)) or _VALUE_RE.match(rest)
            if not value_match:
                continue
            parser.items.append(
                ConfigItem(
                    section=section if has_section else "",
                    key=key_match.group(1),
                    value=value_match.group(0),
                    has_section=has_section,
                )
            )
        return parser

    def _find(self, section: str, key: str) -> ConfigItem | None:
        return next(
            (item for item in self.items if item.section == section and item.key == key),
            None,
        )

    def _lookup(self, section: str, key: str) -> str:
        item = self._find(section, key)
        if item is None:
            raise KeyError(f"[{section}] {key}")
        return item.value

    def get_string(self, section: str, key: str) -> str:
        """Return the raw value; raise KeyError if absent."""
        return self._lookup(section, key)

    def get_int(self, section: str, key: str) -> int:
        """Return the leading integer of the value (0 if none); raise KeyError if absent."""
        return _atoi(self._lookup(section, key))

    def get_float(self, section: str, key: str) -> float:
        """Return the leading number of the value (0.0 if none); raise KeyError if absent."""
        return _atof(self._lookup(section, key))

    def get_bool(self, section: str, key: str) -> bool:
        """Return True for "true" or "1"; raise KeyError if absent."""
        return self._lookup(section, key) in ("true", "1")

    def _set(self, section: str, key: str, value: str, item_type: ItemType) -> None:
        item = self._find(section, key)
        if item is None:
            item = ConfigItem()
            self.items.append(item)
        item.section = section
        item.key = key
        item.value = value
        item.item_type = item_type

    def set_string(self, section: str, key: str, value: str) -> None:
        self._set(section, key, str(value), ItemType.STRING)

    def set_int(self, section: str, key: str, value: int) -> None:
        self._set(section, key, str(int(value)), ItemType.INT)

    def set_float(self, section: str, key: str, value: float) -> None:
        self._set(section, key, f"{float(value):f}", ItemType.FLOAT)

    def set_bool(self, section: str, key: str, value: bool) -> None:
        self._set(section, key, "true" if value else "false", ItemType.BOOL)

    def set_comment(self, section: str, key: str, comment: str) -> None:
        self._set(section, key, str(comment), ItemType.COMMENT)

    @staticmethod
    def _format(item: ConfigItem) -> str:
        if item.item_type == ItemType.COMMENT:
            return f"; {item.value}\n"
        return f"{item.key}={item.value}\n"

    def dumps(self) -> str:
        """Render the items as INI text, sectionless items first."""
        sections: list[str] = []
        past = ""
        for item in self.items:
            if item.section != past:
                past = item.section
                sections.append(item.section)
        if len(sections) > 1 and sections[0] == sections[-1]:
            sections.pop()

        parts = [self._format(item) for item in self.items if item.section == ""]
        parts.append("\n")
        blocks = []
        for name in sections:
            body = "".join(self._format(item) for item in self.items if item.section == name)
            blocks.append(f"[{name}]\n{body}")
        parts.append("\n".join(blocks))
        return "".join(parts)

    def write(self, path) -> None:
        """Write the rendered text to ``path``."""
        Path(path).write_text(self.dumps(), encoding="utf-8")