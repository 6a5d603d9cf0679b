from __future__ import annotations
from dataclasses import dataclass, fields, replace
from typing import Any

from slog.core.levels import Level, parse_level

TAG_STYLES = {"short", "long"}

@dataclass(frozen=True)
class SettingsData:
    level: str = "DEBUG"
    color: bool = True
    timestamps: bool = False      # second resolution, local time
    tag_style: str = "short"      # short (NFO) or long (INFO)
    raise_on_stream_error: bool = False

    def normalize(self) -> "SettingsData":
        """Return a copy with invalid values reset to their defaults."""
        changes: dict[str, Any] = {}
        try:
            level = parse_level(self.level).name
        except ValueError:
            level = "DEBUG"
        if level != self.level:
            changes["level"] = level
        if self.tag_style not in TAG_STYLES:
            changes["tag_style"] = "short"
        for name in ("color", "timestamps", "raise_on_stream_error"):
            if not isinstance(getattr(self, name), bool):
                changes[name] = _default(name)
        return replace(self, **changes) if changes else self

    def threshold(self) -> Level:
        return parse_level(self.level)

    def updated(self, **changes: Any) -> "SettingsData":
        """Return a copy with ``changes`` applied; invalid values raise instead of being reset."""
        known = {f.name for f in fields(self)}
        unknown = set(changes) - known
        if unknown:
            raise TypeError(f"Unknown setting(s): {', '.join(sorted(unknown))}")
        if "level" in changes:
            changes["level"] = parse_level(changes["level"]).name
        if "tag_style" in changes and changes["tag_style"] not in TAG_STYLES:
            raise ValueError(f"Unknown tag style {changes['tag_style']!r}")
        for name in ("color", "timestamps", "raise_on_stream_error"):
            if name in changes and not isinstance(changes[name], bool):
                raise ValueError(f"Setting {name!r} must be True or False, not {changes[name]!r}")
        return replace(self, **changes)

def _default(name: str) -> Any:
    for f in fields(SettingsData):
        if f.name == name:
            return f.default
    raise KeyError(name)
