"""Severity levels: ordering, tags and colors.

Provides:
  Level: ordered enumeration TRACE < DEBUG < INFO < WARNING < ERROR
  SHORT_TAGS / LONG_TAGS: mapping level -> bracketed tag text
  LEVEL_COLORS: mapping level -> color name understood by slog.ui.colors
  parse_level(): accept a Level, its value, or a (case-insensitive) name
"""
from __future__ import annotations
from enum import IntEnum
from typing import Dict, Union


class Level(IntEnum):
    TRACE = 0
    DEBUG = 1
    INFO = 2
    WARNING = 3
    ERROR = 4


SHORT_TAGS: Dict[Level, str] = {
    Level.TRACE: "TRC",
    Level.DEBUG: "DBG",
    Level.INFO: "NFO",
    Level.WARNING: "WRN",
    Level.ERROR: "ERR",
}

LONG_TAGS: Dict[Level, str] = {lvl: lvl.name for lvl in Level}

LEVEL_COLORS: Dict[Level, str] = {
    Level.TRACE: "gray",
    Level.DEBUG: "blue",
    Level.INFO: "green",
    Level.WARNING: "yellow",
    Level.ERROR: "red",
}

# accepted spellings beyond the enum names
_ALIASES: Dict[str, Level] = {
    "WARN": Level.WARNING,
    "ERR": Level.ERROR,
    "TRC": Level.TRACE,
    "DBG": Level.DEBUG,
    "NFO": Level.INFO,
    "WRN": Level.WARNING,
}

LevelLike = Union[Level, int, str]


def parse_level(value: LevelLike) -> Level:
    """Coerce ``value`` to a Level, raising ValueError when it names none."""
    if isinstance(value, Level):
        return value
    if isinstance(value, str):
        key = value.strip().upper()
        if key in Level.__members__:
            return Level[key]
        if key in _ALIASES:
            return _ALIASES[key]
        raise ValueError(f"Unknown log level {value!r}")
    if isinstance(value, int) and not isinstance(value, bool):
        try:
            return Level(value)
        except ValueError:
            raise ValueError(f"Unknown log level {value!r}") from None
    raise ValueError(f"Unknown log level {value!r}")


def tag_for(level: Level, style: str = "short") -> str:
    return (LONG_TAGS if style == "long" else SHORT_TAGS)[level]
