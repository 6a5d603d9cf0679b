"""Message body composition and line layout.

Two body forms:
  literal:  message followed by each value, space separated (keywords as key=value)
  template: str.format placeholders filled from the values, every value must be consumed

compose_line() wraps a body into the final console line:
  <color>[<tag>(<timestamp>)] <reset><body> <file>:<line>
"""
from __future__ import annotations
import string
from datetime import datetime
from typing import Any, Mapping, Optional, Sequence

from slog.core.errors import FormatError
from slog.core.levels import LEVEL_COLORS, Level, tag_for
from slog.system.settings import SettingsData
from slog.ui.colors import get_color_code

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


class _UnusedValues(Exception):
    pass


class StrictFormatter(string.Formatter):
    """str.format semantics, but surplus values are an error instead of ignored."""

    def check_unused_args(self, used_args, args, kwargs):
        unused = [f"#{i}" for i in range(len(args)) if i not in used_args]
        unused += [k for k in kwargs if k not in used_args]
        if unused:
            raise _UnusedValues(f"unused value(s) {', '.join(unused)}")


_formatter = StrictFormatter()


def render_literal(message: Any, args: Sequence[Any] = (), kwargs: Optional[Mapping[str, Any]] = None) -> str:
    parts = [str(message)]
    parts.extend(str(a) for a in args)
    if kwargs:
        parts.extend(f"{k}={v}" for k, v in kwargs.items())
    return " ".join(parts)


def render_template(template: str, args: Sequence[Any] = (), kwargs: Optional[Mapping[str, Any]] = None) -> str:
    if not isinstance(template, str):
        raise FormatError(repr(template), f"template must be str, not {type(template).__name__}")
    try:
        return _formatter.vformat(template, tuple(args), dict(kwargs or {}))
    except _UnusedValues as e:
        raise FormatError(template, str(e)) from None
    except IndexError as e:
        raise FormatError(template, f"missing positional value ({e})") from e
    except KeyError as e:
        raise FormatError(template, f"missing keyword value {e}") from e
    except (ValueError, TypeError, AttributeError) as e:
        raise FormatError(template, str(e)) from e


def compose_line(level: Level, body: str, file: str, line: int,
                 settings: SettingsData, now: Optional[datetime] = None) -> str:
    color = get_color_code(LEVEL_COLORS[level], settings.color)
    reset = get_color_code("reset", settings.color)
    tag = tag_for(level, settings.tag_style)
    if settings.timestamps:
        stamp = (now or datetime.now()).strftime(TIMESTAMP_FORMAT)
        tag = f"{tag}({stamp})"
    return f"{color}[{tag}] {reset}{body} {file}:{line}"
