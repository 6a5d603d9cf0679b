from __future__ import annotations
import sys
import threading
from dataclasses import replace
from typing import Any, Optional, TextIO

from slog.core.callsite import caller_location
from slog.core.errors import StreamError
from slog.core.levels import Level, LevelLike, parse_level
from slog.core.render import compose_line, render_literal, render_template
from slog.system.settings import SettingsData

_UNSET: Any = object()


class _LevelCell:
    """Threshold shared by every emitting thread."""

    def __init__(self, level: Level):
        self._lock = threading.Lock()
        self._level = level

    def get(self) -> Level:
        with self._lock:
            return self._level

    def set(self, level: Level):
        with self._lock:
            self._level = level


class Logger:
    def __init__(self, level: LevelLike = Level.DEBUG, stream: Optional[TextIO] = None, **settings: Any):
        self._settings = SettingsData(level=parse_level(level).name).updated(**settings)
        self._threshold = _LevelCell(self._settings.threshold())
        self._stream = stream
        # re-entrant so a value whose __str__ logs cannot deadlock the writer
        self._lock = threading.RLock()
        self._stream_failed = False

    # --- threshold -----------------------------------------------------------
    def set_level(self, level: LevelLike):
        self._threshold.set(parse_level(level))

    def get_level(self) -> Level:
        return self._threshold.get()

    def is_enabled_for(self, level: LevelLike) -> bool:
        return parse_level(level) >= self._threshold.get()

    # --- configuration -------------------------------------------------------
    @property
    def settings(self) -> SettingsData:
        return replace(self._settings, level=self.get_level().name)

    def configure(self, stream: Optional[TextIO] = _UNSET, **changes: Any):
        """Update settings (and optionally the stream) between emissions."""
        with self._lock:
            self._settings = self._settings.updated(**changes)
            if "level" in changes:
                self._threshold.set(self._settings.threshold())
            if stream is not _UNSET:
                self._stream = stream
                self._stream_failed = False

    # --- emission ------------------------------------------------------------
    def _log(self, level: Level, message: Any, args: tuple, kwargs: dict,
             template: bool, stacklevel: int = 2):
        if level < self._threshold.get():
            return
        file, line = caller_location(stacklevel)
        with self._lock:
            settings = self._settings
            if template:
                body = render_template(message, args, kwargs)
            else:
                body = render_literal(message, args, kwargs)
            self._write(compose_line(level, body, file, line, settings) + "\n", settings)

    def _write(self, text: str, settings: SettingsData):
        stream = self._stream if self._stream is not None else sys.stdout
        if stream is None:  # no console attached (pythonw)
            return
        try:
            try:
                stream.write(text)
            except UnicodeEncodeError:
                stream.write(_encodable(text, stream))
            stream.flush()
        except (OSError, ValueError) as e:
            if settings.raise_on_stream_error:
                raise StreamError(_stream_name(stream), str(e)) from e
            self._report_stream_failure(stream, e)

    def _report_stream_failure(self, stream: TextIO, error: Exception):
        if self._stream_failed:
            return
        self._stream_failed = True
        fallback = sys.__stderr__
        if fallback is None or fallback is stream:
            return
        try:
            fallback.write(f"slog: dropping output, writing to {_stream_name(stream)} failed: {error}\n")
            fallback.flush()
        except (OSError, ValueError):
            pass

    def log(self, level: LevelLike, message: Any, /, *args: Any, stacklevel: int = 1, **kwargs: Any):
        """Literal form at ``level``.

        ``stacklevel`` picks the reported frame as in the standard library:
        1 is the direct caller, 2 the caller of a helper that wraps this call.
        """
        self._log(parse_level(level), message, args, kwargs, False, stacklevel + 1)

    def logf(self, level: LevelLike, template: str, /, *args: Any, stacklevel: int = 1, **kwargs: Any):
        self._log(parse_level(level), template, args, kwargs, True, stacklevel + 1)

    def trace(self, message: Any, /, *args: Any, **kwargs: Any): self._log(Level.TRACE, message, args, kwargs, False)
    def debug(self, message: Any, /, *args: Any, **kwargs: Any): self._log(Level.DEBUG, message, args, kwargs, False)
    def info(self, message: Any, /, *args: Any, **kwargs: Any): self._log(Level.INFO, message, args, kwargs, False)
    def warning(self, message: Any, /, *args: Any, **kwargs: Any): self._log(Level.WARNING, message, args, kwargs, False)
    def error(self, message: Any, /, *args: Any, **kwargs: Any): self._log(Level.ERROR, message, args, kwargs, False)

    def tracef(self, template: str, /, *args: Any, **kwargs: Any): self._log(Level.TRACE, template, args, kwargs, True)
    def debugf(self, template: str, /, *args: Any, **kwargs: Any): self._log(Level.DEBUG, template, args, kwargs, True)
    def infof(self, template: str, /, *args: Any, **kwargs: Any): self._log(Level.INFO, template, args, kwargs, True)
    def warningf(self, template: str, /, *args: Any, **kwargs: Any): self._log(Level.WARNING, template, args, kwargs, True)
    def errorf(self, template: str, /, *args: Any, **kwargs: Any): self._log(Level.ERROR, template, args, kwargs, True)


def _stream_name(stream: TextIO) -> str:
    return str(getattr(stream, "name", type(stream).__name__))


def _encodable(text: str, stream: TextIO) -> str:
    """Escape characters the stream's encoding cannot represent."""
    encoding = getattr(stream, "encoding", None) or "utf-8"
    return text.encode(encoding, "backslashreplace").decode(encoding)


logger = Logger()

# Module-level shortcuts bound to the process-wide logger.

def set_level(level: LevelLike): logger.set_level(level)
def get_level() -> Level: return logger.get_level()
def configure(**changes: Any): logger.configure(**changes)

def trc(message: Any, /, *args: Any, **kwargs: Any): logger._log(Level.TRACE, message, args, kwargs, False)
def dbg(message: Any, /, *args: Any, **kwargs: Any): logger._log(Level.DEBUG, message, args, kwargs, False)
def nfo(message: Any, /, *args: Any, **kwargs: Any): logger._log(Level.INFO, message, args, kwargs, False)
def wrn(message: Any, /, *args: Any, **kwargs: Any): logger._log(Level.WARNING, message, args, kwargs, False)
def err(message: Any, /, *args: Any, **kwargs: Any): logger._log(Level.ERROR, message, args, kwargs, False)

def trcf(template: str, /, *args: Any, **kwargs: Any): logger._log(Level.TRACE, template, args, kwargs, True)
def dbgf(template: str, /, *args: Any, **kwargs: Any): logger._log(Level.DEBUG, template, args, kwargs, True)
def nfof(template: str, /, *args: Any, **kwargs: Any): logger._log(Level.INFO, template, args, kwargs, True)
def wrnf(template: str, /, *args: Any, **kwargs: Any): logger._log(Level.WARNING, template, args, kwargs, True)
def errf(template: str, /, *args: Any, **kwargs: Any): logger._log(Level.ERROR, template, args, kwargs, True)
