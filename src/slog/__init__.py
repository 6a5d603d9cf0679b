"""slog: a super lightweight console logger.

Colored, leveled, thread-safe output with variable log arguments::

    from slog import nfo, errf, set_level, Level

    set_level(Level.INFO)
    nfo("user logged in", user_id=42)
    errf("failed after {} retries", 3)
"""
from slog.core.errors import FormatError, SlogError, StreamError
from slog.core.levels import Level
from slog.core.logging import (
    Logger, logger, set_level, get_level, configure,
    trc, dbg, nfo, wrn, err,
    trcf, dbgf, nfof, wrnf, errf,
)

__version__ = "1.0.0"
