import io
from dataclasses import asdict

import pytest

from slog.core.levels import Level
from slog.core.logging import Logger, logger as global_logger


@pytest.fixture
def out():
    return io.StringIO()


@pytest.fixture
def make_logger(out):
    def _make(level=Level.TRACE, **settings):
        settings.setdefault("color", False)
        return Logger(level, stream=out, **settings)
    return _make


@pytest.fixture
def log(make_logger):
    return make_logger()


@pytest.fixture
def global_out():
    """Point the process-wide logger at a buffer and restore it afterwards."""
    saved = global_logger.settings
    buf = io.StringIO()
    global_logger.configure(stream=buf, color=False)
    yield buf
    global_logger.configure(stream=None, **asdict(saved))
