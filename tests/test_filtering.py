import itertools
import threading

import pytest

from slog.core.levels import Level


class CountingLock:
    """Wraps the output lock and counts acquisitions."""

    def __init__(self):
        self._lock = threading.RLock()
        self.acquired = 0

    def __enter__(self):
        self._lock.acquire()
        self.acquired += 1
        return self

    def __exit__(self, *exc):
        self._lock.release()
        return False


@pytest.mark.parametrize("level,threshold", list(itertools.product(Level, Level)))
def test_emitted_iff_level_at_or_above_threshold(make_logger, out, level, threshold):
    log = make_logger(threshold)
    log.log(level, "probe")
    lines = out.getvalue().splitlines()
    if level >= threshold:
        assert len(lines) == 1
        assert "probe" in lines[0]
    else:
        assert lines == []


def test_boundary_inclusive(make_logger, out):
    log = make_logger(Level.WARNING)
    log.warning("at threshold")
    log.info("one below")
    assert out.getvalue().count("\n") == 1
    assert "at threshold" in out.getvalue()
    assert "one below" not in out.getvalue()


def test_default_threshold_is_debug(out):
    from slog.core.logging import Logger
    log = Logger(stream=out, color=False)
    assert log.get_level() is Level.DEBUG
    log.trace("hidden")
    log.debug("shown")
    assert out.getvalue().splitlines()[0].startswith("[DBG] shown")
    assert len(out.getvalue().splitlines()) == 1


def test_filtered_call_writes_nothing_and_skips_lock(make_logger, out):
    log = make_logger(Level.INFO)
    log._lock = CountingLock()
    log.debug("cache miss")
    log.tracef("{} {}", "never", "formatted")
    assert out.getvalue() == ""
    assert log._lock.acquired == 0
    log.info("hit")
    assert log._lock.acquired == 1


def test_filtered_template_is_not_validated(make_logger, out):
    log = make_logger(Level.ERROR)
    # mismatched, but below threshold so never rendered
    log.debugf("{} {}", 1)
    assert out.getvalue() == ""


def test_set_level_is_idempotent(make_logger, out):
    log = make_logger()
    log.set_level(Level.WARNING)
    log.set_level(Level.WARNING)
    assert log.get_level() is Level.WARNING
    log.info("dropped")
    log.error("kept")
    assert out.getvalue().count("\n") == 1


def test_threshold_change_applies_to_later_calls_only(make_logger, out):
    log = make_logger(Level.INFO)
    log.debug("cache miss")
    log.set_level(Level.DEBUG)
    log.debug("cache miss")
    lines = out.getvalue().splitlines()
    assert len(lines) == 1
    assert "cache miss" in lines[0]


def test_raising_threshold_keeps_written_lines(make_logger, out):
    log = make_logger(Level.TRACE)
    log.trace("early")
    log.set_level("error")
    log.trace("late")
    lines = out.getvalue().splitlines()
    assert len(lines) == 1
    assert "early" in lines[0]


def test_set_level_rejects_unknown_names(log):
    with pytest.raises(ValueError):
        log.set_level("LOUD")
    assert log.get_level() is Level.TRACE


def test_is_enabled_for(make_logger):
    log = make_logger("info")
    assert log.is_enabled_for("INFO")
    assert log.is_enabled_for(Level.ERROR)
    assert not log.is_enabled_for(Level.DEBUG)
