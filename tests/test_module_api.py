import sys

import pytest

import slog
from slog import Level


def test_shortcuts_write_through_global_logger(global_out):
    slog.set_level(Level.TRACE)
    slog.trc("t"); slog.dbg("d"); slog.nfo("n"); slog.wrn("w"); slog.err("e")
    tags = [line[:5] for line in global_out.getvalue().splitlines()]
    assert tags == ["[TRC]", "[DBG]", "[NFO]", "[WRN]", "[ERR]"]


def test_template_shortcuts(global_out):
    slog.set_level("trace")
    slog.trcf("{}", 1); slog.dbgf("{}", 2); slog.nfof("{}", 3); slog.wrnf("{}", 4); slog.errf("{}", 5)
    bodies = [line.split(" ")[1] for line in global_out.getvalue().splitlines()]
    assert bodies == ["1", "2", "3", "4", "5"]


def test_shortcut_reports_caller_location(global_out):
    slog.nfo("here"); line = sys._getframe().f_lineno
    assert global_out.getvalue().endswith(f"test_module_api.py:{line}\n")


def test_global_threshold(global_out):
    slog.set_level(Level.INFO)
    assert slog.get_level() is Level.INFO
    slog.dbg("cache miss")
    slog.set_level(Level.DEBUG)
    slog.dbg("cache miss")
    assert global_out.getvalue().count("cache miss") == 1


def test_shortcut_format_error_propagates(global_out):
    with pytest.raises(slog.FormatError):
        slog.errf("failed after {} retries")
    assert global_out.getvalue() == ""


def test_configure_shortcut(global_out):
    slog.configure(tag_style="long", level="info")
    slog.nfo("long")
    assert global_out.getvalue().startswith("[INFO] long")
