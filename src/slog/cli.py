from __future__ import annotations
import argparse
import threading
import time
from typing import List, Optional, TextIO

from rich.console import Console
from rich.table import Table

from slog.core.levels import Level, parse_level
from slog.core.logging import logger

def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="slog-demo", description="Show slog output and hammer it from several threads")
    parser.add_argument("--level", default="DEBUG", help="Minimum level to show (TRACE/DEBUG/INFO/WARNING/ERROR)")
    parser.add_argument("--threads", type=int, default=0, help="Worker threads for the concurrency smoke run")
    parser.add_argument("--count", type=int, default=10, help="Lines each worker emits")
    parser.add_argument("--timestamps", action="store_true", help="Add a timestamp to every tag")
    parser.add_argument("--long-tags", action="store_true", help="Use INFO/WARNING/... instead of NFO/WRN/...")
    parser.add_argument("--no-color", action="store_true", help="Disable ANSI colors")
    return parser

def _samples():
    """One line per level in each call form."""
    logger.trace("entering demo", "depth", 1)
    logger.debug("cache miss", key="user:42")
    logger.info("user logged in", 42)
    logger.warning("disk almost full", "93%")
    logger.error("request failed", 503)
    logger.tracef("{} frames captured", 3)
    logger.debugf("cache ratio {:.2f}", 0.875)
    logger.infof("served {count} requests", count=128)
    logger.warningf("retrying in {}s", 5)
    logger.errorf("failed after {} retries", 3)

def _worker(worker_id: int, count: int):
    for n in range(count):
        logger.infof("worker {} line {}", worker_id, n)

def _smoke(threads: int, count: int):
    workers = [threading.Thread(target=_worker, args=(i, count), name=f"slog-worker-{i}") for i in range(threads)]
    for t in workers:
        t.start()
    for t in workers:
        t.join()

def run(argv: Optional[List[str]] = None, stream: Optional[TextIO] = None, summary: Optional[TextIO] = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    try:
        level = parse_level(args.level)
    except ValueError as e:
        parser.error(str(e))
    if args.threads < 0 or args.count < 0:
        parser.error("--threads and --count must not be negative")

    logger.configure(
        stream=stream,
        level=level,
        color=not args.no_color,
        timestamps=args.timestamps,
        tag_style="long" if args.long_tags else "short",
    )

    start = time.perf_counter()
    _samples()
    if args.threads:
        _smoke(args.threads, args.count)
    elapsed = time.perf_counter() - start

    shown = [lvl for lvl in Level if logger.is_enabled_for(lvl)]
    emitted = 2 * len(shown)
    if logger.is_enabled_for(Level.INFO):
        emitted += args.threads * args.count

    table = Table(title="slog demo")
    table.add_column("Threshold")
    table.add_column("Levels shown")
    table.add_column("Lines emitted", justify="right")
    table.add_column("Elapsed (s)", justify="right")
    table.add_row(level.name, ", ".join(lvl.name for lvl in shown) or "(none)", str(emitted), f"{elapsed:.3f}")
    console = Console(file=summary, stderr=summary is None)
    console.print(table)
    return 0

def main():
    raise SystemExit(run())
