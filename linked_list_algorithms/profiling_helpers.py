import csv
import inspect
import logging
import os
import statistics as stats
import time
from collections import defaultdict

from .config import VISUALIZER_CONFIG

log = logging.getLogger(__name__)


def _csv_path(path):
    return path or VISUALIZER_CONFIG["timing_csv"]


def _callsite(depth=2):
    f = inspect.currentframe()
    for _ in range(depth):  # skip _callsite itself + the wrapper
        f = f.f_back
    info = inspect.getframeinfo(f)
    return info.filename, info.lineno, (info.code_context[0].strip() if info.code_context else "")


def _write_row(path, fn, ln, dt, extra, ctx):
    newfile = not os.path.exists(path)
    with open(path, "a", newline="", encoding="utf-8") as f:
        w = csv.writer(f)
        if newfile:
            w.writerow(["file", "line", "seconds", "kwargs", "context"])
        w.writerow([fn, ln, f"{dt:.6f}", extra, ctx])
    log.debug("%s:%s %.3fs", os.path.basename(fn), ln, dt)


def timed_csv(func, *args, csv_path=None, **kwargs):
    """Call func(*args, **kwargs), log its duration to CSV, return its result."""
    fn, ln, ctx = _callsite()
    t0 = time.perf_counter()
    result = func(*args, **kwargs)
    dt = time.perf_counter() - t0
    _write_row(_csv_path(csv_path), fn, ln, dt, getattr(func, "__name__", repr(func)), ctx)
    return result


def tplay_csv(scene, *anims, **kw):
    """Scene.play wrapper that logs timing to CSV with file/line callsite."""
    fn, ln, ctx = _callsite()
    t0 = time.perf_counter()
    scene.play(*anims, **kw)
    dt = time.perf_counter() - t0
    # keep kwargs short-ish in the file
    _write_row(_csv_path(None), fn, ln, dt, repr(kw) if kw else "", ctx)
    return dt


def summarize_csv(path=None, by=("file", "line")):
    """Rows of (site, n, avg, p50, p90, max) grouped by callsite, slowest first."""
    path = _csv_path(path)
    if not os.path.exists(path):
        log.info("no timing CSV at %s", path)
        return []

    grp = defaultdict(list)
    with open(path, newline="", encoding="utf-8") as f:
        for row in csv.DictReader(f):
            grp[tuple(row[k] for k in by)].append(float(row["seconds"]))

    summary = []
    for key, vals in sorted(grp.items(), key=lambda kv: -sum(kv[1])):
        n = len(vals)
        p50 = stats.median(vals)
        p90 = stats.quantiles(vals, n=10)[8] if n >= 10 else max(vals)
        site = f"{os.path.basename(key[0])}:{key[1]}" if len(key) > 1 else os.path.basename(key[0])
        summary.append((site, n, sum(vals) / n, p50, p90, max(vals)))
    return summary


def print_summary(path=None, by=("file", "line")):
    rows = summarize_csv(path, by)
    if not rows:
        print("No rows.")
        return
    print(f"\nSummary by {by}:")
    print(f"{'site':50}  {'n':>4}  {'avg':>7}  {'p50':>7}  {'p90':>7}  {'max':>7}")
    for site, n, avg, p50, p90, mx in rows:
        print(f"{site:50}  {n:4d}  {avg:7.3f}  {p50:7.3f}  {p90:7.3f}  {mx:7.3f}")
