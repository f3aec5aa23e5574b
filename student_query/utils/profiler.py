"""
Profiling utilities for the student query handler.

Provides a context manager that measures a block of work:
- Wall-clock time (perf_counter)
- CPU usage (psutil)
- Resident memory after the block (psutil)

Usage example:
    from student_query.utils.profiler import profile_block

    with profile_block("queries") as stats:
        results = run_queries(envelope)

    print(stats.duration_seconds, stats.rss_bytes)
"""

from __future__ import annotations

import contextlib
import time
from dataclasses import dataclass, field
from typing import Any, Dict, Generator, Optional

import psutil


@dataclass
class ProfileStats:
    """
    Container for profiling measurements.
    """

    label: str
    start_ts: float = field(default=0.0)
    end_ts: float = field(default=0.0)
    duration_seconds: float = field(default=0.0)
    rss_bytes: Optional[int] = field(default=None)
    cpu_percent: Optional[float] = field(default=None)

    def as_log_fields(self) -> Dict[str, Any]:
        """Flatten the measurements into `extra=` fields for a log call."""
        return {
            "profile_label": self.label,
            "duration_ms": round(self.duration_seconds * 1000, 3),
            "rss_bytes": self.rss_bytes,
            "cpu_percent": self.cpu_percent,
        }


@contextlib.contextmanager
def profile_block(label: str) -> Generator[ProfileStats, None, None]:
    """
    Context manager to profile a block of code.

    Parameters
    ----------
    label : str
        Human-friendly label for the profiled block.

    Notes
    -----
    The CPU percent is relative to the previous `cpu_percent` call on the same
    process handle, so a priming call is issued on entry.
    """
    stats = ProfileStats(label=label)
    process = psutil.Process()
    process.cpu_percent(interval=None)

    stats.start_ts = time.perf_counter()
    try:
        yield stats
    finally:
        stats.end_ts = time.perf_counter()
        stats.duration_seconds = stats.end_ts - stats.start_ts
        stats.rss_bytes = process.memory_info().rss
        stats.cpu_percent = process.cpu_percent(interval=None)


__all__ = ["ProfileStats", "profile_block"]
