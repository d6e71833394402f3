"""
Hot path profiling for value rendering.

Enabled by setting JSONVALUE_PROFILE in the environment before import;
otherwise every hook below is a no-op.
"""

import logging
import time
from dataclasses import dataclass
from typing import Any

from ._config import PROFILE_HOT_PATHS

log = logging.getLogger(__name__)


@dataclass
class HotPathStats:
    """Statistics for profiling hot paths during rendering."""

    function_name: str
    call_count: int = 0
    total_time_ns: int = 0
    chars_produced: int = 0

    def record_call(self, duration_ns: int, chars: int = 0) -> None:
        """Records a function call with timing and output size info."""
        self.call_count += 1
        self.total_time_ns += duration_ns
        self.chars_produced += chars


if PROFILE_HOT_PATHS:
    _hot_path_stats: dict[str, HotPathStats] = {}

    class ProfileContext:
        """Context manager for profiling hot paths."""

        def __init__(self, func_name: str, chars: int = 0):
            self.func_name = func_name
            self.chars = chars
            self.start_time = 0

        def __enter__(self) -> "ProfileContext":
            self.start_time = time.perf_counter_ns()
            return self

        def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
            duration = time.perf_counter_ns() - self.start_time
            if self.func_name not in _hot_path_stats:
                _hot_path_stats[self.func_name] = HotPathStats(self.func_name)
            _hot_path_stats[self.func_name].record_call(duration, self.chars)

    def get_hot_path_stats() -> dict[str, HotPathStats]:
        """Returns current profiling statistics."""
        return _hot_path_stats.copy()

    def clear_hot_path_stats() -> None:
        """Clears profiling statistics."""
        _hot_path_stats.clear()

else:
    # Zero-cost in production
    class ProfileContext:  # type: ignore[no-redef]
        def __init__(self, func_name: str, chars: int = 0) -> None:
            pass

        def __enter__(self) -> "ProfileContext":
            return self

        def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
            pass

    def get_hot_path_stats() -> dict[str, HotPathStats]:
        return {}

    def clear_hot_path_stats() -> None:
        pass


def log_hot_path_stats(level: int = logging.DEBUG) -> None:
    """Writes one log record per profiled function, slowest first."""
    stats = sorted(
        get_hot_path_stats().values(),
        key=lambda s: s.total_time_ns,
        reverse=True,
    )
    for entry in stats:
        log.log(
            level,
            "%s: %d calls, %d ns total, %d chars",
            entry.function_name,
            entry.call_count,
            entry.total_time_ns,
            entry.chars_produced,
        )
