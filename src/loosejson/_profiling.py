"""
Opt-in timing of the parser's primitive routines.

Enabled by setting ``LOOSEJSON_PROFILE`` before import; otherwise every
``ProfileContext`` is a no-op. A context given a cursor charges the characters
the cursor moved over while the block ran.
"""

import os
import time
from dataclasses import dataclass
from typing import Any

PROFILE_HOT_PATHS = __debug__ and "LOOSEJSON_PROFILE" in os.environ


@dataclass
class HotPathStats:
    """Accumulated timings for one parsing routine."""

    function_name: str
    call_count: int = 0
    total_time_ns: int = 0
    chars_processed: int = 0

    def record_call(self, duration_ns: int, chars: int = 0) -> None:
        self.call_count += 1
        self.total_time_ns += duration_ns
        self.chars_processed += chars


_hot_path_stats: dict[str, HotPathStats] = {}


if PROFILE_HOT_PATHS:

    class ProfileContext:
        """Times the enclosed block and charges it to ``func_name``."""

        def __init__(
            self, func_name: str, chars: int = 0, cursor: Any = None
        ) -> None:
            self.func_name = func_name
            self.chars = chars
            self.cursor = cursor
            self.start_pos = 0
            self.start_time = 0

        def __enter__(self) -> "ProfileContext":
            if self.cursor is not None:
                self.start_pos = self.cursor.pos
            self.start_time = time.perf_counter_ns()
            return self

        def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
            duration = time.perf_counter_ns() - self.start_time
            chars = self.chars
            if self.cursor is not None:
                chars += self.cursor.pos - self.start_pos
            stats = _hot_path_stats.get(self.func_name)
            if stats is None:
                stats = _hot_path_stats[self.func_name] = HotPathStats(
                    self.func_name
                )
            stats.record_call(duration, chars)

else:

    class ProfileContext:  # type: ignore[no-redef]
        def __init__(
            self, func_name: str, chars: int = 0, cursor: Any = None
        ) -> None:
            pass

        def __enter__(self) -> "ProfileContext":
            return self

        def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
            pass


def get_hot_path_stats() -> dict[str, HotPathStats]:
    """Returns a snapshot of the collected statistics."""
    return _hot_path_stats.copy()


def clear_hot_path_stats() -> None:
    _hot_path_stats.clear()
