"""Per-process tool call counters (not suitable for multi-process aggregation)."""

from __future__ import annotations

from dataclasses import dataclass
from threading import Lock
from typing import Dict


@dataclass(slots=True)
class _ToolStats:
    calls: int = 0
    errors: int = 0
    total_duration_ms: float = 0.0

    def as_dict(self) -> Dict[str, object]:
        average = self.total_duration_ms / self.calls if self.calls else 0.0
        return {
            "calls": self.calls,
            "errors": self.errors,
            "avgDurationMs": round(average, 2),
        }


class MetricsRecorder:
    def __init__(self) -> None:
        self._lock = Lock()
        self._requests = 0
        self._tools: Dict[str, _ToolStats] = {}

    def incr_request(self) -> None:
        with self._lock:
            self._requests += 1

    def record_tool(self, tool: str, *, success: bool, duration_ms: float = 0.0) -> None:
        with self._lock:
            stats = self._tools.setdefault(tool, _ToolStats())
            stats.calls += 1
            stats.total_duration_ms += duration_ms
            if not success:
                stats.errors += 1

    def snapshot(self) -> Dict[str, object]:
        with self._lock:
            return {
                "requests": self._requests,
                "tools": {name: stats.as_dict() for name, stats in sorted(self._tools.items())},
            }

    def reset(self) -> None:
        with self._lock:
            self._requests = 0
            self._tools.clear()


default_metrics = MetricsRecorder()
