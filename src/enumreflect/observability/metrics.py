"""
Metrics — Build counters and timings for reflection tables.

Only the build path records metrics; table reads stay lock-free.
"""

from dataclasses import dataclass, field, fields
from threading import Lock
from typing import Any


class _Metric:
    """Named metric guarded by its own lock."""

    def __init__(self, name: str, description: str = ""):
        self.name = name
        self.description = description
        self._lock = Lock()

    def reset(self) -> None:
        raise NotImplementedError


class Counter(_Metric):
    """Count of build-path events; only ever grows between resets."""

    def __init__(self, name: str, description: str = ""):
        super().__init__(name, description)
        self._value = 0

    def inc(self, amount: int = 1) -> None:
        with self._lock:
            self._value += amount

    @property
    def value(self) -> int:
        return self._value

    def reset(self) -> None:
        with self._lock:
            self._value = 0


class Histogram(_Metric):
    """Running count, total and slowest of observed build durations."""

    def __init__(self, name: str, description: str = ""):
        super().__init__(name, description)
        self._count = 0
        self._total = 0.0
        self._slowest = 0.0

    def observe(self, seconds: float) -> None:
        with self._lock:
            self._count += 1
            self._total += seconds
            self._slowest = max(self._slowest, seconds)

    @property
    def count(self) -> int:
        return self._count

    @property
    def total(self) -> float:
        return self._total

    @property
    def mean(self) -> float:
        return self._total / self._count if self._count else 0.0

    @property
    def slowest(self) -> float:
        return self._slowest

    def to_dict(self) -> dict[str, Any]:
        with self._lock:
            count, total, slowest = self._count, self._total, self._slowest
        return {
            "count": count,
            "total": total,
            "mean": total / count if count else 0.0,
            "slowest": slowest,
        }

    def reset(self) -> None:
        with self._lock:
            self._count = 0
            self._total = 0.0
            self._slowest = 0.0


@dataclass
class MetricsRegistry:
    """
    All enumreflect metrics, shared by builders and registries.
    """
    tables_built: Counter = field(
        default_factory=lambda: Counter("tables_built", "Reflection tables built")
    )
    build_failures: Counter = field(
        default_factory=lambda: Counter("build_failures", "Rejected declarations")
    )
    registered_types: Counter = field(
        default_factory=lambda: Counter("registered_types", "Enum types registered")
    )
    build_duration_seconds: Histogram = field(
        default_factory=lambda: Histogram("build_duration_seconds", "Table build duration")
    )

    def to_dict(self) -> dict[str, Any]:
        """Export all metrics as dict."""
        return {
            "builds": {
                "total": self.tables_built.value,
                "failed": self.build_failures.value,
                "duration": self.build_duration_seconds.to_dict(),
            },
            "registry": {
                "registered_types": self.registered_types.value,
            },
        }

    def reset(self) -> None:
        """Reset all metrics (for testing)."""
        for f in fields(self):
            getattr(self, f.name).reset()


_metrics = MetricsRegistry()


def get_metrics() -> MetricsRegistry:
    """Get the process-wide metrics registry."""
    return _metrics


def reset_metrics() -> None:
    """Reset all metrics (for testing)."""
    _metrics.reset()
