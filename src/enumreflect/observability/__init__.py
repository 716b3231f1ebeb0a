"""
Observability — Logging and metrics for enumreflect.

Provides:
- Structured logging tagged with the enum type being built
- Build metrics (counters and a duration histogram)
"""

from enumreflect.observability.logging import (
    set_enum_type,
    get_enum_type,
    configure_logging,
    get_logger,
    LogContext,
    EnumTypeFilter,
    JSONFormatter,
    ReadableFormatter,
)
from enumreflect.observability.metrics import (
    Counter,
    Histogram,
    MetricsRegistry,
    get_metrics,
    reset_metrics,
)

__all__ = [
    # Logging
    "set_enum_type",
    "get_enum_type",
    "configure_logging",
    "get_logger",
    "LogContext",
    "EnumTypeFilter",
    "JSONFormatter",
    "ReadableFormatter",
    # Metrics
    "Counter",
    "Histogram",
    "MetricsRegistry",
    "get_metrics",
    "reset_metrics",
]
