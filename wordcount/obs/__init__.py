"""
Observability module - Tracing, metrics, and logging.

Provides:
- OpenTelemetry spans around counting calls
- In-process metrics collection
- Structured logging with trace correlation
"""

from .metrics import metrics_registry, inc_counter, record_duration, set_gauge
from .logging_setup import setup_logging, get_logger
from .decorators import traced, timed

__all__ = [
    "metrics_registry", 
    "inc_counter",
    "record_duration",
    "set_gauge",
    "setup_logging",
    "get_logger", 
    "traced", 
    "timed",
]
