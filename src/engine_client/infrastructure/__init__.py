"""Infrastructure layer - cross-cutting concerns."""

from engine_client.infrastructure.config import Config, EngineConfig, ObservabilityConfig, get_config
from engine_client.infrastructure.logging import get_logger, setup_logging
from engine_client.infrastructure.metrics import MetricsRegistry, get_metrics, setup_metrics
from engine_client.infrastructure.observability import Observability, setup_observability
from engine_client.infrastructure.tracing import get_tracer, setup_tracing, trace_span

__all__ = [
    "Config",
    "EngineConfig",
    "ObservabilityConfig",
    "get_config",
    "setup_logging",
    "get_logger",
    "MetricsRegistry",
    "setup_metrics",
    "get_metrics",
    "setup_tracing",
    "get_tracer",
    "trace_span",
    "Observability",
    "setup_observability",
]
