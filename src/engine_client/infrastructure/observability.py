"""One-call observability bootstrap driven by ``ObservabilityConfig``."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from opentelemetry import trace
from opentelemetry.sdk.trace import SpanProcessor
from prometheus_client import CollectorRegistry

from engine_client.infrastructure.config import Config, get_config
from engine_client.infrastructure.logging import get_logger, setup_logging
from engine_client.infrastructure.metrics import MetricsRegistry, setup_metrics
from engine_client.infrastructure.tracing import setup_tracing


@dataclass(frozen=True)
class Observability:
    """Handles created by ``setup_observability``."""

    tracer: trace.Tracer
    metrics: MetricsRegistry


def setup_observability(
    config: Config | None = None,
    registry: CollectorRegistry | None = None,
    span_processors: Sequence[SpanProcessor] = (),
) -> Observability:
    """Configure logging, tracing and the metrics endpoint.

    Args:
        config: Configuration; defaults to ``get_config()``.
        registry: Collector registry for metrics; defaults to the global one.
        span_processors: Extra span processors added to the tracer provider.
    """
    settings = (config or get_config()).observability

    setup_logging(level=settings.log_level, log_format=settings.log_format)
    tracer = setup_tracing(
        service_name=settings.otel_service_name,
        otlp_endpoint=settings.otel_endpoint,
        span_processors=span_processors,
    )
    metrics = setup_metrics(port=settings.metrics_port, registry=registry)

    get_logger(__name__).info(
        "engine_client_observability_initialized",
        service_name=settings.otel_service_name,
        otel_endpoint=settings.otel_endpoint,
        metrics_port=settings.metrics_port,
    )
    return Observability(tracer=tracer, metrics=metrics)
