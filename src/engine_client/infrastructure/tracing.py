"""OpenTelemetry tracing configuration."""

from __future__ import annotations

from contextlib import contextmanager
from typing import Any, Generator, Sequence

from opentelemetry import trace
from opentelemetry.exporter.otlp.proto.grpc.trace_exporter import OTLPSpanExporter
from opentelemetry.sdk.resources import Resource
from opentelemetry.sdk.trace import SpanProcessor, TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor, ConsoleSpanExporter

from engine_client import __version__

_tracer: trace.Tracer | None = None


def setup_tracing(
    service_name: str = "engine_client",
    otlp_endpoint: str | None = None,
    console_export: bool = False,
    span_processors: Sequence[SpanProcessor] = (),
) -> trace.Tracer:
    """Install a tracer provider and make its tracer the client tracer.

    Spans go over OTLP when ``otlp_endpoint`` is set, to stdout when
    ``console_export`` is set, and to every extra processor given.

    Returns:
        A tracer bound to the new provider. The process-wide provider can
        only be installed once; later calls still return their own tracer.
    """
    global _tracer

    resource = Resource.create({"service.name": service_name, "service.version": __version__})
    provider = TracerProvider(resource=resource)

    if otlp_endpoint:
        provider.add_span_processor(BatchSpanProcessor(OTLPSpanExporter(endpoint=otlp_endpoint, insecure=True)))
    if console_export:
        provider.add_span_processor(BatchSpanProcessor(ConsoleSpanExporter()))
    for processor in span_processors:
        provider.add_span_processor(processor)

    trace.set_tracer_provider(provider)
    _tracer = provider.get_tracer(service_name, __version__)
    return _tracer


def get_tracer() -> trace.Tracer:
    """Get the client tracer, falling back to the global provider's."""
    global _tracer
    if _tracer is None:
        _tracer = trace.get_tracer("engine_client")
    return _tracer


@contextmanager
def trace_span(name: str, attributes: dict[str, Any] | None = None) -> Generator[trace.Span, None, None]:
    """Run the enclosed block inside a span carrying ``attributes``."""
    with get_tracer().start_as_current_span(name) as span:
        for key, value in (attributes or {}).items():
            span.set_attribute(key, value)
        yield span
