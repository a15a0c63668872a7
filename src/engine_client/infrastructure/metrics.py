"""Prometheus metrics for the engine client."""

from __future__ import annotations

from prometheus_client import REGISTRY, CollectorRegistry, Counter, Info, start_http_server


class MetricsRegistry:
    """Registry of all engine client metrics."""

    def __init__(self, registry: CollectorRegistry | None = None) -> None:
        self._registry = registry or REGISTRY

        self.endpoint_resolutions_total = Counter(
            "engine_endpoint_resolutions_total",
            "Engine endpoint resolutions by selected transport",
            ["transport"],  # unix_socket, http
            registry=self._registry,
        )

        self.parse_errors_total = Counter(
            "engine_parse_errors_total",
            "Rejected addressing or URI values",
            ["kind"],  # error class name
            registry=self._registry,
        )

        self.info = Info(
            "engine_client",
            "Engine client information",
            registry=self._registry,
        )

    @property
    def registry(self) -> CollectorRegistry:
        return self._registry


_metrics: MetricsRegistry | None = None


def setup_metrics(port: int = 8003, registry: CollectorRegistry | None = None) -> MetricsRegistry:
    """Create the global registry and expose it over HTTP on ``port``."""
    global _metrics
    _metrics = MetricsRegistry(registry)

    from engine_client import __version__
    _metrics.info.info({"version": __version__})

    start_http_server(port, registry=registry or REGISTRY)
    return _metrics


def get_metrics() -> MetricsRegistry:
    """Get the global metrics registry."""
    global _metrics
    if _metrics is None:
        _metrics = MetricsRegistry()
    return _metrics
