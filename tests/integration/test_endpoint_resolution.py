"""Integration tests for engine endpoint resolution.

Covers the path from configuration through URI parsing to the transport
decision, including logging, tracing and metrics side effects.
"""

from __future__ import annotations

import pytest
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import SimpleSpanProcessor
from opentelemetry.sdk.trace.export.in_memory_span_exporter import InMemorySpanExporter
from opentelemetry.trace import StatusCode
from structlog.testing import capture_logs

from engine_client.application.endpoint_resolver import (
    EndpointResolver,
    EngineEndpoint,
    TransportKind,
)
from engine_client.domain.errors import InvalidFormatError, UriSchemeMissingError
from engine_client.domain.value_objects import Uri
from engine_client.infrastructure import tracing
from engine_client.infrastructure.config import Config, EngineConfig
from engine_client.infrastructure.metrics import MetricsRegistry


def _sample(metrics: MetricsRegistry, name: str, labels: dict[str, str]) -> float | None:
    return metrics.registry.get_sample_value(name, labels)


@pytest.fixture
def resolver(test_config: Config, metrics_registry: MetricsRegistry) -> EndpointResolver:
    """Provide a resolver wired to the test config and a private registry."""
    return EndpointResolver(config=test_config, metrics=metrics_registry)


@pytest.fixture
def span_exporter(monkeypatch: pytest.MonkeyPatch) -> InMemorySpanExporter:
    """Record client spans in memory for the duration of a test."""
    exporter = InMemorySpanExporter()
    provider = TracerProvider()
    provider.add_span_processor(SimpleSpanProcessor(exporter))
    monkeypatch.setattr(tracing, "_tracer", provider.get_tracer("engine_client.tests"))
    return exporter


@pytest.mark.integration
class TestUnixSocketResolution:
    """Tests for unix:// endpoints."""

    def test_default_socket(self, resolver: EndpointResolver) -> None:
        endpoint = resolver.resolve()
        assert endpoint.transport is TransportKind.UNIX_SOCKET
        assert endpoint.is_unix_socket
        assert endpoint.socket_path == "/var/run/docker.sock"
        assert endpoint.base_url == "http://localhost"
        assert endpoint.headers == {"Host": "docker"}
        assert endpoint.uri == Uri.parse("unix:///var/run/docker.sock")

    def test_explicit_socket(self, resolver: EndpointResolver) -> None:
        endpoint = resolver.resolve("unix:///run/user/1000/podman/podman.sock")
        assert endpoint.socket_path == "/run/user/1000/podman/podman.sock"

    def test_custom_host_header(self, metrics_registry: MetricsRegistry) -> None:
        config = Config(engine=EngineConfig(host_header="podman", unix_base_url="http://d"))
        endpoint = EndpointResolver(config=config, metrics=metrics_registry).resolve()
        assert endpoint.headers == {"Host": "podman"}
        assert endpoint.base_url == "http://d"

    def test_socket_uri_without_path_is_rejected(self, resolver: EndpointResolver) -> None:
        with pytest.raises(InvalidFormatError, match="names no socket path"):
            resolver.resolve("unix://")

    def test_carries_api_settings(self, metrics_registry: MetricsRegistry) -> None:
        """Pinned API version and timeout travel with the endpoint."""
        config = Config(engine=EngineConfig(api_version="v1.47", timeout_seconds=5))
        endpoint = EndpointResolver(config=config, metrics=metrics_registry).resolve()
        assert endpoint.api_version == "v1.47"
        assert endpoint.timeout_seconds == 5.0
        assert endpoint.api_path("/containers/json") == "/v1.47/containers/json"
        assert endpoint.api_path("info") == "/v1.47/info"


@pytest.mark.integration
class TestHttpResolution:
    """Tests for network endpoints."""

    def test_https_endpoint(self, resolver: EndpointResolver) -> None:
        endpoint = resolver.resolve("https://engine.example.com:2376/v1.47?x=1#f")
        assert endpoint.transport is TransportKind.HTTP
        assert endpoint.base_url == "https://engine.example.com:2376"
        assert endpoint.socket_path is None
        assert endpoint.headers == {}
        assert endpoint.uri.path == "/v1.47"

    def test_tcp_maps_to_http(self, resolver: EndpointResolver) -> None:
        endpoint = resolver.resolve("tcp://127.0.0.1:2375")
        assert endpoint.base_url == "http://127.0.0.1:2375"
        assert endpoint.uri.scheme == "tcp"

    def test_endpoint_is_immutable(self, resolver: EndpointResolver) -> None:
        endpoint = resolver.resolve("http://localhost:2375")
        assert isinstance(endpoint, EngineEndpoint)
        with pytest.raises(AttributeError):
            endpoint.base_url = "http://elsewhere"  # type: ignore[misc]

    def test_unpinned_api_path(self, resolver: EndpointResolver) -> None:
        endpoint = resolver.resolve("tcp://127.0.0.1:2375")
        assert endpoint.api_version is None
        assert endpoint.timeout_seconds == 30.0
        assert endpoint.api_path("info") == "/info"

    @pytest.mark.parametrize("text", ["tcp:localhost", "http:///x", "https://:2376"])
    def test_uri_without_host_is_rejected(
        self, resolver: EndpointResolver, metrics_registry: MetricsRegistry, text: str
    ) -> None:
        """A network endpoint must name a host."""
        with capture_logs() as logs:
            with pytest.raises(InvalidFormatError, match="names no host"):
                resolver.resolve(text)

        assert _sample(metrics_registry, "engine_parse_errors_total", {"kind": "InvalidFormatError"}) == 1.0
        events = [entry["event"] for entry in logs]
        assert "engine_uri_rejected" in events
        assert "engine_endpoint_resolved" not in events


@pytest.mark.integration
class TestResolutionObservability:
    """Tests for metrics and logs emitted during resolution."""

    def test_counts_resolutions(self, resolver: EndpointResolver, metrics_registry: MetricsRegistry) -> None:
        resolver.resolve()
        resolver.resolve("http://localhost:2375")
        resolver.resolve("http://localhost:2376")
        name = "engine_endpoint_resolutions_total"
        assert _sample(metrics_registry, name, {"transport": "unix_socket"}) == 1.0
        assert _sample(metrics_registry, name, {"transport": "http"}) == 2.0

    def test_rejected_uri_is_counted_and_reraised(
        self, resolver: EndpointResolver, metrics_registry: MetricsRegistry
    ) -> None:
        with capture_logs() as logs:
            with pytest.raises(UriSchemeMissingError, match="URI scheme missing: //example.com"):
                resolver.resolve("//example.com")

        assert _sample(metrics_registry, "engine_parse_errors_total", {"kind": "UriSchemeMissingError"}) == 1.0
        assert any(entry["event"] == "engine_uri_rejected" for entry in logs)

    def test_logs_resolved_endpoint(self, resolver: EndpointResolver) -> None:
        with capture_logs() as logs:
            resolver.resolve()

        resolved = [entry for entry in logs if entry["event"] == "engine_endpoint_resolved"]
        assert len(resolved) == 1
        assert resolved[0]["transport"] == "unix_socket"
        assert resolved[0]["socket_path"] == "/var/run/docker.sock"

    def test_records_resolve_span(self, resolver: EndpointResolver, span_exporter: InMemorySpanExporter) -> None:
        resolver.resolve()
        resolver.resolve("tcp://127.0.0.1:2375")

        spans = span_exporter.get_finished_spans()
        assert [span.name for span in spans] == ["engine_endpoint.resolve"] * 2
        assert spans[0].attributes["engine.uri"] == "unix:///var/run/docker.sock"
        assert spans[0].attributes["engine.transport"] == "unix_socket"
        assert spans[1].attributes["engine.transport"] == "http"

    def test_rejected_uri_marks_span_failed(
        self, resolver: EndpointResolver, span_exporter: InMemorySpanExporter
    ) -> None:
        with pytest.raises(InvalidFormatError):
            resolver.resolve("tcp:localhost")

        (span,) = span_exporter.get_finished_spans()
        assert span.name == "engine_endpoint.resolve"
        assert "engine.transport" not in span.attributes
        assert span.status.status_code is StatusCode.ERROR
