"""Engine endpoint resolution.

Turns the configured engine URI into the connection parameters a transport
gateway needs: a unix socket path plus a placeholder HTTP base URL for
"unix://" endpoints, or a plain HTTP base URL for everything else.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from engine_client.domain.errors import AddressingError, InvalidFormatError
from engine_client.domain.value_objects.uri import Uri
from engine_client.infrastructure.config import Config, EngineConfig, get_config
from engine_client.infrastructure.logging import get_logger
from engine_client.infrastructure.metrics import MetricsRegistry, get_metrics
from engine_client.infrastructure.tracing import trace_span

logger = get_logger(__name__)

UNIX_SCHEME = "unix"

# Plain TCP endpoints speak unencrypted HTTP.
_SCHEME_ALIASES = {"tcp": "http"}


class TransportKind(Enum):
    """How requests reach the engine."""

    UNIX_SOCKET = "unix_socket"
    HTTP = "http"


@dataclass(frozen=True, slots=True)
class EngineEndpoint:
    """Connection parameters for the engine API.

    Attributes:
        uri: The parsed endpoint URI.
        transport: Selected transport.
        base_url: URL requests are issued against.
        socket_path: Unix socket path, None for HTTP transport.
        headers: Headers every request must carry.
        api_version: Pinned API version prefixed to request paths, if any.
        timeout_seconds: Request timeout.
    """

    uri: Uri
    transport: TransportKind
    base_url: str
    socket_path: str | None = None
    headers: dict[str, str] = field(default_factory=dict, hash=False)
    api_version: str | None = None
    timeout_seconds: float = 30.0

    @property
    def is_unix_socket(self) -> bool:
        return self.transport is TransportKind.UNIX_SOCKET

    def api_path(self, path: str) -> str:
        """Prefix a request path with the pinned API version.

        With api_version "v1.47", "/containers/json" becomes
        "/v1.47/containers/json".
        """
        path = path if path.startswith("/") else f"/{path}"
        if not self.api_version:
            return path
        return f"/{self.api_version.strip('/')}{path}"


class EndpointResolver:
    """Selects the transport for an engine endpoint URI."""

    def __init__(self, config: Config | None = None, metrics: MetricsRegistry | None = None) -> None:
        self._config = config or get_config()
        self._metrics = metrics or get_metrics()

    def resolve(self, uri_text: str | None = None) -> EngineEndpoint:
        """Resolve an endpoint URI into connection parameters.

        Args:
            uri_text: Endpoint URI; defaults to the configured ``engine.uri``.

        Returns:
            The resolved endpoint.

        Raises:
            UriSchemeMissingError: If the URI has no scheme.
            InvalidFormatError: If the URI names no socket path (unix) or no
                host (HTTP), or its port is out of range.
        """
        engine = self._config.engine
        text = uri_text if uri_text is not None else engine.uri

        with trace_span("engine_endpoint.resolve", {"engine.uri": text}) as span:
            try:
                endpoint = self._build(Uri.parse(text), engine)
            except AddressingError as exc:
                self._metrics.parse_errors_total.labels(kind=type(exc).__name__).inc()
                logger.warning("engine_uri_rejected", uri=text, error=str(exc))
                raise

            span.set_attribute("engine.transport", endpoint.transport.value)

        self._metrics.endpoint_resolutions_total.labels(transport=endpoint.transport.value).inc()
        logger.info(
            "engine_endpoint_resolved",
            transport=endpoint.transport.value,
            base_url=endpoint.base_url,
            socket_path=endpoint.socket_path,
        )
        return endpoint

    @staticmethod
    def _build(uri: Uri, engine: EngineConfig) -> EngineEndpoint:
        if uri.scheme == UNIX_SCHEME:
            if not uri.path:
                raise InvalidFormatError(f"Engine URI names no socket path: {uri}", str(uri))
            return EngineEndpoint(
                uri=uri,
                transport=TransportKind.UNIX_SOCKET,
                base_url=engine.unix_base_url,
                socket_path=uri.path,
                headers={"Host": engine.host_header},
                api_version=engine.api_version,
                timeout_seconds=engine.timeout_seconds,
            )

        if not uri.host:
            raise InvalidFormatError(f"Engine URI names no host: {uri}", str(uri))

        scheme = _SCHEME_ALIASES.get(uri.scheme, uri.scheme)
        base = uri.with_scheme(scheme).with_path("").with_query("").with_fragment("")
        return EngineEndpoint(
            uri=uri,
            transport=TransportKind.HTTP,
            base_url=str(base),
            api_version=engine.api_version,
            timeout_seconds=engine.timeout_seconds,
        )
