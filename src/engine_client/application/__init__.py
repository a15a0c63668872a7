"""Application layer - engine endpoint resolution."""

from engine_client.application.endpoint_resolver import (
    EndpointResolver,
    EngineEndpoint,
    TransportKind,
)

__all__ = [
    "EndpointResolver",
    "EngineEndpoint",
    "TransportKind",
]
