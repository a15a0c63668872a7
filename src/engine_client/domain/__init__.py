"""Engine client domain layer."""

from engine_client.domain.errors import (
    AddressingError,
    InvalidFormatError,
    InvalidPrefixLengthError,
    MissingPrefixLengthError,
    UriSchemeMissingError,
    VersionMismatchError,
)
from engine_client.domain.value_objects import (
    CIDRBlock,
    IPAddress,
    IpamConfig,
    IPVersion,
    MacAddress,
    NetworkDriver,
    NetworkEndpoint,
    Port,
    PortNumber,
    TransportProtocol,
    Uri,
)

__all__ = [
    # Errors
    "AddressingError",
    "InvalidFormatError",
    "MissingPrefixLengthError",
    "InvalidPrefixLengthError",
    "VersionMismatchError",
    "UriSchemeMissingError",
    # Value objects
    "IPVersion",
    "IPAddress",
    "CIDRBlock",
    "MacAddress",
    "Uri",
    "PortNumber",
    "TransportProtocol",
    "Port",
    "NetworkDriver",
    "IpamConfig",
    "NetworkEndpoint",
]
