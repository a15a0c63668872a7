"""Value objects for the engine client domain.

Value objects are immutable and compared by value. Each one is created by a
``parse``/``from_mapping`` classmethod that either returns a valid value or
raises an ``AddressingError``.

Exports:
    Addressing:
        - IPVersion: IPv4/IPv6 tag with bit and byte lengths
        - IPAddress: Packed IPv4/IPv6 address
        - CIDRBlock: Network address plus prefix length
        - MacAddress: OUI and device id halves of a MAC address
        - Uri: Engine endpoint URI (authority and authority-less forms)

    Ports and networks:
        - PortNumber, TransportProtocol, Port
        - NetworkDriver, IpamConfig, NetworkEndpoint
"""

from engine_client.domain.value_objects.cidr_block import CIDRBlock
from engine_client.domain.value_objects.ip_address import IPAddress
from engine_client.domain.value_objects.ip_version import IPVersion
from engine_client.domain.value_objects.mac_address import MacAddress
from engine_client.domain.value_objects.network import (
    IpamConfig,
    NetworkDriver,
    NetworkEndpoint,
)
from engine_client.domain.value_objects.port import Port, PortNumber, TransportProtocol
from engine_client.domain.value_objects.uri import Uri

__all__ = [
    # Addressing
    "IPVersion",
    "IPAddress",
    "CIDRBlock",
    "MacAddress",
    "Uri",
    # Ports and networks
    "PortNumber",
    "TransportProtocol",
    "Port",
    "NetworkDriver",
    "IpamConfig",
    "NetworkEndpoint",
]
