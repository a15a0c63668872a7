"""Published port value objects."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Mapping

from engine_client.domain.value_objects.ip_address import IPAddress
from engine_client.domain.value_objects.ip_version import IPVersion


class TransportProtocol(Enum):
    """Transport protocol of a published port."""

    TCP = "tcp"
    UDP = "udp"
    SCTP = "sctp"
    DCCP = "dccp"
    QUIC = "quic"


@dataclass(frozen=True, slots=True)
class PortNumber:
    """Port number in the range 0..65535."""

    value: int

    def __post_init__(self) -> None:
        if not 0 <= self.value <= 65535:
            raise ValueError("PortNumber value must be between 0 and 65535")

    def __int__(self) -> int:
        return self.value

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True, slots=True)
class Port:
    """A container port and where it is published on the host.

    Attributes:
        ip_address: Host address the port is bound to, None when unpublished.
        private_port: Port inside the container.
        public_port: Port on the host, None when unpublished.
        protocol: Transport protocol.
    """

    ip_address: IPAddress | None
    private_port: PortNumber
    public_port: PortNumber | None
    protocol: TransportProtocol

    @classmethod
    def from_mapping(cls, entry: Mapping[str, Any]) -> Port:
        """Build a port from one decoded entry of a container's "Ports" list.

        Args:
            entry: Mapping with "PrivatePort" and "Type", and optionally
                "IP" and "PublicPort".

        Raises:
            KeyError: If a required key is missing.
            ValueError: If a value fails validation.
        """
        ip = entry.get("IP")
        public_port = entry.get("PublicPort")
        return cls(
            ip_address=IPAddress.parse(ip) if ip else None,
            private_port=PortNumber(entry["PrivatePort"]),
            public_port=PortNumber(public_port) if public_port is not None else None,
            protocol=TransportProtocol(entry["Type"]),
        )

    def is_published(self) -> bool:
        """Return True if the port is reachable from the host."""
        return self.public_port is not None

    def __str__(self) -> str:
        target = f"{self.private_port}/{self.protocol.value}"
        if self.public_port is None:
            return target
        host = str(self.ip_address) if self.ip_address is not None else ""
        if self.ip_address is not None and self.ip_address.version is IPVersion.IPV6:
            host = f"[{host}]"
        return f"{host}:{self.public_port}->{target}"
