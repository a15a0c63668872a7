"""Container network attachment value objects."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Mapping

from engine_client.domain.value_objects.cidr_block import CIDRBlock
from engine_client.domain.value_objects.ip_address import IPAddress
from engine_client.domain.value_objects.mac_address import MacAddress


class NetworkDriver(Enum):
    """Network driver backing a container network."""

    BRIDGE = "bridge"
    HOST = "host"
    MACVLAN = "macvlan"
    OVERLAY = "overlay"
    IPVLAN = "ipvlan"
    NONE = "none"


def _optional_address(text: str | None) -> IPAddress | None:
    return IPAddress.parse(text) if text else None


def _optional_block(address: str | None, prefix: int | None) -> CIDRBlock | None:
    if not address:
        return None
    return CIDRBlock.parse(f"{address}/{prefix}")


@dataclass(frozen=True, slots=True)
class IpamConfig:
    """Static IP address management settings of an endpoint.

    Attributes:
        ipv4_address: Requested IPv4 address.
        ipv6_address: Requested IPv6 address.
        link_local_ips: Additional link-local addresses.
    """

    ipv4_address: IPAddress | None
    ipv6_address: IPAddress | None
    link_local_ips: tuple[IPAddress, ...] = ()

    @classmethod
    def from_mapping(cls, entry: Mapping[str, Any]) -> IpamConfig:
        """Build from a decoded "IPAMConfig" object.

        Empty address strings map to None; a missing list to no addresses.
        """
        return cls(
            ipv4_address=_optional_address(entry.get("IPv4Address")),
            ipv6_address=_optional_address(entry.get("IPv6Address")),
            link_local_ips=tuple(IPAddress.parse(ip) for ip in entry.get("LinkLocalIPs") or ()),
        )


@dataclass(frozen=True, slots=True)
class NetworkEndpoint:
    """Addresses a container holds on one network."""

    name: str
    network_id: str
    endpoint_id: str
    mac_address: MacAddress | None
    gateway: IPAddress | None
    ip_address: CIDRBlock | None
    ipv6_gateway: IPAddress | None = None
    global_ipv6_address: CIDRBlock | None = None
    ipam_config: IpamConfig | None = None
    aliases: tuple[str, ...] = ()

    @classmethod
    def from_mapping(cls, name: str, entry: Mapping[str, Any]) -> NetworkEndpoint:
        """Build from one decoded value of "NetworkSettings.Networks".

        The container address and its prefix length arrive as separate
        fields ("IPAddress", "IPPrefixLen") and are joined into a CIDR block.

        Raises:
            KeyError: If "NetworkID" or "EndpointID" is missing.
            AddressingError: If an address field is malformed.
        """
        ipam = entry.get("IPAMConfig")
        mac = entry.get("MacAddress")
        return cls(
            name=name,
            network_id=entry["NetworkID"],
            endpoint_id=entry["EndpointID"],
            mac_address=MacAddress.parse(mac) if mac else None,
            gateway=_optional_address(entry.get("Gateway")),
            ip_address=_optional_block(entry.get("IPAddress"), entry.get("IPPrefixLen")),
            ipv6_gateway=_optional_address(entry.get("IPv6Gateway")),
            global_ipv6_address=_optional_block(
                entry.get("GlobalIPv6Address"), entry.get("GlobalIPv6PrefixLen")
            ),
            ipam_config=IpamConfig.from_mapping(ipam) if ipam is not None else None,
            aliases=tuple(entry.get("Aliases") or ()),
        )
