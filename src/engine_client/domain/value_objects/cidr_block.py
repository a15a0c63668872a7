"""CIDR block value object.

A CIDR block is a network address plus a prefix length. The network bytes
are kept exactly as parsed: host bits past the prefix are NOT cleared, so
``start()`` of "192.168.1.7/24" is 192.168.1.7 while ``end()`` is
192.168.1.255.
"""

from __future__ import annotations

from dataclasses import dataclass

from engine_client.domain.errors import (
    InvalidFormatError,
    InvalidPrefixLengthError,
    MissingPrefixLengthError,
    VersionMismatchError,
)
from engine_client.domain.value_objects.ip_address import (
    IPAddress,
    pack_address,
    unpack_address,
)
from engine_client.domain.value_objects.ip_version import IPVersion


@dataclass(frozen=True, slots=True)
class CIDRBlock:
    """Immutable CIDR block for IPv4 or IPv6.

    Attributes:
        network: Packed network address, ``version.byte_length`` bytes long.
        prefix: Number of leading network bits, 0..``version.bit_length``.
        version: IP version of the block.
    """

    network: bytes
    prefix: int
    version: IPVersion

    def __post_init__(self) -> None:
        """Validate buffer length and prefix range."""
        if len(self.network) != self.version.byte_length:
            raise InvalidFormatError(
                f"{self.version.value} network requires {self.version.byte_length} bytes, "
                f"got {len(self.network)}",
                self.network.hex(),
            )
        if not 0 <= self.prefix <= self.version.bit_length:
            raise InvalidPrefixLengthError(self.version, self.prefix)

    @classmethod
    def parse(cls, text: str) -> CIDRBlock:
        """Parse "<address>/<prefix>" text.

        Args:
            text: CIDR text such as "172.17.0.0/16" or "2001:db8::/32".

        Returns:
            The parsed block, network bytes unmasked.

        Raises:
            MissingPrefixLengthError: If the text is empty or has no or several '/'.
            InvalidFormatError: If the address part is not a valid address.
            InvalidPrefixLengthError: If the prefix is non-numeric or out of range.
        """
        if not text:
            raise MissingPrefixLengthError(text)

        parts = text.split("/")
        if len(parts) != 2:
            raise MissingPrefixLengthError(text)

        address, prefix_text = parts
        try:
            network = pack_address(address)
        except ValueError as exc:
            raise InvalidFormatError(f"Invalid CIDR format: {text}", text) from exc

        version = IPVersion.from_byte_length(len(network))

        if not (prefix_text.isascii() and prefix_text.isdigit()):
            raise InvalidPrefixLengthError(version, prefix_text)

        prefix = int(prefix_text)
        if prefix > version.bit_length:
            raise InvalidPrefixLengthError(version, prefix)

        return cls(network, prefix, version)

    def start(self) -> IPAddress:
        """First address of the range (the network bytes as stored)."""
        return IPAddress(self.network, self.version)

    def end(self) -> IPAddress:
        """Last address of the range: network bytes with every host bit set."""
        mask = self._create_mask()
        end = bytes(octet | (~mask_octet & 0xFF) for octet, mask_octet in zip(self.network, mask))
        return IPAddress(end, self.version)

    def range(self) -> tuple[IPAddress, IPAddress]:
        """Return ``(start(), end())``."""
        return self.start(), self.end()

    def netmask(self) -> IPAddress:
        """Subnet mask of the block as an address (e.g. 255.255.255.0 for /24)."""
        return IPAddress(self._create_mask(), self.version)

    def contains(self, ip: IPAddress) -> bool:
        """Check whether an address lies inside the block.

        Args:
            ip: Candidate address.

        Returns:
            True if the network bits of ``ip`` match the block's.

        Raises:
            VersionMismatchError: If ``ip`` is of the other IP version.
        """
        if ip.version is not self.version:
            raise VersionMismatchError(self.version, ip.version)

        mask = self._create_mask()
        for network_octet, address_octet, mask_octet in zip(self.network, ip.address, mask):
            if network_octet & mask_octet != address_octet & mask_octet:
                return False
        return True

    def _create_mask(self) -> bytes:
        """Build the subnet mask: ``prefix`` one-bits followed by zero-bits."""
        mask = bytearray(self.version.byte_length)
        remaining = self.prefix

        for i in range(len(mask)):
            if remaining < 8:
                mask[i] = (0xFF << (8 - remaining)) & 0xFF
                break
            mask[i] = 0xFF
            remaining -= 8

        return bytes(mask)

    def __str__(self) -> str:
        return f"{unpack_address(self.network)}/{self.prefix}"

    def __repr__(self) -> str:
        return f"CIDRBlock({str(self)!r})"
