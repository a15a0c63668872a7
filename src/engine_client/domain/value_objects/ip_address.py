"""IP address value object."""

from __future__ import annotations

import ipaddress
import socket
from dataclasses import dataclass, field

from engine_client.domain.errors import InvalidFormatError
from engine_client.domain.value_objects.ip_version import IPVersion


def pack_address(text: str) -> bytes:
    """Convert IPv4 dotted-decimal or IPv6 colon-hex text to packed bytes.

    Accepts the same forms as ``inet_pton``: full, zero-compressed ("::") and
    mixed IPv6 notation. Zone identifiers ("fe80::1%eth0") are rejected since
    the packed form cannot carry them.

    Raises:
        ValueError: If the text is not a valid address.
    """
    if "%" in text:
        raise ValueError(f"Zone identifiers are not supported: {text!r}")
    return ipaddress.ip_address(text).packed


def unpack_address(packed: bytes) -> str:
    """Render packed address bytes in canonical text form.

    IPv6 addresses use the shortest form (lowercase, longest zero run
    compressed); IPv4-mapped addresses keep a dotted-quad suffix
    ("::ffff:192.0.2.1").
    """
    family = socket.AF_INET if len(packed) == 4 else socket.AF_INET6
    return socket.inet_ntop(family, packed)


@dataclass(frozen=True, slots=True)
class IPAddress:
    """Immutable IPv4 or IPv6 address stored in packed network byte order.

    Equality and hashing consider the packed bytes only; the two versions
    can never collide because their buffers differ in length.

    Attributes:
        address: Packed address, ``version.byte_length`` bytes long.
        version: IP version of the address.

    Example:
        >>> ip = IPAddress.parse("192.168.1.10")
        >>> ip.version
        <IPVersion.IPV4: 'IPv4'>
        >>> str(ip)
        '192.168.1.10'
    """

    address: bytes
    version: IPVersion = field(compare=False)

    def __post_init__(self) -> None:
        """Validate the buffer length against the version."""
        if len(self.address) != self.version.byte_length:
            raise InvalidFormatError(
                f"{self.version.value} address requires {self.version.byte_length} bytes, "
                f"got {len(self.address)}",
                self.address.hex(),
            )

    @classmethod
    def parse(cls, text: str) -> IPAddress:
        """Parse address text.

        Args:
            text: Address such as "10.0.0.1" or "2001:db8::1".

        Returns:
            The parsed address.

        Raises:
            InvalidFormatError: If the text is empty or not a valid address.
        """
        if not text:
            raise InvalidFormatError("Invalid IP address format: ", text)

        try:
            packed = pack_address(text)
        except ValueError as exc:
            raise InvalidFormatError(f"Invalid IP address format: {text}", text) from exc

        return cls(packed, IPVersion.from_byte_length(len(packed)))

    def __str__(self) -> str:
        return unpack_address(self.address)

    def __repr__(self) -> str:
        return f"IPAddress({str(self)!r})"
