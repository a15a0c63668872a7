"""IP version enumeration."""

from __future__ import annotations

from enum import Enum


class IPVersion(Enum):
    """Internet Protocol version of an address or block.

    The value is the display name used in error messages.
    """

    IPV4 = "IPv4"
    IPV6 = "IPv6"

    @property
    def bit_length(self) -> int:
        """Number of bits in an address of this version (32 or 128)."""
        if self is IPVersion.IPV4:
            return 32
        return 128

    @property
    def byte_length(self) -> int:
        """Number of bytes in an address of this version (4 or 16)."""
        return self.bit_length // 8

    @classmethod
    def from_byte_length(cls, length: int) -> IPVersion:
        """Pick the version whose packed form has ``length`` bytes.

        Raises:
            ValueError: If no version has that length.
        """
        for version in cls:
            if version.byte_length == length:
                return version
        raise ValueError(f"No IP version has a {length}-byte address")

    def __str__(self) -> str:
        return self.value
