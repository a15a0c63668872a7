"""Errors raised by the addressing value objects.

Every parser either returns a fully valid value or raises one of these.
They all derive from ``ValueError`` so callers may catch the built-in type.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from engine_client.domain.value_objects.ip_version import IPVersion


class AddressingError(ValueError):
    """Base class for addressing and URI validation failures."""

    pass


class InvalidFormatError(AddressingError):
    """Raised when address or MAC text cannot be converted."""

    def __init__(self, message: str, value: str) -> None:
        super().__init__(message)
        self.value = value


class MissingPrefixLengthError(AddressingError):
    """Raised when CIDR text does not contain exactly one '/'."""

    def __init__(self, value: str) -> None:
        super().__init__(f"Invalid CIDR format. Missing prefix length: {value}")
        self.value = value


class InvalidPrefixLengthError(AddressingError):
    """Raised when a CIDR prefix is non-numeric or out of range."""

    def __init__(self, version: IPVersion, value: str | int) -> None:
        super().__init__(f"Invalid prefix length for {version.value}: {value}")
        self.version = version
        self.value = value


class VersionMismatchError(AddressingError):
    """Raised when an address is tested against a block of the other IP version."""

    def __init__(self, expected: IPVersion, actual: IPVersion) -> None:
        super().__init__(f"Invalid IP version: expected {expected.value}, got {actual.value}")
        self.expected = expected
        self.actual = actual


class UriSchemeMissingError(AddressingError):
    """Raised when URI text has no parsable scheme."""

    def __init__(self, value: str) -> None:
        super().__init__(f"URI scheme missing: {value}")
        self.value = value


__all__ = [
    "AddressingError",
    "InvalidFormatError",
    "MissingPrefixLengthError",
    "InvalidPrefixLengthError",
    "VersionMismatchError",
    "UriSchemeMissingError",
]
