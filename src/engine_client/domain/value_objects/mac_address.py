"""MAC address value object."""

from __future__ import annotations

import re
from dataclasses import dataclass

from engine_client.domain.errors import InvalidFormatError

_MAC_PATTERN = re.compile(r"([0-9A-Fa-f]{2}:){5}[0-9A-Fa-f]{2}")


@dataclass(frozen=True, slots=True)
class MacAddress:
    """Immutable MAC address split into vendor and device halves.

    Attributes:
        oui: Organizationally Unique Identifier, first three octets ("XX:XX:XX").
        device_id: Vendor-assigned device part, last three octets ("XX:XX:XX").
    """

    oui: str
    device_id: str

    @classmethod
    def parse(cls, text: str) -> MacAddress:
        """Parse "XX:XX:XX:XX:XX:XX" text, case-insensitive.

        Raises:
            InvalidFormatError: If the text is not six colon-separated hex octets.
        """
        if not _MAC_PATTERN.fullmatch(text):
            raise InvalidFormatError(f"Invalid MAC address: {text}", text)

        octets = text.upper().split(":")
        return cls(oui=":".join(octets[:3]), device_id=":".join(octets[3:]))

    def __str__(self) -> str:
        return f"{self.oui}:{self.device_id}"
