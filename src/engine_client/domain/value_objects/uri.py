"""URI value object used to address the engine's control endpoint.

Two grammars are recognised. Text containing "://" is read as

    scheme "://" [user [":" password] "@"] [host] [":" port] [path] ["?" query] ["#" fragment]

so "unix:///var/run/docker.sock" yields an empty host and the socket path.
Anything else is read as the authority-less form

    scheme ":" [path] ["?" query] ["#" fragment]

which covers URNs such as "urn:example:animal:ferret:nose".
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field, replace

from engine_client.domain.errors import InvalidFormatError, UriSchemeMissingError

_AUTHORITY_FORM = re.compile(
    r"""
    (?P<scheme>[^:/?#]+):
    //
    (?:(?P<user>[^:/?#]+):*(?P<password>[^:/?#]+)?@)?
    (?P<host>[^:/?#]+)?
    (?::(?P<port>\d+))?
    (?P<path>[^?#]+)?
    (?:\?(?P<query>[^?#]+))?
    (?:\#(?P<fragment>[^?#]+))?
    """,
    re.VERBOSE | re.ASCII,
)

_OPAQUE_FORM = re.compile(
    r"""
    (?P<scheme>[^:/?#]+):
    (?P<path>[^?#]+)?
    (?:\?(?P<query>[^?#]+))?
    (?:\#(?P<fragment>[^?#]+))?
    """,
    re.VERBOSE | re.ASCII,
)

MAX_PORT = 65535


@dataclass(frozen=True, slots=True)
class Uri:
    """Immutable URI.

    ``has_authority_part`` records whether the text carried "//authority"
    and decides whether ``str()`` emits it. It is ignored by equality.

    The ``with_*`` methods return a copy with one component replaced. Every
    copy has ``has_authority_part`` set to True, including copies of an
    authority-less URI.
    """

    scheme: str
    host: str = ""
    port: int | None = None
    path: str = ""
    query: str = ""
    fragment: str = ""
    user: str = ""
    password: str = ""
    has_authority_part: bool = field(default=True, compare=False)

    def __post_init__(self) -> None:
        """Validate the port range."""
        if self.port is not None and not 0 <= self.port <= MAX_PORT:
            raise InvalidFormatError(
                f"URI port must be between 0 and {MAX_PORT}: {self.port}", str(self.port)
            )

    @classmethod
    def parse(cls, text: str) -> Uri:
        """Parse URI text.

        Args:
            text: URI such as "https://example.com:8080/path" or "unix:///run/x.sock".

        Returns:
            The parsed URI.

        Raises:
            UriSchemeMissingError: If no scheme can be read from the text.
            InvalidFormatError: If the port is outside 0..65535.
        """
        if "://" in text:
            return cls._parse_with_authority(text)
        return cls._parse_without_authority(text)

    @classmethod
    def _parse_with_authority(cls, text: str) -> Uri:
        match = _AUTHORITY_FORM.match(text)
        if match is None:
            raise UriSchemeMissingError(text)

        port = match.group("port")
        return cls(
            scheme=match.group("scheme"),
            host=match.group("host") or "",
            port=int(port) if port else None,
            path=match.group("path") or "",
            query=match.group("query") or "",
            fragment=match.group("fragment") or "",
            user=match.group("user") or "",
            password=match.group("password") or "",
        )

    @classmethod
    def _parse_without_authority(cls, text: str) -> Uri:
        match = _OPAQUE_FORM.match(text)
        if match is None:
            raise UriSchemeMissingError(text)

        return cls(
            scheme=match.group("scheme"),
            path=match.group("path") or "",
            query=match.group("query") or "",
            fragment=match.group("fragment") or "",
            has_authority_part=False,
        )

    @property
    def authority(self) -> str:
        """Authority component as [user:password@]host[:port]."""
        authority = self.host
        if self.user:
            authority = f"{self.user}:{self.password}@{authority}"
        if self.port is not None:
            authority = f"{authority}:{self.port}"
        return authority

    @property
    def user_info(self) -> str:
        """User information as user:password."""
        return f"{self.user}:{self.password}"

    def with_scheme(self, scheme: str) -> Uri:
        return replace(self, scheme=scheme, has_authority_part=True)

    def with_user_info(self, user: str, password: str | None = None) -> Uri:
        return replace(self, user=user, password=password or "", has_authority_part=True)

    def with_host(self, host: str) -> Uri:
        return replace(self, host=host, has_authority_part=True)

    def with_port(self, port: int | None) -> Uri:
        return replace(self, port=port, has_authority_part=True)

    def with_path(self, path: str) -> Uri:
        return replace(self, path=path, has_authority_part=True)

    def with_query(self, query: str) -> Uri:
        return replace(self, query=query, has_authority_part=True)

    def with_fragment(self, fragment: str) -> Uri:
        return replace(self, fragment=fragment, has_authority_part=True)

    def __str__(self) -> str:
        uri = ""
        if self.scheme:
            uri += f"{self.scheme}:"
        if self.has_authority_part:
            uri += f"//{self.authority}"
        uri += self.path
        if self.query:
            uri += f"?{self.query}"
        if self.fragment:
            uri += f"#{self.fragment}"
        return uri
