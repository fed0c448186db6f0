"""Identity value types consumed by the audit field encoders.

These mirror what the surrounding services hand to the builder: socket
addresses of peers, Windows-style security identifiers and GUIDs. The
builder only ever reads their canonical text.
"""

import ipaddress
import re
from enum import Enum
from typing import Annotated
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from audit_logging.exceptions import InvalidIdentifierError

MAX_SUB_AUTHORITIES = 15
MAX_AUTHORITY = (1 << 48) - 1
MAX_SUB_AUTHORITY = (1 << 32) - 1

SubAuthority = Annotated[int, Field(ge=0, le=MAX_SUB_AUTHORITY)]

_SID_PATTERN = re.compile(r"^[Ss]-(\d+)-(0[xX][0-9a-fA-F]+|\d+)((?:-\d+)*)$")
_GUID_PATTERN = re.compile(
    r"^\{?([0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12})\}?$"
)


class AddressFamily(str, Enum):
    """Address families with a canonical text form."""

    IPV4 = "ipv4"
    IPV6 = "ipv6"
    UNIX = "unix"


class SocketAddress(BaseModel):
    """Endpoint of a connection: an inet host/port pair or a local path.

    ``family`` is a plain string so addresses from transports without a
    canonical form (netlink, named pipes on other stacks) can still be
    represented and passed around.
    """

    model_config = ConfigDict(frozen=True)

    family: str = Field(..., description="Address family tag")
    host: str | None = Field(default=None, description="Textual host address")
    port: int | None = Field(default=None, ge=0, le=65535, description="Port number")
    path: str | None = Field(default=None, description="Filesystem path for local sockets")

    @classmethod
    def inet(cls, host: str, port: int) -> "SocketAddress":
        """Build an IPv4 or IPv6 address, detecting the family from ``host``.

        Raises:
            ValueError: If ``host`` is not an IP address literal
        """
        ip = ipaddress.ip_address(host)
        family = AddressFamily.IPV4 if ip.version == 4 else AddressFamily.IPV6
        return cls(family=family.value, host=host, port=port)

    @classmethod
    def unix(cls, path: str) -> "SocketAddress":
        """Build a local (unix domain) socket address."""
        return cls(family=AddressFamily.UNIX.value, path=path)


class SecurityIdentifier(BaseModel):
    """Structured security identifier (revision, authority, sub-authorities)."""

    model_config = ConfigDict(frozen=True)

    revision: int = Field(..., ge=0, le=255, description="SID revision level")
    authority: int = Field(
        ..., ge=0, le=MAX_AUTHORITY, description="48-bit identifier authority"
    )
    sub_authorities: tuple[SubAuthority, ...] = Field(
        default=(),
        max_length=MAX_SUB_AUTHORITIES,
        description="Relative identifiers, at most 15",
    )

    @classmethod
    def parse(cls, text: str) -> "SecurityIdentifier":
        """Parse the ``S-1-5-21-...`` text form.

        Args:
            text: SID string; the authority may be decimal or 0x-prefixed hex

        Returns:
            The structured identifier

        Raises:
            InvalidIdentifierError: If the text is not a well-formed SID
        """
        match = _SID_PATTERN.match(text.strip())
        if match is None:
            raise InvalidIdentifierError(f"Invalid SID: {text!r}")

        revision_text, authority_text, subs_text = match.groups()
        if authority_text[:2].lower() == "0x":
            authority = int(authority_text, 16)
        else:
            authority = int(authority_text)
        subs = tuple(int(part) for part in subs_text.split("-")[1:])

        if int(revision_text) > 255:
            raise InvalidIdentifierError(f"SID revision out of range: {text!r}")
        if authority > MAX_AUTHORITY:
            raise InvalidIdentifierError(f"SID authority out of range: {text!r}")
        if len(subs) > MAX_SUB_AUTHORITIES:
            raise InvalidIdentifierError(f"Too many SID sub-authorities: {text!r}")
        if any(sub > MAX_SUB_AUTHORITY for sub in subs):
            raise InvalidIdentifierError(f"SID sub-authority out of range: {text!r}")

        return cls(
            revision=int(revision_text),
            authority=authority,
            sub_authorities=subs,
        )


def parse_guid(text: str) -> UUID:
    """Parse a hyphenated GUID, optionally wrapped in braces.

    Raises:
        InvalidIdentifierError: If the text is not a GUID
    """
    match = _GUID_PATTERN.match(text.strip())
    if match is None:
        raise InvalidIdentifierError(f"Invalid GUID: {text!r}")
    return UUID(match.group(1))
