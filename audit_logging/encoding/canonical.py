"""Canonical text encodings for audit record values.

Each value kind has exactly one textual form so records produced by
different services can be compared and indexed.
"""

import ipaddress
from datetime import datetime
from typing import Any
from uuid import UUID

from audit_logging.exceptions import UnrecognizedAddressFamily
from audit_logging.identity.models import AddressFamily, SecurityIdentifier, SocketAddress

ISO_TIMESTAMP_FORMAT = "%Y-%m-%dT%H:%M:%S.%f%z"


def local_now() -> datetime:
    """Return the current wall-clock time with the local UTC offset."""
    return datetime.now().astimezone()


def format_iso_timestamp(when: datetime | None = None) -> str:
    """Format a timestamp as ISO-8601 with microseconds and numeric offset.

    Naive datetimes are interpreted as local time. The offset carries no
    colon, e.g. ``2018-03-05T10:12:13.123456+1300``.
    """
    if when is None:
        when = local_now()
    elif when.tzinfo is None:
        when = when.astimezone()
    return when.strftime(ISO_TIMESTAMP_FORMAT)


def format_address(address: SocketAddress) -> str:
    """Return the family-tagged text form of a socket address.

    IPv4-mapped IPv6 addresses keep their dotted-quad tail, e.g.
    ``ipv6:::ffff:1.2.3.4:80``.

    Raises:
        UnrecognizedAddressFamily: If the family has no canonical form
        ValueError: If the host, port or path the family needs is missing
    """
    match address.family:
        case AddressFamily.IPV4.value:
            _require_endpoint(address)
            host = str(ipaddress.IPv4Address(address.host))
            return f"ipv4:{host}:{address.port}"
        case AddressFamily.IPV6.value:
            _require_endpoint(address)
            ip = ipaddress.IPv6Address(address.host)
            if ip.ipv4_mapped is not None:
                host = f"::ffff:{ip.ipv4_mapped}"
            else:
                # compressed form follows RFC 5952 (longest zero run, lowercase)
                host = ip.compressed
            return f"ipv6:{host}:{address.port}"
        case AddressFamily.UNIX.value:
            if not address.path:
                raise ValueError("Unix socket address has no path")
            return f"unix:{address.path}"
        case _:
            raise UnrecognizedAddressFamily(
                f"No canonical form for address family {address.family!r}",
                family=address.family,
            )


def _require_endpoint(address: SocketAddress) -> None:
    if address.host is None:
        raise ValueError(f"{address.family} address has no host")
    if address.port is None:
        raise ValueError(f"{address.family} address has no port")


def format_sid(sid: SecurityIdentifier) -> str:
    """Return the ``S-<rev>-<authority>-<sub>...`` form of a SID."""
    if sid.authority > 0xFFFFFFFF:
        authority = f"0x{sid.authority:x}"
    else:
        authority = str(sid.authority)
    parts = [f"S-{sid.revision}", authority]
    parts.extend(str(sub) for sub in sid.sub_authorities)
    return "-".join(parts)


def format_guid(guid: UUID) -> str:
    """Return the lowercase hyphenated form of a GUID."""
    return str(guid)


def version_object(major: int, minor: int) -> dict[str, Any]:
    """Return the nested object describing a record's schema version."""
    return {"major": int(major), "minor": int(minor)}
