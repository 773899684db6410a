"""Identifier classification.

Decides, from the shape of a free-form string, which attribute of an instance
it names. Rules are evaluated in order and the first match wins:

1. ``i-`` / ``mi-`` prefix: EC2 or SSM managed instance ID
2. IPv4/IPv6 address: private (RFC 1918) or public IP
3. ``compute.amazonaws.com`` suffix: public DNS name
4. ``compute.internal`` suffix: private DNS name
5. anything else: Name tag
"""
import ipaddress
from typing import Optional, Union

from instance_finder.domain.instance.value_objects import FilterKind, IdentifierFilter

INSTANCE_ID_PREFIXES = ("i-", "mi-")
PUBLIC_DNS_SUFFIX = "compute.amazonaws.com"
PRIVATE_DNS_SUFFIX = "compute.internal"

PRIVATE_NETWORKS = (
    ipaddress.ip_network("10.0.0.0/8"),
    ipaddress.ip_network("172.16.0.0/12"),
    ipaddress.ip_network("192.168.0.0/16"),
)

IPAddress = Union[ipaddress.IPv4Address, ipaddress.IPv6Address]


def parse_ip(identifier: str) -> Optional[IPAddress]:
    """Parse a textual IPv4 or IPv6 address, returning None if it is not one."""
    # Scoped addresses (fe80::1%eth0) are not plain addresses.
    if "%" in identifier:
        return None
    try:
        return ipaddress.ip_address(identifier)
    except ValueError:
        return None


def is_private_ip(address: IPAddress) -> bool:
    """Check whether an address falls inside one of the IANA private-use IPv4 ranges."""
    if isinstance(address, ipaddress.IPv6Address):
        if address.ipv4_mapped is None:
            return False
        address = address.ipv4_mapped
    return any(address in network for network in PRIVATE_NETWORKS)


def classify(identifier: str) -> IdentifierFilter:
    """
    Classify an identifier into the filter used to look it up.

    Never fails: an unrecognised string is matched against the Name tag.

    Args:
        identifier: Instance ID, IP address, DNS name or Name tag

    Returns:
        IdentifierFilter carrying the original string
    """
    if identifier.startswith(INSTANCE_ID_PREFIXES):
        return IdentifierFilter(kind=FilterKind.INSTANCE_ID, value=identifier)

    address = parse_ip(identifier)
    if address is not None:
        if is_private_ip(address):
            return IdentifierFilter(kind=FilterKind.PRIVATE_IP, value=identifier)
        return IdentifierFilter(kind=FilterKind.PUBLIC_IP, value=identifier)

    if identifier.endswith(PUBLIC_DNS_SUFFIX):
        return IdentifierFilter(kind=FilterKind.PUBLIC_DNS, value=identifier)

    if identifier.endswith(PRIVATE_DNS_SUFFIX):
        return IdentifierFilter(kind=FilterKind.PRIVATE_DNS, value=identifier)

    return IdentifierFilter(kind=FilterKind.NAME_TAG, value=identifier)
