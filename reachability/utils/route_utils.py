"""
Route Utilities

Pure helpers for reading the kernel routing tables and judging interface
addresses. No I/O happens here, which keeps them easy to test with
captured /proc contents.
"""

import ipaddress
import logging
from typing import Iterable, List, NamedTuple, Optional

from reachability.constants import (
    DEFAULT_ROUTE_DESTINATION,
    DEFAULT_ROUTE_MASK,
    IPV6_DEFAULT_DESTINATION,
    IPV6_DEFAULT_PREFIX_LEN,
    LOOPBACK_INTERFACE,
    RTF_REJECT,
    RTF_UP,
)

logger = logging.getLogger(__name__)


class DefaultRoute(NamedTuple):
    """A usable default route found in a routing table"""

    interface: str
    metric: int
    family: str  # "ipv4" or "ipv6"


def _is_usable_route(interface: str, flags: int) -> bool:
    """Route must be up, not a reject route, and not on loopback"""
    if interface == LOOPBACK_INTERFACE:
        return False
    if not flags & RTF_UP:
        return False
    return not flags & RTF_REJECT


def parse_ipv4_default_routes(table: str) -> List[DefaultRoute]:
    """
    Extract usable default routes from /proc/net/route contents.

    Format (tab separated, first line is a header):
        Iface Destination Gateway Flags RefCnt Use Metric Mask MTU Window IRTT

    Destination, Gateway, Flags and Mask are hex; Metric is decimal.

    Args:
        table: Full text of /proc/net/route

    Returns:
        Default routes in table order (malformed lines are skipped)
    """
    routes = []

    for line in table.splitlines()[1:]:
        fields = line.split()
        if len(fields) < 8:
            continue

        interface, destination, _gateway, flags_hex = fields[:4]
        metric_str, mask = fields[6], fields[7]

        if destination != DEFAULT_ROUTE_DESTINATION or mask != DEFAULT_ROUTE_MASK:
            continue

        try:
            flags = int(flags_hex, 16)
            metric = int(metric_str)
        except ValueError:
            logger.debug(f"Skipping malformed IPv4 route line: {line!r}")
            continue

        if _is_usable_route(interface, flags):
            routes.append(DefaultRoute(interface, metric, "ipv4"))

    return routes


def parse_ipv6_default_routes(table: str) -> List[DefaultRoute]:
    """
    Extract usable default routes from /proc/net/ipv6_route contents.

    Format (whitespace separated, no header):
        dest dest_plen src src_plen next_hop metric refcnt use flags iface

    All numeric fields are hex.

    Args:
        table: Full text of /proc/net/ipv6_route

    Returns:
        Default routes in table order (malformed lines are skipped)
    """
    routes = []

    for line in table.splitlines():
        fields = line.split()
        if len(fields) < 10:
            continue

        destination, prefix_len = fields[0], fields[1]
        if destination != IPV6_DEFAULT_DESTINATION or prefix_len != IPV6_DEFAULT_PREFIX_LEN:
            continue

        try:
            metric = int(fields[5], 16)
            flags = int(fields[8], 16)
        except ValueError:
            logger.debug(f"Skipping malformed IPv6 route line: {line!r}")
            continue

        interface = fields[9]
        if _is_usable_route(interface, flags):
            routes.append(DefaultRoute(interface, metric, "ipv6"))

    return routes


def select_default_route(routes: Iterable[DefaultRoute]) -> Optional[DefaultRoute]:
    """
    Pick the route the kernel would use: lowest metric, first one on ties.

    Returns:
        Winning route, or None if there are no routes
    """
    best = None
    for route in routes:
        if best is None or route.metric < best.metric:
            best = route
    return best


def is_usable_address(address: str) -> bool:
    """
    Check whether an interface address can reach beyond the local link.

    Loopback, link-local, unspecified and unparsable addresses are not
    usable. IPv6 scope suffixes ("fe80::1%eth0") are ignored.

    Args:
        address: Address string as reported by psutil

    Returns:
        True if the address is usable for internet traffic
    """
    try:
        ip = ipaddress.ip_address(address.split("%", 1)[0])
    except ValueError:
        return False

    return not (ip.is_loopback or ip.is_link_local or ip.is_unspecified)


def is_ignored_interface(interface: str, ignored_prefixes: Iterable[str]) -> bool:
    """True if the interface name starts with any ignored prefix"""
    return any(interface.startswith(prefix) for prefix in ignored_prefixes)
