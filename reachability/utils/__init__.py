"""
Reachability Utilities Package
"""

from reachability.utils.route_utils import (
    DefaultRoute,
    is_ignored_interface,
    is_usable_address,
    parse_ipv4_default_routes,
    parse_ipv6_default_routes,
    select_default_route,
)

__all__ = [
    "DefaultRoute",
    "is_ignored_interface",
    "is_usable_address",
    "parse_ipv4_default_routes",
    "parse_ipv6_default_routes",
    "select_default_route",
]
