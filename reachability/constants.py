"""
Reachability Constants

Centralizes enums, method names, and routing-table values used throughout
the reachability module.
"""

from enum import Enum

# =============================================================================
# CAPABILITIES
# =============================================================================


class NetworkCapability(Enum):
    """
    Flags describing what the OS believes a network is able to do.

    These are read from cached OS state - nothing is probed.
    """

    # Interface is up with a routable address and carries a default route
    INTERNET = "internet"

    # The OS has already confirmed connectivity (NetworkManager "full")
    VALIDATED = "validated"

    # The OS detected a captive portal (NetworkManager "portal")
    CAPTIVE_PORTAL = "captive_portal"


class ProviderKind(Enum):
    """Which reachability provider variant is in use"""

    CAPABILITY = "capability"  # Modern: active network + capability set
    LEGACY = "legacy"  # Old platforms: "is connected" flag only


# Accepted values for mode/provider selection (factory + config validation)
SERVICE_MODES = ("auto", "real", "mock")
PROVIDER_CHOICES = ("auto", "capability", "legacy")

# =============================================================================
# REQUEST NAMES
# =============================================================================

# The single request recognised by the network channel
CHECK_NETWORK_CONNECTIVITY = "checkNetworkConnectivity"

# =============================================================================
# KERNEL ROUTING TABLE
# =============================================================================
# Values from linux/route.h and linux/ipv6_route.h

RTF_UP = 0x0001  # Route usable
RTF_REJECT = 0x0200  # Reject route (unreachable/prohibit)

# Default route: destination and mask are both zero
DEFAULT_ROUTE_DESTINATION = "00000000"
DEFAULT_ROUTE_MASK = "00000000"
IPV6_DEFAULT_DESTINATION = "0" * 32
IPV6_DEFAULT_PREFIX_LEN = "00"

LOOPBACK_INTERFACE = "lo"

# =============================================================================
# NETWORKMANAGER
# =============================================================================

# Reads NetworkManager's last known connectivity state (no live check)
NMCLI_CONNECTIVITY_COMMAND = ["nmcli", "-t", "-f", "CONNECTIVITY", "general"]

# nmcli connectivity state -> extra capabilities it implies
NMCLI_STATE_CAPABILITIES = {
    "full": frozenset({NetworkCapability.VALIDATED}),
    "portal": frozenset({NetworkCapability.CAPTIVE_PORTAL}),
    "limited": frozenset(),
    "none": frozenset(),
    "unknown": frozenset(),
}
