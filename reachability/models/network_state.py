"""
Network State Models

Immutable data classes describing what the OS reports about its networks.
"""

from dataclasses import dataclass, field
from typing import FrozenSet, Optional

from reachability.constants import NetworkCapability


@dataclass(frozen=True)
class NetworkHandle:
    """
    Reference to the network the OS considers primary for outbound traffic.

    Only meaningful to the connectivity service that returned it.
    """

    interface: str  # e.g. wlan0, eth0
    family: str = "ipv4"  # Route family the handle was found through
    metric: int = 0  # Route metric (lower wins)


@dataclass(frozen=True)
class NetworkInfo:
    """Legacy connection info: which interface, and is it connected"""

    interface: str
    is_connected: bool


@dataclass(frozen=True)
class NetworkCapabilitySnapshot:
    """
    Point-in-time read of the OS network state.

    Created fresh on every check and discarded once the boolean result
    has been produced. Never cached.
    """

    has_active_network: bool
    has_internet_capability: bool

    # Diagnostics only - which provider produced this, and from what
    source: str = "unknown"
    interface: Optional[str] = None
    capabilities: FrozenSet[NetworkCapability] = field(default_factory=frozenset)

    @property
    def is_reachable(self) -> bool:
        """True iff an active network with internet capability exists"""
        return self.has_active_network and self.has_internet_capability

    @classmethod
    def disconnected(cls, source: str = "unknown") -> "NetworkCapabilitySnapshot":
        """Snapshot for "no active network" (or nothing readable)"""
        return cls(
            has_active_network=False,
            has_internet_capability=False,
            source=source,
        )

    def describe(self) -> str:
        """Human-readable one-line summary"""
        if not self.has_active_network:
            return "No active network"
        if not self.has_internet_capability:
            return f"Active network {self.interface or '?'} has no internet capability"
        return f"Internet available via {self.interface or '?'}"
