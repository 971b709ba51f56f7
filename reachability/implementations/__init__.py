"""
Reachability Implementations Package

Exposes concrete connectivity services and reachability providers.
"""

from reachability.implementations.capability_provider import (
    CapabilityReachabilityProvider,
)
from reachability.implementations.legacy_provider import LegacyReachabilityProvider
from reachability.implementations.mock_connectivity import MockConnectivityService
from reachability.implementations.system_connectivity import (
    SystemConnectivityService,
)

# Public API (sorted alphabetically)
__all__ = [
    "CapabilityReachabilityProvider",
    "LegacyReachabilityProvider",
    "MockConnectivityService",
    "SystemConnectivityService",
]
