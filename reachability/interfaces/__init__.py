"""
Reachability Interfaces Package

Exposes abstract interfaces that define contracts for reachability components.
"""

from reachability.interfaces.connectivity_service_interface import (
    ConnectivityServiceError,
    ConnectivityServiceInterface,
)
from reachability.interfaces.reachability_provider_interface import (
    ReachabilityProvider,
)

# Public API (sorted alphabetically)
__all__ = [
    "ConnectivityServiceError",
    "ConnectivityServiceInterface",
    "ReachabilityProvider",
]
