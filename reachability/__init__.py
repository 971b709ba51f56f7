"""
Reachability Module

Determines, on demand, whether the host has an active network that the OS
believes is internet-capable. Reads cached OS state only; nothing is probed.

Provides automatic detection and graceful fallback between the real host
connectivity service and a mock, and between the capability-based and
legacy provider variants.

Public API:
    - ReachabilityChecker: The on-demand reachability query
    - ReachabilityFactory: Factory for services, providers and checkers
    - create_checker: Quick checker creation with auto-detection
    - ReachabilityConfig: YAML-backed configuration
    - ConnectivityServiceInterface: OS connectivity service contract
    - ReachabilityProvider: Provider contract
    - NetworkCapabilitySnapshot: Point-in-time network state
    - NetworkCapability: Capability flags

Usage:
    from reachability import create_checker

    checker = create_checker()
    if checker.is_internet_reachable():
        print("Internet available")
"""

from reachability.config import ReachabilityConfig
from reachability.constants import (
    CHECK_NETWORK_CONNECTIVITY,
    NetworkCapability,
    ProviderKind,
)
from reachability.controllers.reachability_checker import ReachabilityChecker
from reachability.factory import ReachabilityFactory, create_checker
from reachability.interfaces.connectivity_service_interface import (
    ConnectivityServiceError,
    ConnectivityServiceInterface,
)
from reachability.interfaces.reachability_provider_interface import (
    ReachabilityProvider,
)
from reachability.models.network_state import NetworkCapabilitySnapshot

__all__ = [
    "CHECK_NETWORK_CONNECTIVITY",
    "ConnectivityServiceError",
    "ConnectivityServiceInterface",
    "NetworkCapability",
    "NetworkCapabilitySnapshot",
    "ProviderKind",
    "ReachabilityChecker",
    "ReachabilityConfig",
    "ReachabilityFactory",
    "ReachabilityProvider",
    "create_checker",
]
