"""
Reachability Provider Interface

A provider turns one read of the OS connectivity service into a
NetworkCapabilitySnapshot. There are two variants (capability-based and
legacy); the factory picks one at startup so callers never branch on
platform support themselves.
"""

from abc import ABC, abstractmethod

from reachability.models.network_state import NetworkCapabilitySnapshot


class ReachabilityProvider(ABC):
    """Abstract base class for reachability providers"""

    @property
    @abstractmethod
    def name(self) -> str:
        """Short provider name used in logs and snapshots"""

    @abstractmethod
    def take_snapshot(self) -> NetworkCapabilitySnapshot:
        """
        Read the current network state.

        Every call performs a fresh read; nothing is cached.

        Returns:
            New NetworkCapabilitySnapshot

        Raises:
            ConnectivityServiceError: If the underlying service fails
        """
