"""
Reachability Checker

Answers one question on demand: does this host currently have an active
network that the OS believes can reach the internet?

The answer comes from locally cached OS state through a ReachabilityProvider.
No traffic is sent, so this is *potential* reachability, not a confirmed
round trip.

SOLID Principles:
- Single Responsibility: Only turns a provider snapshot into a boolean
- Dependency Inversion: Depends on ReachabilityProvider, not on psutil/procfs
"""

import logging
from typing import Optional, Tuple

from reachability.factory import create_provider
from reachability.interfaces.connectivity_service_interface import (
    ConnectivityServiceError,
)
from reachability.interfaces.reachability_provider_interface import (
    ReachabilityProvider,
)
from reachability.models.network_state import NetworkCapabilitySnapshot


class ReachabilityChecker:
    """
    Stateless, idempotent internet reachability query.

    Holds no network state between calls: every call takes a fresh snapshot
    and discards it. Safe to call from several threads at once.

    Usage:
        checker = ReachabilityChecker()
        if checker.is_internet_reachable():
            start_upload()
    """

    def __init__(self, provider: Optional[ReachabilityProvider] = None):
        """
        Initialize reachability checker.

        Args:
            provider: Reachability provider, or None to auto-create

        Example:
            # Normal usage - auto-detects service and provider variant
            checker = ReachabilityChecker()

            # Testing with mock
            service = MockConnectivityService()
            checker = ReachabilityChecker(
                provider=CapabilityReachabilityProvider(service),
            )
        """
        self.logger = logging.getLogger(__name__)
        self.provider = provider or create_provider()

        self.logger.info(
            f"Reachability checker initialized (provider: {self.provider.name})",
        )

    @property
    def provider_name(self) -> str:
        return self.provider.name

    def is_internet_reachable(self) -> bool:
        """
        Check if an internet-capable network is currently active.

        Returns:
            True iff an active network exists and has internet capability.
            False otherwise, including when the OS state cannot be read.
        """
        return self.get_snapshot().is_reachable

    def get_snapshot(self) -> NetworkCapabilitySnapshot:
        """
        Take a fresh snapshot of the network state.

        Failures never propagate: an unreadable state is reported as
        "no active network".

        Returns:
            New NetworkCapabilitySnapshot
        """
        try:
            return self.provider.take_snapshot()
        except (ConnectivityServiceError, OSError) as e:
            self.logger.debug(f"Connectivity state unavailable: {e}")
        except Exception as e:
            self.logger.warning(
                f"Unexpected error in reachability check: {e}",
                exc_info=True,
            )

        return NetworkCapabilitySnapshot.disconnected(source=self.provider.name)

    def get_network_status(self) -> Tuple[bool, str]:
        """
        Get human-readable network status.

        Returns:
            Tuple of (is_reachable, status_string)

        Example:
            is_reachable, status = checker.get_network_status()
            print(status)  # Output: Internet available via wlan0
        """
        snapshot = self.get_snapshot()
        return snapshot.is_reachable, snapshot.describe()
