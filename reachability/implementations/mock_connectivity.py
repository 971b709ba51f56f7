"""
Mock Connectivity Service Implementation

Simulated OS connectivity service for development and testing.
Network state is scripted through helper methods instead of read from
the host.

Perfect for:
- Unit tests that must not depend on the machine's real network
- CI/CD pipelines
- Reproducing scenarios (airplane mode, captive portal, old platforms)
"""

import logging
import threading
from typing import FrozenSet, Iterable, Optional

from reachability.constants import NetworkCapability
from reachability.interfaces.connectivity_service_interface import (
    ConnectivityServiceError,
    ConnectivityServiceInterface,
)
from reachability.models.network_state import NetworkHandle, NetworkInfo


class MockConnectivityService(ConnectivityServiceInterface):
    """
    Mock connectivity service with scripted network state.

    Starts in the "Wi-Fi with internet" state so a default instance
    behaves like a healthy host.
    """

    def __init__(self, capability_api_supported: bool = True):
        """
        Initialize mock service.

        Args:
            capability_api_supported: If False, behaves like an old platform
                                      where only the legacy query works
        """
        self.logger = logging.getLogger(__name__)
        self._lock = threading.Lock()

        self._capability_api_supported = capability_api_supported
        self._active: Optional[NetworkHandle] = None
        self._capabilities: Optional[FrozenSet[NetworkCapability]] = None
        self._legacy_info: Optional[NetworkInfo] = None
        self._fail_next = False

        # Query counters (useful for testing)
        self.active_network_queries = 0
        self.capability_queries = 0
        self.legacy_queries = 0

        self.set_active_network("wlan0", {NetworkCapability.INTERNET})

        self.logger.info(
            f"Mock connectivity service initialized "
            f"(capability API: {capability_api_supported})",
        )

    # =========================================================================
    # INTERFACE IMPLEMENTATION
    # =========================================================================

    def get_active_network(self) -> Optional[NetworkHandle]:
        with self._lock:
            self.active_network_queries += 1
            self._raise_if_failing()
            return self._active

    def get_network_capabilities(
        self,
        handle: NetworkHandle,
    ) -> Optional[FrozenSet[NetworkCapability]]:
        with self._lock:
            self.capability_queries += 1
            self._raise_if_failing()
            if self._active is None or handle != self._active:
                return None
            return self._capabilities

    def get_active_network_info(self) -> Optional[NetworkInfo]:
        with self._lock:
            self.legacy_queries += 1
            self._raise_if_failing()
            return self._legacy_info

    def supports_capability_api(self) -> bool:
        return self._capability_api_supported

    def is_available(self) -> bool:
        """Mock service is always available"""
        return True

    def cleanup(self) -> None:
        """Clean up (nothing to do for mock)"""
        self.logger.debug("[MOCK NET] Cleanup called")

    # =========================================================================
    # TESTING HELPER METHODS (not part of ConnectivityServiceInterface)
    # =========================================================================

    def set_active_network(
        self,
        interface: str,
        capabilities: Optional[Iterable[NetworkCapability]] = None,
        metric: int = 0,
    ) -> None:
        """
        Make an interface the active network.

        Also updates the legacy info so both query styles agree: the network
        counts as connected iff INTERNET is in the capability set.

        Args:
            interface: Interface name (e.g. "wlan0")
            capabilities: Capability set, or None for "no capability info"
            metric: Route metric recorded on the handle
        """
        caps = None if capabilities is None else frozenset(capabilities)
        with self._lock:
            self._active = NetworkHandle(interface=interface, metric=metric)
            self._capabilities = caps
            self._legacy_info = NetworkInfo(
                interface=interface,
                is_connected=caps is not None and NetworkCapability.INTERNET in caps,
            )
        self.logger.info(f"[MOCK NET] Active network: {interface} {caps}")

    def set_no_network(self) -> None:
        """Simulate no interfaces up / airplane mode"""
        with self._lock:
            self._active = None
            self._capabilities = None
            self._legacy_info = None
        self.logger.info("[MOCK NET] No active network")

    def set_legacy_info(self, interface: str, is_connected: bool) -> None:
        """Override only the legacy query result"""
        with self._lock:
            self._legacy_info = NetworkInfo(
                interface=interface,
                is_connected=is_connected,
            )

    def set_capability_api_supported(self, supported: bool) -> None:
        self._capability_api_supported = supported

    def simulate_interface_vanished(self) -> None:
        """Active network stays reported but its capabilities are gone"""
        with self._lock:
            self._capabilities = None
        self.logger.info("[MOCK NET] Active interface vanished")

    def fail_next_query(self) -> None:
        """Make the next query of any kind raise ConnectivityServiceError"""
        with self._lock:
            self._fail_next = True

    def reset_counters(self) -> None:
        with self._lock:
            self.active_network_queries = 0
            self.capability_queries = 0
            self.legacy_queries = 0

    def _raise_if_failing(self) -> None:
        # Caller holds self._lock
        if self._fail_next:
            self._fail_next = False
            raise ConnectivityServiceError("Simulated connectivity service failure")
