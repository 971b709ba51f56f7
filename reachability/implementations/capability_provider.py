"""
Capability Reachability Provider

Modern provider: asks the connectivity service for the active network, then
for that network's capability set, and reports internet capability iff the
set contains NetworkCapability.INTERNET.
"""

import logging

from reachability.constants import NetworkCapability, ProviderKind
from reachability.interfaces.connectivity_service_interface import (
    ConnectivityServiceInterface,
)
from reachability.interfaces.reachability_provider_interface import (
    ReachabilityProvider,
)
from reachability.models.network_state import NetworkCapabilitySnapshot


class CapabilityReachabilityProvider(ReachabilityProvider):
    """Reachability from the active network's capability set"""

    def __init__(self, service: ConnectivityServiceInterface):
        self.logger = logging.getLogger(__name__)
        self.service = service

    @property
    def name(self) -> str:
        return ProviderKind.CAPABILITY.value

    def take_snapshot(self) -> NetworkCapabilitySnapshot:
        handle = self.service.get_active_network()
        if handle is None:
            return NetworkCapabilitySnapshot.disconnected(source=self.name)

        capabilities = self.service.get_network_capabilities(handle)
        if capabilities is None:
            # Absence of capability info counts as "no internet"
            self.logger.debug(f"No capability info for {handle.interface}")
            return NetworkCapabilitySnapshot(
                has_active_network=True,
                has_internet_capability=False,
                source=self.name,
                interface=handle.interface,
            )

        return NetworkCapabilitySnapshot(
            has_active_network=True,
            has_internet_capability=NetworkCapability.INTERNET in capabilities,
            source=self.name,
            interface=handle.interface,
            capabilities=capabilities,
        )
