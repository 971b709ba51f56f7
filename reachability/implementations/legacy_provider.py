"""
Legacy Reachability Provider

Fallback for platforms without the capability queries. Uses the single
"is connected" flag of the active network info. Best-effort: it agrees with
the capability provider in the common cases but is not an exact equivalent.
"""

from reachability.constants import ProviderKind
from reachability.interfaces.connectivity_service_interface import (
    ConnectivityServiceInterface,
)
from reachability.interfaces.reachability_provider_interface import (
    ReachabilityProvider,
)
from reachability.models.network_state import NetworkCapabilitySnapshot


class LegacyReachabilityProvider(ReachabilityProvider):
    """Reachability from the legacy is-connected flag"""

    def __init__(self, service: ConnectivityServiceInterface):
        self.service = service

    @property
    def name(self) -> str:
        return ProviderKind.LEGACY.value

    def take_snapshot(self) -> NetworkCapabilitySnapshot:
        info = self.service.get_active_network_info()
        if info is None:
            return NetworkCapabilitySnapshot.disconnected(source=self.name)

        return NetworkCapabilitySnapshot(
            has_active_network=True,
            has_internet_capability=info.is_connected,
            source=self.name,
            interface=info.interface,
        )
