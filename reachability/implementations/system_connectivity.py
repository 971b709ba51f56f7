"""
System Connectivity Service

Concrete implementation of ConnectivityServiceInterface that reads the host's
real network state:
- psutil for interface state and addresses (any platform)
- /proc/net/route and /proc/net/ipv6_route for the active network (Linux)
- NetworkManager's cached connectivity state via nmcli, when present

Nothing here sends a packet. Every query reads state the kernel or
NetworkManager already holds.
"""

import logging
import os
import shutil
import socket
import subprocess
from pathlib import Path
from typing import FrozenSet, Iterable, List, Optional

try:
    import psutil

    PSUTIL_AVAILABLE = True
except ImportError:
    PSUTIL_AVAILABLE = False

from config.settings import (
    IGNORED_INTERFACE_PREFIXES,
    IPV6_ROUTE_TABLE_PATH,
    NMCLI_ENABLED,
    NMCLI_TIMEOUT,
    ROUTE_TABLE_PATH,
)
from reachability.constants import (
    NMCLI_CONNECTIVITY_COMMAND,
    NMCLI_STATE_CAPABILITIES,
    NetworkCapability,
)
from reachability.interfaces.connectivity_service_interface import (
    ConnectivityServiceError,
    ConnectivityServiceInterface,
)
from reachability.models.network_state import NetworkHandle, NetworkInfo
from reachability.utils.route_utils import (
    is_ignored_interface,
    is_usable_address,
    parse_ipv4_default_routes,
    parse_ipv6_default_routes,
    select_default_route,
)

# Address families that carry internet traffic
_IP_FAMILIES = (socket.AF_INET, socket.AF_INET6)


class SystemConnectivityService(ConnectivityServiceInterface):
    """
    Reads connectivity state from the running host.

    The capability API needs the Linux routing tables. On platforms without
    them only the legacy query (psutil interface flags) is supported.
    """

    def __init__(
        self,
        route_table_path: str = ROUTE_TABLE_PATH,
        ipv6_route_table_path: str = IPV6_ROUTE_TABLE_PATH,
        use_network_manager: bool = NMCLI_ENABLED,
        nmcli_timeout: float = NMCLI_TIMEOUT,
        ignored_interface_prefixes: Optional[Iterable[str]] = None,
    ):
        self.logger = logging.getLogger(__name__)

        if not PSUTIL_AVAILABLE:
            raise ConnectivityServiceError(
                "psutil library not available. Install with: pip install psutil",
            )

        self.route_table_path = Path(route_table_path)
        self.ipv6_route_table_path = Path(ipv6_route_table_path)
        self.nmcli_timeout = nmcli_timeout
        self.ignored_interface_prefixes: List[str] = list(
            IGNORED_INTERFACE_PREFIXES
            if ignored_interface_prefixes is None
            else ignored_interface_prefixes
        )

        # Resolve nmcli once - whether the binary exists does not change
        self._nmcli_path = shutil.which("nmcli") if use_network_manager else None

        self.logger.info(
            f"System connectivity service initialized "
            f"(routes: {self.route_table_path}, "
            f"nmcli: {self._nmcli_path or 'disabled'})",
        )

    # =========================================================================
    # CAPABILITY API
    # =========================================================================

    def get_active_network(self) -> Optional[NetworkHandle]:
        """Interface holding the lowest-metric default route (IPv4 first)"""
        route = select_default_route(
            parse_ipv4_default_routes(self._read_table(self.route_table_path)),
        )
        if route is None:
            route = select_default_route(
                parse_ipv6_default_routes(
                    self._read_table(self.ipv6_route_table_path),
                ),
            )

        if route is None:
            self.logger.debug("No usable default route")
            return None

        return NetworkHandle(
            interface=route.interface,
            family=route.family,
            metric=route.metric,
        )

    def get_network_capabilities(
        self,
        handle: NetworkHandle,
    ) -> Optional[FrozenSet[NetworkCapability]]:
        """Derive capabilities from interface state and NetworkManager"""
        stats = self._net_if_stats()

        interface_stats = stats.get(handle.interface)
        if interface_stats is None:
            # Interface disappeared between the two queries
            self.logger.debug(f"Interface {handle.interface} not found")
            return None

        if not interface_stats.isup:
            return frozenset()

        if not self._has_usable_address(handle.interface):
            return frozenset()

        # NetworkManager's state is host-wide, so it only qualifies an
        # interface that already has internet capability
        return frozenset(
            {NetworkCapability.INTERNET} | self._network_manager_capabilities(),
        )

    # =========================================================================
    # LEGACY API
    # =========================================================================

    def get_active_network_info(self) -> Optional[NetworkInfo]:
        """
        First up interface, preferring one with a usable address.

        Interfaces are visited in name order so repeated calls agree.
        """
        stats = self._net_if_stats()

        candidates = [
            name
            for name in sorted(stats)
            if stats[name].isup
            and not is_ignored_interface(name, self.ignored_interface_prefixes)
        ]
        if not candidates:
            return None

        for name in candidates:
            if self._has_usable_address(name):
                return NetworkInfo(interface=name, is_connected=True)

        return NetworkInfo(interface=candidates[0], is_connected=False)

    def supports_capability_api(self) -> bool:
        """Capability queries need a readable IPv4 routing table"""
        return os.access(self.route_table_path, os.R_OK)

    def is_available(self) -> bool:
        try:
            self._net_if_stats()
            return True
        except ConnectivityServiceError:
            return False

    def cleanup(self) -> None:
        """Nothing held open between queries"""
        self.logger.debug("System connectivity service cleanup")

    # =========================================================================
    # INTERNAL HELPERS
    # =========================================================================

    def _read_table(self, path: Path) -> str:
        """Read a routing table; a missing table reads as empty"""
        try:
            return path.read_text()
        except FileNotFoundError:
            return ""
        except OSError as e:
            raise ConnectivityServiceError(f"Cannot read {path}: {e}") from e

    def _net_if_stats(self) -> dict:
        try:
            return psutil.net_if_stats()
        except (psutil.Error, OSError) as e:
            raise ConnectivityServiceError(
                f"Failed to read interface state: {e}",
            ) from e

    def _has_usable_address(self, interface: str) -> bool:
        try:
            addresses = psutil.net_if_addrs().get(interface, [])
        except (psutil.Error, OSError) as e:
            raise ConnectivityServiceError(
                f"Failed to read addresses for {interface}: {e}",
            ) from e

        return any(
            is_usable_address(addr.address)
            for addr in addresses
            if addr.family in _IP_FAMILIES
        )

    def _network_manager_capabilities(self) -> FrozenSet[NetworkCapability]:
        """
        Extra capabilities from NetworkManager's last known state.

        Missing nmcli, a failure or an unknown state all contribute nothing.
        """
        if self._nmcli_path is None:
            return frozenset()

        try:
            result = subprocess.run(
                [self._nmcli_path, *NMCLI_CONNECTIVITY_COMMAND[1:]],
                capture_output=True,
                text=True,
                timeout=self.nmcli_timeout,
                check=False,
            )
        except (subprocess.TimeoutExpired, OSError) as e:
            self.logger.debug(f"nmcli connectivity query failed: {e}")
            return frozenset()

        if result.returncode != 0:
            self.logger.debug(
                f"nmcli exited with {result.returncode}: {result.stderr.strip()}",
            )
            return frozenset()

        state = result.stdout.strip().lower()
        return NMCLI_STATE_CAPABILITIES.get(state, frozenset())
