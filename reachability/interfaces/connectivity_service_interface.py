"""
Connectivity Service Interface

Abstract interface for the operating system's connectivity service. This is
the collaborator the reachability providers consume: it knows which network
is active and what that network is capable of. It is never reimplemented
here, only wrapped (psutil + procfs) or simulated (mock).

Two query styles exist, mirroring what operating systems offer:
- Capability API: "get active network handle" + "get capability set for handle"
- Legacy API: "get connection info" with an is-connected flag
"""

from abc import ABC, abstractmethod
from typing import FrozenSet, Optional

from reachability.constants import NetworkCapability
from reachability.models.network_state import NetworkHandle, NetworkInfo


class ConnectivityServiceInterface(ABC):
    """
    Abstract base class for OS connectivity services.

    All queries read cached OS state. None of them may generate
    network traffic.
    """

    @abstractmethod
    def get_active_network(self) -> Optional[NetworkHandle]:
        """
        Get the network the OS currently considers primary.

        Returns:
            Handle to the active network, or None if there is none
            (no interfaces up, airplane mode, no default route)

        Raises:
            ConnectivityServiceError: If the OS state cannot be read
        """

    @abstractmethod
    def get_network_capabilities(
        self,
        handle: NetworkHandle,
    ) -> Optional[FrozenSet[NetworkCapability]]:
        """
        Get the capability set of a network.

        Args:
            handle: Handle returned by get_active_network()

        Returns:
            Set of capabilities, or None if no capability information is
            available for this handle (e.g. the interface went away)

        Raises:
            ConnectivityServiceError: If the OS state cannot be read
        """

    @abstractmethod
    def get_active_network_info(self) -> Optional[NetworkInfo]:
        """
        Legacy query: get connection info for the active network.

        Returns:
            NetworkInfo with the is-connected flag, or None if no network

        Raises:
            ConnectivityServiceError: If the OS state cannot be read
        """

    @abstractmethod
    def supports_capability_api(self) -> bool:
        """
        Check if the capability queries work on this platform.

        Returns:
            True if get_active_network()/get_network_capabilities() are
            usable, False if only the legacy query is
        """

    @abstractmethod
    def is_available(self) -> bool:
        """
        Check if the service can read OS state at all.

        Returns:
            True if the service is working, False otherwise
        """

    @abstractmethod
    def cleanup(self) -> None:
        """
        Release any resources held by the service.
        Called when shutting down.
        """


class ConnectivityServiceError(Exception):
    """
    Exception raised when the OS connectivity state cannot be read.

    Examples:
    - psutil not installed
    - Routing table unreadable
    - Interface enumeration failed
    """
