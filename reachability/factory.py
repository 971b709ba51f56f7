"""
Reachability Factory

Factory pattern for creating reachability components.

Two decisions are made here, once, at startup:
1. Which connectivity service: the real host (psutil + procfs) or the mock
2. Which provider variant: capability-based, or legacy when the platform
   lacks the capability queries

Callers then just ask the checker; nobody branches on platform support
at call time.
"""

import logging
from typing import Literal, Optional

from reachability.config import ReachabilityConfig
from reachability.implementations.capability_provider import (
    CapabilityReachabilityProvider,
)
from reachability.implementations.legacy_provider import LegacyReachabilityProvider
from reachability.implementations.mock_connectivity import MockConnectivityService
from reachability.implementations.system_connectivity import (
    SystemConnectivityService,
)
from reachability.interfaces.connectivity_service_interface import (
    ConnectivityServiceInterface,
)
from reachability.interfaces.reachability_provider_interface import (
    ReachabilityProvider,
)

# Type aliases for better type hints
ServiceMode = Literal["auto", "real", "mock"]
ProviderChoice = Literal["auto", "capability", "legacy"]


class ReachabilityFactory:
    """
    Factory for creating connectivity services, providers and checkers.

    Usage:
        # Auto-detect everything
        checker = ReachabilityFactory.create_checker()

        # Force mock service (useful for testing)
        service = ReachabilityFactory.create_service(mode="mock")

        # Force the legacy provider
        provider = ReachabilityFactory.create_provider(service, kind="legacy")
    """

    _logger = logging.getLogger(__name__)

    @classmethod
    def create_service(
        cls,
        mode: ServiceMode = "auto",
        config: Optional[ReachabilityConfig] = None,
    ) -> ConnectivityServiceInterface:
        """
        Create a connectivity service instance.

        Args:
            mode: "auto" (detect), "real" (force host service),
                  "mock" (force simulation)
            config: Settings for the real service (None = defaults)

        Returns:
            ConnectivityServiceInterface implementation
            (SystemConnectivityService or MockConnectivityService)

        Raises:
            RuntimeError: If mode="real" but the host service is not available
        """
        if mode == "mock":
            cls._logger.info("Creating Mock connectivity service (forced)")
            return MockConnectivityService()

        if mode == "real":
            try:
                service = cls._create_system_service(config)
                cls._logger.info("Creating System connectivity service (forced)")
                return service
            except Exception as e:
                raise RuntimeError(
                    f"Real connectivity service requested but not available: {e}",
                ) from e

        # mode == "auto" - try real first, fall back to mock
        try:
            service = cls._create_system_service(config)
            cls._logger.info("Creating System connectivity service (auto-detected)")
            return service
        except Exception as e:
            cls._logger.warning(
                f"System connectivity service not available ({e}), "
                f"using Mock connectivity service with no network",
            )
            # Host state is unknown: report "no active network", never online
            service = MockConnectivityService()
            service.set_no_network()
            return service

    @classmethod
    def create_provider(
        cls,
        service: ConnectivityServiceInterface,
        kind: ProviderChoice = "auto",
    ) -> ReachabilityProvider:
        """
        Create a reachability provider for a service.

        Args:
            service: Connectivity service the provider will query
            kind: "auto" (capability if supported, else legacy),
                  "capability" or "legacy"

        Returns:
            ReachabilityProvider implementation

        Raises:
            ValueError: If kind is not recognised
        """
        if kind == "capability":
            cls._logger.info("Using capability reachability provider (forced)")
            return CapabilityReachabilityProvider(service)

        if kind == "legacy":
            cls._logger.info("Using legacy reachability provider (forced)")
            return LegacyReachabilityProvider(service)

        if kind != "auto":
            raise ValueError(f"Unknown provider kind: {kind!r}")

        if service.supports_capability_api():
            cls._logger.info("Using capability reachability provider (auto-detected)")
            return CapabilityReachabilityProvider(service)

        cls._logger.info(
            "Capability API not supported on this platform, "
            "using legacy reachability provider",
        )
        return LegacyReachabilityProvider(service)

    @classmethod
    def create_checker(
        cls,
        service_mode: Optional[ServiceMode] = None,
        provider_kind: Optional[ProviderChoice] = None,
        config: Optional[ReachabilityConfig] = None,
    ):
        """
        Create a fully wired ReachabilityChecker.

        Args:
            service_mode: Overrides config.service_mode when given
            provider_kind: Overrides config.provider when given
            config: Configuration (None = load default config)

        Returns:
            ReachabilityChecker
        """
        # Imported here: the checker module imports this factory
        from reachability.controllers.reachability_checker import (
            ReachabilityChecker,
        )

        config = config or ReachabilityConfig()
        service = cls.create_service(
            mode=service_mode or config.service_mode,
            config=config,
        )
        provider = cls.create_provider(
            service,
            kind=provider_kind or config.provider,
        )
        return ReachabilityChecker(provider=provider)

    @classmethod
    def _create_system_service(
        cls,
        config: Optional[ReachabilityConfig],
    ) -> SystemConnectivityService:
        if config is None:
            return SystemConnectivityService()

        return SystemConnectivityService(
            route_table_path=config.route_table_path,
            ipv6_route_table_path=config.ipv6_route_table_path,
            use_network_manager=config.use_network_manager,
            nmcli_timeout=config.nmcli_timeout,
            ignored_interface_prefixes=config.ignored_interface_prefixes,
        )


# Convenience functions for quick creation


def create_provider(
    force_mock: bool = False,
    config: Optional[ReachabilityConfig] = None,
) -> ReachabilityProvider:
    """
    Quick provider creation following the reachability config.

    Args:
        force_mock: If True, always use the mock service (good for testing)
        config: Configuration (None = load default config)
    """
    config = config or ReachabilityConfig()
    mode = "mock" if force_mock else config.service_mode
    service = ReachabilityFactory.create_service(mode=mode, config=config)
    return ReachabilityFactory.create_provider(service, kind=config.provider)


def create_checker(force_mock: bool = False):
    """
    Quick checker creation with simple mock override.

    Args:
        force_mock: If True, always use the mock service (good for testing)

    Returns:
        ReachabilityChecker

    Example:
        checker = create_checker()
        if checker.is_internet_reachable():
            print("Online")
    """
    return ReachabilityFactory.create_checker(
        service_mode="mock" if force_mock else None,
    )
