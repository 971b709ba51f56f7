"""
Reachability Test Configuration and Fixtures

Shared fixtures for reachability module tests.
"""

import socket
from types import SimpleNamespace

import pytest

from reachability.controllers.reachability_checker import ReachabilityChecker
from reachability.implementations.capability_provider import (
    CapabilityReachabilityProvider,
)
from reachability.implementations.legacy_provider import LegacyReachabilityProvider
from reachability.implementations.mock_connectivity import MockConnectivityService

# =============================================================================
# SAMPLE ROUTING TABLES
# =============================================================================

IPV4_ROUTE_TABLE = (
    "Iface\tDestination\tGateway \tFlags\tRefCnt\tUse\tMetric\tMask\t\tMTU\tWindow\tIRTT\n"
    "wlan0\t00000000\t0101A8C0\t0003\t0\t0\t600\t00000000\t0\t0\t0\n"
    "eth0\t00000000\t0100000A\t0003\t0\t0\t100\t00000000\t0\t0\t0\n"
    "eth0\t0000000A\t00000000\t0001\t0\t0\t100\t00FFFFFF\t0\t0\t0\n"
)

IPV4_NO_DEFAULT_TABLE = (
    "Iface\tDestination\tGateway \tFlags\tRefCnt\tUse\tMetric\tMask\t\tMTU\tWindow\tIRTT\n"
    "eth0\t0000000A\t00000000\t0001\t0\t0\t100\t00FFFFFF\t0\t0\t0\n"
)

IPV6_ROUTE_TABLE = (
    "00000000000000000000000000000000 00 00000000000000000000000000000000 00 "
    "fe800000000000000000000000000001 00000400 00000001 00000000 00000003     wlan0\n"
    "00000000000000000000000000000000 00 00000000000000000000000000000000 00 "
    "00000000000000000000000000000000 ffffffff 00000001 00000000 00200200       lo\n"
)

# =============================================================================
# CONNECTIVITY SERVICE FIXTURES
# =============================================================================


@pytest.fixture
def mock_service():
    """
    Provide a fresh MockConnectivityService (Wi-Fi with internet).

    Usage:
        def test_offline(mock_service):
            mock_service.set_no_network()
    """
    service = MockConnectivityService()
    yield service
    service.cleanup()


@pytest.fixture
def legacy_service():
    """MockConnectivityService behaving like an old platform"""
    service = MockConnectivityService(capability_api_supported=False)
    yield service
    service.cleanup()


# =============================================================================
# PROVIDER / CHECKER FIXTURES
# =============================================================================


@pytest.fixture
def capability_provider(mock_service):
    return CapabilityReachabilityProvider(mock_service)


@pytest.fixture
def legacy_provider(legacy_service):
    return LegacyReachabilityProvider(legacy_service)


@pytest.fixture
def checker(capability_provider):
    """
    Provide ReachabilityChecker on the capability provider + mock service.

    Usage:
        def test_online(checker):
            assert checker.is_internet_reachable() is True
    """
    return ReachabilityChecker(provider=capability_provider)


# =============================================================================
# HOST STATE FIXTURES
# =============================================================================


@pytest.fixture
def route_tables(tmp_path):
    """
    Write routing tables into tmp_path.

    Returns a function: write(ipv4=..., ipv6=...) -> (ipv4_path, ipv6_path).
    Pass None to leave a table missing.
    """

    def write(ipv4=IPV4_ROUTE_TABLE, ipv6=IPV6_ROUTE_TABLE):
        ipv4_path = tmp_path / "route"
        ipv6_path = tmp_path / "ipv6_route"
        if ipv4 is not None:
            ipv4_path.write_text(ipv4)
        if ipv6 is not None:
            ipv6_path.write_text(ipv6)
        return ipv4_path, ipv6_path

    return write


@pytest.fixture
def fake_psutil(monkeypatch):
    """
    Replace psutil's interface queries with scripted data.

    Usage:
        def test_x(fake_psutil):
            fake_psutil.add("eth0", up=True, addresses=["10.0.0.5"])
    """
    from reachability.implementations import system_connectivity

    class FakeInterfaces:
        def __init__(self):
            self.stats = {}
            self.addrs = {}

        def add(self, name, up=True, addresses=()):
            self.stats[name] = SimpleNamespace(isup=up)
            self.addrs[name] = [
                SimpleNamespace(
                    family=socket.AF_INET6 if ":" in address else socket.AF_INET,
                    address=address,
                )
                for address in addresses
            ]

    fake = FakeInterfaces()
    monkeypatch.setattr(system_connectivity.psutil, "net_if_stats", lambda: fake.stats)
    monkeypatch.setattr(system_connectivity.psutil, "net_if_addrs", lambda: fake.addrs)
    return fake
