"""
System Connectivity Service Tests

Runs the real service against scripted host state: routing tables written to
tmp_path and psutil interface queries replaced through monkeypatch.

To run:
    pytest tests/reachability/implementations/test_system_connectivity.py -v
"""

from types import SimpleNamespace

import pytest

from reachability.constants import NetworkCapability
from reachability.implementations import system_connectivity
from reachability.implementations.system_connectivity import (
    SystemConnectivityService,
)
from reachability.interfaces.connectivity_service_interface import (
    ConnectivityServiceError,
)
from reachability.models.network_state import NetworkHandle, NetworkInfo

IPV4_HEADER = (
    "Iface\tDestination\tGateway \tFlags\tRefCnt\tUse\tMetric\tMask\t\tMTU\tWindow\tIRTT\n"
)


def make_service(route_tables, use_network_manager=False, **tables):
    ipv4_path, ipv6_path = route_tables(**tables)
    return SystemConnectivityService(
        route_table_path=str(ipv4_path),
        ipv6_route_table_path=str(ipv6_path),
        use_network_manager=use_network_manager,
        ignored_interface_prefixes=["lo", "docker"],
    )


# =============================================================================
# ACTIVE NETWORK
# =============================================================================


@pytest.mark.unit
def test_active_network_is_lowest_metric_ipv4_route(route_tables, fake_psutil):
    service = make_service(route_tables)

    assert service.get_active_network() == NetworkHandle("eth0", "ipv4", 100)


@pytest.mark.unit
def test_active_network_falls_back_to_ipv6(route_tables, fake_psutil):
    service = make_service(route_tables, ipv4=IPV4_HEADER)

    assert service.get_active_network() == NetworkHandle("wlan0", "ipv6", 1024)


@pytest.mark.unit
def test_no_default_route_means_no_active_network(route_tables, fake_psutil):
    service = make_service(route_tables, ipv4=IPV4_HEADER, ipv6="")

    assert service.get_active_network() is None


@pytest.mark.unit
def test_missing_tables_read_as_empty(route_tables, fake_psutil):
    service = make_service(route_tables, ipv4=None, ipv6=None)

    assert service.get_active_network() is None
    assert service.supports_capability_api() is False


@pytest.mark.unit
def test_supports_capability_api_with_route_table(route_tables, fake_psutil):
    service = make_service(route_tables)

    assert service.supports_capability_api() is True


@pytest.mark.unit
def test_unreadable_table_raises(route_tables, fake_psutil, tmp_path):
    service = make_service(route_tables)
    # A directory cannot be read as a file
    service.route_table_path = tmp_path

    with pytest.raises(ConnectivityServiceError):
        service.get_active_network()


# =============================================================================
# CAPABILITIES
# =============================================================================


@pytest.mark.unit
def test_up_interface_with_address_has_internet(route_tables, fake_psutil):
    fake_psutil.add("eth0", up=True, addresses=["10.0.0.5", "fe80::1%eth0"])
    service = make_service(route_tables)

    capabilities = service.get_network_capabilities(NetworkHandle("eth0"))

    assert capabilities == frozenset({NetworkCapability.INTERNET})


@pytest.mark.unit
def test_link_local_only_has_no_internet(route_tables, fake_psutil):
    fake_psutil.add("eth0", up=True, addresses=["169.254.3.4", "fe80::1%eth0"])
    service = make_service(route_tables)

    assert service.get_network_capabilities(NetworkHandle("eth0")) == frozenset()


@pytest.mark.unit
def test_down_interface_has_no_capabilities(route_tables, fake_psutil):
    fake_psutil.add("eth0", up=False, addresses=["10.0.0.5"])
    service = make_service(route_tables)

    assert service.get_network_capabilities(NetworkHandle("eth0")) == frozenset()


@pytest.mark.unit
def test_unknown_interface_has_no_capability_info(route_tables, fake_psutil):
    service = make_service(route_tables)

    assert service.get_network_capabilities(NetworkHandle("eth9")) is None


@pytest.mark.unit
def test_psutil_failure_raises_service_error(route_tables, fake_psutil, monkeypatch):
    def broken():
        raise OSError("netlink unavailable")

    monkeypatch.setattr(system_connectivity.psutil, "net_if_stats", broken)
    service = make_service(route_tables)

    with pytest.raises(ConnectivityServiceError):
        service.get_network_capabilities(NetworkHandle("eth0"))
    assert service.is_available() is False


# =============================================================================
# NETWORKMANAGER
# =============================================================================


@pytest.fixture
def fake_nmcli(monkeypatch):
    """Pretend nmcli is installed; returns a setter for its output"""
    state = {"stdout": "full\n", "returncode": 0}

    def fake_run(cmd, **kwargs):
        assert cmd[0] == "/usr/bin/nmcli"
        assert "check" not in cmd
        return SimpleNamespace(
            returncode=state["returncode"],
            stdout=state["stdout"],
            stderr="",
        )

    monkeypatch.setattr(system_connectivity.shutil, "which", lambda name: "/usr/bin/nmcli")
    monkeypatch.setattr(system_connectivity.subprocess, "run", fake_run)
    return state


@pytest.mark.unit
def test_network_manager_full_adds_validated(route_tables, fake_psutil, fake_nmcli):
    fake_psutil.add("eth0", up=True, addresses=["10.0.0.5"])
    service = make_service(route_tables, use_network_manager=True)

    capabilities = service.get_network_capabilities(NetworkHandle("eth0"))

    assert capabilities == frozenset(
        {NetworkCapability.INTERNET, NetworkCapability.VALIDATED},
    )


@pytest.mark.unit
def test_network_manager_portal(route_tables, fake_psutil, fake_nmcli):
    fake_nmcli["stdout"] = "portal\n"
    fake_psutil.add("eth0", up=True, addresses=["10.0.0.5"])
    service = make_service(route_tables, use_network_manager=True)

    capabilities = service.get_network_capabilities(NetworkHandle("eth0"))

    assert NetworkCapability.CAPTIVE_PORTAL in capabilities
    assert NetworkCapability.VALIDATED not in capabilities


@pytest.mark.unit
def test_network_manager_state_needs_internet_interface(
    route_tables, fake_psutil, fake_nmcli,
):
    fake_psutil.add("eth0", up=True, addresses=["169.254.3.4"])
    service = make_service(route_tables, use_network_manager=True)

    assert service.get_network_capabilities(NetworkHandle("eth0")) == frozenset()


@pytest.mark.unit
def test_network_manager_failure_is_ignored(route_tables, fake_psutil, fake_nmcli):
    fake_nmcli["returncode"] = 8
    fake_psutil.add("eth0", up=True, addresses=["10.0.0.5"])
    service = make_service(route_tables, use_network_manager=True)

    capabilities = service.get_network_capabilities(NetworkHandle("eth0"))

    assert capabilities == frozenset({NetworkCapability.INTERNET})


# =============================================================================
# LEGACY INFO
# =============================================================================


@pytest.mark.unit
def test_legacy_info_prefers_connected_interface(route_tables, fake_psutil):
    fake_psutil.add("eth0", up=True, addresses=[])
    fake_psutil.add("wlan0", up=True, addresses=["192.168.1.20"])
    service = make_service(route_tables)

    assert service.get_active_network_info() == NetworkInfo("wlan0", True)


@pytest.mark.unit
def test_legacy_info_up_but_not_connected(route_tables, fake_psutil):
    fake_psutil.add("eth0", up=True, addresses=["fe80::2%eth0"])
    service = make_service(route_tables)

    assert service.get_active_network_info() == NetworkInfo("eth0", False)


@pytest.mark.unit
def test_legacy_info_ignores_loopback_and_virtual(route_tables, fake_psutil):
    fake_psutil.add("lo", up=True, addresses=["127.0.0.1"])
    fake_psutil.add("docker0", up=True, addresses=["172.17.0.1"])
    fake_psutil.add("eth0", up=False, addresses=["10.0.0.5"])
    service = make_service(route_tables)

    assert service.get_active_network_info() is None


@pytest.mark.unit
def test_missing_psutil_raises(monkeypatch, route_tables):
    monkeypatch.setattr(system_connectivity, "PSUTIL_AVAILABLE", False)

    with pytest.raises(ConnectivityServiceError):
        make_service(route_tables)
