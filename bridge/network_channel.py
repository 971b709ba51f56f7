"""
Network Channel

Wires the reachability checker onto a MethodChannel under the
"checkNetworkConnectivity" request name.
"""

import logging
from typing import Optional

from bridge.method_channel import MethodCall, MethodChannel
from config.settings import NETWORK_CHANNEL_NAME
from reachability.constants import CHECK_NETWORK_CONNECTIVITY
from reachability.controllers.reachability_checker import ReachabilityChecker

logger = logging.getLogger(__name__)


def create_network_channel(
    checker: Optional[ReachabilityChecker] = None,
    name: str = NETWORK_CHANNEL_NAME,
) -> MethodChannel:
    """
    Build the network channel.

    Args:
        checker: Reachability checker, or None to auto-create one
        name: Channel name

    Returns:
        MethodChannel answering checkNetworkConnectivity with a bool

    Example:
        channel = create_network_channel()
        result = channel.invoke("checkNetworkConnectivity")
        print(result.value)  # True / False
    """
    checker = checker or ReachabilityChecker()
    channel = MethodChannel(name)

    def check_network_connectivity(call: MethodCall) -> bool:
        is_reachable = checker.is_internet_reachable()
        logger.debug(f"{CHECK_NETWORK_CONNECTIVITY} -> {is_reachable}")
        return is_reachable

    channel.register(CHECK_NETWORK_CONNECTIVITY, check_network_connectivity)

    logger.info(
        f"Network channel '{name}' ready (provider: {checker.provider_name})",
    )
    return channel
