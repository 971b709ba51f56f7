"""
Bridge Module

Request/response dispatch for callers outside the Python process.

Public API:
    - MethodChannel: Request-handler registry
    - MethodCall / MethodResult / ResultStatus: Call and response types
    - create_network_channel: Channel exposing checkNetworkConnectivity

Usage:
    from bridge import create_network_channel

    channel = create_network_channel()
    result = channel.invoke("checkNetworkConnectivity")
"""

from bridge.method_channel import (
    HANDLER_ERROR,
    MethodCall,
    MethodChannel,
    MethodResult,
    ResultStatus,
)
from bridge.network_channel import create_network_channel

__all__ = [
    "HANDLER_ERROR",
    "MethodCall",
    "MethodChannel",
    "MethodResult",
    "ResultStatus",
    "create_network_channel",
]
