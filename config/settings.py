"""
Central Configuration File

ALL configuration values live here. This is the single source of truth.

Guidelines:
- Override any value through the environment or a .env file
- Import these settings in modules: from config.settings import NMCLI_TIMEOUT
- Per-deployment overrides can also go in config/reachability.yaml
  (see reachability/config.py)
"""

import os

from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

# =============================================================================
# REACHABILITY CONFIGURATION
# =============================================================================

# Which OS connectivity service to use: auto, real, mock
# "auto" uses the real service when psutil is importable, mock otherwise
REACHABILITY_SERVICE_MODE = os.getenv("REACHABILITY_SERVICE_MODE", "auto")

# Which provider variant to use: auto, capability, legacy
# "auto" picks the capability provider when the platform supports it
REACHABILITY_PROVIDER = os.getenv("REACHABILITY_PROVIDER", "auto")

# Kernel routing tables (Linux procfs)
ROUTE_TABLE_PATH = os.getenv("ROUTE_TABLE_PATH", "/proc/net/route")
IPV6_ROUTE_TABLE_PATH = os.getenv("IPV6_ROUTE_TABLE_PATH", "/proc/net/ipv6_route")

# NetworkManager integration (reads cached state only, never "check")
NMCLI_ENABLED = os.getenv("NMCLI_ENABLED", "true").lower() in ("1", "true", "yes")
NMCLI_TIMEOUT = float(os.getenv("NMCLI_TIMEOUT", "1.0"))  # seconds

# Interfaces never considered an active network (prefix match)
# Virtual bridges come up with addresses even when the host is offline
IGNORED_INTERFACE_PREFIXES = [
    prefix.strip()
    for prefix in os.getenv(
        "IGNORED_INTERFACE_PREFIXES",
        "lo,docker,veth,virbr,br-",
    ).split(",")
    if prefix.strip()
]

# =============================================================================
# BRIDGE CONFIGURATION
# =============================================================================

# Name of the method channel exposing the network check
NETWORK_CHANNEL_NAME = os.getenv("NETWORK_CHANNEL_NAME", "reachability/network")

# =============================================================================
# LOGGING CONFIGURATION
# =============================================================================

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
LOG_DIR = os.getenv("LOG_DIR", "/var/log/reachability")
LOG_FILE = os.getenv("LOG_FILE", "reachability.log")
