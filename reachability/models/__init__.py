"""
Reachability Models Package

Exposes the immutable network state data classes.
"""

from reachability.models.network_state import (
    NetworkCapabilitySnapshot,
    NetworkHandle,
    NetworkInfo,
)

# Public API (sorted alphabetically)
__all__ = [
    "NetworkCapabilitySnapshot",
    "NetworkHandle",
    "NetworkInfo",
]
