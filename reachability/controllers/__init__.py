"""
Reachability Controllers Package
"""

from reachability.controllers.reachability_checker import ReachabilityChecker

__all__ = [
    "ReachabilityChecker",
]
