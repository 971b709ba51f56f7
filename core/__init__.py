"""
Core utilities and modules.

Public API:
    - setup_logging: Console + rotating file logging

Usage:
    from core import setup_logging

    setup_logging(level="DEBUG")
"""

from core.logging_config import setup_logging

__all__ = [
    "setup_logging",
]
