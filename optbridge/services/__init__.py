"""
Service implementations for optbridge.
"""

from .logging import OptBridgeLogger

__all__ = [
    "OptBridgeLogger",
]
