"""
Connections module.

The professional graph: requests, acceptance, rejection, removal and
suggestions.

Public API:
- IConnectionService: Interface for graph operations
- ConnectionStatus, ConnectionRecord, ConnectionView, ConnectionRequestView
- ConnectionRepository: Data access for the connections table
"""

from .interfaces import IConnectionService
from .models import (
    ConnectionRecord,
    ConnectionRequestView,
    ConnectionStatus,
    ConnectionView,
)
from .repository import ConnectionRepository

__all__ = [
    "IConnectionService",
    "ConnectionRecord",
    "ConnectionRequestView",
    "ConnectionStatus",
    "ConnectionView",
    "ConnectionRepository",
]
