"""Entra ID adapter - Microsoft Graph backed directory reader."""

from .graph_client import GraphAuthenticationError, GraphClient, GraphClientConfig
from .repository import EntraIdDirectoryRepository

__all__ = [
    "EntraIdDirectoryRepository",
    "GraphAuthenticationError",
    "GraphClient",
    "GraphClientConfig",
]
