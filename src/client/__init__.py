"""State-container client for the Devlink API."""

from client.actions import ThunkContext
from client.api import ApiClient, ApiError
from client.app import connect
from client.session import FileTokenStorage, MemoryTokenStorage, Session
from client.reducers import create_store
from client.store import Action, Store

__all__ = [
    "Action",
    "ApiClient",
    "ApiError",
    "FileTokenStorage",
    "MemoryTokenStorage",
    "Session",
    "Store",
    "ThunkContext",
    "connect",
    "create_store",
]
