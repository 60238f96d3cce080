"""MongoDB client lifecycle"""

from .client import close_client, get_client, get_database, init_client, reset_client

__all__ = [
    "close_client",
    "get_client",
    "get_database",
    "init_client",
    "reset_client",
]
