"""
Name: MongoDB Client

Responsibilities:
  - Manage MongoClient lifecycle (init, get, close)
  - Provide singleton client and database handles

Collaborators:
  - pymongo: MongoClient (owns connection pooling)
  - config: host, port, database name, timeouts

Constraints:
  - Singleton pattern (one client per process)
  - Must init before use, close on shutdown

Notes:
  - MongoClient connects lazily; init does not block on the server
  - Thread-safe
"""

import threading
from typing import Optional

from pymongo import MongoClient
from pymongo.database import Database

from ...logger import logger


# R: Singleton client instance
_client: Optional[MongoClient] = None
_client_lock = threading.Lock()


def init_client(
    host: str,
    port: int,
    server_selection_timeout_ms: int,
) -> MongoClient:
    """
    R: Initialize the Mongo client.

    Args:
        host: MongoDB host address
        port: MongoDB port
        server_selection_timeout_ms: How long operations wait for a server

    Returns:
        Initialized MongoClient

    Raises:
        RuntimeError: If client already initialized
    """
    global _client

    with _client_lock:
        if _client is not None:
            raise RuntimeError("Mongo client already initialized")

        logger.info(
            "Initializing Mongo client",
            extra={"mongo_host": host, "mongo_port": port},
        )

        _client = MongoClient(
            host=host,
            port=port,
            serverSelectionTimeoutMS=server_selection_timeout_ms,
        )

        return _client


def get_client() -> MongoClient:
    """
    R: Get the Mongo client singleton.

    Raises:
        RuntimeError: If client not initialized
    """
    if _client is None:
        raise RuntimeError("Mongo client not initialized. Call init_client() first.")
    return _client


def get_database(name: str) -> Database:
    """R: Database handle from the singleton client."""
    return get_client()[name]


def close_client() -> None:
    """
    R: Close the Mongo client.

    Safe to call even if client not initialized.
    """
    global _client

    with _client_lock:
        if _client is not None:
            logger.info("Closing Mongo client")
            _client.close()
            _client = None


def reset_client() -> None:
    """
    R: Reset client for testing.

    Closes existing client if any, allowing re-initialization.
    """
    global _client

    with _client_lock:
        if _client is not None:
            _client.close()
        _client = None
