"""Hypermedia document cache.

Holds decoded hypermedia documents keyed by home URI, so several clients
for the same endpoint only fetch the document once. The cache is owned by
whoever creates the clients; nothing in the library keeps a global one.
"""

import copy
import logging
import threading
from typing import Any

logger = logging.getLogger(__name__)


class HypermediaCache:
    """Thread-safe in-memory store of hypermedia documents.

    Usage:
        cache = HypermediaCache()
        client_a = TourismClient(home_uri, cache=cache)  # fetches
        client_b = TourismClient(home_uri, cache=cache)  # reuses
    """

    def __init__(self) -> None:
        self._documents: dict[str, Any] = {}
        self._lock = threading.Lock()

    def get(self, home_uri: str) -> Any | None:
        """Get a copy of the cached document for a home URI, or None."""
        with self._lock:
            document = self._documents.get(home_uri)
        if document is None:
            return None
        logger.debug("[CACHE] Hit: %s", home_uri)
        return copy.deepcopy(document)

    def put(self, home_uri: str, document: Any) -> None:
        """Store a decoded document under its home URI."""
        with self._lock:
            self._documents[home_uri] = copy.deepcopy(document)
        logger.debug("[CACHE] Stored: %s", home_uri)

    def remove(self, home_uri: str) -> None:
        with self._lock:
            self._documents.pop(home_uri, None)

    def clear(self) -> None:
        """Clear all cached documents."""
        with self._lock:
            self._documents.clear()
        logger.debug("[CACHE] Cleared")

    def __contains__(self, home_uri: object) -> bool:
        with self._lock:
            return home_uri in self._documents

    def __len__(self) -> int:
        with self._lock:
            return len(self._documents)
