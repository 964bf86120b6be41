"""
Caching utility module for the YouTube insights tool server.
"""

import hashlib
from collections import OrderedDict
from threading import Lock
from typing import Any, Callable, Generic, TypeVar

from yt_insights.config import config
from yt_insights.utils.logger import logging

T = TypeVar("T")


def credential_cache_key(credential: str) -> str:
    """Hash a credential so the raw key is never held as a cache key."""
    return hashlib.sha256(credential.encode("utf-8")).hexdigest()


class ClientCache(Generic[T]):
    """
    Least-recently-used cache of API clients keyed by credential.

    One client is kept per distinct API key; once ``maxsize`` keys are
    held, the least recently used client is dropped.
    """

    def __init__(self, maxsize: int = config.CLIENT_CACHE_SIZE):
        if maxsize < 1:
            raise ValueError("maxsize must be at least 1")
        self.maxsize = maxsize
        self._clients: "OrderedDict[str, T]" = OrderedDict()
        self._lock = Lock()

    def get_or_create(self, credential: str, factory: Callable[[str], T]) -> T:
        """
        Get the client for a credential, creating it on first use.

        Args:
            credential: API key the client authenticates with
            factory: Builds a client from the credential

        Returns:
            The cached or newly created client
        """
        key = credential_cache_key(credential)
        with self._lock:
            client = self._clients.get(key)
            if client is not None:
                self._clients.move_to_end(key)
                return client

            client = factory(credential)
            self._clients[key] = client
            if len(self._clients) > self.maxsize:
                self._clients.popitem(last=False)
                logging.debug("Evicted least recently used API client")
            return client

    def __contains__(self, credential: Any) -> bool:
        return isinstance(credential, str) and credential_cache_key(credential) in self._clients

    def __len__(self) -> int:
        return len(self._clients)

    def clear(self):
        """Drop every cached client."""
        with self._lock:
            self._clients.clear()
