"""Result cache - cache-aside wrapper around lookup calls.

Results are stored as JSON under ``<prefix><query kind>:<query>`` so
several applications can share one store. Store failures surface as
CacheError and are never mistaken for an empty result.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from typing import Callable, List, Optional, Union

from ..domain.errors import CacheError
from ..domain.models import Query, Result
from ..ports.cache import CacheStorePort


@dataclass
class ResultCache:
    """Cache-aside wrapper binding a store to a key prefix.

    Attributes:
        store: Backing key/value store
        prefix: Namespace prepended to every key
    """

    store: CacheStorePort
    prefix: str = ""

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def key_for(self, query: Query) -> str:
        return f"{self.prefix}{query.kind.value}:{query.cache_repr}"

    def fetch_or_compute(
        self, query: Query, compute: Callable[[], List[Result]]
    ) -> List[Result]:
        """Return cached results for the query, or compute and store them.

        Two callers missing at the same time both compute and both write;
        the second write overwrites the first with an equal value.

        Raises:
            CacheError: If the store cannot be read or written, or holds
                an undecodable payload.
        """
        key = self.key_for(query)
        payload = self._read(key)
        if payload is not None:
            self._logger.debug("Cache hit", extra={"key": key})
            return self._decode(key, payload)

        self._logger.debug("Cache miss, computing", extra={"key": key})
        results = compute()
        self._write(key, self._encode(results))
        return results

    def invalidate(self, query: Query) -> bool:
        """Remove the cached results for a query, if any."""
        key = self.key_for(query)
        try:
            return self.store.invalidate(key)
        except Exception as e:
            raise CacheError(
                "Cache invalidate failed", cause=e, key=key, operation="invalidate"
            ) from e

    def clear(self) -> int:
        """Remove every result stored under this cache's prefix.

        Returns:
            Number of entries removed.
        """
        try:
            return self.store.clear(self.prefix)
        except Exception as e:
            raise CacheError(
                "Cache clear failed", cause=e, key=self.prefix, operation="clear"
            ) from e

    def _read(self, key: str) -> Optional[Union[str, bytes]]:
        try:
            return self.store.get(key)
        except Exception as e:
            raise CacheError("Cache read failed", cause=e, key=key, operation="read") from e

    def _write(self, key: str, payload: str) -> None:
        try:
            self.store.set(key, payload)
        except Exception as e:
            raise CacheError("Cache write failed", cause=e, key=key, operation="write") from e

    @staticmethod
    def _encode(results: List[Result]) -> str:
        return json.dumps([result.to_dict() for result in results], sort_keys=True)

    @staticmethod
    def _decode(key: str, payload: Union[str, bytes]) -> List[Result]:
        try:
            if isinstance(payload, bytes):
                payload = payload.decode("utf-8")
            return [Result.from_dict(item) for item in json.loads(payload)]
        except (ValueError, KeyError, TypeError) as e:
            raise CacheError(
                "Cached payload is not a result list", cause=e, key=key, operation="decode"
            ) from e
