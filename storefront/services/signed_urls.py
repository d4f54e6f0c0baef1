"""
Signed URL service

Turns stored object keys into time-limited download URLs. Signing calls
share one semaphore so a large product page cannot fan out without bound,
and URLs are reused for the same key within one cache bucket.
"""

import asyncio
import time
from typing import Callable, Dict, Iterable, List, Optional, Tuple
import structlog

from storefront.services.object_storage import ObjectStorage

logger = structlog.get_logger(__name__)

PASSTHROUGH_PREFIXES = ("http://", "https://", "/")


class SignedUrlService:
    """Bounded-concurrency, briefly cached presigned URL generation"""

    def __init__(
        self,
        storage: ObjectStorage,
        expires_in: int = 3600,
        cache_seconds: int = 60,
        max_concurrency: int = 8,
        clock: Callable[[], float] = time.time,
    ):
        self.storage = storage
        self.expires_in = expires_in
        self.cache_seconds = cache_seconds
        self.clock = clock
        self._semaphore = asyncio.Semaphore(max_concurrency)
        self._cache: Dict[Tuple[str, int], str] = {}
        self._current_bucket: Optional[int] = None

    def _bucket(self) -> int:
        if self.cache_seconds <= 0:
            return int(self.clock())
        return int(self.clock() // self.cache_seconds)

    def _cached(self, key: str, bucket: int) -> Optional[str]:
        if self.cache_seconds <= 0:
            return None
        if bucket != self._current_bucket:
            # Entries from older buckets are never read again
            self._cache.clear()
            self._current_bucket = bucket
        return self._cache.get((key, bucket))

    async def sign(self, key: Optional[str]) -> Optional[str]:
        """
        Get a download URL for a stored key.

        Returns None for empty keys or when signing fails. Absolute URLs and
        site paths are returned unchanged.
        """
        if not key:
            return None
        if key.startswith(PASSTHROUGH_PREFIXES):
            return key

        bucket = self._bucket()
        cached = self._cached(key, bucket)
        if cached is not None:
            return cached

        async with self._semaphore:
            try:
                url = await asyncio.to_thread(self.storage.presign_get, key, self.expires_in)
            except Exception as e:
                logger.error(f"Error signing URL for {key}: {e}")
                return None

        if self.cache_seconds > 0:
            self._cache[(key, bucket)] = url
        return url

    async def sign_many(self, keys: Iterable[Optional[str]]) -> List[Optional[str]]:
        """Sign keys concurrently, preserving order"""
        return list(await asyncio.gather(*(self.sign(key) for key in keys)))
