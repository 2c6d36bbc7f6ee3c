"""Topic-hash → text-signature resolution with an append-only cache.

`SignatureResolver` owns the signature cache. Lookups go to an injected
`ISignatureLookup` (normally `FourByteClient`); the first candidate returned by
the service wins. Failures (lookup errors, timeouts, empty results) resolve to
None and are not cached, so a later call retries.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass

from eventlens.core.config import ResolverConfig
from eventlens.core.interfaces import ISignatureLookup

logger = logging.getLogger(__name__)


def normalize_hash(topic_hash: str) -> str:
    """Lowercase and 0x-prefix a topic hash."""
    h = topic_hash.strip().lower()
    return h if h.startswith("0x") else "0x" + h


@dataclass(kw_only=True)
class ResolverStats:
    """Counters for cache effectiveness and lookup health."""

    cache_hits: int = 0
    lookups: int = 0
    unresolved: int = 0
    failures: int = 0


class SignatureResolver:
    """Resolve topic hashes to text signatures.

    The cache maps a normalized hash to the tuple of candidates returned by the
    lookup; `resolve` returns the first one. Concurrent requests for the same
    hash share one in-flight lookup, and at most `config.concurrency` lookups
    run at once.
    """

    def __init__(self, lookup: ISignatureLookup, config: ResolverConfig | None = None) -> None:
        self._lookup = lookup
        self._config = config or ResolverConfig()
        self._cache: dict[str, tuple[str, ...]] = {}
        self._inflight: dict[str, asyncio.Future[tuple[str, ...]]] = {}
        self._sem = asyncio.Semaphore(max(1, self._config.concurrency))
        self.stats = ResolverStats()

    # ---------- cache ----------

    def preload(self, signatures: Mapping[str, str]) -> None:
        """Seed the cache with known {topic hash: signature} pairs."""
        for topic_hash, signature in signatures.items():
            self._cache[normalize_hash(topic_hash)] = (signature,)

    def cached(self, topic_hash: str) -> str | None:
        """Return the cached signature for a hash without querying."""
        candidates = self._cache.get(normalize_hash(topic_hash))
        return candidates[0] if candidates else None

    def __len__(self) -> int:
        return len(self._cache)

    # ---------- lookups ----------

    async def _fetch(self, key: str) -> tuple[str, ...]:
        async with self._sem:
            self.stats.lookups += 1
            try:
                candidates = await asyncio.wait_for(self._lookup.lookup(key), timeout=self._config.timeout_s)
            except asyncio.TimeoutError:
                self.stats.failures += 1
                logger.warning("Signature lookup for %s timed out after %.1fs", key, self._config.timeout_s)
                return ()
            except Exception as e:  # CancelledError is a BaseException and still propagates
                self.stats.failures += 1
                logger.warning("Failed to fetch signature for topic %s: %s: %s", key, type(e).__name__, e)
                return ()

        found = tuple(candidates)
        if found:
            if len(found) > 1:
                logger.debug("Topic %s has %d candidate signatures, using %r", key, len(found), found[0])
            self._cache[key] = found
        else:
            self.stats.unresolved += 1
            if self._config.cache_unresolved:
                self._cache[key] = ()
        return found

    async def resolve_candidates(self, topic_hash: str) -> list[str]:
        """Return every candidate signature for a hash (may be empty)."""
        key = normalize_hash(topic_hash)
        if key in self._cache:
            self.stats.cache_hits += 1
            return list(self._cache[key])

        fut = self._inflight.get(key)
        if fut is None:
            fut = asyncio.ensure_future(self._fetch(key))
            self._inflight[key] = fut
            fut.add_done_callback(lambda _f: self._inflight.pop(key, None))
        return list(await asyncio.shield(fut))

    async def resolve(self, topic_hash: str) -> str | None:
        """Return the first candidate signature for a hash, or None."""
        candidates = await self.resolve_candidates(topic_hash)
        return candidates[0] if candidates else None

    async def resolve_many(self, topic_hashes: Iterable[str]) -> dict[str, str | None]:
        """Resolve distinct hashes concurrently; keys are normalized hashes."""
        keys = list(dict.fromkeys(normalize_hash(h) for h in topic_hashes))
        results = await asyncio.gather(*(self.resolve(k) for k in keys))
        return dict(zip(keys, results))
