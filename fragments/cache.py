# SPDX-License-Identifier: MIT
#
#  █████╗ ██████╗  █████╗ ███████╗
# ██╔══██╗██╔══██╗██╔══██╗██╔════╝
# ███████║██████╔╝███████║███████╗
# ██╔══██║██╔══██╗██╔══██║╚════██║
# ██║  ██║██║  ██║██║  ██║███████║
# ╚═╝  ╚═╝╚═╝  ╚═╝╚═╝  ╚═╝╚══════╝
# Copyright (C) 2026 Riza Emre ARAS <r.emrearas@proton.me>
#
# Licensed under the MIT License.
# See LICENSE and THIRD_PARTY_LICENSES for details.

"""Resource cache — every triple about one subject, kept for a short window.

Entries are replaced whole on re-fetch, never merged, so concurrent
lookups can only ever observe a complete entry. Concurrent misses for the
same subject are not coalesced: each fetches, last write wins.
"""

from __future__ import annotations

import time
from collections.abc import Callable
from dataclasses import dataclass

from fragments.fetcher import FragmentFetcher
from fragments.logger import RequestStats, get_logger
from fragments.tpf.codec import Triple

log = get_logger(__name__)

DEFAULT_TTL = 30.0


@dataclass(frozen=True, slots=True)
class CacheEntry:
    triples: tuple[Triple, ...]
    fetched_at: float


class ResourceCache:
    def __init__(
        self,
        fetcher: FragmentFetcher,
        ttl: float = DEFAULT_TTL,
        clock: Callable[[], float] = time.time,
        stats: RequestStats | None = None,
    ) -> None:
        self.fetcher = fetcher
        self.ttl = ttl
        self.clock = clock
        self.stats = stats if stats is not None else fetcher.stats
        self._entries: dict[str, CacheEntry] = {}

    def _valid(self, entry: CacheEntry | None) -> bool:
        if entry is None:
            return False
        return self.clock() - entry.fetched_at < self.ttl

    def __contains__(self, iri: str) -> bool:
        return self._valid(self._entries.get(iri))

    def __len__(self) -> int:
        return len(self._entries)

    def invalidate(self, iri: str | None = None) -> None:
        """Drop one entry, or all of them when ``iri`` is None."""
        if iri is None:
            self._entries.clear()
        else:
            self._entries.pop(iri, None)

    def _evict_expired(self) -> None:
        """Forget entries past their window so the map tracks live subjects."""
        stale = [iri for iri, entry in self._entries.items() if not self._valid(entry)]
        for iri in stale:
            del self._entries[iri]
        self.stats.cache.evicted += len(stale)

    async def lookup(self, iri: str) -> list[Triple]:
        """Return all (filtered) triples with ``iri`` as subject."""
        entry = self._entries.get(iri)
        if self._valid(entry):
            self.stats.cache.hit += 1
            log.debug("Cache hit: %s", iri)
            return list(entry.triples)

        self.stats.cache.miss += 1
        self._evict_expired()
        triples = await self.fetcher.query(subject=iri)
        self._entries[iri] = CacheEntry(triples=tuple(triples), fetched_at=self.clock())
        return triples
