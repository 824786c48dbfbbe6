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

"""Client for one Triple Pattern Fragments endpoint.

The client owns its configuration, transport, fetcher, cache and request
statistics. Build one per endpoint and share it between queries; the
cache is the only state queries share.
"""

from __future__ import annotations

import time
from collections.abc import Callable

from fragments.cache import ResourceCache
from fragments.config import ClientConfig
from fragments.fetcher import FragmentFetcher
from fragments.logger import RequestStats, get_logger
from fragments.namespaces import iri_reference
from fragments.query import PathQuery
from fragments.tpf.codec import Triple, decode_literal
from fragments.tpf.transport import Transport, UrllibTransport

log = get_logger(__name__)


def as_reference(iri: str) -> str:
    """Bracket a bare IRI; leave references and literals alone."""
    if iri.startswith("<") or iri.startswith('"'):
        return iri
    return iri_reference(iri)


class Client:
    """Caching, fluent client for a TPF server.

    Example:

        client = Client("https://vivo.example.org/tpf/core")
        names = await client.instances(FOAF + "Person").link(RDFS, "label").results()
    """

    def __init__(
        self,
        endpoint: str,
        transport: Transport | None = None,
        *,
        timeout: int = 30,
        accept: str | None = None,
        ttl: float | None = None,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self.endpoint = endpoint
        self.stats = RequestStats()
        self.transport = transport if transport is not None else UrllibTransport(timeout)
        fetcher_kwargs = {"accept": accept} if accept else {}
        self.fetcher = FragmentFetcher(endpoint, self.transport, stats=self.stats, **fetcher_kwargs)
        cache_kwargs = {"ttl": ttl} if ttl is not None else {}
        self.cache = ResourceCache(self.fetcher, clock=clock, stats=self.stats, **cache_kwargs)

    @classmethod
    def from_config(cls, config: ClientConfig, transport: Transport | None = None) -> Client:
        return cls(
            config.endpoint,
            transport,
            timeout=config.timeout,
            accept=config.accept_header,
            ttl=config.cache.ttl_seconds,
        )

    def entity(self, iri: str) -> PathQuery:
        """Start a path query at one resource."""
        return PathQuery(self, [as_reference(iri)])

    def instances(self, type_iri: str) -> PathQuery:
        """Start a path query at every resource of ``type_iri``."""
        return PathQuery(self, []).instances(type_iri)

    async def query(
        self,
        subject: str | None = None,
        predicate: str | None = None,
        obj: str | None = None,
        page: int | None = None,
    ) -> list[Triple]:
        """Raw triple pattern query: merged, filtered triples. Not cached."""
        return await self.fetcher.query(subject, predicate, obj, page)

    async def subject_map(
        self,
        subject: str | None = None,
        predicate: str | None = None,
        obj: str | None = None,
    ) -> dict[str, list[str]]:
        """Group a pattern's decoded objects by subject, in server order."""
        grouped: dict[str, list[str]] = {}
        for t in await self.query(subject, predicate, obj):
            grouped.setdefault(t.subject, []).append(decode_literal(t.object))
        return grouped

    async def lookup(self, iri: str) -> list[Triple]:
        """Cached triples about one resource."""
        return await self.cache.lookup(as_reference(iri))
