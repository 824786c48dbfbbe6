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

"""Fragment fetcher — paginated triple pattern queries.

A logical query walks pages 1, 2, ... while the server keeps declaring a
hydra next page, merges them in page order, then drops hypermedia control
and void metadata triples. Filtering happens once, after the walk, because
the next-page marker is itself a control triple.
"""

from __future__ import annotations

from fragments.logger import RequestStats, get_logger
from fragments.namespaces import CONTROL_PREFIXES, NEXT_PAGE
from fragments.tpf.codec import Triple, is_control, parse_triples
from fragments.tpf.querystring import build_url
from fragments.tpf.transport import Transport

log = get_logger(__name__)

DEFAULT_ACCEPT = "application/n-triples; charset=utf-8"


def _has_next_page(triples: list[Triple]) -> bool:
    return any(t.predicate == NEXT_PAGE for t in triples)


class FragmentFetcher:
    """Issues triple pattern requests against one endpoint."""

    def __init__(
        self,
        endpoint: str,
        transport: Transport,
        accept: str = DEFAULT_ACCEPT,
        stats: RequestStats | None = None,
    ) -> None:
        self.endpoint = endpoint
        self.transport = transport
        self.accept = accept
        self.stats = stats if stats is not None else RequestStats()

    def useful(self, triples: list[Triple]) -> list[Triple]:
        """Drop control/metadata triples, keeping order."""
        return [t for t in triples if not is_control(t, CONTROL_PREFIXES)]

    async def fetch_page(
        self,
        subject: str | None = None,
        predicate: str | None = None,
        obj: str | None = None,
        page: int = 1,
    ) -> list[Triple]:
        """Fetch and parse one page, unfiltered."""
        url = build_url(self.endpoint, subject, predicate, obj, page)
        try:
            body = await self.transport.fetch(url, {"Accept": self.accept})
        except Exception:
            self.stats.pages.failed += 1
            raise
        self.stats.pages.ok += 1

        triples = parse_triples(body)
        log.info("Fragment page %d → %d triples (%s)", page, len(triples), url)
        return triples

    async def query(
        self,
        subject: str | None = None,
        predicate: str | None = None,
        obj: str | None = None,
        page: int | None = None,
    ) -> list[Triple]:
        """Return the filtered triples matching a pattern.

        With ``page`` >= 1 only that page is fetched; otherwise every page
        is fetched and merged.
        """
        if page is not None and page >= 1:
            return self.useful(await self.fetch_page(subject, predicate, obj, page))

        merged: list[Triple] = []
        current = 1
        while True:
            triples = await self.fetch_page(subject, predicate, obj, current)
            merged.extend(triples)
            if not _has_next_page(triples):
                break
            current += 1

        if current > 1:
            log.info("Merged %d pages → %d triples", current, len(merged))
        return self.useful(merged)
