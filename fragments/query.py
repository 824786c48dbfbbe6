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

"""Path query engine — deferred, chainable traversal over fragments.

A query holds a frontier (the resources currently under consideration)
and a FIFO queue of steps. Builder calls only enqueue steps; a terminal
call drains the queue, one step at a time, then decodes the frontier.

Steps are plain tagged values interpreted by ``evaluate``:

    ListSeed(type)    frontier := every subject typed ``type``
    Expand(pred)      frontier := objects of ``pred`` for each member
    FilterType(type)  frontier := members typed ``type``

Example — all emails of a person via vcard:

    await (client.entity("<https://vivo.example.org/individual/n007>")
           .link(OBO, "ARG_2000028")
           .link(VCARD, "hasEmail")
           .link(VCARD, "email")
           .results(print))
"""

from __future__ import annotations

import asyncio
import inspect
from collections import deque
from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from fragments.cache import ResourceCache
from fragments.fetcher import FragmentFetcher
from fragments.logger import get_logger
from fragments.namespaces import RDF_TYPE, iri_reference
from fragments.tpf.codec import Triple, decode_literal

if TYPE_CHECKING:
    from fragments.client import Client

log = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class ListSeed:
    type_iri: str


@dataclass(frozen=True, slots=True)
class Expand:
    predicate: str


@dataclass(frozen=True, slots=True)
class FilterType:
    type_iri: str


Step = ListSeed | Expand | FilterType


async def _lookup_all(cache: ResourceCache, frontier: list[str]) -> list[list[Triple]]:
    """Fan out one lookup per member; results come back in frontier order."""
    if not frontier:
        return []
    return list(await asyncio.gather(*(cache.lookup(iri) for iri in frontier)))


async def evaluate(
    step: Step,
    frontier: list[str],
    fetcher: FragmentFetcher,
    cache: ResourceCache,
) -> list[str]:
    """Run one step against ``frontier`` and return the next frontier."""
    if isinstance(step, ListSeed):
        instances = await fetcher.query(predicate=RDF_TYPE, obj=step.type_iri)
        return [t.subject for t in instances]

    if isinstance(step, Expand):
        per_subject = await _lookup_all(cache, frontier)
        return [
            t.object
            for triples in per_subject
            for t in triples
            if t.predicate == step.predicate
        ]

    if isinstance(step, FilterType):
        per_subject = await _lookup_all(cache, frontier)
        return [
            t.subject
            for triples in per_subject
            for t in triples
            if t.predicate == RDF_TYPE and t.object == step.type_iri
        ]

    raise TypeError(f"Unknown step: {step!r}")


async def _deliver(callback: Callable[[Any], Any] | None, value: Any) -> None:
    if callback is None:
        return
    outcome = callback(value)
    if inspect.isawaitable(outcome):
        await outcome


class PathQuery:
    """One traversal. Owns its frontier; never shared between queries."""

    def __init__(self, client: Client, subjects: list[str] | None = None) -> None:
        self.client = client
        self.frontier: list[str] = list(subjects or [])
        self.steps: deque[Step] = deque()
        self._draining = asyncio.Lock()

    def __repr__(self) -> str:
        return f"PathQuery(frontier={len(self.frontier)}, steps={list(self.steps)!r})"

    # ── builders ───────────────────────────────────────────────

    def instances(self, type_iri: str) -> PathQuery:
        """Replace the frontier with every resource of ``type_iri``."""
        if not type_iri.startswith("<"):
            type_iri = iri_reference(type_iri)
        self.steps.append(ListSeed(type_iri))
        return self

    def link(self, namespace: str, fragment: str) -> PathQuery:
        """Follow predicate ``namespace+fragment`` from every member.

        For a VCard, ``link(VCARD, "hasEmail")`` yields its Email nodes.
        """
        self.steps.append(Expand(iri_reference(namespace, fragment)))
        return self

    def of_type(self, namespace: str, fragment: str) -> PathQuery:
        """Keep only members declared ``rdf:type <namespace+fragment>``."""
        self.steps.append(FilterType(iri_reference(namespace, fragment)))
        return self

    # ── execution ──────────────────────────────────────────────

    async def drain(self) -> list[str]:
        """Execute queued steps in order; each sees the previous frontier.

        Concurrent terminal calls share one drain: a later caller waits
        until every step queued so far has resolved.
        """
        async with self._draining:
            while self.steps:
                step = self.steps.popleft()
                self.frontier = await evaluate(
                    step, self.frontier, self.client.fetcher, self.client.cache
                )
                log.debug("%r → %d resources", step, len(self.frontier))
        return self.frontier

    async def results(self, callback: Callable[[list[str]], Any] | None = None) -> list[str]:
        """Run the query and pass every decoded result to ``callback`` at once."""
        await self.drain()
        decoded = [decode_literal(x) for x in self.frontier]
        await _deliver(callback, decoded)
        return decoded

    async def single(self, callback: Callable[[str], Any] | None = None) -> str:
        """Run the query and pass only the first result, or "" if none."""
        decoded = await self.results()
        first = decoded[0] if decoded else ""
        await _deliver(callback, first)
        return first

    async def for_each(self, callback: Callable[[str], Any]) -> list[str]:
        """Run the query and call ``callback`` once per result, in order."""
        decoded = await self.results()
        for item in decoded:
            await _deliver(callback, item)
        return decoded
