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

"""Profile models composed from path queries.

Read-only views of a resource in the metabolomics consortium vocabulary.
Each accessor is one path query; nothing here renders anything.
"""

from __future__ import annotations

import asyncio

from fragments.client import Client
from fragments.namespaces import BIBO, FOAF, M3C, OBO, RDFS, VCARD, VITRO, VIVO


async def name(client: Client, iri: str) -> str:
    """rdfs:label of any resource, or ""."""
    return await client.entity(iri).link(RDFS, "label").single()


async def people(client: Client) -> list[str]:
    """Every foaf:Person, in server order."""
    return await client.instances(FOAF + "Person").results()


class Person:
    def __init__(self, client: Client, iri: str) -> None:
        self.client = client
        self.iri = iri

    def _start(self):
        return self.client.entity(self.iri)

    async def name(self) -> str:
        return await name(self.client, self.iri)

    async def emails(self) -> list[str]:
        return await (
            self._start()
            .link(OBO, "ARG_2000028")
            .link(VCARD, "hasEmail")
            .link(VCARD, "email")
            .results()
        )

    async def phones(self) -> list[str]:
        return await (
            self._start()
            .link(OBO, "ARG_2000028")
            .link(VCARD, "hasTelephone")
            .link(VCARD, "telephone")
            .results()
        )

    async def photos(self) -> list[str]:
        """Download locations of every main image."""
        return await self._start().link(VITRO, "mainImage").link(VITRO, "downloadLocation").results()

    async def organization(self) -> str:
        return await self._start().link(M3C, "associatedWith").single()

    async def projects(self) -> list[str]:
        return await self._start().link(M3C, "isPIFor").results()

    async def studies(self) -> list[str]:
        return await self._start().link(M3C, "runnerOf").results()

    async def tools(self) -> list[str]:
        return await self._start().link(M3C, "developerOf").results()

    async def datasets(self) -> list[str]:
        return await self._start().link(M3C, "runnerOf").link(M3C, "developedFrom").results()

    async def publications(self) -> list[str]:
        """Documents reached through vivo:Authorship relations."""
        return await (
            self._start()
            .link(VIVO, "relatedBy")
            .of_type(VIVO, "Authorship")
            .link(VIVO, "relates")
            .of_type(BIBO, "Document")
            .results()
        )

    async def collaborators(self) -> list[str]:
        """People running studies of this person's projects, then PIs of
        projects whose studies this person runs."""
        runners, investigators = await asyncio.gather(
            self._start()
            .link(M3C, "isPIFor")
            .link(M3C, "collectionFor")
            .link(M3C, "runBy")
            .results(),
            self._start()
            .link(M3C, "runnerOf")
            .link(M3C, "collectedBy")
            .link(M3C, "hasPI")
            .results(),
        )
        return runners + investigators
