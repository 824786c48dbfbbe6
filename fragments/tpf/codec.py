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

"""N-triples codec — lenient line parser and literal decoder.

Each statement is one line: ``<subject> <predicate> object .`` where the
object may contain spaces (a literal sentence). Lines that do not fit are
dropped, never raised: fragment responses mix control metadata with data
and not every line matches what a path query expects.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Triple:
    subject: str
    predicate: str
    object: str


def _parse_line(line: str) -> Triple | None:
    line = line.strip()
    if line.startswith("#"):
        return None

    # ["<http...>", "<http...>", "\"Hi  there!\"@en-US ."]
    parts = line.split(None, 2)
    if len(parts) < 3:
        return None

    # Object keeps its own spacing; the final token is the "." terminator.
    rest = parts[2].rsplit(None, 1)
    if len(rest) < 2:
        return None

    return Triple(subject=parts[0], predicate=parts[1], object=rest[0])


def parse_triples(text: str) -> list[Triple]:
    """Parse an n-triples body into triples, in document order."""
    triples: list[Triple] = []
    for line in text.split("\n"):
        triple = _parse_line(line)
        if triple is not None:
            triples.append(triple)
    return triples


def decode_literal(token: str) -> str:
    """Strip quoting and any ``@lang`` / ``^^<datatype>`` suffix.

    ``"Bond, James"@en-UK`` -> ``Bond, James``. IRI references and bare
    tokens pass through unchanged, so decoding twice is the same as once.
    """
    if not token.startswith('"'):
        return token

    end = token.rfind('"')
    if end == 0:
        return token[1:]
    return token[1:end]


def is_control(triple: Triple, prefixes: tuple[str, ...]) -> bool:
    """True if predicate or object mentions a control/metadata namespace."""
    return any(p in triple.predicate or p in triple.object for p in prefixes)
