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

"""Fragment request URL builder.

Renders one triple pattern page as ``endpoint?subject=..&predicate=..
&object=..&page=n``. Pure string work — no network.
"""

from __future__ import annotations

import urllib.parse


def _term(value: str | None) -> str:
    """Wire form of a pattern position; empty means unconstrained.

    IRI references travel bare (``<x>`` -> ``x``), literals keep quotes.
    """
    if not value:
        return ""
    if value.startswith("<") and value.endswith(">"):
        return value[1:-1]
    return value


def build_url(
    endpoint: str,
    subject: str | None = None,
    predicate: str | None = None,
    obj: str | None = None,
    page: int = 1,
) -> str:
    """Return the request URL for one page of a triple pattern."""
    criteria = {
        "subject": _term(subject),
        "predicate": _term(predicate),
        "object": _term(obj),
        "page": str(page if page and page > 0 else 1),
    }
    query = urllib.parse.urlencode(criteria, quote_via=urllib.parse.quote)
    return f"{endpoint}?{query}"
