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

"""Structured logger with per-operation counters and a final summary.

Collects page requests and cache hit/miss counts so a caller (or the
command line) can print a summary of the network work a query caused.
"""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass, field

_FMT = "%(asctime)s [%(levelname)s] %(name)s — %(message)s"


def get_logger(name: str) -> logging.Logger:
    """Return a stdlib logger configured with a consistent format."""
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(_FMT, datefmt="%H:%M:%S"))
        logger.addHandler(handler)
        logger.setLevel(logging.INFO)
    return logger


@dataclass
class PageCounter:
    """Fragment page requests sent to the endpoint."""

    ok: int = 0
    failed: int = 0


@dataclass
class CacheCounter:
    """Resource cache lookups, split by whether the network was needed."""

    hit: int = 0
    miss: int = 0
    evicted: int = 0


@dataclass
class RequestStats:
    """Network and cache work done by one client."""

    pages: PageCounter = field(default_factory=PageCounter)
    cache: CacheCounter = field(default_factory=CacheCounter)

    def report(self) -> str:
        """Format a human-readable summary block."""
        pages = f"pages: {self.pages.ok} ok"
        if self.pages.failed:
            pages += f"  {self.pages.failed} failed"
        cache = f"cache: {self.cache.hit} hit  {self.cache.miss} miss"
        if self.cache.evicted:
            cache += f"  {self.cache.evicted} evicted"
        return "\n".join(["", "Request Summary", "=" * 40, pages, cache, "=" * 40])
