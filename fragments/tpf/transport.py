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

"""Fragment transport — the only place the client touches the network.

``Transport`` is the seam: anything with ``async fetch(url, headers)``
returning the response body works, so tests and non-default HTTP stacks
can plug in. ``UrllibTransport`` is the default: urllib with a certifi
TLS context, run off the event loop in a worker thread.
"""

from __future__ import annotations

import asyncio
import http.client
import ssl
import urllib.error
import urllib.request
from typing import Protocol

import certifi

from fragments.logger import get_logger
from fragments.result import Fail, Ok, Result

log = get_logger(__name__)

_ssl_ctx = ssl.create_default_context(cafile=certifi.where())


class Transport(Protocol):
    async def fetch(self, url: str, headers: dict[str, str]) -> str: ...


def download(url: str, headers: dict[str, str], timeout: int = 30) -> Result[str]:
    """Single blocking GET returning the decoded body."""
    req = urllib.request.Request(url, headers=headers, method="GET")
    try:
        with urllib.request.urlopen(req, timeout=timeout, context=_ssl_ctx) as resp:
            charset = resp.headers.get_content_charset() or "utf-8"
            return Ok(data=resp.read().decode(charset, errors="replace"))
    except urllib.error.HTTPError as exc:
        return Fail(error=f"HTTP {exc.code}: {exc.reason}", context=url)
    except urllib.error.URLError as exc:
        return Fail(error=f"Connection error: {exc.reason}", context=url)
    except TimeoutError:
        return Fail(error=f"Timeout after {timeout}s", context=url)
    except (OSError, http.client.HTTPException) as exc:
        return Fail(error=f"Connection error: {exc}", context=url)


class UrllibTransport:
    """Default transport. No retry: a Fail is raised as TransportError."""

    def __init__(self, timeout: int = 30) -> None:
        self.timeout = timeout

    async def fetch(self, url: str, headers: dict[str, str]) -> str:
        result = await asyncio.to_thread(download, url, headers, self.timeout)
        if not result.ok:
            log.warning("Fragment request failed: %s (%s)", result.error, url)
        return result.unwrap()
