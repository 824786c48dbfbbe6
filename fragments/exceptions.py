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

"""Exception types raised across the async query chain.

Transport and configuration problems surface as exceptions so that an
awaited path query fails as a whole. Empty results are never errors.
"""

from __future__ import annotations

from typing import Any


class FragmentError(Exception):
    """Base class for all client errors."""

    def __init__(self, message: str, context: Any = None) -> None:
        super().__init__(message)
        self.message = message
        self.context = context


class TransportError(FragmentError):
    """Network or HTTP failure while requesting a fragment page."""

    @property
    def url(self) -> str | None:
        return self.context if isinstance(self.context, str) else None


class ConfigError(FragmentError):
    """Client configuration could not be loaded."""
