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

"""Triple Pattern Fragments client with cached, chainable path queries."""

from fragments.client import Client
from fragments.config import ClientConfig, load_config
from fragments.exceptions import ConfigError, FragmentError, TransportError
from fragments.query import Expand, FilterType, ListSeed, PathQuery
from fragments.tpf.codec import Triple, decode_literal, parse_triples

__all__ = [
    "Client",
    "ClientConfig",
    "ConfigError",
    "Expand",
    "FilterType",
    "FragmentError",
    "ListSeed",
    "PathQuery",
    "TransportError",
    "Triple",
    "decode_literal",
    "load_config",
    "parse_triples",
]
