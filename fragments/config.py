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

"""Loads the client YAML into typed dataclasses.

Pure loader — no network. Only ``endpoint`` is required; every other key
falls back to the protocol defaults.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from fragments.cache import DEFAULT_TTL
from fragments.fetcher import DEFAULT_ACCEPT
from fragments.result import Fail, Ok, Result


@dataclass(frozen=True, slots=True)
class CacheConfig:
    ttl_seconds: float = DEFAULT_TTL


@dataclass(frozen=True, slots=True)
class ClientConfig:
    endpoint: str
    timeout: int = 30
    accept_header: str = DEFAULT_ACCEPT
    cache: CacheConfig = field(default_factory=CacheConfig)

    def with_endpoint(self, endpoint: str) -> ClientConfig:
        return ClientConfig(
            endpoint=endpoint,
            timeout=self.timeout,
            accept_header=self.accept_header,
            cache=self.cache,
        )


def parse_config(raw: dict[str, Any]) -> ClientConfig:
    """Build ClientConfig from a mapping. Raises KeyError/TypeError/ValueError."""
    cache_raw = raw.get("cache") or {}
    return ClientConfig(
        endpoint=str(raw["endpoint"]),
        timeout=int(raw.get("timeout", 30)),
        accept_header=str(raw.get("accept_header", DEFAULT_ACCEPT)),
        cache=CacheConfig(ttl_seconds=float(cache_raw.get("ttl_seconds", DEFAULT_TTL))),
    )


def load_config(path: Path) -> Result[ClientConfig]:
    """Load a client YAML file into ClientConfig."""
    if not path.exists():
        return Fail(error=f"Config file not found: {path}")

    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        return Fail(error=f"YAML parse error: {exc}", context=str(path))

    if not isinstance(raw, dict):
        return Fail(error="Config structure error: expected a mapping", context=str(path))

    try:
        config = parse_config(raw)
    except (KeyError, TypeError, ValueError, AttributeError) as exc:
        return Fail(error=f"Config structure error: {exc}", context=str(path))

    return Ok(data=config)
