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
"""Run a path query against a Triple Pattern Fragments server.

Steps run in command-line order, starting from one entity or from every
instance of a type. Results print one per line.

Usage:
    tpf-query --entity https://vivo.example.org/individual/n007
        --link http://www.w3.org/2000/01/rdf-schema# label --single
    tpf-query --config client.yaml
        --instances http://xmlns.com/foaf/0.1/Person
        --link http://www.w3.org/2000/01/rdf-schema# label
"""

from __future__ import annotations

import argparse
import asyncio
import os
from pathlib import Path

from dotenv import load_dotenv

from fragments.client import Client
from fragments.config import ClientConfig, load_config
from fragments.exceptions import ConfigError, TransportError
from fragments.logger import get_logger
from fragments.query import PathQuery

log = get_logger("main")


class _StepAction(argparse.Action):
    """Collects --link/--type in the order they were given."""

    def __call__(self, parser, namespace, values, option_string=None):
        steps = getattr(namespace, "steps", None) or []
        steps.append((self.dest, values[0], values[1]))
        namespace.steps = steps


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tpf-query",
        description="Follow predicates across a TPF server: entity → links → results",
    )
    parser.add_argument("--config", type=Path, help="Client YAML (endpoint, timeout, cache)")
    parser.add_argument("--endpoint", help="TPF endpoint URL (overrides TPF_ENDPOINT and config)")
    start = parser.add_mutually_exclusive_group(required=True)
    start.add_argument("--entity", help="Start at this resource IRI")
    start.add_argument("--instances", help="Start at every resource of this type IRI")
    parser.add_argument(
        "--link", nargs=2, metavar=("NS", "FRAGMENT"), action=_StepAction, dest="link",
        help="Follow predicate NS+FRAGMENT (repeatable)",
    )
    parser.add_argument(
        "--type", nargs=2, metavar=("NS", "FRAGMENT"), action=_StepAction, dest="type",
        help="Keep resources typed NS+FRAGMENT (repeatable)",
    )
    parser.add_argument("--single", action="store_true", help="Print only the first result")
    parser.add_argument("--stats", action="store_true", help="Log a request summary at the end")
    parser.set_defaults(steps=[])
    return parser


def resolve_config(args: argparse.Namespace) -> ClientConfig:
    """--endpoint > TPF_ENDPOINT > config file."""
    config: ClientConfig | None = None
    if args.config is not None:
        result = load_config(args.config.resolve())
        if not result.ok:
            raise ConfigError(result.error, context=result.context)
        config = result.data

    endpoint = args.endpoint or os.getenv("TPF_ENDPOINT")
    if endpoint:
        return config.with_endpoint(endpoint) if config else ClientConfig(endpoint=endpoint)
    if config is None:
        raise ConfigError("No endpoint: pass --endpoint, --config or set TPF_ENDPOINT")
    return config


def build_query(client: Client, args: argparse.Namespace) -> PathQuery:
    query = client.entity(args.entity) if args.entity else client.instances(args.instances)
    for kind, namespace, fragment in args.steps:
        if kind == "link":
            query.link(namespace, fragment)
        else:
            query.of_type(namespace, fragment)
    return query


async def run(client: Client, args: argparse.Namespace) -> list[str]:
    query = build_query(client, args)
    if args.single:
        first = await query.single()
        return [first] if first else []
    return await query.results()


def main(argv: list[str] | None = None) -> int:
    load_dotenv()
    args = build_parser().parse_args(argv)

    try:
        config = resolve_config(args)
    except ConfigError as exc:
        log.error(exc.message)
        return 1

    log.info("Endpoint: %s", config.endpoint)
    client = Client.from_config(config)

    try:
        results = asyncio.run(run(client, args))
    except TransportError as exc:
        log.error("Query failed: %s", exc.message)
        return 1
    finally:
        if args.stats:
            log.info(client.stats.report())

    for line in results:
        print(line)
    return 0
