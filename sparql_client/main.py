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
"""Command-line entry point.

Loads a client YAML file, binds placeholders and executes one statement,
printing the raw response body to stdout.

Usage:
    sparql-client --config client.yaml --query people.rq --bind name='"Ada"'
    sparql-client --config client.yaml --text 'ASK { ?s ?p ?o }'
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from sparql_client.client import SparqlClient
from sparql_client.config import load_config
from sparql_client.errors import SparqlClientError
from sparql_client.logger import get_logger, set_level

log = get_logger("sparql_client.main")


def _binding(raw: str) -> tuple[str, str]:
    name, sep, value = raw.partition("=")
    name = name.lstrip("?")
    if not sep or not name:
        raise argparse.ArgumentTypeError(f"Expected name=value, got {raw!r}")
    return name, value


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="sparql-client",
        description="Render a SPARQL template and send it to an endpoint",
    )
    parser.add_argument(
        "--config",
        type=Path,
        required=True,
        help="Path to client YAML (endpoint, prefixes, base)",
    )
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument("--query", type=Path, help="File holding the statement template")
    source.add_argument("--text", help="Statement template given inline")
    parser.add_argument(
        "--bind",
        type=_binding,
        action="append",
        default=[],
        metavar="NAME=VALUE",
        help="Replace ?NAME with VALUE (used verbatim); repeatable",
    )
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    args = parser.parse_args(argv)

    if args.verbose:
        set_level(logging.DEBUG)

    cfg_result = load_config(args.config.resolve())
    if not cfg_result.ok:
        log.error(cfg_result.error)
        return 1

    if args.query is not None:
        if not args.query.exists():
            log.error("Query file not found: %s", args.query)
            return 1
        text = args.query.read_text(encoding="utf-8")
    else:
        text = args.text

    try:
        with SparqlClient.from_config(cfg_result.data) as client:
            statement = client.query(text)
            for name, value in args.bind:
                statement.bind(name, value)
            result = statement.execute().result()
        log.info(client.summary.report())
    except SparqlClientError as exc:
        log.error("%s", exc)
        return 1

    if not result.ok:
        log.error("Execution failed: %s", result.error)
        if result.context:
            log.error("Detail: %s", result.context)
        return 1

    sys.stdout.write(result.data.text)
    if not result.data.text.endswith("\n"):
        sys.stdout.write("\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
