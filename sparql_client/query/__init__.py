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
"""Query layer: registry, template engine, statement classifier."""

from sparql_client.query.classifier import StatementKind, classify, statement_is_update
from sparql_client.query.registry import Registry, build_preamble
from sparql_client.query.template import Query

__all__ = [
    "Query",
    "Registry",
    "StatementKind",
    "build_preamble",
    "classify",
    "statement_is_update",
]
