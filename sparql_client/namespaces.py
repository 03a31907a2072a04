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

"""Well-known namespace table.

From: http://www.w3.org/TR/2013/REC-sparql11-query-20130321/#docNamespaces
Read-only; callers copy entries into their own registry.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

COMMON_PREFIXES: Mapping[str, str] = MappingProxyType({
    "rdf": "http://www.w3.org/1999/02/22-rdf-syntax-ns#",
    "rdfs": "http://www.w3.org/2000/01/rdf-schema#",
    "xsd": "http://www.w3.org/2001/XMLSchema#",
    "fn": "http://www.w3.org/2005/xpath-functions#",
    "sfn": "http://www.w3.org/ns/sparql#",
})


def namespace_of(uri: str) -> tuple[str, str] | None:
    """Return (prefix, local name) if `uri` lives in a well-known namespace."""
    for prefix, base in COMMON_PREFIXES.items():
        if uri.startswith(base) and len(uri) > len(base):
            return prefix, uri[len(base):]
    return None
