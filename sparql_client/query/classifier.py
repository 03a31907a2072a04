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

"""Statement classifier: query or update.

Endpoints want reads in the `query` form field and writes in `update`.
This is a rough parse, not a grammar: leading PREFIX/BASE clauses are
skipped structurally and the next bare word decides. Keep callers on
`classify` / `statement_is_update` so a real parser can replace it.

Pattern derived from http://www.w3.org/TR/sparql11-query/#rQueryUnit
"""

from __future__ import annotations

import re
from enum import Enum

from sparql_client.errors import MalformedStatementError

_KEYWORD = re.compile(r"^(?:\s*(?:PREFIX|BASE)[^<]+<[^>]+>)*\s*(?!PREFIX|BASE)(\w+)", re.IGNORECASE)

UPDATE_KEYWORDS = frozenset({
    "LOAD", "CLEAR", "DROP", "CREATE", "ADD", "MOVE", "COPY",
    "INSERT", "DELETE", "WITH",
})


class StatementKind(str, Enum):
    QUERY = "query"
    UPDATE = "update"


def operative_keyword(text: str) -> str:
    """Upper-cased first keyword after the PREFIX/BASE clauses."""
    match = _KEYWORD.match(text)
    if match is None:
        raise MalformedStatementError(f"Malformed query: {text}")
    return match.group(1).upper()


def classify(text: str) -> StatementKind:
    if operative_keyword(text) in UPDATE_KEYWORDS:
        return StatementKind.UPDATE
    return StatementKind.QUERY


def statement_is_update(text: str) -> bool:
    return classify(text) is StatementKind.UPDATE
