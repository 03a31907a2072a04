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

"""Query template: working text, placeholder binding, wire-text assembly.

    statement = client.query("SELECT * WHERE { ?s ?p ?name }")
    statement.register_common("xsd").bind("name", Literal(3, {"xsd": "integer"}))
    future = statement.execute(on_result)

`bind` edits the working text in place; `execute` sends the registry
preamble followed by that same working text.
"""

from __future__ import annotations

import re
from concurrent.futures import Future
from typing import TYPE_CHECKING, Any, Callable, Mapping

from sparql_client.errors import QueryStateError
from sparql_client.logger import get_logger
from sparql_client.query.registry import Registry, RegistryMixin
from sparql_client.terms import IRI, Literal, StringLiteral

if TYPE_CHECKING:
    from sparql_client.client import SparqlClient
    from sparql_client.response import SparqlResponse
    from sparql_client.result import Result

log = get_logger(__name__)

Callback = Callable[["Result[SparqlResponse]"], Any]


class Query(RegistryMixin):
    """One statement built from a template, executed at most once."""

    def __init__(self, client: SparqlClient, text: str, registry: Registry) -> None:
        if not isinstance(text, str):
            raise TypeError("Query text must be a string")
        self.client = client
        self.original_text = text
        self.registry = registry.copy()
        self.bindings: dict[str, str] = {}
        self._text = text
        self._consumed = False

    def bind(self, placeholder: str, value: str | IRI | Literal | StringLiteral) -> Query:
        """Replace every `?placeholder` followed by whitespace with `value`."""
        if not isinstance(placeholder, str) or not placeholder:
            raise TypeError("Placeholder name must be a non-empty string")
        if isinstance(value, (IRI, Literal, StringLiteral)):
            value = value.format()
        elif not isinstance(value, str):
            raise TypeError(f"Cannot bind value of type {type(value).__name__}")

        pattern = re.compile(r"\?" + re.escape(placeholder) + r"\s+")
        replacement = value + " "
        self._text, count = pattern.subn(lambda _m: replacement, self._text)
        self.bindings[placeholder] = value
        log.debug("Bound ?%s (%d occurrence(s))", placeholder, count)
        return self

    def text(self) -> str:
        """Template text with all bindings applied so far."""
        return self._text

    def final_text(self) -> str:
        """Preamble followed by the working text."""
        return self.registry.preamble() + self._text

    def execute(self, *args: Any) -> Future[Result[SparqlResponse]]:
        """Send the statement: `execute()`, `execute(cb)` or `execute(options, cb)`.

        Returns a Future resolving to the Result; `cb`, when given, receives
        the same Result on the client's worker thread, never on this stack.
        Transport and classification failures arrive as `Fail`, not raised.
        """
        options: Mapping[str, Any] | None = None
        callback: Callback | None = None
        if len(args) == 1:
            (callback,) = args
        elif len(args) == 2:
            options, callback = args
        elif len(args) > 2:
            raise TypeError("Wrong number of arguments used.")

        if options is not None and not isinstance(options, Mapping):
            raise TypeError("Options must be a mapping")
        if callback is not None and not callable(callback):
            raise TypeError("Callback must be callable")
        if self._consumed:
            raise QueryStateError("Query has already been executed")

        text = self.final_text()
        self._consumed = True
        return self.client.dispatch(text, options, callback)
