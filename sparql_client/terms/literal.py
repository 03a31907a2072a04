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

"""Literal terms: typed values and language-tagged strings.

A Literal whose datatype is a built-in xsd type (boolean, integer, double,
decimal) renders bare when its text fits the type's lexical pattern:

    Literal(42, {"xsd": "integer"}).format()    -> 42
    Literal("4.2", {"xsd": "double"}).format()  -> 4.2e0
    Literal("n/a", {"xsd": "integer"}).format() -> 'n/a'^^xsd:integer

Everything else is quoted, with `^^datatype` appended when one is set.
A StringLiteral never carries a datatype; it may carry a language tag.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar

from sparql_client.errors import LanguageTagError, TermError
from sparql_client.terms.escaping import (
    assert_safe_string,
    format_string,
    lexical_form,
    try_format_type,
    valid_language_tag,
)
from sparql_client.terms.iri import IRI


@dataclass(frozen=True, slots=True)
class Literal:
    """Scalar value with an optional datatype IRI.

    `value` accepts any object and is stored as its lexical form;
    `datatype` accepts anything `IRI.create` does.
    """

    term_type: ClassVar[str] = "literal"

    value: Any
    datatype: Any = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "value", assert_safe_string(lexical_form(self.value)))
        if self.datatype is not None:
            try:
                datatype = IRI.create(self.datatype)
            except (TypeError, TermError) as exc:
                raise TermError(
                    f"Datatype must be string or single-valued mapping. Got {self.datatype!r} instead"
                ) from exc
            object.__setattr__(self, "datatype", datatype)

    def format(self) -> str:
        if self.datatype is not None and self.datatype.namespace == "xsd":
            bare = try_format_type(self.value, self.datatype.local_name)
            if bare is not None:
                return bare

        term = format_string(self.value)
        if self.datatype is not None:
            term += "^^" + self.datatype.format()
        return term

    def __str__(self) -> str:
        return self.format()


@dataclass(frozen=True, slots=True)
class StringLiteral:
    """Plain string, optionally language-tagged (`'chat'@fr`)."""

    term_type: ClassVar[str] = "literal"

    value: Any
    language: str | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "value", assert_safe_string(lexical_form(self.value)))
        if self.language is not None and not valid_language_tag(self.language):
            raise LanguageTagError(f"Invalid language tag: {self.language!r}")

    @property
    def datatype(self) -> None:
        return None

    def format(self) -> str:
        term = format_string(self.value)
        if self.language is not None:
            term += "@" + self.language
        return term

    def __str__(self) -> str:
        return self.format()
