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

"""Lexical-form helpers shared by the term model.

Escaping follows the SPARQL 1.1 string escapes:
http://www.w3.org/TR/2013/REC-sparql11-query-20130321/#grammarEscapes
Linefeed is left alone; it is legal inside a triple-quoted string.
"""

from __future__ import annotations

import re
from typing import Any

from sparql_client.errors import TermError, UnsafeIRIError

# Bare lexical forms accepted for built-in xsd types (matched in full).
LITERAL_PATTERNS: dict[str, re.Pattern[str]] = {
    "boolean": re.compile(r"true|false"),
    "integer": re.compile(r"[+-]?[0-9]+"),
    "double": re.compile(r"[+-]?(?:[0-9]+\.[0-9]*|\.[0-9]+|[0-9]+)[eE][+-]?[0-9]+"),
    "decimal": re.compile(r"[+-]?[0-9]*\.[0-9]+"),
}

_ESCAPES = str.maketrans({
    "\\": "\\\\",
    "\t": "\\t",
    "\r": "\\r",
    "\b": "\\b",
    "\f": "\\f",
    '"': '\\"',
    "'": "\\'",
})

_UNSAFE_IRI = re.compile(r"[\x00\n>]")
_LANGUAGE_TAG = re.compile(r"[a-zA-Z]+(?:-[a-zA-Z0-9]+)*")

TRIPLE_QUOTE = '"""'
DOUBLE_QUOTE = '"'
SINGLE_QUOTE = "'"


def lexical_form(value: Any) -> str:
    """Textual representation of a raw Python value."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        return repr(value)
    return str(value)


def assert_safe_string(value: str) -> str:
    """Raise TermError if U+0000 is in the string."""
    if "\x00" in value:
        raise TermError("Refusing to encode string with null-character")
    return value


def escape_string(value: str) -> str:
    """Escape every special character except linefeed (U+000A)."""
    return value.translate(_ESCAPES)


def choose_delimiter(value: str) -> str:
    """Pick the quote delimiter for the raw (unescaped) string."""
    has_single = SINGLE_QUOTE in value
    has_double = DOUBLE_QUOTE in value
    if "\n" in value or (has_single and has_double):
        return TRIPLE_QUOTE
    if has_single:
        return DOUBLE_QUOTE
    return SINGLE_QUOTE


def has_unescaped(escaped: str, delimiter: str) -> bool:
    """True if `delimiter` occurs in `escaped` outside an escape sequence."""
    i = 0
    while i < len(escaped):
        if escaped[i] == "\\":
            i += 2
            continue
        if escaped.startswith(delimiter, i):
            return True
        i += 1
    return False


def format_string(value: str) -> str:
    """Quote and escape a string as a SPARQL string literal."""
    escaped = escape_string(value)
    delimiter = choose_delimiter(value)
    assert not has_unescaped(escaped, delimiter), f"found `{delimiter}` in `{escaped}`"
    return delimiter + escaped + delimiter


def ensure_safe_iri(uri: str) -> str:
    """Raise UnsafeIRIError when the IRI could escape its `<...>` delimiter."""
    if _UNSAFE_IRI.search(uri):
        raise UnsafeIRIError(f"Refusing to use suspicious IRI: {uri!r}")
    return uri


def valid_language_tag(tag: Any) -> bool:
    # See: http://www.w3.org/TR/2013/REC-sparql11-query-20130321/#rLANGTAG
    return isinstance(tag, str) and _LANGUAGE_TAG.fullmatch(tag) is not None


def coerce_double(value: str) -> str:
    """Make `value` look like a SPARQL double if appending `e0` does it.

    Returns the input unchanged when coercion fails.
    """
    pattern = LITERAL_PATTERNS["double"]
    if pattern.fullmatch(value):
        return value
    candidate = value + "e0"
    if pattern.fullmatch(candidate):
        return candidate
    return value


def try_format_type(value: str, type_name: str) -> str | None:
    """Bare lexical form of a built-in xsd type, or None if it does not fit."""
    pattern = LITERAL_PATTERNS.get(type_name)
    if pattern is None:
        return None
    if type_name == "double":
        value = coerce_double(value)
    if pattern.fullmatch(value):
        return value
    return None
