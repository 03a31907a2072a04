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

"""IRI terms.

An IRI renders either as `<http://...>` or, when built from a one-key
mapping `{prefix: local}`, as the prefixed name `prefix:local`.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, ClassVar, Mapping

from sparql_client.errors import TermError
from sparql_client.namespaces import COMMON_PREFIXES, namespace_of
from sparql_client.terms.escaping import ensure_safe_iri

_NAME_PART = re.compile(r"[^\s<>\"{}|^`\\:]*")


@dataclass(frozen=True, slots=True)
class IRI:
    """Resource identifier.

    Attributes:
        value: Full IRI, or the local name when `prefix` is set.
        prefix: Prefix of the `prefix:local` shorthand, if used.
        namespace: Well-known namespace tag (`xsd`, `rdf`, ...), if any.
    """

    term_type: ClassVar[str] = "uri"

    value: str
    prefix: str | None = None
    namespace: str | None = None

    @classmethod
    def create(cls, source: Any) -> IRI:
        """Build an IRI from a string or a single-key `{prefix: local}` mapping."""
        if isinstance(source, IRI):
            return source

        if isinstance(source, str):
            ensure_safe_iri(source)
            known = namespace_of(source)
            return cls(value=source, namespace=known[0] if known else None)

        if isinstance(source, Mapping):
            if len(source) != 1:
                raise TypeError(f"IRI mapping must have exactly one key, got {len(source)}")
            prefix, local = next(iter(source.items()))
            if not isinstance(prefix, str) or not isinstance(local, str):
                raise TypeError("IRI mapping key and value must both be strings")
            for part in (prefix, local):
                if not _NAME_PART.fullmatch(part):
                    raise TermError(f"Invalid prefixed name part: {part!r}")
            return cls(
                value=local,
                prefix=prefix,
                namespace=prefix if prefix in COMMON_PREFIXES else None,
            )

        raise TypeError(f"Cannot create IRI from {type(source).__name__}")

    @property
    def local_name(self) -> str:
        """Part after the namespace; the whole IRI when no namespace is known."""
        if self.prefix is not None:
            return self.value
        if self.namespace is not None:
            return self.value[len(COMMON_PREFIXES[self.namespace]):]
        return self.value

    def format(self) -> str:
        if self.prefix is not None:
            return f"{self.prefix}:{self.value}"
        return f"<{self.value}>"

    def __str__(self) -> str:
        return self.format()
