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

"""PREFIX / BASE registry and preamble builder.

A client holds one Registry; every query clones it on creation, so
registrations made on a query never leak back to the client and later
client registrations never reach queries already created.
"""

from __future__ import annotations

import copy
from typing import Any, Mapping

from sparql_client.errors import RegistryError
from sparql_client.logger import get_logger
from sparql_client.namespaces import COMMON_PREFIXES
from sparql_client.terms.escaping import ensure_safe_iri

log = get_logger(__name__)


class Registry:
    """Optional base IRI plus an insertion-ordered prefix table."""

    def __init__(self, base: str | None = None, prefixes: Mapping[str, str] | None = None) -> None:
        self.base = base
        self.prefixes: dict[str, str] = dict(prefixes or {})

    def copy(self) -> Registry:
        return Registry(base=self.base, prefixes=copy.deepcopy(self.prefixes))

    def register(self, *args: Any) -> Registry:
        """Set the base, merge a prefix mapping, or add one named prefix.

        Unsafe IRIs raise UnsafeIRIError before anything is stored.

            register("http://example.org/")              # base
            register({"ex": "http://example.org/ns#"})   # mapping
            register("ex", "http://example.org/ns#")     # single prefix
        """
        if len(args) == 1 and isinstance(args[0], str):
            self.base = ensure_safe_iri(args[0])
            log.debug("BASE set to %s", self.base)
            return self
        if len(args) == 1 and isinstance(args[0], Mapping):
            self._add_prefixes(args[0])
            return self
        if len(args) == 2 and all(isinstance(a, str) for a in args):
            self._add_prefixes({args[0]: args[1]})
            return self
        raise TypeError("Invalid arguments for register()")

    def register_common(self, *names: str) -> Registry:
        """Merge well-known prefixes: all of them, or only the named ones.

        Unknown names raise RegistryError before anything is merged.
        """
        if not names:
            self._add_prefixes(COMMON_PREFIXES)
            return self

        selected: dict[str, str] = {}
        for name in names:
            if name not in COMMON_PREFIXES:
                raise RegistryError(f"`{name}` is not a known prefix.")
            selected[name] = COMMON_PREFIXES[name]
        self._add_prefixes(selected)
        return self

    def preamble(self) -> str:
        return build_preamble(self.prefixes, self.base)

    def _add_prefixes(self, new_prefixes: Mapping[str, str]) -> None:
        for name, uri in new_prefixes.items():
            if not isinstance(name, str) or not isinstance(uri, str):
                raise TypeError("Prefix names and IRIs must be strings")
            ensure_safe_iri(uri)
        for name, uri in new_prefixes.items():
            self.prefixes[name] = uri
            log.debug("PREFIX %s: <%s>", name, uri)


class RegistryMixin:
    """Fluent `register` / `register_common` over an owned `registry`."""

    registry: Registry

    def register(self, *args: Any):
        self.registry.register(*args)
        return self

    def register_common(self, *names: str):
        self.registry.register_common(*names)
        return self

    @property
    def base(self) -> str | None:
        return self.registry.base

    @property
    def prefixes(self) -> dict[str, str]:
        return self.registry.prefixes


def build_preamble(prefixes: Mapping[str, str], base: str | None = None) -> str:
    """Render `BASE` and `PREFIX` lines, followed by a blank line if any."""
    preamble = ""

    if base:
        preamble += f"BASE <{ensure_safe_iri(base)}>\n"

    for name, uri in prefixes.items():
        preamble += f"PREFIX {name}: <{ensure_safe_iri(uri)}>\n"

    if preamble:
        preamble += "\n"
    return preamble
