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

"""Exceptions raised synchronously at the call that breaks an invariant.

Failures that happen after `execute` has scheduled work are not raised;
they arrive as a `Fail` through the callback (see `sparql_client.result`).
"""

from __future__ import annotations


class SparqlClientError(Exception):
    """Base class for all sparql_client errors."""


class TermError(SparqlClientError, ValueError):
    """A term could not be built from the given input."""


class UnsafeIRIError(TermError):
    """IRI contains a character that would break out of `<...>`."""


class LanguageTagError(TermError):
    """Language tag does not match `[A-Za-z]+(-[A-Za-z0-9]+)*`."""


class RegistryError(SparqlClientError, ValueError):
    """Unknown well-known prefix requested."""


class MalformedStatementError(SparqlClientError, ValueError):
    """No operative keyword could be located in the statement."""


class QueryStateError(SparqlClientError, RuntimeError):
    """Query instance used after it was consumed by `execute`."""
