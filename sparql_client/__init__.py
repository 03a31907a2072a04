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

"""SPARQL statement builder and client.

Terms render to their SPARQL surface syntax, templates get a PREFIX/BASE
preamble and placeholder bindings, and statements are classified as
query or update before being sent.
"""

from sparql_client.client import SparqlClient
from sparql_client.config import ClientConfig, load_config
from sparql_client.errors import (
    LanguageTagError,
    MalformedStatementError,
    QueryStateError,
    RegistryError,
    SparqlClientError,
    TermError,
    UnsafeIRIError,
)
from sparql_client.namespaces import COMMON_PREFIXES
from sparql_client.query import Query, Registry, build_preamble, classify, statement_is_update
from sparql_client.response import SparqlResponse
from sparql_client.result import ErrorKind, Fail, Ok, Result
from sparql_client.terms import IRI, Literal, StringLiteral, Term
from sparql_client.transport import HttpTransport, Transport

__version__ = "0.1.0"

__all__ = [
    "COMMON_PREFIXES",
    "ClientConfig",
    "ErrorKind",
    "Fail",
    "HttpTransport",
    "IRI",
    "LanguageTagError",
    "Literal",
    "MalformedStatementError",
    "Ok",
    "Query",
    "QueryStateError",
    "Registry",
    "RegistryError",
    "Result",
    "SparqlClient",
    "SparqlClientError",
    "SparqlResponse",
    "StringLiteral",
    "TermError",
    "Term",
    "Transport",
    "UnsafeIRIError",
    "build_preamble",
    "classify",
    "load_config",
    "statement_is_update",
]
