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

"""Term model: IRIs, typed literals and language-tagged strings."""

from __future__ import annotations

from typing import Union

from sparql_client.terms.iri import IRI
from sparql_client.terms.literal import Literal, StringLiteral

Term = Union[IRI, Literal, StringLiteral]

__all__ = ["IRI", "Literal", "StringLiteral", "Term"]
