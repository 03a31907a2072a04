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
"""Raw endpoint response.

Kept as bytes; parsing helpers only unwrap the SPARQL JSON results
envelope. Formatting result rows is left to the caller.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any

Binding = dict[str, dict[str, str]]


@dataclass(frozen=True, slots=True)
class SparqlResponse:
    raw: bytes
    update: bool = False

    @property
    def text(self) -> str:
        return self.raw.decode("utf-8", errors="replace")

    def json(self) -> dict[str, Any]:
        """Parse the body as JSON. Raises ValueError if it is not JSON."""
        return json.loads(self.raw.decode("utf-8"))

    def bindings(self) -> list[Binding]:
        return self.json().get("results", {}).get("bindings", [])

    def boolean(self) -> bool | None:
        """ASK answer, or None for other result shapes."""
        return self.json().get("boolean")
