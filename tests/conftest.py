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
"""Shared fixtures: an in-memory transport and a client wired to it."""

from __future__ import annotations

import threading
from typing import Any, Mapping

import pytest

from sparql_client import Ok, SparqlClient
from sparql_client.result import Result

ASK_TRUE = b'{"head": {}, "boolean": true}'


class FakeTransport:
    """Records every send and answers with a canned Result."""

    def __init__(self, result: Result[bytes] | None = None) -> None:
        self.result = result if result is not None else Ok(data=ASK_TRUE)
        self.calls: list[tuple[str, bool, Mapping[str, Any] | None]] = []
        self.threads: list[int] = []
        self.gate: threading.Event | None = None

    def send(self, text: str, update: bool, options: Mapping[str, Any] | None = None) -> Result[bytes]:
        if self.gate is not None:
            self.gate.wait(timeout=5)
        self.calls.append((text, update, options))
        self.threads.append(threading.get_ident())
        return self.result


@pytest.fixture
def transport() -> FakeTransport:
    return FakeTransport()


@pytest.fixture
def client(transport: FakeTransport):
    c = SparqlClient("http://localhost:3030/ds/sparql", transport)
    yield c
    c.close()
