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

"""Result pattern for asynchronous outcomes.

Execution, transport and config loading never raise for expected failures.
They return Result[T] = Ok[T] | Fail, and the Fail carries an ErrorKind so
callers can tell a dead endpoint from a statement the classifier rejected.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Generic, TypeVar

T = TypeVar("T")


class ErrorKind(str, Enum):
    """Category of a failed Result."""

    TRANSPORT = "transport"
    MALFORMED_STATEMENT = "malformed_statement"
    CONFIG = "config"


@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    """Successful result carrying typed data."""

    data: T
    ok: bool = field(default=True, init=False)


@dataclass(frozen=True, slots=True)
class Fail:
    """Failed result carrying error message, kind and optional context."""

    error: str
    kind: ErrorKind = ErrorKind.TRANSPORT
    context: Any = None
    ok: bool = field(default=False, init=False)


Result = Ok[T] | Fail
