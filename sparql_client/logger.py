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

"""Package logging and per-kind execution counters.

All loggers hang under the `sparql_client` namespace and share one stderr
handler installed on that root, so `set_level` is a single call.
"""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass, field

_FMT = "%(asctime)s [%(levelname)s] %(name)s — %(message)s"
_ROOT = "sparql_client"


def get_logger(name: str) -> logging.Logger:
    """Return `name` as a child of the package logger."""
    root = logging.getLogger(_ROOT)
    if not root.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(_FMT, datefmt="%H:%M:%S"))
        root.addHandler(handler)
        root.setLevel(logging.INFO)
    if name != _ROOT and not name.startswith(_ROOT + "."):
        name = f"{_ROOT}.{name}"
    return logging.getLogger(name)


def set_level(level: int) -> None:
    get_logger(_ROOT).setLevel(level)


@dataclass
class KindCounter:
    ok: int = 0
    failed: int = 0

    def add(self, ok: bool) -> None:
        if ok:
            self.ok += 1
        else:
            self.failed += 1

    def __str__(self) -> str:
        if self.failed:
            return f"{self.ok} ok, {self.failed} failed"
        return f"{self.ok} ok"


@dataclass
class ExecutionSummary:
    """Outcome counts keyed by statement kind (`query`, `update`, `malformed`)."""

    kinds: dict[str, KindCounter] = field(default_factory=dict)

    def record(self, kind: str, ok: bool) -> None:
        self.kinds.setdefault(kind, KindCounter()).add(ok)

    def report(self) -> str:
        width = max((len(name) for name in self.kinds), default=0)
        lines = ["Execution summary:"]
        lines += [f"  {name:<{width}}  {counter}" for name, counter in self.kinds.items()]
        return "\n".join(lines)
