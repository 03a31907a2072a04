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

"""Loads a client YAML file into a typed dataclass.

Pure loader. Prefix names in `common_prefixes` are checked later, when
the client registers them.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from sparql_client.result import ErrorKind, Fail, Ok, Result


@dataclass(frozen=True, slots=True)
class ClientConfig:
    endpoint: str
    timeout: int = 30
    user_agent: str | None = None
    base: str | None = None
    common_prefixes: bool | tuple[str, ...] = ()
    prefixes: dict[str, str] = field(default_factory=dict)
    headers: dict[str, str] = field(default_factory=dict)


# ── Loader ─────────────────────────────────────────────────────

def _build_common(raw: Any) -> bool | tuple[str, ...]:
    if raw is None or raw is False:
        return ()
    if raw is True:
        return True
    if isinstance(raw, list) and all(isinstance(name, str) for name in raw):
        return tuple(raw)
    raise TypeError(f"common_prefixes must be true, false or a list of names, got {raw!r}")


def _build_mapping(raw: Any, key: str) -> dict[str, str]:
    if raw is None:
        return {}
    if not isinstance(raw, dict):
        raise TypeError(f"{key} must be a mapping, got {type(raw).__name__}")
    return {str(name): str(value) for name, value in raw.items()}


def load_config(path: Path) -> Result[ClientConfig]:
    """Load a client YAML file into ClientConfig. Never raises."""
    if not path.exists():
        return Fail(error=f"Config file not found: {path}", kind=ErrorKind.CONFIG)

    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        return Fail(error=f"YAML parse error: {exc}", kind=ErrorKind.CONFIG, context=str(path))

    if not isinstance(raw, dict):
        return Fail(error="Config root must be a mapping", kind=ErrorKind.CONFIG, context=str(path))

    try:
        endpoint = raw["endpoint"]
        if not isinstance(endpoint, str) or not endpoint:
            raise TypeError("endpoint must be a non-empty string")

        config = ClientConfig(
            endpoint=endpoint,
            timeout=int(raw.get("timeout", 30)),
            user_agent=raw.get("user_agent"),
            base=raw.get("base"),
            common_prefixes=_build_common(raw.get("common_prefixes")),
            prefixes=_build_mapping(raw.get("prefixes"), "prefixes"),
            headers=_build_mapping(raw.get("headers"), "headers"),
        )
    except (KeyError, TypeError, ValueError) as exc:
        return Fail(error=f"Config structure error: {exc}", kind=ErrorKind.CONFIG, context=str(path))

    return Ok(data=config)
