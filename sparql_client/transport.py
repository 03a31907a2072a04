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
"""SPARQL HTTP transport using urllib.

Sends a finished statement as a form-encoded POST and returns the raw
body. Statement construction and result formatting live elsewhere.
"""

from __future__ import annotations

import http.client
import ssl
import urllib.error
import urllib.parse
import urllib.request
from typing import Any, Mapping, Protocol

import certifi

from sparql_client.logger import get_logger
from sparql_client.result import ErrorKind, Fail, Ok, Result

log = get_logger(__name__)

RESULTS_JSON = "application/sparql-results+json"
DEFAULT_ACCEPT = "application/sparql-results+json,application/json"
DEFAULT_USER_AGENT = "sparql-client/0.1"

CONNECT_FAILED = "Could not connect to SPARQL endpoint."
QUERY_FAILED = "SPARQL query failed."

_ssl_ctx = ssl.create_default_context(cafile=certifi.where())


class Transport(Protocol):
    """Anything that can deliver a statement and return the raw response."""

    def send(
        self,
        text: str,
        update: bool,
        options: Mapping[str, Any] | None = None,
    ) -> Result[bytes]: ...


class HttpTransport:
    """POSTs statements to one endpoint.

    Per-call `options` may override `timeout` and `accept`.
    """

    def __init__(
        self,
        endpoint: str,
        timeout: float = 30,
        user_agent: str | None = DEFAULT_USER_AGENT,
        headers: Mapping[str, str] | None = None,
    ) -> None:
        self.endpoint = endpoint
        self.timeout = timeout
        self.user_agent = user_agent
        self.headers = dict(headers or {})

    def form_body(self, text: str, update: bool) -> bytes:
        form = {
            "format": RESULTS_JSON,
            "content-type": RESULTS_JSON,
            "update" if update else "query": text,
        }
        return urllib.parse.urlencode(form).encode("utf-8")

    def send(
        self,
        text: str,
        update: bool,
        options: Mapping[str, Any] | None = None,
    ) -> Result[bytes]:
        """POST the statement and return the response body."""
        options = options or {}
        timeout = options.get("timeout", self.timeout)
        body = self.form_body(text, update)

        headers = {
            "Content-Type": "application/x-www-form-urlencoded",
            "Accept": options.get("accept", DEFAULT_ACCEPT),
            **self.headers,
        }
        if self.user_agent:
            headers["User-Agent"] = self.user_agent

        log.info(
            "SPARQL %s → %s (%d bytes)",
            "update" if update else "query",
            self.endpoint,
            len(body),
        )

        try:
            req = urllib.request.Request(self.endpoint, data=body, headers=headers, method="POST")
            with urllib.request.urlopen(req, timeout=timeout, context=_ssl_ctx) as resp:
                status = resp.status
                raw = resp.read()
        except urllib.error.HTTPError as exc:
            detail = exc.read().decode("utf-8", errors="replace")[:500]
            log.warning("SPARQL HTTP %s: %s", exc.code, exc.reason)
            return Fail(error=QUERY_FAILED, kind=ErrorKind.TRANSPORT, context=f"HTTP {exc.code}: {detail}")
        except urllib.error.URLError as exc:
            log.warning("SPARQL connection error: %s", exc.reason)
            message = CONNECT_FAILED if isinstance(exc.reason, ConnectionRefusedError) else QUERY_FAILED
            return Fail(error=message, kind=ErrorKind.TRANSPORT, context=str(exc.reason))
        except TimeoutError:
            log.warning("SPARQL timeout after %ss", timeout)
            return Fail(error=QUERY_FAILED, kind=ErrorKind.TRANSPORT, context=f"timeout after {timeout}s")
        except ConnectionError as exc:
            log.warning("SPARQL connection error: %s", exc)
            return Fail(error=CONNECT_FAILED, kind=ErrorKind.TRANSPORT, context=str(exc))
        except (ValueError, http.client.HTTPException) as exc:
            log.warning("SPARQL request failed: %r", exc)
            return Fail(error=QUERY_FAILED, kind=ErrorKind.TRANSPORT, context=repr(exc))

        if status >= 300:
            return Fail(error=QUERY_FAILED, kind=ErrorKind.TRANSPORT, context=f"HTTP {status}")

        log.info("SPARQL returned %d bytes", len(raw))
        return Ok(data=raw)
