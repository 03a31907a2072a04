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
"""SPARQL client: registry owner and execution dispatcher.

Executions run on a single worker thread, one at a time, in submission
order. Callbacks are always invoked there, so a caller never sees its
callback fire before `execute` has returned.
"""

from __future__ import annotations

from concurrent.futures import Future, ThreadPoolExecutor
from typing import Any, Callable, Mapping

from sparql_client.config import ClientConfig
from sparql_client.errors import MalformedStatementError
from sparql_client.logger import ExecutionSummary, get_logger
from sparql_client.query.classifier import StatementKind, classify
from sparql_client.query.registry import Registry, RegistryMixin
from sparql_client.query.template import Query
from sparql_client.response import SparqlResponse
from sparql_client.result import ErrorKind, Fail, Ok, Result
from sparql_client.transport import DEFAULT_USER_AGENT, QUERY_FAILED, HttpTransport, Transport

log = get_logger(__name__)


class SparqlClient(RegistryMixin):
    """Entry point: register prefixes, then build and execute queries.

        client = SparqlClient("https://dbpedia.org/sparql").register_common()
        future = client.query("SELECT * WHERE { ?s ?p ?o } LIMIT 1", print)
    """

    def __init__(
        self,
        endpoint: str,
        transport: Transport | None = None,
        *,
        timeout: float = 30,
        user_agent: str | None = DEFAULT_USER_AGENT,
        headers: Mapping[str, str] | None = None,
    ) -> None:
        self.endpoint = endpoint
        self.transport: Transport = transport or HttpTransport(
            endpoint, timeout=timeout, user_agent=user_agent, headers=headers
        )
        self.registry = Registry()
        self.summary = ExecutionSummary()
        self._executor = ThreadPoolExecutor(max_workers=1, thread_name_prefix="sparql-client")

    @classmethod
    def from_config(cls, config: ClientConfig, transport: Transport | None = None) -> SparqlClient:
        """Build a client and apply base, common prefixes, then explicit prefixes."""
        client = cls(
            config.endpoint,
            transport,
            timeout=config.timeout,
            user_agent=config.user_agent or DEFAULT_USER_AGENT,
            headers=config.headers,
        )
        if config.base:
            client.register(config.base)
        if config.common_prefixes is True:
            client.register_common()
        elif config.common_prefixes:
            client.register_common(*config.common_prefixes)
        if config.prefixes:
            client.register(config.prefixes)
        return client

    def query(self, text: str, callback: Callable[[Result[SparqlResponse]], Any] | None = None):
        """Create a Query over a snapshot of the registry.

        With a callback the query is executed right away and its Future is
        returned; otherwise the Query itself is returned for binding.
        """
        statement = Query(self, text, self.registry)
        if callback is not None:
            return statement.execute(callback)
        return statement

    def dispatch(
        self,
        text: str,
        options: Mapping[str, Any] | None,
        callback: Callable[[Result[SparqlResponse]], Any] | None,
    ) -> Future[Result[SparqlResponse]]:
        return self._executor.submit(self._run, text, options, callback)

    def _run(
        self,
        text: str,
        options: Mapping[str, Any] | None,
        callback: Callable[[Result[SparqlResponse]], Any] | None,
    ) -> Result[SparqlResponse]:
        result: Result[SparqlResponse]
        try:
            kind = classify(text)
        except MalformedStatementError as exc:
            log.warning("Rejected statement: %s", exc)
            result = Fail(error=str(exc), kind=ErrorKind.MALFORMED_STATEMENT, context=text[:200])
            self.summary.record("malformed", ok=False)
        else:
            log.debug("Statement classified as %s", kind.value)
            update = kind is StatementKind.UPDATE
            try:
                sent = self.transport.send(text, update, options)
            except Exception as exc:
                log.warning("Transport raised: %r", exc)
                sent = Fail(error=QUERY_FAILED, kind=ErrorKind.TRANSPORT, context=repr(exc))
            if sent.ok:
                result = Ok(data=SparqlResponse(raw=sent.data, update=update))
            else:
                result = sent
            self.summary.record(kind.value, ok=result.ok)

        if callback is not None:
            try:
                callback(result)
            except Exception:
                log.warning("Result callback raised", exc_info=True)
                raise
        return result

    def close(self) -> None:
        """Wait for pending executions and stop the worker."""
        self._executor.shutdown(wait=True)

    def __enter__(self) -> SparqlClient:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
