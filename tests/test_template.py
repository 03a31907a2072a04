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
"""Tests for Query: binding, wire-text assembly and execute dispatch."""

import threading

import pytest

from sparql_client import (
    COMMON_PREFIXES,
    IRI,
    ErrorKind,
    Fail,
    Literal,
    Query,
    QueryStateError,
    SparqlResponse,
    StringLiteral,
)


class TestBind:
    def test_replaces_placeholder_and_whitespace(self, client):
        statement = client.query("SELECT * WHERE { ?s ?p ?name\n }")
        statement.bind("name", "<http://x>")
        assert statement.text() == "SELECT * WHERE { ?s ?p <http://x> }"

    def test_replaces_every_occurrence(self, client):
        statement = client.query("SELECT ?x WHERE { ?x ?p ?v . ?y ?q ?v }")
        statement.bind("v", "42")
        assert statement.text() == "SELECT ?x WHERE { ?x ?p 42 . ?y ?q 42 }"

    def test_requires_trailing_whitespace(self, client):
        statement = client.query("SELECT ?names ?name}")
        statement.bind("name", "'x'")
        assert statement.text() == "SELECT ?names ?name}"

    def test_longer_name_untouched(self, client):
        statement = client.query("SELECT * WHERE { ?s ?p ?name2 }")
        statement.bind("name", "'x'")
        assert statement.text() == "SELECT * WHERE { ?s ?p ?name2 }"

    def test_term_values_are_formatted(self, client):
        statement = client.query("SELECT * WHERE { ?s ?p ?o . ?s ?q ?l . ?s ?r ?n }")
        statement.bind("o", IRI.create("http://example.org/o"))
        statement.bind("l", StringLiteral("chat", "fr"))
        statement.bind("n", Literal(5, {"xsd": "integer"}))
        assert statement.text() == (
            "SELECT * WHERE { ?s ?p <http://example.org/o> . ?s ?q 'chat'@fr . ?s ?r 5 }"
        )

    def test_backslashes_in_value_kept_literally(self, client):
        statement = client.query("SELECT * WHERE { ?s ?p ?o }")
        statement.bind("o", StringLiteral("a\\b"))
        assert statement.text() == "SELECT * WHERE { ?s ?p 'a\\\\b' }"

    def test_chainable_and_recorded(self, client):
        statement = client.query("SELECT * WHERE { ?s ?p ?o }")
        assert statement.bind("s", "<http://s>").bind("o", "<http://o>") is statement
        assert statement.bindings == {"s": "<http://s>", "o": "<http://o>"}
        assert statement.original_text == "SELECT * WHERE { ?s ?p ?o }"

    @pytest.mark.parametrize("placeholder, value", [(1, "x"), ("", "x"), ("o", 3), ("o", None)])
    def test_wrong_shape(self, client, placeholder, value):
        statement = client.query("SELECT * WHERE { ?s ?p ?o }")
        with pytest.raises(TypeError):
            statement.bind(placeholder, value)


class TestFinalText:
    def test_preamble_prepended_to_bound_text(self, client, transport):
        client.register("http://base/").register_common("xsd")
        statement = client.query("SELECT * WHERE { ?s ?p ?o }").bind("o", "1")
        expected = (
            "BASE <http://base/>\n"
            f"PREFIX xsd: <{COMMON_PREFIXES['xsd']}>\n"
            "\n"
            "SELECT * WHERE { ?s ?p 1 }"
        )
        assert statement.final_text() == expected

        statement.execute().result(timeout=5)
        assert transport.calls[0][0] == expected

    def test_query_registrations_do_not_leak(self, client):
        client.register("ex", "http://example.org/")
        statement = client.query("ASK {}")
        statement.register("local", "http://local/").register("http://qbase/")
        client.register("late", "http://late/")

        assert list(statement.prefixes) == ["ex", "local"]
        assert statement.base == "http://qbase/"
        assert list(client.prefixes) == ["ex", "late"]
        assert client.base is None

    def test_non_string_template(self, client):
        with pytest.raises(TypeError):
            Query(client, None, client.registry)


class TestExecute:
    def test_no_arguments_returns_future(self, client, transport):
        result = client.query("ASK { ?s ?p ?o }").execute().result(timeout=5)
        assert result.ok
        assert isinstance(result.data, SparqlResponse)
        assert result.data.boolean() is True
        assert transport.calls == [("ASK { ?s ?p ?o }", False, None)]

    def test_callback_receives_result_once(self, client):
        received = []
        future = client.query("ASK {}").execute(received.append)
        result = future.result(timeout=5)
        assert received == [result]

    def test_options_forwarded(self, client, transport):
        client.query("ASK {}").execute({"timeout": 2}, lambda r: None).result(timeout=5)
        assert transport.calls[0][2] == {"timeout": 2}

    def test_update_flag(self, client, transport):
        result = client.query("INSERT DATA { <a:x> <a:y> <a:z> }").execute().result(timeout=5)
        assert transport.calls[0][1] is True
        assert result.data.update is True

    def test_too_many_arguments(self, client):
        with pytest.raises(TypeError, match="Wrong number of arguments"):
            client.query("ASK {}").execute({}, lambda r: None, "extra")

    def test_callback_must_be_callable(self, client):
        with pytest.raises(TypeError):
            client.query("ASK {}").execute({}, "not callable")

    def test_consumed_once(self, client):
        statement = client.query("ASK {}")
        statement.execute().result(timeout=5)
        with pytest.raises(QueryStateError):
            statement.execute()

    def test_malformed_statement_delivered_async(self, client, transport):
        received = []
        future = client.query("   ").execute(received.append)
        result = future.result(timeout=5)
        assert isinstance(result, Fail)
        assert result.kind is ErrorKind.MALFORMED_STATEMENT
        assert received == [result]
        assert transport.calls == []

    def test_callback_runs_off_calling_stack(self, client, transport):
        transport.gate = threading.Event()
        caller = threading.get_ident()
        seen = []

        future = client.query("ASK {}").execute(lambda r: seen.append(threading.get_ident()))
        assert seen == []
        transport.gate.set()
        future.result(timeout=5)

        assert len(seen) == 1
        assert seen[0] != caller
