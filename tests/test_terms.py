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
"""Tests for IRI, Literal and StringLiteral terms."""

import dataclasses
import math

import pytest

from sparql_client import COMMON_PREFIXES, IRI, LanguageTagError, Literal, StringLiteral, TermError, UnsafeIRIError

XSD = COMMON_PREFIXES["xsd"]


class TestIRI:
    def test_full_iri(self):
        iri = IRI.create("http://example.org/a")
        assert iri.format() == "<http://example.org/a>"
        assert iri.namespace is None
        assert iri.prefix is None

    def test_well_known_namespace_detected(self):
        iri = IRI.create(XSD + "integer")
        assert iri.namespace == "xsd"
        assert iri.local_name == "integer"
        assert iri.format() == f"<{XSD}integer>"

    def test_prefixed_mapping(self):
        iri = IRI.create({"ex": "thing"})
        assert iri.format() == "ex:thing"
        assert iri.namespace is None
        assert str(iri) == "ex:thing"

    def test_prefixed_well_known(self):
        iri = IRI.create({"xsd": "double"})
        assert iri.namespace == "xsd"
        assert iri.local_name == "double"

    def test_create_passes_iri_through(self):
        iri = IRI.create("http://example.org/a")
        assert IRI.create(iri) is iri

    @pytest.mark.parametrize("source", [{}, {"a": "b", "c": "d"}, 42, None, ["http://a/"]])
    def test_bad_shapes(self, source):
        with pytest.raises(TypeError):
            IRI.create(source)

    def test_non_string_mapping_value(self):
        with pytest.raises(TypeError):
            IRI.create({"ex": 1})

    def test_bad_prefixed_part(self):
        with pytest.raises(TermError):
            IRI.create({"ex": "has space"})

    def test_unsafe(self):
        with pytest.raises(UnsafeIRIError):
            IRI.create("http://example.org/>")

    def test_immutable(self):
        iri = IRI.create("http://example.org/a")
        with pytest.raises(dataclasses.FrozenInstanceError):
            iri.value = "http://other/"


class TestLiteralBuiltins:
    @pytest.mark.parametrize(
        "value, datatype, expected",
        [
            (42, {"xsd": "integer"}, "42"),
            ("-7", XSD + "integer", "-7"),
            (True, {"xsd": "boolean"}, "true"),
            ("false", {"xsd": "boolean"}, "false"),
            ("3.14", {"xsd": "decimal"}, "3.14"),
            ("1.5", XSD + "double", "1.5e0"),
            (2.5, {"xsd": "double"}, "2.5e0"),
            (1e20, {"xsd": "double"}, "1e+20"),
            ("6.02E23", {"xsd": "double"}, "6.02E23"),
        ],
    )
    def test_bare_form(self, value, datatype, expected):
        assert Literal(value, datatype).format() == expected

    @pytest.mark.parametrize(
        "value, datatype, expected",
        [
            ("n/a", {"xsd": "integer"}, "'n/a'^^xsd:integer"),
            ("tru", {"xsd": "boolean"}, "'tru'^^xsd:boolean"),
            ("abc", {"xsd": "double"}, "'abc'^^xsd:double"),
            ("1.5", XSD + "integer", f"'1.5'^^<{XSD}integer>"),
        ],
    )
    def test_non_matching_is_quoted(self, value, datatype, expected):
        assert Literal(value, datatype).format() == expected

    def test_double_coercion_is_best_effort(self):
        assert Literal(math.nan, {"xsd": "double"}).format() == "'nan'^^xsd:double"


class TestLiteral:
    def test_untyped(self):
        assert Literal("hello").format() == "'hello'"
        assert Literal(12).format() == "'12'"

    def test_non_builtin_xsd_type(self):
        assert Literal("x", {"xsd": "string"}).format() == "'x'^^xsd:string"

    def test_custom_datatype(self):
        lit = Literal("12", "http://example.org/myint")
        assert lit.format() == "'12'^^<http://example.org/myint>"
        assert isinstance(lit.datatype, IRI)

    def test_value_is_text(self):
        assert Literal(3).value == "3"

    def test_null_rejected(self):
        with pytest.raises(TermError):
            Literal("a\x00b")

    @pytest.mark.parametrize("datatype", [42, {"a": "b", "c": "d"}, "http://bad>"])
    def test_bad_datatype(self, datatype):
        with pytest.raises(TermError, match="Datatype must be"):
            Literal("x", datatype)

    def test_str_is_format(self):
        assert str(Literal(1, {"xsd": "integer"})) == "1"


class TestStringLiteral:
    def test_plain(self):
        assert StringLiteral("chat").format() == "'chat'"

    def test_language(self):
        assert StringLiteral("chat", "fr").format() == "'chat'@fr"
        assert StringLiteral("color", "en-US").format() == "'color'@en-US"

    def test_quotes_and_newlines(self):
        assert StringLiteral("it's", "en").format() == r'"it\'s"@en'
        assert StringLiteral("a\nb").format() == '"""a\nb"""'

    def test_never_has_datatype(self):
        assert StringLiteral("x", "en").datatype is None

    @pytest.mark.parametrize("tag", ["", "en_US", "e n", "en-"])
    def test_bad_language(self, tag):
        with pytest.raises(LanguageTagError):
            StringLiteral("x", tag)

    def test_null_rejected(self):
        with pytest.raises(TermError):
            StringLiteral("\x00")
