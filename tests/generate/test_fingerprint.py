"""Tests for the structural fingerprint of type definitions."""

from __future__ import annotations

from harsdk.commands.generate.fingerprint import (
    declared_names,
    fingerprint,
    normalize_definition,
)


class TestNormalizeDefinition:
    def test_collapses_whitespace_and_erases_name(self):
        text = "interface Foo  {\n x: number; }"
        assert normalize_definition(text) == "interface { x: number; }"

    def test_type_alias(self):
        assert normalize_definition("type Foo = any;") == "type = any;"

    def test_references_become_positional(self):
        text = "interface A {\n  b: AB;\n}\n\ninterface AB {\n  c: string;\n}"
        assert normalize_definition(text) == "interface { b: #1; } interface { c: string; }"

    def test_undeclared_names_kept(self):
        text = "interface A {\n  data: ResponseBase;\n}"
        assert "ResponseBase" in normalize_definition(text)


class TestFingerprint:
    def test_ignores_declared_name(self):
        a = "interface UsersResponse {\n  id: number;\n  name: string;\n}"
        b = "interface TeamsResponse {\n  id: number;\n  name: string;\n}"
        assert fingerprint(a) == fingerprint(b)

    def test_ignores_whitespace_layout(self):
        a = "interface A {\n  id: number;\n}"
        b = "interface B { id: number; }"
        assert fingerprint(a) == fingerprint(b)

    def test_different_field_type(self):
        a = "interface A {\n  id: number;\n}"
        b = "interface A {\n  id: string;\n}"
        assert fingerprint(a) != fingerprint(b)

    def test_different_field_name(self):
        a = "interface A {\n  id: number;\n}"
        b = "interface A {\n  key: number;\n}"
        assert fingerprint(a) != fingerprint(b)

    def test_nested_auxiliary_names_ignored(self):
        a = "interface A {\n  addr: AAddr;\n}\n\ninterface AAddr {\n  city: string;\n}"
        b = "interface B {\n  addr: BAddr;\n}\n\ninterface BAddr {\n  city: string;\n}"
        assert fingerprint(a) == fingerprint(b)

    def test_nested_shape_difference_detected(self):
        a = "interface A {\n  addr: AAddr;\n}\n\ninterface AAddr {\n  city: string;\n}"
        b = "interface B {\n  addr: BAddr;\n}\n\ninterface BAddr {\n  zip: number;\n}"
        assert fingerprint(a) != fingerprint(b)

    def test_alias_and_interface_differ(self):
        assert fingerprint("type A = any;") != fingerprint("interface A {\n}")

    def test_known_values(self):
        assert fingerprint("") == "0"
        assert fingerprint("a") == "2p"
        assert fingerprint("ab") == "2e9"

    def test_stays_in_signed_32_bit_range(self):
        token = fingerprint("interface A {\n" + "  field: string;\n" * 50 + "}")
        value = int(token, 36)
        assert -(2**31) <= value < 2**31

    def test_deterministic(self):
        text = "interface A {\n  id: number;\n}"
        assert fingerprint(text) == fingerprint(text)


class TestDeclaredNames:
    def test_root_then_auxiliaries(self):
        text = "interface A {\n  b: AB;\n}\n\ninterface AB {\n  c: string;\n}"
        assert declared_names(text) == ["A", "AB"]

    def test_type_alias(self):
        assert declared_names("type Blob = any;") == ["Blob"]
