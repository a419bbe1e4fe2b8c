"""Tests for RefName validation, parsing and codecs."""

import pytest

from dxrel.model.errors import MarshalError, UnmarshalError, ValidationError
from dxrel.model.git.ref_name import REF_NAME_MAX_LEN, RefName, parse_ref_name

CHARSET = "abcXYZ019._/@{}-^~:"


def _name_of_length(n: int) -> str:
    return (CHARSET * (n // len(CHARSET) + 1))[:n]


class TestValidate:
    def test_zero_value_is_valid(self):
        RefName().validate()
        assert RefName().is_zero()

    @pytest.mark.parametrize("n", [1, 2, 19, 100, 255, REF_NAME_MAX_LEN])
    def test_lengths_within_bounds(self, n):
        RefName(_name_of_length(n)).validate()

    def test_every_length_from_charset(self):
        for n in range(1, REF_NAME_MAX_LEN + 1):
            RefName(_name_of_length(n)).validate()

    @pytest.mark.parametrize("value", ["a" * 257, _name_of_length(257)])
    def test_too_long(self, value):
        with pytest.raises(ValidationError, match="too long: 257"):
            RefName(value).validate()

    @pytest.mark.parametrize("value", [
        "main", "HEAD", "HEAD~3", "main^2", "main@{upstream}", "HEAD@{1}",
        "refs/heads/feature/x", "origin/main", "v1.0.0", "HEAD:path", "MAIN",
    ])
    def test_revision_expressions(self, value):
        RefName(value).validate()

    @pytest.mark.parametrize("value", [" main", "main ", "\tmain", "main\n"])
    def test_edge_whitespace(self, value):
        with pytest.raises(ValidationError, match="leading or trailing whitespace"):
            RefName(value).validate()

    @pytest.mark.parametrize("value", ["a b", "feat*", "a?b", "x[1]", "back\\slash", "v1.0.0+build"])
    def test_invalid_characters(self, value):
        with pytest.raises(ValidationError, match="invalid characters"):
            RefName(value).validate()

    def test_control_character_rejected(self):
        with pytest.raises(ValidationError):
            RefName("ma\x07in").validate()

    def test_non_ascii_rejected(self):
        with pytest.raises(ValidationError):
            RefName("café").validate()

    def test_error_carries_type_name(self):
        with pytest.raises(ValidationError) as info:
            RefName("a b").validate()
        assert info.value.type_name == "RefName"


class TestParse:
    def test_trims(self):
        assert parse_ref_name("  main \n") == RefName("main")

    @pytest.mark.parametrize("value", ["", "   ", "\t\n"])
    def test_blank_is_zero(self, value):
        assert parse_ref_name(value) == RefName()

    def test_invalid_raises(self):
        with pytest.raises(ValidationError, match="invalid RefName"):
            parse_ref_name("bad name")


class TestEquality:
    def test_case_sensitive(self):
        assert RefName("main") != RefName("Main")

    def test_identical(self):
        assert RefName("HEAD~1") == RefName("HEAD~1")

    def test_string_forms(self):
        name = RefName("release/1.x")
        assert str(name) == "release/1.x"
        assert name.redacted() == "release/1.x"
        assert name.type_name() == "RefName"


class TestCodec:
    def test_json_plain_string(self):
        assert RefName("HEAD~3").to_json() == '"HEAD~3"'

    def test_json_decode_retrims(self):
        assert RefName.from_json('"  main  "') == RefName("main")

    def test_json_decode_rejects_invalid(self):
        with pytest.raises(UnmarshalError, match="RefName"):
            RefName.from_json('"a b"')

    def test_json_decode_rejects_non_string(self):
        with pytest.raises(UnmarshalError):
            RefName.from_json("42")

    def test_json_decode_rejects_malformed(self):
        with pytest.raises(UnmarshalError, match="malformed JSON"):
            RefName.from_json('"unterminated')

    def test_marshal_refuses_invalid(self):
        with pytest.raises(MarshalError):
            RefName("a b").to_json()
        with pytest.raises(MarshalError):
            RefName("a b").to_yaml()

    @pytest.mark.parametrize("value", ["main", "main@{upstream}", "HEAD~3", "123", "yes", "~", ""])
    def test_round_trips(self, value):
        name = RefName(value)
        assert RefName.from_json(name.to_json()) == name
        assert RefName.from_yaml(name.to_yaml()) == name
