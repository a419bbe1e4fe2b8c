"""Tests for Ref and the resolved CommitRange."""

import json

import pytest

from dxrel.model.errors import MarshalError, UnmarshalError, ValidationError
from dxrel.model.git.commit_range import CommitRange, new_commit_range
from dxrel.model.git.hash import Hash
from dxrel.model.git.ref import Ref, new_ref
from dxrel.model.git.ref_kind import RefKind
from dxrel.model.git.ref_name import RefName

from samples import SHA1_A, SHA1_B


@pytest.fixture
def from_ref() -> Ref:
    return Ref(RefName("v1.0.0"), RefKind.TAG, Hash(SHA1_A))


@pytest.fixture
def to_ref() -> Ref:
    return Ref(RefName("v2.0.0"), RefKind.TAG, Hash(SHA1_B))


class TestRef:
    def test_valid(self, from_ref):
        from_ref.validate()
        assert not from_ref.is_zero()

    def test_zero(self):
        assert Ref().is_zero()
        assert str(Ref()) == "(zero)"

    def test_hash_required(self):
        with pytest.raises(ValidationError, match="Hash must not be empty") as info:
            Ref(name=RefName("main"), kind=RefKind.BRANCH).validate()
        assert info.value.field == "hash"

    def test_bad_hash(self):
        with pytest.raises(ValidationError, match="invalid Ref Hash"):
            Ref(hash=Hash("INVALID")).validate()

    def test_hash_only(self):
        ref = Ref(kind=RefKind.HASH, hash=Hash(SHA1_A))
        ref.validate()
        assert str(ref) == "a1b2c3d"

    def test_hash_kind_needs_full_hash_name(self):
        with pytest.raises(ValidationError, match="not a full hash"):
            Ref(RefName("main"), RefKind.HASH, Hash(SHA1_A)).validate()
        Ref(RefName(SHA1_A), RefKind.HASH, Hash(SHA1_A)).validate()

    def test_str_and_redacted(self, from_ref):
        assert str(from_ref) == "v1.0.0(a1b2c3d)"
        assert from_ref.redacted() == "v1.0.0(a1b2c3d)"

    def test_new_ref_parses_strings(self):
        ref = new_ref(" main ", 1, SHA1_A.upper())
        assert ref == Ref(RefName("main"), RefKind.BRANCH, Hash(SHA1_A))

    def test_new_ref_rejects_bad_kind(self):
        with pytest.raises(ValidationError, match="invalid Ref"):
            new_ref("main", 42, SHA1_A)

    def test_json_shape(self, from_ref):
        assert json.loads(from_ref.to_json()) == {"name": "v1.0.0", "kind": "tag", "hash": SHA1_A}

    def test_round_trip(self, from_ref):
        assert Ref.from_json(from_ref.to_json()) == from_ref
        assert Ref.from_yaml(from_ref.to_yaml()) == from_ref

    def test_decode_bad_kind(self):
        with pytest.raises(UnmarshalError, match="Ref"):
            Ref.from_json(json.dumps({"name": "main", "kind": "trunk", "hash": SHA1_A}))


class TestCommitRange:
    def test_two_tags(self, from_ref, to_ref):
        cr = new_commit_range(from_ref, to_ref)
        assert cr.from_ == from_ref and cr.to == to_ref

    def test_from_beginning(self, to_ref):
        cr = new_commit_range(Ref(), to_ref)
        assert cr.from_.is_zero()

    def test_zero_to_invalid(self, from_ref):
        with pytest.raises(ValidationError, match="To is zero"):
            new_commit_range(from_ref, Ref())

    def test_both_zero_invalid(self):
        with pytest.raises(ValidationError, match="CommitRange is zero"):
            new_commit_range(Ref(), Ref())

    def test_bad_from_hash(self, to_ref):
        bad = Ref(RefName("v1.0.0"), RefKind.TAG, Hash("INVALID"))
        with pytest.raises(ValidationError, match="invalid CommitRange From"):
            new_commit_range(bad, to_ref)

    def test_bad_to_hash(self, from_ref):
        bad = Ref(RefName("v2.0.0"), RefKind.TAG, Hash("INVALID"))
        with pytest.raises(ValidationError, match="invalid CommitRange To"):
            new_commit_range(from_ref, bad)

    def test_str(self, from_ref, to_ref):
        assert str(CommitRange(from_ref, to_ref)) == "v1.0.0(a1b2c3d)..v2.0.0(1234567)"

    def test_str_from_beginning(self):
        head = Ref(RefName("HEAD"), RefKind.HEAD, Hash(SHA1_A))
        assert str(CommitRange(to=head)) == "(zero)..HEAD(a1b2c3d)"

    def test_str_hash_only(self):
        cr = CommitRange(Ref(hash=Hash(SHA1_A)), Ref(hash=Hash(SHA1_B)))
        assert str(cr) == "a1b2c3d..1234567"
        assert cr.redacted() == "a1b2c3d..1234567"

    def test_git_range(self, from_ref, to_ref):
        assert new_commit_range(from_ref, to_ref).git_range() == f"{SHA1_A}..{SHA1_B}"
        assert new_commit_range(Ref(), to_ref).git_range() == SHA1_B

    def test_json_round_trip(self, from_ref, to_ref):
        cr = new_commit_range(from_ref, to_ref)
        assert CommitRange.from_json(cr.to_json()) == cr

    def test_yaml_round_trip_open_start(self, to_ref):
        cr = new_commit_range(Ref(), to_ref)
        assert json.loads(cr.to_json())["from"] is None
        assert CommitRange.from_yaml(cr.to_yaml()) == cr

    def test_marshal_fails_closed(self, from_ref):
        with pytest.raises(MarshalError):
            CommitRange(from_ref, Ref()).to_json()

    def test_unmarshal_rejects_missing_to(self, from_ref):
        with pytest.raises(UnmarshalError, match="To is zero"):
            CommitRange.from_json(json.dumps({"from": from_ref.to_data()}))

    def test_unmarshal_names_nested_type(self, to_ref):
        payload = {"from": {"name": "v1", "kind": "tag", "hash": "nothex"}, "to": to_ref.to_data()}
        with pytest.raises(UnmarshalError, match="CommitRange") as info:
            CommitRange.from_json(json.dumps(payload))
        assert "Ref" in str(info.value)
