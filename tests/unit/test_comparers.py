from __future__ import annotations

from npm_semver import SemanticVersion
from npm_semver.comparers import (
    compare,
    compare_with_metadata,
    equals_with_metadata,
    hash_with_metadata,
    metadata_sort_key,
)


def v(text: str) -> SemanticVersion:
    return SemanticVersion.parse(text)


def test_compare_ignores_metadata():
    assert compare(v("1.2.3+a"), v("1.2.3+b")) == 0
    assert compare(v("1.2.3-alpha"), v("1.2.3")) == -1
    assert compare(v("1.10.0"), v("1.9.0")) == 1


def test_metadata_aware_compare():
    assert compare_with_metadata(v("1.2.3+a"), v("1.2.3+b")) == -1
    assert compare_with_metadata(v("1.2.3+a"), v("1.2.3")) == -1
    assert compare_with_metadata(v("1.2.3"), v("1.2.3")) == 0
    assert compare_with_metadata(v("1.2.4+a"), v("1.2.3")) == 1


def test_metadata_sort_key():
    texts = ["1.2.3", "1.2.3+b", "1.2.2", "1.2.3+a", "1.2.3+a.1"]
    ordered = sorted((v(text) for text in texts), key=metadata_sort_key)
    assert [str(item) for item in ordered] == ["1.2.2", "1.2.3+a", "1.2.3+a.1", "1.2.3+b", "1.2.3"]


def test_equality_and_hash_with_metadata():
    assert equals_with_metadata(v("1.2.3+a"), v("1.2.3+a"))
    assert not equals_with_metadata(v("1.2.3+a"), v("1.2.3+b"))
    assert not equals_with_metadata(v("1.2.3+a"), v("1.2.3"))
    assert hash_with_metadata(v("1.2.3+a")) == hash_with_metadata(v("1.2.3+a"))
