from __future__ import annotations

import pytest

from npm_semver import (
    IncrementOverflowError,
    IncrementType,
    SemanticVersion,
    SemanticVersionBuilder,
)


@pytest.mark.parametrize(
    ("text", "kind", "identifier", "expected"),
    [
        ("1.2.3", "major", None, "2.0.0"),
        ("1.0.0-alpha", "major", None, "1.0.0"),
        ("1.1.0-alpha", "major", None, "2.0.0"),
        ("1.0.1-alpha", "major", None, "2.0.0"),
        ("1.2.3", "minor", None, "1.3.0"),
        ("1.2.0-alpha", "minor", None, "1.2.0"),
        ("1.2.1-alpha", "minor", None, "1.3.0"),
        ("1.2.3", "patch", None, "1.2.4"),
        ("1.2.3-alpha", "patch", None, "1.2.3"),
        ("1.2.3", "premajor", None, "2.0.0-0"),
        ("1.2.3", "premajor", "beta", "2.0.0-beta.0"),
        ("1.2.3", "premajor", 0, "2.0.0-0"),
        ("1.2.3", "preminor", "alpha", "1.3.0-alpha.0"),
        ("1.2.3", "prepatch", "alpha", "1.2.4-alpha.0"),
        ("1.2.3-alpha", "prepatch", None, "1.2.4-0"),
        ("1.2.3", "prerelease", None, "1.2.4-0"),
        ("1.2.3", "prerelease", "beta", "1.2.4-beta.0"),
        ("1.2.3-beta.4", "prerelease", "beta", "1.2.3-beta.5"),
        ("1.2.3-beta.4", "prerelease", None, "1.2.3-beta.5"),
        ("1.2.3-beta", "prerelease", None, "1.2.3-beta.0"),
        ("1.2.3-beta", "prerelease", "beta", "1.2.3-beta.0"),
        ("1.2.3-alpha.4", "prerelease", "beta", "1.2.3-beta.0"),
        ("1.2.3-0", "prerelease", None, "1.2.3-1"),
        ("1.2.3-beta.foo", "prerelease", "beta", "1.2.3-beta.0"),
        ("1.2.3-alpha.1.beta", "prerelease", None, "1.2.3-alpha.2.beta"),
    ],
)
def test_increment(text, kind, identifier, expected):
    builder = SemanticVersionBuilder.parse(text)
    assert str(builder.increment(kind, identifier).to_version()) == expected


def test_increment_accepts_enum_and_rejects_unknown_kinds():
    builder = SemanticVersionBuilder(1, 2, 3)
    assert builder.increment(IncrementType.PRE_MINOR).to_version() == SemanticVersion(1, 3, 0, (0,))
    with pytest.raises(ValueError):
        builder.increment("micro")


def test_operations_chain_and_return_self():
    builder = SemanticVersionBuilder(1, 2, 3)
    result = builder.increment_minor().append_pre_release("rc").append_pre_release(1).append_build_metadata("sha")
    assert result is builder
    assert str(builder.to_version()) == "1.3.0-rc.1+sha"
    builder.clear_pre_releases().clear_build_metadata()
    assert str(builder.to_version()) == "1.3.0"


def test_build_metadata_survives_increments():
    builder = SemanticVersionBuilder.parse("1.2.3+build.5")
    assert str(builder.increment_patch().to_version()) == "1.2.4+build.5"


@pytest.mark.parametrize(
    ("text", "kind"),
    [
        ("2147483647.0.0", "major"),
        ("2147483647.0.0", "premajor"),
        ("1.2147483647.0", "minor"),
        ("1.2147483647.0", "preminor"),
        ("1.2.2147483647", "patch"),
        ("1.2.2147483647", "prepatch"),
        ("1.2.2147483647", "prerelease"),
        ("1.2.3-alpha.2147483647", "prerelease"),
    ],
)
def test_overflow_leaves_builder_unchanged(text, kind):
    builder = SemanticVersionBuilder.parse(text)
    with pytest.raises(IncrementOverflowError):
        builder.increment(kind)
    assert str(builder.to_version()) == text


def test_overflow_is_not_raised_when_the_number_is_kept():
    builder = SemanticVersionBuilder.parse("2147483647.0.0-rc")
    assert str(builder.increment_major().to_version()) == "2147483647.0.0"


def test_setters_validate():
    builder = SemanticVersionBuilder()
    builder.major = 3
    assert builder.major == 3
    with pytest.raises(ValueError):
        builder.minor = -1
    with pytest.raises(ValueError):
        builder.patch = 2147483648
    with pytest.raises(TypeError):
        builder.major = "1"
    with pytest.raises(ValueError):
        builder.append_pre_release("01")
    with pytest.raises(ValueError):
        builder.append_build_metadata("")
    assert str(builder.to_version()) == "3.0.0"


def test_constructor_rejects_bare_string_identifiers():
    with pytest.raises(TypeError):
        SemanticVersionBuilder(1, 2, 3, pre_releases="alpha")
    with pytest.raises(TypeError):
        SemanticVersionBuilder(1, 2, 3, build_metadata="sha")
    assert str(SemanticVersionBuilder(1, 2, 3, ["alpha"], ["sha"]).to_version()) == "1.2.3-alpha+sha"


def test_version_round_trip_and_increment():
    version = SemanticVersion.parse("1.2.3-rc.1+sha")
    assert version.to_builder().to_version() == version
    assert str(version.increment(IncrementType.PRE_RELEASE)) == "1.2.3-rc.2+sha"
    assert str(version) == "1.2.3-rc.1+sha"
    assert repr(SemanticVersionBuilder(1)) == "SemanticVersionBuilder('1.0.0')"
