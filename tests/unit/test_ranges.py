from __future__ import annotations

import pytest

from npm_semver import (
    ComparatorSet,
    InvalidRangeError,
    SemanticErrorCode,
    SemanticOptions,
    SemanticVersion,
    VersionRange,
)
from npm_semver.ranges import CaretRange, EqualTo, HyphenRange, TildeRange, XRange

INCLUDED = [
    ("1.0.0 - 2.0.0", "1.2.3"),
    ("^1.2.3+build", "1.2.3"),
    ("^1.2.3+build", "1.3.0"),
    ("1.2.3-pre+asdf - 2.4.3-pre+asdf", "1.2.3"),
    ("1.2.3-pre+asdf - 2.4.3-pre+asdf", "1.2.3-pre.2"),
    ("1.2.3-pre+asdf - 2.4.3-pre+asdf", "2.4.3-alpha"),
    ("1.2.3+asdf - 2.4.3+asdf", "1.2.3"),
    ("1.0.0", "1.0.0"),
    (">=*", "0.2.4"),
    ("", "1.0.0"),
    ("*", "1.2.3"),
    (">=1.0.0", "1.0.0"),
    (">=1.0.0", "1.0.1"),
    (">=1.0.0", "1.1.0"),
    (">1.0.0", "1.0.1"),
    (">1.0.0", "1.1.0"),
    ("<=2.0.0", "2.0.0"),
    ("<=2.0.0", "1.9999.9999"),
    ("<=2.0.0", "0.2.9"),
    ("<2.0.0", "1.9999.9999"),
    ("<2.0.0", "0.2.9"),
    (">= 1.0.0", "1.0.0"),
    (">=  1.0.0", "1.0.1"),
    ("<=  2.0.0", "2.0.0"),
    ("<    2.0.0", "0.2.9"),
    ("0.1.20 || 1.2.4", "1.2.4"),
    (">=0.2.3 || <0.0.1", "0.0.0"),
    (">=0.2.3 || <0.0.1", "0.2.3"),
    (">=0.2.3 || <0.0.1", "0.2.4"),
    ("||", "1.3.4"),
    ("2.x.x", "2.1.3"),
    ("1.2.x", "1.2.3"),
    ("1.2.x || 2.x", "2.1.3"),
    ("1.2.x || 2.x", "1.2.3"),
    ("x", "1.2.3"),
    ("2.*.*", "2.1.3"),
    ("1.2.*", "1.2.3"),
    ("2", "2.1.2"),
    ("2.3", "2.3.1"),
    ("~0.0.1", "0.0.1"),
    ("~0.0.1", "0.0.2"),
    ("~x", "0.0.9"),
    ("~2", "2.0.9"),
    ("~2.4", "2.4.0"),
    ("~2.4", "2.4.5"),
    ("~>3.2.1", "3.2.2"),
    ("~1", "1.2.3"),
    ("~>1", "1.2.3"),
    ("~> 1", "1.2.3"),
    ("~1.0", "1.0.2"),
    ("~ 1.0", "1.0.2"),
    ("~ 1.0.3", "1.0.12"),
    (">=1", "1.0.0"),
    (">= 1", "1.0.0"),
    ("<1.2", "1.1.1"),
    ("< 1.2", "1.1.1"),
    ("=0.7.x", "0.7.2"),
    ("<=0.7.x", "0.7.2"),
    (">=0.7.x", "0.7.2"),
    ("<=0.7.x", "0.6.2"),
    ("~1.2.1 >=1.2.3", "1.2.3"),
    ("~1.2.1 =1.2.3", "1.2.3"),
    ("~1.2.1 1.2.3", "1.2.3"),
    ("~1.2.1 >=1.2.3 1.2.3", "1.2.3"),
    ("~1.2.1 1.2.3 >=1.2.3", "1.2.3"),
    (">=1.2.1 1.2.3", "1.2.3"),
    ("1.2.3 >=1.2.1", "1.2.3"),
    (">=1.2.3 >=1.2.1", "1.2.3"),
    (">=1.2.1 >=1.2.3", "1.2.3"),
    (">=1.2", "1.2.8"),
    ("^1.2.3", "1.8.1"),
    ("^0.1.2", "0.1.2"),
    ("^0.1", "0.1.2"),
    ("^0.0.1", "0.0.1"),
    ("^1.2", "1.4.2"),
    ("^1.2 ^1", "1.4.2"),
    ("^1.2.3-alpha", "1.2.3-pre"),
    ("^1.2.0-alpha", "1.2.0-pre"),
    ("^0.0.1-alpha", "0.0.1-beta"),
    ("^0.0.1-alpha", "0.0.1"),
    ("^0.1.1-alpha", "0.1.1-beta"),
    ("^x", "1.2.3"),
    ("x - 1.0.0", "0.9.7"),
    ("x - 1.x", "0.9.7"),
    ("1.0.0 - x", "1.9.7"),
    ("1.x - x", "1.9.7"),
    ("<=7.x", "7.9.9"),
    (">1.2.3-alpha.3", "1.2.3-alpha.7"),
    (">1.2.3-alpha.3", "3.4.5"),
]

EXCLUDED = [
    ("1.0.0 - 2.0.0", "2.2.3"),
    ("1.2.3+asdf - 2.4.3+asdf", "1.2.3-pre.2"),
    ("1.2.3+asdf - 2.4.3+asdf", "2.4.3-alpha"),
    ("^1.2.3+build", "2.0.0"),
    ("^1.2.3+build", "1.2.0"),
    ("^1.2.3", "1.2.3-pre"),
    ("^1.2", "1.2.0-pre"),
    (">1.2", "1.3.0-beta"),
    ("<=1.2.3", "1.2.3-beta"),
    ("^1.2.3", "1.2.3-beta"),
    ("=0.7.x", "0.7.0-asdf"),
    (">=0.7.x", "0.7.0-asdf"),
    ("<=0.7.x", "0.7.0-asdf"),
    ("1", "1.0.0beta"),
    ("<1", "1.0.0beta"),
    ("< 1", "1.0.0beta"),
    ("1.0.0", "1.0.1"),
    (">=1.0.0", "0.0.0"),
    (">=1.0.0", "0.0.1"),
    (">=1.0.0", "0.1.0"),
    (">1.0.0", "0.0.1"),
    (">1.0.0", "0.1.0"),
    ("<=2.0.0", "3.0.0"),
    ("<=2.0.0", "2.9999.9999"),
    ("<=2.0.0", "2.2.9"),
    ("<2.0.0", "2.9999.9999"),
    ("<2.0.0", "2.2.9"),
    (">=0.1.97", "0.1.93"),
    ("0.1.20 || 1.2.4", "1.2.3"),
    (">=0.2.3 || <0.0.1", "0.0.3"),
    (">=0.2.3 || <0.0.1", "0.2.2"),
    ("2.x.x", "1.1.3"),
    ("2.x.x", "3.1.3"),
    ("1.2.x", "1.3.3"),
    ("1.2.x || 2.x", "3.1.3"),
    ("1.2.x || 2.x", "1.1.3"),
    ("2.*.*", "1.1.3"),
    ("2.*.*", "3.1.3"),
    ("1.2.*", "1.3.3"),
    ("2", "1.1.2"),
    ("2.3", "2.4.1"),
    ("~0.0.1", "0.1.0-alpha"),
    ("~0.0.1", "0.1.0"),
    ("~2.4", "2.5.0"),
    ("~2.4", "2.3.9"),
    ("~>3.2.1", "3.3.2"),
    ("~>3.2.1", "3.2.0"),
    ("~1", "0.2.3"),
    ("~>1", "2.2.3"),
    ("~1.0", "1.1.0"),
    ("<1", "1.0.0"),
    (">=1.2", "1.1.1"),
    ("=0.7.x", "0.8.2"),
    (">=0.7.x", "0.6.2"),
    ("<0.7.x", "0.7.2"),
    ("<1.2.3", "1.2.3-beta"),
    ("=1.2.3", "1.2.3-beta"),
    (">1.2", "1.2.8"),
    ("^0.0.1", "0.0.2"),
    ("^1.2.3", "2.0.0-alpha"),
    ("^1.2.3", "1.2.2"),
    ("^1.2", "1.1.9"),
    ("*", "1.2.3-foo"),
    ("^1.0.0", "2.0.0-rc1"),
    ("^1.0.0", "1.0.0-rc1"),
    ("1 - 2", "2.0.0-pre"),
    ("1 - 2", "1.0.0-pre"),
    ("1.1.x", "1.0.0-a"),
    ("1.1.x", "1.1.0-a"),
    ("1.1.x", "1.2.0-a"),
    ("1.x", "1.1.0-a"),
    (">1.2.3-alpha.3", "3.4.5-alpha.9"),
    (">*", "1.0.0"),
    ("<*", "1.0.0"),
]


def v(text: str) -> SemanticVersion:
    return SemanticVersion.parse(text, SemanticOptions.LOOSE)


@pytest.mark.parametrize(("expression", "version"), INCLUDED)
def test_included(expression, version):
    assert VersionRange.parse(expression).is_satisfied_by(v(version))


@pytest.mark.parametrize(("expression", "version"), EXCLUDED)
def test_excluded(expression, version):
    assert not VersionRange.parse(expression).is_satisfied_by(v(version))


@pytest.mark.parametrize(
    ("expression", "version", "expected"),
    [
        ("^1.2.3", "1.3.0-beta", True),
        ("*", "1.0.0-rc1", True),
        ("<=1.2.3", "1.2.3-beta", True),
        ("1.x", "1.1.0-a", True),
        ("<=0.7.x", "0.7.0-asdf", True),
        (">=0.7.x", "0.7.0-asdf", False),
        ("^1.0.0", "1.0.0-rc1", False),
        ("1.0.0 - 2.0.0", "2.0.1-alpha", False),
    ],
)
def test_include_pre_releases(expression, version, expected):
    version_range = VersionRange.parse(expression)
    assert version_range.is_satisfied_by(v(version), include_pre_releases=True) is expected


def test_empty_range_matches_nothing():
    assert not VersionRange().is_satisfied_by(v("1.0.0"))
    assert not VersionRange.NONE.is_satisfied_by(v("1.0.0"), include_pre_releases=True)
    assert str(VersionRange.NONE) == ""


def test_empty_comparator_set_matches_every_release():
    assert ComparatorSet().is_satisfied_by(v("1.0.0"))
    assert not ComparatorSet().is_satisfied_by(v("1.0.0-rc"))
    assert ComparatorSet().is_satisfied_by(v("1.0.0-rc"), include_pre_releases=True)
    assert not VersionRange.parse("").is_satisfied_by(v("1.0.0-rc"))


def test_all_range():
    assert str(VersionRange.ALL) == "*"
    assert v("3.1.4") in VersionRange.ALL


@pytest.mark.parametrize(
    ("expression", "expected"),
    [
        ("", "*"),
        ("  ", "*"),
        ("||", "* || *"),
        ("1.2.3", "1.2.3"),
        ("=1.2.3", "1.2.3"),
        (">= 1.2.3", ">=1.2.3"),
        ("  >=1.2.3   <2  ", ">=1.2.3 <2"),
        ("^1.2 || ~3.4.5", "^1.2 || ~3.4.5"),
        ("~>1.2", "~1.2"),
        ("1.2.3 - 2.x", "1.2.3 - 2.x"),
        ("1.2.3  -   2.3.4", "1.2.3 - 2.3.4"),
        ("1.2.3-rc.1+build", "1.2.3-rc.1+build"),
        ("1.x||2.X ||  *", "1.x || 2.X || *"),
    ],
)
def test_str(expression, expected):
    assert str(VersionRange.parse(expression)) == expected


def test_parse_structure():
    version_range = VersionRange.parse("^1.2.3 ~1.2 || 1.2.3 - 2 || 1.2.3 || 1.x")
    assert len(version_range) == 4
    first, second, third, fourth = version_range
    assert [type(item) for item in first] == [CaretRange, TildeRange]
    assert [type(item) for item in second] == [HyphenRange]
    assert [type(item) for item in third] == [EqualTo]
    assert [type(item) for item in fourth] == [XRange]


@pytest.mark.parametrize(
    ("expression", "code"),
    [
        (">=1.2.3 $", SemanticErrorCode.LEFTOVERS),
        ("1.2.3 -2", SemanticErrorCode.LEFTOVERS),
        ("1.2.3 - ", SemanticErrorCode.LEFTOVERS),
        ("1.2.3 - || 2", SemanticErrorCode.LEFTOVERS),
        ("01.2.3", SemanticErrorCode.MAJOR_LEADING_ZEROES),
        ("^1.2.3-", SemanticErrorCode.PRE_RELEASE_NOT_FOUND),
        ("1.2.3 | 2", SemanticErrorCode.LEFTOVERS),
        ("1.2.3>=2", SemanticErrorCode.LEFTOVERS),
        ("~v1.2.3", SemanticErrorCode.LEFTOVERS),
        ("1.2147483648", SemanticErrorCode.MINOR_TOO_BIG),
    ],
)
def test_invalid(expression, code):
    assert VersionRange.try_parse(expression) is None
    with pytest.raises(InvalidRangeError) as exc_info:
        VersionRange.parse(expression)
    assert exc_info.value.code is code
    assert exc_info.value.text == expression


@pytest.mark.parametrize(
    ("expression", "version"),
    [
        ("~v1.2.3", "1.2.9"),
        ("=v1.2.x", "1.2.0"),
        ("^01.02.03", "1.9.0"),
        ("1.2.3 - 2.3.4", "2.3.4"),
        (">=1.2.3    <2", "1.5.0"),
    ],
)
def test_loose_ranges(expression, version):
    version_range = VersionRange.parse(expression, SemanticOptions.LOOSE)
    assert version_range.is_satisfied_by(v(version))


def test_satisfying_helpers():
    versions = [v(text) for text in ["1.2.3", "1.2.4", "1.3.0-rc.1", "1.3.0", "2.0.0"]]
    version_range = VersionRange.parse("~1.2 || 1.3.x")
    assert [str(item) for item in version_range.satisfying(versions)] == ["1.2.3", "1.2.4", "1.3.0"]
    assert str(version_range.max_satisfying(versions)) == "1.3.0"
    assert str(version_range.min_satisfying(versions)) == "1.2.3"
    assert VersionRange.parse(">=3").max_satisfying(versions) is None
    assert str(VersionRange.parse(">1.2.4").min_satisfying(versions)) == "1.3.0"
    assert str(VersionRange.parse(">1.2.4").min_satisfying(versions, include_pre_releases=True)) == "1.3.0-rc.1"
