"""Tests for semantic version parsing and ordering."""

import itertools

import pytest
import semver

from crate_version_check.errors import VersionSyntaxError
from crate_version_check.models import Comparison
from crate_version_check.versioning import SemanticVersion, compare, parse


# Ascending precedence, taken from the semver.org examples.
PRECEDENCE_CHAIN = [
    "0.0.0",
    "0.1.0",
    "1.0.0-alpha",
    "1.0.0-alpha.1",
    "1.0.0-alpha.beta",
    "1.0.0-beta",
    "1.0.0-beta.2",
    "1.0.0-beta.11",
    "1.0.0-rc.1",
    "1.0.0",
    "1.0.1",
    "1.2.0",
    "2.0.0",
    "2.1.0",
    "2.1.1",
    "10.0.0",
]


@pytest.mark.parametrize("triple", [(0, 0, 0), (0, 4, 2), (1, 10, 100), (2024, 1, 7)])
def test_parse_numeric_triple(triple):
    major, minor, patch = triple
    version = parse(f"{major}.{minor}.{patch}")

    assert (version.major, version.minor, version.patch) == triple
    assert version.pre_release == ()
    assert version.build_metadata is None


def test_parse_pre_release_and_build():
    version = parse("1.2.3-rc.1+build.7")

    assert version.pre_release == ("rc", "1")
    assert version.build_metadata == "build.7"
    assert str(version) == "1.2.3-rc.1+build.7"


@pytest.mark.parametrize(
    "text",
    [
        "0..2",
        "1.2",
        "1.2.3.4",
        "a.b.c",
        "v1.2.3",
        " 1.2.3",
        "01.2.3",
        "1.2.3-",
        "1.2.3-alpha..1",
        "1.2.3-01",
        "1.2.3+",
        "1.2.3+build!",
        "1.2.3\n",
        "1.0.0-rc.1\n",
        "1.0.0+b\n",
        "\t1.0.0",
        "",
    ],
)
def test_parse_rejects_malformed(text):
    with pytest.raises(VersionSyntaxError):
        parse(text)


def test_version_syntax_error_is_value_error():
    with pytest.raises(ValueError) as excinfo:
        SemanticVersion.parse("0..2")

    assert excinfo.value.text == "0..2"


def test_precedence_chain_is_strictly_ascending():
    versions = [parse(v) for v in PRECEDENCE_CHAIN]

    for lower, higher in zip(versions, versions[1:]):
        assert compare(lower, higher) is Comparison.LESS
        assert compare(higher, lower) is Comparison.GREATER
        assert lower < higher


def test_compare_is_a_total_order():
    versions = [parse(v) for v in PRECEDENCE_CHAIN]

    for a in versions:
        assert compare(a, a) is Comparison.EQUAL

    for a, b in itertools.product(versions, repeat=2):
        forward = compare(a, b)
        backward = compare(b, a)
        if forward is Comparison.LESS:
            assert backward is Comparison.GREATER
        elif forward is Comparison.GREATER:
            assert backward is Comparison.LESS
        else:
            assert a == b

    for a, b, c in itertools.product(versions, repeat=3):
        if compare(a, b) is Comparison.LESS and compare(b, c) is Comparison.LESS:
            assert compare(a, c) is Comparison.LESS


def test_build_metadata_ignored_for_ordering_and_equality():
    a = parse("1.0.0+linux")
    b = parse("1.0.0+windows.1")

    assert compare(a, b) is Comparison.EQUAL
    assert a == b
    assert hash(a) == hash(b)
    assert sorted([parse("1.0.0"), parse("1.0.0-rc.1+x")]) == [parse("1.0.0-rc.1"), parse("1.0.0")]


def test_converts_to_and_from_semver_library():
    version = parse("1.0.0-alpha.1+build.5")

    assert version.to_semver() == semver.Version.parse("1.0.0-alpha.1+build.5")
    assert SemanticVersion.from_semver(semver.Version.parse("2.1.0")) == parse("2.1.0")
