import itertools

import pytest

from osvtools.semantic.semver import (
    NuGetVersion,
    SemverVersion,
    compare_build_components,
    parse_nuget_version,
    parse_semver_like_version,
    parse_semver_version,
)

RESULTS = {"<": -1, "=": 0, ">": 1}


SEMVER_SPEC_ORDER = [
    "1.0.0-alpha",
    "1.0.0-alpha.1",
    "1.0.0-alpha.beta",
    "1.0.0-beta",
    "1.0.0-beta.2",
    "1.0.0-beta.11",
    "1.0.0-rc.1",
    "1.0.0",
]


@pytest.mark.parametrize("a, b", list(itertools.combinations(SEMVER_SPEC_ORDER, 2)))
def test_semver_spec_precedence(a, b):
    assert parse_semver_version(a).compare_str(b) == -1, f"{a} < {b}"
    assert parse_semver_version(b).compare_str(a) == 1, f"{b} > {a}"


@pytest.mark.parametrize(
    "a, op, b",
    [
        ("1.0.0", "<", "2.0.0"),
        ("2.0.0", "<", "2.1.0"),
        ("2.1.0", "<", "2.1.1"),
        ("1.0.0+build.1", "=", "1.0.0"),
        ("v1.2.3", "=", "1.2.3"),
        ("1.2", "=", "1.2.0"),
        ("1.0.0-BETA", "<", "1.0.0-beta"),
        ("1.10.0", ">", "1.9.0"),
    ],
)
def test_semver_compare(a, op, b):
    want = RESULTS[op]
    assert parse_semver_version(a).compare_str(b) == want, f"{a} {op} {b}"
    assert parse_semver_version(b).compare_str(a) == -want, f"{b} vs {a}"


@pytest.mark.parametrize(
    "a, op, b",
    [
        ("1.0.0-BETA", "=", "1.0.0-beta"),
        ("1.2.3.4", "<", "1.2.3.5"),
        ("1.2.3", "=", "1.2.3.0"),
        ("1.0.0-rc.1", "<", "1.0.0"),
    ],
)
def test_nuget_compare(a, op, b):
    want = RESULTS[op]
    assert parse_nuget_version(a).compare_str(b) == want, f"{a} {op} {b}"
    assert parse_nuget_version(b).compare_str(a) == -want, f"{b} vs {a}"


def test_parse_semver_like_leading_v_and_build():
    v = parse_semver_like_version("v1.2.3-beta", -1)
    assert v.leading_v is True
    assert v.components == (1, 2, 3)
    assert v.build == "-beta"
    assert v.original == "v1.2.3-beta"


def test_parse_semver_like_lone_v_is_build():
    v = parse_semver_like_version("v", -1)
    assert v.leading_v is False
    assert v.components == ()
    assert v.build == "v"


def test_parse_semver_like_trailing_dot():
    v = parse_semver_like_version("1.2.", -1)
    assert v.components == (1, 2)
    assert v.build == "."


def test_parse_semver_like_extra_components_move_to_build():
    v = parse_semver_like_version("1.2.3.4-x", 3)
    assert v.components == (1, 2, 3)
    assert v.build == "-x.4"


def test_parse_semver_version_types():
    assert isinstance(parse_semver_version("1.0.0"), SemverVersion)
    assert parse_semver_version("1.2.3.4").build == ".4"
    nuget = parse_nuget_version("1.2.3.4")
    assert isinstance(nuget, NuGetVersion)
    assert nuget.components == (1, 2, 3, 4)


def test_compare_build_components():
    assert compare_build_components("", "-alpha") == 1
    assert compare_build_components("-alpha", "") == -1
    assert compare_build_components("-1", "-alpha") == -1
    assert compare_build_components("+meta", "") == 0