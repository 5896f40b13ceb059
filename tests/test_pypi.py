from itertools import combinations

import pytest

from osvtools.semantic.pypi import PyPIVersion, parse_pypi_version

ORDERED = [
    "1.0.dev456",
    "1.0a1",
    "1.0a2.dev456",
    "1.0a12.dev456",
    "1.0a12",
    "1.0b1.dev456",
    "1.0b2",
    "1.0b2.post345.dev456",
    "1.0b2.post345",
    "1.0rc1.dev456",
    "1.0rc1",
    "1.0",
    "1.0+abc.5",
    "1.0+abc.7",
    "1.0+5",
    "1.0.post456.dev34",
    "1.0.post456",
    "1.1.dev1",
]


@pytest.mark.parametrize("lower,higher", list(combinations(ORDERED, 2)))
def test_pep440_ordering(lower, higher):
    assert parse_pypi_version(lower).compare_str(higher) == -1
    assert parse_pypi_version(higher).compare_str(lower) == 1


@pytest.mark.parametrize("text", ORDERED)
def test_equal_to_itself(text):
    assert parse_pypi_version(text).compare_str(text) == 0


@pytest.mark.parametrize(
    "a,b",
    [
        ("1.0", "1.0.0"),
        ("1.0", "v1.0"),
        ("1.0alpha1", "1.0a1"),
        ("1.0beta2", "1.0b2"),
        ("1.0c1", "1.0rc1"),
        ("1.0pre1", "1.0rc1"),
        ("1.0preview1", "1.0rc1"),
        ("1.0-r4", "1.0.post4"),
        ("1.0.rev4", "1.0.post4"),
        ("1.0-4", "1.0.post4"),
        ("1.0a", "1.0a0"),
        ("1.0RC1", "1.0rc1"),
        (" 1.0 ", "1.0"),
        ("1.0.x", "1.x"),
    ],
)
def test_equivalent_spellings(a, b):
    assert parse_pypi_version(a).compare_str(b) == 0
    assert parse_pypi_version(b).compare_str(a) == 0


def test_epoch_wins_over_release():
    assert parse_pypi_version("1!1.0").compare_str("2.0") == 1
    assert parse_pypi_version("2.0").compare_str("1!1.0") == -1


def test_implicit_post_release_is_after_release():
    assert parse_pypi_version("1.0").compare_str("1.0-0") == -1


def test_legacy_sorts_before_pep440():
    assert parse_pypi_version("foo").compare_str("0.0.1") == -1
    assert parse_pypi_version("1.0").compare_str("foobar") == 1


def test_legacy_versions_compare_between_themselves():
    assert parse_pypi_version("foo").compare_str("bar") == 1
    assert parse_pypi_version("1.0.x").compare_str("1.0.y") == -1


def test_parsed_fields():
    version = parse_pypi_version("1!2.3rc4.post5.dev6+Ubuntu.1")
    assert version.epoch == 1
    assert version.release == (2, 3)
    assert (version.pre.letter, version.pre.number) == ("rc", 4)
    assert (version.post.letter, version.post.number) == ("post", 5)
    assert (version.dev.letter, version.dev.number) == ("dev", 6)
    assert version.local == ("ubuntu", "1")
    assert version.legacy == ()


def test_legacy_fields():
    version = parse_pypi_version("foo")
    assert version.epoch == -1
    assert version.legacy == ("*foo", "*final")
    assert version.release == ()


def test_compare_between_parsed_versions():
    a = parse_pypi_version("2.0")
    b = parse_pypi_version("10.0")
    assert isinstance(a, PyPIVersion)
    assert a.compare(b) == -1
    assert b.compare(a) == 1