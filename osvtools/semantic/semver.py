"""Semantic-version-like versions, as used by npm, Go, crates.io and NuGet."""

from __future__ import annotations

from dataclasses import dataclass, replace

from osvtools.semantic.version import Version, compare_components, parse_int

_DIGITS = frozenset("0123456789")


@dataclass(frozen=True)
class SemverLikeVersion:
    """A version like a semantic version, but with any number of numeric
    components and an optional leading "v"."""

    leading_v: bool
    components: tuple[int, ...]
    build: str
    original: str


def _parse_semver_like(line: str) -> SemverLikeVersion:
    original = line
    components: list[int] = []
    current = ""
    found_build = False
    empty_component = False

    leading_v = line.startswith("v")
    if leading_v:
        line = line[1:]

    for char in line:
        if found_build or char in _DIGITS:
            current += char
            continue

        # Either a component terminator or the start of the build string;
        # both end the component being read.
        if current:
            components.append(int(current))
            current = ""
            empty_component = False

        if char == ".":
            empty_component = True
            continue

        found_build = True
        current = char

    if not found_build and current:
        components.append(int(current))
        current = ""
        empty_component = False

    if empty_component:
        current = "." + current

    # Without any components the "v" was not actually leading.
    if not components and leading_v:
        leading_v = False
        current = "v" + current

    return SemverLikeVersion(
        leading_v=leading_v,
        components=tuple(components),
        build=current,
        original=original,
    )


def parse_semver_like_version(line: str, max_components: int) -> SemverLikeVersion:
    """Parse ``line``; components past ``max_components`` move into the build
    string. A limit of -1 keeps every component."""
    version = _parse_semver_like(line)

    if max_components == -1 or len(version.components) <= max_components:
        return version

    extra = "".join(f".{c}" for c in version.components[max_components:])
    return replace(
        version,
        components=version.components[:max_components],
        build=version.build + extra,
    )


def _compare_semver_build_components(a: list[str], b: list[str]) -> int:
    for left, right in zip(a, b):
        left_num = parse_int(left)
        right_num = parse_int(right)

        if left_num is not None and right_num is not None:
            result = (left_num > right_num) - (left_num < right_num)
        elif left_num is None and right_num is None:
            result = (left > right) - (left < right)
        elif left_num is not None:
            # numeric identifiers have lower precedence
            result = -1
        else:
            result = 1

        if result != 0:
            return result

    return (len(a) > len(b)) - (len(a) < len(b))


def compare_build_components(a: str, b: str) -> int:
    """Compare pre-release strings per semver, ignoring build metadata."""
    a = a.split("+")[0]
    b = b.split("+")[0]

    a = a[1:] if a.startswith("-") else a
    b = b[1:] if b.startswith("-") else b

    # a version with a pre-release is less than one without
    if a == "" and b != "":
        return 1
    if a != "" and b == "":
        return -1

    return _compare_semver_build_components(a.split("."), b.split("."))


class SemverVersion(SemverLikeVersion, Version):
    """A semantic version with at most three numeric components."""

    def compare(self, other: SemverVersion) -> int:
        diff = compare_components(self.components, other.components)
        if diff != 0:
            return diff
        return compare_build_components(self.build, other.build)

    def compare_str(self, text: str) -> int:
        return self.compare(parse_semver_version(text))


class NuGetVersion(SemverLikeVersion, Version):
    """A NuGet version: four numeric components, case-insensitive labels."""

    def compare(self, other: NuGetVersion) -> int:
        diff = compare_components(self.components, other.components)
        if diff != 0:
            return diff
        return compare_build_components(self.build.lower(), other.build.lower())

    def compare_str(self, text: str) -> int:
        return self.compare(parse_nuget_version(text))


def _fields(version: SemverLikeVersion) -> dict:
    return {
        "leading_v": version.leading_v,
        "components": version.components,
        "build": version.build,
        "original": version.original,
    }


def parse_semver_version(text: str) -> SemverVersion:
    """Parse ``text`` as a semantic version."""
    return SemverVersion(**_fields(parse_semver_like_version(text, 3)))


def parse_nuget_version(text: str) -> NuGetVersion:
    """Parse ``text`` as a NuGet version."""
    return NuGetVersion(**_fields(parse_semver_like_version(text, 4)))