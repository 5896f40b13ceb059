"""Shared pieces for ecosystem-specific version comparison."""

from __future__ import annotations

import re
from abc import ABC, abstractmethod
from collections.abc import Sequence
from itertools import zip_longest

_INTEGER = re.compile(r"[+-]?[0-9]+")


class Version(ABC):
    """A parsed version that can be ordered against version strings."""

    @abstractmethod
    def compare_str(self, text: str) -> int:
        """Return -1, 0 or +1 as this version is less than, equal to or
        greater than ``text`` parsed the same way."""


def parse_int(text: str) -> int | None:
    """Parse a base-10 integer with an optional sign, or return None."""
    if _INTEGER.fullmatch(text) is None:
        return None
    return int(text)


def compare_components(a: Sequence[int], b: Sequence[int]) -> int:
    """Compare numeric components, padding the shorter side with zeros."""
    for left, right in zip_longest(a, b, fillvalue=0):
        if left != right:
            return -1 if left < right else 1
    return 0