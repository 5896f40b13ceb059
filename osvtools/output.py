"""Small helpers for writing human-readable output."""


def form(count: int, singular: str, plural: str) -> str:
    """Return ``singular`` when ``count`` is one, otherwise ``plural``."""
    return singular if count == 1 else plural