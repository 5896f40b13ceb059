import pytest

from osvtools.output import form


@pytest.mark.parametrize(
    "count, want",
    [(0, "packages"), (1, "package"), (2, "packages")],
)
def test_form(count, want):
    assert form(count, "package", "packages") == want