from __future__ import annotations

import pytest

from imagegen.version_tag import USAGE, VersionTagError, is_strict_semver, parse_version_tag


@pytest.mark.parametrize("value", ["13.6.0", "0.0.0", "12.14.0", "10.100.1000"])
def test_accepts_strict_semver(value: str) -> None:
    assert is_strict_semver(value)
    assert parse_version_tag(value) == value


@pytest.mark.parametrize(
    "value",
    ["", "13.6", "v13.6.0", "13.6.0-rc1", "13.6.0+build", "013.6.0", "13.06.0", "13.6.0 ", "13.6.0\n", "a.b.c", "13.6.0.1"],
)
def test_rejects_everything_else(value: str) -> None:
    assert not is_strict_semver(value)
    with pytest.raises(VersionTagError):
        parse_version_tag(value)


def test_missing_value_reports_usage() -> None:
    with pytest.raises(VersionTagError) as exc_info:
        parse_version_tag(None)
    assert str(exc_info.value) == USAGE
    assert isinstance(exc_info.value, ValueError)
