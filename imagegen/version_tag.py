"""
version_tag.py

Responsibility: validate the version tag given to the scaffold generator.

A version tag is a strict semantic version core: `MAJOR.MINOR.PATCH`, all
numeric, no leading zeros, no `v` prefix, no pre-release or build metadata.
"""

from __future__ import annotations

import re

USAGE = 'expected version tag argument like "13.6.0"'

STRICT_SEMVER_RE = re.compile(r"(0|[1-9][0-9]*)\.(0|[1-9][0-9]*)\.(0|[1-9][0-9]*)")


class VersionTagError(ValueError):
    pass


def is_strict_semver(value: str | None) -> bool:
    if not value:
        return False
    return STRICT_SEMVER_RE.fullmatch(value) is not None


def parse_version_tag(value: str | None) -> str:
    """
    Return `value` unchanged if it is a strict semver, else raise VersionTagError.

    The error message is the operator usage line printed by the CLI.
    """
    if value is None or not is_strict_semver(value):
        raise VersionTagError(USAGE)
    return value
