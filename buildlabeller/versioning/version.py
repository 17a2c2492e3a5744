"""
Version components parsed from a previous label or a source file.

A label may carry fewer than four numeric components (an assembly version
such as ``4.5.*`` only yields major and minor), so every component has a
validity flag telling a parsed value apart from a defaulted zero.
"""

from dataclasses import dataclass
from typing import NamedTuple, Optional

from .exceptions import VersionFormatError


@dataclass
class VersionInfo:
    """Four numeric version components with per-component validity flags."""

    major: int = 0
    minor: int = 0
    build: int = 0
    revision: int = 0

    is_major_valid: bool = False
    is_minor_valid: bool = False
    is_build_valid: bool = False
    is_revision_valid: bool = False

    # {rebuild} capture, None when the pattern has no rebuild token
    rebuild: Optional[int] = None

    @classmethod
    def from_string(cls, version_string: str) -> "VersionInfo":
        """
        Parse a dotted version string such as ``4.5.*`` or ``1.2.3.4``.

        Major and minor must be integers. Build and revision are optional and
        flagged invalid (value 0) when missing or non-numeric, e.g. a ``*``
        wildcard.

        Raises:
            VersionFormatError: If major or minor is missing or not an integer
        """
        parts = version_string.strip().split(".")
        if len(parts) < 2:
            raise VersionFormatError(version_string)

        try:
            major = int(parts[0])
            minor = int(parts[1])
        except ValueError as e:
            raise VersionFormatError(version_string) from e

        info = cls(major=major, minor=minor, is_major_valid=True, is_minor_valid=True)

        if len(parts) > 2:
            info.build, info.is_build_valid = _optional_component(parts[2])
        if len(parts) > 3:
            info.revision, info.is_revision_valid = _optional_component(parts[3])

        return info

    def __str__(self) -> str:
        return f"{self.major}.{self.minor}.{self.build}.{self.revision}"


class RenderValues(NamedTuple):
    """Values substituted into a label template, in placeholder order."""

    major: int
    minor: int
    build: int
    revision: int
    rebuild: int
    elapsed_days: int
    ms_revision: int


def _optional_component(text: str):
    if text.isdecimal():
        return int(text), True
    return 0, False
