"""Protocol interfaces for the labeller's external collaborators.

Protocols that decouple label generation from version control, the file
system and the wall clock.
"""

from datetime import datetime
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from buildlabeller.versioning.version import VersionInfo


class Clock(Protocol):
    """Source of the current time."""

    def now(self) -> datetime:
        """Current local date and time."""
        ...

    def today(self) -> datetime:
        """Current local date at midnight."""
        ...


class RevisionProvider(Protocol):
    """Looks up the current version-control revision number."""

    def get_revision(self) -> int:
        """Latest revision, or 0 if it cannot be determined."""
        ...


class VersionSourceProvider(Protocol):
    """Reads an embedded version string from one of several files."""

    def parse_for_version_info(self, paths_csv: str) -> "VersionInfo":
        """Version found in the first matching file of a comma-separated list."""
        ...
