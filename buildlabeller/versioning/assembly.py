"""
Take the entire build label from an ``AssemblyInfo`` file.

Any text file containing something like ``[assembly: AssemblyVersion("4.0.0.*")]``
works. The use case is a build server pulling from a package repository that
has the assembly info file copied into its root.
"""

import logging
import re
from pathlib import Path
from typing import List, Optional

from .exceptions import VersionFormatError
from .version import VersionInfo

logger = logging.getLogger(__name__)

ASSEMBLY_VERSION_RE = re.compile(r'AssemblyVersion\(\s*"([0-9.*]+)"\s*\)')


def split_paths(paths_csv: Optional[str]) -> List[Path]:
    """Split a comma-separated list of paths, dropping blank entries."""
    if not paths_csv:
        return []
    return [Path(p.strip()) for p in paths_csv.split(",") if p.strip()]


class AssemblyInfoService:
    """Extracts the version from the first assembly info file that has one."""

    def parse_for_version_info(self, paths_csv: Optional[str]) -> VersionInfo:
        """
        Search candidate files in order for an ``AssemblyVersion`` attribute.

        Missing files and files without a usable version are skipped.

        Args:
            paths_csv: Comma-separated file paths

        Returns:
            The version of the first match, or an all-zero VersionInfo with
            every component invalid when no file matches
        """
        paths = split_paths(paths_csv)
        logger.info(f"{len(paths)} paths will be checked for version info")

        for index, path in enumerate(paths):
            version = self.parse_file(path, index)
            if version is not None:
                return version

        return VersionInfo()

    def parse_file(self, path: Path, index: int = 0) -> Optional[VersionInfo]:
        if not path.is_file():
            logger.info(f"Assembly version parsing: file not found ({index}) '{path}'")
            return None

        logger.info(f"Assembly version parsing: opening ({index}) '{path}'")
        try:
            contents = path.read_text(encoding="utf-8-sig", errors="replace")
        except OSError as e:
            logger.warning(f"Could not read '{path}': {e}")
            return None

        match = ASSEMBLY_VERSION_RE.search(contents)
        if match is None:
            logger.info(f"No version info found ({index}) '{path}'")
            return None

        try:
            version = VersionInfo.from_string(match.group(1))
        except VersionFormatError as e:
            logger.info(f"Skipping ({index}) '{path}': {e}")
            return None

        logger.info(f"Parsed out '{version}'")
        return version


class AssemblyInfoLabeller:
    """Labeller that uses the assembly version as the build label, unchanged."""

    def __init__(
        self,
        assembly_info_path: Optional[str],
        service: Optional[AssemblyInfoService] = None,
    ):
        self.assembly_info_path = assembly_info_path
        self.service = service if service is not None else AssemblyInfoService()

    def generate(
        self, previous_label: Optional[str] = None, previous_status=None
    ) -> str:
        return str(self.service.parse_for_version_info(self.assembly_info_path))
