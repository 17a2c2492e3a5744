"""Latest Subversion revision, read from ``svn log --xml``."""

import logging
import subprocess
import xml.etree.ElementTree as ET
from typing import List

from buildlabeller.config import SvnConfig

logger = logging.getLogger(__name__)

# /log/logentry/@revision
REVISION_PATH = "logentry"
REVISION_ATTRIBUTE = "revision"


class SvnRevisionProvider:
    """
    Looks up the latest revision by asking for the last log entry.

    Any failure (client missing, timeout, unexpected output) yields revision 0
    so that labelling never breaks a build.
    """

    def __init__(self, config: SvnConfig):
        self.config = config

    def build_arguments(self) -> List[str]:
        """Command line for ``svn log`` limited to the latest entry."""
        args = [self.config.executable, "log", "--xml", "--limit", "1", self.config.url]

        if self.config.trust_server_certificate:
            args.extend(["--trust-server-cert", "--non-interactive"])

        if self.config.username:
            args.extend(["--username", self.config.username])
            if self.config.password is not None:
                args.extend(["--password", self.config.password])
            if "--non-interactive" not in args:
                args.append("--non-interactive")
            args.append("--no-auth-cache")

        return args

    def run_svn(self, args: List[str]) -> subprocess.CompletedProcess:
        return subprocess.run(
            args,
            text=True,
            capture_output=True,
            check=False,
            timeout=self.config.timeout,
        )

    def get_revision(self) -> int:
        try:
            result = self.run_svn(self.build_arguments())
        except FileNotFoundError:
            logger.warning(f"svn client not found: {self.config.executable}")
            return 0
        except subprocess.TimeoutExpired:
            logger.warning(f"svn log timed out after {self.config.timeout} seconds")
            return 0
        except OSError as e:
            logger.warning(f"Could not run svn: {e}")
            return 0

        if result.returncode != 0:
            logger.warning(
                f"svn log exited with {result.returncode}: {result.stderr.strip()}"
            )

        logger.debug(f"Received XML : {result.stdout}")
        return parse_revision(result.stdout)


def parse_revision(xml_output: str) -> int:
    """
    Extract the revision attribute of the first log entry.

    Returns:
        The revision, or 0 if the XML is malformed or has no usable entry
    """
    try:
        root = ET.fromstring(xml_output)
    except ET.ParseError as e:
        logger.debug(f"Could not parse svn output: {e}")
        return 0

    if root.tag != "log":
        return 0

    entry = root.find(REVISION_PATH)
    if entry is None:
        return 0

    try:
        revision = int(entry.get(REVISION_ATTRIBUTE, ""))
    except ValueError:
        return 0

    return revision if revision >= 0 else 0
