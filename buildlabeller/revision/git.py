"""Git commit count used as a monotonically increasing revision number."""

import logging

from git import Repo
from git.exc import CommandError, InvalidGitRepositoryError, NoSuchPathError

from buildlabeller.config import GitConfig

logger = logging.getLogger(__name__)


class GitRevisionProvider:
    """
    Counts the commits reachable from a reference.

    Git has no sequential revision numbers; the number of commits on the
    built reference grows with every commit on a linear history, which is
    what a build label needs.

    The configured repository must be the working tree itself, parent
    directories are not searched.
    """

    def __init__(self, config: GitConfig):
        self.config = config

    def get_revision(self) -> int:
        try:
            repo = Repo(self.config.repository)
        except (InvalidGitRepositoryError, NoSuchPathError):
            logger.warning(f"Not a git repository: {self.config.repository}")
            return 0

        try:
            count = repo.git.rev_list("--count", self.config.ref)
            return int(count.strip())
        except CommandError as e:
            # covers a missing git executable as well as a failing command
            logger.warning(f"Could not count commits of '{self.config.ref}': {e}")
            return 0
        except ValueError:
            return 0
        finally:
            repo.close()
