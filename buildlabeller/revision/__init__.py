"""Revision providers: where the current revision number comes from."""

from typing import Optional

from buildlabeller.config import GitConfig, HostConfig, VcsKind
from buildlabeller.core.interfaces import RevisionProvider
from buildlabeller.versioning.exceptions import ConfigurationError

from .git import GitRevisionProvider
from .svn import SvnRevisionProvider


class StaticRevisionProvider:
    """Returns a revision supplied by the caller."""

    def __init__(self, revision: int):
        if revision < 0:
            raise ValueError(f"Revision must be non-negative, got {revision}")
        self.revision = revision

    def get_revision(self) -> int:
        return self.revision


def create_revision_provider(
    config: HostConfig, revision: Optional[int] = None
) -> RevisionProvider:
    """
    Build the revision provider selected by the configuration.

    Args:
        config: Host configuration
        revision: Fixed revision overriding the configured VCS

    Raises:
        ConfigurationError: If the selected VCS has no settings
    """
    if revision is not None:
        return StaticRevisionProvider(revision)

    if config.vcs is VcsKind.svn:
        if config.svn is None:
            raise ConfigurationError(
                "svn", "an 'svn' section with a repository url is required"
            )
        return SvnRevisionProvider(config.svn)

    return GitRevisionProvider(config.git if config.git is not None else GitConfig())


__all__ = [
    "GitRevisionProvider",
    "StaticRevisionProvider",
    "SvnRevisionProvider",
    "create_revision_provider",
]
