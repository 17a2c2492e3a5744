"""
Revision labeller: computes the next build label.

The label follows the Microsoft-recommended ``major.minor.build.revision``
layout by default. The revision is the latest version-control revision, the
build number is incremented for each successful build that brings new
revisions, and a user-defined pattern can reorder the parts or add a rebuild
counter, the days elapsed since a start date or an MS-style time-of-day
revision.

The previous label is parsed with the same pattern that renders the new one.
When it cannot be parsed (first build, pattern changed, numbers out of range)
the labeller falls back to ``major.minor.0.<current revision>`` instead of
failing the build.
"""

import logging
from enum import Enum
from typing import TYPE_CHECKING, Optional, Tuple

from buildlabeller.core.interfaces import Clock, RevisionProvider

from .dates import SystemClock, elapsed_days, ms_revision
from .pattern import compile_pattern
from .version import RenderValues, VersionInfo

if TYPE_CHECKING:
    from buildlabeller.config import LabellerConfig

logger = logging.getLogger(__name__)


class IntegrationStatus(str, Enum):
    """Outcome of the previous build."""

    success = "success"
    failure = "failure"
    unknown = "unknown"


class LabellerMode(str, Enum):
    """How the revision labeller lays out its label."""

    pattern = "pattern"
    legacy = "legacy"


class RebuildPolicy(str, Enum):
    """How the rebuild counter evolves between builds."""

    # counts every build of an unchanged revision since the labeller started
    cumulative = "cumulative"
    # counts builds of the current revision, back to 0 on a new revision
    per_revision = "per_revision"


class RevisionLabeller:
    """
    Generates build labels from the previous label and the current revision.

    One instance is meant to serve one project for the lifetime of the host
    process. The only state it keeps between calls is the rebuild counter,
    which is lost when the process exits.
    """

    def __init__(
        self,
        config: "LabellerConfig",
        revision_provider: RevisionProvider,
        clock: Optional[Clock] = None,
    ):
        """
        Initialize the labeller.

        Args:
            config: Validated labeller configuration
            revision_provider: Source of the current revision number
            clock: Clock used for ``{date}`` and ``{msrevision}`` (defaults to
                the system clock)

        Raises:
            PatternError: If the configured pattern cannot be compiled
        """
        self.config = config
        self.revision_provider = revision_provider
        self.clock = clock if clock is not None else SystemClock()
        self.pattern = compile_pattern(config.pattern)
        self.rebuild = 0

    def generate(
        self,
        previous_label: Optional[str],
        previous_status: IntegrationStatus = IntegrationStatus.unknown,
    ) -> str:
        """
        Return the label for the current build.

        Args:
            previous_label: Label of the previous build, empty on the first build
            previous_status: Outcome of the previous build, as an
                IntegrationStatus or a string in any case

        Returns:
            The new label
        """
        previous_status = IntegrationStatus(previous_status.lower())
        revision = self.revision_provider.get_revision()
        last_version, parsed = self.parse_version(revision, previous_label)

        build = self.next_build(last_version, revision, previous_status)
        self.rebuild = self.next_rebuild(last_version, revision, parsed)

        now = self.clock.now()
        values = RenderValues(
            major=self.config.major,
            minor=self.config.minor,
            build=build,
            revision=revision,
            rebuild=self.rebuild,
            elapsed_days=elapsed_days(
                self.config.start_date, now, day_first=self.config.day_first
            ),
            ms_revision=ms_revision(now),
        )

        body = self.pattern.render(values)
        label = f"{self.config.prefix}{body}{self.config.postfix}"
        logger.info(f"Generated label {label} (previous: {previous_label!r})")
        return label

    def parse_version(
        self, revision: int, previous_label: Optional[str]
    ) -> Tuple[VersionInfo, bool]:
        """
        Parse the previous label back into its version components.

        A ``{rebuild}`` value found in the label replaces the rebuild counter
        under the cumulative policy.

        Returns:
            The parsed version and True, or the fallback version
            ``major.minor.0.<revision>`` and False
        """
        label = self._strip_affixes(previous_label or "")
        version = self.pattern.try_parse(label)

        if version is None:
            logger.debug(
                f"Previous label {previous_label!r} does not match pattern "
                f"'{self.config.pattern}', starting from revision {revision}"
            )
            return (
                VersionInfo(
                    major=self.config.major,
                    minor=self.config.minor,
                    build=0,
                    revision=revision,
                ),
                False,
            )

        if (
            version.rebuild is not None
            and self.config.rebuild_policy is RebuildPolicy.cumulative
        ):
            self.rebuild = version.rebuild

        return version, True

    def next_build(
        self,
        last_version: VersionInfo,
        revision: int,
        previous_status: IntegrationStatus,
    ) -> int:
        """Build number for the current build."""
        config = self.config

        # user-defined build number
        if config.build > -1:
            return config.build

        if config.major > last_version.major or config.minor > last_version.minor:
            if config.reset_build_after_version_change:
                logger.debug("Version raised, resetting build number")
                return 0
            return last_version.build + 1

        should_increment = (
            previous_status is IntegrationStatus.success or config.increment_on_failure
        ) and revision > last_version.revision
        if should_increment:
            return last_version.build + 1
        return last_version.build

    def next_rebuild(
        self, last_version: VersionInfo, revision: int, parsed: bool
    ) -> int:
        """Rebuild counter for the current build."""
        same_revision = revision == last_version.revision

        if self.config.rebuild_policy is RebuildPolicy.per_revision:
            if parsed and same_revision:
                return (last_version.rebuild or 0) + 1
            return 0

        if same_revision:
            logger.debug(f"Revision {revision} built again")
            return self.rebuild + 1
        return self.rebuild

    def _strip_affixes(self, label: str) -> str:
        prefix, postfix = self.config.prefix, self.config.postfix
        if prefix and label.startswith(prefix):
            label = label[len(prefix) :]
        if postfix and label.endswith(postfix):
            label = label[: -len(postfix)]
        return label
