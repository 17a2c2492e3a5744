"""Labeller configuration: pydantic models bound from a YAML file."""

import logging
import os
import platform
from datetime import date
from enum import Enum
from pathlib import Path
from typing import Any, Optional, Union

import yaml
from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    ValidationError,
    field_validator,
    model_validator,
)
from pydantic.alias_generators import to_camel

from buildlabeller.versioning.exceptions import ConfigurationError, PatternError
from buildlabeller.versioning.engine import LabellerMode, RebuildPolicy
from buildlabeller.versioning.pattern import (
    DEFAULT_PATTERN,
    LEGACY_PATTERN,
    compile_pattern,
)

logger = logging.getLogger(__name__)

APP_NAME = "buildlabeller"
CONFIG_FILE_NAMES = ("buildlabel.yaml", ".buildlabel.yaml")

_home = os.path.expanduser("~")

xdg_config_home = os.environ.get("XDG_CONFIG_HOME") or os.path.join(_home, ".config")

if platform.system() == "Darwin":
    # macOS
    config_dir = Path("~/Library/Application Support/buildlabeller").expanduser()
else:
    # Linux or others
    config_dir = Path(os.path.join(xdg_config_home, APP_NAME))


class VcsKind(str, Enum):
    svn = "svn"
    git = "git"


class _ConfigModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        extra="forbid",
    )


class LabellerConfig(_ConfigModel):
    """Policies of the revision labeller, fixed for the lifetime of an engine."""

    major: int = Field(1, ge=0, description="Intended major version")
    minor: int = Field(0, ge=0, description="Intended minor version")
    build: int = Field(-1, ge=-1, description="Pinned build number, -1 to auto-compute")
    pattern: str = Field(DEFAULT_PATTERN, description="Label token pattern")
    increment_on_failure: bool = Field(
        False, description="Increment the build number after a failed build"
    )
    reset_build_after_version_change: bool = Field(
        True, description="Reset the build number when major/minor is raised"
    )
    start_date: Optional[str] = Field(None, description="Start date for {date}")
    day_first: bool = Field(True, description="Read ambiguous start dates as d/m/y")
    prefix: str = Field("", description="Text prepended to every label")
    postfix: str = Field("", description="Text appended to every label")
    mode: LabellerMode = Field(LabellerMode.pattern, description="Label layout")
    rebuild_policy: RebuildPolicy = Field(
        RebuildPolicy.cumulative, description="Rebuild counter policy"
    )

    @model_validator(mode="before")
    @classmethod
    def apply_legacy_mode(cls, data: Any) -> Any:
        """Legacy mode fixes the pattern and the rebuild policy."""
        if not isinstance(data, dict) or data.get("mode") not in (
            LabellerMode.legacy,
            LabellerMode.legacy.value,
        ):
            return data

        pattern = data.get("pattern")
        if pattern not in (None, LEGACY_PATTERN):
            raise ValueError(
                f"legacy mode uses the fixed pattern '{LEGACY_PATTERN}', "
                f"got '{pattern}'"
            )

        data = dict(data)
        data.pop("rebuildPolicy", None)
        data["pattern"] = LEGACY_PATTERN
        data["rebuild_policy"] = RebuildPolicy.per_revision
        return data

    @field_validator("start_date", mode="before")
    @classmethod
    def coerce_start_date(cls, v: Any) -> Any:
        # unquoted YAML dates arrive as date objects
        if isinstance(v, date):
            return v.isoformat()
        return v

    @field_validator("pattern")
    @classmethod
    def validate_pattern(cls, v: str) -> str:
        try:
            compile_pattern(v)
        except PatternError as e:
            raise ValueError(e.message) from e
        return v

    @classmethod
    def legacy(
        cls, major: int = 1, minor: int = 0, prefix: str = ""
    ) -> "LabellerConfig":
        """Configuration reproducing the ``major.minor.revision.rebuild`` labeller."""
        return cls(major=major, minor=minor, prefix=prefix, mode=LabellerMode.legacy)


class SvnConfig(_ConfigModel):
    """Subversion access used to look up the latest revision."""

    executable: str = Field("svn", description="Path to the svn client")
    url: str = Field(..., description="Repository URL")
    username: Optional[str] = Field(None, description="Repository user")
    password: Optional[str] = Field(None, description="Repository password")
    trust_server_certificate: bool = Field(
        False, description="Accept self-signed server certificates"
    )
    timeout: float = Field(60.0, gt=0, description="svn client timeout in seconds")

    @field_validator("url")
    @classmethod
    def validate_url(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Repository URL cannot be empty")
        return v


class GitConfig(_ConfigModel):
    """Git repository whose commit count serves as the revision number."""

    repository: Path = Field(Path("."), description="Path to the working copy")
    ref: str = Field("HEAD", description="Reference to count commits of")


class HostConfig(_ConfigModel):
    """Everything the host binds: labeller policies plus collaborator settings."""

    labeller: LabellerConfig = Field(default_factory=LabellerConfig)
    vcs: VcsKind = Field(VcsKind.svn, description="Revision source")
    svn: Optional[SvnConfig] = None
    git: Optional[GitConfig] = None
    assembly_info_path: Optional[str] = Field(
        None, description="Comma-separated files to read AssemblyVersion from"
    )

    @classmethod
    def from_yaml(cls, path_or_content: Union[str, Path]) -> "HostConfig":
        """Load the configuration from a YAML file or string content.

        Raises:
            ConfigurationError: If the YAML is unreadable or fails validation
        """
        if isinstance(path_or_content, Path) or "\n" not in str(path_or_content):
            source = str(path_or_content)
            try:
                with open(path_or_content, "r") as f:
                    data = yaml.safe_load(f)
            except OSError as e:
                raise ConfigurationError(source, str(e)) from e
            except yaml.YAMLError as e:
                raise ConfigurationError(source, f"YAML format error: {e}") from e
        else:
            source = "<string>"
            try:
                data = yaml.safe_load(str(path_or_content))
            except yaml.YAMLError as e:
                raise ConfigurationError(source, f"YAML format error: {e}") from e

        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ConfigurationError(source, "expected a mapping at the top level")

        try:
            return cls(**data)
        except ValidationError as e:
            raise ConfigurationError(source, str(e)) from e


def find_config_file(cwd: Optional[Path] = None) -> Optional[Path]:
    """
    Locate a configuration file.

    Looks in the working directory first, then in the user config directory.
    """
    search_dirs = [Path.cwd() if cwd is None else Path(cwd), config_dir]
    for directory in search_dirs:
        for name in CONFIG_FILE_NAMES:
            candidate = directory / name
            if candidate.is_file():
                return candidate
    return None


def load_config(path: Optional[Union[str, Path]] = None) -> HostConfig:
    """
    Load the host configuration.

    Args:
        path: Explicit config file. If None, ``find_config_file`` is used and
            the defaults apply when nothing is found.
    """
    if path is None:
        path = find_config_file()
        if path is None:
            logger.debug("No configuration file found, using defaults")
            return HostConfig()

    logger.debug(f"Loading configuration from {path}")
    return HostConfig.from_yaml(Path(path))
