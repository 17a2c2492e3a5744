"""
Exception classes for the versioning module.
"""


class LabellerError(Exception):
    """Base exception for all labeller errors."""

    pass


class PatternError(LabellerError):
    """Raised when a label pattern cannot be compiled."""

    def __init__(self, pattern: str, message: str):
        self.pattern = pattern
        self.message = message
        super().__init__(f"Invalid label pattern '{pattern}': {message}")


class VersionFormatError(LabellerError):
    """Raised when a version string has an invalid format."""

    def __init__(
        self,
        version_string: str,
        expected_format: str = "major.minor[.build[.revision]]",
    ):
        self.version_string = version_string
        self.expected_format = expected_format
        super().__init__(
            f"Invalid version format: '{version_string}'. "
            f"Expected format: {expected_format}"
        )


class ConfigurationError(LabellerError):
    """Raised when the labeller configuration cannot be loaded or validated."""

    def __init__(self, source: str, message: str):
        self.source = source
        super().__init__(f"Invalid configuration in {source}: {message}")
