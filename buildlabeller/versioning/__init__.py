"""
Versioning module for buildlabeller.

All label logic lives here so the CLI and any embedding host only ever deal
with configuration and strings.

LAYERS:
=======

1. **Version components** (version.py):
   - VersionInfo: major/minor/build/revision with validity flags
   - RenderValues: the seven values a label template is filled with

2. **Patterns** (pattern.py):
   - One token table drives both the render template and the parse
     expression, so a label can always be read back with the pattern that
     produced it

3. **Clock-derived values** (dates.py):
   - Days elapsed since a configured start date
   - MS-style revision (half-seconds since midnight)

4. **Labellers**:
   - RevisionLabeller (engine.py): next label from the previous label, the
     current VCS revision and the previous build status
   - AssemblyInfoLabeller (assembly.py): label taken verbatim from an
     ``AssemblyVersion`` attribute

5. **Exception hierarchy** (exceptions.py)
"""

from .assembly import AssemblyInfoLabeller, AssemblyInfoService
from .dates import SystemClock, elapsed_days, ms_revision
from .engine import IntegrationStatus, LabellerMode, RebuildPolicy, RevisionLabeller
from .exceptions import (
    ConfigurationError,
    LabellerError,
    PatternError,
    VersionFormatError,
)
from .pattern import (
    DEFAULT_PATTERN,
    LEGACY_PATTERN,
    TOKENS,
    CompiledPattern,
    compile_pattern,
    render,
    try_parse,
)
from .version import RenderValues, VersionInfo

__all__ = [
    # Labellers
    "RevisionLabeller",
    "AssemblyInfoLabeller",
    "AssemblyInfoService",
    "IntegrationStatus",
    "LabellerMode",
    "RebuildPolicy",
    # Patterns
    "DEFAULT_PATTERN",
    "LEGACY_PATTERN",
    "TOKENS",
    "CompiledPattern",
    "compile_pattern",
    "render",
    "try_parse",
    # Version components
    "VersionInfo",
    "RenderValues",
    # Clock
    "SystemClock",
    "elapsed_days",
    "ms_revision",
    # Exceptions
    "LabellerError",
    "PatternError",
    "VersionFormatError",
    "ConfigurationError",
]
