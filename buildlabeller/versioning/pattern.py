"""
Label patterns.

A pattern such as ``"{major}.{minor}.{build}.{revision}"`` is used twice: to
render the new label and to parse the previous label back into components.
Both artifacts are derived from the single token table below, so rendering and
parsing can never disagree about which tokens exist.

Literal text between tokens is escaped when building the parse expression and
the whole label must match, so ``.`` in a pattern only ever matches a dot.
"""

import re
from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple, Union

from .exceptions import PatternError
from .version import RenderValues, VersionInfo

DEFAULT_PATTERN = "{major}.{minor}.{build}.{revision}"
LEGACY_PATTERN = "{major}.{minor}.{revision}.{rebuild}"

# Labels are consumed by tools that store version parts as 32-bit ints
MAX_COMPONENT = 2**31 - 1

_DIGITS = "[0-9]+"
# {date} goes negative while the start date lies ahead
_SIGNED_DIGITS = "-?[0-9]+"
_TOKEN_RE = re.compile(r"\{([^{}]*)\}")


@dataclass(frozen=True)
class Token:
    """A pattern token and its role in rendering and parsing."""

    name: str
    index: int
    capturable: bool

    @property
    def literal(self) -> str:
        return "{" + self.name + "}"


TOKENS: Tuple[Token, ...] = (
    Token("major", 0, True),
    Token("minor", 1, True),
    Token("build", 2, True),
    Token("revision", 3, True),
    Token("rebuild", 4, True),
    Token("date", 5, False),
    Token("msrevision", 6, False),
)

TOKENS_BY_NAME = {token.name: token for token in TOKENS}


@dataclass(frozen=True)
class CompiledPattern:
    """Render template and parse expression compiled from one pattern."""

    pattern: str
    template: str
    expression: "re.Pattern[str]"
    tokens: Tuple[Token, ...]

    @property
    def token_names(self) -> List[str]:
        return [token.name for token in self.tokens]

    def uses(self, name: str) -> bool:
        return any(token.name == name for token in self.tokens)

    def render(self, values: Union[RenderValues, Iterable[int]]) -> str:
        return render(self.template, values)

    def try_parse(self, text: Optional[str]) -> Optional[VersionInfo]:
        """
        Parse a label rendered with this pattern.

        Returns:
            The parsed VersionInfo, or None if the label does not match the
            pattern or a captured number is out of range.
        """
        if not text:
            return None

        match = self.expression.fullmatch(text)
        if match is None:
            return None

        captured = match.groupdict()
        values = {}
        for name, value in captured.items():
            number = int(value)
            if number > MAX_COMPONENT:
                return None
            values[name] = number

        return VersionInfo(
            major=values.get("major", 0),
            minor=values.get("minor", 0),
            build=values.get("build", 0),
            revision=values.get("revision", 0),
            is_major_valid="major" in values,
            is_minor_valid="minor" in values,
            is_build_valid="build" in values,
            is_revision_valid="revision" in values,
            rebuild=values.get("rebuild"),
        )


def split_pattern(pattern: str) -> List[Union[str, Token]]:
    """
    Split a pattern into literal strings and tokens.

    Raises:
        PatternError: On unknown tokens or unbalanced braces
    """
    parts: List[Union[str, Token]] = []
    position = 0
    for match in _TOKEN_RE.finditer(pattern):
        literal = pattern[position : match.start()]
        if literal:
            parts.append(_check_literal(pattern, literal))

        name = match.group(1)
        token = TOKENS_BY_NAME.get(name)
        if token is None:
            known = ", ".join(t.literal for t in TOKENS)
            raise PatternError(pattern, f"unknown token '{{{name}}}' (known: {known})")
        parts.append(token)
        position = match.end()

    tail = pattern[position:]
    if tail:
        parts.append(_check_literal(pattern, tail))

    return parts


def _check_literal(pattern: str, literal: str) -> str:
    if "{" in literal or "}" in literal:
        raise PatternError(pattern, f"unbalanced brace in '{literal}'")
    return literal


def compile_pattern(pattern: str) -> CompiledPattern:
    """
    Compile a label pattern into a render template and a parse expression.

    Args:
        pattern: Pattern made of literal text and tokens such as ``{major}``

    Returns:
        CompiledPattern

    Raises:
        PatternError: If the pattern is empty or contains unknown tokens
    """
    if not pattern:
        raise PatternError(pattern, "pattern must not be empty")

    template_parts = []
    expression_parts = []
    tokens = []
    captured = set()

    for part in split_pattern(pattern):
        if isinstance(part, str):
            template_parts.append(part)
            expression_parts.append(re.escape(part))
            continue

        tokens.append(part)
        template_parts.append("{" + str(part.index) + "}")

        if not part.capturable:
            expression_parts.append(_SIGNED_DIGITS)
        elif part.name in captured:
            # same token twice must carry the same number
            expression_parts.append(f"(?P={part.name})")
        else:
            captured.add(part.name)
            expression_parts.append(f"(?P<{part.name}>{_DIGITS})")

    return CompiledPattern(
        pattern=pattern,
        template="".join(template_parts),
        expression=re.compile("".join(expression_parts)),
        tokens=tuple(tokens),
    )


def render(template: str, values: Union[RenderValues, Iterable[int]]) -> str:
    """Fill a compiled template with values in placeholder order."""
    return template.format(*values)


def try_parse(pattern: str, text: Optional[str]) -> Optional[VersionInfo]:
    """Compile ``pattern`` and parse ``text`` with it."""
    return compile_pattern(pattern).try_parse(text)
