"""Single-pattern delimiters.

A Delimiter wraps one compiled regular expression and answers two
questions about an in-memory string: does it contain a match, and where
is the first one.

Zero-length matches never count. A pattern such as ``a*`` matches the
empty string everywhere; treating that as a delimiter would make the
scanner stop without consuming anything, so only the leftmost non-empty
match is reported.

Example:
    >>> comma = Delimiter.literal(",")
    >>> comma.match("a,b")
    DelimiterMatch(start=1, length=1)
    >>> Delimiter(r"\\s+").match("select  *")
    DelimiterMatch(start=6, length=2)

"""

from __future__ import annotations

import re
from dataclasses import dataclass

from stringscanner.errors import InvalidPatternError


@dataclass(frozen=True, slots=True)
class DelimiterMatch:
    """Position of a delimiter inside a probe string.

    Attributes:
        start: Index of the first matched character
        length: Number of matched characters (always > 0)

    """

    start: int
    length: int

    @property
    def end(self) -> int:
        """Index just past the last matched character."""
        return self.start + self.length

    def text(self, probe: str) -> str:
        """Slice the matched text out of the probe it was found in."""
        return probe[self.start : self.end]


class Delimiter:
    """An immutable delimiter backed by a regular expression.

    Usage:
        >>> op = Delimiter(r"<=|>=|<>|[=<>]")
        >>> op.is_match("a<=b")
        True
        >>> Delimiter.literal("||").match("a || b")
        DelimiterMatch(start=2, length=2)

    Thread Safety:
        Compiled patterns are immutable and safe to share.

    """

    __slots__ = ("_pattern",)

    def __init__(self, pattern: str | re.Pattern[str], flags: int = 0) -> None:
        """Compile the pattern.

        Args:
            pattern: Regular expression source, or an already compiled pattern
            flags: ``re`` flags, only used when pattern is a string

        Raises:
            InvalidPatternError: If the pattern does not compile
        """
        if isinstance(pattern, re.Pattern):
            if flags:
                raise InvalidPatternError(
                    pattern.pattern, "flags cannot be combined with a compiled pattern"
                )
            self._pattern = pattern
            return
        try:
            self._pattern = re.compile(pattern, flags)
        except re.error as exc:
            raise InvalidPatternError(pattern, exc.msg, exc.pos) from exc
        except TypeError as exc:
            raise InvalidPatternError(repr(pattern), str(exc)) from exc

    @classmethod
    def literal(cls, text: str, flags: int = 0) -> Delimiter:
        """Create a delimiter matching text exactly.

        Raises:
            InvalidPatternError: If text is empty, since it could never match
        """
        if not text:
            raise InvalidPatternError(text, "literal delimiter cannot be empty")
        return cls(re.escape(text), flags)

    @property
    def pattern(self) -> re.Pattern[str]:
        """The compiled pattern."""
        return self._pattern

    def match(self, probe: str) -> DelimiterMatch | None:
        """Find the leftmost non-empty match in probe.

        Args:
            probe: Text to search

        Returns:
            DelimiterMatch, or None if the pattern does not occur
        """
        for m in self._pattern.finditer(probe):
            start, end = m.span()
            if end > start:
                return DelimiterMatch(start, end - start)
        return None

    def is_match(self, probe: str) -> bool:
        """Check whether probe contains a non-empty match."""
        return self.match(probe) is not None

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Delimiter):
            return NotImplemented
        return (
            self._pattern.pattern == other._pattern.pattern
            and self._pattern.flags == other._pattern.flags
        )

    def __hash__(self) -> int:
        return hash((self._pattern.pattern, self._pattern.flags))

    def __repr__(self) -> str:
        return f"Delimiter({self._pattern.pattern!r})"
