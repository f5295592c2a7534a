"""Ordered, mutable collections of delimiters.

A DelimiterSet answers the same questions as a single Delimiter, for the
union of its members. When several members match, the longest match
wins; on equal length the member that was added first wins. That rule
lets a two-character operator such as ``==`` beat its one-character
prefix ``=`` at the same position.

DelimiterSet satisfies DelimiterProtocol, so sets can be nested and
passed straight to Scanner.read().

Thread Safety:
Not thread-safe. Mutate a set only between scanner calls.

"""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from stringscanner.delimiter import Delimiter, DelimiterMatch
from stringscanner.protocols import DelimiterProtocol


class DelimiterSet:
    """Insertion-ordered union of delimiters.

    Usage:
        >>> ops = DelimiterSet([Delimiter.literal("="), Delimiter.literal("==")])
        >>> ops.match("a==b")
        DelimiterMatch(start=1, length=2)

    The insertion order is read at query time, so removing and re-adding
    a member moves it to the back for tie-breaking purposes.

    """

    __slots__ = ("_delimiters",)

    def __init__(self, delimiters: Iterable[DelimiterProtocol] = ()) -> None:
        self._delimiters: list[DelimiterProtocol] = []
        for delimiter in delimiters:
            self.add(delimiter)

    @classmethod
    def of(cls, *patterns: str, literal: bool = True) -> DelimiterSet:
        """Build a set from pattern strings.

        Args:
            *patterns: Delimiter texts (or regex sources when literal=False)
            literal: Escape the patterns instead of compiling them as regexes

        Returns:
            New DelimiterSet in argument order
        """
        make = Delimiter.literal if literal else Delimiter
        return cls(make(p) for p in patterns)

    def match(self, probe: str) -> DelimiterMatch | None:
        """Return the longest member match, earliest member on ties.

        Args:
            probe: Text to search

        Returns:
            The winning DelimiterMatch, or None if no member matches
        """
        best: DelimiterMatch | None = None
        for delimiter in self._delimiters:
            m = delimiter.match(probe)
            # Strictly greater keeps the earlier member on equal length
            if m is not None and (best is None or m.length > best.length):
                best = m
        return best

    def is_match(self, probe: str) -> bool:
        """Check whether any member matches probe."""
        return any(d.is_match(probe) for d in self._delimiters)

    def add(self, delimiter: DelimiterProtocol) -> None:
        """Append a delimiter. Adding a present member is a no-op."""
        if not isinstance(delimiter, DelimiterProtocol):
            raise TypeError(
                f"Expected a delimiter with match() and is_match(), got {type(delimiter).__name__}"
            )
        if delimiter not in self._delimiters:
            self._delimiters.append(delimiter)

    def remove(self, delimiter: DelimiterProtocol) -> None:
        """Remove a delimiter.

        Raises:
            ValueError: If the delimiter is not a member
        """
        try:
            self._delimiters.remove(delimiter)
        except ValueError:
            raise ValueError(f"{delimiter!r} is not in the delimiter set") from None

    def discard(self, delimiter: DelimiterProtocol) -> bool:
        """Remove a delimiter if present.

        Returns:
            True if something was removed
        """
        if delimiter in self._delimiters:
            self._delimiters.remove(delimiter)
            return True
        return False

    def clear(self) -> None:
        """Remove every delimiter."""
        self._delimiters.clear()

    def copy(self) -> DelimiterSet:
        """Shallow copy preserving order."""
        return DelimiterSet(self._delimiters)

    def __contains__(self, delimiter: object) -> bool:
        return delimiter in self._delimiters

    def __iter__(self) -> Iterator[DelimiterProtocol]:
        return iter(list(self._delimiters))

    def __len__(self) -> int:
        return len(self._delimiters)

    def __repr__(self) -> str:
        return f"DelimiterSet({self._delimiters!r})"
