"""Protocols for stringscanner.

Defines the two contracts the scanner depends on:

- DelimiterProtocol: anything that can find the first delimiter in a
  string. Delimiter and DelimiterSet both satisfy it, and so can any
  custom matcher.
- CharSource: a forward-reading, seekable character stream. The scanner
  owns one by composition and never inherits from it.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from stringscanner.delimiter import DelimiterMatch


@runtime_checkable
class DelimiterProtocol(Protocol):
    """Protocol for delimiter matchers.

    Implementations must be side-effect free: the scanner probes the same
    growing buffer many times per token.

    """

    def match(self, probe: str) -> DelimiterMatch | None:
        """Find the leftmost non-empty delimiter in probe.

        Args:
            probe: The text accumulated so far

        Returns:
            DelimiterMatch with start and length, or None
        """
        ...

    def is_match(self, probe: str) -> bool:
        """Check whether probe contains a delimiter anywhere."""
        ...


@runtime_checkable
class CharSource(Protocol):
    """Protocol for seekable character streams.

    Positions are opaque integers. The only positions a caller may seek
    to are ones previously returned by tell(); for in-memory strings they
    are character indices, for byte streams they are byte offsets.

    """

    def read_char(self) -> str:
        """Read one character, or return "" at end of input."""
        ...

    def tell(self) -> int:
        """Position of the next character to be read."""
        ...

    def seek(self, position: int) -> None:
        """Restore a position returned by tell().

        Must discard any decoded look-ahead so the next read_char()
        starts exactly at position.
        """
        ...
