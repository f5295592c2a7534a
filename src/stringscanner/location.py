"""Source location tracking for tokens and error messages.

Thread Safety:
SourceLocation is frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class SourceLocation:
    """Where a token sits in the scanned stream.

    Line and column are 1-indexed and counted in characters. Offsets are
    0-indexed character offsets from the point where the scanner started,
    independent of how the underlying source encodes its positions.

    Attributes:
        lineno: Starting line number (1-indexed)
        col_offset: Starting column (1-indexed)
        offset: Character offset of the first character
        end_offset: Character offset just past the last character

    Examples:
            >>> loc = SourceLocation(lineno=2, col_offset=5, offset=12, end_offset=14)
            >>> str(loc)
            '2:5'

    """

    lineno: int
    col_offset: int
    offset: int = 0
    end_offset: int = 0

    def __str__(self) -> str:
        """Format location for error messages.

        Returns:
            Formatted string like "10:5"
        """
        return f"{self.lineno}:{self.col_offset}"

    @property
    def length(self) -> int:
        """Number of characters covered."""
        return self.end_offset - self.offset

