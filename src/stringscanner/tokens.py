"""Token and TokenType definitions for the scanner.

The scanner produces one Token per read. Each Token has a type, the raw
text it covers, and a source location (lazy).

Thread Safety:
Token is frozen (immutable) and safe to share across threads.
TokenType is an enum (inherently immutable).

"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from stringscanner.location import SourceLocation


class TokenType(Enum):
    """Kinds of token the scanner produces.

    Words and delimiters alternate in the stream (two words never appear
    back to back). EOF is returned once the source is exhausted and
    always carries an empty value, so an empty WORD is never used to
    signal the end.

    """

    WORD = auto()  # Text between delimiters
    DELIMITER = auto()  # Longest delimiter match
    EOF = auto()  # No more input


@dataclass(frozen=True, slots=True)
class Token:
    """A token produced by the scanner.

    Attributes:
        type: The token type (from TokenType enum)
        value: The raw text from the source
        _lineno: Start line number (1-indexed)
        _col: Start column (1-indexed)
        _offset: Character offset of the first character

    Performance:
        SourceLocation is created lazily on first access to `.location`.

    """

    type: TokenType
    value: str
    _lineno: int = 1
    _col: int = 1
    _offset: int = 0
    _location_cache: SourceLocation | None = field(
        default=None, repr=False, compare=False, hash=False
    )

    @property
    def location(self) -> SourceLocation:
        """Get source location (lazily created and cached)."""
        if self._location_cache is not None:
            return self._location_cache

        # Import here to avoid circular import at module load
        from stringscanner.location import SourceLocation

        loc = SourceLocation(
            lineno=self._lineno,
            col_offset=self._col,
            offset=self._offset,
            end_offset=self._offset + len(self.value),
        )
        object.__setattr__(self, "_location_cache", loc)
        return loc

    def __repr__(self) -> str:
        """Compact repr for debugging."""
        val = self.value
        if len(val) > 20:
            val = val[:17] + "..."
        return f"Token({self.type.name}, {val!r}, {self._lineno}:{self._col})"

    def __str__(self) -> str:
        return self.value

    @property
    def is_eof(self) -> bool:
        """True for the end-of-input token."""
        return self.type is TokenType.EOF

    @property
    def is_word(self) -> bool:
        return self.type is TokenType.WORD

    @property
    def is_delimiter(self) -> bool:
        return self.type is TokenType.DELIMITER

    @property
    def lineno(self) -> int:
        """Line number (convenience accessor)."""
        return self._lineno

    @property
    def col(self) -> int:
        """Column (convenience accessor)."""
        return self._col

    @property
    def offset(self) -> int:
        """Character offset (convenience accessor)."""
        return self._offset
