"""Exception classes for stringscanner.

Provides standardized exceptions for error handling throughout the scanner.
End of input is not an error: it is reported as a token of type
``TokenType.EOF``.
"""

from __future__ import annotations


class ScannerError(Exception):
    """Base exception for all stringscanner errors.

    Subclass this for specific error categories.
    """

    pass


class InvalidPatternError(ScannerError):
    """Error when a delimiter pattern cannot be compiled.

    Raised at construction time only. Matching itself never fails.
    """

    def __init__(
        self,
        pattern: str,
        message: str,
        pos: int | None = None,
    ) -> None:
        """Initialize pattern error.

        Args:
            pattern: The offending pattern source
            message: Description of the problem
            pos: Index into the pattern where compilation failed (optional)
        """
        self.pattern = pattern
        self.message = message
        self.pos = pos

        location = f" at position {pos}" if pos is not None else ""
        super().__init__(f"Invalid delimiter pattern {pattern!r}{location}: {message}")


class DesyncError(ScannerError):
    """Error when a rewind lands off a character boundary.

    Indicates a bug in a character source: the position handed back by
    ``tell()`` could not be restored exactly. Always fatal, never retried.
    """

    def __init__(self, position: int, message: str) -> None:
        """Initialize desync error.

        Args:
            position: The source position that could not be restored
            message: Description of the mismatch
        """
        self.position = position
        super().__init__(f"Source desynchronized at position {position}: {message}")


class TokenLimitError(ScannerError):
    """Error when a single token grows past the configured limit.

    Raised when ``ScanConfig.max_token_length`` is set and the buffer of
    an in-progress read exceeds it.
    """

    def __init__(self, limit: int, offset: int) -> None:
        """Initialize token limit error.

        Args:
            limit: The configured maximum token length
            offset: Character offset where the oversized token started
        """
        self.limit = limit
        self.offset = offset
        super().__init__(
            f"Token starting at offset {offset} exceeds {limit} characters"
        )
