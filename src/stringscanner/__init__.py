"""
stringscanner: streaming word/delimiter scanner

Splits a character stream into alternating word and delimiter tokens
without loading the whole input, using longest-match-wins delimiter
resolution. Delimiters can be changed between reads, so a parser can
switch lexical modes as it goes.

Quick Start:
    >>> from stringscanner import DelimiterSet, tokenize
    >>> ops = DelimiterSet.of(" ", "=", "==", ",")
    >>> [t.value for t in tokenize("a == b,c", ops)]
    ['a', ' ', '==', ' ', 'b', ',', 'c']

    >>> # Or drive a Scanner directly
    >>> from stringscanner import Scanner
    >>> scanner = Scanner.from_bytes("naïve,café".encode("utf-8"))
    >>> scanner.read(DelimiterSet.of(","))
    Token(WORD, 'naïve', 1:1)
"""

from stringscanner.config import (
    ScanConfig,
    get_scan_config,
    reset_scan_config,
    scan_config_context,
    set_scan_config,
)
from stringscanner.delimiter import Delimiter, DelimiterMatch
from stringscanner.delimiter_set import DelimiterSet
from stringscanner.errors import (
    DesyncError,
    InvalidPatternError,
    ScannerError,
    TokenLimitError,
)
from stringscanner.location import SourceLocation
from stringscanner.protocols import CharSource, DelimiterProtocol
from stringscanner.scanner import Scanner
from stringscanner.sources import StreamSource, StringSource, TextIOSource
from stringscanner.tokens import Token, TokenType

__version__ = "0.1.0"


def tokenize(
    source: str,
    delimiters: DelimiterProtocol,
    *,
    config: ScanConfig | None = None,
) -> list[Token]:
    """Split a string into word and delimiter tokens.

    Args:
        source: Text to scan
        delimiters: Delimiter or DelimiterSet defining word boundaries
        config: Scan configuration (uses the active context config if None)

    Returns:
        Tokens in source order, without the trailing EOF token. Joining
        their values reproduces source exactly.

    Example:
        >>> [t.value for t in tokenize("a;b", Delimiter.literal(";"))]
        ['a', ';', 'b']
    """
    return list(Scanner.from_string(source, config).tokens(delimiters))


__all__ = [
    # Scanning
    "Scanner",
    "tokenize",
    "Token",
    "TokenType",
    "SourceLocation",
    # Delimiters
    "Delimiter",
    "DelimiterMatch",
    "DelimiterSet",
    "DelimiterProtocol",
    # Sources
    "CharSource",
    "StringSource",
    "StreamSource",
    "TextIOSource",
    # Configuration
    "ScanConfig",
    "get_scan_config",
    "set_scan_config",
    "reset_scan_config",
    "scan_config_context",
    # Errors
    "ScannerError",
    "InvalidPatternError",
    "DesyncError",
    "TokenLimitError",
    "__version__",
]
