"""Incremental maximal-munch scanner.

Splits a character stream into alternating WORD and DELIMITER tokens,
reading one character at a time and never looking more than one
character past its current hypothesis. Delimiters may change between
calls (e.g. a parser switching lexical modes inside a string literal).

Each read() runs two phases:

1. Seek a boundary. Grow a buffer until the delimiter set matches
   somewhere in it. A match that starts after the first character ends a
   word: everything before the match is returned and the source is
   rewound to the first character of the delimiter. A match at the very
   start moves on to phase 2.

2. Grow the delimiter. Probe the buffer plus one look-ahead character.
   While the probe is either unmatched or matched in full, keep the
   character. As soon as appending a character makes the match stop
   short of the end, the delimiter is the matched prefix; rewind to just
   after it.

Rewinds always target a position the source itself reported before
reading a character, so they stay exact for multi-byte encodings.

Thread Safety:
Scanner instances are single-cursor and not reentrant. Use one scanner
per source and per consumer.

"""

from __future__ import annotations

import io
from collections.abc import Iterator
from typing import BinaryIO, TextIO

from stringscanner.config import ScanConfig, get_scan_config
from stringscanner.errors import DesyncError, TokenLimitError
from stringscanner.protocols import CharSource, DelimiterProtocol
from stringscanner.sources import StreamSource, StringSource, TextIOSource
from stringscanner.tokens import Token, TokenType
from stringscanner.utils.logger import get_logger

logger = get_logger(__name__)


class Scanner:
    """Reads word and delimiter tokens from a seekable character source.

    Usage:
        >>> from stringscanner import DelimiterSet
        >>> delims = DelimiterSet.of(" ", "=", "==")
        >>> scanner = Scanner.from_string("a == b")
        >>> [t.value for t in scanner.tokens(delims)]
        ['a', ' ', '==', ' ', 'b']

    The scanner never inherits from its source; any object satisfying
    CharSource can be wrapped.

    """

    __slots__ = (
        "_source",
        "_config",
        # Location of the next token, in characters
        "_lineno",
        "_col",
        "_offset",
    )

    def __init__(self, source: CharSource, config: ScanConfig | None = None) -> None:
        """Wrap a character source.

        Args:
            source: Seekable character source, positioned at the first
                character to scan
            config: Scan configuration; defaults to the active context config
        """
        if not isinstance(source, CharSource):
            raise TypeError(
                f"Expected a CharSource with read_char/tell/seek, got {type(source).__name__}"
            )
        self._source = source
        self._config = config if config is not None else get_scan_config()
        self._lineno = 1
        self._col = 1
        self._offset = 0

    @classmethod
    def from_string(cls, text: str, config: ScanConfig | None = None) -> Scanner:
        """Create a scanner over an in-memory string."""
        return cls(StringSource(text), config)

    @classmethod
    def from_bytes(
        cls,
        data: bytes,
        encoding: str | None = None,
        config: ScanConfig | None = None,
    ) -> Scanner:
        """Create a scanner over encoded bytes.

        Args:
            data: Encoded input
            encoding: Codec name; defaults to the config's encoding
            config: Scan configuration; defaults to the active context config
        """
        return cls.from_stream(io.BytesIO(data), encoding=encoding, config=config)

    @classmethod
    def from_stream(
        cls,
        stream: BinaryIO | TextIO,
        encoding: str | None = None,
        config: ScanConfig | None = None,
    ) -> Scanner:
        """Create a scanner over an open, seekable file object.

        Text streams are wrapped in TextIOSource and keep their own
        encoding. Binary streams are decoded with StreamSource.

        Args:
            stream: Seekable binary or text stream
            encoding: Codec for binary streams; defaults to the config's encoding
            config: Scan configuration; defaults to the active context config
        """
        config = config if config is not None else get_scan_config()
        if isinstance(stream, io.TextIOBase):
            return cls(TextIOSource(stream), config)
        source = StreamSource(stream, encoding or config.encoding, config.errors)
        return cls(source, config)

    @property
    def source(self) -> CharSource:
        """The wrapped character source."""
        return self._source

    @property
    def config(self) -> ScanConfig:
        return self._config

    @property
    def position(self) -> int:
        """Source position of the next token."""
        return self._source.tell()

    @property
    def offset(self) -> int:
        """Character offset of the next token."""
        return self._offset

    @property
    def at_end(self) -> bool:
        """True if no input remains."""
        position = self._source.tell()
        try:
            return not self._source.read_char()
        finally:
            self._rewind(position)

    # =========================================================================
    # Public API
    # =========================================================================

    def read(self, delimiters: DelimiterProtocol) -> Token:
        """Read the next word or delimiter and advance past it.

        On any error the source is left at the start of the token.

        Args:
            delimiters: Delimiter or DelimiterSet defining word boundaries

        Returns:
            A WORD or DELIMITER token, or the EOF token once the source
            is exhausted

        Raises:
            TokenLimitError: If the token exceeds config.max_token_length
            DesyncError: If the source fails to rewind exactly
        """
        start = self._source.tell()
        try:
            type_, value = self._scan(delimiters)
        except Exception:
            self._rewind(start)
            raise
        token = self._make_token(type_, value)
        self._advance(value)
        logger.debug("Read %s at offset %d", type_.name, token.offset)
        return token

    def peek(self, delimiters: DelimiterProtocol) -> Token:
        """Return the next token without advancing.

        The following read() or peek() with the same delimiters returns
        an identical token. The position is restored even if scanning
        raises.
        """
        position = self._source.tell()
        try:
            type_, value = self._scan(delimiters)
        finally:
            self._rewind(position)
        return self._make_token(type_, value)

    def tokens(self, delimiters: DelimiterProtocol) -> Iterator[Token]:
        """Yield tokens until the input is exhausted.

        The EOF token itself is not yielded.

        Yields:
            WORD and DELIMITER tokens in source order
        """
        while True:
            token = self.read(delimiters)
            if token.is_eof:
                return
            yield token

    # =========================================================================
    # Two-phase scan
    # =========================================================================

    def _scan(self, delimiters: DelimiterProtocol) -> tuple[TokenType, str]:
        """Run both phases and leave the source at the next token.

        Returns:
            (token type, token text)
        """
        source = self._source
        start = source.tell()
        # boundaries[i] is the source position before buffer[i]
        boundaries: list[int] = []
        buffer = ""

        # Phase 1: read until the buffer contains a delimiter
        while True:
            position = source.tell()
            ch = source.read_char()
            if not ch:
                if buffer:
                    return TokenType.WORD, buffer
                return TokenType.EOF, ""
            boundaries.append(position)
            buffer += ch

            match = delimiters.match(buffer)
            if match is None:
                self._check_limit(len(buffer), start)
                continue
            if match.start > 0:
                self._rewind(boundaries[match.start])
                return TokenType.WORD, buffer[: match.start]
            break

        # Phase 2: the buffer opens with a delimiter; grow it
        covered = match.length
        self._check_limit(covered, start)
        while True:
            position = source.tell()
            ch = source.read_char()
            if not ch:
                if covered < len(buffer):
                    self._rewind(boundaries[covered])
                return TokenType.DELIMITER, buffer[:covered]
            boundaries.append(position)
            probe = buffer + ch

            match = delimiters.match(probe)
            if match is None or match.length == len(probe):
                buffer = probe
                if match is None:
                    # Look-ahead past a lost match counts against the limit too
                    self._check_limit(len(buffer), start)
                else:
                    covered = match.length
                    self._check_limit(covered, start)
                continue

            # The cut uses the match length only. A longer member matching
            # later in the probe can therefore cut a token that no single
            # member matches on its own.
            self._rewind(boundaries[match.length])
            return TokenType.DELIMITER, buffer[: match.length]

    # =========================================================================
    # Helpers
    # =========================================================================

    def _rewind(self, position: int) -> None:
        """Seek the source and verify it landed where asked."""
        logger.debug("Rewind %d -> %d", self._source.tell(), position)
        self._source.seek(position)
        actual = self._source.tell()
        if actual != position:
            logger.error("Rewind to %d landed at %d", position, actual)
            raise DesyncError(position, f"source reports position {actual} after seek")

    def _check_limit(self, length: int, start: int) -> None:
        limit = self._config.max_token_length
        if limit is not None and length > limit:
            self._rewind(start)
            raise TokenLimitError(limit, self._offset)

    def _make_token(self, type_: TokenType, value: str) -> Token:
        return Token(type_, value, self._lineno, self._col, self._offset)

    def _advance(self, value: str) -> None:
        """Move location counters past a returned token."""
        self._offset += len(value)
        if not self._config.track_locations:
            return
        newlines = value.count("\n")
        if newlines:
            self._lineno += newlines
            self._col = len(value) - value.rfind("\n")
        else:
            self._col += len(value)
