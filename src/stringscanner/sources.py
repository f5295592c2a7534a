"""Seekable character sources for the scanner.

Three implementations of the CharSource protocol:

- StringSource: an in-memory str. Positions are character indices.
- StreamSource: a seekable binary stream decoded one byte at a time with
  an incremental decoder. Positions are byte offsets of character
  boundaries, so rewinding never depends on how many bytes a character
  took.
- TextIOSource: a seekable text file. Positions are the file's own
  opaque tell() cookies.

StreamSource position format:
    Usually a plain byte offset. When a single byte makes the decoder
    emit several characters at once (error handlers such as "replace"
    or "backslashreplace" can do this), the characters after the first
    share a byte offset; their positions carry the number of characters
    to skip in the bits above _SKIP_SHIFT, the same packing trick
    io.TextIOWrapper uses for its cookies.

"""

from __future__ import annotations

import codecs
from typing import BinaryIO, TextIO

from stringscanner.errors import DesyncError
from stringscanner.utils.logger import get_logger

logger = get_logger(__name__)

_SKIP_SHIFT = 64
_OFFSET_MASK = (1 << _SKIP_SHIFT) - 1


class StringSource:
    """Character source over an in-memory string.

    Usage:
        >>> src = StringSource("héllo")
        >>> src.read_char(), src.read_char()
        ('h', 'é')
        >>> src.tell()
        2

    """

    __slots__ = ("_text", "_text_len", "_pos")

    def __init__(self, text: str) -> None:
        self._text = text
        self._text_len = len(text)
        self._pos = 0

    def read_char(self) -> str:
        if self._pos >= self._text_len:
            return ""
        ch = self._text[self._pos]
        self._pos += 1
        return ch

    def tell(self) -> int:
        return self._pos

    def seek(self, position: int) -> None:
        if not 0 <= position <= self._text_len:
            raise ValueError(
                f"Position {position} outside source of length {self._text_len}"
            )
        self._pos = position


class StreamSource:
    """Character source over a seekable binary stream.

    Bytes are fed to an incremental decoder one at a time, so the byte
    offset of every character boundary is known exactly. Seeking resets
    the decoder (restoring its byte-order/BOM state when the target is
    past the start), which discards any partially decoded input.

    Usage:
        >>> import io
        >>> src = StreamSource(io.BytesIO("añb".encode()), encoding="utf-8")
        >>> src.read_char(), src.read_char(), src.tell()
        ('a', 'ñ', 3)

    Raises:
        ValueError: If the stream is not seekable
        LookupError: If the encoding is unknown
        DesyncError: From read_char() when a seek landed inside a
            multi-byte character

    """

    __slots__ = (
        "_stream",
        "_decoder",
        "_origin",  # Byte offset where the stream started
        "_byte_pos",  # Byte offset of the next byte to feed
        "_run_start",  # Byte offset where the current decode run began
        "_pending",  # Decoded characters not yet handed out
        "_skip",  # Characters of the current run already handed out
        "_flag",  # Decoder state flag at the last clean boundary
        "_fresh_seek",  # No character decoded since the last seek
        "_encoding",
    )

    def __init__(
        self,
        stream: BinaryIO,
        encoding: str = "utf-8",
        errors: str = "strict",
    ) -> None:
        if not stream.seekable():
            raise ValueError("StreamSource requires a seekable stream")
        self._stream = stream
        self._encoding = codecs.lookup(encoding).name
        self._decoder = codecs.getincrementaldecoder(encoding)(errors)
        self._origin = stream.tell()
        self._byte_pos = self._origin
        self._run_start = self._origin
        self._pending = ""
        self._skip = 0
        self._flag = self._decoder.getstate()[1]
        self._fresh_seek = False

    @property
    def encoding(self) -> str:
        """Normalized codec name."""
        return self._encoding

    def read_char(self) -> str:
        if self._pending:
            ch = self._pending[0]
            self._pending = self._pending[1:]
            self._skip += 1
            if not self._pending:
                self._skip = 0
                self._run_start = self._byte_pos
            return ch

        while True:
            byte = self._stream.read(1)
            try:
                if byte:
                    self._byte_pos += 1
                    out = self._decoder.decode(byte)
                else:
                    out = self._decoder.decode(b"", final=True)
            except UnicodeDecodeError as exc:
                if self._fresh_seek:
                    logger.error("Decode failed right after seek to byte %d", self._run_start)
                    raise DesyncError(
                        self._run_start, "seek target is not a character boundary"
                    ) from exc
                raise
            if out:
                break
            if not byte:
                return ""

        self._fresh_seek = False
        self._flag = self._decoder.getstate()[1]
        if len(out) > 1:
            self._pending = out[1:]
            self._skip = 1
            return out[0]
        self._run_start = self._byte_pos
        return out

    def tell(self) -> int:
        if self._pending:
            return self._run_start | (self._skip << _SKIP_SHIFT)
        return self._run_start

    def seek(self, position: int) -> None:
        byte_offset = position & _OFFSET_MASK
        skip = position >> _SKIP_SHIFT
        if byte_offset < self._origin:
            raise ValueError(f"Position {byte_offset} is before the start of the source")

        logger.debug("Seeking stream to byte %d (skip %d)", byte_offset, skip)
        self._stream.seek(byte_offset)
        self._byte_pos = byte_offset
        self._run_start = byte_offset
        self._pending = ""
        self._skip = 0
        if byte_offset == self._origin:
            self._decoder.reset()
        else:
            self._decoder.setstate((b"", self._flag))
        # The origin is always a character boundary
        self._fresh_seek = byte_offset != self._origin

        for _ in range(skip):
            if not self.read_char():
                raise DesyncError(position, "skip count runs past end of input")


class TextIOSource:
    """Character source over a seekable text stream.

    Delegates positioning to the stream's own tell()/seek() cookies,
    which already capture decoder state. Do not iterate the stream with
    next() while it is wrapped; that disables tell().

    """

    __slots__ = ("_stream",)

    def __init__(self, stream: TextIO) -> None:
        if not stream.seekable():
            raise ValueError("TextIOSource requires a seekable stream")
        self._stream = stream

    def read_char(self) -> str:
        return self._stream.read(1)

    def tell(self) -> int:
        return self._stream.tell()

    def seek(self, position: int) -> None:
        logger.debug("Seeking text stream to cookie %d", position)
        self._stream.seek(position)
