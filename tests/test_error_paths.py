"""Error-path tests.

Tests the exception hierarchy and message formatting, plus the inputs
that are defined behavior rather than errors.
"""

import pytest

from stringscanner import DelimiterSet, Scanner, TokenType
from stringscanner.errors import (
    DesyncError,
    InvalidPatternError,
    ScannerError,
    TokenLimitError,
)

# =========================================================================
# InvalidPatternError
# =========================================================================


class TestInvalidPatternError:
    """Verify InvalidPatternError formatting and hierarchy."""

    def test_message_with_position(self) -> None:
        err = InvalidPatternError("(a", "missing )", pos=0)
        assert "'(a'" in str(err)
        assert "position 0" in str(err)
        assert "missing )" in str(err)

    def test_message_without_position(self) -> None:
        err = InvalidPatternError("", "literal delimiter cannot be empty")
        assert "position" not in str(err)
        assert err.pos is None

    def test_is_scanner_error(self) -> None:
        assert isinstance(InvalidPatternError("x", "y"), ScannerError)


# =========================================================================
# DesyncError
# =========================================================================


class TestDesyncError:
    """Verify DesyncError formatting."""

    def test_basic_format(self) -> None:
        err = DesyncError(17, "not a character boundary")
        assert "17" in str(err)
        assert "not a character boundary" in str(err)
        assert err.position == 17

    def test_is_scanner_error(self) -> None:
        assert isinstance(DesyncError(0, "x"), ScannerError)


# =========================================================================
# TokenLimitError
# =========================================================================


class TestTokenLimitError:
    """Verify TokenLimitError formatting."""

    def test_basic_format(self) -> None:
        err = TokenLimitError(limit=64, offset=128)
        assert "64" in str(err)
        assert "128" in str(err)

    def test_is_scanner_error(self) -> None:
        assert isinstance(TokenLimitError(1, 0), ScannerError)


# =========================================================================
# Defined behavior, not errors
# =========================================================================


class TestGracefulInputs:
    """Inputs that must not raise."""

    def test_empty_input_is_eof(self) -> None:
        assert Scanner.from_string("").read(DelimiterSet()).type is TokenType.EOF

    def test_reading_past_eof(self) -> None:
        scanner = Scanner.from_string("")
        for _ in range(5):
            assert scanner.read(DelimiterSet.of(",")).is_eof

    def test_empty_set_returns_whole_input(self) -> None:
        text = "no delimiters; here, at all"
        assert Scanner.from_string(text).read(DelimiterSet()).value == text

    def test_zero_length_pattern_does_not_stall(self) -> None:
        # "x*" only ever matches the empty string in "abc"
        delims = DelimiterSet.of("x*", literal=False)
        scanner = Scanner.from_string("abc")
        assert scanner.read(delims).value == "abc"
        assert scanner.read(delims).is_eof

    def test_read_rejects_non_delimiter(self) -> None:
        scanner = Scanner.from_string("abc")
        with pytest.raises(AttributeError):
            scanner.read("not a delimiter")  # type: ignore[arg-type]
