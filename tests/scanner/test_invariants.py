"""Property-based tests for scanner invariants using Hypothesis.

These tests verify that certain properties always hold regardless
of the input, helping catch edge cases that example-based tests miss.
"""

from hypothesis import given, settings
from hypothesis import strategies as st

from stringscanner import Delimiter, DelimiterMatch, DelimiterSet, Scanner, TokenType, tokenize

# Small alphabets make delimiter collisions frequent
SQLISH = "ab =<>!,;() \n"
OPERATORS = ["=", "==", "<", "<=", "<>", ">", ">=", "!=", ",", ";", "(", ")", " "]

operator_sets = st.lists(st.sampled_from(OPERATORS), min_size=1, unique=True).map(
    lambda ops: DelimiterSet.of(*ops)
)


class TestRoundTrip:
    """Concatenated token values reproduce the input."""

    @given(st.text(alphabet=SQLISH, max_size=200), operator_sets)
    @settings(max_examples=200)
    def test_round_trip(self, source: str, delims: DelimiterSet) -> None:
        tokens = tokenize(source, delims)
        assert "".join(t.value for t in tokens) == source

    @given(st.text(max_size=200))
    @settings(max_examples=100)
    def test_round_trip_arbitrary_text(self, source: str) -> None:
        delims = DelimiterSet([Delimiter(r"\s+"), Delimiter(r"[^\w\s]")])
        tokens = tokenize(source, delims)
        assert "".join(t.value for t in tokens) == source

    @given(st.text(alphabet=SQLISH, max_size=200), operator_sets)
    @settings(max_examples=100)
    def test_no_empty_tokens(self, source: str, delims: DelimiterSet) -> None:
        for token in tokenize(source, delims):
            assert token.value != ""

    @given(st.text(alphabet=SQLISH, max_size=200), operator_sets)
    @settings(max_examples=100)
    def test_offsets_are_contiguous(self, source: str, delims: DelimiterSet) -> None:
        expected = 0
        for token in tokenize(source, delims):
            assert token.offset == expected
            expected += len(token.value)


class TestNoDelimiters:
    """Without matches the input is one word."""

    @given(st.text(alphabet="abcxyz", min_size=1, max_size=100))
    @settings(max_examples=100)
    def test_single_word_then_eof(self, source: str) -> None:
        scanner = Scanner.from_string(source)
        delims = DelimiterSet.of(",", ";")
        first = scanner.read(delims)
        assert first.type is TokenType.WORD
        assert first.value == source
        assert scanner.read(delims).is_eof


class TestPeekInvariants:
    """peek() never changes what comes next."""

    @given(st.text(alphabet=SQLISH, max_size=100), operator_sets)
    @settings(max_examples=100)
    def test_peek_matches_read(self, source: str, delims: DelimiterSet) -> None:
        scanner = Scanner.from_string(source)
        while True:
            first = scanner.peek(delims)
            second = scanner.peek(delims)
            read = scanner.read(delims)
            assert first == second == read
            if read.is_eof:
                break


class TestDelimiterTokens:
    """With literal delimiters, delimiter tokens are real, maximal matches."""

    @given(st.text(alphabet=SQLISH, max_size=200), operator_sets)
    @settings(max_examples=100)
    def test_delimiter_tokens_match_a_member(self, source: str, delims: DelimiterSet) -> None:
        for token in tokenize(source, delims):
            if token.type is TokenType.DELIMITER:
                whole = DelimiterMatch(0, len(token.value))
                assert any(d.match(token.value) == whole for d in delims), token

    @given(st.lists(st.sampled_from(["a", "b", "==", "=", " "]), max_size=50))
    @settings(max_examples=100)
    def test_equals_runs_split_greedily(self, parts: list[str]) -> None:
        tokens = tokenize("".join(parts), DelimiterSet.of("=", "=="))
        for token, following in zip(tokens, tokens[1:]):
            if token.value == "=":
                # A lone "=" only appears when the next character is not "="
                assert not following.value.startswith("=")
        for token in tokens:
            if token.type is TokenType.DELIMITER:
                assert token.value in ("=", "==")

    @given(st.text(alphabet="ab", max_size=100))
    @settings(max_examples=100)
    def test_words_contain_no_delimiter(self, source: str) -> None:
        delims = DelimiterSet.of("ab")
        for token in tokenize(source, delims):
            if token.type is TokenType.WORD:
                assert "ab" not in token.value


class TestMultibyteRoundTrip:
    """Byte-stream sources rewind to exact character boundaries."""

    @given(
        st.text(alphabet="aé€😀,=; ", max_size=100),
        st.sampled_from(["utf-8", "utf-16", "utf-32", "utf-8-sig"]),
    )
    @settings(max_examples=100)
    def test_round_trip_through_bytes(self, source: str, encoding: str) -> None:
        delims = DelimiterSet.of(",", "=", "==", "😀", "😀😀")
        scanner = Scanner.from_bytes(source.encode(encoding), encoding=encoding)
        expected = [(t.type, t.value) for t in tokenize(source, delims)]
        assert [(t.type, t.value) for t in scanner.tokens(delims)] == expected


class TestDeterminism:
    """Scanning is deterministic."""

    @given(st.text(alphabet=SQLISH, max_size=200))
    @settings(max_examples=50)
    def test_repeated_tokenization_identical(self, source: str) -> None:
        delims = DelimiterSet.of(*OPERATORS)
        first = [(t.type, t.value) for t in tokenize(source, delims)]
        second = [(t.type, t.value) for t in tokenize(source, delims)]
        assert first == second
