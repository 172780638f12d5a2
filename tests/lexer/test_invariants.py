"""Property-based tests for lexer invariants using Hypothesis.

These tests verify that certain properties always hold regardless
of the input, helping catch edge cases that example-based tests miss.
"""

from hypothesis import given, settings
from hypothesis import strategies as st

from taglex.lexer import Lexer
from taglex.tokens import Token, TokenKind

# Tag names: first char letter, "_" or ":"; then also digits, "-" and "."
tag_names = st.from_regex(r"[A-Za-z_:][A-Za-z0-9_:.\-]{0,20}", fullmatch=True)


def lex(source: str | bytes) -> list[Token]:
    return list(Lexer(source).tokenize())


class TestBasicInvariants:
    """Test basic invariants that should always hold."""

    @given(st.text(max_size=300))
    @settings(max_examples=200)
    def test_error_is_always_last(self, source: str) -> None:
        """At most one ERROR token, and nothing follows it."""
        tokens = lex(source)
        errors = [i for i, t in enumerate(tokens) if t.kind == TokenKind.ERROR]
        assert len(errors) <= 1
        if errors:
            assert errors[0] == len(tokens) - 1

    @given(st.binary(max_size=200))
    @settings(max_examples=200)
    def test_arbitrary_bytes_never_raise(self, source: bytes) -> None:
        """Invalid UTF-8 is reported as a token, never as an exception."""
        tokens = lex(source)
        for token in tokens[:-1]:
            assert token.kind != TokenKind.ERROR

    @given(st.text(alphabet="<>/?!=\"' ab1-.:_", max_size=100))
    @settings(max_examples=200)
    def test_values_are_exact_input_slices(self, source: str) -> None:
        """Every non-error token value is the input between its offsets."""
        data = source.encode()
        for token in lex(source):
            if token.kind == TokenKind.ERROR:
                continue
            assert data[token.location.offset : token.location.end_offset].decode() == token.value

    @given(st.text(alphabet="<>/?!=\"' ab1-.:_", max_size=100))
    @settings(max_examples=200)
    def test_delimiter_values(self, source: str) -> None:
        """Delimiter tokens carry exactly the delimiter text."""
        expected = {
            TokenKind.TAG_BEGIN: "<",
            TokenKind.TAG_END: ">",
            TokenKind.TAG_BEGIN_DASH: "</",
            TokenKind.TAG_END_DASH: "/>",
        }
        for token in lex(source):
            if token.kind in expected:
                assert token.value == expected[token.kind]

    @given(st.text(max_size=300))
    @settings(max_examples=100)
    def test_reserved_kinds_never_produced(self, source: str) -> None:
        reserved = {
            TokenKind.ATTR_NAME,
            TokenKind.EQUALS,
            TokenKind.DOUBLE_QUOTED_STRING,
            TokenKind.SINGLE_QUOTED_STRING,
            TokenKind.TEXT,
            TokenKind.END_OF_FILE,
        }
        assert not any(t.kind in reserved for t in lex(source))


class TestTagGrammar:
    """Token sequences for well-formed and malformed single tags."""

    @given(tag_names)
    def test_self_closing_tag(self, name: str) -> None:
        assert lex(f"<{name}/>") == [
            Token(TokenKind.TAG_BEGIN, "<"),
            Token(TokenKind.TAG_NAME, name),
            Token(TokenKind.TAG_END_DASH, "/>"),
        ]

    @given(tag_names, st.integers(min_value=1, max_value=20))
    def test_space_runs_absorbed(self, name: str, spaces: int) -> None:
        assert lex(f"<{name}{' ' * spaces}/>") == lex(f"<{name}/>")

    @given(st.sampled_from(["<?", "<!"]), st.text(max_size=50))
    def test_unsupported_constructs_single_error(self, opener: str, rest: str) -> None:
        tokens = lex(opener + rest)
        assert len(tokens) == 1
        assert tokens[0].kind == TokenKind.ERROR

    @given(tag_names)
    def test_unterminated_name_ends_in_error(self, name: str) -> None:
        """A name cut off by end of input never becomes a TAG_NAME token."""
        tokens = lex(f"<{name}")
        assert [t.kind for t in tokens] == [TokenKind.TAG_BEGIN, TokenKind.ERROR]


class TestDeterminism:
    """Test that tokenization is deterministic."""

    @given(st.text(max_size=200))
    @settings(max_examples=50)
    def test_repeated_tokenization_identical(self, source: str) -> None:
        """Tokenizing the same source with separate lexers gives identical results."""
        first_result = [(t.kind, t.value) for t in lex(source)]
        second_result = [(t.kind, t.value) for t in lex(source)]

        assert first_result == second_result

    @given(st.text(max_size=200))
    @settings(max_examples=50)
    def test_str_and_bytes_agree(self, source: str) -> None:
        assert lex(source) == lex(source.encode())
