"""Tests for UTF-8 decoding and invalid input bytes."""

import pytest

from taglex.errors import EncodingError
from taglex.lexer import Lexer
from taglex.lexer.charsets import decode_rune, is_name_char, is_name_start, rune_width
from taglex.tokens import TokenKind


class TestRuneWidth:
    @pytest.mark.parametrize(
        "lead,width",
        [(0x41, 1), (0xC3, 2), (0xE2, 3), (0xF0, 4), (0x80, 0), (0xC0, 0), (0xF8, 0)],
    )
    def test_width_from_lead_byte(self, lead: int, width: int) -> None:
        assert rune_width(lead) == width


class TestDecodeRune:
    def test_decodes_at_offset(self) -> None:
        assert decode_rune("a€".encode(), 1) == ("€", 3)

    @pytest.mark.parametrize(
        "data",
        [b"\x80", b"\xc3", b"\xe2\x82", b"\xe2\x41\x41", b"\xed\xa0\x80", b"\xff"],
    )
    def test_invalid_sequences(self, data: bytes) -> None:
        with pytest.raises(EncodingError) as exc_info:
            decode_rune(data, 0)
        assert exc_info.value.offset == 0


class TestInvalidInput:
    def test_invalid_byte_in_tag_name(self) -> None:
        tokens = list(Lexer(b"<ab\xffc/>").tokenize())

        assert tokens[0].kind == TokenKind.TAG_BEGIN
        assert tokens[-1].kind == TokenKind.ERROR
        assert tokens[-1].value == "invalid UTF-8 encoding at byte offset 3"
        assert tokens[-1].location.offset == 3

    def test_invalid_first_byte(self) -> None:
        tokens = list(Lexer(b"\xfe<a/>").tokenize())
        assert len(tokens) == 1
        assert tokens[0].kind == TokenKind.ERROR

    def test_lone_surrogate_in_str(self) -> None:
        tokens = list(Lexer("<a\ud800/>").tokenize())
        assert tokens[-1].kind == TokenKind.ERROR
        assert "invalid UTF-8" in tokens[-1].value

    def test_lexer_marked_failed(self) -> None:
        lexer = Lexer(b"\xfe")
        list(lexer.tokenize())
        assert lexer.failed is True
        assert lexer.state is None


class TestNameCharacters:
    @pytest.mark.parametrize("char", ["a", "Z", "_", ":", "é", "Ж", "中"])
    def test_name_start(self, char: str) -> None:
        assert is_name_start(char)
        assert is_name_char(char)

    @pytest.mark.parametrize("char", ["0", "٣", "-", "."])
    def test_name_continuation_only(self, char: str) -> None:
        assert not is_name_start(char)
        assert is_name_char(char)

    @pytest.mark.parametrize("char", [" ", "/", ">", "<", "=", "$", "\t", "²"])
    def test_not_name_characters(self, char: str) -> None:
        assert not is_name_char(char)
