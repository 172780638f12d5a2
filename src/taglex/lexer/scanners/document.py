"""Document-level scanner mixin: INIT and COMMON states."""

from __future__ import annotations

from collections.abc import Generator
from typing import TYPE_CHECKING

from taglex.lexer.charsets import EOF, is_name_start
from taglex.lexer.modes import LexState
from taglex.tokens import Token, TokenKind

if TYPE_CHECKING:
    from taglex.config import LexConfig


class DocumentScannerMixin:
    """Mixin providing the scanning logic between tags.

    COMMON looks for ``<`` and decides, from the rune after it, whether an
    opening tag, a closing tag or an unsupported construct follows.

    """

    # These will be set by the Lexer class
    _start: int
    _pos: int
    _source: bytes
    _config: LexConfig

    def _next(self) -> str | None:
        raise NotImplementedError

    def _peek(self) -> str | None:
        raise NotImplementedError

    def _backup(self) -> None:
        raise NotImplementedError

    def _emit(self, kind: TokenKind) -> Token:
        raise NotImplementedError

    def _ignore(self) -> None:
        raise NotImplementedError

    def _error(self, message: str, *, offset: int | None = None) -> Token:
        raise NotImplementedError

    def _has_pending_text(self) -> bool:
        """True if COMMON holds character data not yet emitted.

        A lone "<" is a tag opener whose next rune has not been read, not text.
        """
        return self._pos > self._start and self._source[self._start : self._pos] != b"<"

    def _lex_init(self) -> Generator[Token, None, LexState | None]:
        """Reject an empty document, then hand over to COMMON."""
        if self._peek() is EOF:
            yield self._error("unexpected end of file")
            return None
        return LexState.COMMON

    def _lex_common(self) -> Generator[Token, None, LexState | None]:
        """Scan between tags until a tag opens or the input ends.

        Character data is dropped unless the config asks for TEXT tokens.

        Yields:
            TEXT (optional), then TAG_BEGIN or TAG_BEGIN_DASH, or ERROR.
        """
        emit_text = self._config.emit_text
        while True:
            r = self._next()
            if r is EOF:
                if emit_text and self._pos > self._start:
                    yield self._emit(TokenKind.TEXT)
                return None

            if r != "<":
                if not emit_text:
                    self._ignore()
                continue

            if emit_text:
                # Flush text before the "<" so the delimiter is emitted alone
                self._backup()
                if self._pos > self._start:
                    yield self._emit(TokenKind.TEXT)
                self._next()

            s = self._next()
            if s is EOF:
                yield self._error("unexpected end of file")
                return None
            if s == "/":
                yield self._emit(TokenKind.TAG_BEGIN_DASH)
                return LexState.TAG_NAME
            if s == "?":
                yield self._error("XML declarations are not supported")
                return None
            if s == "!":
                yield self._error("comments are not supported")
                return None
            if is_name_start(s):
                self._backup()
                yield self._emit(TokenKind.TAG_BEGIN)
                return LexState.TAG_NAME

            yield self._error(f"invalid character {s!r}, expected start of tag name")
            return None
