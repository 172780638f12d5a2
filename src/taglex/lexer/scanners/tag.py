"""Tag scanner mixin: TAG_NAME and TAG_INSIDE states."""

from __future__ import annotations

from collections.abc import Generator
from typing import TYPE_CHECKING

from taglex.lexer.charsets import EOF, is_name_char, is_name_start
from taglex.lexer.modes import LexState
from taglex.tokens import Token, TokenKind

if TYPE_CHECKING:
    from taglex.config import LexConfig

# Runes that end a tag name; they are left for TAG_INSIDE
TAG_NAME_TERMINATORS: frozenset[str] = frozenset(" />")


class TagScannerMixin:
    """Mixin providing the scanning logic inside a tag.

    TAG_NAME validates the name rune by rune, so the first bad rune stops
    the lexer. TAG_INSIDE skips everything up to ``>`` or ``/>``; attributes
    are not tokenized.

    """

    # These will be set by the Lexer class
    _start: int
    _pos: int
    _width: int
    _config: LexConfig

    def _next(self) -> str | None:
        raise NotImplementedError

    def _backup(self) -> None:
        raise NotImplementedError

    def _emit(self, kind: TokenKind) -> Token:
        raise NotImplementedError

    def _ignore(self) -> None:
        raise NotImplementedError

    def _error(self, message: str, *, offset: int | None = None) -> Token:
        raise NotImplementedError

    def _lex_tag_name(self) -> Generator[Token, None, LexState | None]:
        """Scan a tag name up to a space, ``/`` or ``>``.

        Yields:
            TAG_NAME, or ERROR.
        """
        while True:
            r = self._next()
            if r is EOF:
                yield self._error("unexpected end of file")
                return None

            first = self._pos - self._width == self._start
            if r in TAG_NAME_TERMINATORS:
                if first:
                    yield self._error(f"invalid character {r!r}, expected start of tag name")
                    return None
                self._backup()
                yield self._emit(TokenKind.TAG_NAME)
                return LexState.TAG_INSIDE

            valid = is_name_start(r) if first else is_name_char(r)
            if not valid:
                yield self._error(f"invalid character {r!r}, expected tag name character")
                return None

    def _lex_tag_inside(self) -> Generator[Token, None, LexState | None]:
        """Scan from the end of the tag name to ``>`` or ``/>``.

        Yields:
            TAG_END or TAG_END_DASH, or ERROR.
        """
        while True:
            r = self._next()
            if r is EOF:
                yield self._error("unexpected end of file")
                return None
            if r == "/":
                s = self._next()
                if s is EOF:
                    yield self._error("unexpected end of file")
                    return None
                if s != ">":
                    yield self._error(f"invalid character {s!r}, expected '>'")
                    return None
                yield self._emit(TokenKind.TAG_END_DASH)
                return self._after_tag()
            if r == ">":
                yield self._emit(TokenKind.TAG_END)
                return self._after_tag()
            # Attribute text is skipped
            self._ignore()

    def _after_tag(self) -> LexState | None:
        """State after a tag closes: COMMON when resuming, else stop."""
        return LexState.COMMON if self._config.resume_after_tag else None
