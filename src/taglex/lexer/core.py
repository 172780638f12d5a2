"""State-machine lexer for tag markup.

The lexer is a generator: each state is a generator method that yields the
tokens it emits and returns the next state. A token is only produced when
the consumer asks for it, so the scan never runs ahead of its reader and
an abandoned reader leaves nothing running.

Thread Safety:
Lexer instances are single-use. Create one per source string.
All state is instance-local; no shared mutable state.

"""

from __future__ import annotations

from collections.abc import Generator, Iterator

from taglex.config import LexConfig, get_lex_config
from taglex.errors import BacktrackError, EncodingError, LexError
from taglex.lexer.charsets import EOF, decode_rune
from taglex.lexer.modes import LexState
from taglex.lexer.scanners import DocumentScannerMixin, TagScannerMixin
from taglex.tokens import Token, TokenKind
from taglex.utils.logger import get_logger

logger = get_logger(__name__)


class Lexer(
    DocumentScannerMixin,
    TagScannerMixin,
):
    """State-machine lexer over a single input.

    Combines a rune scanner (``_next``, ``_peek``, ``_backup``) with a token
    emitter (``_emit``, ``_ignore``, ``_error``). Positions are byte offsets
    into the UTF-8 encoding of the input; ``_source[_start:_pos]`` is the
    span that has been scanned but not yet emitted.

    Usage:
            >>> lexer = Lexer("<person/>")
            >>> for token in lexer.tokenize():
            ...     print(token)
        Token(TAG_BEGIN, '<', 1:1)
        Token(TAG_NAME, 'person', 1:2)
        Token(TAG_END_DASH, '/>', 1:8)

    Thread Safety:
        Lexer instances are single-use. Create one per source string.

    """

    __slots__ = (
        "_source",
        "_source_len",
        "_source_file",
        "_config",
        "_start",
        "_pos",
        "_width",
        "_can_backup",
        # Line/column of _pos, and of _pos before the last _next()
        "_lineno",
        "_col",
        "_prev_lineno",
        "_prev_col",
        # Line/column of _start
        "_start_lineno",
        "_start_col",
        "_state",
        "_failed",
        "_tokens",
    )

    def __init__(
        self,
        source: str | bytes,
        source_file: str | None = None,
        config: LexConfig | None = None,
    ) -> None:
        """Initialize lexer with source text.

        Args:
            source: Markup text, or UTF-8 encoded bytes
            source_file: Optional source file path for error messages
            config: Lexer configuration (defaults to the active LexConfig)
        """
        if isinstance(source, str):
            # surrogatepass lets lone surrogates through to the decoder,
            # which reports them as an encoding error
            source = source.encode("utf-8", "surrogatepass")
        self._source: bytes = source
        self._source_len = len(source)
        self._source_file = source_file
        self._config = config if config is not None else get_lex_config()

        self._start = 0
        self._pos = 0
        self._width = 0
        self._can_backup = False

        self._lineno = 1
        self._col = 1
        self._prev_lineno = 1
        self._prev_col = 1
        self._start_lineno = 1
        self._start_col = 1

        self._state: LexState | None = LexState.INIT
        self._failed = False
        self._tokens: Generator[Token, None, None] = self._run()

    @property
    def state(self) -> LexState | None:
        """The state currently scanning, or None once lexing has finished."""
        return self._state

    @property
    def failed(self) -> bool:
        """True once an error has been reported."""
        return self._failed

    @property
    def config(self) -> LexConfig:
        return self._config

    def tokenize(self) -> Iterator[Token]:
        """Token iterator for this lexer.

        The iterator is created with the lexer; every call returns the same
        one, so tokens already consumed are not produced again.

        Returns:
            Iterator yielding Token objects one at a time
        """
        return self._tokens

    def close(self) -> None:
        """Stop lexing. Tokens not yet pulled are never produced."""
        self._tokens.close()
        self._state = None

    def _run(self) -> Generator[Token, None, None]:
        state: LexState | None = self._state
        while state is not None:
            try:
                next_state = yield from self._dispatch_state(state)
            except EncodingError as exc:
                if state == LexState.COMMON and self._config.emit_text and self._has_pending_text():
                    yield self._emit(TokenKind.TEXT)
                yield self._error(str(exc), offset=exc.offset)
                next_state = None
            logger.debug("lexer state %s -> %s", state.name, next_state.name if next_state else None)
            state = self._state = next_state

        if self._config.emit_eof and not self._failed:
            yield self._emit(TokenKind.END_OF_FILE)

    def _dispatch_state(self, state: LexState) -> Generator[Token, None, LexState | None]:
        """Dispatch to the scanner for state.

        Returns:
            The next state, or None to stop.
        """
        if state == LexState.INIT:
            return (yield from self._lex_init())
        elif state == LexState.COMMON:
            return (yield from self._lex_common())
        elif state == LexState.TAG_NAME:
            return (yield from self._lex_tag_name())
        elif state == LexState.TAG_INSIDE:
            return (yield from self._lex_tag_inside())
        raise ValueError(f"unknown lexer state: {state!r}")

    # =========================================================================
    # Rune scanner
    # =========================================================================

    def _next(self) -> str | None:
        """Consume the next rune.

        Returns:
            The rune, or EOF at end of input (position is not advanced).

        Raises:
            EncodingError: If the input is not valid UTF-8 at this position.
        """
        self._can_backup = True
        self._prev_lineno = self._lineno
        self._prev_col = self._col
        if self._pos >= self._source_len:
            self._width = 0
            return EOF

        rune, self._width = decode_rune(self._source, self._pos)
        self._pos += self._width

        if rune == "\n":
            self._lineno += 1
            self._col = 1
        else:
            self._col += 1
        return rune

    def _peek(self) -> str | None:
        """Look at the next rune without consuming it."""
        rune = self._next()
        self._backup()
        return rune

    def _backup(self) -> None:
        """Step back over the rune returned by the last _next().

        Raises:
            BacktrackError: If called twice without an intervening _next().
        """
        if not self._can_backup:
            raise BacktrackError("cannot back up more than one rune")
        self._can_backup = False
        self._pos -= self._width
        self._lineno = self._prev_lineno
        self._col = self._prev_col

    # =========================================================================
    # Token emitter
    # =========================================================================

    def _make_token(self, kind: TokenKind, value: str) -> Token:
        return Token(
            kind=kind,
            value=value,
            _lineno=self._start_lineno,
            _col=self._start_col,
            _start_offset=self._start,
            _end_offset=self._pos,
            _source_file=self._source_file,
        )

    def _emit(self, kind: TokenKind) -> Token:
        """Create a token from the pending span and collapse the span."""
        token = self._make_token(kind, self._source[self._start : self._pos].decode("utf-8"))
        self._ignore()
        return token

    def _ignore(self) -> None:
        """Drop the pending span without emitting it."""
        self._start = self._pos
        self._start_lineno = self._lineno
        self._start_col = self._col

    def _error(self, message: str, *, offset: int | None = None) -> Token:
        """Report a fatal error at the rune returned by the last _next().

        The caller must stop the state machine (return None) after
        yielding the returned token.

        Args:
            message: Human-readable diagnostic
            offset: Byte offset of the problem (defaults to the last rune)

        Returns:
            ERROR token carrying message

        Raises:
            LexError: Instead of returning, when the config is strict.
        """
        self._failed = True
        if offset is None:
            offset = self._pos - self._width
        lineno, col = self._prev_lineno, self._prev_col
        logger.debug("lex error at %d:%d: %s", lineno, col, message)

        if self._config.strict:
            raise LexError(
                message,
                lineno=lineno,
                col_offset=col,
                offset=offset,
                source_file=self._source_file,
            )

        return Token(
            kind=TokenKind.ERROR,
            value=message,
            _lineno=lineno,
            _col=col,
            _start_offset=offset,
            _end_offset=offset,
            _source_file=self._source_file,
        )
