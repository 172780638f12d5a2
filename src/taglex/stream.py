"""Pull-based token stream.

TokenStream is the consumer side of a Lexer. Each pull runs the state
machine just far enough to produce one token, so the producer can never
get ahead of the consumer and tokens arrive in emission order.

Once the lexer stops (cleanly, on an ERROR token, or through close()),
the stream is closed and every further pull returns None immediately.

Example:
    >>> lexer, stream = new_lexer("<a/>")
    >>> stream.next_token()
    Token(TAG_BEGIN, '<', 1:1)
    >>> [t.value for t in stream]
    ['a', '/>']
    >>> stream.next_token() is None
    True
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import TYPE_CHECKING

from taglex.tokens import Token

if TYPE_CHECKING:
    from types import TracebackType

    from taglex.lexer import Lexer


class TokenStream:
    """Blocking-free token reader over a single Lexer.

    Thread Safety:
        Not thread-safe. One consumer per stream.

    """

    __slots__ = ("_lexer", "_tokens", "_closed")

    def __init__(self, lexer: Lexer) -> None:
        self._lexer = lexer
        self._tokens = lexer.tokenize()
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    def next_token(self) -> Token | None:
        """Pull the next token.

        Returns:
            The next token, or None once the stream is closed.

        Raises:
            LexError: In strict mode, when the input is malformed. The
                stream is closed afterwards.
        """
        if self._closed:
            return None
        try:
            return next(self._tokens)
        except StopIteration:
            self._closed = True
            return None
        except Exception:
            self._closed = True
            raise

    def close(self) -> None:
        """Close the stream and stop the lexer behind it."""
        if not self._closed:
            self._closed = True
            self._lexer.close()

    def __iter__(self) -> Iterator[Token]:
        return self

    def __next__(self) -> Token:
        token = self.next_token()
        if token is None:
            raise StopIteration
        return token

    def __enter__(self) -> TokenStream:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()
