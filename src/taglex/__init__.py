"""
taglex: streaming tokenizer for a restricted tag markup.

Turns text made of opening tags, closing tags and self-closing tags into
a stream of typed tokens for a downstream parser. Tokens are produced one
at a time, on demand. Malformed or unsupported input (XML declarations,
comments) ends the stream with an ERROR token.

Quick Start:
    >>> from taglex import tokenize
    >>> tokenize("<person/>")
    [Token(TAG_BEGIN, '<', 1:1), Token(TAG_NAME, 'person', 1:2), Token(TAG_END_DASH, '/>', 1:8)]

    >>> # Or pull tokens one at a time
    >>> from taglex import new_lexer
    >>> lexer, stream = new_lexer("</person>")
    >>> stream.next_token()
    Token(TAG_BEGIN_DASH, '</', 1:1)

Installation:
    pip install taglex               # Zero runtime dependencies
"""

from taglex.config import (
    LexConfig,
    get_lex_config,
    lex_config_context,
    reset_lex_config,
    set_lex_config,
)
from taglex.errors import BacktrackError, EncodingError, LexError, TaglexError
from taglex.lexer import Lexer, LexState
from taglex.location import SourceLocation
from taglex.stream import TokenStream
from taglex.tokens import Token, TokenKind

__version__ = "0.1.0"


def new_lexer(
    source: str | bytes,
    *,
    source_file: str | None = None,
    config: LexConfig | None = None,
) -> tuple[Lexer, TokenStream]:
    """Create a lexer for source and the stream its tokens arrive on.

    Lexing starts with the first pull from the stream; there is no
    separate start call.

    Args:
        source: Markup text, or UTF-8 encoded bytes
        source_file: Optional source file path for error locations
        config: Lexer configuration (defaults to the active LexConfig)

    Returns:
        (lexer, token_stream)

    Example:
        >>> lexer, stream = new_lexer("<a/>")
        >>> [token.kind.name for token in stream]
        ['TAG_BEGIN', 'TAG_NAME', 'TAG_END_DASH']
    """
    lexer = Lexer(source, source_file=source_file, config=config)
    return lexer, TokenStream(lexer)


def tokenize(
    source: str | bytes,
    *,
    source_file: str | None = None,
    config: LexConfig | None = None,
) -> list[Token]:
    """Tokenize source completely.

    Args:
        source: Markup text, or UTF-8 encoded bytes
        source_file: Optional source file path for error locations
        config: Lexer configuration (defaults to the active LexConfig)

    Returns:
        Every token produced; an ERROR token, if any, is last.

    Raises:
        LexError: In strict mode, when the input is malformed.
    """
    _, stream = new_lexer(source, source_file=source_file, config=config)
    return list(stream)


__all__ = [
    # Main API
    "new_lexer",
    "tokenize",
    "Lexer",
    "LexState",
    "TokenStream",
    # Tokens
    "Token",
    "TokenKind",
    "SourceLocation",
    # Configuration
    "LexConfig",
    "get_lex_config",
    "set_lex_config",
    "reset_lex_config",
    "lex_config_context",
    # Errors
    "TaglexError",
    "LexError",
    "EncodingError",
    "BacktrackError",
    # Version
    "__version__",
]
