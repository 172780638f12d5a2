"""Exception classes for taglex.

Lexing failures normally surface as ERROR tokens in the token stream.
These exceptions cover the remaining cases: strict mode, consumers that
prefer exceptions (Token.raise_for_error), and misuse of the scanner.
"""

from __future__ import annotations


class TaglexError(Exception):
    """Base exception for all taglex errors."""

    pass


class LexError(TaglexError):
    """Malformed or unsupported input.

    Raised in strict mode, or by Token.raise_for_error(), when the lexer
    stops on input it cannot tokenize.
    """

    def __init__(
        self,
        message: str,
        lineno: int | None = None,
        col_offset: int | None = None,
        offset: int | None = None,
        source_file: str | None = None,
    ) -> None:
        """Initialize lex error with optional location.

        Args:
            message: Error description
            lineno: Line number where error occurred (1-indexed)
            col_offset: Column where error occurred (1-indexed)
            offset: Byte offset where error occurred
            source_file: Path to source file (optional)
        """
        self.message = message
        self.lineno = lineno
        self.col_offset = col_offset
        self.offset = offset
        self.source_file = source_file

        location = ""
        if source_file:
            location = f"{source_file}:"
        if lineno is not None:
            location += f"{lineno}:"
            if col_offset is not None:
                location += f"{col_offset}:"
        if location:
            location = location.rstrip(":") + " "

        super().__init__(f"{location}{message}")


class EncodingError(TaglexError):
    """Input bytes are not valid UTF-8."""

    def __init__(self, offset: int) -> None:
        self.offset = offset
        super().__init__(f"invalid UTF-8 encoding at byte offset {offset}")


class BacktrackError(TaglexError):
    """The scanner was asked to back up twice without reading in between.

    Only one rune of backtrack is supported.
    """

    pass
