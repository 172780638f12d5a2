"""Token and TokenKind definitions for the taglex lexer.

The lexer produces a stream of Token objects that a downstream parser
consumes. Each Token has a kind, the exact input text it covers, and
source coordinates.

Thread Safety:
Token is frozen (immutable) and safe to share across threads.
TokenKind is an enum (inherently immutable).

Performance Note:
Token stores raw coordinates and lazily creates SourceLocation on demand.

"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from taglex.location import SourceLocation


class TokenKind(Enum):
    """Token kinds produced by the lexer.

    ATTR_NAME, EQUALS and the quoted string kinds are reserved for
    attribute lexing; no lexer state produces them yet.

    """

    # Stream control
    ERROR = auto()  # Diagnostic message, always the last token
    END_OF_FILE = auto()

    # Tag delimiters
    TAG_BEGIN = auto()  # <
    TAG_END = auto()  # >
    TAG_BEGIN_DASH = auto()  # </
    TAG_END_DASH = auto()  # />

    # Names
    TAG_NAME = auto()
    ATTR_NAME = auto()

    # Attribute values
    EQUALS = auto()  # =
    DOUBLE_QUOTED_STRING = auto()  # "lorem ipsum"
    SINGLE_QUOTED_STRING = auto()  # 'lorem ipsum'

    # Character data
    TEXT = auto()


@dataclass(frozen=True, slots=True)
class Token:
    """A token produced by the lexer.

    Two tokens are equal when kind and value match; coordinates are
    metadata and do not take part in comparison or hashing.

    Attributes:
        kind: The token kind (from TokenKind enum)
        value: The input text covered by the token, or the diagnostic
            message for ERROR tokens
        _lineno: Start line number (1-indexed)
        _col: Start column (1-indexed)
        _start_offset: Absolute start byte offset
        _end_offset: Absolute end byte offset
        _source_file: Optional source file path

    """

    kind: TokenKind
    value: str
    _lineno: int = field(default=1, compare=False)
    _col: int = field(default=1, compare=False)
    _start_offset: int = field(default=0, compare=False)
    _end_offset: int = field(default=0, compare=False)
    _source_file: str | None = field(default=None, compare=False)
    # Cache field - excluded from repr and comparison
    _location_cache: SourceLocation | None = field(
        default=None, repr=False, compare=False, hash=False
    )

    @property
    def location(self) -> SourceLocation:
        """Get source location (lazily created and cached)."""
        if self._location_cache is not None:
            return self._location_cache

        from taglex.location import SourceLocation

        loc = SourceLocation(
            lineno=self._lineno,
            col_offset=self._col,
            offset=self._start_offset,
            end_offset=self._end_offset,
            source_file=self._source_file,
        )
        object.__setattr__(self, "_location_cache", loc)
        return loc

    def __repr__(self) -> str:
        """Compact repr for debugging."""
        val = self.value
        if len(val) > 20:
            val = val[:17] + "..."
        return f"Token({self.kind.name}, {val!r}, {self._lineno}:{self._col})"

    @property
    def lineno(self) -> int:
        """Line number (convenience accessor)."""
        return self._lineno

    @property
    def col(self) -> int:
        """Column (convenience accessor)."""
        return self._col

    @property
    def is_error(self) -> bool:
        return self.kind is TokenKind.ERROR

    def raise_for_error(self) -> None:
        """Raise LexError if this is an ERROR token, otherwise do nothing.

        Raises:
            LexError: carrying the diagnostic message and location.
        """
        if self.kind is not TokenKind.ERROR:
            return

        from taglex.errors import LexError

        raise LexError(
            self.value,
            lineno=self._lineno,
            col_offset=self._col,
            offset=self._start_offset,
            source_file=self._source_file,
        )
