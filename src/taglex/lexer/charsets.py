"""Character classes and UTF-8 rune decoding.

Usage:
    from taglex.lexer.charsets import EOF, is_name_start

    if r is not EOF and is_name_start(r):
        ...
"""

from __future__ import annotations

from typing import Final

from taglex.errors import EncodingError

# Returned by the scanner at end of input. Never equal to a character.
EOF: Final = None

# Characters, besides letters, that may start a tag name
NAME_START_PUNCTUATION: frozenset[str] = frozenset("_:")

# Characters, besides name-start characters and digits, that may continue a tag name
NAME_PUNCTUATION: frozenset[str] = frozenset("-.")


def is_name_start(char: str) -> bool:
    """Check if char may begin a tag name (Unicode letter, ``_`` or ``:``)."""
    return char.isalpha() or char in NAME_START_PUNCTUATION


def is_name_char(char: str) -> bool:
    """Check if char may continue a tag name.

    Name-start characters plus decimal digits, ``-`` and ``.``.
    """
    return is_name_start(char) or char.isdecimal() or char in NAME_PUNCTUATION


def rune_width(lead: int) -> int:
    """Width in bytes of the UTF-8 sequence starting with lead, or 0 if invalid."""
    if lead < 0x80:
        return 1
    if 0xC2 <= lead <= 0xDF:
        return 2
    if 0xE0 <= lead <= 0xEF:
        return 3
    if 0xF0 <= lead <= 0xF4:
        return 4
    return 0


def decode_rune(buf: bytes, pos: int) -> tuple[str, int]:
    """Decode the rune starting at buf[pos].

    Args:
        buf: UTF-8 encoded input
        pos: Byte offset of the rune, must be < len(buf)

    Returns:
        (rune, width_in_bytes)

    Raises:
        EncodingError: If the bytes at pos are not a valid UTF-8 sequence.
    """
    lead = buf[pos]
    if lead < 0x80:
        return chr(lead), 1

    width = rune_width(lead)
    if width == 0:
        raise EncodingError(pos)
    try:
        rune = buf[pos : pos + width].decode("utf-8")
    except UnicodeDecodeError:
        raise EncodingError(pos) from None
    return rune, width
