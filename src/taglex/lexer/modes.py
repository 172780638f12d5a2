"""Lexer states.

This module defines the finite state machine states for the lexer.
"""

from __future__ import annotations

from enum import Enum, auto


class LexState(Enum):
    """Lexer states.

    The lexer moves between states based on the rune just scanned:
    - INIT: Before any input is read; rejects an empty document
    - COMMON: Between tags, looking for ``<``
    - TAG_NAME: Scanning the name of an opening or closing tag
    - TAG_INSIDE: After the tag name, scanning toward ``>`` or ``/>``

    """

    INIT = auto()
    COMMON = auto()
    TAG_NAME = auto()
    TAG_INSIDE = auto()
