"""State-machine lexer for taglex.

Architecture:
lexer/
├── __init__.py          # Re-exports Lexer, LexState
├── core.py              # Lexer class (rune scanner + token emitter + run loop)
├── modes.py             # LexState enum
├── charsets.py          # Tag name character classes, UTF-8 rune decoding
└── scanners/            # State-specific scanners
    ├── document.py      # INIT and COMMON
    └── tag.py           # TAG_NAME and TAG_INSIDE

Usage:
    >>> from taglex.lexer import Lexer
    >>> for token in Lexer("</a>").tokenize():
    ...     print(token)
Token(TAG_BEGIN_DASH, '</', 1:1)
Token(TAG_NAME, 'a', 1:3)
Token(TAG_END, '>', 1:4)

"""

from taglex.lexer.core import Lexer
from taglex.lexer.modes import LexState

__all__ = ["Lexer", "LexState"]
