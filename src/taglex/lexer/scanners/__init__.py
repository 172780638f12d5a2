"""State scanners for the taglex lexer.

Each scanner is a mixin that provides the scanning logic for a group of
lexer states (INIT and COMMON, TAG_NAME and TAG_INSIDE).
"""

from __future__ import annotations

from taglex.lexer.scanners.document import DocumentScannerMixin
from taglex.lexer.scanners.tag import TagScannerMixin

__all__ = [
    "DocumentScannerMixin",
    "TagScannerMixin",
]
