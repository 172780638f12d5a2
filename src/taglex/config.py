"""ContextVar-based lexer configuration for taglex.

Provides thread-local configuration using Python's ContextVars (PEP 567).
A Lexer snapshots the active config when it is created, so changing the
config never affects a token stream that is already running.

Thread Safety:
    ContextVars are thread-local by design. Each thread has independent storage,
    so no locks are needed and race conditions are impossible.

Usage:
    from taglex.config import LexConfig, lex_config_context

    with lex_config_context(LexConfig(resume_after_tag=True)):
        tokens = tokenize("<a/><b/>")

    # Or pass a config explicitly
    lexer, stream = new_lexer("<a/>", config=LexConfig(emit_eof=True))

"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class LexConfig:
    """Immutable lexer configuration.

    The defaults lex a single top-level tag and drop character data.
    Each flag opts into a wider grammar.

    Note: source_file is intentionally excluded; it is per-call state,
    not configuration. It remains on the Lexer instance.

    Attributes:
        emit_text: Emit character data outside tags as TEXT tokens
            instead of dropping it
        resume_after_tag: Return to text scanning after ``>`` or ``/>``
            so that sibling tags are lexed; otherwise the stream ends
            after the first tag closes
        emit_eof: Emit an END_OF_FILE token when lexing ends cleanly
        strict: Raise LexError from the stream instead of emitting an
            ERROR token

    """

    emit_text: bool = False
    resume_after_tag: bool = False
    emit_eof: bool = False
    strict: bool = False

    @classmethod
    def from_dict(cls, config_dict: dict) -> "LexConfig":
        """Create LexConfig from dictionary.

        Only includes keys that are valid LexConfig fields; unknown keys
        are silently ignored.

        Example:
            >>> config = LexConfig.from_dict({
            ...     "emit_text": True,
            ...     "unknown_key": "ignored",
            ... })
            >>> config.emit_text
            True

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: LexConfig = LexConfig()

_lex_config: ContextVar[LexConfig] = ContextVar(
    "lex_config",
    default=_DEFAULT_CONFIG,
)


def get_lex_config() -> LexConfig:
    """Get current lexer configuration (thread-local)."""
    return _lex_config.get()


def set_lex_config(config: LexConfig) -> None:
    """Set lexer configuration for current context.

    Args:
        config: LexConfig instance to use for this context.

    """
    _lex_config.set(config)


def reset_lex_config() -> None:
    """Reset to default configuration."""
    _lex_config.set(_DEFAULT_CONFIG)


@contextmanager
def lex_config_context(config: LexConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Args:
        config: LexConfig to use within the context.

    Yields:
        None

    Thread Safety:
        Only affects the current thread's context. Properly restores previous
        config even if an exception is raised.

    """
    previous = _lex_config.get()
    _lex_config.set(config)
    try:
        yield
    finally:
        _lex_config.set(previous)


__all__ = [
    "LexConfig",
    "get_lex_config",
    "set_lex_config",
    "reset_lex_config",
    "lex_config_context",
]
