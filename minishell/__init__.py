"""A minimal interactive shell that runs commands found on PATH, with token types, signal handling and string helpers."""

__version__ = "0.1.0"

__all__ = ["chars", "execute", "printf", "signals", "text", "tokens"]