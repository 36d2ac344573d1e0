"""Lexer tokens: their kinds, construction and a readable listing."""

from __future__ import annotations

import sys
from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum
from typing import TextIO


class TokenType(Enum):
    """Kinds of token produced when a command line is split up."""

    WORD = 0
    PIPE = 1
    REDIR_IN = 2
    REDIR_OUT = 3
    APPEND = 4
    HEREDOC = 5


_LABELS = {
    TokenType.WORD: "[WORD]      :",
    TokenType.PIPE: "[PIPE]      :",
    TokenType.REDIR_IN: "[REDIR_IN]  :",
    TokenType.REDIR_OUT: "[REDIR_OUT] :",
    TokenType.APPEND: "[APPEND]    :",
    TokenType.HEREDOC: "[HERE_DOC]  :",
}


@dataclass
class Token:
    """One lexed token; ``expand`` tells whether variables may be expanded."""

    value: str
    kind: TokenType
    expand: bool = True

    def __str__(self) -> str:
        return f"{_LABELS[self.kind]}\t{self.value}, {int(self.expand)}"


def make_token(value: str | None, kind: TokenType | int, expand: bool) -> Token:
    """Build a token.

    A value that opens with a single quote is never expanded. A missing value
    is an error.
    """
    if value is None:
        raise ValueError("a token needs a value")
    if not isinstance(value, str):
        raise TypeError(f"token value must be a string, got {type(value).__name__}")
    token_type = kind if isinstance(kind, TokenType) else TokenType(kind)
    return Token(
        value=value,
        kind=token_type,
        expand=bool(expand) and not value.startswith("'"),
    )


def format_tokens(tokens: Iterable[Token]) -> str:
    """Render tokens one per line, kind label first."""
    return "".join(f"{token}\n" for token in tokens)


def print_tokens(tokens: Iterable[Token], file: TextIO | None = None) -> None:
    """Write the listing of ``tokens`` to ``file`` (stdout by default)."""
    stream = sys.stdout if file is None else file
    stream.write(format_tokens(tokens))