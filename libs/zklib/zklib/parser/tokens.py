"""Token definitions for the zk lexer."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from zklib.diagnostics.location import SourceLocation


class TokenKind(Enum):
    """Lexical classes produced by the zk lexer."""

    IDENTIFIER = "identifier"
    INTEGER = "integer"
    OPERATOR = "operator"  # + - * / =
    PUNCTUATION = "punctuation"  # ; : ,
    PARENTHESIS = "parenthesis"  # ( ) { }
    NEWLINE = "newline"

    def __str__(self) -> str:
        return self.value


# Single-character lexemes -> TokenKind.
SINGLE_CHAR: dict[str, TokenKind] = {
    "+": TokenKind.OPERATOR,
    "-": TokenKind.OPERATOR,
    "*": TokenKind.OPERATOR,
    "/": TokenKind.OPERATOR,
    "=": TokenKind.OPERATOR,
    ";": TokenKind.PUNCTUATION,
    ":": TokenKind.PUNCTUATION,
    ",": TokenKind.PUNCTUATION,
    "(": TokenKind.PARENTHESIS,
    ")": TokenKind.PARENTHESIS,
    "{": TokenKind.PARENTHESIS,
    "}": TokenKind.PARENTHESIS,
}

# Keywords are lexed as identifiers; the parser dispatches on these lexemes.
KEYWORDS: frozenset[str] = frozenset({"fn", "let", "const", "return"})


@dataclass(frozen=True)
class Token:
    """A single token produced by the zk lexer."""

    kind: TokenKind
    lexeme: str
    location: SourceLocation

    @property
    def value(self) -> int | str:
        """Integer value for INTEGER tokens, the lexeme otherwise."""
        if self.kind == TokenKind.INTEGER:
            return int(self.lexeme)
        return self.lexeme

    @property
    def line(self) -> int:
        return self.location.line

    def is_(self, kind: TokenKind, lexeme: str | None = None) -> bool:
        """Return True if this token has *kind* (and *lexeme*, when given)."""
        return self.kind == kind and (lexeme is None or self.lexeme == lexeme)
