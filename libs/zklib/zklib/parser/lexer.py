"""Lexer (tokenizer) for zk source code."""

from __future__ import annotations

from zklib.diagnostics.collector import DiagnosticCollector
from zklib.diagnostics.location import SourceLocation
from zklib.parser.errors import LexError
from zklib.parser.tokens import SINGLE_CHAR, Token, TokenKind


def _is_ident_start(ch: str) -> bool:
    return ch.isascii() and (ch.isalpha() or ch == "_")


def _is_ident_char(ch: str) -> bool:
    return ch.isascii() and (ch.isalnum() or ch == "_")


def _is_digit(ch: str) -> bool:
    return ch.isascii() and ch.isdigit()


def _display_char(ch: str) -> str:
    """Render *ch* for a diagnostic; control characters are escaped (``\\t``)."""
    if ch.isprintable():
        return ch
    return ch.encode("unicode_escape").decode("ascii")


class Lexer:
    """Tokenize zk source into a flat token stream.

    Spaces are dropped, every ``\\n`` becomes a NEWLINE token, and any other
    character outside the alphabet raises :class:`LexError`.  There is no
    end-of-input token.
    """

    def __init__(
        self,
        source: str,
        filename: str = "<string>",
        diagnostics: DiagnosticCollector | None = None,
    ) -> None:
        self._source = source
        self._filename = filename
        self._diag = diagnostics or DiagnosticCollector()
        self._pos = 0
        self._line = 1
        self._col = 1

    # ------------------------------------------------------------------
    # Helper methods
    # ------------------------------------------------------------------

    def _peek(self) -> str:
        """Return the current character, or '' at EOF."""
        if self._pos < len(self._source):
            return self._source[self._pos]
        return ""

    def _advance(self) -> str:
        """Consume and return the current character, updating line/col."""
        ch = self._source[self._pos]
        self._pos += 1
        if ch == "\n":
            self._line += 1
            self._col = 1
        else:
            self._col += 1
        return ch

    def _at_end(self) -> bool:
        return self._pos >= len(self._source)

    def _loc(self, line: int, col: int) -> SourceLocation:
        return SourceLocation(file=self._filename, line=line, column=col)

    # ------------------------------------------------------------------
    # Scanning helpers
    # ------------------------------------------------------------------

    def _scan_while(self, pred) -> str:
        begin = self._pos
        while not self._at_end() and pred(self._peek()):
            self._advance()
        return self._source[begin : self._pos]

    # ------------------------------------------------------------------
    # Main entry point
    # ------------------------------------------------------------------

    def tokenize(self) -> list[Token]:
        """Tokenize the entire source."""
        tokens: list[Token] = []

        while not self._at_end():
            ch = self._peek()
            line, col = self._line, self._col

            if ch == " ":
                self._advance()
                continue

            if ch == "\n":
                self._advance()
                tokens.append(Token(TokenKind.NEWLINE, "\n", self._loc(line, col)))
                continue

            if _is_ident_start(ch):
                lexeme = self._scan_while(_is_ident_char)
                tokens.append(Token(TokenKind.IDENTIFIER, lexeme, self._loc(line, col)))
                continue

            if _is_digit(ch):
                lexeme = self._scan_while(_is_digit)
                tokens.append(Token(TokenKind.INTEGER, lexeme, self._loc(line, col)))
                continue

            if ch in SINGLE_CHAR:
                self._advance()
                tokens.append(Token(SINGLE_CHAR[ch], ch, self._loc(line, col)))
                continue

            message = f"unexpected character '{_display_char(ch)}'"
            self._diag.error(message, self._loc(line, col), code=LexError.kind)
            raise LexError(message, self._loc(line, col))

        return tokens
