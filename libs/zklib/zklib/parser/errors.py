"""Error types raised by the zk front end.

Every error is terminal: the first one raised aborts the run.  ``kind`` holds
the name used in rendered diagnostics.
"""

from __future__ import annotations

from typing import ClassVar

from zklib.diagnostics.location import SourceLocation


class CompileError(Exception):
    """Base class for lexical, syntactic, semantic and type errors."""

    kind: ClassVar[str] = "CompileError"

    def __init__(self, message: str, location: SourceLocation | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.location = location

    @property
    def line(self) -> int | None:
        return self.location.line if self.location else None

    def __str__(self) -> str:
        loc = f"{self.location}: " if self.location else ""
        return f"{loc}{self.kind}: {self.message}"


class LexError(CompileError):
    """Raised by the lexer on a character outside the alphabet."""

    kind = "LexError"


class ParseError(CompileError):
    """Raised on a token that does not fit the grammar."""

    kind = "SyntaxError"


class SemanticError(CompileError):
    """Raised on a duplicate declaration or a use of an undeclared name."""

    kind = "SemanticError"


class TypeAnnotationError(CompileError):
    """Raised on a type annotation outside the recognized set."""

    kind = "TypeError"
