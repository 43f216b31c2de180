"""Diagnostic message representation for zk."""

from __future__ import annotations

from dataclasses import dataclass

from zklib.diagnostics.location import SourceLocation
from zklib.diagnostics.severity import DiagnosticSeverity


@dataclass(frozen=True)
class Diagnostic:
    """A single diagnostic message.

    ``code`` names the error class (``LexError``, ``SyntaxError``, ...) and
    replaces the severity in the rendered text when present.
    """

    severity: DiagnosticSeverity
    message: str
    location: SourceLocation | None = None
    code: str | None = None

    def __str__(self) -> str:
        loc = f"{self.location}: " if self.location else ""
        label = self.code or str(self.severity)
        return f"{loc}{label}: {self.message}"
