"""Source location tracking for zk diagnostics."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class SourceLocation:
    """A location in zk source code."""

    file: str
    line: int  # 1-indexed
    column: int | None = None  # 1-indexed

    def __str__(self) -> str:
        # Column is kept for tooling but not rendered: diagnostics read file:line.
        return f"{self.file}:{self.line}"
