"""zk diagnostics subpackage (Layer 0, no internal dependencies)."""

from zklib.diagnostics.collector import DiagnosticCollector
from zklib.diagnostics.diagnostic import Diagnostic
from zklib.diagnostics.location import SourceLocation
from zklib.diagnostics.severity import DiagnosticSeverity

__all__ = ["SourceLocation", "DiagnosticSeverity", "Diagnostic", "DiagnosticCollector"]
