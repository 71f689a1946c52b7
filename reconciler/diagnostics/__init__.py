"""
Diagnostics — make acknowledged-but-unconfirmed deliveries observable.

    from reconciler import diagnostics as D

    sink = D.FanoutDiagnostics(D.LogDiagnostics(), my_metrics_sink)
"""

from reconciler.diagnostics._types import (
    DiagnosticKind,
    Diagnostic,
    Diagnostics,
    LogDiagnostics,
    MemoryDiagnostics,
    FanoutDiagnostics,
)

__all__ = (
    "DiagnosticKind",
    "Diagnostic",
    "Diagnostics",
    "LogDiagnostics",
    "MemoryDiagnostics",
    "FanoutDiagnostics",
)
