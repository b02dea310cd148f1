"""Editor diagnostics for tinyclass sources, as Language Server Protocol types."""

from .diagnostics import (
    AnalysisResult as AnalysisResult,
    compute_diagnostics as compute_diagnostics,
)
