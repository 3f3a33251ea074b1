"""File type analyzers that collect evidence about dependencies.

Provides:
- Base analyzer protocol and infrastructure
- AutoconfAnalyzer for configure.ac AC_INIT evidence
"""

from .base import AnalysisError, AnalysisPhase, Analyzer, file_extension, read_dependency_file
from .autoconf import AC_INIT_PATTERN, AutoconfAnalyzer, extract_evidence, find_ac_init

__all__ = [
    "AnalysisError",
    "AnalysisPhase",
    "Analyzer",
    "file_extension",
    "read_dependency_file",
    "AC_INIT_PATTERN",
    "AutoconfAnalyzer",
    "extract_evidence",
    "find_ac_init",
]
