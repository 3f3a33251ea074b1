"""Base analyzer protocol and shared infrastructure for file type analyzers.

Provides:
- AnalysisPhase enum ordering when analyzers run
- Analyzer protocol for consistent analyzer interface
- AnalysisError raised when a single file cannot be analyzed
- Helper for reading dependency files
"""

from enum import IntEnum
from pathlib import Path
from typing import Protocol, runtime_checkable

import structlog

from depcheck.core.dependency import Dependency
from depcheck.core.evidence import Evidence

logger = structlog.get_logger()


class AnalysisPhase(IntEnum):
    """Phases of a scan, in execution order."""
    INITIAL = 0
    PRE_INFORMATION_COLLECTION = 1
    INFORMATION_COLLECTION = 2
    PRE_IDENTIFIER_ANALYSIS = 3
    IDENTIFIER_ANALYSIS = 4
    POST_IDENTIFIER_ANALYSIS = 5
    PRE_FINDING_ANALYSIS = 6
    FINDING_ANALYSIS = 7
    POST_FINDING_ANALYSIS = 8
    FINAL = 9


class AnalysisError(Exception):
    """Analysis of one dependency failed.

    The original cause is chained via ``raise ... from``.
    """


@runtime_checkable
class Analyzer(Protocol):
    """Protocol for file type analyzers."""
    name: str
    phase: AnalysisPhase
    enabled_setting_key: str

    def supported_extensions(self) -> frozenset[str]:
        """File extensions (lowercase, without dot) this analyzer handles."""
        ...

    def accepts(self, path: Path) -> bool:
        """Check if the analyzer should be run against this file."""
        ...

    def analyze(self, dependency: Dependency) -> list[Evidence]:
        """Collect evidence about the dependency and attach it."""
        ...


def file_extension(path: Path) -> str:
    """Lowercase extension of path without the leading dot ("" if none)."""
    return path.suffix[1:].lower()


def read_dependency_file(path: Path) -> str:
    """Read a dependency file as text.

    Bytes that are not valid UTF-8 are replaced rather than failing the read.

    Args:
        path: File to read

    Returns:
        File contents

    Raises:
        AnalysisError: If the file cannot be read (cause chained)
    """
    try:
        return path.read_text(encoding="utf-8", errors="replace")
    except OSError as e:
        logger.error("dependency_read_failed", path=str(path), error=str(e))
        raise AnalysisError("Problem occurred while reading dependency file.") from e
