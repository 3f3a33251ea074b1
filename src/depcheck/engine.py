"""Scan engine coordinating file discovery and analyzers.

Discovers candidate files, creates one Dependency per file accepted by an
enabled analyzer, and runs analyzers phase by phase. Within a phase every
dependency is analyzed concurrently in a worker thread. A failure while
analyzing one file is logged and recorded; it never stops the scan.

Provides:
- ScanResult: Dependencies and per-file errors from a scan
- Engine: Phase-ordered analyzer orchestration
- default_analyzers: Analyzers shipped with the package
"""

import asyncio
from pathlib import Path
from typing import Iterable

import structlog
from pydantic import BaseModel, Field

from depcheck.analyzers import AnalysisError, Analyzer, AutoconfAnalyzer
from depcheck.core.config import Config, load_config
from depcheck.core.dependency import Dependency

logger = structlog.get_logger()


class ScanResult(BaseModel):
    """Outcome of a scan.

    Attributes:
        dependencies: Every dependency created, in discovery order
        errors: File path -> error message for files whose analysis failed
    """

    dependencies: list[Dependency] = Field(default_factory=list)
    errors: dict[str, str] = Field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return not self.errors


def default_analyzers(config: Config) -> list[Analyzer]:
    """Instantiate the analyzers shipped with the package."""
    return [AutoconfAnalyzer(max_content_chars=config.max_content_chars)]


class Engine:
    """Runs enabled analyzers against discovered files.

    Example:
        >>> engine = Engine()
        >>> result = await engine.scan(["path/to/project"])
        >>> for dep in result.dependencies:
        ...     print(dep.display_name, len(dep.evidence))
    """

    def __init__(
        self,
        config: Config | None = None,
        analyzers: list[Analyzer] | None = None,
    ):
        """Initialize the engine.

        Args:
            config: Settings (loaded from environment if not provided)
            analyzers: Analyzers to consider (default_analyzers if not provided)
        """
        self.config = config or load_config()
        candidates = analyzers if analyzers is not None else default_analyzers(self.config)
        self.analyzers = [
            a for a in candidates if self.config.is_enabled(a.enabled_setting_key)
        ]
        self.log = logger.bind(component="engine")

        for analyzer in candidates:
            if analyzer not in self.analyzers:
                self.log.info("analyzer_disabled", analyzer=analyzer.name)

    def discover(self, paths: Iterable[str | Path]) -> list[Path]:
        """Expand paths into the files at least one enabled analyzer accepts.

        Directories are walked recursively; files are kept in sorted order.
        """
        files: list[Path] = []
        seen: set[Path] = set()
        for raw in paths:
            path = Path(raw)
            if path.is_dir():
                found = sorted(p for p in path.rglob("*") if p.is_file())
            else:
                found = [path]
            for candidate in found:
                key = candidate.resolve()
                if key in seen:
                    continue
                if any(a.accepts(candidate) for a in self.analyzers):
                    seen.add(key)
                    files.append(candidate)
        return files

    async def scan(self, paths: Iterable[str | Path]) -> ScanResult:
        """Scan files and directories for dependency evidence.

        Args:
            paths: Files and/or directories to scan

        Returns:
            ScanResult with dependencies and per-file errors
        """
        files = self.discover(paths)
        self.log.info("scan_start", files=len(files), analyzers=len(self.analyzers))

        result = ScanResult(dependencies=[Dependency(actual_file=f) for f in files])

        for analyzer in sorted(self.analyzers, key=lambda a: a.phase):
            targets = [
                dep for dep in result.dependencies
                if str(dep.actual_file) not in result.errors
                and analyzer.accepts(dep.actual_file)
            ]
            await asyncio.gather(
                *(self._analyze(analyzer, dep, result) for dep in targets)
            )

        self.log.info(
            "scan_complete",
            dependencies=len(result.dependencies),
            errors=len(result.errors),
        )
        return result

    async def _analyze(
        self,
        analyzer: Analyzer,
        dependency: Dependency,
        result: ScanResult,
    ) -> None:
        try:
            await asyncio.to_thread(analyzer.analyze, dependency)
        except AnalysisError as e:
            cause = e.__cause__
            self.log.error(
                "analysis_failed",
                analyzer=analyzer.name,
                file=str(dependency.actual_file),
                error=str(e),
                cause=str(cause) if cause else None,
            )
            message = f"{e} ({cause})" if cause else str(e)
            result.errors[str(dependency.actual_file)] = message
