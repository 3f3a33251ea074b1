"""Autoconf analyzer for configure.ac package identity evidence.

Matches the AC_INIT macro in configure.ac files and turns its arguments into
vendor, product and version evidence:

    AC_INIT(package, version, [bug-report], [tarname], [url])

Provides:
- AC_INIT_PATTERN: Compiled pattern for the AC_INIT invocation
- find_ac_init: Bounded search for the first AC_INIT invocation
- extract_evidence: Evidence records from configure.ac text
- AutoconfAnalyzer: Analyzer wrapping extract_evidence for dependencies
"""

import re
from pathlib import Path

import structlog

from depcheck.core.dependency import Dependency
from depcheck.core.evidence import Confidence, Evidence, EvidenceType
from depcheck.core.urls import is_url
from .base import AnalysisPhase, file_extension, read_dependency_file

logger = structlog.get_logger()

CONFIGURE_AC = "configure.ac"

# Each PARAM and SEP_PARAM carries one capture group.
PARAM = r"\[{1,2}(.+?)\]{1,2}"
SEP_PARAM = r"\s*,\s*" + PARAM

# Group 1: Package
# Group 2: Version
# Group 3: optional, Group 4: Bug report address
# Group 5: optional, Group 6: Tarname
# Group 7: optional, Group 8: URL
AC_INIT_PATTERN = re.compile(
    rf"AC_INIT\({PARAM}{SEP_PARAM}({SEP_PARAM})?({SEP_PARAM})?({SEP_PARAM})?",
    re.DOTALL | re.IGNORECASE,
)

# Candidate start positions for AC_INIT_PATTERN.
AC_INIT_START = re.compile(r"AC_INIT\(", re.IGNORECASE)

# Longest AC_INIT invocation considered, in characters.
MAX_MACRO_CHARS = 8192

# Failed AC_INIT( occurrences tolerated before giving up on a file.
MAX_MATCH_ATTEMPTS = 64


def find_ac_init(
    contents: str,
    source: str,
    max_macro_chars: int = MAX_MACRO_CHARS,
    max_attempts: int = MAX_MATCH_ATTEMPTS,
) -> re.Match | None:
    """Find the first AC_INIT invocation in contents.

    Each AC_INIT( occurrence is tried in order, with the match limited to the
    next max_macro_chars characters. Bounding both the window and the number
    of attempts keeps the cost linear in the input size.

    Args:
        contents: Text to search
        source: File name, for logging
        max_macro_chars: Longest invocation considered
        max_attempts: Occurrences tried before giving up

    Returns:
        Match object with the AC_INIT_PATTERN groups, or None
    """
    for attempt, start in enumerate(AC_INIT_START.finditer(contents)):
        if attempt >= max_attempts:
            logger.warning(
                "autoconf_attempts_exhausted",
                source=source,
                max_attempts=max_attempts,
            )
            return None
        end = min(len(contents), start.start() + max_macro_chars)
        match = AC_INIT_PATTERN.match(contents, start.start(), end)
        if match is not None:
            return match
    return None


def extract_evidence(
    contents: str,
    source: str,
    max_chars: int = 0,
) -> list[Evidence]:
    """Extract package identity evidence from configure.ac text.

    Only the first AC_INIT invocation in the text is used. An invocation longer
    than MAX_MACRO_CHARS is not recognized. Package and version
    are HIGHEST confidence; bug report address, tarname and URL are HIGH and
    only emitted when the argument is present. A URL argument that does not
    look like a URL is dropped.

    Args:
        contents: File contents
        source: File name the evidence is attributed to
        max_chars: If positive, only the first max_chars characters are searched

    Returns:
        Evidence records in argument order (empty if nothing matched)

    Example:
        >>> records = extract_evidence("AC_INIT([hello], [2.12])", "configure.ac")
        >>> [(r.name, r.value) for r in records]
        [('Package', 'hello'), ('Package Version', '2.12')]
    """
    contents = contents.strip()
    if not contents:
        return []

    if max_chars > 0 and len(contents) > max_chars:
        logger.warning(
            "content_truncated",
            source=source,
            length=len(contents),
            max_chars=max_chars,
        )
        contents = contents[:max_chars]

    match = find_ac_init(contents, source)
    if match is None:
        logger.debug("autoconf_no_match", source=source)
        return []

    def record(evidence_type: EvidenceType, name: str, value: str, confidence: Confidence) -> Evidence:
        return Evidence(
            evidence_type=evidence_type,
            source=source,
            name=name,
            value=value,
            confidence=confidence,
        )

    evidence = [
        record(EvidenceType.PRODUCT, "Package", match.group(1), Confidence.HIGHEST),
        record(EvidenceType.VERSION, "Package Version", match.group(2), Confidence.HIGHEST),
    ]
    if match.group(3) is not None:
        evidence.append(
            record(EvidenceType.VENDOR, "Bug report address", match.group(4), Confidence.HIGH)
        )
    if match.group(5) is not None:
        evidence.append(
            record(EvidenceType.PRODUCT, "Tarname", match.group(6), Confidence.HIGH)
        )
    if match.group(7) is not None:
        url = match.group(8)
        if is_url(url):
            evidence.append(record(EvidenceType.VENDOR, "URL", url, Confidence.HIGH))
        else:
            logger.debug("autoconf_url_rejected", source=source, url=url[:100])

    logger.debug("autoconf_match", source=source, fields=len(evidence))
    return evidence


class AutoconfAnalyzer:
    """Analyzer for GNU Autoconf configure.ac files.

    Registered for the "ac" extension, but only files literally named
    configure.ac are analyzed; other .ac files yield no evidence.
    """

    name = "Autoconf Analyzer"
    phase = AnalysisPhase.INFORMATION_COLLECTION
    enabled_setting_key = "autoconf_analyzer_enabled"
    EXTENSIONS = frozenset({"ac"})

    def __init__(self, max_content_chars: int = 0):
        """Initialize the Autoconf analyzer.

        Args:
            max_content_chars: Search bound passed to extract_evidence (0 = none)
        """
        self.max_content_chars = max_content_chars
        self.log = logger.bind(analyzer=self.name)

    def supported_extensions(self) -> frozenset[str]:
        return self.EXTENSIONS

    def accepts(self, path: Path) -> bool:
        return path.name == CONFIGURE_AC or file_extension(path) in self.EXTENSIONS

    def analyze(self, dependency: Dependency) -> list[Evidence]:
        """Collect AC_INIT evidence from a configure.ac dependency.

        Sets the display name to "<parent directory>/configure.ac", reads the
        file and adds each extracted record to the dependency.

        Args:
            dependency: Dependency whose actual_file is the configure.ac

        Returns:
            The evidence records added, in argument order

        Raises:
            AnalysisError: If the file cannot be read
        """
        actual_file = dependency.actual_file
        name = actual_file.name
        if name != CONFIGURE_AC:
            return []

        dependency.display_file_name = f"{actual_file.resolve().parent.name}/{name}"
        contents = read_dependency_file(actual_file).strip()

        evidence = extract_evidence(contents, name, max_chars=self.max_content_chars)
        for item in evidence:
            dependency.add_evidence(item)

        self.log.info(
            "autoconf_analyzed",
            file=str(actual_file),
            evidence=len(evidence),
        )
        return evidence
