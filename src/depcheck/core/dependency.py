"""Dependency record that analyzers attach evidence to.

Provides:
- Dependency: A scanned file together with the evidence collected about it
"""

from pathlib import Path

from pydantic import BaseModel, Field

from depcheck.core.evidence import Confidence, Evidence, EvidenceType


class Dependency(BaseModel):
    """A file under analysis and its collected evidence.

    Evidence is kept in insertion order; adding a record equal to one already
    present is a no-op.

    Attributes:
        actual_file: Path of the file on disk
        display_file_name: Label shown in reports instead of the bare file name
        evidence: All evidence collected so far
    """

    actual_file: Path
    display_file_name: str | None = None
    evidence: list[Evidence] = Field(default_factory=list)

    @property
    def file_name(self) -> str:
        return self.actual_file.name

    @property
    def display_name(self) -> str:
        return self.display_file_name or self.file_name

    def add_evidence(self, evidence: Evidence) -> None:
        """Add evidence unless an identical record is already present.

        Args:
            evidence: Evidence record to add
        """
        if evidence not in self.evidence:
            self.evidence.append(evidence)

    def get_evidence(self, evidence_type: EvidenceType) -> list[Evidence]:
        """Return the evidence of one collection, in insertion order."""
        return [e for e in self.evidence if e.evidence_type == evidence_type]

    @property
    def vendor_evidence(self) -> list[Evidence]:
        return self.get_evidence(EvidenceType.VENDOR)

    @property
    def product_evidence(self) -> list[Evidence]:
        return self.get_evidence(EvidenceType.PRODUCT)

    @property
    def version_evidence(self) -> list[Evidence]:
        return self.get_evidence(EvidenceType.VERSION)

    def highest_confidence(self) -> Confidence | None:
        """Best confidence level among the collected evidence, if any."""
        order = [Confidence.HIGHEST, Confidence.HIGH, Confidence.MEDIUM, Confidence.LOW]
        for level in order:
            if any(e.confidence == level for e in self.evidence):
                return level
        return None
