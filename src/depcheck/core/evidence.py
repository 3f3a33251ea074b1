"""Evidence records with confidence classification.

Every piece of evidence collected about a dependency is tagged with the file
it came from, the field it describes and how much it can be trusted. The
downstream identification step scores candidates by these exact field names
and confidence levels.

Provides:
- Confidence: Enum for evidence confidence levels
- EvidenceType: Enum for the vendor/product/version evidence collections
- Evidence: Single piece of evidence with source attribution
- format_evidence_list: Format a list of evidence items
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict


class Confidence(str, Enum):
    """Confidence level for evidence.

    HIGHEST: The value is the declared identity of the package
    HIGH: Strong indicator taken from a declared, optional field
    MEDIUM: Plausible but indirect indicator
    LOW: Weak indicator
    """

    HIGHEST = "highest"
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class EvidenceType(str, Enum):
    """Which evidence collection of a dependency a record belongs to."""

    VENDOR = "vendor"
    PRODUCT = "product"
    VERSION = "version"


class Evidence(BaseModel):
    """Single piece of evidence with source attribution.

    Attributes:
        evidence_type: Collection the evidence belongs to
        source: Name of the file the evidence was taken from
        name: Field name (e.g., "Package", "Package Version")
        value: Extracted value
        confidence: How much the value can be trusted
    """

    model_config = ConfigDict(frozen=True)

    evidence_type: EvidenceType
    source: str
    name: str
    value: str
    confidence: Confidence


def format_evidence_list(evidence_list: list[Evidence]) -> str:
    """Format list of evidence items with type markers.

    Args:
        evidence_list: List of evidence items to format

    Returns:
        Formatted string with numbered evidence items
    """
    lines = []
    for idx, evidence in enumerate(evidence_list, 1):
        lines.append(
            f"{idx}. [{evidence.evidence_type.value.upper()}] "
            f"{evidence.name}: {evidence.value} "
            f"({evidence.confidence.value.upper()}, {evidence.source})"
        )
    return "\n".join(lines)
