"""Core scanner functionality.

Provides:
- Configuration loaded from environment
- Evidence records with confidence classification
- Dependency records that evidence is attached to
- URL shape checks
"""

from .config import Config, load_config
from .dependency import Dependency
from .evidence import Confidence, Evidence, EvidenceType, format_evidence_list
from .urls import is_url

__all__ = [
    "Config",
    "load_config",
    "Dependency",
    "Confidence",
    "Evidence",
    "EvidenceType",
    "format_evidence_list",
    "is_url",
]
