"""
Extraction result model.
"""

from dataclasses import asdict, dataclass, field, replace
from datetime import datetime, timezone
from typing import Dict, Optional

from core.confidence import confidence_label


def utc_timestamp() -> str:
    """Current UTC time as ISO-8601 with a Z suffix."""
    return datetime.now(timezone.utc).replace(tzinfo=None).isoformat() + "Z"


@dataclass(frozen=True)
class ExtractionResult:
    """Structured record extracted from one job posting page."""
    title: Optional[str] = None
    company: Optional[str] = None
    company_logo_url: Optional[str] = None
    location: Optional[str] = None
    salary: Optional[str] = None
    description: Optional[str] = None
    source_url: str = ''
    extracted_at: str = field(default_factory=utc_timestamp)
    source_parser_name: str = ''
    confidence: float = 0.0

    @property
    def confidence_label(self) -> str:
        return confidence_label(self.confidence)

    def with_changes(self, **changes) -> 'ExtractionResult':
        return replace(self, **changes)

    def to_dict(self) -> Dict:
        """Convert to a JSON-safe dictionary."""
        return asdict(self)

    @classmethod
    def empty(cls, url: str, parser_name: str) -> 'ExtractionResult':
        """Result with no fields and zero confidence."""
        return cls(source_url=url, source_parser_name=parser_name, confidence=0.0)
