"""
Keyword data model shared by the extractor and coverage calculator.
"""
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, NamedTuple


class KeywordCategory(Enum):
    """What a keyword tells the applicant about the role"""
    REQUIRED_SKILL = "required_skill"
    PREFERRED_SKILL = "preferred_skill"
    SOFT_SKILL = "soft_skill"
    EXPERIENCE = "experience"
    EDUCATION = "education"
    VALUES = "values"
    TOOLS = "tools"
    INDUSTRY = "industry"


class KeywordImportance(Enum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"

    @property
    def rank(self) -> int:
        """Sort rank, high first."""
        return IMPORTANCE_RANK[self]


IMPORTANCE_RANK = {
    KeywordImportance.HIGH: 0,
    KeywordImportance.MEDIUM: 1,
    KeywordImportance.LOW: 2,
}


class SectionSpan(NamedTuple):
    """Character offsets of a detected section in a description."""
    start: int
    end: int

    def contains(self, index: int) -> bool:
        return self.start <= index < self.end


@dataclass
class ExtractedKeyword:
    """A dictionary term or requirement phrase found in a description."""
    term: str
    category: KeywordCategory
    importance: KeywordImportance
    frequency: int = 1
    contexts: List[str] = field(default_factory=list)
    addressed: bool = False  # set by the user once covered in their materials

    def to_dict(self) -> Dict:
        return {
            'term': self.term,
            'category': self.category.value,
            'importance': self.importance.value,
            'frequency': self.frequency,
            'contexts': list(self.contexts),
            'addressed': self.addressed,
        }
