"""
Coverage calculator.

Summarizes how many extracted keywords the user has marked as addressed,
overall and per category. Every category is always present so consumers
can render a stable list.
"""
import math
from dataclasses import dataclass, field
from typing import Dict, Iterable, List

from .models import ExtractedKeyword, KeywordCategory


@dataclass
class CategoryCoverage:
    total: int = 0
    addressed: int = 0

    def to_dict(self) -> Dict:
        return {'total': self.total, 'addressed': self.addressed}


@dataclass
class CoverageSummary:
    """Addressed-vs-total keyword counts."""
    total: int = 0
    addressed: int = 0
    percentage: int = 0
    by_category: Dict[KeywordCategory, CategoryCoverage] = field(default_factory=dict)

    def to_dict(self) -> Dict:
        return {
            'total': self.total,
            'addressed': self.addressed,
            'percentage': self.percentage,
            'by_category': {
                category.value: counts.to_dict()
                for category, counts in self.by_category.items()
            },
        }


def _percentage(addressed: int, total: int) -> int:
    if total <= 0:
        return 0
    # Halves round up (12.5 -> 13), unlike round()
    return int(math.floor(addressed * 100 / total + 0.5))


def compute_coverage(keywords: Iterable[ExtractedKeyword]) -> CoverageSummary:
    """Count total and addressed keywords, overall and per category."""
    by_category = {category: CategoryCoverage() for category in KeywordCategory}
    total = 0
    addressed = 0

    for keyword in keywords:
        total += 1
        by_category[keyword.category].total += 1
        if keyword.addressed:
            addressed += 1
            by_category[keyword.category].addressed += 1

    return CoverageSummary(
        total=total,
        addressed=addressed,
        percentage=_percentage(addressed, total),
        by_category=by_category,
    )


def group_keywords_by_category(
    keywords: Iterable[ExtractedKeyword]
) -> Dict[KeywordCategory, List[ExtractedKeyword]]:
    """Bucket keywords by category, keeping their order. All categories are present."""
    grouped = {category: [] for category in KeywordCategory}
    for keyword in keywords:
        grouped[keyword.category].append(keyword)
    return grouped
