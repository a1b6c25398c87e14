"""
Confidence scoring for extraction results.

Each field contributes weighted points by presence and length; the total is
normalized by the maximum attainable points.
"""

from dataclasses import dataclass
from typing import Optional

# Maximum points per field
FIELD_WEIGHTS = {
    'title': 3,
    'company': 2,
    'description': 2,
    'location': 1,
    'salary': 1,
}

MAX_POINTS = sum(FIELD_WEIGHTS.values())

HIGH_CONFIDENCE = 0.8
MEDIUM_CONFIDENCE = 0.5


@dataclass(frozen=True)
class ConfidenceFactors:
    """The fields of a result that feed the confidence score."""
    title: Optional[str] = None
    company: Optional[str] = None
    description: Optional[str] = None
    location: Optional[str] = None
    salary: Optional[str] = None

    @classmethod
    def from_result(cls, result) -> 'ConfidenceFactors':
        return cls(
            title=result.title,
            company=result.company,
            description=result.description,
            location=result.location,
            salary=result.salary,
        )


def _length(value: Optional[str]) -> int:
    return len(value) if value else 0


def calculate_confidence(factors: ConfidenceFactors) -> float:
    """
    Score how reliable an extraction is, between 0 and 1.

    Title: 3 points if longer than 3 chars, else 1 if non-empty.
    Company: 2 points if longer than 1 char, else 1 if present.
    Description: 2 points if longer than 100 chars, 1 if longer than 20.
    Location: 1 point if longer than 2 chars.
    Salary: 1 point if present.
    """
    score = 0

    title = _length(factors.title)
    if title > 3:
        score += 3
    elif title > 0:
        score += 1

    company = _length(factors.company)
    if company > 1:
        score += 2
    elif company > 0:
        score += 1

    description = _length(factors.description)
    if description > 100:
        score += 2
    elif description > 20:
        score += 1

    if _length(factors.location) > 2:
        score += 1

    if factors.salary:
        score += 1

    return round(score / MAX_POINTS, 2)


def confidence_label(confidence: float) -> str:
    """Human-readable label for a confidence score."""
    if confidence >= HIGH_CONFIDENCE:
        return 'High'
    if confidence >= MEDIUM_CONFIDENCE:
        return 'Medium'
    return 'Low'
