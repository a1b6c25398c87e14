"""
Section detector.

Locates the "required" and "preferred" qualification blocks of a job
description. Spans are only used to classify technical terms; a missing
span means the term cannot be placed in that section.
"""
import re
import logging
from typing import List, Optional

from .models import SectionSpan

logger = logging.getLogger(__name__)

REQUIRED = 'required'
PREFERRED = 'preferred'

# Header phrases, matched case-insensitively in this order
SECTION_HEADERS = {
    REQUIRED: [
        r'required\s*(?:skills|qualifications|requirements)',
        r'must\s*have',
        r'minimum\s*qualifications',
        r'basic\s*qualifications',
        r"what\s+you['’]?ll\s+need",
        r'requirements:',
    ],
    PREFERRED: [
        r'preferred\s*(?:skills|qualifications)',
        r'nice\s*to\s*have',
        r'bonus\s*(?:points|skills|qualifications)',
        r'preferred:',
        r'plus\s*if\s+you\s+have',
        r'additional\s*(?:skills|qualifications)',
    ],
}

# Keywords that open an unrelated section when they start a line
GENERIC_SECTION_RE = re.compile(
    r'\n\s*(?:about|responsibilities|what\s+you|requirements|qualifications|benefits|perks|who\s+you)',
    re.IGNORECASE,
)

# A line holding only a "Title Case Header:" (case-sensitive)
TITLE_CASE_HEADER_RE = re.compile(r'^[ \t]*[A-Z][a-z]+(?:[ \t]+[A-Za-z][a-z]*)*[ \t]*:[ \t]*$', re.MULTILINE)


def _compile_headers(kind: str) -> List[re.Pattern]:
    return [re.compile(p, re.IGNORECASE) for p in SECTION_HEADERS[kind]]


HEADER_PATTERNS = {kind: _compile_headers(kind) for kind in SECTION_HEADERS}
ALL_HEADER_PATTERNS = HEADER_PATTERNS[REQUIRED] + HEADER_PATTERNS[PREFERRED]


def _section_end(text: str, start: int) -> int:
    """Offset where the section opened at `start` stops."""
    end = len(text)

    for pattern in ALL_HEADER_PATTERNS:
        match = pattern.search(text, start)
        if match and match.start() < end:
            end = match.start()

    match = GENERIC_SECTION_RE.search(text, start)
    if match and match.start() < end:
        end = match.start()

    match = TITLE_CASE_HEADER_RE.search(text, start)
    if match and match.start() < end:
        end = match.start()

    return end


def find_section(text: Optional[str], kind: str) -> Optional[SectionSpan]:
    """
    Find the span of the first `kind` section ('required' or 'preferred').

    The span starts right after the header phrase and runs until the next
    recognized header, a line starting a generic section, a Title Case
    "Header:" line, or the end of the text.

    Raises:
        ValueError: if kind is not 'required' or 'preferred'
    """
    if kind not in HEADER_PATTERNS:
        raise ValueError(f"Unknown section kind: {kind!r} (expected 'required' or 'preferred')")

    if not text:
        return None

    for pattern in HEADER_PATTERNS[kind]:
        match = pattern.search(text)
        if match:
            start = match.end()
            span = SectionSpan(start, _section_end(text, start))
            logger.debug(f"Found {kind} section at {span.start}-{span.end} via '{pattern.pattern}'")
            return span

    return None
