"""
Keyword extractor.

Scans a job description against the keyword dictionary and the
experience/education pattern sets. Each term is reported once with its
frequency, up to three context snippets, an importance rating and a
category.
"""
import re
import logging
from typing import List, Optional, Set

from .dictionary import KeywordDictionary, get_dictionary
from .models import (
    ExtractedKeyword,
    KeywordCategory,
    KeywordImportance,
    SectionSpan,
)
from .sections import PREFERRED, REQUIRED, find_section

logger = logging.getLogger(__name__)

MAX_CONTEXTS = 3
CONTEXT_RADIUS = 50
MIN_PATTERN_MATCH_LENGTH = 3

HIGH_FREQUENCY = 3
MEDIUM_FREQUENCY = 2

WHITESPACE_RE = re.compile(r'\s+')
FIRST_SENTENCE_RE = re.compile(r"^[^.!?]*")
EMPHASIS_RE = re.compile(r'\*\*[^*]+\*\*')


def term_pattern(term: str) -> re.Pattern:
    """
    Case-insensitive matcher for a literal term.

    Bounded by non-word characters rather than \\b so terms ending in
    symbols ("c++", "c#", ".net") still match.
    """
    return re.compile(rf'(?<!\w){re.escape(term)}(?!\w)', re.IGNORECASE)


def _prominence_pattern(term: str) -> re.Pattern:
    # Term mentioned later in the same sentence as a requirement marker
    return re.compile(
        rf'(?:required|must have|essential)[^.]*(?<!\w){re.escape(term)}(?!\w)',
        re.IGNORECASE,
    )


def get_context(text: str, index: int) -> str:
    """Snippet of CONTEXT_RADIUS chars either side of index, with ellipses where cut."""
    left = max(0, index - CONTEXT_RADIUS)
    right = min(len(text), index + CONTEXT_RADIUS)

    snippet = WHITESPACE_RE.sub(' ', text[left:right]).strip()
    if left > 0:
        snippet = '...' + snippet
    if right < len(text):
        snippet = snippet + '...'
    return snippet


def _display_term(matches: List[re.Match], fallback: str) -> str:
    """Casing for display: first occurrence not written in all caps, else the first one."""
    for match in matches:
        found = match.group(0)
        if not found.isupper():
            return found
    return matches[0].group(0) if matches else fallback


class KeywordExtractor:
    """Extracts categorized keywords from job descriptions."""

    def __init__(self, dictionary: Optional[KeywordDictionary] = None):
        self.dictionary = dictionary or get_dictionary()

    def extract(self, description: Optional[str]) -> List[ExtractedKeyword]:
        """
        Extract keywords from a description.

        Returns an empty list for blank input. Unexpected faults are logged
        and also produce an empty list.
        """
        if not description or not description.strip():
            return []

        try:
            return self._extract(description)
        except Exception as e:
            logger.error(f"Keyword extraction failed: {e}", exc_info=True)
            return []

    def _extract(self, text: str) -> List[ExtractedKeyword]:
        required_span = find_section(text, REQUIRED)
        preferred_span = find_section(text, PREFERRED)

        first_sentence = FIRST_SENTENCE_RE.match(text)
        first_sentence_end = first_sentence.end() if first_sentence else 0
        emphasis_spans = [SectionSpan(m.start(), m.end()) for m in EMPHASIS_RE.finditer(text)]

        keywords: List[ExtractedKeyword] = []
        seen: Set[str] = set()

        for category, terms in self.dictionary.term_buckets():
            for term in terms:
                normalized = term.lower()
                if normalized in seen:
                    continue

                matches = list(term_pattern(term).finditer(text))
                if not matches:
                    continue
                seen.add(normalized)

                keywords.append(ExtractedKeyword(
                    term=_display_term(matches, term),
                    category=category or self._skill_category(matches, required_span, preferred_span),
                    importance=self._importance(term, matches, text, first_sentence_end, emphasis_spans),
                    frequency=len(matches),
                    contexts=self._contexts(text, matches),
                ))

        keywords.extend(self._pattern_keywords(
            text, self.dictionary.experience_patterns,
            KeywordCategory.EXPERIENCE, KeywordImportance.HIGH, seen,
        ))
        keywords.extend(self._pattern_keywords(
            text, self.dictionary.education_patterns,
            KeywordCategory.EDUCATION, KeywordImportance.MEDIUM, seen,
        ))

        # sorted() is stable: ties keep dictionary order
        keywords = sorted(keywords, key=lambda k: (k.importance.rank, -k.frequency))

        logger.debug(f"Extracted {len(keywords)} keywords from {len(text)} chars")
        return keywords

    def _contexts(self, text: str, matches: List[re.Match]) -> List[str]:
        contexts = []
        for match in matches:
            snippet = get_context(text, match.start())
            if snippet not in contexts:
                contexts.append(snippet)
            if len(contexts) >= MAX_CONTEXTS:
                break
        return contexts

    def _importance(
        self,
        term: str,
        matches: List[re.Match],
        text: str,
        first_sentence_end: int,
        emphasis_spans: List[SectionSpan],
    ) -> KeywordImportance:
        frequency = len(matches)
        if frequency >= HIGH_FREQUENCY:
            return KeywordImportance.HIGH

        if _prominence_pattern(term).search(text):
            return KeywordImportance.HIGH

        if any(m.start() < first_sentence_end for m in matches):
            return KeywordImportance.HIGH

        if any(span.contains(m.start()) for span in emphasis_spans for m in matches):
            return KeywordImportance.HIGH

        if frequency >= MEDIUM_FREQUENCY:
            return KeywordImportance.MEDIUM
        return KeywordImportance.LOW

    def _skill_category(
        self,
        matches: List[re.Match],
        required_span: Optional[SectionSpan],
        preferred_span: Optional[SectionSpan],
    ) -> KeywordCategory:
        if required_span and any(required_span.contains(m.start()) for m in matches):
            return KeywordCategory.REQUIRED_SKILL
        if preferred_span and any(preferred_span.contains(m.start()) for m in matches):
            return KeywordCategory.PREFERRED_SKILL
        # Outside both sections the skill is treated as required
        return KeywordCategory.REQUIRED_SKILL

    def _pattern_keywords(
        self,
        text: str,
        patterns,
        category: KeywordCategory,
        importance: KeywordImportance,
        seen: Set[str],
    ) -> List[ExtractedKeyword]:
        keywords = []
        for pattern in patterns:
            for match in pattern.finditer(text):
                term = WHITESPACE_RE.sub(' ', match.group(0)).strip()
                normalized = term.lower()
                if len(term) < MIN_PATTERN_MATCH_LENGTH or normalized in seen:
                    continue
                seen.add(normalized)
                keywords.append(ExtractedKeyword(
                    term=term,
                    category=category,
                    importance=importance,
                    frequency=1,
                    contexts=[get_context(text, match.start())],
                ))
        return keywords


def extract_keywords(
    description: Optional[str],
    dictionary: Optional[KeywordDictionary] = None
) -> List[ExtractedKeyword]:
    """Extract keywords from a job description. Never raises."""
    return KeywordExtractor(dictionary).extract(description)
