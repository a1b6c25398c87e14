"""
Keyword analysis for job descriptions.

Extracts categorized, ranked keywords from description text and tracks
how many of them an applicant has addressed.
"""

from .coverage import CategoryCoverage, CoverageSummary, compute_coverage, group_keywords_by_category
from .dictionary import DEFAULT_DICTIONARY, KeywordDictionary, load_dictionary
from .extractor import KeywordExtractor, extract_keywords
from .models import ExtractedKeyword, KeywordCategory, KeywordImportance, SectionSpan
from .sections import find_section

__all__ = [
    'CategoryCoverage',
    'CoverageSummary',
    'DEFAULT_DICTIONARY',
    'ExtractedKeyword',
    'KeywordCategory',
    'KeywordDictionary',
    'KeywordExtractor',
    'KeywordImportance',
    'SectionSpan',
    'compute_coverage',
    'extract_keywords',
    'find_section',
    'group_keywords_by_category',
    'load_dictionary',
]
