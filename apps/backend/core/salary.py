"""
Salary scanner.

Regex matcher for currency ranges and amounts. Targeted elements are tried
first; the page-wide scan is bounded to the start of the visible text.
"""

import re
import logging
from typing import Iterable, Optional

from .page import Page
from .settings import get_settings

logger = logging.getLogger(__name__)

DASH = r'[-–—]'
PERIOD = r'(?:hr|hour|yr|year|mo|month|week|wk|annual|annually)'

# Ordered from most to least specific
SALARY_PATTERNS = [
    # $100,000 - $150,000 (per year)
    re.compile(rf'\$[\d,]+\s*{DASH}\s*\$[\d,]+(?:\s*(?:per\s+)?(?:year|yr|annually|hour|hr))?', re.IGNORECASE),
    # $100K - $150K
    re.compile(rf'\$[\d,]+\s*[kK]\s*{DASH}\s*\$?[\d,]+\s*[kK]?'),
    # £50,000 - £60,000 / €50k - €60k
    re.compile(rf'[£€][\d,.]+\s*[kK]?\s*{DASH}\s*[£€]?[\d,.]+\s*[kK]?'),
    # $100,000/year
    re.compile(rf'\$[\d,]+(?:\.\d{{2}})?\s*(?:/\s*{PERIOD})', re.IGNORECASE),
    # 100,000 - 150,000 USD
    re.compile(rf'[\d,]+\s*{DASH}\s*[\d,]+\s*(?:USD|CAD|EUR|GBP|AUD)', re.IGNORECASE),
    # $150,000
    re.compile(r'\$[\d,]+(?:\.\d{2})?'),
]

DIGIT_RE = re.compile(r'\d')

# Elements that commonly hold pay information
SALARY_CANDIDATE_SELECTORS = [
    '[class*="salary"]',
    '[class*="Salary"]',
    '[class*="compensation"]',
    '[class*="Compensation"]',
    '[class*="pay-"]',
    '[class*="Pay"]',
    '[data-testid*="salary"]',
    '[data-automation-id*="salary"]',
]


def extract_salary_from_text(text: Optional[str]) -> Optional[str]:
    """Return the first salary-looking substring of text."""
    if not text:
        return None
    for pattern in SALARY_PATTERNS:
        match = pattern.search(text)
        if match:
            salary = match.group(0).strip()
            if DIGIT_RE.search(salary):
                return salary
    return None


def extract_salary_from_page(page: Page) -> Optional[str]:
    """Search elements whose class/test id suggests pay information."""
    for selector in SALARY_CANDIDATE_SELECTORS:
        salary = extract_salary_from_text(page.select_text(selector))
        if salary:
            return salary
    return None


def extract_salary(page: Page, selectors: Iterable[str]) -> Optional[str]:
    """Try targeted selectors first, then common salary elements."""
    for selector in selectors:
        salary = extract_salary_from_text(page.select_text(selector))
        if salary:
            return salary
    return extract_salary_from_page(page)


def scan_page_for_salary(page: Page, limit: Optional[int] = None) -> Optional[str]:
    """
    Last-resort scan over the page's visible text.

    Only the first `limit` characters are searched (default from settings),
    where pay details are most likely to be relevant.
    """
    if limit is None:
        limit = get_settings().salary_scan_chars
    try:
        text = page.text
    except Exception as e:
        logger.debug(f"Could not read page text for salary scan: {e}")
        return None
    return extract_salary_from_text(text[:limit])
