"""
Greenhouse parser.

Greenhouse boards render with generated class names, so structured data,
data attributes and semantic HTML are preferred over classes. Embedded
boards on company sites are recognized by the gh_jid query parameter.
"""
from typing import Optional
from urllib.parse import parse_qs, urlparse

from core.cleaners import extract_company_from_url
from core.page import Page
from pipeline.heuristics import HeuristicExtractor

from .base import ParsedFields, SiteParser

TITLE_SELECTORS = [
    'h1[class*="title"]',
    'h1[class*="Title"]',
    '[data-test*="title"]',
    '[data-testid*="title"]',
    '[data-automation-id*="title"]',
    '.app-title',
    '.posting-headline h1',
    'main h1',
    'article h1',
    '#app h1',
    'h1',
]

COMPANY_SELECTORS = [
    '[class*="company-name"]',
    '[class*="companyName"]',
    '[data-test*="company"]',
]

COMPANY_IMAGE_ALT_SELECTORS = [
    'a[href*="/company"] img[alt]',
    'header img',
    '[class*="logo"] img',
]

LOCATION_SELECTORS = [
    '[data-test*="location"]',
    '[data-testid*="location"]',
    '[class*="location"]',
    '[class*="Location"]',
    '.job-location',
    '.posting-categories .location',
]

SALARY_SELECTORS = [
    '[class*="salary"]',
    '[class*="Salary"]',
    '[class*="compensation"]',
    '[data-test*="salary"]',
]

DESCRIPTION_SELECTORS = [
    '#grnhse_app',
    '[id*="greenhouse"]',
    '[class*="greenhouse"]',
    '[data-test*="description"]',
    '[data-testid*="description"]',
    '[class*="job-description"]',
    '[class*="jobDescription"]',
    '[class*="job_description"]',
    '[class*="posting-description"]',
    '.section-wrapper',
    '[class*="responsibilities"]',
    '[class*="requirements"]',
    '#content',
    '#job-details',
    'main article',
    'article',
    'main',
    '.content',
]


class GreenhouseParser(SiteParser):
    """Parser for Greenhouse-hosted and embedded job boards"""

    logo_selectors = [
        'header img[src*="logo"]',
        '[class*="logo"] img',
        'img[alt*="logo" i]',
    ]

    def __init__(self):
        super().__init__(
            name='greenhouse',
            domains=['greenhouse.io'],
        )
        self.heuristics = HeuristicExtractor()

    def detect(self, url: str, page: Optional[Page] = None) -> bool:
        if self.host_matches(url):
            return True
        try:
            parts = urlparse(url)
        except ValueError:
            return False
        return 'gh_jid' in parse_qs(parts.query) or 'gh_jid/' in parts.path

    def extract_fields(self, page: Page, url: str) -> ParsedFields:
        jsonld = self.structured_data(page)

        company = (
            jsonld['company'] or
            page.meta('og:site_name') or
            page.meta('author') or
            page.select_first(COMPANY_SELECTORS) or
            page.select_first_attr(COMPANY_IMAGE_ALT_SELECTORS, 'alt') or
            extract_company_from_url(url)
        )

        description = (
            jsonld['description'] or
            page.select_first(DESCRIPTION_SELECTORS) or
            self.lookup('description', self.heuristics.best_content_block, page)
        )

        return ParsedFields(
            title=jsonld['title'] or page.select_first(TITLE_SELECTORS),
            company=company,
            location=jsonld['location'] or page.select_first(LOCATION_SELECTORS),
            salary=jsonld['salary'] or page.select_first(SALARY_SELECTORS),
            description=description,
            confidence_multiplier=1.0 if jsonld['title'] else 0.9,
        )
