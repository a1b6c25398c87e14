"""
Lever parser.
"""
from typing import Optional

from core.cleaners import clean_text, extract_company_from_url
from core.page import Page

from .base import ParsedFields, SiteParser

TITLE_SELECTORS = [
    '[data-qa="posting-name"]',
    '.posting-headline h2',
    '.posting-headline [class*="title"]',
    'h1[class*="posting"]',
    'h2[class*="posting"]',
    'main h1',
    'main h2',
    'h1',
]

COMPANY_IMAGE_ALT_SELECTORS = [
    '.main-header-logo img',
    'header img',
    '[class*="logo"] img',
]

LOCATION_SELECTORS = [
    '[data-qa="posting-location"]',
    '.posting-categories .location',
    '.posting-category.location',
    '[class*="location"]',
    '.workplaceTypes',
]

COMMITMENT_SELECTORS = [
    '.posting-categories .commitment',
    '.posting-category.commitment',
    '[class*="commitment"]',
    '.workplaceTypes',
]

TEAM_SELECTORS = [
    '.posting-categories .team',
    '.posting-category.team',
    '[class*="department"]',
]

DESCRIPTION_SELECTORS = [
    '[data-qa="job-description"]',
    '.posting-description',
    '.section-wrapper.page-full-width',
    'main article',
    '.content',
]


class LeverParser(SiteParser):
    """Parser for jobs.lever.co postings"""

    logo_selectors = [
        '.main-header-logo img',
        'header img[src*="logo"]',
        '[class*="header"] img',
    ]

    def __init__(self):
        super().__init__(name='lever', domains=['lever.co'])

    def detect(self, url: str, page: Optional[Page] = None) -> bool:
        return self.host_matches(url)

    def extract_fields(self, page: Page, url: str) -> ParsedFields:
        jsonld = self.structured_data(page)

        company = (
            jsonld['company'] or
            page.meta('og:site_name') or
            page.select_first_attr(COMPANY_IMAGE_ALT_SELECTORS, 'alt') or
            extract_company_from_url(url)
        )

        # "San Francisco (Full-time, Engineering)"
        location = clean_text(jsonld['location'] or page.select_first(LOCATION_SELECTORS))
        extras = [
            clean_text(page.select_first(COMMITMENT_SELECTORS)),
            clean_text(page.select_first(TEAM_SELECTORS)),
        ]
        extra_info = ', '.join(e for e in extras if e)
        if extra_info and location:
            location = f"{location} ({extra_info})"
        elif extra_info:
            location = extra_info

        return ParsedFields(
            title=jsonld['title'] or page.select_first(TITLE_SELECTORS),
            company=company,
            location=location,
            # Lever rarely publishes pay
            salary=jsonld['salary'],
            description=jsonld['description'] or page.select_first(DESCRIPTION_SELECTORS),
            confidence_multiplier=1.0 if jsonld['title'] else 0.9,
        )
