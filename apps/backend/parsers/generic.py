"""
Generic extraction parser.

Provides fallback extraction for sites without a dedicated parser by merging
six strategies, most trusted first:
1. JSON-LD structured data
2. Common CSS selector patterns
3. Heading keyword heuristics (title only)
4. Meta tags (OpenGraph, Twitter, standard)
5. Page title parsing
6. Full-page salary scan
"""
from typing import Dict, Optional

from core.cleaners import extract_company_from_url
from core.page import Page
from core.salary import scan_page_for_salary
from pipeline.heuristics import HeuristicExtractor

from .base import ParsedFields, SiteParser

# Confidence multipliers: heuristic extraction is trusted less than
# dedicated parsers, structured data less so
STRUCTURED_TITLE_PENALTY = 0.85
HEURISTIC_TITLE_PENALTY = 0.70

TITLE_SELECTORS = [
    '[class*="job-title"]',
    '[class*="jobTitle"]',
    '[class*="job_title"]',
    '[class*="position-title"]',
    '[class*="positionTitle"]',
    '[class*="posting-title"]',
    '[class*="vacancy-title"]',
    '[class*="role-title"]',
    '[data-testid*="title"]',
    '[data-automation-id*="title"]',
    '[data-qa*="title"]',
    '#job-title',
    '#jobTitle',
    '#position-title',
    '[aria-label*="job title" i]',
    'main h1',
    'article h1',
    '.content h1',
    'h1',
]

COMPANY_SELECTORS = [
    '[class*="company-name"]',
    '[class*="companyName"]',
    '[class*="company_name"]',
    '[class*="employer-name"]',
    '[class*="employerName"]',
    '[class*="organization-name"]',
    '[class*="hiring-company"]',
    '[data-testid*="company"]',
    '[data-testid*="employer"]',
    '[data-automation-id*="company"]',
    '#company-name',
    '#companyName',
    '[aria-label*="company" i]',
]

LOCATION_SELECTORS = [
    '[class*="job-location"]',
    '[class*="jobLocation"]',
    '[class*="job_location"]',
    '[class*="work-location"]',
    '[class*="position-location"]',
    '[class*="location"]',
    '[data-testid*="location"]',
    '[data-automation-id*="location"]',
    '#job-location',
    '#location',
    'address',
    '[aria-label*="location" i]',
]

SALARY_SELECTORS = [
    '[class*="salary"]',
    '[class*="Salary"]',
    '[class*="compensation"]',
    '[class*="Compensation"]',
    '[class*="pay-range"]',
    '[class*="payRange"]',
    '[data-testid*="salary"]',
    '[data-testid*="compensation"]',
    '#salary',
    '#compensation',
]

META_TITLE_KEYS = ['og:title', 'twitter:title', 'title']
META_COMPANY_KEYS = ['og:site_name', 'author']
META_LOCATION_KEYS = ['job:location', 'og:locality']
META_DESCRIPTION_KEYS = ['og:description', 'description', 'twitter:description']


def _first_meta(page: Page, keys) -> Optional[str]:
    for key in keys:
        value = page.meta(key)
        if value:
            return value
    return None


class GenericParser(SiteParser):
    """Generic fallback parser for any job posting page"""

    def __init__(self):
        super().__init__(name='generic', domains=['*'])
        self.heuristics = HeuristicExtractor()

    def detect(self, url: str, page: Optional[Page] = None) -> bool:
        """Generic parser can always handle (as fallback)"""
        return True

    def meta_fields(self, page: Page) -> Dict[str, Optional[str]]:
        return {
            'title': _first_meta(page, META_TITLE_KEYS),
            'company': _first_meta(page, META_COMPANY_KEYS),
            'location': _first_meta(page, META_LOCATION_KEYS),
            'description': _first_meta(page, META_DESCRIPTION_KEYS),
        }

    def selector_fields(self, page: Page) -> Dict[str, Optional[str]]:
        return {
            'title': page.select_first(TITLE_SELECTORS),
            'company': page.select_first(COMPANY_SELECTORS),
            'location': page.select_first(LOCATION_SELECTORS),
            'salary': page.select_first(SALARY_SELECTORS),
        }

    def extract_fields(self, page: Page, url: str) -> ParsedFields:
        jsonld = self.structured_data(page)
        selectors = self.selector_fields(page)
        meta = self.meta_fields(page)
        heading_title = self.lookup('heading title', self.heuristics.title_from_headings, page)
        page_title, page_company = self.heuristics.parse_page_title(page.title)

        title = (
            jsonld['title'] or
            selectors['title'] or
            heading_title or
            meta['title'] or
            page_title
        )

        company = (
            jsonld['company'] or
            selectors['company'] or
            meta['company'] or
            page_company or
            extract_company_from_url(url)
        )

        location = jsonld['location'] or selectors['location'] or meta['location']

        salary = (
            jsonld['salary'] or
            selectors['salary'] or
            self.lookup('salary', scan_page_for_salary, page)
        )

        description = (
            jsonld['description'] or
            self.lookup('description', self.heuristics.find_description, page) or
            meta['description']
        )

        if jsonld['title']:
            multiplier = STRUCTURED_TITLE_PENALTY
        else:
            multiplier = HEURISTIC_TITLE_PENALTY

        return ParsedFields(
            title=title,
            company=company,
            location=location,
            salary=salary,
            description=description,
            confidence_multiplier=multiplier,
        )
