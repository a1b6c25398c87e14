"""
Workday parser.

Every company customizes its Workday instance, so selectors are not
universal. data-automation-id attributes are the most stable hook and are
tried first.
"""
from typing import Optional

from core.cleaners import extract_company_from_url
from core.page import Page
from core.salary import extract_salary

from .base import ParsedFields, SiteParser, join_extra

TITLE_SELECTORS = [
    '[data-automation-id="jobPostingHeader"]',
    '[data-automation-id="jobPostingTitle"]',
    '[data-automation-id="job-title"]',
    'h2[data-automation-id]',
    'h1[data-automation-id]',
    '[class*="job-title" i]',
    '[class*="jobTitle"]',
    '[class*="posting-title" i]',
    'main h1',
    'main h2',
    'h1',
    'h2',
]

COMPANY_SELECTORS = [
    '[data-automation-id="jobPostingCompanyName"]',
    '[data-automation-id="companyName"]',
    '[data-automation-id="company"]',
    '[class*="company-name" i]',
    '[class*="companyName"]',
]

LOCATION_SELECTORS = [
    '[data-automation-id="locations"]',
    '[data-automation-id="jobPostingLocation"]',
    '[data-automation-id="location"]',
    '[data-automation-id="primaryLocation"]',
    '[class*="location" i]',
    '[class*="Location"]',
]

TIME_TYPE_SELECTORS = [
    '[data-automation-id="time"]',
    '[data-automation-id="timeType"]',
    '[class*="time-type" i]',
]

SALARY_SELECTORS = [
    '[data-automation-id="salary"]',
    '[data-automation-id="compensation"]',
    '[data-automation-id="payRange"]',
    '[class*="salary" i]',
    '[class*="compensation" i]',
]

DESCRIPTION_SELECTORS = [
    '[data-automation-id="jobPostingDescription"]',
    '[data-automation-id="jobDescription"]',
    '[data-automation-id="description"]',
    '[class*="job-description" i]',
    '[class*="jobDescription"]',
    'main article',
    'main',
]

class WorkdayParser(SiteParser):
    """Parser for Workday career sites"""

    logo_selectors = [
        '[data-automation-id="companyLogo"] img',
        '[data-automation-id="logo"] img',
        'header img',
        '[class*="logo" i] img',
    ]

    def __init__(self):
        super().__init__(
            name='workday',
            domains=['myworkdayjobs.com', 'workday.com'],
        )

    def detect(self, url: str, page: Optional[Page] = None) -> bool:
        return self.host_matches(url)

    def extract_fields(self, page: Page, url: str) -> ParsedFields:
        jsonld = self.structured_data(page)

        company = (
            jsonld['company'] or
            page.select_first(COMPANY_SELECTORS) or
            page.meta('og:site_name') or
            extract_company_from_url(url)
        )

        location = join_extra(
            jsonld['location'] or page.select_first(LOCATION_SELECTORS),
            page.select_first(TIME_TYPE_SELECTORS),
        )

        return ParsedFields(
            title=jsonld['title'] or page.select_first(TITLE_SELECTORS),
            company=company,
            location=location,
            salary=jsonld['salary'] or self.lookup('salary', extract_salary, page, SALARY_SELECTORS),
            description=jsonld['description'] or page.select_first(DESCRIPTION_SELECTORS),
            confidence_multiplier=1.0 if jsonld['title'] else 0.85,
        )
