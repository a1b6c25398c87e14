"""
Wellfound (formerly AngelList) parser.

Wellfound uses hashed class names that change between builds; selectors
rely on data-test attributes and partial class matches instead.
"""
import re
from typing import Optional

from core.cleaners import clean_text, extract_company_from_url
from core.page import Page
from core.salary import extract_salary

from .base import ParsedFields, SiteParser

TITLE_SELECTORS = [
    '[data-test="JobTitle"]',
    '[data-test="job-title"]',
    '[data-testid="job-title"]',
    '[class*="jobTitle" i] h1',
    '[class*="job-title" i]',
    '[class*="JobHeader"] h1',
    'h1[class*="title" i]',
    'main h1',
    'article h1',
    'h1',
]

COMPANY_SELECTORS = [
    '[data-test="StartupLink"]',
    '[data-test="company-name"]',
    '[data-testid="company-name"]',
    '[class*="StartupHeader"] a',
    '[class*="company" i] a',
    'a[href*="/company/"]',
]

LOCATION_SELECTORS = [
    '[data-test="Location"]',
    '[data-test="location"]',
    '[data-testid="location"]',
    '[class*="LocationTag"]',
    '[class*="location" i]',
]

SALARY_SELECTORS = [
    '[data-test="Salary"]',
    '[data-test="compensation"]',
    '[data-testid="salary"]',
    '[class*="CompensationTag"]',
    '[class*="compensation" i]',
    '[class*="salary" i]',
]

EQUITY_SELECTORS = [
    '[data-test="Equity"]',
    '[class*="equity" i]',
]

DESCRIPTION_SELECTORS = [
    '[data-test="JobDescription"]',
    '[data-testid="job-description"]',
    '[class*="jobDescription" i]',
    '[class*="JobDescription"]',
    'article',
    'main',
]


class WellfoundParser(SiteParser):
    """Parser for Wellfound startup job listings"""

    logo_selectors = [
        '[data-test="StartupLogo"] img',
        '[data-testid="company-logo"] img',
        '[class*="StartupHeader"] img',
        '[class*="logo" i] img',
    ]

    def __init__(self):
        super().__init__(
            name='wellfound',
            domains=['wellfound.com', 'angel.co'],
            path_patterns=[
                re.compile(r'/jobs'),
                re.compile(r'/role/'),
                re.compile(r'/company/'),
            ],
        )

    def detect(self, url: str, page: Optional[Page] = None) -> bool:
        return self.host_matches(url) and self.path_matches(url)

    def extract_fields(self, page: Page, url: str) -> ParsedFields:
        jsonld = self.structured_data(page)

        company = (
            jsonld['company'] or
            page.select_first(COMPANY_SELECTORS) or
            page.meta('og:site_name') or
            extract_company_from_url(url)
        )

        # "$120K - $160K + 0.1% - 0.5%"
        salary = clean_text(jsonld['salary'] or self.lookup('salary', extract_salary, page, SALARY_SELECTORS))
        equity = clean_text(page.select_first(EQUITY_SELECTORS))
        if equity and salary:
            salary = f"{salary} + {equity}"
        elif equity:
            salary = equity

        return ParsedFields(
            title=jsonld['title'] or page.select_first(TITLE_SELECTORS),
            company=company,
            location=jsonld['location'] or page.select_first(LOCATION_SELECTORS),
            salary=salary,
            description=jsonld['description'] or page.select_first(DESCRIPTION_SELECTORS),
        )
