"""
Glassdoor parser.
"""
import re
from typing import Optional

from core.cleaners import clean_text
from core.page import Page
from core.salary import extract_salary

from .base import ParsedFields, SiteParser

TITLE_SELECTORS = [
    '[data-test="job-title"]',
    '[data-test="jobTitle"]',
    '[data-testid="job-title"]',
    'h1[class*="title" i]',
    'h1[class*="Title"]',
    '.job-title h1',
    '.jobTitle',
    'main h1',
    'h1',
]

COMPANY_SELECTORS = [
    '[data-test="employer-name"]',
    '[data-test="employerName"]',
    '[data-testid="employer-name"]',
    '[class*="employer-name" i]',
    '[class*="employerName"]',
    '[class*="company-name" i]',
    'a[href*="/Overview/"]',
]

LOCATION_SELECTORS = [
    '[data-test="job-location"]',
    '[data-test="location"]',
    '[data-testid="job-location"]',
    '[class*="job-location" i]',
    '[class*="location" i]:not([class*="relocation"])',
]

SALARY_SELECTORS = [
    '[data-test="detailSalary"]',
    '[data-test="salary"]',
    '[data-testid="salary"]',
    '[class*="SalaryEstimate"]',
    '[class*="salary-estimate" i]',
    '[class*="compensation" i]',
]

RATING_SELECTORS = [
    '[data-test="rating"]',
    '[class*="rating" i]',
]

DESCRIPTION_SELECTORS = [
    '[data-test="job-description"]',
    '[data-testid="job-description"]',
    '[class*="jobDescription" i]',
    '.jobDescriptionContent',
    'article',
]


class GlassdoorParser(SiteParser):
    """Parser for Glassdoor job listings"""

    logo_selectors = [
        '[data-test="employer-logo"] img',
        '[data-testid="employer-logo"] img',
        '[class*="employer-logo" i] img',
        '[class*="employerLogo"] img',
    ]

    def __init__(self):
        super().__init__(
            name='glassdoor',
            domains=['glassdoor.com', 'glassdoor.co.uk', 'glassdoor.ca', 'glassdoor.de', 'glassdoor.fr'],
            path_patterns=[
                re.compile(r'/job-listing/'),
                re.compile(r'/Job/'),
                re.compile(r'/partner/'),
            ],
        )

    def detect(self, url: str, page: Optional[Page] = None) -> bool:
        return self.host_matches(url) and self.path_matches(url)

    def extract_fields(self, page: Page, url: str) -> ParsedFields:
        jsonld = self.structured_data(page)

        # Employer rating shown next to the name: "Acme Corp (4.2)"
        company = clean_text(
            jsonld['company'] or
            page.select_first(COMPANY_SELECTORS) or
            page.meta('og:site_name')
        )
        rating = clean_text(page.select_first(RATING_SELECTORS))
        if rating and company and rating not in company:
            company = f"{company} ({rating})"

        return ParsedFields(
            title=jsonld['title'] or page.select_first(TITLE_SELECTORS),
            company=company,
            location=jsonld['location'] or page.select_first(LOCATION_SELECTORS),
            salary=jsonld['salary'] or self.lookup('salary', extract_salary, page, SALARY_SELECTORS),
            description=jsonld['description'] or page.select_first(DESCRIPTION_SELECTORS),
        )
