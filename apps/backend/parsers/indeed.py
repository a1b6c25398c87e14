"""
Indeed parser.

Indeed marks most fields with data-testid attributes, which are tried
before class names.
"""
from typing import Optional

from core.page import Page
from core.salary import extract_salary

from .base import ParsedFields, SiteParser, join_extra

TITLE_SELECTORS = [
    '[data-testid="jobsearch-JobInfoHeader-title"]',
    '[data-testid="jobTitle"]',
    '[data-testid="job-title"]',
    '.jobsearch-JobInfoHeader-title',
    '.jobsearch-JobInfoHeader-title-container h1',
    'h1.jobTitle',
    '.jobTitle',
    'h1.icl-u-xs-mb--xs',
    'main h1',
    'h1',
]

COMPANY_SELECTORS = [
    '[data-testid="inlineHeader-companyName"] a',
    '[data-testid="inlineHeader-companyName"]',
    '[data-testid="company-name"] a',
    '[data-testid="company-name"]',
    '[data-company-name="true"]',
    '[data-tn-element="companyName"]',
    '.jobsearch-InlineCompanyRating-companyHeader a',
    '.jobsearch-InlineCompanyRating-companyHeader',
    '.jobsearch-CompanyInfoContainer a',
    'a[href*="/cmp/"]',
]

LOCATION_SELECTORS = [
    '[data-testid="inlineHeader-companyLocation"]',
    '[data-testid="job-location"]',
    '[data-testid="jobsearch-JobInfoHeader-companyLocation"]',
    '.jobsearch-JobInfoHeader-subtitle [class*="location"]',
    '.jobsearch-JobInfoHeader-subtitle > div:last-child',
    '.icl-IconFunctional--location + span',
    '[class*="companyLocation"]',
]

SALARY_SELECTORS = [
    '[data-testid="attribute_snippet_testid"]',
    '[data-testid="jobsearch-SalaryInfoAndJobType"]',
    '#salaryInfoAndJobType',
    '.jobsearch-JobMetadataHeader-item',
    '.salary-snippet-container',
    '.attribute_snippet',
    '.jobsearch-SalaryCompensationInfoContainer',
    '[class*="salary"]',
    '[class*="compensation"]',
]

JOB_TYPE_SELECTORS = [
    '[data-testid="jobsearch-JobInfoHeader-jobType"]',
    '.jobsearch-JobMetadataHeader-item:not([class*="salary"])',
]

DESCRIPTION_SELECTORS = [
    '[data-testid="jobDescriptionText"]',
    '#jobDescriptionText',
    '.jobsearch-jobDescriptionText',
    '.jobsearch-JobComponent-description',
    '[class*="jobDescription"]',
]


class IndeedParser(SiteParser):
    """Parser for Indeed job pages (all regional sites)"""

    logo_selectors = [
        '[data-testid="companyAvatar"] img',
        '.jobsearch-CompanyAvatar-image',
        'img[alt*="logo" i]',
    ]

    def __init__(self):
        super().__init__(
            name='indeed',
            domains=['indeed.com', 'indeed.co.uk', 'indeed.ca', 'indeed.de', 'indeed.fr', 'indeed.co.in', 'indeed.com.au'],
        )

    def detect(self, url: str, page: Optional[Page] = None) -> bool:
        return self.host_matches(url)

    def extract_fields(self, page: Page, url: str) -> ParsedFields:
        jsonld = self.structured_data(page)

        location = jsonld['location'] or page.select_first(LOCATION_SELECTORS)
        if location:
            location = join_extra(location, page.select_first(JOB_TYPE_SELECTORS))

        return ParsedFields(
            title=jsonld['title'] or page.select_first(TITLE_SELECTORS),
            company=jsonld['company'] or page.select_first(COMPANY_SELECTORS),
            location=location,
            salary=jsonld['salary'] or self.lookup('salary', extract_salary, page, SALARY_SELECTORS),
            description=jsonld['description'] or page.select_first(DESCRIPTION_SELECTORS),
        )
