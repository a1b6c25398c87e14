"""
LinkedIn parser.

LinkedIn changes its markup often, so each field tries the current unified
top card first, then older and public (logged-out) layouts.
"""
import re
from typing import Optional

from core.page import Page
from core.salary import extract_salary

from .base import ParsedFields, SiteParser, join_extra

TITLE_SELECTORS = [
    '.job-details-jobs-unified-top-card__job-title h1',
    '.job-details-jobs-unified-top-card__job-title a',
    '.job-details-jobs-unified-top-card__job-title',
    '.jobs-unified-top-card__job-title h1',
    '.jobs-unified-top-card__job-title a',
    '.jobs-unified-top-card__job-title',
    '[data-test-job-title]',
    '[data-tracking-control-name="public_jobs_topcard-title"]',
    '.topcard__title',
    '.top-card-layout__title',
    'h1[class*="job"]',
    'h1[class*="title"]',
    'h1.t-24',
    'main h1',
    'h1',
]

COMPANY_SELECTORS = [
    '.job-details-jobs-unified-top-card__company-name a',
    '.job-details-jobs-unified-top-card__company-name',
    '.job-details-jobs-unified-top-card__primary-description-without-actions a',
    '.jobs-unified-top-card__company-name a',
    '.jobs-unified-top-card__company-name',
    '[data-test-company-name]',
    '[data-tracking-control-name="public_jobs_topcard-org-name"]',
    '.topcard__org-name-link',
    '.top-card-layout__card a[data-tracking-control-name*="company"]',
    '.jobs-unified-top-card__subtitle-primary-grouping a',
    'a[href*="/company/"]',
]

LOCATION_SELECTORS = [
    '.job-details-jobs-unified-top-card__primary-description-container .tvm__text',
    '.job-details-jobs-unified-top-card__primary-description-without-actions .tvm__text',
    '.job-details-jobs-unified-top-card__workplace-type',
    '.jobs-unified-top-card__bullet',
    '.jobs-unified-top-card__workplace-type',
    '[data-test-job-location]',
    '.topcard__flavor--bullet',
    '.top-card-layout__bullet',
    '[class*="location"]',
]

SALARY_SELECTORS = [
    '.job-details-jobs-unified-top-card__job-insight',
    '.jobs-unified-top-card__job-insight',
    '[class*="compensation"]',
    '[class*="salary"]',
    '.salary-main-rail__data-body',
    '[data-test-compensation]',
    '.jobs-description__salary-compensation',
]

DESCRIPTION_SELECTORS = [
    '.jobs-description__content',
    '.jobs-description-content',
    '#job-details',
    '.description__text',
    '.jobs-box__html-content',
    '[class*="job-description"]',
    'article[class*="jobs"]',
]

EMPLOYMENT_TYPE_SELECTORS = [
    '.job-details-jobs-unified-top-card__job-insight--highlight',
    '[class*="employment-type"]',
]


class LinkedInParser(SiteParser):
    """Parser for linkedin.com/jobs pages"""

    logo_selectors = [
        '.job-details-jobs-unified-top-card__company-logo img',
        '.jobs-unified-top-card__company-logo img',
        '.artdeco-entity-image[data-entity-type="COMPANY"]',
        '.topcard__org-photo img',
        'img[alt*="logo" i]',
    ]

    def __init__(self):
        super().__init__(
            name='linkedin',
            domains=['linkedin.com'],
            path_patterns=[re.compile(r'^/jobs(/|$)')],
        )

    def detect(self, url: str, page: Optional[Page] = None) -> bool:
        return self.host_matches(url) and self.path_matches(url)

    def extract_fields(self, page: Page, url: str) -> ParsedFields:
        jsonld = self.structured_data(page)

        location = jsonld['location'] or page.select_first(LOCATION_SELECTORS)
        employment_type = page.select_first(EMPLOYMENT_TYPE_SELECTORS)
        if location:
            location = join_extra(location, employment_type)

        return ParsedFields(
            title=jsonld['title'] or page.select_first(TITLE_SELECTORS),
            company=jsonld['company'] or page.select_first(COMPANY_SELECTORS),
            location=location,
            salary=jsonld['salary'] or self.lookup('salary', extract_salary, page, SALARY_SELECTORS),
            description=jsonld['description'] or page.select_first(DESCRIPTION_SELECTORS),
        )
