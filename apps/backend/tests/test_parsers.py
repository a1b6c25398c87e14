"""
Unit tests for job board parsers.
"""

import json

import pytest

from core.page import Page
from core.settings import reset_settings
from parsers.base import ParsedFields, SiteParser, join_extra
from parsers.glassdoor import GlassdoorParser
from parsers.greenhouse import GreenhouseParser
from parsers.indeed import IndeedParser
from parsers.lever import LeverParser
from parsers.linkedin import LinkedInParser
from parsers.wellfound import WellfoundParser
from parsers.workday import WorkdayParser

DESCRIPTION = (
    "Join the team that keeps our payments platform running. You will own "
    "services end to end, write design docs and pair with product on new features."
)


def ld_json(data):
    return f'<script type="application/ld+json">{json.dumps(data)}</script>'


class TestDetection:
    """Test URL-based parser detection."""

    @pytest.mark.parametrize("parser_class,url", [
        (LinkedInParser, "https://www.linkedin.com/jobs/view/3812345678"),
        (IndeedParser, "https://www.indeed.com/viewjob?jk=abc123"),
        (IndeedParser, "https://uk.indeed.co.uk/viewjob?jk=abc123"),
        (GreenhouseParser, "https://boards.greenhouse.io/acme/jobs/4567890"),
        (GreenhouseParser, "https://acme.com/careers/job?gh_jid=4567890"),
        (LeverParser, "https://jobs.lever.co/acme/2b7c-44aa"),
        (WorkdayParser, "https://acme.wd5.myworkdayjobs.com/en-US/careers/job/Austin/Engineer_R1"),
        (GlassdoorParser, "https://www.glassdoor.com/job-listing/engineer-globex-JV_IC1.htm"),
        (WellfoundParser, "https://wellfound.com/jobs/123-backend-engineer"),
        (GreenhouseParser, "https://acme.com/careers/gh_jid/4567890"),
        (LinkedInParser, "https://linkedin.com/jobs"),
        (WellfoundParser, "https://angel.co/company/acme"),
    ])
    def test_detects_own_urls(self, parser_class, url):
        assert parser_class().detect(url)

    @pytest.mark.parametrize("parser_class,url", [
        (LinkedInParser, "https://www.linkedin.com/in/someone"),
        (IndeedParser, "https://example.com/jobs/1"),
        (GreenhouseParser, "https://acme.com/careers/job/1"),
        (LeverParser, "https://acme.com/jobs/1"),
        (WorkdayParser, "https://acme.com/jobs/1"),
        (GlassdoorParser, "https://www.glassdoor.com/Reviews/globex-reviews.htm"),
        (WellfoundParser, "https://wellfound.com/"),
        (LeverParser, "https://www.clever.com/careers/engineer"),
        (WorkdayParser, "https://www.crowd1.com/jobs/42"),
        (LinkedInParser, "https://acme.example/apply?ref=linkedin.com/jobs/view/1"),
        (GreenhouseParser, "https://acme.com/careers/job?ref=gh_jid"),
    ])
    def test_rejects_other_urls(self, parser_class, url):
        assert not parser_class().detect(url)

    def test_page_markup_does_not_change_detection(self):
        page = Page.from_html('<div id="grnhse_app"></div>', "https://acme.com/careers/job/1")
        assert not GreenhouseParser().detect("https://acme.com/careers/job/1", page)


class TestLinkedInParser:
    """Test LinkedIn extraction."""

    URL = "https://www.linkedin.com/jobs/view/3812345678"

    HTML = f"""
    <html><head><title>Senior Software Engineer | Acme Corp | LinkedIn</title></head>
    <body>
        <div class="job-details-jobs-unified-top-card__job-title"><h1>Senior Software Engineer</h1></div>
        <div class="job-details-jobs-unified-top-card__company-name"><a href="/company/acme">Acme Corp</a></div>
        <div class="job-details-jobs-unified-top-card__primary-description-container">
            <span class="tvm__text">San Francisco, CA</span>
        </div>
        <span class="job-details-jobs-unified-top-card__job-insight--highlight">Full-time</span>
        <div class="jobs-description__content">{DESCRIPTION}</div>
    </body></html>
    """

    def test_fields(self):
        result = LinkedInParser().extract(Page.from_html(self.HTML, self.URL), self.URL)

        assert result.title == "Senior Software Engineer"
        assert result.company == "Acme Corp"
        assert result.location == "San Francisco, CA · Full-time"
        assert result.salary is None
        assert result.description == DESCRIPTION
        assert result.source_parser_name == "linkedin"
        assert result.source_url == self.URL
        assert result.confidence == 0.89

    def test_logo_falls_back_to_service(self):
        result = LinkedInParser().extract(Page.from_html(self.HTML, self.URL), self.URL)
        assert result.company_logo_url == "https://www.google.com/s2/favicons?domain=acme.com&sz=128"

    def test_structured_data_preferred(self):
        html = self.HTML.replace(
            "<body>",
            "<body>" + ld_json({"@type": "JobPosting", "title": "Staff Engineer"}),
        )
        result = LinkedInParser().extract(Page.from_html(html, self.URL), self.URL)
        assert result.title == "Staff Engineer"
        assert result.company == "Acme Corp"


class TestIndeedParser:
    """Test Indeed extraction."""

    def test_fields(self):
        url = "https://www.indeed.com/viewjob?jk=abc123"
        html = f"""
        <h1 data-testid="jobsearch-JobInfoHeader-title">Data Analyst</h1>
        <div data-testid="inlineHeader-companyName"><a href="/cmp/initech">Initech</a></div>
        <div data-testid="inlineHeader-companyLocation">Austin, TX</div>
        <div data-testid="jobsearch-JobInfoHeader-jobType">Part-time</div>
        <div id="salaryInfoAndJobType"><span>$25 - $30 an hour</span></div>
        <div id="jobDescriptionText">{DESCRIPTION}</div>
        """
        result = IndeedParser().extract(Page.from_html(html, url), url)

        assert result.title == "Data Analyst"
        assert result.company == "Initech"
        assert result.location == "Austin, TX · Part-time"
        assert result.salary == "$25 - $30"
        assert result.description == DESCRIPTION
        assert result.confidence == 1.0


class TestGreenhouseParser:
    """Test Greenhouse extraction."""

    def test_embedded_board_with_structured_data(self):
        url = "https://acme.com/careers/job?gh_jid=4567890"
        html = ld_json({
            "@type": "JobPosting",
            "title": "Backend Engineer",
            "hiringOrganization": {"name": "Acme"},
            "jobLocation": {"address": {"addressLocality": "Denver", "addressRegion": "CO"}},
            "baseSalary": {"currency": "USD", "value": {"minValue": 140000, "maxValue": 170000}},
            "description": DESCRIPTION,
        }) + "<h1>Careers at Acme</h1>"
        result = GreenhouseParser().extract(Page.from_html(html, url), url)

        assert result.title == "Backend Engineer"
        assert result.company == "Acme"
        assert result.location == "Denver, CO"
        assert result.salary == "$140,000 - $170,000"
        assert result.source_parser_name == "greenhouse"
        assert result.confidence == 1.0

    def test_hosted_board_without_structured_data(self):
        url = "https://boards.greenhouse.io/acme/jobs/4567890"
        html = f"""
        <h1 class="app-title">Site Reliability Engineer</h1>
        <div class="location">Remote - US</div>
        <div id="content">{DESCRIPTION}</div>
        """
        result = GreenhouseParser().extract(Page.from_html(html, url), url)

        assert result.title == "Site Reliability Engineer"
        assert result.company == "Acme"
        assert result.location == "Remote - US"
        assert result.description == DESCRIPTION
        # 8 of 9 points, reduced for missing structured data
        assert result.confidence == 0.8


class TestLeverParser:
    """Test Lever extraction."""

    def test_fields(self):
        url = "https://jobs.lever.co/acme/2b7c-44aa"
        html = f"""
        <html><head><meta property="og:site_name" content="Acme"></head><body>
        <div class="posting-headline"><h2>Backend Engineer</h2></div>
        <div class="posting-categories">
            <div class="location">Berlin</div>
            <div class="commitment">Full-time</div>
            <div class="team">Platform</div>
        </div>
        <div class="posting-description">{DESCRIPTION}</div>
        </body></html>
        """
        result = LeverParser().extract(Page.from_html(html, url), url)

        assert result.title == "Backend Engineer"
        assert result.company == "Acme"
        assert result.location == "Berlin (Full-time, Platform)"
        assert result.salary is None
        assert result.description == DESCRIPTION
        assert result.confidence == 0.8

    def test_company_from_url(self):
        url = "https://jobs.lever.co/blue-bottle/2b7c-44aa"
        result = LeverParser().extract(Page.from_html("<h1>Barista</h1>", url), url)
        assert result.company == "Blue Bottle"


class TestWorkdayParser:
    """Test Workday extraction."""

    def test_fields(self):
        url = "https://acme.wd5.myworkdayjobs.com/en-US/careers/job/Austin/Engineer_R1"
        html = f"""
        <h2 data-automation-id="jobPostingHeader">Software Engineer II</h2>
        <div data-automation-id="locations">Austin, TX</div>
        <div data-automation-id="time">Full time</div>
        <div data-automation-id="salary">$90,000 - $120,000 per year</div>
        <div data-automation-id="jobPostingDescription">{DESCRIPTION}</div>
        """
        result = WorkdayParser().extract(Page.from_html(html, url), url)

        assert result.title == "Software Engineer II"
        assert result.company == "Acme"
        assert result.location == "Austin, TX · Full time"
        assert result.salary == "$90,000 - $120,000 per year"
        assert result.confidence == 0.85


class TestGlassdoorParser:
    """Test Glassdoor extraction."""

    def test_rating_appended_to_company(self):
        url = "https://www.glassdoor.com/job-listing/engineer-globex-JV_IC1.htm"
        html = f"""
        <h1 data-test="job-title">QA Engineer</h1>
        <div data-test="employer-name">Globex</div>
        <span data-test="rating">4.2</span>
        <div data-test="location">Chicago, IL</div>
        <div data-test="job-description">{DESCRIPTION}</div>
        """
        result = GlassdoorParser().extract(Page.from_html(html, url), url)

        assert result.title == "QA Engineer"
        assert result.company == "Globex (4.2)"
        assert result.location == "Chicago, IL"


class TestWellfoundParser:
    """Test Wellfound extraction."""

    def test_equity_appended_to_salary(self):
        url = "https://wellfound.com/jobs/123-backend-engineer"
        html = f"""
        <h1>Backend Engineer</h1>
        <a data-test="StartupLink" href="/company/rocket">Rocket</a>
        <span data-test="Location">Remote</span>
        <span data-test="Salary">$120K – $160K</span>
        <span data-test="Equity">0.1% – 0.5%</span>
        <div data-test="JobDescription">{DESCRIPTION}</div>
        """
        result = WellfoundParser().extract(Page.from_html(html, url), url)

        assert result.title == "Backend Engineer"
        assert result.company == "Rocket"
        assert result.salary == "$120K – $160K + 0.1% – 0.5%"
        assert result.confidence == 1.0


class BrokenParser(SiteParser):
    def __init__(self):
        super().__init__(name='broken', domains=['broken.example'])

    def detect(self, url, page=None):
        return 'broken.example' in url

    def extract_fields(self, page, url):
        raise RuntimeError("markup changed")


class TestSiteParserBase:
    """Test behaviour shared by all parsers."""

    def test_failing_parser_returns_empty_result(self):
        url = "https://broken.example/jobs/1"
        result = BrokenParser().extract(Page.from_html("<h1>Engineer</h1>", url), url)

        assert result.title is None
        assert result.confidence == 0.0
        assert result.source_parser_name == "broken"

    def test_description_truncated(self, monkeypatch):
        monkeypatch.setenv('EXTRACTION_DESCRIPTION_MAX_CHARS', '50')
        reset_settings()
        url = "https://broken.example/jobs/1"
        parser = BrokenParser()
        result = parser.build_result(Page.from_html("", url), url, ParsedFields(description=DESCRIPTION))

        assert len(result.description) == 50
        assert result.description.endswith("...")

    def test_title_cleaned(self):
        url = "https://broken.example/jobs/1"
        result = BrokenParser().build_result(
            Page.from_html("", url), url, ParsedFields(title="Nurse  -  Apply Now")
        )
        assert result.title == "Nurse"

    def test_confidence_multiplier_clamped(self):
        url = "https://broken.example/jobs/1"
        fields = ParsedFields(title="Engineer", company="Acme", confidence_multiplier=5.0)
        result = BrokenParser().build_result(Page.from_html("", url), url, fields)
        assert result.confidence == 1.0

    @pytest.mark.parametrize("value,extra,expected", [
        ("Austin, TX", "Full-time", "Austin, TX · Full-time"),
        ("Remote (full-time)", "Full-time", "Remote (full-time)"),
        (None, "Full-time", "Full-time"),
        ("Austin, TX", None, "Austin, TX"),
    ])
    def test_join_extra(self, value, extra, expected):
        assert join_extra(value, extra) == expected
