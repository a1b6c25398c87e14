"""
Unit tests for field cleaners.
"""

import pytest

from core.cleaners import (
    clean_job_title,
    clean_text,
    clean_url,
    extract_company_from_url,
    truncate,
)


class TestCleanText:
    """Test whitespace normalization."""

    def test_collapses_whitespace(self):
        assert clean_text("  Senior   Engineer \n\t ") == "Senior Engineer"

    def test_blank_becomes_none(self):
        assert clean_text("   \n ") is None
        assert clean_text("") is None
        assert clean_text(None) is None


class TestTruncate:
    """Test length bounding."""

    def test_long_text_is_cut_with_ellipsis(self):
        result = truncate("abcdefghij", 5)
        assert result == "ab..."
        assert len(result) == 5

    def test_short_text_unchanged(self):
        assert truncate("abc", 5) == "abc"

    def test_empty(self):
        assert truncate(None, 10) is None


class TestCleanUrl:
    """Test URL resolution."""

    def test_protocol_relative_gets_https(self):
        assert clean_url("//cdn.example.com/logo.png") == "https://cdn.example.com/logo.png"

    def test_relative_resolved_against_base(self):
        assert clean_url("/img/logo.png", "https://acme.com") == "https://acme.com/img/logo.png"

    def test_absolute_unchanged(self):
        assert clean_url("https://acme.com/a?b=1") == "https://acme.com/a?b=1"

    def test_relative_without_base_returned_as_is(self):
        assert clean_url("img/logo.png") == "img/logo.png"

    def test_empty(self):
        assert clean_url("  ") is None
        assert clean_url(None) is None


class TestCleanJobTitle:
    """Test removal of job board boilerplate from titles."""

    @pytest.mark.parametrize("raw,expected", [
        ("Senior Engineer - Apply Now", "Senior Engineer"),
        ("Data Analyst | LinkedIn", "Data Analyst"),
        ("Nurse - Indeed.com", "Nurse"),
        ("Backend Developer (Job ID: 12345)", "Backend Developer"),
        ("  Product   Manager ", "Product Manager"),
    ])
    def test_suffixes_removed(self, raw, expected):
        assert clean_job_title(raw) == expected

    def test_plain_title_kept(self):
        assert clean_job_title("Staff Engineer, Payments") == "Staff Engineer, Payments"

    def test_none(self):
        assert clean_job_title(None) is None


class TestExtractCompanyFromUrl:
    """Test company inference from URLs."""

    def test_lever_slug(self):
        assert extract_company_from_url("https://jobs.lever.co/acme-corp/123") == "Acme Corp"

    def test_greenhouse_slug(self):
        assert extract_company_from_url("https://boards.greenhouse.io/stripe/jobs/1") == "Stripe"

    def test_www_host(self):
        assert extract_company_from_url("https://www.acme.com/careers/1") == "Acme"

    def test_bare_host(self):
        assert extract_company_from_url("https://initech.io/jobs/7") == "Initech"

    def test_generic_subdomain_gives_nothing(self):
        assert extract_company_from_url("https://careers.example.com/x") is None
        assert extract_company_from_url("https://jobs.example.com/x") is None

    def test_unusable_input(self):
        assert extract_company_from_url("") is None
        assert extract_company_from_url(None) is None
        assert extract_company_from_url("not a url") is None
