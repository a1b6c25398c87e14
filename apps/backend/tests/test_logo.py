"""
Unit tests for company logo discovery.
"""

import pytest

from core.logo import (
    company_to_domain,
    extract_logo,
    get_company_logo_url,
    get_favicon_url,
    get_logo_with_fallback,
)
from core.page import Page
from core.settings import reset_settings

URL = "https://acme.com/jobs/1"


class TestExtractLogo:
    """Test logo images scraped from the page."""

    def test_company_logo_image(self):
        page = Page.from_html('<div class="company-logo"><img src="/logo.png"></div>', URL)
        assert extract_logo(page) == "https://acme.com/logo.png"

    def test_custom_selectors_first(self):
        html = """
        <div class="company-logo"><img src="/generic.png"></div>
        <div class="brand"><img src="//cdn.acme.com/brand.png"></div>
        """
        page = Page.from_html(html, URL)
        assert extract_logo(page, ['.brand img']) == "https://cdn.acme.com/brand.png"

    def test_lazy_loaded_image(self):
        page = Page.from_html('<div class="employer-logo"><img data-src="/lazy.png"></div>', URL)
        assert extract_logo(page) == "https://acme.com/lazy.png"

    def test_og_image(self):
        page = Page.from_html('<meta property="og:image" content="https://img.acme.com/og.png">', URL)
        assert extract_logo(page) == "https://img.acme.com/og.png"

    def test_nothing(self):
        assert extract_logo(Page.from_html('<p>No images</p>', URL)) is None


class TestFavicon:
    """Test favicon lookup."""

    def test_declared_icon(self):
        page = Page.from_html('<link rel="icon" href="/favicon-32.png">', URL)
        assert get_favicon_url(page) == "https://acme.com/favicon-32.png"

    def test_shortcut_icon(self):
        page = Page.from_html('<link rel="shortcut icon" href="/old.ico">', URL)
        assert get_favicon_url(page) == "https://acme.com/old.ico"

    def test_conventional_location(self):
        assert get_favicon_url(Page.from_html('<p>x</p>', URL)) == "https://acme.com/favicon.ico"

    def test_no_url(self):
        assert get_favicon_url(Page.from_html('<p>x</p>', '')) is None


class TestCompanyDomain:
    """Test company name to domain guessing."""

    @pytest.mark.parametrize("company,domain", [
        ("Google", "google.com"),
        ("Google LLC", "google.com"),
        ("Zoom", "zoom.us"),
        ("Acme Inc.", "acme.com"),
        ("Acme Corp", "acme.com"),
        ("Globex Corporation", "globex.com"),
        ("Blue Sky Labs", "blueskylabs.com"),
        ("Initech GmbH", "initech.com"),
    ])
    def test_domains(self, company, domain):
        assert company_to_domain(company) == domain

    def test_unusable_names(self):
        assert company_to_domain(None) is None
        assert company_to_domain("") is None
        assert company_to_domain("Q") is None

    def test_service_url(self):
        assert get_company_logo_url("Stripe") == "https://www.google.com/s2/favicons?domain=stripe.com&sz=128"
        assert get_company_logo_url("Stripe", size=64).endswith("sz=64")
        assert get_company_logo_url(None) is None


class TestLogoFallback:
    """Test the logo fallback chain."""

    def test_scraped_logo_first(self):
        page = Page.from_html('<div class="company-logo"><img src="/logo.png"></div>', URL)
        assert get_logo_with_fallback(page, "Acme") == "https://acme.com/logo.png"

    def test_service_before_favicon(self):
        page = Page.from_html('<link rel="icon" href="/icon.png">', URL)
        assert get_logo_with_fallback(page, "Acme") == (
            "https://www.google.com/s2/favicons?domain=acme.com&sz=128"
        )

    def test_favicon_without_company(self):
        page = Page.from_html('<link rel="icon" href="/icon.png">', URL)
        assert get_logo_with_fallback(page, None) == "https://acme.com/icon.png"

    def test_service_disabled(self, monkeypatch):
        monkeypatch.setenv('EXTRACTION_LOGO_SERVICE_FALLBACK', 'false')
        reset_settings()
        page = Page.from_html('<link rel="icon" href="/icon.png">', URL)
        assert get_logo_with_fallback(page, "Acme") == "https://acme.com/icon.png"
