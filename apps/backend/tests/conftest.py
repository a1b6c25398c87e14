"""
Shared fixtures for backend tests.
"""

import pytest

from core.page import Page
from core.settings import reset_settings
from keywords.dictionary import reset_dictionary


@pytest.fixture(autouse=True)
def fresh_settings(monkeypatch):
    """Every test reads settings from a clean environment."""
    for name in (
        'EXTRACTION_DESCRIPTION_MAX_CHARS',
        'EXTRACTION_SALARY_SCAN_CHARS',
        'EXTRACTION_LOGO_SERVICE_FALLBACK',
        'KEYWORD_DICTIONARY_PATH',
    ):
        monkeypatch.delenv(name, raising=False)
    reset_settings()
    reset_dictionary()
    yield
    reset_settings()
    reset_dictionary()


@pytest.fixture
def make_page():
    """Build a Page from inline HTML."""
    def _make(html, url='https://example.com/jobs/1'):
        return Page.from_html(html, url)
    return _make
