"""
Shared fixtures for the repository-level keyword tests.
"""
import pytest
import sys
from pathlib import Path
sys.path.insert(0, str(Path(__file__).parent.parent / "apps" / "backend"))

from core.settings import reset_settings
from keywords.dictionary import reset_dictionary


@pytest.fixture(autouse=True)
def default_dictionary(monkeypatch):
    """Keyword tests always run against the built-in dictionary."""
    monkeypatch.delenv('KEYWORD_DICTIONARY_PATH', raising=False)
    reset_settings()
    reset_dictionary()
    yield
    reset_settings()
    reset_dictionary()
