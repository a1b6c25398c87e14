"""
Unit tests for the keyword dictionary and its YAML extensions.
"""

import dataclasses

import pytest
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from core.settings import reset_settings
from keywords.dictionary import (
    DEFAULT_DICTIONARY,
    EDUCATION_PATTERNS,
    EXPERIENCE_PATTERNS,
    get_dictionary,
    load_dictionary,
    reset_dictionary,
)
from keywords.models import KeywordCategory


def test_tech_skills_cover_all_technical_buckets():
    """Test that tech skills are the technical buckets in order."""
    tech = DEFAULT_DICTIONARY.tech_skills
    assert tech[0] == 'javascript'
    for term in ('python', 'react', 'django', 'kubernetes', 'postgresql', 'pandas', 'flutter', 'pytest', 'oauth'):
        assert term in tech
    assert 'jira' not in tech


def test_bucket_scan_order():
    """Test that technical skills come first, then fixed-category buckets."""
    categories = [category for category, _ in DEFAULT_DICTIONARY.term_buckets()]
    assert categories == [
        None,
        KeywordCategory.TOOLS,
        KeywordCategory.SOFT_SKILL,
        KeywordCategory.VALUES,
        KeywordCategory.INDUSTRY,
    ]


def test_dictionary_is_immutable():
    """Test that the dictionary cannot be mutated in place."""
    with pytest.raises(dataclasses.FrozenInstanceError):
        DEFAULT_DICTIONARY.languages = ('zig',)


def test_extend_returns_copy():
    """Test that extend leaves the source dictionary untouched."""
    extended = DEFAULT_DICTIONARY.extend({'languages': ['Zig', '  '], 'tools': ['Linear B']})

    assert 'zig' in extended.languages
    assert 'linear b' in extended.tools
    assert 'zig' not in DEFAULT_DICTIONARY.languages
    assert len(extended.languages) == len(DEFAULT_DICTIONARY.languages) + 1


def test_extend_ignores_unknown_bucket():
    """Test that unknown bucket names are skipped."""
    extended = DEFAULT_DICTIONARY.extend({'spaceships': ['x-wing']})
    assert extended == DEFAULT_DICTIONARY


def test_extend_skips_scalar_bucket():
    """Test that a bucket given as a single string is skipped, not split into letters."""
    extended = DEFAULT_DICTIONARY.extend({'languages': 'zig', 'tools': ['Retool']})

    assert extended.languages == DEFAULT_DICTIONARY.languages
    assert 'z' not in extended.tech_skills
    assert 'retool' in extended.tools


def test_load_dictionary_with_scalar_bucket(tmp_path):
    """Test loading a file where one bucket is a plain string."""
    path = tmp_path / "keywords.yaml"
    path.write_text("languages: zig\nindustry:\n  - space\n", encoding='utf-8')
    dictionary = load_dictionary(path)

    assert 'zig' not in dictionary.languages
    assert 'space' in dictionary.industry


def test_experience_patterns():
    """Test experience requirement phrases."""
    def matches(text):
        return [p.search(text).group(0) for p in EXPERIENCE_PATTERNS if p.search(text)]

    assert "5+ years of experience" in matches("Requires 5+ years of experience in Go")
    assert "at least 3 years" in matches("You have at least 3 years in sales")
    assert matches("Misleading text") == []


def test_education_patterns():
    """Test education requirement phrases."""
    def matches(text):
        return [p.search(text).group(0) for p in EDUCATION_PATTERNS if p.search(text)]

    assert "Bachelor's degree" in matches("Bachelor's degree required")
    assert "PhD" in matches("PhD preferred")
    assert "degree in Physics" in matches("A degree in Physics")
    # Abbreviations are never matched inside words
    assert matches("We use Microsoft Teams and Slack") == []


def test_load_dictionary_from_yaml(tmp_path):
    """Test loading extensions from a YAML file."""
    path = tmp_path / "keywords.yaml"
    path.write_text(
        "languages:\n"
        "  - Zig\n"
        "industry:\n"
        "  - space\n"
        "education_patterns:\n"
        "  - 'coding bootcamp'\n",
        encoding='utf-8',
    )
    dictionary = load_dictionary(path)

    assert 'zig' in dictionary.tech_skills
    assert 'space' in dictionary.industry
    assert len(dictionary.education_patterns) == len(EDUCATION_PATTERNS) + 1
    assert dictionary.education_patterns[-1].search("Graduated from a Coding Bootcamp")


@pytest.mark.parametrize("content", [
    "languages: [unclosed",
    "- just\n- a list\n",
    "experience_patterns:\n  - '(unclosed'\n",
])
def test_bad_file_falls_back_to_defaults(tmp_path, content):
    """Test that unreadable files leave the defaults untouched."""
    path = tmp_path / "keywords.yaml"
    path.write_text(content, encoding='utf-8')
    assert load_dictionary(path) is DEFAULT_DICTIONARY


def test_missing_file(tmp_path):
    """Test that a missing file gives the defaults."""
    assert load_dictionary(tmp_path / "nope.yaml") is DEFAULT_DICTIONARY


def test_configured_dictionary(tmp_path, monkeypatch):
    """Test that KEYWORD_DICTIONARY_PATH selects the extension file."""
    path = tmp_path / "keywords.yaml"
    path.write_text("tools:\n  - linear\n  - Retool\n", encoding='utf-8')
    monkeypatch.setenv('KEYWORD_DICTIONARY_PATH', str(path))
    reset_settings()
    reset_dictionary()

    try:
        assert 'retool' in get_dictionary().tools
        assert get_dictionary() is get_dictionary()
    finally:
        monkeypatch.delenv('KEYWORD_DICTIONARY_PATH')
        reset_settings()
        reset_dictionary()
