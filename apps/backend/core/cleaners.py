"""
Field cleaning utilities shared by all parsers.

Normalizes whitespace, bounds length, resolves URLs and strips job-board
boilerplate so every parser hands back values in the same shape.
"""

import re
import logging
from typing import Optional
from urllib.parse import urljoin, urlparse

logger = logging.getLogger(__name__)

WHITESPACE_RE = re.compile(r'\s+')

# Boilerplate job boards append to titles
TITLE_SUFFIX_PATTERNS = [
    re.compile(r'\s*[-|]\s*(?:Apply|Apply Now|Job Details).*$', re.IGNORECASE),
    re.compile(r'\s*[-|]\s*LinkedIn.*$', re.IGNORECASE),
    re.compile(r'\s*[-|]\s*Indeed.*$', re.IGNORECASE),
    re.compile(r'\s*\(.*ID:?\s*\d+.*\)$', re.IGNORECASE),
]

# Hosts that keep the company slug in the first path segment
PATH_SLUG_HOSTS = ['lever', 'greenhouse']

GENERIC_SUBDOMAINS = ['jobs', 'careers']


def clean_text(text: Optional[str]) -> Optional[str]:
    """Collapse runs of whitespace and trim. Empty results become None."""
    if not text:
        return None
    cleaned = WHITESPACE_RE.sub(' ', str(text)).strip()
    return cleaned or None


def truncate(text: Optional[str], max_length: int) -> Optional[str]:
    """Bound text to max_length characters, marking the cut with '...'."""
    if not text:
        return None
    if len(text) <= max_length:
        return text
    return text[:max(max_length - 3, 0)] + '...'


def clean_url(url: Optional[str], base_url: Optional[str] = None) -> Optional[str]:
    """
    Make a URL absolute.

    Protocol-relative URLs get https, relative paths are resolved against
    base_url. Anything that cannot be parsed is returned unchanged.
    """
    if not url:
        return None
    url = url.strip()
    if not url:
        return None
    try:
        if url.startswith('//'):
            return 'https:' + url
        parsed = urlparse(url)
        if not parsed.scheme:
            if base_url:
                return urljoin(base_url, url)
            return url
        return parsed.geturl()
    except ValueError as e:
        logger.debug(f"Could not clean URL {url!r}: {e}")
        return url


def clean_job_title(title: Optional[str]) -> Optional[str]:
    """Remove common job posting suffixes ("- Apply Now", "| LinkedIn", ...)."""
    if not title:
        return None
    cleaned = title
    for pattern in TITLE_SUFFIX_PATTERNS:
        cleaned = pattern.sub('', cleaned)
    return clean_text(cleaned)


def _slug_to_title(slug: str) -> str:
    # "my-company" -> "My Company"
    return re.sub(r'\b\w', lambda m: m.group(0).upper(), slug.replace('-', ' '))


def extract_company_from_url(url: Optional[str]) -> Optional[str]:
    """
    Guess the company name from a URL when the page gives no better signal.

    Lever/Greenhouse boards carry the company slug in the path; elsewhere
    the first meaningful host label is used.
    """
    if not url:
        return None
    try:
        parsed = urlparse(url)
        hostname = (parsed.hostname or '').lower()
    except ValueError:
        return None
    if not hostname:
        return None

    parts = hostname.split('.')

    if any(host in parts for host in PATH_SLUG_HOSTS):
        path_parts = [p for p in parsed.path.split('/') if p]
        if path_parts:
            return _slug_to_title(path_parts[0])

    company_part = parts[1] if parts[0] == 'www' and len(parts) > 1 else parts[0]
    if company_part and company_part not in GENERIC_SUBDOMAINS:
        return company_part[0].upper() + company_part[1:]

    return None
