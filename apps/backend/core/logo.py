"""
Company logo discovery.

Prefers an explicit image near the company name, then a favicon-service URL
derived from the company name, then the page's own favicon.
"""

import re
import logging
from typing import Iterable, Optional
from urllib.parse import quote

from .cleaners import clean_url
from .page import Page
from .settings import get_settings

logger = logging.getLogger(__name__)

LOGO_SELECTORS = [
    '[class*="company-logo"] img',
    '[class*="companyLogo"] img',
    '[class*="company_logo"] img',
    '[class*="employer-logo"] img',
    '[class*="employerLogo"] img',
    '.logo img',
    'header img[alt*="logo" i]',
    'img[alt*="company" i][alt*="logo" i]',
]

FAVICON_SELECTORS = [
    'link[rel="icon"]',
    'link[rel="shortcut icon"]',
    'link[rel="apple-touch-icon"]',
]

FAVICON_SERVICE_URL = 'https://www.google.com/s2/favicons?domain={domain}&sz={size}'

# Companies whose domain is not simply "<name>.com"
KNOWN_COMPANY_DOMAINS = {
    'google': 'google.com',
    'alphabet': 'abc.xyz',
    'meta': 'meta.com',
    'facebook': 'facebook.com',
    'amazon': 'amazon.com',
    'apple': 'apple.com',
    'microsoft': 'microsoft.com',
    'netflix': 'netflix.com',
    'airbnb': 'airbnb.com',
    'uber': 'uber.com',
    'spotify': 'spotify.com',
    'salesforce': 'salesforce.com',
    'stripe': 'stripe.com',
    'shopify': 'shopify.com',
    'zoom': 'zoom.us',
    'linkedin': 'linkedin.com',
    'twitter': 'twitter.com',
    'x': 'x.com',
    'snap': 'snap.com',
    'github': 'github.com',
    'gitlab': 'gitlab.com',
    'atlassian': 'atlassian.com',
    'notion': 'notion.so',
    'figma': 'figma.com',
    'adobe': 'adobe.com',
    'oracle': 'oracle.com',
    'ibm': 'ibm.com',
    'nvidia': 'nvidia.com',
    'hp': 'hp.com',
    'hewlett packard': 'hp.com',
    'square': 'squareup.com',
    'block': 'block.xyz',
    'peloton': 'onepeloton.com',
    'datadog': 'datadoghq.com',
    'elastic': 'elastic.co',
    'kubernetes': 'kubernetes.io',
    'red hat': 'redhat.com',
    'aws': 'aws.amazon.com',
    'amazon web services': 'aws.amazon.com',
    'gcp': 'cloud.google.com',
    'google cloud': 'cloud.google.com',
    'azure': 'azure.microsoft.com',
    'ey': 'ey.com',
    'ernst & young': 'ey.com',
    'goldman sachs': 'goldmansachs.com',
    'morgan stanley': 'morganstanley.com',
    'bank of america': 'bankofamerica.com',
    'wells fargo': 'wellsfargo.com',
    'citi': 'citi.com',
    'citibank': 'citi.com',
    'capital one': 'capitalone.com',
    'american express': 'americanexpress.com',
    'amex': 'americanexpress.com',
}

LEGAL_SUFFIX_RE = re.compile(
    r'\s*(inc\.?|llc\.?|ltd\.?|corp\.?|corporation|company|co\.?|limited|gmbh|ag|sa|plc)\.?\s*$',
    re.IGNORECASE,
)


def extract_logo(page: Page, custom_selectors: Optional[Iterable[str]] = None) -> Optional[str]:
    """Find a logo image on the page (custom selectors first, og:image last)."""
    selectors = list(custom_selectors or []) + LOGO_SELECTORS

    logo_url = page.select_first_attr(selectors, 'src')
    if not logo_url:
        # Lazy-loaded images
        logo_url = page.select_first_attr(selectors, 'data-src')
    if not logo_url:
        logo_url = page.meta('og:image')

    return clean_url(logo_url, page.origin)


def get_favicon_url(page: Page) -> Optional[str]:
    """Favicon declared by the page, else the conventional /favicon.ico."""
    for selector in FAVICON_SELECTORS:
        href = page.select_attr(selector, 'href')
        if href:
            return clean_url(href, page.origin)

    origin = page.origin
    if origin:
        return f"{origin}/favicon.ico"
    return None


def company_to_domain(company: Optional[str]) -> Optional[str]:
    """Best-guess web domain for a company name."""
    if not company:
        return None

    normalized = company.lower().strip()

    if normalized in KNOWN_COMPANY_DOMAINS:
        return KNOWN_COMPANY_DOMAINS[normalized]

    # "Google Inc" should still resolve through the table
    for key, domain in KNOWN_COMPANY_DOMAINS.items():
        if normalized.startswith(key + ' ') or normalized.startswith(key + ','):
            return domain

    cleaned = LEGAL_SUFFIX_RE.sub('', normalized)
    cleaned = re.sub(r'[^a-z0-9\s]', '', cleaned).strip()
    cleaned = re.sub(r'\s+', '', cleaned)

    if len(cleaned) < 2:
        return None

    return f"{cleaned}.com"


def get_company_logo_url(company: Optional[str], size: int = 128) -> Optional[str]:
    """Favicon-service URL for the company's guessed domain. No request is made."""
    domain = company_to_domain(company)
    if not domain:
        return None
    return FAVICON_SERVICE_URL.format(domain=quote(domain), size=size)


def get_logo_with_fallback(
    page: Page,
    company: Optional[str],
    custom_selectors: Optional[Iterable[str]] = None
) -> Optional[str]:
    """
    Resolve a logo URL using, in order:
    1. An image scraped from the page
    2. The favicon service for the company's domain (if enabled)
    3. The page favicon
    """
    try:
        scraped = extract_logo(page, custom_selectors)
        if scraped:
            return scraped

        if company and get_settings().logo_service_fallback:
            service_logo = get_company_logo_url(company)
            if service_logo:
                return service_logo

        return get_favicon_url(page)
    except Exception as e:
        logger.debug(f"Logo lookup failed for {page.url[:80]}: {e}")
        return None
