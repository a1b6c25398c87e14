"""
Base parser interface for job posting extraction.
"""
import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Pattern
from urllib.parse import urlparse

from core.cleaners import clean_job_title, clean_text, clean_url, truncate
from core.confidence import ConfidenceFactors, calculate_confidence
from core.logo import get_logo_with_fallback
from core.page import Page
from core.settings import get_settings
from pipeline.jsonld import JSONLDExtractor
from pipeline.result import ExtractionResult

logger = logging.getLogger(__name__)


@dataclass
class ParsedFields:
    """Raw field values found by a parser, before cleaning."""
    title: Optional[str] = None
    company: Optional[str] = None
    location: Optional[str] = None
    salary: Optional[str] = None
    description: Optional[str] = None
    company_logo_url: Optional[str] = None
    confidence_multiplier: float = 1.0


def join_extra(value: Optional[str], extra: Optional[str], separator: str = ' · ') -> Optional[str]:
    """Append extra to value unless it is already mentioned; extra alone when value is empty."""
    value = clean_text(value)
    extra = clean_text(extra)
    if not extra:
        return value
    if not value:
        return extra
    if extra.lower() in value.lower():
        return value
    return f"{value}{separator}{extra}"


class SiteParser(ABC):
    """
    Base class for job posting parsers.

    Each parser:
    1. Decides from the URL whether it handles a page
    2. Looks up raw field values with ordered selector lists
    3. Hands them to build_result() for cleaning and scoring

    extract() never raises: a failing lookup leaves only that field empty.
    """

    # Selectors tried before the shared logo selectors
    logo_selectors: List[str] = []

    def __init__(self, name: str, domains: List[str], path_patterns: Optional[List[Pattern]] = None):
        """
        Initialize parser.

        Args:
            name: Parser name (e.g., 'linkedin', 'generic')
            domains: Host names this parser is bound to
            path_patterns: Optional URL path patterns for job pages
        """
        self.name = name
        self.domains = domains
        self.path_patterns = path_patterns or []
        self.logger = logging.getLogger(f"{__name__}.{name}")
        self.jsonld_extractor = JSONLDExtractor()

    @abstractmethod
    def detect(self, url: str, page: Optional[Page] = None) -> bool:
        """
        Check if this parser handles the given URL.

        Job board parsers decide from the URL alone; page is accepted for
        interface symmetry with the generic parser.
        """
        pass

    @abstractmethod
    def extract_fields(self, page: Page, url: str) -> ParsedFields:
        """Look up raw field values on the page."""
        pass

    def extract(self, page: Page, url: str) -> ExtractionResult:
        """Extract a job posting from the page. Never raises."""
        try:
            fields = self.extract_fields(page, url)
        except Exception as e:
            self.logger.error(f"Parser {self.name} failed on {url[:80]}: {e}", exc_info=True)
            fields = ParsedFields()
        return self.build_result(page, url, fields)

    def host_matches(self, url: str) -> bool:
        """Whether the URL's host is one of this parser's domains (or a subdomain)."""
        try:
            host = (urlparse(url).hostname or '').lower()
        except ValueError:
            return False
        return any(host == domain or host.endswith('.' + domain) for domain in self.domains)

    def path_matches(self, url: str) -> bool:
        """Whether the URL's path matches one of this parser's job page patterns."""
        try:
            path = urlparse(url).path
        except ValueError:
            return False
        return any(pattern.search(path) for pattern in self.path_patterns)

    def structured_data(self, page: Page) -> Dict[str, Optional[str]]:
        """Fields from the page's JSON-LD JobPosting (all None when absent)."""
        return self.jsonld_extractor.extract(page)

    def lookup(self, field_name: str, func: Callable, *args) -> Optional[str]:
        """Run one field lookup, treating any failure as no match."""
        try:
            return func(*args)
        except Exception as e:
            self.logger.debug(f"{self.name}: {field_name} lookup failed: {e}")
            return None

    def build_result(self, page: Page, url: str, fields: ParsedFields) -> ExtractionResult:
        """Clean field values, resolve the logo and compute confidence."""
        settings = get_settings()

        title = clean_job_title(fields.title)
        company = clean_text(fields.company)
        location = clean_text(fields.location)
        salary = clean_text(fields.salary)
        description = truncate(clean_text(fields.description), settings.description_max_chars)

        logo = fields.company_logo_url
        if not logo:
            logo = self.lookup('logo', get_logo_with_fallback, page, company, self.logo_selectors)

        factors = ConfidenceFactors(
            title=title,
            company=company,
            description=description,
            location=location,
            salary=salary,
        )
        confidence = calculate_confidence(factors) * fields.confidence_multiplier
        confidence = round(min(max(confidence, 0.0), 1.0), 2)

        return ExtractionResult(
            title=title,
            company=company,
            company_logo_url=clean_url(logo, page.origin),
            location=location,
            salary=salary,
            description=description,
            source_url=clean_url(url) or url,
            source_parser_name=self.name,
            confidence=confidence,
        )

    def __repr__(self):
        return f"<{self.__class__.__name__}(name={self.name})>"
