"""
Main extraction entry point.

Selects a parser for the page and returns one ExtractionResult:
1. Job board parser (LinkedIn, Indeed, Greenhouse, Lever, Workday,
   Glassdoor, Wellfound) chosen by URL
2. Generic parser when no board matches or the board result is thin
3. Empty zero-confidence result if everything fails
"""

import logging
from typing import Optional

from core.page import Page
from parsers.registry import ParserRegistry, get_parser_registry

from .result import ExtractionResult

logger = logging.getLogger(__name__)


class Extractor:
    """Main extraction orchestrator."""

    def __init__(self, registry: Optional[ParserRegistry] = None):
        self.registry = registry or get_parser_registry()

    def extract(self, page: Page, url: Optional[str] = None) -> ExtractionResult:
        """
        Extract a job posting from a page. Never raises.

        Args:
            page: Parsed page
            url: Source URL (defaults to page.url)
        """
        url = url or page.url
        try:
            result = self.registry.scrape(page, url)
        except Exception as e:
            logger.error(f"Extraction failed for {url[:80]}: {e}", exc_info=True)
            return ExtractionResult.empty(url, 'generic')

        logger.debug(
            f"Extracted {url[:80]} via {result.source_parser_name} "
            f"(confidence={result.confidence:.2f}, {result.confidence_label})"
        )
        return result

    def extract_from_html(self, html: str, url: str) -> ExtractionResult:
        """Parse raw HTML and extract from it."""
        try:
            page = Page.from_html(html, url)
        except Exception as e:
            logger.error(f"Could not parse HTML for {url[:80]}: {e}", exc_info=True)
            return ExtractionResult.empty(url, 'generic')
        return self.extract(page, url)


def extract_job_posting(page: Page, url: Optional[str] = None) -> ExtractionResult:
    """Extract a job posting using the process-wide parser registry."""
    return Extractor().extract(page, url)


def extract_job_posting_from_html(html: str, url: str) -> ExtractionResult:
    return Extractor().extract_from_html(html, url)
