"""
Parser registry for selecting job posting parsers.

Parsers are kept in a fixed, hand-ordered list (most specific job boards
first). The generic parser is always the last resort, so selection never
comes back empty.
"""
import logging
from typing import Dict, List, Optional

from core.page import Page
from pipeline.result import ExtractionResult

from .base import SiteParser
from .generic import GenericParser

logger = logging.getLogger(__name__)

# Minimum quality for a job board result to be used without the generic fallback
MIN_QUALITY_SCORE = 0.5

# Weights for result quality, summing to 1
QUALITY_WEIGHTS = {
    'title': 0.3,
    'company': 0.25,
    'description': 0.25,
    'location': 0.1,
    'salary': 0.1,
}

# Confidence discount for generic results replacing a job board's
GENERIC_MERGE_DISCOUNT = 0.9

# Global registry instance
_registry: Optional['ParserRegistry'] = None


def _filled(value: Optional[str], min_length: int = 0) -> bool:
    return bool(value and len(value.strip()) > min_length)


def has_minimum_data(result: ExtractionResult) -> bool:
    """A title plus either a company or a description over 50 chars."""
    return _filled(result.title) and (_filled(result.company) or _filled(result.description, 50))


def quality_score(result: ExtractionResult) -> float:
    """Weighted share of fields present, between 0 and 1."""
    score = 0.0
    if _filled(result.title):
        score += QUALITY_WEIGHTS['title']
    if _filled(result.company):
        score += QUALITY_WEIGHTS['company']
    if _filled(result.description, 100):
        score += QUALITY_WEIGHTS['description']
    if _filled(result.location):
        score += QUALITY_WEIGHTS['location']
    if _filled(result.salary):
        score += QUALITY_WEIGHTS['salary']
    return round(score, 2)


def merge_results(primary: ExtractionResult, secondary: ExtractionResult, **overrides) -> ExtractionResult:
    """Primary's values where present, secondary's otherwise."""
    merged = primary.with_changes(
        title=primary.title or secondary.title,
        company=primary.company or secondary.company,
        company_logo_url=primary.company_logo_url or secondary.company_logo_url,
        location=primary.location or secondary.location,
        salary=primary.salary or secondary.salary,
        description=primary.description or secondary.description,
        source_url=primary.source_url or secondary.source_url,
        confidence=max(primary.confidence, secondary.confidence),
    )
    return merged.with_changes(**overrides) if overrides else merged


class ParserRegistry:
    """Registry for job posting parsers"""

    def __init__(self):
        self._parsers: List[SiteParser] = []
        self._parsers_by_name: Dict[str, SiteParser] = {}
        self.generic = GenericParser()

    def register(self, parser: SiteParser):
        """Register a job board parser (appended after those already registered)"""
        if parser.name in self._parsers_by_name:
            logger.warning(f"Parser {parser.name} already registered, replacing")
            self._parsers = [p for p in self._parsers if p.name != parser.name]

        self._parsers_by_name[parser.name] = parser
        self._parsers.append(parser)

        logger.info(f"Registered parser: {parser.name}")

    def get_parser(self, name: str) -> Optional[SiteParser]:
        """Get parser by name"""
        if name == self.generic.name:
            return self.generic
        return self._parsers_by_name.get(name)

    def select_parser(self, url: str, page: Optional[Page] = None) -> SiteParser:
        """
        Return the first parser whose detector accepts the URL.

        Falls back to the generic parser when no job board matches.
        """
        for parser in self._parsers:
            try:
                if parser.detect(url, page):
                    logger.debug(f"Selected parser: {parser.name} for {url[:80]}")
                    return parser
            except Exception as e:
                logger.warning(f"Parser {parser.name} detection error: {e}")

        logger.debug(f"No job board parser for {url[:80]}, using generic")
        return self.generic

    def _run_generic(self, page: Page, url: str) -> ExtractionResult:
        try:
            return self.generic.extract(page, url)
        except Exception as e:
            logger.error(f"Generic parser extraction error: {e}", exc_info=True)
            return ExtractionResult.empty(url, self.generic.name)

    def scrape(self, page: Page, url: str) -> ExtractionResult:
        """
        Extract a job posting with the selected parser.

        Strategy:
        1. Run the selected job board parser
        2. If its result has minimum data and quality >= 0.5, use it
        3. Otherwise run the generic parser and use or merge its result

        Never raises.
        """
        parser = self.select_parser(url, page)

        if parser is self.generic:
            return self._run_generic(page, url)

        try:
            site_result = parser.extract(page, url)
        except Exception as e:
            logger.error(f"Parser {parser.name} extraction error: {e}", exc_info=True)
            return self._run_generic(page, url).with_changes(
                source_parser_name=f"{parser.name}+{self.generic.name}"
            )

        site_quality = quality_score(site_result)
        if has_minimum_data(site_result) and site_quality >= MIN_QUALITY_SCORE:
            logger.info(
                f"Parser {parser.name} extracted posting (confidence={site_result.confidence:.2f})"
            )
            return site_result

        generic_result = self._run_generic(page, url)
        generic_quality = quality_score(generic_result)
        fallback_name = f"{parser.name}+{self.generic.name}"

        if not has_minimum_data(site_result):
            logger.info(f"Parser {parser.name} found too little, using generic result")
            return generic_result.with_changes(source_parser_name=fallback_name)

        if generic_quality > site_quality:
            logger.info(
                f"Generic result better than {parser.name} "
                f"({generic_quality:.2f} > {site_quality:.2f}), merging"
            )
            return merge_results(
                site_result,
                generic_result,
                source_parser_name=fallback_name,
                confidence=max(
                    site_result.confidence,
                    round(generic_result.confidence * GENERIC_MERGE_DISCOUNT, 2),
                ),
            )

        return merge_results(site_result, generic_result)

    def list_parsers(self) -> List[Dict]:
        """List all parsers in selection order, generic last"""
        return [
            {
                'name': parser.name,
                'domains': list(parser.domains),
                'class': parser.__class__.__name__,
            }
            for parser in self._parsers + [self.generic]
        ]


def get_parser_registry() -> ParserRegistry:
    """Get or create the global parser registry"""
    global _registry
    if _registry is None:
        _registry = ParserRegistry()
        # Auto-register built-in parsers
        _register_builtin_parsers(_registry)
    return _registry


def _register_builtin_parsers(registry: ParserRegistry):
    """Register all built-in job board parsers, in selection order"""
    from .linkedin import LinkedInParser
    from .indeed import IndeedParser
    from .greenhouse import GreenhouseParser
    from .lever import LeverParser
    from .workday import WorkdayParser
    from .glassdoor import GlassdoorParser
    from .wellfound import WellfoundParser

    for parser_class in (
        LinkedInParser,
        IndeedParser,
        GreenhouseParser,
        LeverParser,
        WorkdayParser,
        GlassdoorParser,
        WellfoundParser,
    ):
        registry.register(parser_class())
