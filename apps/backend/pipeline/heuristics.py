"""
Heuristic extractor.

Uses heading keywords, page-title patterns and content scoring to find job
fields when a page has no structured data or recognizable markup.
"""

import re
import logging
from typing import List, Optional, Tuple

from bs4 import Tag

from core.page import Page, element_text

logger = logging.getLogger(__name__)

# Words that mark a heading as a job title
JOB_TITLE_KEYWORDS = [
    'engineer', 'developer', 'manager', 'analyst', 'designer',
    'director', 'coordinator', 'specialist', 'consultant', 'lead',
    'senior', 'junior', 'associate', 'intern', 'head of',
    'vp', 'vice president', 'architect', 'administrator',
]

# Vocabulary that marks a block as job description content
JOB_CONTENT_KEYWORDS = [
    'responsibilities', 'requirements', 'qualifications', 'experience',
    'skills', 'about', 'role', 'position',
]

DESCRIPTION_SELECTORS = [
    '[class*="job-description"]',
    '[class*="jobDescription"]',
    '[class*="job_description"]',
    '[class*="position-description"]',
    '[class*="role-description"]',
    '[class*="posting-description"]',
    '[data-testid*="description"]',
    '[data-automation-id*="description"]',
    '#job-description',
    '#jobDescription',
    '[aria-label*="description" i]',
    'article',
    'main .content',
    'main',
]

# Headings that open the description body
DESCRIPTION_HEADING_RE = re.compile(
    r'job\s+description|about\s+(?:the|this)\s+(?:role|job|position|opportunity)|'
    r'the\s+role|responsibilities|what\s+you.ll\s+do|overview|job\s+summary',
    re.IGNORECASE,
)

CONTENT_BLOCK_SELECTOR = 'main, article, section, div[class*="content"], div[class*="description"]'
NAMED_CONTAINER_SELECTOR = 'main, article, [role="main"], #content, .content, #main, .main'

# Regions that never hold the posting itself
PAGE_CHROME = ['nav', 'header', 'footer', 'aside', '[role="navigation"]', '[role="banner"]']

HEADING_TAGS = ['h1', 'h2', 'h3', 'h4', 'h5', 'h6']

BULLET_RE = re.compile(r'[•\-\*]\s')

MIN_DESCRIPTION_LENGTH = 100
MIN_BLOCK_LENGTH = 200

AT_PATTERN = re.compile(r'^(.+?)\s+at\s+(.+?)(?:\s*[-|]|$)', re.IGNORECASE)
COLON_PATTERN = re.compile(r'^([^:]+):\s*(.+?)(?:\s*[-|]|$)')
SEPARATOR_RE = re.compile(r'\s*[-|–—]\s*')


class HeuristicExtractor:
    """Extracts job fields using heuristics and pattern matching."""

    def title_from_headings(self, page: Page) -> Optional[str]:
        """First h1/h2/h3 (document order) containing a job-title keyword."""
        for heading in page.select_all('h1, h2, h3'):
            lowered = heading.lower()
            if any(keyword in lowered for keyword in JOB_TITLE_KEYWORDS):
                return heading
        return None

    def parse_page_title(self, page_title: Optional[str]) -> Tuple[Optional[str], Optional[str]]:
        """
        Split a document title into (title, company).

        Tries, in order: "Title at Company", "Company: Title" and a plain
        separator split ("Title | Company", "Title - Company").
        """
        if not page_title:
            return None, None

        match = AT_PATTERN.match(page_title)
        if match:
            return match.group(1).strip(), match.group(2).strip()

        match = COLON_PATTERN.match(page_title)
        if match and len(match.group(2)) > 5:
            return match.group(2).strip(), match.group(1).strip()

        parts = SEPARATOR_RE.split(page_title)
        if len(parts) >= 2:
            title = parts[0].strip()
            company = parts[1].strip()
            if 3 < len(title) < 100:
                return title, company if 1 < len(company) < 50 else None

        return None, None

    def find_description(self, page: Page) -> Optional[str]:
        """
        Locate the description body, trying in order:
        1. Known description selectors
        2. The section under a description-like heading
        3. The best-scoring content block
        4. The largest named content container
        5. The whole page minus navigation, header, footer and asides
        """
        strategies = [
            self._description_from_selectors,
            self._description_from_heading,
            self.best_content_block,
            self._description_from_containers,
            self._description_from_page,
        ]
        for strategy in strategies:
            try:
                description = strategy(page)
            except Exception as e:
                logger.debug(f"Description strategy {strategy.__name__} failed: {e}")
                continue
            if description:
                logger.debug(f"Description found via {strategy.__name__} ({len(description)} chars)")
                return description
        return None

    def _description_from_selectors(self, page: Page) -> Optional[str]:
        for selector in DESCRIPTION_SELECTORS:
            text = page.select_text(selector)
            if text and len(text) >= MIN_DESCRIPTION_LENGTH:
                return text
        return None

    def _description_from_heading(self, page: Page) -> Optional[str]:
        for heading in page.soup.find_all(HEADING_TAGS + ['strong']):
            heading_text = element_text(heading) or ''
            if not DESCRIPTION_HEADING_RE.search(heading_text):
                continue

            # <strong> headings usually sit inside a <p>
            anchor = heading.parent if heading.name == 'strong' and heading.parent else heading
            parts = []
            for sibling in anchor.find_next_siblings():
                if not isinstance(sibling, Tag):
                    continue
                if sibling.name in HEADING_TAGS and not DESCRIPTION_HEADING_RE.search(element_text(sibling) or ''):
                    break
                text = element_text(sibling)
                if text:
                    parts.append(text)

            section = '\n'.join(parts)
            if len(section) >= MIN_DESCRIPTION_LENGTH:
                return section
        return None

    def score_block(self, text: str) -> int:
        """Length plus bonuses for job vocabulary and bullet points."""
        lowered = text.lower()
        score = len(text)
        score += 100 * sum(1 for keyword in JOB_CONTENT_KEYWORDS if keyword in lowered)
        score += 10 * len(BULLET_RE.findall(text))
        return score

    def best_content_block(self, page: Page) -> Optional[str]:
        """Highest-scoring content block of at least MIN_BLOCK_LENGTH chars."""
        candidates: List[Tuple[int, str]] = []
        for element in page.select_elements(CONTENT_BLOCK_SELECTOR):
            text = element.get_text('\n', strip=True)
            if len(text) < MIN_BLOCK_LENGTH:
                continue
            # List items count as bullets too
            score = self.score_block(text) + 10 * len(element.find_all('li'))
            candidates.append((score, text))

        if not candidates:
            return None
        # max() keeps the first of equally scored blocks
        return max(candidates, key=lambda c: c[0])[1]

    def _description_from_containers(self, page: Page) -> Optional[str]:
        texts = [
            element.get_text('\n', strip=True)
            for element in page.select_elements(NAMED_CONTAINER_SELECTOR)
        ]
        texts = [t for t in texts if t]
        if not texts:
            return None
        return max(texts, key=len)

    def _description_from_page(self, page: Page) -> Optional[str]:
        text = page.visible_text(exclude=PAGE_CHROME)
        return text or None
