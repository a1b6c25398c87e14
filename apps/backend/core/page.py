"""
Page representation used by every parser.

Wraps a parsed HTML document and exposes the lookups parsers need:
CSS selector text/attribute queries, embedded JSON-LD blocks, meta tags
and visible text. Every lookup swallows selector and traversal errors and
reports them as "no match".
"""

import logging
from typing import Iterable, List, Optional
from urllib.parse import urlparse

from bs4 import BeautifulSoup, Tag

logger = logging.getLogger(__name__)

# Elements whose text never reaches the reader
INVISIBLE_TAGS = ['script', 'style', 'noscript', 'template', 'svg']


def element_text(element: Tag) -> Optional[str]:
    """Text content of an element, trimmed; None when empty."""
    text = element.get_text(' ', strip=True)
    return text or None


class Page:
    """A fetched webpage: parsed document plus the URL it came from."""

    def __init__(self, html: str, url: str = '', parser: str = 'lxml'):
        self.html = html or ''
        self.url = url or ''
        self._parser = parser
        self.soup = BeautifulSoup(self.html, parser)

    @classmethod
    def from_html(cls, html: str, url: str = '') -> 'Page':
        return cls(html, url)

    @property
    def origin(self) -> Optional[str]:
        """Scheme and host of the page URL, e.g. https://example.com"""
        try:
            parsed = urlparse(self.url)
        except ValueError:
            return None
        if not parsed.scheme or not parsed.netloc:
            return None
        return f"{parsed.scheme}://{parsed.netloc}"

    @property
    def title(self) -> Optional[str]:
        """Document <title> text."""
        tag = self.soup.find('title')
        if tag is None:
            return None
        return element_text(tag)

    def select_elements(self, selector: str) -> List[Tag]:
        try:
            return self.soup.select(selector)
        except Exception as e:
            logger.debug(f"Selector lookup failed for {selector!r}: {e}")
            return []

    def select_element(self, selector: str) -> Optional[Tag]:
        try:
            return self.soup.select_one(selector)
        except Exception as e:
            logger.debug(f"Selector lookup failed for {selector!r}: {e}")
            return None

    def exists(self, selector: str) -> bool:
        return self.select_element(selector) is not None

    def select_text(self, selector: str) -> Optional[str]:
        """Text of the first element matching selector."""
        element = self.select_element(selector)
        if element is None:
            return None
        return element_text(element)

    def select_attr(self, selector: str, attr: str) -> Optional[str]:
        """Attribute value of the first element matching selector."""
        element = self.select_element(selector)
        if element is None:
            return None
        value = element.get(attr)
        if isinstance(value, list):
            value = ' '.join(value)
        if not value or not str(value).strip():
            return None
        return str(value).strip()

    def select_all(self, selector: str) -> List[str]:
        """Non-empty texts of all elements matching selector, in document order."""
        texts = []
        for element in self.select_elements(selector):
            text = element_text(element)
            if text:
                texts.append(text)
        return texts

    def select_first(self, selectors: Iterable[str]) -> Optional[str]:
        """Try selectors in order; return the first non-empty text."""
        for selector in selectors:
            text = self.select_text(selector)
            if text:
                return text
        return None

    def select_first_attr(self, selectors: Iterable[str], attr: str) -> Optional[str]:
        """Try selectors in order; return the first non-empty attribute value."""
        for selector in selectors:
            value = self.select_attr(selector, attr)
            if value:
                return value
        return None

    def meta(self, key: str) -> Optional[str]:
        """Content of a meta tag addressed by property= or name=."""
        return (
            self.select_attr(f'meta[property="{key}"]', 'content') or
            self.select_attr(f'meta[name="{key}"]', 'content')
        )

    def structured_data_blocks(self) -> List[str]:
        """Raw text of every application/ld+json script on the page."""
        blocks = []
        try:
            scripts = self.soup.find_all('script', type='application/ld+json')
        except Exception as e:
            logger.debug(f"Could not enumerate JSON-LD scripts: {e}")
            return blocks
        for script in scripts:
            raw = script.string if script.string is not None else script.get_text()
            if raw and raw.strip():
                blocks.append(raw)
        return blocks

    def visible_text(self, exclude: Iterable[str] = ()) -> str:
        """
        Visible text of the page, one block per line.

        Args:
            exclude: Additional CSS selectors whose subtrees are dropped
                (e.g. 'nav', 'footer').
        """
        # Work on a private copy so the shared soup stays intact
        soup = BeautifulSoup(self.html, self._parser)
        for tag in soup.find_all(INVISIBLE_TAGS):
            tag.decompose()
        for selector in exclude:
            try:
                for element in soup.select(selector):
                    element.decompose()
            except Exception as e:
                logger.debug(f"Could not strip {selector!r}: {e}")
        root = soup.body or soup
        return root.get_text('\n', strip=True)

    @property
    def text(self) -> str:
        return self.visible_text()

    def __repr__(self):
        return f"<Page(url={self.url[:80]!r}, bytes={len(self.html)})>"
