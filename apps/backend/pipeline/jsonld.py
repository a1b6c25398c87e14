"""
JSON-LD extractor.

Extracts job fields from structured JSON-LD data (Schema.org JobPosting).

Two layers:
- parse_job_posting_node() turns one parsed JobPosting object into fields
- find_job_posting() walks a page's JSON-LD blocks (top-level objects,
  arrays and one level of @graph) and returns the first posting with a title
"""

import html
import json
import logging
from typing import Any, Dict, Iterator, List, Optional

from bs4 import BeautifulSoup

from core.page import Page

logger = logging.getLogger(__name__)

CURRENCY_SYMBOLS = {
    'USD': '$',
    'EUR': '€',
    'GBP': '£',
}

FIELDS = ('title', 'company', 'location', 'salary', 'description')


def is_job_posting(item: Any) -> bool:
    """Check if JSON-LD item is a JobPosting."""
    if not isinstance(item, dict):
        return False
    item_type = item.get('@type', '')
    if isinstance(item_type, str):
        return 'JobPosting' in item_type
    elif isinstance(item_type, list):
        return any('JobPosting' in str(t) for t in item_type)
    return False


def _text(value: Any) -> Optional[str]:
    if value is None or isinstance(value, (dict, list)):
        return None
    text = str(value).strip()
    return text or None


def _parse_organization(org: Any) -> Optional[str]:
    if isinstance(org, dict):
        return _text(org.get('name')) or _text(org.get('legalName'))
    return _text(org)


def _parse_address(addr: Any) -> Optional[str]:
    if isinstance(addr, dict):
        parts = []
        for key in ('addressLocality', 'addressRegion', 'addressCountry'):
            value = addr.get(key)
            if isinstance(value, dict):
                # addressCountry is sometimes a Country node
                value = value.get('name')
            value = _text(value)
            if value:
                parts.append(value)
        return ', '.join(parts) if parts else None
    return _text(addr)


def _parse_single_location(loc: Any) -> Optional[str]:
    if isinstance(loc, dict):
        if 'address' in loc:
            return _parse_address(loc['address'])
        return _text(loc.get('name'))
    return _text(loc)


def _parse_location(node: Dict) -> Optional[str]:
    loc = node.get('jobLocation')
    locations = []
    if isinstance(loc, list):
        for entry in loc:
            parsed = _parse_single_location(entry)
            if parsed and parsed not in locations:
                locations.append(parsed)
    elif loc is not None:
        parsed = _parse_single_location(loc)
        if parsed:
            locations.append(parsed)

    if locations:
        return '; '.join(locations)

    if str(node.get('jobLocationType', '')).upper() == 'TELECOMMUTE':
        return 'Remote'
    return None


def _format_amount(value: Any) -> Optional[str]:
    try:
        number = float(str(value).replace(',', ''))
    except (TypeError, ValueError):
        return _text(value)
    if number.is_integer():
        return f"{int(number):,}"
    return f"{number:,.2f}"


def _with_currency(amount: str, currency: Optional[str]) -> str:
    code = (currency or 'USD').upper()
    symbol = CURRENCY_SYMBOLS.get(code)
    if symbol:
        return f"{symbol}{amount}"
    return f"{amount} {code}"


def _parse_salary(salary: Any) -> Optional[str]:
    if salary is None:
        return None
    if isinstance(salary, (int, float)) and not isinstance(salary, bool):
        return _with_currency(_format_amount(salary), None)
    if not isinstance(salary, dict):
        return _text(salary)

    currency = _text(salary.get('currency'))
    value = salary.get('value', salary)
    unit = None

    if isinstance(value, dict):
        unit = _text(value.get('unitText'))
        low = value.get('minValue')
        high = value.get('maxValue')
        if low is not None and high is not None:
            text = (
                f"{_with_currency(_format_amount(low), currency)} - "
                f"{_with_currency(_format_amount(high), currency)}"
            )
        elif value.get('value') is not None:
            text = _with_currency(_format_amount(value['value']), currency)
        elif low is not None or high is not None:
            text = _with_currency(_format_amount(low if low is not None else high), currency)
        else:
            return None
    elif value is not None:
        text = _with_currency(_format_amount(value), currency)
    else:
        return None

    if unit:
        text += f"/{unit.lower()}"
    return text


def _parse_description(value: Any) -> Optional[str]:
    text = _text(value)
    if text:
        text = html.unescape(text).strip() or None
    if text and '<' in text:
        # Descriptions are often HTML
        text = BeautifulSoup(text, 'lxml').get_text(' ', strip=True) or None
    return text


def parse_job_posting_node(node: Dict) -> Dict[str, Optional[str]]:
    """
    Extract fields from one JobPosting object.

    Returns a dict with keys title, company, location, salary, description;
    missing values are None.
    """
    if not isinstance(node, dict):
        return dict.fromkeys(FIELDS)

    return {
        'title': _text(node.get('title')) or _text(node.get('name')),
        'company': _parse_organization(node.get('hiringOrganization')),
        'location': _parse_location(node),
        'salary': _parse_salary(node.get('baseSalary')),
        'description': _parse_description(node.get('description')),
    }


def iter_candidate_nodes(data: Any) -> Iterator[Dict]:
    """Top-level objects, array items and one level of @graph, in document order."""
    items = data if isinstance(data, list) else [data]
    for item in items:
        if not isinstance(item, dict):
            continue
        yield item
        graph = item.get('@graph')
        if isinstance(graph, list):
            for graph_item in graph:
                if isinstance(graph_item, dict):
                    yield graph_item


def parse_blocks(page: Page) -> List[Any]:
    """Parsed JSON of every ld+json block; malformed blocks are skipped."""
    parsed = []
    for raw in page.structured_data_blocks():
        try:
            parsed.append(json.loads(raw))
        except (ValueError, TypeError, RecursionError) as e:
            logger.debug(f"Failed to parse JSON-LD on {page.url[:80]}: {e}")
            continue
    return parsed


def find_job_posting(page: Page) -> Dict[str, Optional[str]]:
    """
    Fields of the first JobPosting on the page that has a title.

    Returns an all-None dict when the page has no usable posting.
    """
    for data in parse_blocks(page):
        for node in iter_candidate_nodes(data):
            if not is_job_posting(node):
                continue
            fields = parse_job_posting_node(node)
            if fields['title']:
                return fields
    return dict.fromkeys(FIELDS)


class JSONLDExtractor:
    """Extracts job data from JSON-LD structured data."""

    def extract(self, page: Page) -> Dict[str, Optional[str]]:
        try:
            return find_job_posting(page)
        except Exception as e:
            logger.warning(f"JSON-LD extraction failed for {page.url[:80]}: {e}")
            return dict.fromkeys(FIELDS)
