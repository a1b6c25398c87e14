"""
Run job posting extraction on a saved HTML file or a live URL.

Usage:
    python scripts/extract_posting.py --url https://jobs.lever.co/acme/123
    python scripts/extract_posting.py --url https://example.com/job --html-file saved.html --keywords
"""

import os
import sys
import json
import logging
import argparse

# Add backend to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import httpx
from dotenv import load_dotenv

from core.page import Page
from keywords import compute_coverage, extract_keywords
from pipeline.extractor import Extractor

logger = logging.getLogger(__name__)

USER_AGENT = "Mozilla/5.0 (compatible; JobPostingExtractor/1.0)"


def fetch_html(url: str) -> str:
    """Fetch a page. Raises httpx.HTTPError on failure."""
    with httpx.Client(timeout=30.0, follow_redirects=True, headers={"User-Agent": USER_AGENT}) as client:
        response = client.get(url)
        response.raise_for_status()
        return response.text


def load_html(args) -> str:
    if args.html_file:
        with open(args.html_file, 'r', encoding='utf-8') as f:
            return f.read()
    return fetch_html(args.url)


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description='Extract a job posting from a page')
    parser.add_argument('--url', required=True, help='Posting URL (used for parser selection)')
    parser.add_argument('--html-file', help='Read HTML from this file instead of fetching the URL')
    parser.add_argument('--keywords', action='store_true', help='Also extract keywords and coverage')
    parser.add_argument('--verbose', '-v', action='store_true', help='Debug logging')
    args = parser.parse_args(argv)

    # Load .env if available
    env_path = os.path.join(os.path.dirname(__file__), '..', '.env')
    if os.path.exists(env_path):
        load_dotenv(env_path)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    try:
        html = load_html(args)
    except (OSError, httpx.HTTPError) as e:
        logger.error(f"Could not load page: {e}")
        return 1

    result = Extractor().extract(Page.from_html(html, args.url), args.url)
    output = {'posting': result.to_dict(), 'confidence_label': result.confidence_label}

    if args.keywords:
        keywords = extract_keywords(result.description)
        output['keywords'] = [k.to_dict() for k in keywords]
        output['coverage'] = compute_coverage(keywords).to_dict()

    print(json.dumps(output, indent=2, ensure_ascii=False))
    return 0


if __name__ == '__main__':
    sys.exit(main())
