"""
Job posting parsers.

One parser per supported job board plus a generic fallback, selected by
the parser registry.
"""

from .base import ParsedFields, SiteParser
from .generic import GenericParser
from .registry import ParserRegistry, get_parser_registry

__all__ = [
    'GenericParser',
    'ParsedFields',
    'ParserRegistry',
    'SiteParser',
    'get_parser_registry',
]
