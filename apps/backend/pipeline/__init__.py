"""
Job posting extraction pipeline.

Turns a job posting page into a structured, confidence-scored record using
structured data, job board parsers and heuristic fallbacks.
"""

__version__ = "1.0.0"
