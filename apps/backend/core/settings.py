"""
Extraction settings.

Controls description/salary scan bounds, logo fallbacks and the optional
keyword dictionary extension file. Values come from environment variables.
"""

import os
import logging
from typing import Optional

logger = logging.getLogger(__name__)

DEFAULT_DESCRIPTION_MAX_CHARS = 5000
DEFAULT_SALARY_SCAN_CHARS = 10000


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = int(raw)
    except ValueError:
        logger.warning(f"Invalid integer for {name}: {raw!r}. Using default {default}")
        return default
    if value <= 0:
        logger.warning(f"{name} must be positive, got {value}. Using default {default}")
        return default
    return value


class ExtractionSettings:
    """Runtime settings for the extraction pipeline."""

    def __init__(self):
        self.description_max_chars = _env_int('EXTRACTION_DESCRIPTION_MAX_CHARS', DEFAULT_DESCRIPTION_MAX_CHARS)
        self.salary_scan_chars = _env_int('EXTRACTION_SALARY_SCAN_CHARS', DEFAULT_SALARY_SCAN_CHARS)
        self.logo_service_fallback = os.getenv('EXTRACTION_LOGO_SERVICE_FALLBACK', 'true').lower() == 'true'
        self.keyword_dictionary_path = os.getenv('KEYWORD_DICTIONARY_PATH') or None

        logger.debug(
            f"ExtractionSettings: description_max={self.description_max_chars}, "
            f"salary_scan={self.salary_scan_chars}, logo_service={self.logo_service_fallback}, "
            f"dictionary={self.keyword_dictionary_path}"
        )


# Singleton instance
_settings: Optional[ExtractionSettings] = None


def get_settings() -> ExtractionSettings:
    """Get singleton settings instance."""
    global _settings
    if _settings is None:
        _settings = ExtractionSettings()
    return _settings


def reset_settings():
    """Drop the cached settings so the environment is read again."""
    global _settings
    _settings = None
