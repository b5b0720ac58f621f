"""
Heuristic text extraction for note titles and summaries.

Pure, synchronous helpers used when no model answer is available.
"""

from codenote.core.extractor.extractor import HeuristicExtractor
from codenote.core.extractor.stopwords import (
    ENGLISH,
    LOCALE_PROFILES,
    POLISH,
    LocaleProfile,
    get_locale_profile,
)

__all__ = [
    "HeuristicExtractor",
    "LocaleProfile",
    "LOCALE_PROFILES",
    "ENGLISH",
    "POLISH",
    "get_locale_profile",
]
