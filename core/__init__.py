"""
Core dictionary service components.

This package contains the fundamental building blocks of the dictionary service:
- Configuration
- Dictionary entry records and the Google dictionary panel parser
- User-agent pool and request rate limiting
"""

from .config import DictionaryServiceConfig, validate_config
from .dictionary_entry import DefinitionEntry, PartOfSpeechEntry, WordEntry
from .google_dictionary_parser import extract_word_entry, parse_html
from .rate_limiter import MemoryRateLimiter
from .user_agents import UserAgentPool

__all__ = [
    'DictionaryServiceConfig',
    'validate_config',
    'DefinitionEntry',
    'PartOfSpeechEntry',
    'WordEntry',
    'extract_word_entry',
    'parse_html',
    'MemoryRateLimiter',
    'UserAgentPool'
]
