#!/usr/bin/env python3
"""
Centralized Configuration Management for the Dictionary Service
Manages server, upstream page and rate-limit settings with env-var overrides
"""

import logging
import os
from typing import Dict, Optional

logger = logging.getLogger(__name__)


class DictionaryServiceConfig:
    """Centralized configuration for the dictionary service"""

    # Server Configuration
    SERVER = {
        'host': '0.0.0.0',
        'port': 8080,
    }

    # Upstream Page Settings
    SEARCH_URL = "https://www.google.com/search?&hl=en&q=define+{word}"
    USER_AGENTS_URL = "https://jnrbsn.github.io/user-agents/user-agents.json"
    DEFAULT_USER_AGENT = (
        "Mozilla/5.0 (Windows NT 10.0; Win64; x64; rv:109.0) Gecko/20100101 Firefox/110.0"
    )
    REQUEST_TIMEOUT = 30.0
    USER_AGENTS_TIMEOUT = 10.0

    # Rate Limiting (requests per second per client, idle bucket expiry)
    RATE_LIMIT = {
        'rate': 100.0,
        'burst': 100,
        'expires_in_seconds': 180,
    }

    # Logging Configuration
    LOGGING = {
        'level': 'INFO',
        'format': '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    }

    @staticmethod
    def _env_number(name: str, default, cast):
        env = os.getenv(name)
        if env:
            try:
                return cast(env)
            except ValueError:
                logger.warning(f"Ignoring invalid value for {name}: {env!r}")
        return default

    @classmethod
    def get_host(cls) -> str:
        return os.getenv('DICT_HOST') or cls.SERVER['host']

    @classmethod
    def get_port(cls) -> int:
        return cls._env_number('DICT_PORT', cls.SERVER['port'], int)

    @classmethod
    def get_search_url(cls) -> str:
        return os.getenv('DICT_SEARCH_URL') or cls.SEARCH_URL

    @classmethod
    def get_user_agents_url(cls) -> str:
        return os.getenv('DICT_USER_AGENTS_URL') or cls.USER_AGENTS_URL

    @classmethod
    def get_request_timeout(cls) -> float:
        return cls._env_number('DICT_REQUEST_TIMEOUT', cls.REQUEST_TIMEOUT, float)

    @classmethod
    def get_rate_limit(cls) -> float:
        return cls._env_number('DICT_RATE_LIMIT', cls.RATE_LIMIT['rate'], float)

    @classmethod
    def get_rate_burst(cls) -> int:
        return cls._env_number('DICT_RATE_BURST', cls.RATE_LIMIT['burst'], int)

    @classmethod
    def get_log_level(cls) -> str:
        return (os.getenv('DICT_LOG_LEVEL') or cls.LOGGING['level']).upper()

    @classmethod
    def get_logging_config(cls, level: Optional[str] = None) -> Dict:
        """Keyword arguments for logging.basicConfig"""
        level_name = (level or cls.get_log_level()).upper()
        return {
            'level': getattr(logging, level_name, logging.INFO),
            'format': cls.LOGGING['format'],
        }


# Global configuration instance
config = DictionaryServiceConfig()


def validate_config():
    """Validate configuration settings"""
    errors = []

    port = config.get_port()
    if not (1 <= port <= 65535):
        errors.append(f"Server port must be between 1 and 65535: {port}")

    if '{word}' not in config.get_search_url():
        errors.append("Search URL must contain a {word} placeholder")

    if config.get_request_timeout() <= 0:
        errors.append("Request timeout must be positive")

    if config.get_rate_limit() <= 0:
        errors.append("Rate limit must be positive")

    if config.get_rate_burst() < 1:
        errors.append("Rate burst must be at least 1")

    if errors:
        raise ValueError(f"Configuration validation failed: {', '.join(errors)}")

    return True
