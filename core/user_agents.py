#!/usr/bin/env python3
"""
User-Agent Pool
Loads a current list of browser user agents once at startup and hands out a
random one per upstream request.
"""

import logging
import random
from typing import List, Optional

import requests

from .config import config

logger = logging.getLogger(__name__)


class UserAgentPool:
    """Process-wide user-agent list with an explicit load step"""

    def __init__(self, source_url: Optional[str] = None, default_agent: Optional[str] = None,
                 rng: Optional[random.Random] = None):
        self.source_url = source_url or config.get_user_agents_url()
        self.default_agent = default_agent or config.DEFAULT_USER_AGENT
        self._agents: List[str] = []
        self._loaded = False
        self._rng = rng or random.Random()

    @property
    def loaded(self) -> bool:
        return self._loaded

    @property
    def agents(self) -> List[str]:
        return list(self._agents)

    def __len__(self) -> int:
        return len(self._agents)

    def load(self, timeout: float = config.USER_AGENTS_TIMEOUT) -> int:
        """
        Download the user-agent list. Only the first call hits the network.

        Returns:
            Number of user agents available after loading
        """
        if self._loaded:
            return len(self._agents)
        self._loaded = True

        try:
            response = requests.get(self.source_url, timeout=timeout)
            response.raise_for_status()
            payload = response.json()
        except (requests.RequestException, ValueError) as e:
            logger.warning(f"Could not load user agents from {self.source_url}: {e}")
            return 0

        if not isinstance(payload, list):
            logger.warning(f"Unexpected user-agent payload type: {type(payload).__name__}")
            return 0

        self._agents = [agent.strip() for agent in payload if isinstance(agent, str) and agent.strip()]
        logger.info(f"Loaded {len(self._agents)} user agents")
        return len(self._agents)

    def choose(self) -> str:
        """Random user agent, or the default one when the pool is empty"""
        if not self._agents:
            return self.default_agent
        return self._rng.choice(self._agents)
