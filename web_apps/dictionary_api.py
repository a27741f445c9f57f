#!/usr/bin/env python3
"""
FastAPI Dictionary Web Service
Looks up English words on Google's dictionary panel and serves them as JSON
"""

import logging
import re
import sys
import os
from contextlib import asynccontextmanager
from typing import Awaitable, Callable, Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse, PlainTextResponse
from starlette.concurrency import run_in_threadpool

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from core.config import config
from core.rate_limiter import MemoryRateLimiter
from core.user_agents import UserAgentPool
from harvesters.google_dictionary_fetcher import GoogleDictionaryFetcher, LookupOutcome

logger = logging.getLogger(__name__)

WORD_PATTERN = re.compile(r"^[a-zA-Z\s-]+$")

LookupFunction = Callable[[str], Awaitable[LookupOutcome]]


def is_valid_word(word: str) -> bool:
    """Only letters, whitespace and hyphens are accepted"""
    return bool(WORD_PATTERN.match(word))


def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse({"message": message}, status_code=status_code)


def create_app(
    user_agents: Optional[UserAgentPool] = None,
    lookup: Optional[LookupFunction] = None,
    rate_limiter: Optional[MemoryRateLimiter] = None,
) -> FastAPI:
    """
    Build the web service.

    Args:
        user_agents: pool loaded once at startup and shared with the fetcher
        lookup: coroutine resolving a word to a LookupOutcome (defaults to Google)
        rate_limiter: per-client limiter applied to every request
    """
    if user_agents is None:
        user_agents = UserAgentPool()
    if rate_limiter is None:
        rate_limiter = MemoryRateLimiter()

    async def google_lookup(word: str) -> LookupOutcome:
        async with GoogleDictionaryFetcher(user_agents) as fetcher:
            return await fetcher.lookup(word)

    lookup_word = lookup if lookup is not None else google_lookup

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        count = await run_in_threadpool(user_agents.load)
        if not count:
            logger.warning("User-agent list empty, falling back to the default agent")
        yield

    app = FastAPI(title="Dictionary API", description="English word definitions from Google", lifespan=lifespan)
    app.state.user_agents = user_agents
    app.state.rate_limiter = rate_limiter

    @app.middleware("http")
    async def limit_requests(request: Request, call_next):
        identifier = request.client.host if request.client else "unknown"
        if not rate_limiter.allow(identifier):
            logger.warning(f"Rate limit exceeded for {identifier}")
            return error_response(429, "rate limit exceeded")
        return await call_next(request)

    @app.get("/word/{word}")
    async def get_word(word: str):
        """Dictionary entry for a single word"""
        word = word.lower()
        if not is_valid_word(word):
            return error_response(422, "Please provide word containing letters only.")

        outcome = await lookup_word(word)

        if outcome.rate_limited:
            return error_response(429, "Too many request.")

        if not outcome.entry.found:
            return error_response(404, "No Definition found.")

        return outcome.entry.to_dict()

    @app.get("/random")
    async def get_random_user_agent():
        """Random user agent from the loaded pool"""
        return user_agents.choose()

    @app.get("/ping", response_class=PlainTextResponse)
    async def ping():
        return "hello there"

    return app


app = create_app()

if __name__ == "__main__":
    import uvicorn
    logging.basicConfig(**config.get_logging_config())
    uvicorn.run(app, host=config.get_host(), port=config.get_port())
