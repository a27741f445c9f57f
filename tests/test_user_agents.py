"""Tests for the user-agent pool."""

import random

import requests

from core import user_agents as user_agents_module
from core.user_agents import UserAgentPool


class FakeResponse:
    def __init__(self, payload, status_code=200):
        self.payload = payload
        self.status_code = status_code

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"HTTP {self.status_code}")

    def json(self):
        if isinstance(self.payload, Exception):
            raise self.payload
        return self.payload


def _patch_get(monkeypatch, response):
    calls = []

    def fake_get(url, timeout=None):
        calls.append(url)
        if isinstance(response, Exception):
            raise response
        return response

    monkeypatch.setattr(user_agents_module.requests, "get", fake_get)
    return calls


def test_load_happens_once(monkeypatch):
    calls = _patch_get(monkeypatch, FakeResponse(["Agent/1", " Agent/2 ", "", 7]))
    pool = UserAgentPool(source_url="https://example.com/agents.json")

    assert pool.load() == 2
    assert pool.load() == 2
    assert calls == ["https://example.com/agents.json"]
    assert pool.agents == ["Agent/1", "Agent/2"]
    assert pool.loaded


def test_choose_picks_from_pool(monkeypatch):
    _patch_get(monkeypatch, FakeResponse(["Agent/1", "Agent/2"]))
    pool = UserAgentPool(source_url="https://example.com/agents.json", rng=random.Random(3))
    pool.load()

    assert {pool.choose() for _ in range(20)} <= {"Agent/1", "Agent/2"}


def test_choose_defaults_when_empty():
    pool = UserAgentPool(default_agent="Fallback/1.0")

    assert len(pool) == 0
    assert pool.choose() == "Fallback/1.0"


def test_network_failure_leaves_pool_empty(monkeypatch):
    _patch_get(monkeypatch, requests.ConnectionError("offline"))
    pool = UserAgentPool(source_url="https://example.com/agents.json", default_agent="Fallback/1.0")

    assert pool.load() == 0
    assert pool.choose() == "Fallback/1.0"


def test_bad_payload_is_ignored(monkeypatch):
    _patch_get(monkeypatch, FakeResponse({"not": "a list"}))
    pool = UserAgentPool(source_url="https://example.com/agents.json")

    assert pool.load() == 0


def test_invalid_json_is_ignored(monkeypatch):
    _patch_get(monkeypatch, FakeResponse(ValueError("bad json")))
    pool = UserAgentPool(source_url="https://example.com/agents.json")

    assert pool.load() == 0


def test_http_error_is_ignored(monkeypatch):
    _patch_get(monkeypatch, FakeResponse([], status_code=503))
    pool = UserAgentPool(source_url="https://example.com/agents.json")

    assert pool.load() == 0
